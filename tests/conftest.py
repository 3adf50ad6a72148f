"""
Shared fixtures for the tmpls test suite.
"""

import shutil
import tempfile
from pathlib import Path

import pytest


COMMON_TEMPLATE = "hello {% block content %}{% endblock %}"
TEST_TEMPLATE = '{% extends "common.html.tmpl" %}{% block content %}{{ Text }}{% endblock %}'
OTHER_TEMPLATE = '{% extends "common.html.tmpl" %}{% block content %}{{ Text }}!!!{% endblock %}'


def _write_tree(root: Path, files: dict) -> None:
    for name, content in files.items():
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)


@pytest.fixture
def template_files():
    """The canonical template tree used across tests."""
    return {
        "common/common.html.tmpl": COMMON_TEMPLATE,
        "test.html.tmpl": TEST_TEMPLATE,
        "other.html.tmpl": OTHER_TEMPLATE,
    }


@pytest.fixture
def write_tree():
    """Write a {name: content} mapping below a directory."""
    return _write_tree


@pytest.fixture
def templates_dir(template_files):
    """Create temporary templates directory."""
    temp_dir = tempfile.mkdtemp()
    templates_path = Path(temp_dir) / "templates"
    templates_path.mkdir()

    _write_tree(templates_path, template_files)

    yield templates_path

    shutil.rmtree(temp_dir)
