"""
Template Sources - Readable template trees selected by glob patterns.

Supports:
- Live filesystem directories (picked up on every read, for hot reload)
- Package-embedded templates via importlib.resources
- In-memory mappings for tests and generated templates

Names are always slash-separated and relative to the root of the tree.
Glob matching works segment by segment, so ``*`` never crosses a ``/``:
``common/*.html`` matches ``common/base.html`` but not ``base.html`` or
``common/partials/nav.html``.
"""

from abc import ABC, abstractmethod
from importlib import resources
from pathlib import Path
from typing import Dict, Iterator, List, Mapping, Tuple, Union
import fnmatch
import os

from .faults import TemplateSourceNotFoundFault


def match_glob(pattern: str, name: str) -> bool:
    """
    Check whether a slash-separated name matches a glob pattern.

    Each ``/``-separated segment of the pattern is matched against the
    corresponding segment of the name with ``fnmatch`` rules (``*``, ``?``,
    ``[seq]``). Pattern and name must have the same number of segments.

    Backslash is an ordinary character, not an escape. To match a literal
    metacharacter, wrap it in a class: ``[*]``, ``[?]`` or ``[[]``.
    """
    pattern_parts = pattern.split("/")
    name_parts = name.split("/")
    if len(pattern_parts) != len(name_parts):
        return False
    return all(
        fnmatch.fnmatchcase(part, segment)
        for segment, part in zip(pattern_parts, name_parts)
    )


class TemplateSource(ABC):
    """
    Abstract template tree.

    Subclasses list the names they hold and read individual sources;
    pattern selection is shared.
    """

    @abstractmethod
    def list_names(self) -> List[str]:
        """List every template name in the tree."""

    @abstractmethod
    def read(self, name: str) -> bytes:
        """
        Read one template source.

        Raises:
            OSError: If the source cannot be read
        """

    def glob(self, pattern: str) -> List[str]:
        """
        Select template names matching ``pattern``.

        Returns:
            Sorted list of matching names (possibly empty)
        """
        return sorted(
            name for name in self.list_names()
            if match_glob(pattern, name)
        )

    def read_glob(self, pattern: str) -> List[Tuple[str, bytes]]:
        """
        Read every source matching ``pattern``.

        Returns:
            List of (name, source bytes) pairs in name order

        Raises:
            TemplateSourceNotFoundFault: If the pattern matches nothing
            OSError: If a matched source cannot be read
        """
        names = self.glob(pattern)
        if not names:
            raise TemplateSourceNotFoundFault(pattern, source=repr(self))
        return [(name, self.read(name)) for name in names]


class DirectorySource(TemplateSource):
    """
    Template tree backed by a filesystem directory.

    Every call walks and reads the directory again, so edits are visible
    without restarting when caching is disabled.

    Args:
        root: Directory holding the templates
    """

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root)

    def list_names(self) -> List[str]:
        if not self.root.is_dir():
            return []

        names = []
        for dirpath, dirs, files in os.walk(self.root):
            dir_path = Path(dirpath)
            for filename in files:
                relative = (dir_path / filename).relative_to(self.root)
                names.append(relative.as_posix())
        return names

    def read(self, name: str) -> bytes:
        return (self.root / name).read_bytes()

    def __repr__(self) -> str:
        return f"DirectorySource({str(self.root)!r})"


class PackageSource(TemplateSource):
    """
    Template tree shipped as package data.

    Resolved through ``importlib.resources`` so it works from wheels and
    zip imports alike.

    Args:
        package: Importable package name (e.g. "myapp")
        path: Directory inside the package holding the templates
    """

    def __init__(self, package: str, path: str = "templates"):
        self.package = package
        self.path = path.strip("/")

    def _root(self):
        root = resources.files(self.package)
        for part in self.path.split("/"):
            if part:
                root = root / part
        return root

    def list_names(self) -> List[str]:
        root = self._root()
        if not root.is_dir():
            return []
        return list(self._walk(root, ""))

    def _walk(self, node, prefix: str) -> Iterator[str]:
        for child in node.iterdir():
            name = f"{prefix}{child.name}"
            if child.is_dir():
                yield from self._walk(child, f"{name}/")
            elif child.is_file():
                yield name

    def read(self, name: str) -> bytes:
        node = self._root()
        for part in name.split("/"):
            node = node / part
        return node.read_bytes()

    def __repr__(self) -> str:
        return f"PackageSource({self.package!r}, {self.path!r})"


class MemorySource(TemplateSource):
    """
    Template tree held in memory.

    Args:
        files: Mapping of slash-separated names to template sources
    """

    def __init__(self, files: Mapping[str, Union[str, bytes]]):
        self._files: Dict[str, bytes] = {
            name: content.encode("utf-8") if isinstance(content, str) else bytes(content)
            for name, content in files.items()
        }

    def list_names(self) -> List[str]:
        return list(self._files)

    def read(self, name: str) -> bytes:
        try:
            return self._files[name]
        except KeyError:
            raise FileNotFoundError(name) from None

    def __repr__(self) -> str:
        return f"MemorySource({len(self._files)} files)"
