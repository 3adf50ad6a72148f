"""
tmpls - Cached Jinja2 template rendering.

Parse once, cache by glob, render into pooled buffers:
- Lazily populated, thread-safe executor cache
- Common templates merged into every parse and overridable per page
- Hot reload by disabling the cache in development
- Directory, package and in-memory template sources

Example:
    from tmpls import DirectorySource, Templates, TemplatesConfig

    templates = Templates(
        TemplatesConfig(
            source=DirectorySource("templates"),
            common_glob="common/*.html.tmpl",
        )
    )

    html = templates.execute("test.html.tmpl", "test.html.tmpl", {"Text": "world"})
"""

__version__ = "1.0.0"

from .templates import Templates
from .config import TemplatesConfig
from .sources import (
    TemplateSource,
    DirectorySource,
    PackageSource,
    MemorySource,
    match_glob,
)
from .executor import Executor
from .cache import ExecutorCache
from .pool import BufferPool
from .loader import TemplateSetLoader
from .context import build_render_context
from .faults import (
    Fault,
    ConfigMissingFault,
    ConfigInvalidFault,
    TemplateSourceNotFoundFault,
)

__all__ = [
    # Core
    "Templates",
    "TemplatesConfig",

    # Sources
    "TemplateSource",
    "DirectorySource",
    "PackageSource",
    "MemorySource",
    "match_glob",

    # Engine
    "Executor",
    "ExecutorCache",
    "BufferPool",
    "TemplateSetLoader",
    "build_render_context",

    # Faults
    "Fault",
    "ConfigMissingFault",
    "ConfigInvalidFault",
    "TemplateSourceNotFoundFault",
]
