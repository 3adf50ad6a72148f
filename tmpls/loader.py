"""
Template Set Loader - Jinja2 loader over an ordered, in-memory template set.

Template sources are read once, up front, from a TemplateSource. Each source
is registered under its file basename, so ``common/common.html.tmpl`` is
referenced from other templates as ``common.html.tmpl``. When two sources
share a basename the one registered later wins, which lets page templates
override shared ones.
"""

from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple
import posixpath

from jinja2 import BaseLoader, TemplateNotFound

from .sources import TemplateSource


class TemplateSetLoader(BaseLoader):
    """
    Immutable loader for one parsed template set.

    Args:
        sources: Ordered (name, source bytes) pairs; later entries override
            earlier ones with the same basename
    """

    def __init__(self, sources: Sequence[Tuple[str, bytes]]):
        self._templates: Dict[str, Tuple[str, str]] = {}
        for origin, raw in sources:
            self._templates[posixpath.basename(origin)] = (raw.decode("utf-8"), origin)

    @classmethod
    def from_patterns(
        cls,
        source: TemplateSource,
        patterns: Sequence[str],
    ) -> "TemplateSetLoader":
        """
        Read every pattern from ``source`` in order.

        Raises:
            TemplateSourceNotFoundFault: If any pattern matches nothing
            OSError: If the provider fails to read a source
        """
        entries: List[Tuple[str, bytes]] = []
        for pattern in patterns:
            entries.extend(source.read_glob(pattern))
        return cls(entries)

    def get_source(
        self,
        environment: Any,
        template: str
    ) -> Tuple[str, Optional[str], Optional[Callable[[], bool]]]:
        """
        Load template source.

        Returns:
            Tuple of (source, filename, uptodate_func)

        Raises:
            TemplateNotFound: If the template is not part of the set
        """
        try:
            source, origin = self._templates[template]
        except KeyError:
            raise TemplateNotFound(template) from None
        return source, origin, lambda: True

    def list_templates(self) -> List[str]:
        return sorted(self._templates)

    def origin(self, template: str) -> str:
        """Return the source name a template was read from."""
        try:
            return self._templates[template][1]
        except KeyError:
            raise TemplateNotFound(template) from None
