"""
Executor - A parsed, ready-to-render Jinja2 template set.

An Executor is built from an ordered list of glob patterns. Every matched
source is read and compiled during the build, so syntax errors surface
immediately and rendering never goes back to the source provider.
"""

from typing import Any, Dict, List, Sequence, TextIO
import logging

from jinja2 import Environment, StrictUndefined, Template, TemplateNotFound, Undefined
from jinja2.sandbox import ImmutableSandboxedEnvironment

from .context import RenderContext, build_render_context
from .loader import TemplateSetLoader
from .sources import TemplateSource

logger = logging.getLogger("tmpls.executor")


class Executor:
    """
    Immutable compiled template set.

    Safe to share between threads: the environment is frozen after the
    build (no auto-reload, unbounded template cache fully populated).

    Args:
        loader: Loader holding the template set
        autoescape: Enable HTML autoescaping
        strict_undefined: Raise on references the data does not satisfy
        sandbox: Render through Jinja2's immutable sandbox
    """

    def __init__(
        self,
        loader: TemplateSetLoader,
        *,
        autoescape: bool = True,
        strict_undefined: bool = True,
        sandbox: bool = False,
    ):
        environment_class = ImmutableSandboxedEnvironment if sandbox else Environment
        self.env = environment_class(
            loader=loader,
            autoescape=autoescape,
            undefined=StrictUndefined if strict_undefined else Undefined,
            cache_size=-1,
            auto_reload=False,
        )
        self.env.context_class = RenderContext

        # Compile everything now; parse errors belong to the build
        self._templates: Dict[str, Template] = {
            name: self.env.get_template(name)
            for name in loader.list_templates()
        }

    @classmethod
    def build(
        cls,
        source: TemplateSource,
        patterns: Sequence[str],
        **options: Any,
    ) -> "Executor":
        """
        Read and compile the sources selected by ``patterns``.

        Patterns are applied in order; later sources override earlier ones.

        Raises:
            TemplateSourceNotFoundFault: If a pattern matches nothing
            OSError: If the provider fails to read a source
            TemplateSyntaxError: If a source does not parse
        """
        loader = TemplateSetLoader.from_patterns(source, patterns)
        executor = cls(loader, **options)
        logger.debug(
            "Built executor for %s (%d templates)",
            list(patterns),
            len(executor.names),
        )
        return executor

    @property
    def names(self) -> List[str]:
        """Names of the templates in the set."""
        return sorted(self._templates)

    def execute(self, sink: TextIO, name: str, data: Any = None) -> None:
        """
        Render template ``name`` with ``data`` into ``sink``.

        Raises:
            TemplateNotFound: If ``name`` is not in the set
            UndefinedError: If the template references data that is missing
        """
        template = self._templates.get(name)
        if template is None:
            raise TemplateNotFound(name)

        for chunk in template.generate(build_render_context(data)):
            sink.write(chunk)
