"""
Templates - Cached, thread-safe rendering facade.

Parses the template set selected by a glob once, keeps the compiled result
keyed by that glob, and renders named templates into pooled buffers.

Example:
    from tmpls import DirectorySource, Templates, TemplatesConfig

    templates = Templates(
        TemplatesConfig(
            source=DirectorySource("templates"),
            common_glob="common/*.html.tmpl",
        )
    )

    html = templates.execute("users/profile.html.tmpl", "profile.html.tmpl", {"user": user})
"""

from typing import Any, List, Optional
import logging

from .cache import ExecutorCache
from .config import TemplatesConfig
from .executor import Executor
from .faults import ConfigInvalidFault, ConfigMissingFault
from .pool import BufferPool


class Templates:
    """
    Template rendering facade.

    With caching enabled, each glob is parsed on first use and the compiled
    set is reused for every later call. With caching disabled, every call
    re-reads and re-parses its sources, so template edits show up without a
    restart.

    Args:
        config: Templates configuration (``source`` is required)
        logger: Logger for diagnostics (default: ``tmpls``)

    Raises:
        ConfigMissingFault: If ``config.source`` is None
        ConfigInvalidFault: If ``config`` is not a TemplatesConfig
    """

    def __init__(
        self,
        config: TemplatesConfig,
        logger: Optional[logging.Logger] = None,
    ):
        if not isinstance(config, TemplatesConfig):
            raise ConfigInvalidFault(
                "config",
                f"expected TemplatesConfig, got {type(config).__name__}",
            )
        if config.source is None:
            raise ConfigMissingFault("source")

        self._config = config
        self._logger = logger or logging.getLogger("tmpls")
        self._buffers = BufferPool()
        self._executors: Optional[ExecutorCache] = None

        if config.disable_cache:
            self._logger.warning(
                "Template caching is disabled, templates will be parsed on every call",
                extra={"source": repr(config.source), "common_glob": config.common_glob},
            )
        else:
            self._executors = ExecutorCache()

    @property
    def config(self) -> TemplatesConfig:
        return self._config

    def execute(self, glob: str, template_name: str, data: Any = None) -> str:
        """
        Render ``template_name`` from the set selected by ``glob``.

        Args:
            glob: Pattern selecting template sources
            template_name: Template to render (a source basename)
            data: Mapping or object exposed to the template

        Returns:
            Rendered text

        Raises:
            TemplateSourceNotFoundFault: If a pattern matches no sources
            OSError: If the source provider fails
            TemplateSyntaxError: If a source does not parse
            TemplateNotFound: If ``template_name`` is not in the set
            UndefinedError: If the data does not satisfy the template
        """
        with self._buffers.borrow() as buffer:
            self._executor(glob).execute(buffer, template_name, data)
            return buffer.getvalue()

    def precompile(self, *globs: str) -> None:
        """
        Build executors ahead of the first request.

        With caching enabled the results are stored; otherwise each glob is
        only validated.

        Raises:
            Same build errors as ``execute``
        """
        for glob in globs:
            self._executor(glob)

    def cached_globs(self) -> List[str]:
        """Globs currently held in the cache."""
        if self._executors is None:
            return []
        return self._executors.keys()

    def _executor(self, glob: str) -> Executor:
        if self._executors is None:
            return self._build(glob)
        return self._executors.get_or_build(glob, self._build)

    def _build(self, glob: str) -> Executor:
        return Executor.build(
            self._config.source,
            self._config.patterns(glob),
            **self._config.executor_options(),
        )
