"""
Config - Typed, immutable configuration for the Templates facade.

Configuration is a frozen dataclass built once at startup, either directly
or from environment variables (with an optional ``.env`` file):

    TMPLS_DIR=./templates
    TMPLS_COMMON_GLOB=common/*.html
    TMPLS_DISABLE_CACHE=true
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union
import os

from dotenv import dotenv_values

from .faults import ConfigInvalidFault
from .sources import DirectorySource, PackageSource, TemplateSource


_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class TemplatesConfig:
    """
    Templates configuration.

    Attributes:
        source: Template tree to read from (required)
        disable_cache: Parse templates on every call (hot reload)
        common_glob: Pattern merged into every parse, ahead of the
            requested glob so its templates can be overridden
        autoescape: Enable HTML autoescaping
        strict_undefined: Fail rendering on data the template cannot resolve
        sandbox: Render through Jinja2's immutable sandbox
    """

    source: Optional[TemplateSource] = None
    disable_cache: bool = False
    common_glob: Optional[str] = None
    autoescape: bool = True
    strict_undefined: bool = True
    sandbox: bool = False

    def patterns(self, glob: str) -> List[str]:
        """Ordered patterns to parse for ``glob``: common first."""
        if self.common_glob:
            return [self.common_glob, glob]
        return [glob]

    def executor_options(self) -> Dict[str, Any]:
        return {
            "autoescape": self.autoescape,
            "strict_undefined": self.strict_undefined,
            "sandbox": self.sandbox,
        }

    @classmethod
    def from_env(
        cls,
        prefix: str = "TMPLS_",
        env_file: Optional[Union[str, Path]] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "TemplatesConfig":
        """
        Build configuration from environment variables.

        Merge order (later overrides earlier):
        1. ``.env`` file (if given and present)
        2. Process environment (or ``environ``)

        Recognised keys (after ``prefix``): DIR, PACKAGE, PACKAGE_PATH,
        DISABLE_CACHE, COMMON_GLOB, AUTOESCAPE, STRICT_UNDEFINED, SANDBOX.

        Args:
            prefix: Environment variable prefix
            env_file: Path to a .env file
            environ: Mapping to read instead of ``os.environ``

        Returns:
            TemplatesConfig (``source`` stays None when neither DIR nor
            PACKAGE is set)

        Raises:
            ConfigInvalidFault: If a boolean value cannot be parsed
        """
        values: Dict[str, str] = {}

        if env_file and Path(env_file).exists():
            for key, value in dotenv_values(env_file).items():
                if value is not None:
                    values[key] = value

        values.update(os.environ if environ is None else environ)

        settings = {
            key[len(prefix):]: value
            for key, value in values.items()
            if key.startswith(prefix)
        }

        source: Optional[TemplateSource] = None
        if settings.get("DIR"):
            source = DirectorySource(settings["DIR"])
        elif settings.get("PACKAGE"):
            source = PackageSource(
                settings["PACKAGE"],
                settings.get("PACKAGE_PATH") or "templates",
            )

        defaults = cls()
        return cls(
            source=source,
            disable_cache=_parse_bool(prefix + "DISABLE_CACHE", settings.get("DISABLE_CACHE"), defaults.disable_cache),
            common_glob=settings.get("COMMON_GLOB") or None,
            autoescape=_parse_bool(prefix + "AUTOESCAPE", settings.get("AUTOESCAPE"), defaults.autoescape),
            strict_undefined=_parse_bool(
                prefix + "STRICT_UNDEFINED", settings.get("STRICT_UNDEFINED"), defaults.strict_undefined
            ),
            sandbox=_parse_bool(prefix + "SANDBOX", settings.get("SANDBOX"), defaults.sandbox),
        )


def _parse_bool(key: str, value: Optional[str], default: bool) -> bool:
    """Parse string value to bool."""
    if value is None or value.strip() == "":
        return default

    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ConfigInvalidFault(key, f"expected a boolean, got {value!r}")
