"""
tmpls faults - Domain-specific fault types.

Provides concrete fault classes for each domain:
- CONFIG faults
- TEMPLATES faults
"""

from typing import Any, Optional
from .core import Fault, FaultDomain


# Register templates fault domain
FaultDomain.TEMPLATES = FaultDomain("templates", "Template source and build faults")


# ============================================================================
# CONFIG Faults
# ============================================================================

class ConfigFault(Fault):
    """Base class for configuration faults."""

    def __init__(
        self,
        code: str,
        message: str,
        *,
        metadata: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            code=code,
            message=message,
            domain=FaultDomain.CONFIG,
            metadata=metadata,
        )


class ConfigMissingFault(ConfigFault):
    """Required configuration is missing."""

    def __init__(self, key: str, **kwargs):
        super().__init__(
            code="CONFIG_MISSING",
            message=f"Required configuration key '{key}' is missing",
            metadata={"key": key, **kwargs.get("metadata", {})},
        )


class ConfigInvalidFault(ConfigFault):
    """Configuration value is invalid."""

    def __init__(self, key: str, reason: str, **kwargs):
        super().__init__(
            code="CONFIG_INVALID",
            message=f"Configuration key '{key}' is invalid: {reason}",
            metadata={"key": key, "reason": reason, **kwargs.get("metadata", {})},
        )


# ============================================================================
# TEMPLATES Faults
# ============================================================================

class TemplatesFault(Fault):
    """Base class for template source faults."""

    def __init__(
        self,
        code: str,
        message: str,
        *,
        metadata: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            code=code,
            message=message,
            domain=FaultDomain.TEMPLATES,
            metadata=metadata,
        )


class TemplateSourceNotFoundFault(TemplatesFault):
    """Glob pattern matched no template sources."""

    def __init__(self, pattern: str, source: str = "", **kwargs):
        super().__init__(
            code="TEMPLATE_SOURCE_NOT_FOUND",
            message=f"Pattern '{pattern}' matches no template sources"
            + (f" in {source}" if source else ""),
            metadata={"pattern": pattern, "source": source, **kwargs.get("metadata", {})},
        )
