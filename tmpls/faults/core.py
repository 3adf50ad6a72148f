"""
tmpls faults - Core types and fault taxonomy.

Defines:
- Fault base class (structured fault objects)
- FaultDomain (explicit fault domains)
"""

from __future__ import annotations

from typing import Any, Optional


# ============================================================================
# Domain
# ============================================================================

class FaultDomain:
    """
    Fault domains (taxonomy).

    Identifies the functional area where a fault occurred.
    Subsystems may register their own domains as class attributes.
    """

    def __init__(self, name: str, description: str = ""):
        self.name = name
        self.value = name
        self.description = description

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"FaultDomain(name='{self.name}')"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, FaultDomain):
            return self.name == other.name
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(self.name)


# Standard Domains
FaultDomain.CONFIG = FaultDomain("config", "Configuration errors")


# ============================================================================
# Fault - Base Class
# ============================================================================

class Fault(Exception):
    """
    Base fault class - structured, typed fault object.

    A fault is a regular exception that also carries a stable
    machine-readable code and a domain classification, so callers can
    branch on ``code`` without parsing messages.

    Attributes:
        code: Stable machine-readable identifier (e.g., "CONFIG_MISSING")
        message: Human-readable summary
        domain: Fault domain (CONFIG, TEMPLATES, ...)
        metadata: Additional context data

    Example:
        ```python
        raise Fault(
            code="TEMPLATE_SOURCE_NOT_FOUND",
            message="Pattern 'pages/*.html' matches no template sources",
            domain=FaultDomain.TEMPLATES,
        )
        ```
    """

    def __init__(
        self,
        code: Optional[str] = None,
        message: Optional[str] = None,
        *,
        domain: Optional[FaultDomain] = None,
        metadata: Optional[dict[str, Any]] = None,
    ):
        # Fallback to class attributes if not provided
        self.code = code if code is not None else getattr(self, "code", None)
        self.message = message if message is not None else getattr(self, "message", None)
        self.domain = domain if domain is not None else getattr(self, "domain", None)

        if self.code is None or self.message is None or self.domain is None:
            raise TypeError(f"{self.__class__.__name__} missing required code, message, or domain")

        super().__init__(self.message)
        self.metadata = metadata or {}

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, domain={self.domain.value})"
