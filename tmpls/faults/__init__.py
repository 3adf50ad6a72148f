"""
tmpls faults - Typed fault signals.

Faults are exceptions that carry a stable code and a domain, so callers
can branch on them without parsing messages.

Core exports:
- Fault: Base fault class
- FaultDomain: Domain registry
"""

from .core import (
    Fault,
    FaultDomain,
)

from .domains import (
    ConfigFault,
    ConfigMissingFault,
    ConfigInvalidFault,
    TemplatesFault,
    TemplateSourceNotFoundFault,
)

__all__ = [
    # Core types
    "Fault",
    "FaultDomain",

    # Config
    "ConfigFault",
    "ConfigMissingFault",
    "ConfigInvalidFault",

    # Templates
    "TemplatesFault",
    "TemplateSourceNotFoundFault",
]
