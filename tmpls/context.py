"""
Render Context - Exposes caller data to Jinja2 templates.

Templates reference top-level names (``{{ Text }}``). Names are resolved
only when a template looks them up:

1. mapping keys (for mapping data)
2. public attributes of the value, methods included (for any other data)
3. ``data``: the value itself, so lists can be looped over and scalars
   printed (``{% for x in data %}``)

Properties the template never references are never evaluated.
"""

from typing import Any, Dict, Mapping

from jinja2.runtime import Context
from jinja2.sandbox import SandboxedEnvironment
from jinja2.utils import missing

# Name the whole value is reachable under
DATA_NAME = "data"

# Context key carrying the value through derived contexts (blocks, includes)
_VALUE_KEY = "__tmpls_value__"


def build_render_context(data: Any = None) -> Dict[str, Any]:
    """
    Create the render variables for ``data``.

    Mapping keys are copied; everything else is resolved lazily by
    RenderContext.

    Args:
        data: Mapping, object, or None

    Returns:
        Dictionary passed to ``Template.generate``
    """
    if data is None:
        return {}

    context = dict(data) if isinstance(data, Mapping) else {}
    context[_VALUE_KEY] = data
    return context


class RenderContext(Context):
    """
    Jinja2 context that falls back to the render value on lookup misses.
    """

    def resolve_or_missing(self, key: str) -> Any:
        value = super().resolve_or_missing(key)
        if value is not missing or key.startswith("_"):
            return value

        data = self.parent.get(_VALUE_KEY, missing)
        if data is missing:
            return missing

        if not isinstance(data, Mapping):
            try:
                value = getattr(data, key)
            except AttributeError:
                pass
            else:
                environment = self.environment
                if isinstance(environment, SandboxedEnvironment) and not environment.is_safe_attribute(
                    data, key, value
                ):
                    return environment.unsafe_undefined(data, key)
                return value

        if key == DATA_NAME:
            return data
        return missing
