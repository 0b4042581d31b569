from __future__ import annotations

from typing import Any

from multieff.level1_cesk.types import Closure
from multieff.level2_algebraic_effects.continuation import Continuation


def render(value: Any) -> str:
    """Human-readable text for a result value."""
    if value is None:
        return "()"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return repr(value)
    if isinstance(value, list):
        return "[" + ", ".join(render(item) for item in value) + "]"
    if isinstance(value, tuple):
        return "(" + ", ".join(render(item) for item in value) + ")"
    if isinstance(value, dict):
        return "{" + ", ".join(f"{render(k)}: {render(v)}" for k, v in value.items()) + "}"
    if isinstance(value, Closure):
        return f"<fn {value.name or 'lambda'}/{value.arity}>"
    if isinstance(value, Continuation):
        return f"<continuation k{value.cont_id} {value.operation} -> frame {value.target_frame_id}>"
    if callable(value):
        return f"<host {getattr(value, '__name__', type(value).__name__)}>"
    return str(value)


__all__ = ["render"]
