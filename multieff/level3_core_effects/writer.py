"""Writer effect.

tell(message) appends to a log kept in frame storage and completes with
None. The handler returns ``(value, messages)``. Like state, the log is
shared by all branches when the handler sits outside a multi-shot handler
and forked per branch when it sits inside.
"""

from __future__ import annotations

from typing import Any

from multieff.build import app, get_storage, lam, lit, perform, resume, seq, set_storage, var
from multieff.level2_algebraic_effects.primitives import HandlerSpec, Perform
from multieff.prelude import append, pair
from multieff.registry import EffectDecl, EffectRegistry

WRITER_EFFECT = "writer"
TELL = "tell"


def declare_writer(registry: EffectRegistry) -> EffectDecl:
    return registry.declare_effect(WRITER_EFFECT, [(TELL, 1)])


def tell(message: Any) -> Perform:
    return perform(TELL, message)


def writer_handler() -> HandlerSpec:
    return HandlerSpec.of(
        {
            TELL: lam(
                "message",
                "k",
                body=seq(
                    set_storage(app(append, get_storage(), var("message"))),
                    resume(var("k"), None),
                ),
            )
        },
        return_clause=lam("x", body=app(pair, var("x"), get_storage())),
        storage=lit([]),
        name="writer",
    )


__all__ = [
    "TELL",
    "WRITER_EFFECT",
    "declare_writer",
    "tell",
    "writer_handler",
]
