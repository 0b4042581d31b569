"""State effect backed by frame storage.

Operations:
- get(): the current value
- put(value): replace the value, completes with None

The value lives in the storage of the handler frame, so where the handler
is installed decides who shares it. Installed outside a multi-shot handler,
one cell threads through every resumed branch in the order the branches
run. Installed inside, the cell is captured with each continuation and every
branch continues from its own copy.

Usage:
    program = handle(
        seq(put(app(prelude.add, get(), 1)), get()),
        state_handler(41),
    )
    # -> 42
"""

from __future__ import annotations

from typing import Any

from multieff.build import app, as_term, get_storage, lam, perform, resume, seq, set_storage, var
from multieff.level1_cesk.terms import Term
from multieff.level2_algebraic_effects.primitives import HandlerSpec, Perform
from multieff.prelude import add, pair
from multieff.registry import EffectDecl, EffectRegistry

STATE_EFFECT = "state"
GET = "get"
PUT = "put"


def declare_state(registry: EffectRegistry) -> EffectDecl:
    return registry.declare_effect(STATE_EFFECT, [(GET, 0), (PUT, 1)])


def get() -> Perform:
    return perform(GET)


def put(value: Any) -> Perform:
    return perform(PUT, value)


def modify(fn: Any) -> Perform:
    """put(fn(get()))"""
    return perform(PUT, app(fn, get()))


def increment() -> Term:
    return modify(lam("n", body=app(add, var("n"), 1)))


def state_handler(initial: Any, with_final: bool = False) -> HandlerSpec:
    """Create a state handler.

    Args:
        initial: Term or plain value for the starting state.
        with_final: Return ``(value, final_state)`` instead of the value.
    """
    return HandlerSpec.of(
        {
            GET: lam("k", body=resume(var("k"), get_storage())),
            PUT: lam("v", "k", body=seq(set_storage(var("v")), resume(var("k"), None))),
        },
        return_clause=lam("x", body=app(pair, var("x"), get_storage())) if with_final else None,
        storage=as_term(initial),
        name="state",
    )


__all__ = [
    "GET",
    "PUT",
    "STATE_EFFECT",
    "declare_state",
    "get",
    "increment",
    "modify",
    "put",
    "state_handler",
]
