"""Reader effect: ask() resumes once with the value given to the handler."""

from __future__ import annotations

from typing import Any

from multieff.build import as_term, get_storage, lam, perform, resume, var
from multieff.level2_algebraic_effects.primitives import HandlerSpec, Perform
from multieff.registry import EffectDecl, EffectRegistry

READER_EFFECT = "reader"
ASK = "ask"


def declare_reader(registry: EffectRegistry) -> EffectDecl:
    return registry.declare_effect(READER_EFFECT, [(ASK, 0)])


def ask() -> Perform:
    return perform(ASK)


def reader_handler(value: Any) -> HandlerSpec:
    return HandlerSpec.of(
        {ASK: lam("k", body=resume(var("k"), get_storage()))},
        storage=as_term(value),
        name="reader",
    )


__all__ = [
    "ASK",
    "READER_EFFECT",
    "ask",
    "declare_reader",
    "reader_handler",
]
