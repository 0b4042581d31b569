"""Shared fixtures for the multieff test suite."""

from __future__ import annotations

from typing import Any

import pytest

from multieff.build import app, if_, let, letrec, lit, seq, var
from multieff.level1_cesk.kontinuation import EMPTY_K
from multieff.level1_cesk.terms import Term
from multieff.level1_cesk.types import EMPTY_ENV
from multieff.level2_algebraic_effects.state import make_store
from multieff.level3_core_effects import choose, declare_core_effects, increment
from multieff.prelude import cons, eq, keep_le, sub
from multieff.registry import EffectRegistry
from multieff.runtime import Runtime


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MULTIEFF_DEBUG", raising=False)
    monkeypatch.delenv("MULTIEFF_MAX_STEPS", raising=False)


@pytest.fixture
def registry() -> EffectRegistry:
    return declare_core_effects(EffectRegistry())


@pytest.fixture
def runtime(registry: EffectRegistry) -> Runtime:
    return Runtime(registry=registry)


@pytest.fixture
def empty_env():
    return EMPTY_ENV


@pytest.fixture
def empty_store(registry: EffectRegistry) -> dict[str, Any]:
    return make_store(registry)


@pytest.fixture
def empty_k():
    return EMPTY_K


def change_program(budget: int, weights: list[int], counted: bool = False) -> Term:
    """All ways to spend ``budget`` using ``weights``, one choice per step.

    With ``counted`` every choice is preceded by incrementing the state.
    """
    step: Term = let(
        "w",
        choose(app(keep_le, lit(weights), var("b"))),
        app(cons, var("w"), app(var("change"), app(sub, var("b"), var("w")))),
    )
    if counted:
        step = seq(increment(), step)
    return letrec(
        "change",
        ["b"],
        if_(app(eq, var("b"), 0), lit([]), step),
        app(var("change"), budget),
    )


@pytest.fixture
def make_change():
    return change_program
