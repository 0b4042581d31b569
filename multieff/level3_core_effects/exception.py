"""Exceptions as a non-resumptive effect.

throw(reason) is an ordinary operation whose clause never resumes: the
handler's answer replaces the value of the whole handled computation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from multieff.build import app, lam, perform, var
from multieff.level1_cesk.terms import Lam
from multieff.level2_algebraic_effects.primitives import HandlerSpec, Perform
from multieff.registry import EffectDecl, EffectRegistry

T = TypeVar("T")

EXCEPTION_EFFECT = "exception"
THROW = "throw"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclass(frozen=True)
class Err:
    reason: Any

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True


Result = Ok[T] | Err


def declare_exception(registry: EffectRegistry) -> EffectDecl:
    return registry.declare_effect(EXCEPTION_EFFECT, [(THROW, 1)])


def throw(reason: Any) -> Perform:
    return perform(THROW, reason)


def catch_handler(recover: Lam | None = None) -> HandlerSpec:
    """Handle throw without resuming.

    Without ``recover`` the result is ``Ok(value)`` or ``Err(reason)``.
    With ``recover`` (a one-parameter lambda) the body's value passes through
    unchanged and a throw evaluates to ``recover(reason)``.
    """
    if recover is None:
        return HandlerSpec.of(
            {THROW: lam("reason", "k", body=app(Err, var("reason")))},
            return_clause=lam("x", body=app(Ok, var("x"))),
            name="catch",
        )
    return HandlerSpec.of(
        {THROW: lam("reason", "k", body=app(recover, var("reason")))},
        name="catch",
    )


__all__ = [
    "EXCEPTION_EFFECT",
    "Err",
    "Ok",
    "Result",
    "THROW",
    "catch_handler",
    "declare_exception",
    "throw",
]
