"""Plain expression terms evaluated by the level 1 machine.

Terms are immutable; the same term tree can be evaluated any number of
times, which is what makes re-running a captured continuation safe.
Effect-related terms (Perform, Handle, storage access) live in
``multieff.level2_algebraic_effects.primitives``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class Term:
    pass


@dataclass(frozen=True)
class Lit(Term):
    value: Any


@dataclass(frozen=True)
class Var(Term):
    name: str


@dataclass(frozen=True)
class Lam(Term):
    params: tuple[str, ...]
    body: Term
    name: str | None = None


@dataclass(frozen=True)
class App(Term):
    fn: Term
    args: tuple[Term, ...] = ()


@dataclass(frozen=True)
class Let(Term):
    name: str
    value: Term
    body: Term


@dataclass(frozen=True)
class LetRec(Term):
    """Bind ``name`` to a closure that can refer to itself."""

    name: str
    fn: Lam
    body: Term


@dataclass(frozen=True)
class If(Term):
    cond: Term
    then: Term
    orelse: Term


@dataclass(frozen=True)
class Seq(Term):
    first: Term
    second: Term


__all__ = [
    "App",
    "If",
    "Lam",
    "Let",
    "LetRec",
    "Lit",
    "Seq",
    "Term",
    "Var",
]
