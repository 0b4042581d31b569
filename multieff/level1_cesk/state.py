from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from multieff.level1_cesk.kontinuation import Kontinuation
from multieff.level1_cesk.terms import Term
from multieff.level1_cesk.types import Environment, Store


@dataclass(frozen=True)
class TermControl:
    term: Term


@dataclass(frozen=True)
class Value:
    value: Any


@dataclass(frozen=True)
class Apply:
    """A function value applied to fully evaluated arguments."""

    fn: Any
    args: tuple[Any, ...]


@dataclass(frozen=True)
class Done:
    value: Any


Control = TermControl | Value | Apply


@dataclass(frozen=True)
class CESKState:
    C: Control
    E: Environment = field(repr=False)
    S: Store = field(repr=False)
    K: Kontinuation = field(repr=False)


__all__ = [
    "Apply",
    "CESKState",
    "Control",
    "Done",
    "TermControl",
    "Value",
]
