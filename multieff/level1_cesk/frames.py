from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from multieff.level1_cesk.terms import Term
from multieff.level1_cesk.types import Environment


@dataclass(frozen=True)
class LetFrame:
    name: str
    body: Term
    env: Environment = field(repr=False)


@dataclass(frozen=True)
class IfFrame:
    then: Term
    orelse: Term
    env: Environment = field(repr=False)


@dataclass(frozen=True)
class SeqFrame:
    second: Term
    env: Environment = field(repr=False)


@dataclass(frozen=True)
class AppFnFrame:
    """Waiting for the function position of an application."""

    args: tuple[Term, ...]
    env: Environment = field(repr=False)


@dataclass(frozen=True)
class AppArgFrame:
    """Waiting for the next argument; ``done`` holds the values so far."""

    fn: Any
    done: tuple[Any, ...]
    remaining: tuple[Term, ...]
    env: Environment = field(repr=False)


Level1Frame = LetFrame | IfFrame | SeqFrame | AppFnFrame | AppArgFrame


__all__ = [
    "AppArgFrame",
    "AppFnFrame",
    "IfFrame",
    "Level1Frame",
    "LetFrame",
    "SeqFrame",
]
