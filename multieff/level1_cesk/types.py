"""Environment, store and closure values for the CESK machine.

- Environment: immutable mapping (copy-on-extend), shared freely by frames
- Store: per-evaluation mutable dict for runtime bookkeeping
- Closure: a lambda paired with the environment it was created in
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeAlias

from frozendict import frozendict

if TYPE_CHECKING:
    from multieff.level1_cesk.terms import Term

Environment: TypeAlias = frozendict
Store: TypeAlias = dict[str, Any]

EMPTY_ENV: Environment = frozendict()


def make_env(bindings: Mapping[str, Any] | None = None) -> Environment:
    if not bindings:
        return EMPTY_ENV
    return frozendict(bindings)


def extend_env(env: Environment, names: tuple[str, ...], values: tuple[Any, ...]) -> Environment:
    if not names:
        return env
    return frozendict({**env, **dict(zip(names, values))})


@dataclass(frozen=True, eq=False)
class Closure:
    params: tuple[str, ...]
    body: Term
    env: Environment = field(repr=False)
    name: str | None = None

    @property
    def arity(self) -> int:
        return len(self.params)


__all__ = [
    "Closure",
    "EMPTY_ENV",
    "Environment",
    "Store",
    "extend_env",
    "make_env",
]
