"""Effect-level terms.

- Perform: call an operation; suspends until a handler clause answers
- Handle: run a body with a handler frame installed
- HandlerSpec: return clause, operation clauses and optional frame storage
- GetStorage / SetStorage: access the storage of the active clause's frame
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from frozendict import frozendict

from multieff.level1_cesk.terms import Lam, Term


@dataclass(frozen=True)
class Perform(Term):
    operation: str
    args: tuple[Term, ...] = ()


@dataclass(frozen=True)
class HandlerSpec:
    """How a handler frame answers operations.

    Attributes:
        clauses: Operation name -> lambda taking the operation's arguments
            followed by the continuation.
        return_clause: One-parameter lambda applied to the body's value.
            None means identity.
        storage: Term evaluated once per installation to seed the frame's
            storage. None leaves the storage as None.
        name: Label used in logs and rendering.
    """

    clauses: frozendict = field(default_factory=frozendict)
    return_clause: Lam | None = None
    storage: Term | None = None
    name: str | None = None

    @classmethod
    def of(
        cls,
        clauses: Mapping[str, Lam],
        return_clause: Lam | None = None,
        storage: Term | None = None,
        name: str | None = None,
    ) -> HandlerSpec:
        return cls(
            clauses=frozendict(clauses),
            return_clause=return_clause,
            storage=storage,
            name=name,
        )

    def handles(self, operation: str) -> bool:
        return operation in self.clauses

    @property
    def label(self) -> str:
        return self.name or "+".join(sorted(self.clauses)) or "<return-only>"


@dataclass(frozen=True)
class Handle(Term):
    body: Term
    handler: HandlerSpec


@dataclass(frozen=True)
class GetStorage(Term):
    pass


@dataclass(frozen=True)
class SetStorage(Term):
    value: Term


__all__ = [
    "GetStorage",
    "Handle",
    "HandlerSpec",
    "Perform",
    "SetStorage",
]
