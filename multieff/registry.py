"""Operation registry.

Maps operation names to their declared signatures. The registry is pure
bookkeeping used to validate operation calls and handler clauses; it never
decides how an operation is fulfilled.

Example:
    registry = EffectRegistry()
    registry.declare_effect("state", [("get", 0), ("put", 1)])
    registry.lookup_operation("put").arity  # 1
"""

from __future__ import annotations

import threading
from collections.abc import Iterable
from dataclasses import dataclass

from beartype import beartype
from loguru import logger

from multieff.errors import (
    DuplicateEffect,
    OperationArityError,
    UnknownEffect,
    UnknownOperation,
)


@dataclass(frozen=True)
class OperationDecl:
    name: str
    arity: int
    effect: str = ""


@dataclass(frozen=True)
class EffectDecl:
    name: str
    operations: tuple[OperationDecl, ...]

    def operation_names(self) -> tuple[str, ...]:
        return tuple(op.name for op in self.operations)


class EffectRegistry:
    def __init__(self) -> None:
        self._effects: dict[str, EffectDecl] = {}
        self._operations: dict[str, OperationDecl] = {}
        self._lock = threading.Lock()

    @beartype
    def declare_effect(
        self,
        name: str,
        operations: Iterable[OperationDecl | tuple[str, int]],
    ) -> EffectDecl:
        """Declare an effect and its operations.

        Raises:
            DuplicateEffect: If ``name`` is already declared, or one of the
                operation names already belongs to another effect.
            ValueError: If an arity is negative or an operation repeats.
        """
        ops: list[OperationDecl] = []
        seen: set[str] = set()
        for op in operations:
            op_name, arity = (op.name, op.arity) if isinstance(op, OperationDecl) else op
            if arity < 0:
                raise ValueError(f"Operation {op_name!r} has negative arity {arity}")
            if op_name in seen:
                raise ValueError(f"Operation {op_name!r} declared twice in effect {name!r}")
            seen.add(op_name)
            ops.append(OperationDecl(name=op_name, arity=arity, effect=name))

        decl = EffectDecl(name=name, operations=tuple(ops))

        with self._lock:
            if name in self._effects:
                raise DuplicateEffect(name)
            for op in decl.operations:
                owner = self._operations.get(op.name)
                if owner is not None:
                    raise DuplicateEffect(
                        name, f"operation {op.name!r} already declared by {owner.effect!r}"
                    )
            self._effects[name] = decl
            for op in decl.operations:
                self._operations[op.name] = op

        logger.debug("declared effect {} with operations {}", name, decl.operation_names())
        return decl

    @beartype
    def lookup_operation(self, name: str) -> OperationDecl:
        op = self._operations.get(name)
        if op is None:
            raise UnknownOperation(name)
        return op

    @beartype
    def lookup_effect(self, name: str) -> EffectDecl:
        decl = self._effects.get(name)
        if decl is None:
            raise UnknownEffect(name)
        return decl

    def validate_call(self, name: str, argc: int) -> OperationDecl:
        op = self.lookup_operation(name)
        if op.arity != argc:
            raise OperationArityError(name, op.arity, argc)
        return op

    def is_declared(self, name: str) -> bool:
        return name in self._effects

    def effects(self) -> tuple[EffectDecl, ...]:
        return tuple(self._effects.values())

    def __contains__(self, name: object) -> bool:
        return name in self._operations


__all__ = [
    "EffectDecl",
    "EffectRegistry",
    "OperationDecl",
]
