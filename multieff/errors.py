"""Runtime error types.

Every failure raised while stepping the machine derives from
``EffectRuntimeError`` so callers can tell runtime faults apart from
exceptions raised by host functions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from multieff.level2_algebraic_effects.continuation import Continuation


class EffectRuntimeError(Exception):
    """Base class for all runtime errors."""


class DuplicateEffect(EffectRuntimeError):
    def __init__(self, name: str, detail: str | None = None) -> None:
        self.name = name
        message = f"Effect already declared: {name!r}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class UnknownOperation(EffectRuntimeError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown operation: {name!r}")


class UnknownEffect(EffectRuntimeError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown effect: {name!r}")


class UnhandledOperation(EffectRuntimeError):
    """Raised when no active handler frame declares the called operation."""

    def __init__(self, name: str, args: tuple[Any, ...] = ()) -> None:
        self.name = name
        self.arguments = args
        super().__init__(f"No handler for operation {name!r}")


class ExpiredContinuation(EffectRuntimeError):
    """Raised when a continuation is resumed outside its frame's extent."""

    def __init__(self, continuation: Continuation) -> None:
        self.continuation = continuation
        super().__init__(
            f"Continuation {continuation.cont_id} ({continuation.operation}) resumed after "
            f"handler frame {continuation.target_frame_id} exited"
        )


class ArityError(EffectRuntimeError):
    def __init__(self, callee: str, expected: int, got: int) -> None:
        self.callee = callee
        self.expected = expected
        self.got = got
        super().__init__(f"{callee} expects {expected} argument(s), got {got}")


class OperationArityError(ArityError):
    pass


class StorageAccessError(EffectRuntimeError):
    pass


class UnboundVariable(EffectRuntimeError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unbound variable: {name!r}")


class NotCallable(EffectRuntimeError):
    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Cannot apply {type(value).__name__} value")


class StepLimitExceeded(EffectRuntimeError):
    def __init__(self, max_steps: int) -> None:
        self.max_steps = max_steps
        super().__init__(f"Evaluation exceeded {max_steps} steps")


__all__ = [
    "ArityError",
    "DuplicateEffect",
    "EffectRuntimeError",
    "ExpiredContinuation",
    "NotCallable",
    "OperationArityError",
    "StepLimitExceeded",
    "StorageAccessError",
    "UnboundVariable",
    "UnhandledOperation",
    "UnknownEffect",
    "UnknownOperation",
]
