"""multieff: multi-shot algebraic effect handlers.

Programs are terms evaluated by a layered CESK machine:
    Level 1: plain evaluation (literals, closures, application, let, if)
    Level 2: algebraic effects (handler frames, operation dispatch,
             re-invokable continuations, frame storage)
    Level 3: core effects built from level 2 (choice, state, reader,
             writer, exception)

The kontinuation is a persistent linked list, so a captured continuation is
just data and can be resumed zero, one or many times.
"""

from loguru import logger

from multieff.config import RunConfig
from multieff.errors import (
    ArityError,
    DuplicateEffect,
    EffectRuntimeError,
    ExpiredContinuation,
    NotCallable,
    OperationArityError,
    StepLimitExceeded,
    StorageAccessError,
    UnboundVariable,
    UnhandledOperation,
    UnknownEffect,
    UnknownOperation,
)
from multieff.level2_algebraic_effects import Continuation, HandlerSpec
from multieff.registry import EffectDecl, EffectRegistry, OperationDecl
from multieff.render import render
from multieff.run import RunResult, sync_run
from multieff.runtime import FrameHandle, Runtime

logger.disable("multieff")

__all__ = [
    "ArityError",
    "Continuation",
    "DuplicateEffect",
    "EffectDecl",
    "EffectRegistry",
    "EffectRuntimeError",
    "ExpiredContinuation",
    "FrameHandle",
    "HandlerSpec",
    "NotCallable",
    "OperationArityError",
    "OperationDecl",
    "RunConfig",
    "RunResult",
    "Runtime",
    "StepLimitExceeded",
    "StorageAccessError",
    "UnboundVariable",
    "UnhandledOperation",
    "UnknownEffect",
    "UnknownOperation",
    "render",
    "sync_run",
]
