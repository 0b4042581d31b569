from __future__ import annotations

import itertools
from dataclasses import dataclass, field, replace
from typing import Any

from multieff.level1_cesk.terms import Term
from multieff.level1_cesk.types import Environment
from multieff.level2_algebraic_effects.primitives import HandlerSpec

_frame_id_counter = itertools.count(1)

Lineage = tuple[int, ...]


def _next_frame_id() -> int:
    return next(_frame_id_counter)


@dataclass(frozen=True)
class HandleFrame:
    """An installed handler.

    Operation calls search K innermost-first for the first HandleFrame whose
    spec declares the operation. A value reaching this frame goes through the
    return clause.

    Attributes:
        spec: Clauses of the handler
        env: Environment at installation; clauses are closed over it
        storage: Current storage value owned by this installation
        frame_id: Identity of the installation, shared by its ExtentFrame
            and ClauseFrames
        lineage: Resume tokens this copy of the frame was pushed back under.
            Empty for a fresh installation; every resumption that carries the
            frame inside its captured segment appends one token.
    """

    spec: HandlerSpec
    env: Environment = field(repr=False)
    storage: Any = None
    frame_id: int = field(default_factory=_next_frame_id)
    lineage: Lineage = ()

    def resumed_under(self, clause: ClauseFrame) -> HandleFrame:
        """Re-install as the target of a resumption run below ``clause``."""
        return replace(self, storage=clause.storage, lineage=clause.lineage)


@dataclass(frozen=True)
class ExtentFrame:
    """Marks the dynamic extent of a Handle construct.

    Sits directly below its HandleFrame; a value reaching it ends the extent.
    """

    frame_id: int
    label: str = ""
    lineage: Lineage = ()


@dataclass(frozen=True)
class ClauseFrame:
    """Active operation or return clause of frame ``frame_id``.

    Holds the storage the clause reads and writes; resuming re-installs the
    handler frame with this storage. Once an operation has been dispatched to
    a frame, one of its ClauseFrames stays in K until the extent ends, so a
    continuation is live exactly while a ClauseFrame of its lineage is in K.
    """

    frame_id: int
    storage: Any = None
    lineage: Lineage = ()

    def with_storage(self, storage: Any) -> ClauseFrame:
        return replace(self, storage=storage)


def extend_lineage(frame: Any, token: int) -> Any:
    """Mark a handler frame as pushed back by the resumption ``token``."""
    if isinstance(frame, (HandleFrame, ExtentFrame, ClauseFrame)):
        return replace(frame, lineage=frame.lineage + (token,))
    return frame


def lineage_includes(lineage: Lineage, ancestor: Lineage) -> bool:
    """True when ``lineage`` descends from (or equals) ``ancestor``."""
    return lineage[: len(ancestor)] == ancestor


@dataclass(frozen=True)
class InstallFrame:
    """Waiting for the storage initializer before installing the handler."""

    body: Term
    spec: HandlerSpec
    env: Environment = field(repr=False)


@dataclass(frozen=True)
class PerformArgFrame:
    operation: str
    done: tuple[Any, ...]
    remaining: tuple[Term, ...]
    env: Environment = field(repr=False)


@dataclass(frozen=True)
class SetStorageFrame:
    pass


Level2Frame = HandleFrame | ExtentFrame | ClauseFrame | InstallFrame | PerformArgFrame | SetStorageFrame


__all__ = [
    "ClauseFrame",
    "ExtentFrame",
    "HandleFrame",
    "InstallFrame",
    "Level2Frame",
    "Lineage",
    "PerformArgFrame",
    "SetStorageFrame",
    "extend_lineage",
    "lineage_includes",
]
