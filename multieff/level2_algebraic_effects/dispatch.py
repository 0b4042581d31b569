from __future__ import annotations

from typing import Any

from loguru import logger

from multieff.errors import UnhandledOperation
from multieff.level1_cesk.kontinuation import Kontinuation, iter_frames, push_frame, split_at
from multieff.level1_cesk.state import CESKState, TermControl
from multieff.level1_cesk.types import extend_env
from multieff.level2_algebraic_effects.continuation import Continuation, next_continuation_id
from multieff.level2_algebraic_effects.frames import ClauseFrame, HandleFrame
from multieff.level2_algebraic_effects.state import get_registry, get_stats


def collect_active_handlers(K: Kontinuation) -> list[HandleFrame]:
    """Handler frames in K. Convention: handlers[0] = innermost."""
    return [frame for frame in iter_frames(K) if isinstance(frame, HandleFrame)]


def find_handler(
    K: Kontinuation, operation: str
) -> tuple[tuple[Any, ...], HandleFrame, Kontinuation] | None:
    """Split K at the innermost frame handling ``operation``.

    Returns (frames above the handler, the handler, K below the handler).
    Outer frames declaring the same operation are shadowed.
    """
    found = split_at(
        K, lambda frame: isinstance(frame, HandleFrame) and frame.spec.handles(operation)
    )
    if found is None:
        return None
    above, frame, below = found
    assert isinstance(frame, HandleFrame)
    return above, frame, below


def start_dispatch(operation: str, args: tuple[Any, ...], state: CESKState) -> CESKState:
    """Suspend at an operation call and run the matching clause.

    Everything from the call site down to and including the matched handler
    frame becomes the continuation. The clause runs below that frame, under a
    ClauseFrame carrying the frame's storage.
    """
    S, K = state.S, state.K

    get_registry(S).validate_call(operation, len(args))

    found = find_handler(K, operation)
    if found is None:
        raise UnhandledOperation(operation, args)
    above, frame, below = found

    continuation = Continuation(
        cont_id=next_continuation_id(),
        operation=operation,
        frames=above + (frame,),
    )
    get_stats(S).dispatches += 1
    logger.debug(
        "dispatch {} to frame {} ({}), captured k{} with {} frame(s)",
        operation,
        frame.frame_id,
        frame.spec.label,
        continuation.cont_id,
        continuation.depth,
    )

    clause = frame.spec.clauses[operation]
    return CESKState(
        C=TermControl(clause.body),
        E=extend_env(frame.env, clause.params, args + (continuation,)),
        S=S,
        K=push_frame(below, ClauseFrame(frame.frame_id, frame.storage, frame.lineage)),
    )


__all__ = [
    "collect_active_handlers",
    "find_handler",
    "start_dispatch",
]
