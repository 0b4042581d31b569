from __future__ import annotations

import itertools
from typing import Any

from loguru import logger

from multieff.errors import ArityError, ExpiredContinuation, StorageAccessError
from multieff.level1_cesk.kontinuation import (
    iter_frames,
    push_frame,
    push_frames,
    replace_first,
)
from multieff.level1_cesk.state import CESKState, TermControl, Value
from multieff.level1_cesk.types import Environment, extend_env
from multieff.level2_algebraic_effects.continuation import Continuation
from multieff.level2_algebraic_effects.frames import (
    ClauseFrame,
    ExtentFrame,
    HandleFrame,
    InstallFrame,
    extend_lineage,
    lineage_includes,
)
from multieff.level2_algebraic_effects.primitives import Handle, HandlerSpec
from multieff.level2_algebraic_effects.state import get_registry, get_stats
from multieff.registry import EffectRegistry

_resume_token_counter = itertools.count(1)


def validate_handler(spec: HandlerSpec, registry: EffectRegistry) -> None:
    """Check every clause against the declared operation signatures."""
    for operation, clause in spec.clauses.items():
        decl = registry.lookup_operation(operation)
        if len(clause.params) != decl.arity + 1:
            raise ArityError(f"clause for {operation!r}", decl.arity + 1, len(clause.params))
    if spec.return_clause is not None and len(spec.return_clause.params) != 1:
        raise ArityError("return clause", 1, len(spec.return_clause.params))


def handle_with_handler(handle: Handle, state: CESKState) -> CESKState:
    C, E, S, K = state.C, state.E, state.S, state.K

    validate_handler(handle.handler, get_registry(S))

    if handle.handler.storage is not None:
        return CESKState(
            C=TermControl(handle.handler.storage),
            E=E,
            S=S,
            K=push_frame(K, InstallFrame(handle.body, handle.handler, E)),
        )
    return install_frame(handle.body, handle.handler, E, None, state)


def install_frame(
    body: Any, spec: HandlerSpec, env: Environment, storage: Any, state: CESKState
) -> CESKState:
    S, K = state.S, state.K

    frame = HandleFrame(spec=spec, env=env, storage=storage)
    extent = ExtentFrame(frame.frame_id, spec.label)
    get_stats(S).installs += 1
    logger.debug("install frame {} ({})", frame.frame_id, spec.label)

    return CESKState(
        C=TermControl(body),
        E=env,
        S=S,
        K=push_frame(push_frame(K, extent), frame),
    )


def handle_return(frame: HandleFrame, value: Any, state: CESKState) -> CESKState:
    """A plain value reached its handler frame: apply the return clause."""
    S, rest_k = state.S, state.K.rest
    clause = frame.spec.return_clause

    if clause is None:
        return CESKState(C=Value(value), E=state.E, S=S, K=rest_k)

    return CESKState(
        C=TermControl(clause.body),
        E=extend_env(frame.env, clause.params, (value,)),
        S=S,
        K=push_frame(rest_k, ClauseFrame(frame.frame_id, frame.storage, frame.lineage)),
    )


def handle_extent_end(frame: ExtentFrame, value: Any, state: CESKState) -> CESKState:
    get_stats(state.S).extents_closed += 1
    logger.debug("frame {} ({}) extent ended", frame.frame_id, frame.label)
    return CESKState(C=Value(value), E=state.E, S=state.S, K=state.K.rest)


def _locate_owner(continuation: Continuation, state: CESKState) -> ClauseFrame | None:
    target_id = continuation.target_frame_id
    for frame in iter_frames(state.K):
        if (
            isinstance(frame, ClauseFrame)
            and frame.frame_id == target_id
            and lineage_includes(frame.lineage, continuation.lineage)
        ):
            return frame
    return None


def handle_resume(continuation: Continuation, args: tuple[Any, ...], state: CESKState) -> CESKState:
    """Resume ``continuation`` with the single value in ``args``.

    The captured frames are pushed onto the current K; the target handler is
    re-installed with the storage of the enclosing clause so writes made by
    the clause before resuming are seen by the resumed computation. Nested
    handler frames get a fresh lineage token, so continuations captured
    inside this resumption cannot be resumed from a sibling one.
    """
    S, K = state.S, state.K

    if len(args) != 1:
        raise ArityError(f"continuation k{continuation.cont_id}", 1, len(args))

    owner = _locate_owner(continuation, state)
    if owner is None:
        raise ExpiredContinuation(continuation)

    token = next(_resume_token_counter)
    frames = tuple(extend_lineage(frame, token) for frame in continuation.frames[:-1]) + (
        continuation.target.resumed_under(owner),
    )

    get_stats(S).resumes += 1
    logger.debug(
        "resume k{} ({}) into frame {} as r{}",
        continuation.cont_id,
        continuation.operation,
        continuation.target_frame_id,
        token,
    )
    return CESKState(C=Value(args[0]), E=state.E, S=S, K=push_frames(K, frames))


def handle_get_storage(state: CESKState) -> CESKState:
    for frame in iter_frames(state.K):
        if isinstance(frame, ClauseFrame):
            return CESKState(C=Value(frame.storage), E=state.E, S=state.S, K=state.K)
    raise StorageAccessError("GetStorage used outside a handler clause")


def handle_set_storage(value: Any, state: CESKState) -> CESKState:
    new_k = replace_first(
        state.K.rest,
        lambda frame: isinstance(frame, ClauseFrame),
        lambda frame: frame.with_storage(value),
    )
    if new_k is None:
        raise StorageAccessError("SetStorage used outside a handler clause")
    return CESKState(C=Value(None), E=state.E, S=state.S, K=new_k)


__all__ = [
    "handle_extent_end",
    "handle_get_storage",
    "handle_resume",
    "handle_return",
    "handle_set_storage",
    "handle_with_handler",
    "install_frame",
    "validate_handler",
]
