from __future__ import annotations

from multieff.level1_cesk.kontinuation import push_frame
from multieff.level1_cesk.state import Apply, CESKState, Done, TermControl, Value
from multieff.level1_cesk.step import cesk_step
from multieff.level2_algebraic_effects.continuation import Continuation
from multieff.level2_algebraic_effects.dispatch import start_dispatch
from multieff.level2_algebraic_effects.frames import (
    ClauseFrame,
    ExtentFrame,
    HandleFrame,
    InstallFrame,
    PerformArgFrame,
    SetStorageFrame,
)
from multieff.level2_algebraic_effects.handlers import (
    handle_extent_end,
    handle_get_storage,
    handle_resume,
    handle_return,
    handle_set_storage,
    handle_with_handler,
    install_frame,
)
from multieff.level2_algebraic_effects.primitives import (
    GetStorage,
    Handle,
    Perform,
    SetStorage,
)


def _translate_term(state: CESKState) -> CESKState | None:
    C, E, S, K = state.C, state.E, state.S, state.K
    term = C.term

    if isinstance(term, Perform):
        if not term.args:
            return start_dispatch(term.operation, (), state)
        return CESKState(
            C=TermControl(term.args[0]),
            E=E,
            S=S,
            K=push_frame(K, PerformArgFrame(term.operation, (), term.args[1:], E)),
        )

    if isinstance(term, Handle):
        return handle_with_handler(term, state)

    if isinstance(term, GetStorage):
        return handle_get_storage(state)

    if isinstance(term, SetStorage):
        return CESKState(C=TermControl(term.value), E=E, S=S, K=push_frame(K, SetStorageFrame()))

    return None


def _continue_value(state: CESKState) -> CESKState | None:
    C, E, S, K = state.C, state.E, state.S, state.K
    frame = K.frame
    value = C.value

    if isinstance(frame, HandleFrame):
        return handle_return(frame, value, state)

    if isinstance(frame, ExtentFrame):
        return handle_extent_end(frame, value, state)

    if isinstance(frame, ClauseFrame):
        return CESKState(C=C, E=E, S=S, K=K.rest)

    if isinstance(frame, PerformArgFrame):
        done = frame.done + (value,)
        if not frame.remaining:
            return start_dispatch(
                frame.operation, done, CESKState(C=C, E=frame.env, S=S, K=K.rest)
            )
        return CESKState(
            C=TermControl(frame.remaining[0]),
            E=frame.env,
            S=S,
            K=push_frame(K.rest, PerformArgFrame(frame.operation, done, frame.remaining[1:], frame.env)),
        )

    if isinstance(frame, InstallFrame):
        return install_frame(
            frame.body, frame.spec, frame.env, value, CESKState(C=C, E=frame.env, S=S, K=K.rest)
        )

    if isinstance(frame, SetStorageFrame):
        return handle_set_storage(value, state)

    return None


def level2_step(state: CESKState) -> CESKState | Done:
    C, K = state.C, state.K

    if isinstance(C, TermControl):
        translated = _translate_term(state)
        if translated is not None:
            return translated

    if isinstance(C, Apply) and isinstance(C.fn, Continuation):
        return handle_resume(C.fn, C.args, state)

    if isinstance(C, Value) and K is not None:
        continued = _continue_value(state)
        if continued is not None:
            return continued

    return cesk_step(state)


__all__ = ["level2_step"]
