from __future__ import annotations

from multieff.errors import ArityError, NotCallable, UnboundVariable
from multieff.level1_cesk.frames import (
    AppArgFrame,
    AppFnFrame,
    IfFrame,
    LetFrame,
    SeqFrame,
)
from multieff.level1_cesk.kontinuation import push_frame
from multieff.level1_cesk.state import (
    Apply,
    CESKState,
    Done,
    TermControl,
    Value,
)
from multieff.level1_cesk.terms import App, If, Lam, Let, LetRec, Lit, Seq, Var
from multieff.level1_cesk.types import Closure, extend_env


def apply_closure(closure: Closure, args: tuple, state: CESKState) -> CESKState:
    if len(args) != closure.arity:
        raise ArityError(closure.name or "<lambda>", closure.arity, len(args))
    env = closure.env
    if closure.name is not None:
        env = extend_env(env, (closure.name,), (closure,))
    return CESKState(
        C=TermControl(closure.body),
        E=extend_env(env, closure.params, args),
        S=state.S,
        K=state.K,
    )


def _eval_term(state: CESKState) -> CESKState:
    C, E, S, K = state.C, state.E, state.S, state.K
    term = C.term

    if isinstance(term, Lit):
        return CESKState(C=Value(term.value), E=E, S=S, K=K)

    if isinstance(term, Var):
        if term.name not in E:
            raise UnboundVariable(term.name)
        return CESKState(C=Value(E[term.name]), E=E, S=S, K=K)

    if isinstance(term, Lam):
        return CESKState(C=Value(Closure(term.params, term.body, E, term.name)), E=E, S=S, K=K)

    if isinstance(term, App):
        return CESKState(C=TermControl(term.fn), E=E, S=S, K=push_frame(K, AppFnFrame(term.args, E)))

    if isinstance(term, Let):
        return CESKState(C=TermControl(term.value), E=E, S=S, K=push_frame(K, LetFrame(term.name, term.body, E)))

    if isinstance(term, LetRec):
        closure = Closure(term.fn.params, term.fn.body, E, term.name)
        return CESKState(C=TermControl(term.body), E=extend_env(E, (term.name,), (closure,)), S=S, K=K)

    if isinstance(term, If):
        return CESKState(C=TermControl(term.cond), E=E, S=S, K=push_frame(K, IfFrame(term.then, term.orelse, E)))

    if isinstance(term, Seq):
        return CESKState(C=TermControl(term.first), E=E, S=S, K=push_frame(K, SeqFrame(term.second, E)))

    raise TypeError(f"Level 1 cannot evaluate {type(term).__name__}")


def _continue_value(state: CESKState) -> CESKState:
    C, S, K = state.C, state.S, state.K
    assert K is not None
    frame, rest_k = K.frame, K.rest
    value = C.value

    if isinstance(frame, LetFrame):
        return CESKState(
            C=TermControl(frame.body),
            E=extend_env(frame.env, (frame.name,), (value,)),
            S=S,
            K=rest_k,
        )

    if isinstance(frame, IfFrame):
        branch = frame.then if value else frame.orelse
        return CESKState(C=TermControl(branch), E=frame.env, S=S, K=rest_k)

    if isinstance(frame, SeqFrame):
        return CESKState(C=TermControl(frame.second), E=frame.env, S=S, K=rest_k)

    if isinstance(frame, AppFnFrame):
        if not frame.args:
            return CESKState(C=Apply(value, ()), E=frame.env, S=S, K=rest_k)
        return CESKState(
            C=TermControl(frame.args[0]),
            E=frame.env,
            S=S,
            K=push_frame(rest_k, AppArgFrame(value, (), frame.args[1:], frame.env)),
        )

    if isinstance(frame, AppArgFrame):
        done = frame.done + (value,)
        if not frame.remaining:
            return CESKState(C=Apply(frame.fn, done), E=frame.env, S=S, K=rest_k)
        return CESKState(
            C=TermControl(frame.remaining[0]),
            E=frame.env,
            S=S,
            K=push_frame(rest_k, AppArgFrame(frame.fn, done, frame.remaining[1:], frame.env)),
        )

    raise AssertionError(f"Level 1 only handles its own frames, got {type(frame).__name__}")


def _apply(state: CESKState) -> CESKState:
    C, E, S, K = state.C, state.E, state.S, state.K
    fn, args = C.fn, C.args

    if isinstance(fn, Closure):
        return apply_closure(fn, args, state)

    if callable(fn):
        return CESKState(C=Value(fn(*args)), E=E, S=S, K=K)

    raise NotCallable(fn)


def cesk_step(state: CESKState) -> CESKState | Done:
    C, K = state.C, state.K

    if isinstance(C, TermControl):
        return _eval_term(state)

    if isinstance(C, Apply):
        return _apply(state)

    if isinstance(C, Value) and K is not None:
        return _continue_value(state)

    if isinstance(C, Value) and K is None:
        return Done(C.value)

    raise TypeError(f"Unknown control: {type(C).__name__}")


__all__ = [
    "apply_closure",
    "cesk_step",
]
