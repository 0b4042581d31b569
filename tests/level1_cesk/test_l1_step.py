import pytest

from multieff.errors import ArityError, NotCallable, UnboundVariable
from multieff.level1_cesk.frames import AppArgFrame, AppFnFrame, IfFrame, LetFrame
from multieff.level1_cesk.kontinuation import push_frame
from multieff.level1_cesk.state import Apply, CESKState, Done, TermControl, Value
from multieff.level1_cesk.step import cesk_step
from multieff.level1_cesk.terms import App, If, Lam, Let, LetRec, Lit, Var
from multieff.level1_cesk.types import Closure, make_env


def run_to_done(state):
    while True:
        result = cesk_step(state)
        if isinstance(result, Done):
            return result.value
        state = result


class TestTermTransitions:
    def test_literal_becomes_value(self, empty_env, empty_store, empty_k):
        state = CESKState(C=TermControl(Lit(42)), E=empty_env, S=empty_store, K=empty_k)

        result = cesk_step(state)

        assert isinstance(result, CESKState)
        assert result.C == Value(42)

    def test_variable_lookup(self, empty_store, empty_k):
        state = CESKState(C=TermControl(Var("x")), E=make_env({"x": 7}), S=empty_store, K=empty_k)

        result = cesk_step(state)

        assert result.C == Value(7)

    def test_unbound_variable_raises(self, empty_env, empty_store, empty_k):
        state = CESKState(C=TermControl(Var("missing")), E=empty_env, S=empty_store, K=empty_k)

        with pytest.raises(UnboundVariable):
            cesk_step(state)

    def test_lambda_closes_over_environment(self, empty_store, empty_k):
        env = make_env({"y": 1})
        state = CESKState(C=TermControl(Lam(("x",), Var("x"))), E=env, S=empty_store, K=empty_k)

        result = cesk_step(state)

        assert isinstance(result.C.value, Closure)
        assert result.C.value.env is env
        assert result.C.value.params == ("x",)

    def test_let_pushes_let_frame(self, empty_env, empty_store, empty_k):
        state = CESKState(
            C=TermControl(Let("x", Lit(1), Var("x"))), E=empty_env, S=empty_store, K=empty_k
        )

        result = cesk_step(state)

        assert result.C == TermControl(Lit(1))
        assert isinstance(result.K.frame, LetFrame)
        assert result.K.rest is None

    def test_app_evaluates_function_first(self, empty_env, empty_store, empty_k):
        term = App(Var("f"), (Lit(1),))
        state = CESKState(C=TermControl(term), E=empty_env, S=empty_store, K=empty_k)

        result = cesk_step(state)

        assert result.C == TermControl(Var("f"))
        assert isinstance(result.K.frame, AppFnFrame)


class TestValueTransitions:
    def test_value_with_empty_k_is_done(self, empty_env, empty_store, empty_k):
        state = CESKState(C=Value("x"), E=empty_env, S=empty_store, K=empty_k)

        assert cesk_step(state) == Done("x")

    def test_if_frame_selects_branch(self, empty_env, empty_store, empty_k):
        k = push_frame(empty_k, IfFrame(Lit("yes"), Lit("no"), empty_env))

        yes = cesk_step(CESKState(C=Value(True), E=empty_env, S=empty_store, K=k))
        no = cesk_step(CESKState(C=Value(0), E=empty_env, S=empty_store, K=k))

        assert yes.C == TermControl(Lit("yes"))
        assert no.C == TermControl(Lit("no"))

    def test_last_argument_produces_apply(self, empty_env, empty_store, empty_k):
        k = push_frame(empty_k, AppArgFrame(len, (), (), empty_env))

        result = cesk_step(CESKState(C=Value([1, 2]), E=empty_env, S=empty_store, K=k))

        assert result.C == Apply(len, ([1, 2],))
        assert result.K is None


class TestApplication:
    def test_host_function_is_called(self, empty_env, empty_store, empty_k):
        state = CESKState(C=Apply(max, (3, 9)), E=empty_env, S=empty_store, K=empty_k)

        assert cesk_step(state).C == Value(9)

    def test_closure_arity_mismatch(self, empty_env, empty_store, empty_k):
        closure = Closure(("a", "b"), Var("a"), empty_env)
        state = CESKState(C=Apply(closure, (1,)), E=empty_env, S=empty_store, K=empty_k)

        with pytest.raises(ArityError):
            cesk_step(state)

    def test_non_callable_raises(self, empty_env, empty_store, empty_k):
        state = CESKState(C=Apply(3, ()), E=empty_env, S=empty_store, K=empty_k)

        with pytest.raises(NotCallable):
            cesk_step(state)

    def test_letrec_closure_sees_itself(self, empty_env, empty_store, empty_k):
        # sum(n) = n == 0 ? 0 : n + sum(n - 1)
        body = If(
            App(Lit(lambda n: n == 0), (Var("n"),)),
            Lit(0),
            App(
                Lit(lambda a, b: a + b),
                (Var("n"), App(Var("sum"), (App(Lit(lambda n: n - 1), (Var("n"),)),))),
            ),
        )
        term = LetRec("sum", Lam(("n",), body), App(Var("sum"), (Lit(4),)))
        state = CESKState(C=TermControl(term), E=empty_env, S=empty_store, K=empty_k)

        assert run_to_done(state) == 10
