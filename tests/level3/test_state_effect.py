from multieff.build import app, handle, lam, seq, var
from multieff.config import RunConfig
from multieff.level3_core_effects import get, increment, modify, put, state_handler
from multieff.prelude import add, pair
from multieff.run import sync_run


def run(program, registry):
    return sync_run(program, registry, config=RunConfig())


class TestStateHandler:
    def test_get_put(self, registry):
        program = handle(seq(put(app(add, get(), 1)), get()), state_handler(41))

        assert run(program, registry).unwrap() == 42

    def test_put_completes_with_none(self, registry):
        assert run(handle(put(1), state_handler(0)), registry).unwrap() is None

    def test_with_final_state(self, registry):
        program = handle(seq(put(5), "done"), state_handler(0, with_final=True))

        assert run(program, registry).unwrap() == ("done", 5)

    def test_modify_and_increment(self, registry):
        program = handle(
            seq(modify(lam("n", body=app(add, var("n"), 10))), increment(), get()),
            state_handler(0),
        )

        assert run(program, registry).unwrap() == 11

    def test_initial_value_may_be_a_term(self, registry):
        assert run(handle(get(), state_handler(app(add, 1, 2))), registry).unwrap() == 3

    def test_inner_state_shadows_outer(self, registry):
        program = handle(
            app(pair, handle(seq(put("inner"), get()), state_handler(0)), get()),
            state_handler("outer"),
        )

        assert run(program, registry).unwrap() == ("inner", "outer")
