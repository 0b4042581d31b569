"""Nesting order decides whether handler storage is shared or forked."""

from multieff.build import app, handle, let, lit, seq, var
from multieff.config import RunConfig
from multieff.level3_core_effects import (
    ask,
    choose,
    reader_handler,
    solutions_handler,
    state_handler,
    tell,
    writer_handler,
)
from multieff.prelude import pair
from multieff.run import sync_run


def run(program, registry):
    return sync_run(program, registry, config=RunConfig())


class TestStateAndChoice:
    def test_state_outside_solutions_counts_every_choice(self, registry, make_change):
        program = handle(
            handle(make_change(3, [3, 2, 1], counted=True), solutions_handler()),
            state_handler(0, with_final=True),
        )

        assert run(program, registry).unwrap() == ([[3], [2, 1], [1, 2], [1, 1, 1]], 4)

    def test_solutions_outside_state_counts_per_branch(self, registry, make_change):
        program = handle(
            handle(make_change(3, [3, 2, 1], counted=True), state_handler(0, with_final=True)),
            solutions_handler(),
        )

        assert run(program, registry).unwrap() == [
            ([3], 1),
            ([2, 1], 2),
            ([1, 2], 2),
            ([1, 1, 1], 3),
        ]


class TestWriterAndChoice:
    def _body(self):
        return seq(
            tell("start"),
            let("x", choose(lit([1, 2])), seq(tell(var("x")), var("x"))),
        )

    def test_writer_inside_solutions_forks_log(self, registry):
        program = handle(handle(self._body(), writer_handler()), solutions_handler())

        assert run(program, registry).unwrap() == [(1, ["start", 1]), (2, ["start", 2])]

    def test_writer_outside_solutions_shares_log(self, registry):
        program = handle(handle(self._body(), solutions_handler()), writer_handler())

        assert run(program, registry).unwrap() == ([1, 2], ["start", 1, 2])


class TestReaderAndChoice:
    def test_reader_visible_in_every_branch(self, registry):
        program = handle(
            handle(
                let("x", choose(lit([1, 2])), app(pair, var("x"), ask())),
                solutions_handler(),
            ),
            reader_handler("env"),
        )

        assert run(program, registry).unwrap() == [(1, "env"), (2, "env")]
