from multieff.build import app, handle, if_, let, lit, var
from multieff.config import RunConfig
from multieff.level3_core_effects import choose, fail, first_choice_handler, solutions_handler
from multieff.prelude import add, eq, pair
from multieff.run import sync_run


def run(program, registry):
    return sync_run(program, registry, config=RunConfig())


class TestSolutions:
    def test_all_ways_to_make_change(self, registry, make_change):
        program = handle(make_change(3, [3, 2, 1]), solutions_handler())

        assert run(program, registry).unwrap() == [[3], [2, 1], [1, 2], [1, 1, 1]]

    def test_no_way_to_make_change(self, registry, make_change):
        result = run(handle(make_change(3, [2]), solutions_handler()), registry)

        assert result.unwrap() == []

    def test_zero_budget_has_single_empty_solution(self, registry, make_change):
        program = handle(make_change(0, [1]), solutions_handler())

        assert run(program, registry).unwrap() == [[]]

    def test_choose_in_arithmetic(self, registry):
        program = handle(
            let("x", choose(lit([1, 2])), app(add, var("x"), 10)),
            solutions_handler(),
        )

        assert run(program, registry).unwrap() == [11, 12]

    def test_nested_choices_enumerate_in_order(self, registry):
        program = handle(
            app(pair, choose(lit([1, 2])), choose(lit(["a", "b"]))),
            solutions_handler(),
        )

        assert run(program, registry).unwrap() == [(1, "a"), (1, "b"), (2, "a"), (2, "b")]

    def test_fail_prunes_branch(self, registry):
        program = handle(
            let("x", choose(lit([1, 2, 3])), if_(app(eq, var("x"), 2), fail(), var("x"))),
            solutions_handler(),
        )

        assert run(program, registry).unwrap() == [1, 3]


class TestFirstChoice:
    def test_picks_first_candidate(self, registry):
        program = handle(app(add, choose(lit([5, 6])), 1), first_choice_handler())

        assert run(program, registry).unwrap() == 6

    def test_empty_candidates_abort_with_none(self, registry):
        program = handle(app(add, fail(), 1), first_choice_handler())

        assert run(program, registry).unwrap() is None
