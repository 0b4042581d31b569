"""Non-deterministic choice.

Operations:
- choose(candidates): continue with one of the candidates
- fail(): shorthand for choose([]), a branch with nothing to continue with

Handlers:
- solutions_handler(): resume once per candidate, in order, and concatenate
  the results; the return clause wraps each finished branch as [value].
  An empty candidate list resumes zero times and contributes [].
- first_choice_handler(): resume once with the first candidate; abort the
  whole handled computation with None when there is none.

Usage:
    program = handle(
        let("x", choose([1, 2]), app(prelude.add, var("x"), 10)),
        solutions_handler(),
    )
    # -> [11, 12]
"""

from __future__ import annotations

from typing import Any

from multieff.build import app, if_, lam, letrec, lit, perform, resume, var
from multieff.level1_cesk.terms import Term
from multieff.level2_algebraic_effects.primitives import HandlerSpec, Perform
from multieff.prelude import concat, head, is_empty, singleton, tail
from multieff.registry import EffectDecl, EffectRegistry

CHOICE_EFFECT = "choice"
CHOOSE = "choose"


def declare_choice(registry: EffectRegistry) -> EffectDecl:
    return registry.declare_effect(CHOICE_EFFECT, [(CHOOSE, 1)])


def choose(candidates: Any) -> Perform:
    return perform(CHOOSE, candidates)


def fail() -> Perform:
    return perform(CHOOSE, lit([]))


def _resume_each(candidates: Term) -> Term:
    return letrec(
        "each",
        ["ys"],
        if_(
            app(is_empty, var("ys")),
            lit([]),
            app(
                concat,
                resume(var("k"), app(head, var("ys"))),
                app(var("each"), app(tail, var("ys"))),
            ),
        ),
        app(var("each"), candidates),
    )


def solutions_handler() -> HandlerSpec:
    return HandlerSpec.of(
        {CHOOSE: lam("xs", "k", body=_resume_each(var("xs")))},
        return_clause=lam("x", body=app(singleton, var("x"))),
        name="solutions",
    )


def first_choice_handler() -> HandlerSpec:
    return HandlerSpec.of(
        {
            CHOOSE: lam(
                "xs",
                "k",
                body=if_(app(is_empty, var("xs")), lit(None), resume(var("k"), app(head, var("xs")))),
            )
        },
        name="first-choice",
    )


__all__ = [
    "CHOICE_EFFECT",
    "CHOOSE",
    "choose",
    "declare_choice",
    "fail",
    "first_choice_handler",
    "solutions_handler",
]
