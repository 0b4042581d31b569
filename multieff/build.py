"""Constructors for terms.

Plain Python values passed where a term is expected become literals;
variables are always spelled out with ``var``.

Example:
    program = handle(
        app(prelude.add, perform("ask"), 1),
        handler(ask=lam("k", body=app(var("k"), 41))),
    )
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from multieff.level1_cesk.terms import App, If, Lam, Let, LetRec, Lit, Seq, Term, Var
from multieff.level2_algebraic_effects.primitives import (
    GetStorage,
    Handle,
    HandlerSpec,
    Perform,
    SetStorage,
)


def as_term(value: Any) -> Term:
    if isinstance(value, Term):
        return value
    return Lit(value)


def lit(value: Any) -> Lit:
    return Lit(value)


def var(name: str) -> Var:
    return Var(name)


def lam(*params: str, body: Any, name: str | None = None) -> Lam:
    return Lam(tuple(params), as_term(body), name)


def app(fn: Any, *args: Any) -> App:
    return App(as_term(fn), tuple(as_term(arg) for arg in args))


def let(name: str, value: Any, body: Any) -> Let:
    return Let(name, as_term(value), as_term(body))


def letrec(name: str, params: tuple[str, ...] | list[str], fn_body: Any, body: Any) -> LetRec:
    """``let rec name(params) = fn_body in body``."""
    return LetRec(name, Lam(tuple(params), as_term(fn_body), name), as_term(body))


def if_(cond: Any, then: Any, orelse: Any) -> If:
    return If(as_term(cond), as_term(then), as_term(orelse))


def seq(*terms: Any) -> Term:
    if not terms:
        return Lit(None)
    result = as_term(terms[-1])
    for term in reversed(terms[:-1]):
        result = Seq(as_term(term), result)
    return result


def perform(operation: str, *args: Any) -> Perform:
    return Perform(operation, tuple(as_term(arg) for arg in args))


def handler(
    ops: Mapping[str, Lam] | None = None,
    *,
    ret: Lam | None = None,
    storage: Any = None,
    name: str | None = None,
    **clauses: Lam,
) -> HandlerSpec:
    """Build a handler spec.

    Clauses may be given as a mapping (for operation names that are not
    Python identifiers) and/or as keyword arguments. ``storage`` is a term
    or plain value seeding the frame's storage on every installation.
    """
    merged: dict[str, Lam] = dict(ops or {})
    merged.update(clauses)
    return HandlerSpec.of(
        merged,
        return_clause=ret,
        storage=None if storage is None else as_term(storage),
        name=name,
    )


def handle(body: Any, spec: HandlerSpec) -> Handle:
    return Handle(as_term(body), spec)


def get_storage() -> GetStorage:
    return GetStorage()


def set_storage(value: Any) -> SetStorage:
    return SetStorage(as_term(value))


def resume(k: Any, value: Any) -> App:
    """Apply continuation ``k`` (usually ``var("k")``) to ``value``."""
    return app(k, value)


__all__ = [
    "app",
    "as_term",
    "get_storage",
    "handle",
    "handler",
    "if_",
    "lam",
    "let",
    "letrec",
    "lit",
    "perform",
    "resume",
    "seq",
    "set_storage",
    "var",
]
