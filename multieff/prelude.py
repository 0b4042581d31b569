"""Pure host functions applied from terms like ordinary closures.

Lists are never mutated: every helper returns a new list, so values shared
between resumptions of a continuation stay intact.
"""

from __future__ import annotations

from typing import Any


def head(xs: list[Any]) -> Any:
    return xs[0]


def tail(xs: list[Any]) -> list[Any]:
    return list(xs[1:])


def is_empty(xs: list[Any]) -> bool:
    return len(xs) == 0


def cons(x: Any, xs: list[Any]) -> list[Any]:
    return [x, *xs]


def concat(xs: list[Any], ys: list[Any]) -> list[Any]:
    return [*xs, *ys]


def append(xs: list[Any], x: Any) -> list[Any]:
    return [*xs, x]


def singleton(x: Any) -> list[Any]:
    return [x]


def add(a: Any, b: Any) -> Any:
    return a + b


def sub(a: Any, b: Any) -> Any:
    return a - b


def eq(a: Any, b: Any) -> bool:
    return a == b


def le(a: Any, b: Any) -> bool:
    return a <= b


def lt(a: Any, b: Any) -> bool:
    return a < b


def pair(a: Any, b: Any) -> tuple[Any, Any]:
    return (a, b)


def keep_le(xs: list[Any], bound: Any) -> list[Any]:
    """Elements of ``xs`` not greater than ``bound``, in order."""
    return [x for x in xs if x <= bound]


__all__ = [
    "add",
    "append",
    "concat",
    "cons",
    "eq",
    "head",
    "is_empty",
    "keep_le",
    "le",
    "lt",
    "pair",
    "singleton",
    "sub",
    "tail",
]
