"""Persistent kontinuation.

K is an immutable singly linked list of frames, innermost first. Pushing
shares the tail, so a captured segment and every continuation built from it
stay valid no matter how often they are resumed.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, TypeAlias


@dataclass(frozen=True, slots=True)
class KNode:
    frame: Any
    rest: KNode | None


Kontinuation: TypeAlias = "KNode | None"

EMPTY_K: Kontinuation = None


def push_frame(k: Kontinuation, frame: Any) -> KNode:
    return KNode(frame, k)


def push_frames(k: Kontinuation, frames: Iterable[Any]) -> Kontinuation:
    """Push ``frames`` (given innermost first) so that frames[0] ends on top."""
    for frame in reversed(tuple(frames)):
        k = KNode(frame, k)
    return k


def pop_frame(k: Kontinuation) -> tuple[Any | None, Kontinuation]:
    if k is None:
        return None, k
    return k.frame, k.rest


def iter_frames(k: Kontinuation) -> Iterator[Any]:
    while k is not None:
        yield k.frame
        k = k.rest


def k_from_frames(frames: Iterable[Any]) -> Kontinuation:
    return push_frames(EMPTY_K, frames)


def k_to_list(k: Kontinuation) -> list[Any]:
    return list(iter_frames(k))


def k_depth(k: Kontinuation) -> int:
    depth = 0
    while k is not None:
        depth += 1
        k = k.rest
    return depth


def split_at(k: Kontinuation, pred: Callable[[Any], bool]) -> tuple[tuple[Any, ...], Any, Kontinuation] | None:
    """Split K at the first frame satisfying ``pred``.

    Returns (frames above the match, the matching frame, K below the match),
    or None if no frame matches.
    """
    above: list[Any] = []
    node = k
    while node is not None:
        if pred(node.frame):
            return tuple(above), node.frame, node.rest
        above.append(node.frame)
        node = node.rest
    return None


def replace_first(k: Kontinuation, pred: Callable[[Any], bool], update: Callable[[Any], Any]) -> Kontinuation | None:
    """Return K with the first frame matching ``pred`` replaced by ``update(frame)``."""
    found = split_at(k, pred)
    if found is None:
        return None
    above, frame, below = found
    return push_frames(push_frame(below, update(frame)), above)


__all__ = [
    "EMPTY_K",
    "KNode",
    "Kontinuation",
    "iter_frames",
    "k_depth",
    "k_from_frames",
    "k_to_list",
    "pop_frame",
    "push_frame",
    "push_frames",
    "replace_first",
    "split_at",
]
