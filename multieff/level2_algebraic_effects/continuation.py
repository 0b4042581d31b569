from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Any

from multieff.level2_algebraic_effects.frames import HandleFrame, Lineage

_continuation_id_counter = itertools.count(1)


def next_continuation_id() -> int:
    return next(_continuation_id_counter)


@dataclass(frozen=True, eq=False)
class Continuation:
    """The rest of a computation, from an operation call to its handler.

    ``frames`` runs innermost first and ends with the matched HandleFrame.
    Frames are immutable, so the same continuation can be resumed any number
    of times; each resumption pushes the frames back onto whatever K is
    current at that point. Nested handler frames inside the segment carry the
    storage they had at capture time, so every resumption starts them from
    the same snapshot. Frames below the matched handler are never captured
    and are shared by all resumptions.

    ``lineage`` is the lineage of the matched frame at capture. Resuming needs
    a ClauseFrame of the target whose lineage descends from it; a copy of the
    frame pushed back by a sibling resumption does not qualify.
    """

    cont_id: int
    operation: str
    frames: tuple[Any, ...] = field(repr=False)

    @property
    def target(self) -> HandleFrame:
        target = self.frames[-1]
        assert isinstance(target, HandleFrame)
        return target

    @property
    def target_frame_id(self) -> int:
        return self.target.frame_id

    @property
    def lineage(self) -> Lineage:
        return self.target.lineage

    @property
    def depth(self) -> int:
        return len(self.frames)


__all__ = ["Continuation", "next_continuation_id"]
