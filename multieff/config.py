from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = ("1", "true", "yes")


def _debug_from_env() -> bool:
    return os.environ.get("MULTIEFF_DEBUG", "").lower() in _TRUTHY


def _max_steps_from_env() -> int | None:
    raw = os.environ.get("MULTIEFF_MAX_STEPS", "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"MULTIEFF_MAX_STEPS must be an integer, got {raw!r}") from e
    return value if value > 0 else None


@dataclass(frozen=True)
class RunConfig:
    """Settings for one evaluation.

    Attributes:
        max_steps: Abort with StepLimitExceeded after this many machine steps.
            None means unbounded.
        debug: Enable loguru output for the ``multieff`` package while running.
    """

    max_steps: int | None = None
    debug: bool = False

    @classmethod
    def from_env(cls) -> RunConfig:
        return cls(max_steps=_max_steps_from_env(), debug=_debug_from_env())


__all__ = ["RunConfig"]
