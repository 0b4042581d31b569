"""Runtime bookkeeping kept in the store S."""

from __future__ import annotations

from dataclasses import dataclass

from multieff.level1_cesk.types import Store
from multieff.registry import EffectRegistry

MULTIEFF_INTERNAL_REGISTRY = "__multieff_registry__"
MULTIEFF_INTERNAL_STATS = "__multieff_stats__"


@dataclass
class RuntimeStats:
    installs: int = 0
    dispatches: int = 0
    resumes: int = 0
    extents_closed: int = 0


def make_store(registry: EffectRegistry) -> Store:
    return {
        MULTIEFF_INTERNAL_REGISTRY: registry,
        MULTIEFF_INTERNAL_STATS: RuntimeStats(),
    }


def get_registry(S: Store) -> EffectRegistry:
    registry = S.get(MULTIEFF_INTERNAL_REGISTRY)
    if registry is None:
        raise RuntimeError("Store has no effect registry; build it with make_store()")
    return registry


def get_stats(S: Store) -> RuntimeStats:
    stats = S.get(MULTIEFF_INTERNAL_STATS)
    if stats is None:
        stats = RuntimeStats()
        S[MULTIEFF_INTERNAL_STATS] = stats
    return stats


__all__ = [
    "MULTIEFF_INTERNAL_REGISTRY",
    "MULTIEFF_INTERNAL_STATS",
    "RuntimeStats",
    "get_registry",
    "get_stats",
    "make_store",
]
