from multieff.level2_algebraic_effects.continuation import Continuation
from multieff.level2_algebraic_effects.dispatch import (
    collect_active_handlers,
    find_handler,
    start_dispatch,
)
from multieff.level2_algebraic_effects.frames import (
    ClauseFrame,
    ExtentFrame,
    HandleFrame,
    InstallFrame,
    PerformArgFrame,
    SetStorageFrame,
)
from multieff.level2_algebraic_effects.primitives import (
    GetStorage,
    Handle,
    HandlerSpec,
    Perform,
    SetStorage,
)
from multieff.level2_algebraic_effects.state import (
    RuntimeStats,
    get_registry,
    get_stats,
    make_store,
)
from multieff.level2_algebraic_effects.step import level2_step

__all__ = [
    "ClauseFrame",
    "Continuation",
    "ExtentFrame",
    "GetStorage",
    "Handle",
    "HandleFrame",
    "HandlerSpec",
    "InstallFrame",
    "Perform",
    "PerformArgFrame",
    "RuntimeStats",
    "SetStorage",
    "SetStorageFrame",
    "collect_active_handlers",
    "find_handler",
    "get_registry",
    "get_stats",
    "level2_step",
    "make_store",
    "start_dispatch",
]
