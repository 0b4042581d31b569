"""Core effects built on the level 2 machinery.

Each effect module provides a ``declare_*`` function, operation
constructors, and handler factories returning ``HandlerSpec`` values.
"""

from multieff.level3_core_effects.choice import (
    CHOICE_EFFECT,
    choose,
    declare_choice,
    fail,
    first_choice_handler,
    solutions_handler,
)
from multieff.level3_core_effects.exception import (
    EXCEPTION_EFFECT,
    Err,
    Ok,
    catch_handler,
    declare_exception,
    throw,
)
from multieff.level3_core_effects.reader import (
    READER_EFFECT,
    ask,
    declare_reader,
    reader_handler,
)
from multieff.level3_core_effects.state import (
    STATE_EFFECT,
    declare_state,
    get,
    increment,
    modify,
    put,
    state_handler,
)
from multieff.level3_core_effects.writer import (
    WRITER_EFFECT,
    declare_writer,
    tell,
    writer_handler,
)
from multieff.registry import EffectRegistry

_CORE_DECLARATIONS = (
    declare_choice,
    declare_state,
    declare_reader,
    declare_writer,
    declare_exception,
)


def declare_core_effects(registry: EffectRegistry) -> EffectRegistry:
    for declare in _CORE_DECLARATIONS:
        declare(registry)
    return registry


__all__ = [
    "CHOICE_EFFECT",
    "EXCEPTION_EFFECT",
    "Err",
    "Ok",
    "READER_EFFECT",
    "STATE_EFFECT",
    "WRITER_EFFECT",
    "ask",
    "catch_handler",
    "choose",
    "declare_choice",
    "declare_core_effects",
    "declare_exception",
    "declare_reader",
    "declare_state",
    "declare_writer",
    "fail",
    "first_choice_handler",
    "get",
    "increment",
    "modify",
    "put",
    "reader_handler",
    "solutions_handler",
    "state_handler",
    "tell",
    "throw",
    "writer_handler",
]
