from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar, cast

from loguru import logger

from multieff.config import RunConfig
from multieff.errors import StepLimitExceeded
from multieff.level1_cesk.kontinuation import EMPTY_K
from multieff.level1_cesk.state import CESKState, Done, TermControl
from multieff.level1_cesk.terms import Term
from multieff.level1_cesk.types import make_env
from multieff.level2_algebraic_effects.primitives import Handle, HandlerSpec
from multieff.level2_algebraic_effects.state import RuntimeStats, get_stats, make_store
from multieff.level2_algebraic_effects.step import level2_step
from multieff.registry import EffectRegistry

T = TypeVar("T")


@dataclass
class RunResult(Generic[T]):
    value: T | None = None
    error: BaseException | None = None
    steps: int = 0
    stats: RuntimeStats = field(default_factory=RuntimeStats)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return cast(T, self.value)


def _wrap_with_handlers(program: Term, handlers: list[HandlerSpec]) -> Term:
    """Wrap program with handlers. handlers[0] = innermost, handlers[N-1] = outermost."""
    result = program
    for handler in handlers:
        result = Handle(body=result, handler=handler)
    return result


def sync_run(
    program: Term,
    registry: EffectRegistry,
    handlers: list[HandlerSpec] | None = None,
    env: Mapping[str, Any] | None = None,
    config: RunConfig | None = None,
) -> RunResult[Any]:
    config = config if config is not None else RunConfig.from_env()
    if handlers:
        program = _wrap_with_handlers(program, handlers)

    if config.debug:
        logger.enable("multieff")
    try:
        return _drive(program, registry, env, config)
    finally:
        if config.debug:
            logger.disable("multieff")


def _drive(
    program: Term,
    registry: EffectRegistry,
    env: Mapping[str, Any] | None,
    config: RunConfig,
) -> RunResult[Any]:
    state = CESKState(
        C=TermControl(program),
        E=make_env(env),
        S=make_store(registry),
        K=EMPTY_K,
    )
    steps = 0

    while True:
        if config.max_steps is not None and steps >= config.max_steps:
            error = StepLimitExceeded(config.max_steps)
            logger.debug("run aborted: {}", error)
            return RunResult(error=error, steps=steps, stats=get_stats(state.S))

        try:
            result = level2_step(state)
        except Exception as e:
            logger.debug("run failed after {} steps: {!r}", steps, e)
            return RunResult(error=e, steps=steps, stats=get_stats(state.S))
        steps += 1

        if isinstance(result, Done):
            logger.debug("run finished after {} steps", steps)
            return RunResult(value=result.value, steps=steps, stats=get_stats(state.S))

        state = result


__all__ = ["RunResult", "sync_run"]
