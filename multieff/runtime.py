"""Embedding facade used by front ends.

Example:
    rt = Runtime()
    handle_ = rt.install({"choose": ...}, return_clause=...)
    result = rt.run_under(handle_, body)
    if result.is_ok:
        print(render(result.value))
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from multieff.config import RunConfig
from multieff.level1_cesk.terms import Lam, Term
from multieff.level2_algebraic_effects.handlers import validate_handler
from multieff.level2_algebraic_effects.primitives import Handle, HandlerSpec
from multieff.level3_core_effects import declare_core_effects
from multieff.registry import EffectDecl, EffectRegistry, OperationDecl
from multieff.run import RunResult, sync_run


@dataclass(frozen=True)
class FrameHandle:
    """A validated handler, ready to be installed around a body.

    Every ``run_under`` installs a fresh frame from the same spec.
    """

    spec: HandlerSpec


class Runtime:
    def __init__(
        self,
        registry: EffectRegistry | None = None,
        config: RunConfig | None = None,
        core_effects: bool = True,
    ) -> None:
        if registry is None:
            registry = EffectRegistry()
            if core_effects:
                declare_core_effects(registry)
        self.registry = registry
        self.config = config

    def declare_effect(
        self, name: str, operations: Iterable[OperationDecl | tuple[str, int]]
    ) -> EffectDecl:
        return self.registry.declare_effect(name, operations)

    def lookup_operation(self, name: str) -> OperationDecl:
        return self.registry.lookup_operation(name)

    def install(
        self,
        operation_clauses: Mapping[str, Lam] | HandlerSpec,
        return_clause: Lam | None = None,
        storage: Term | None = None,
        name: str | None = None,
    ) -> FrameHandle:
        if isinstance(operation_clauses, HandlerSpec):
            spec = operation_clauses
        else:
            spec = HandlerSpec.of(operation_clauses, return_clause, storage, name)
        validate_handler(spec, self.registry)
        return FrameHandle(spec)

    def run_under(
        self,
        frame_handle: FrameHandle,
        body: Term,
        env: Mapping[str, Any] | None = None,
    ) -> RunResult[Any]:
        return self.evaluate(Handle(body, frame_handle.spec), env)

    def evaluate(self, term: Term, env: Mapping[str, Any] | None = None) -> RunResult[Any]:
        return sync_run(term, self.registry, env=env, config=self.config)


__all__ = ["FrameHandle", "Runtime"]
