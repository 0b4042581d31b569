import pytest

from multieff.registry import EffectRegistry


@pytest.fixture
def registry(registry: EffectRegistry) -> EffectRegistry:
    """Core effects plus small single-purpose effects used by these tests."""
    registry.declare_effect("coin", [("flip", 0)])
    registry.declare_effect("counter", [("tick", 0)])
    registry.declare_effect("escape", [("grab", 0)])
    registry.declare_effect("pairing", [("combine", 2)])
    return registry
