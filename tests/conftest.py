"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass
from typing import Any

from stackhash import ItemStack, KindRegistry, StrategySettings


@dataclass(frozen=True, eq=False)
class FixtureStack:
    """StackLike whose facets can all be set independently, including emptiness."""

    kind: Any = None
    stable_kind_name: str | None = None
    quantity: int = 1
    variant: int = 0
    payload: Any = None
    empty: bool = False

    def is_empty(self) -> bool:
        return self.empty


@pytest.fixture
def registry():
    """Fresh KindRegistry."""
    return KindRegistry()


@pytest.fixture
def iron(registry):
    return registry.register("minecraft:iron_ingot")


@pytest.fixture
def gold(registry):
    return registry.register("minecraft:gold_ingot")


@pytest.fixture
def reloaded_iron():
    """Same name as ``iron`` but from another registry: a different object."""
    return KindRegistry().register("minecraft:iron_ingot")


@pytest.fixture
def stack_a(iron):
    return ItemStack(iron, quantity=5)


@pytest.fixture
def stack_b(iron):
    return ItemStack(iron, quantity=3)


@pytest.fixture
def stack_c(iron):
    return ItemStack(iron, quantity=5, payload={"enchant": 1})


@pytest.fixture
def fixture_stack_cls():
    return FixtureStack


@pytest.fixture
def quiet_settings():
    """Settings that build identity-conflicting strategies silently."""
    return StrategySettings(identity_conflict="allow")
