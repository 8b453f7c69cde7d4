"""Stack models: the read-only entity contract and a reference value type.

Strategies only ever read stacks through the StackLike accessors. Any object
exposing them works; ItemStack is a minimal frozen implementation.

Usage:
    iron = get_registry().register("minecraft:iron_ingot")
    stack = ItemStack(iron, quantity=5)
    enchanted = ItemStack(iron, quantity=5, payload={"enchant": 1})
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from stackhash.core.identity import stable_name_of


@runtime_checkable
class StackLike(Protocol):
    """Accessors a strategy needs from an entity. All reads, no writes."""

    @property
    def kind(self) -> Any: ...

    @property
    def stable_kind_name(self) -> str | None: ...

    @property
    def quantity(self) -> int: ...

    @property
    def variant(self) -> int: ...

    @property
    def payload(self) -> Any: ...

    def is_empty(self) -> bool: ...


@dataclass(frozen=True, slots=True, eq=False)
class ItemStack:
    """A quantity of one kind, with a variant and optional payload.

    Has no value equality of its own: comparing stacks is the job of an
    EquivalenceStrategy. A stack with no kind or a non-positive quantity is
    empty, whatever its other fields hold.
    """

    kind: Any = None
    quantity: int = 1
    variant: int = 0  # 0 = undamaged
    payload: Mapping[str, Any] | None = None  # None = no payload, distinct from {}

    @property
    def stable_kind_name(self) -> str | None:
        return stable_name_of(self.kind)

    def is_empty(self) -> bool:
        return self.kind is None or self.quantity <= 0

    def __repr__(self) -> str:
        if self.is_empty():
            return "ItemStack(EMPTY)"
        parts = [repr(self.kind), f"quantity={self.quantity}"]
        if self.variant:
            parts.append(f"variant={self.variant}")
        if self.payload is not None:
            parts.append(f"payload={self.payload!r}")
        return f"ItemStack({', '.join(parts)})"


EMPTY = ItemStack(kind=None, quantity=0)
"""Canonical empty stack. Every empty stack is equivalent to it under every strategy."""
