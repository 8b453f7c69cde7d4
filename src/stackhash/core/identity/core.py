"""Kind registry and identity comparison.

Usage:
    registry = KindRegistry()
    iron = registry.register("minecraft:iron_ingot")
    assert registry.register("minecraft:iron_ingot") is iron

    # A fresh registry models a reload: same names, new objects
    reloaded = KindRegistry().register("minecraft:iron_ingot")
    before, after = ItemStack(iron), ItemStack(reloaded)
    assert not same_kind(before, after, IdentityMode.REFERENCE)
    assert same_kind(before, after, IdentityMode.STABLE_NAME)
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from typing import Any

from stackhash.core.identity.models import IdentityMode, Kind

_NAME_PATTERN = re.compile(r"^[a-z0-9_.-]+:[a-z0-9_./-]+$")


def stable_name_of(kind: Any) -> str | None:
    """Durable name of a kind, or None if it has none.

    Accepts any object exposing a ``name`` attribute, not only Kind.
    """
    name = getattr(kind, "name", None)
    return name if isinstance(name, str) else None


def same_kind(a: Any, b: Any, mode: IdentityMode) -> bool:
    """Compare the kinds of two stacks under the given identity mode.

    Args:
        a: First StackLike.
        b: Second StackLike.
        mode: REFERENCE compares ``kind`` with ``is``, STABLE_NAME compares
            ``stable_kind_name`` by value (absent names equal each other only).

    Returns:
        True if the stacks have the same kind under ``mode``.
    """
    if mode is IdentityMode.REFERENCE:
        return a.kind is b.kind
    return a.stable_kind_name == b.stable_kind_name


def kind_token(stack: Any, mode: IdentityMode) -> int:
    """Hash token for a stack's kind consistent with :func:`same_kind` under ``mode``."""
    if mode is IdentityMode.REFERENCE:
        return id(stack.kind)
    return hash(stack.stable_kind_name)


class KindRegistry:
    """Process-local registry mapping durable names to Kind objects.

    One Kind object per name per registry. A new registry hands out new
    objects for the same names, so reference identity does not survive it.
    """

    def __init__(self) -> None:
        """Initialize empty kind registry."""
        self._by_name: dict[str, Kind] = {}

    def register(self, name: str) -> Kind:
        """Register a kind name and return its Kind.

        Args:
            name: Durable name in ``namespace:path`` form.

        Returns:
            The Kind for ``name``; the existing one if already registered.

        Raises:
            ValueError: If ``name`` is not of the form ``namespace:path``.
        """
        if name in self._by_name:
            return self._by_name[name]
        if not _NAME_PATTERN.match(name):
            raise ValueError(f"Invalid kind name {name!r}: expected 'namespace:path'")
        kind = Kind(name)
        self._by_name[name] = kind
        return kind

    def get(self, name: str) -> Kind | None:
        """Get the Kind registered under ``name``, if any."""
        return self._by_name.get(name)

    def is_registered(self, kind: Kind) -> bool:
        """Check if this exact Kind object came from this registry."""
        return kind.name is not None and self._by_name.get(kind.name) is kind

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[Kind]:
        return iter(self._by_name.values())

    def __len__(self) -> int:
        return len(self._by_name)


# Module-level registry instance
_registry = KindRegistry()


def get_registry() -> KindRegistry:
    """Access the global kind registry.

    Returns:
        The process-local KindRegistry instance.
    """
    return _registry
