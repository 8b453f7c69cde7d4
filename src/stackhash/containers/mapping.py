"""Hash collections keyed by an external strategy.

Built-in dict and set always use a key's own __hash__ and __eq__. These
collections use an EquivalenceStrategy instead, so which stacks share an entry
is decided by the caller's facet selection.

Usage:
    totals = StrategyDict(comparing_all_but_count())
    totals[ItemStack(iron, 5)] = 5
    totals[ItemStack(iron, 3)]  # 5: same entry, quantity ignored

    seen = StrategySet(comparing_all(), stacks)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableMapping, MutableSet
from typing import Any, TypeVar

from stackhash.core.strategy import EquivalenceStrategy, StrategyKey

K = TypeVar("K")
V = TypeVar("V")


class StrategyDict(MutableMapping[K, V]):
    """Mapping whose keys are compared with an EquivalenceStrategy.

    Overwriting an existing entry keeps the first-inserted key and replaces
    the value. Iteration yields original keys in insertion order.
    Not thread-safe for mutation.

    Args:
        strategy: Strategy deciding key equivalence.
        items: Optional mapping or iterable of (key, value) pairs.
    """

    def __init__(
        self, strategy: EquivalenceStrategy, items: Any = ()
    ) -> None:
        self._strategy = strategy
        self._data: dict[StrategyKey, tuple[K, V]] = {}
        self.update(items)

    @property
    def strategy(self) -> EquivalenceStrategy:
        return self._strategy

    def __getitem__(self, key: K) -> V:
        try:
            return self._data[self._strategy.key(key)][1]
        except KeyError:
            raise KeyError(key) from None

    def __setitem__(self, key: K, value: V) -> None:
        wrapped = self._strategy.key(key)
        existing = self._data.get(wrapped)
        self._data[wrapped] = (key if existing is None else existing[0], value)

    def __delitem__(self, key: K) -> None:
        try:
            del self._data[self._strategy.key(key)]
        except KeyError:
            raise KeyError(key) from None

    def __iter__(self) -> Iterator[K]:
        return (k for k, _ in self._data.values())

    def __len__(self) -> int:
        return len(self._data)

    def representative(self, key: K) -> K:
        """Return the stored key equivalent to ``key``.

        Raises:
            KeyError: If no equivalent key is stored.
        """
        try:
            return self._data[self._strategy.key(key)][0]
        except KeyError:
            raise KeyError(key) from None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StrategyDict):
            return NotImplemented
        if self._strategy != other._strategy or len(self) != len(other):
            return False
        return all(
            wrapped in other._data and other._data[wrapped][1] == value
            for wrapped, (_, value) in self._data.items()
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {v!r}" for k, v in self._data.values())
        return f"StrategyDict({self._strategy.facets!r}, {{{body}}})"


class StrategySet(MutableSet[K]):
    """Set whose members are compared with an EquivalenceStrategy.

    Adding an equivalent member keeps the first one. Iteration is in
    insertion order. Set operators return StrategySets with the same strategy.
    Not thread-safe for mutation.

    Args:
        strategy: Strategy deciding member equivalence.
        items: Optional initial members.
    """

    def __init__(self, strategy: EquivalenceStrategy, items: Iterable[K] = ()) -> None:
        self._strategy = strategy
        self._data: dict[StrategyKey, K] = {}
        for item in items:
            self.add(item)

    @property
    def strategy(self) -> EquivalenceStrategy:
        return self._strategy

    def _from_iterable(self, it: Iterable[K]) -> StrategySet[K]:
        return StrategySet(self._strategy, it)

    def __contains__(self, item: object) -> bool:
        return self._strategy.key(item) in self._data

    def __iter__(self) -> Iterator[K]:
        return iter(self._data.values())

    def __len__(self) -> int:
        return len(self._data)

    def add(self, value: K) -> None:
        self._data.setdefault(self._strategy.key(value), value)

    def discard(self, value: K) -> None:
        self._data.pop(self._strategy.key(value), None)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StrategySet):
            return NotImplemented
        if self._strategy != other._strategy:
            return False
        return super().__eq__(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        body = ", ".join(repr(v) for v in self._data.values())
        return f"StrategySet({self._strategy.facets!r}, {{{body}}})"
