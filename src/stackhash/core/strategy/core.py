"""Strategy builder, equivalence strategy, and presets.

Usage:
    # Presets
    strategy = comparing_all_but_count()
    strategy.equals(ItemStack(iron, 5), ItemStack(iron, 3))  # True

    # Custom selection
    strategy = builder().compare_kind().compare_variant().build()

    # Survive reloads by comparing kinds by name instead of reference
    strategy = comparing_all_persistent()

    # Use as a key in a plain dict
    totals = {strategy.key(stack): 0}
"""

from __future__ import annotations

import warnings
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Any

from stackhash.config import StrategySettings, get_settings
from stackhash.core.stack import is_absent_or_empty
from stackhash.core.strategy.models import Facet, FacetSet, IdentityConflictError
from stackhash.core.strategy.operations import EXCLUDED, FACET_EQUALS, FACET_TOKENS

EMPTY_HASH = 0
"""Hash of every absent or empty stack, under every strategy."""


@dataclass(frozen=True, slots=True)
class EquivalenceStrategy:
    """Immutable hash and equality over the selected facets of stacks.

    Holds only its FacetSet. Safe for concurrent use without locking.

    Invariants:
        - equals is reflexive, symmetric and transitive.
        - equals(a, b) implies hash(a) == hash(b).
        - All absent or empty stacks form one class hashing to EMPTY_HASH.
    """

    facets: FacetSet
    _equals: tuple[Callable[[Any, Any], bool], ...] = field(
        init=False, repr=False, compare=False
    )
    _tokens: tuple[Callable[[Any], int] | None, ...] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        # Excluded facets get no token function, so their values are never read
        selected = self.facets.selected()
        object.__setattr__(
            self, "_equals", tuple(FACET_EQUALS[f] for f in Facet if f in selected)
        )
        object.__setattr__(
            self, "_tokens", tuple(FACET_TOKENS[f] if f in selected else None for f in Facet)
        )

    def hash(self, stack: Any) -> int:
        """Hash ``stack`` over the selected facets.

        Args:
            stack: Any StackLike, or None.

        Returns:
            EMPTY_HASH for absent or empty stacks, otherwise a hash of the
            selected facet values with a fixed placeholder for each excluded one.
        """
        if is_absent_or_empty(stack):
            return EMPTY_HASH
        return hash(tuple(EXCLUDED if token is None else token(stack) for token in self._tokens))

    def equals(self, a: Any, b: Any) -> bool:
        """Check ``a`` and ``b`` for equivalence over the selected facets.

        Absent and empty stacks are equal to each other and to nothing else.
        Otherwise every selected facet must match; excluded facets are ignored.

        Args:
            a: Any StackLike, or None.
            b: Any StackLike, or None.

        Returns:
            True if the stacks are equivalent under this strategy.
        """
        if is_absent_or_empty(a):
            return is_absent_or_empty(b)
        if is_absent_or_empty(b):
            return False
        return all(eq(a, b) for eq in self._equals)

    def __call__(self, a: Any, b: Any) -> bool:
        return self.equals(a, b)

    def key(self, stack: Any) -> StrategyKey:
        """Wrap ``stack`` so plain dicts and sets compare it with this strategy."""
        return StrategyKey(stack, self)


@dataclass(frozen=True, slots=True, eq=False)
class StrategyKey:
    """Hashable handle delegating hash and equality to a strategy.

    Keys made by different strategies never compare equal.
    """

    stack: Any
    strategy: EquivalenceStrategy

    def __hash__(self) -> int:
        return self.strategy.hash(self.stack)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StrategyKey):
            return NotImplemented
        return self.strategy == other.strategy and self.strategy.equals(self.stack, other.stack)


class StrategyBuilder:
    """Mutable staging object for an EquivalenceStrategy.

    Each setter overwrites its facet and returns the builder, so calls chain.
    Single owner only: do not configure one builder from several threads.

    Args:
        settings: Settings consulted by build(). Defaults to get_settings().
    """

    __slots__ = ("_facets", "_settings")

    def __init__(self, settings: StrategySettings | None = None) -> None:
        self._facets = FacetSet()
        self._settings = settings

    @classmethod
    def from_facets(
        cls, facets: FacetSet, settings: StrategySettings | None = None
    ) -> StrategyBuilder:
        """Start a builder from an existing selection."""
        new = cls(settings)
        new._facets = facets
        return new

    @property
    def facets(self) -> FacetSet:
        """Current selection snapshot."""
        return self._facets

    def compare_kind(self, choice: bool = True) -> StrategyBuilder:
        """Whether kinds must be the same object.

        Args:
            choice: True to consider this facet, False to ignore it.

        Returns:
            This builder.
        """
        self._facets = replace(self._facets, kind=choice)
        return self

    def compare_stable_kind_name(self, choice: bool = True) -> StrategyBuilder:
        """Whether kinds must share a durable name, so equality survives reloads.

        Args:
            choice: True to consider this facet, False to ignore it.

        Returns:
            This builder.
        """
        self._facets = replace(self._facets, stable_kind_name=choice)
        return self

    def compare_quantity(self, choice: bool = True) -> StrategyBuilder:
        """Whether stack quantities must match."""
        self._facets = replace(self._facets, quantity=choice)
        return self

    def compare_variant(self, choice: bool = True) -> StrategyBuilder:
        """Whether variants (damage values) must match."""
        self._facets = replace(self._facets, variant=choice)
        return self

    def compare_payload(self, choice: bool = True) -> StrategyBuilder:
        """Whether payloads must be equal by value."""
        self._facets = replace(self._facets, payload=choice)
        return self

    def build(self) -> EquivalenceStrategy:
        """Snapshot the current selection into a strategy.

        When both identity facets are selected, both must agree for stacks to
        be equal. Settings decide whether that is reported.

        Returns:
            New EquivalenceStrategy over the current FacetSet.

        Raises:
            IdentityConflictError: If both identity facets are selected and
                settings.identity_conflict is "error".
        """
        facets = self._facets
        if facets.has_identity_conflict:
            policy = (self._settings or get_settings()).identity_conflict
            message = (
                "Both compare_kind and compare_stable_kind_name are selected; "
                "stacks will need the same kind object and the same kind name."
            )
            if policy == "error":
                raise IdentityConflictError(message)
            if policy == "warn":
                warnings.warn(message, stacklevel=2)
        return EquivalenceStrategy(facets)

    def __repr__(self) -> str:
        return f"StrategyBuilder({self._facets!r})"


def builder(settings: StrategySettings | None = None) -> StrategyBuilder:
    """Start configuring a custom strategy."""
    return StrategyBuilder(settings)


def comparing_all() -> EquivalenceStrategy:
    """Compare kind by reference, quantity, variant and payload."""
    return builder().compare_kind().compare_quantity().compare_variant().compare_payload().build()


def comparing_all_persistent() -> EquivalenceStrategy:
    """Compare everything, using the kind's durable name instead of its reference.

    Equality and hashing then survive reloads that replace kind objects.
    """
    return (
        builder()
        .compare_stable_kind_name()
        .compare_quantity()
        .compare_variant()
        .compare_payload()
        .build()
    )


def comparing_all_but_count() -> EquivalenceStrategy:
    """Compare everything except quantity."""
    return builder().compare_kind().compare_variant().compare_payload().build()


def comparing_kind_variant_count() -> EquivalenceStrategy:
    """Compare kind by reference, variant and quantity, ignoring payload."""
    return builder().compare_kind().compare_variant().compare_quantity().build()
