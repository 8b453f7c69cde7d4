"""Core functionalities: stateless identity, stack, and strategy primitives.

Architecture Note:
    core/ contains pure, stateless functionalities. Strategies are immutable
    once built. For collections that hold stacks, see containers/.
"""

from stackhash.core.identity import (
    IdentityMode,
    Kind,
    KindRegistry,
    get_registry,
    kind_token,
    same_kind,
    stable_name_of,
)
from stackhash.core.stack import EMPTY, ItemStack, StackLike, is_absent_or_empty
from stackhash.core.strategy import (
    EMPTY_HASH,
    EquivalenceStrategy,
    Facet,
    FacetSet,
    IdentityConflictError,
    StrategyBuilder,
    StrategyKey,
    builder,
    comparing_all,
    comparing_all_but_count,
    comparing_all_persistent,
    comparing_kind_variant_count,
)

__all__ = [
    # Identity
    "Kind",
    "IdentityMode",
    "KindRegistry",
    "get_registry",
    "same_kind",
    "kind_token",
    "stable_name_of",
    # Stack
    "StackLike",
    "ItemStack",
    "EMPTY",
    "is_absent_or_empty",
    # Strategy
    "Facet",
    "FacetSet",
    "IdentityConflictError",
    "EMPTY_HASH",
    "EquivalenceStrategy",
    "StrategyBuilder",
    "StrategyKey",
    "builder",
    "comparing_all",
    "comparing_all_persistent",
    "comparing_all_but_count",
    "comparing_kind_variant_count",
]
