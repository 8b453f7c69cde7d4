"""stackhash: configurable equivalence and hash strategies for item stacks.

Usage:
    from stackhash import ItemStack, builder, comparing_all_but_count, get_registry

    iron = get_registry().register("minecraft:iron_ingot")
    a = ItemStack(iron, quantity=5)
    b = ItemStack(iron, quantity=3)

    strategy = comparing_all_but_count()
    strategy.equals(a, b)              # True
    strategy.hash(a) == strategy.hash(b)  # True

    custom = builder().compare_kind().compare_variant().build()
    totals = count_by([a, b])          # {a: 8}
"""

__version__ = "0.1.0"

# Containers
from stackhash.containers import (
    StrategyDict,
    StrategySet,
    count_by,
    deduplicate,
)

# Core primitives
from stackhash.core import (
    EMPTY,
    EMPTY_HASH,
    EquivalenceStrategy,
    Facet,
    FacetSet,
    IdentityConflictError,
    IdentityMode,
    ItemStack,
    Kind,
    KindRegistry,
    StackLike,
    StrategyBuilder,
    StrategyKey,
    builder,
    comparing_all,
    comparing_all_but_count,
    comparing_all_persistent,
    comparing_kind_variant_count,
    get_registry,
    is_absent_or_empty,
)

# Config
from stackhash.config import StrategySettings, get_settings

__all__ = [
    # Version
    "__version__",
    # Identity
    "Kind",
    "IdentityMode",
    "KindRegistry",
    "get_registry",
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
    # Containers
    "StrategyDict",
    "StrategySet",
    "count_by",
    "deduplicate",
    # Config
    "StrategySettings",
    "get_settings",
]
