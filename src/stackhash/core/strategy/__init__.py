"""Strategy functionality: facet selection, builder, strategies, and presets."""

from stackhash.core.strategy.core import (
    EMPTY_HASH,
    EquivalenceStrategy,
    StrategyBuilder,
    StrategyKey,
    builder,
    comparing_all,
    comparing_all_but_count,
    comparing_all_persistent,
    comparing_kind_variant_count,
)
from stackhash.core.strategy.models import Facet, FacetSet, IdentityConflictError
from stackhash.core.strategy.operations import EXCLUDED, payload_token

__all__ = [
    # Models
    "Facet",
    "FacetSet",
    "IdentityConflictError",
    # Operations
    "EXCLUDED",
    "payload_token",
    # Core
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
