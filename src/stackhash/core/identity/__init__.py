"""Kind identity functionality: reference and durable-name identity."""

from stackhash.core.identity.core import (
    KindRegistry,
    get_registry,
    kind_token,
    same_kind,
    stable_name_of,
)
from stackhash.core.identity.models import IdentityMode, Kind

__all__ = [
    # Models
    "Kind",
    "IdentityMode",
    # Core
    "KindRegistry",
    "get_registry",
    "same_kind",
    "kind_token",
    "stable_name_of",
]
