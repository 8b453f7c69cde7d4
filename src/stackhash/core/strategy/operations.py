"""Per-facet comparison and hash tokens.

Each facet has a pair of pure functions over two non-empty stacks: an equality
test and a hash token. For every facet, equal values yield equal tokens.
Nothing here mutates or keeps a reference to a stack or its payload.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence, Set
from typing import Any

from stackhash.core.identity import IdentityMode, kind_token, same_kind
from stackhash.core.strategy.models import Facet


class _Excluded:
    """Placeholder hashed in place of a facet that is not selected."""

    __slots__ = ()

    def __hash__(self) -> int:
        return 0x5EED_C0DE

    def __repr__(self) -> str:
        return "EXCLUDED"


EXCLUDED = _Excluded()


def payload_token(value: Any) -> int:
    """Structural hash of a payload, consistent with ``==`` on the payload.

    Mappings hash independently of key order, sequences as tuples, sets as
    frozensets, and binary buffers as bytes. Unhashable leaves of unknown type
    fall back to their type name, which keeps equal values on equal hashes at
    the cost of collisions.
    """
    return hash(_freeze(value))


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return frozenset((_freeze(k), _freeze(v)) for k, v in value.items())
    if isinstance(value, (str, bytes)):
        return value
    # bytearray and memoryview compare equal to bytes with the same content
    if isinstance(value, bytearray):
        return bytes(value)
    if isinstance(value, memoryview):
        return value.tobytes()
    if isinstance(value, Sequence):
        return tuple(_freeze(v) for v in value)
    if isinstance(value, Set):
        return frozenset(_freeze(v) for v in value)
    try:
        hash(value)
    except TypeError:
        return type(value).__qualname__
    return value


def kind_equal(a: Any, b: Any) -> bool:
    return same_kind(a, b, IdentityMode.REFERENCE)


def stable_kind_name_equal(a: Any, b: Any) -> bool:
    return same_kind(a, b, IdentityMode.STABLE_NAME)


def quantity_equal(a: Any, b: Any) -> bool:
    return a.quantity == b.quantity


def variant_equal(a: Any, b: Any) -> bool:
    return a.variant == b.variant


def payload_equal(a: Any, b: Any) -> bool:
    pa, pb = a.payload, b.payload
    if pa is pb:
        return True
    if pa is None or pb is None:
        return False
    # Identity first keeps NaN-like payloads reflexive
    return bool(pa == pb)


FACET_EQUALS: dict[Facet, Callable[[Any, Any], bool]] = {
    Facet.KIND: kind_equal,
    Facet.STABLE_KIND_NAME: stable_kind_name_equal,
    Facet.QUANTITY: quantity_equal,
    Facet.VARIANT: variant_equal,
    Facet.PAYLOAD: payload_equal,
}
"""Equality test per facet, for two non-empty stacks."""


FACET_TOKENS: dict[Facet, Callable[[Any], int]] = {
    Facet.KIND: lambda s: kind_token(s, IdentityMode.REFERENCE),
    Facet.STABLE_KIND_NAME: lambda s: kind_token(s, IdentityMode.STABLE_NAME),
    Facet.QUANTITY: lambda s: hash(s.quantity),
    Facet.VARIANT: lambda s: hash(s.variant),
    Facet.PAYLOAD: lambda s: payload_token(s.payload),
}
"""Hash token per facet, for a non-empty stack."""
