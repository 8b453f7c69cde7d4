"""Stack functionality: entity protocol, reference stack, empty handling."""

from stackhash.core.stack.models import EMPTY, ItemStack, StackLike
from stackhash.core.stack.operations import is_absent_or_empty

__all__ = [
    "StackLike",
    "ItemStack",
    "EMPTY",
    "is_absent_or_empty",
]
