"""
Option — generic optional value and combinators over it.

Опциональное значение (Some / Nothing) и структурные преобразования.
"""

from src.core.option.combinators import and_then, compose, identity, map_option
from src.core.option.option import (
    Nothing,
    Option,
    Some,
    fold,
    from_nullable,
    is_nothing,
    is_some,
    to_nullable,
    unwrap_or,
)
from src.core.option.serialization import (
    KIND_NOTHING,
    KIND_SOME,
    option_from_dict,
    option_to_dict,
)

__all__ = [
    # Variants
    "Option",
    "Some",
    "Nothing",
    # Inspection
    "fold",
    "is_some",
    "is_nothing",
    "unwrap_or",
    "from_nullable",
    "to_nullable",
    # Combinators
    "map_option",
    "and_then",
    "identity",
    "compose",
    # Serialization
    "KIND_NOTHING",
    "KIND_SOME",
    "option_to_dict",
    "option_from_dict",
]
