"""
subsidia.runtime.types - Shared type definitions for the helper runtime

This module contains the small set of definitions shared by the helpers
and the registry:
- K, V, T: type variables for mapping keys/values and sequence/set elements
- Pair: the (key, value) tuple produced by to_pairs
- HelperNotFound: raised when generated code asks for an unknown helper
- normalize_name: converts Latin camelCase method names to snake_case
- is_hashable: hashability check used by the sequence helpers
"""

import re
from typing import Any, Hashable, Tuple, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
T = TypeVar("T")

Pair = Tuple[K, V]

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


class HelperNotFound(LookupError):
    """Raised when no helper is registered for a family/method name."""

    def __init__(self, family: str, name: str):
        self.family = family
        self.name = name
        super().__init__(f"No collection helper {family}.{name}")


def normalize_name(name: str) -> str:
    """
    Normalize a Latin method name to a snake_case Python identifier.

    Method names arrive in the camelCase spelling used by source programs
    (e.g. "inLista", "indiceDe", "inveniIndicem"). Names that are already
    snake_case pass through unchanged, so the function is idempotent.

    Examples:
        normalize_name("inLista")       -> "in_lista"
        normalize_name("inveniIndicem") -> "inveni_indicem"
        normalize_name("conflata")      -> "conflata"
    """
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def is_hashable(value: Any) -> bool:
    """Return True if value can be used as a dict key / set element."""
    try:
        hash(value)
    except TypeError:
        return False
    return True
