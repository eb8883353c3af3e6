"""
subsidia.runtime.core - Collection helper functions

This module contains the collection helpers that generated code calls for
operations that are awkward to express inline. Every helper is pure: it
reads its arguments, never mutates them, and returns a freshly allocated
container owned by the caller. Elements are placed into the new container
by reference.

Categories:
- Mapping operations (tabula): merge, invert, select, omit, to_pairs, ...
- Set operations (copia): union, intersection, difference, ...
- Sequence operations (lista): append, prepend, sort, unique, last_n, ...

Ordering notes:
- invert and map_keys keep one entry when several map to the same key.
  Which one survives is unspecified; do not depend on it.
- to_pairs follows the mapping's own iteration order and to_list follows
  the set's iteration order. Neither is a sorted order.
"""

import logging
from typing import Any, Callable, Iterable, Mapping, Optional

from subsidia.runtime.types import K, Pair, T, V, is_hashable

logger = logging.getLogger(__name__)

# =============================================================================
# Mapping Operations (tabula)
# =============================================================================


def merge(a: Mapping[K, V], b: Mapping[K, V]) -> dict[K, V]:
    """Return a new dict with the entries of b applied on top of a.

    On a key collision the value from b wins.
    """
    result = dict(a)
    result.update(b)
    return result


def invert(m: Mapping[K, V]) -> dict[V, K]:
    """
    Return a new dict mapping each value of m to its key.

    Values must be hashable. If several keys share a value only one of them
    is kept; which key survives is unspecified.
    """
    result = {}
    for k, v in m.items():
        if v in result:
            logger.debug("invert: value %r is shared by several keys", v)
        result[v] = k
    return result


def select(m: Mapping[K, V], keys: Iterable[K]) -> dict[K, V]:
    """Return the entries of m whose key appears in keys.

    Keys that m does not contain are ignored.
    """
    key_set = set(keys)
    return {k: v for k, v in m.items() if k in key_set}


def omit(m: Mapping[K, V], keys: Iterable[K]) -> dict[K, V]:
    """Return the entries of m whose key does not appear in keys.

    Keys that m does not contain are ignored.
    """
    key_set = set(keys)
    return {k: v for k, v in m.items() if k not in key_set}


def to_pairs(m: Mapping[K, V]) -> list[Pair]:
    """Return the entries of m as a list of (key, value) tuples."""
    return list(m.items())


def map_values(m: Mapping[K, V], f: Callable[[V], Any]) -> dict:
    """Return a new dict with f applied to every value."""
    return {k: f(v) for k, v in m.items()}


def map_keys(m: Mapping[K, V], f: Callable[[K], Any]) -> dict:
    """
    Return a new dict with f applied to every key.

    If f sends two keys to the same result only one entry is kept, with the
    same unspecified-survivor rule as invert.
    """
    result = {}
    for k, v in m.items():
        new_key = f(k)
        if new_key in result:
            logger.debug("map_keys: keys collide on %r", new_key)
        result[new_key] = v
    return result


# =============================================================================
# Set Operations (copia)
# =============================================================================


def union(a: Iterable[T], b: Iterable[T]) -> set:
    """Return the elements present in a or b."""
    result = set(a)
    result.update(b)
    return result


def intersection(a: Iterable[T], b: Iterable[T]) -> set:
    """Return the elements present in both a and b."""
    return set(a).intersection(b)


def difference(a: Iterable[T], b: Iterable[T]) -> set:
    """Return the elements of a that are not in b."""
    return set(a).difference(b)


def symmetric_difference(a: Iterable[T], b: Iterable[T]) -> set:
    """Return the elements present in exactly one of a and b."""
    return set(a).symmetric_difference(b)


def to_list(s: Iterable[T]) -> list:
    """Return the elements of s as a list (order unspecified)."""
    return list(s)


def is_subset(a: Iterable[T], b: Iterable[T]) -> bool:
    """Return True if every element of a is in b."""
    return set(a).issubset(b)


def is_superset(a: Iterable[T], b: Iterable[T]) -> bool:
    """Return True if every element of b is in a."""
    return is_subset(b, a)


# =============================================================================
# Sequence Operations (lista)
# =============================================================================


def append(seq, elem):
    """Return a new list with elem added at the end."""
    result = list(seq)
    result.append(elem)
    return result


def prepend(seq, elem):
    """Return a new list with elem added at the start."""
    result = [elem]
    result.extend(seq)
    return result


def sort(seq):
    """Return a new list in ascending order.

    The sort is stable: equal elements keep their relative input order.
    """
    return sorted(seq)


def reverse(seq):
    """Return a new list with the elements in reverse order."""
    result = list(seq)
    result.reverse()
    return result


def unique(seq):
    """
    Return a new list without duplicates, keeping first occurrences in order.

    Hashable elements are tracked in a set. Unhashable elements (lists,
    dicts, ...) fall back to an equality scan. The two groups are also
    checked against each other, since a set can equal a frozenset.
    """
    seen = set()
    seen_unhashable = []
    result = []
    for x in seq:
        if is_hashable(x):
            if x in seen or x in seen_unhashable:
                continue
            seen.add(x)
        else:
            if x in seen_unhashable or any(x == y for y in seen):
                continue
            seen_unhashable.append(x)
        result.append(x)
    return result


def last_n(seq, n: int):
    """
    Return the final n elements of seq in their original order.

    If n is at least the length of seq the whole sequence is returned;
    last_n(seq, 0) is empty.
    """
    if n < 0:
        raise ValueError(f"last_n requires a non-negative count, got {n}")
    items = list(seq)
    start = max(len(items) - n, 0)
    return items[start:]


def group_by(seq, key_fn):
    """Return a dict of lists, grouping the elements of seq by key_fn(x).

    Each list keeps the input order of its elements.
    """
    result = {}
    for x in seq:
        key = key_fn(x)
        if key not in result:
            result[key] = []
        result[key].append(x)
    return result


def partition(seq, pred):
    """Return a tuple of (elements passing pred, elements failing pred)."""
    truthy = []
    falsy = []
    for x in seq:
        if pred(x):
            truthy.append(x)
        else:
            falsy.append(x)
    return (truthy, falsy)


def index_of(seq, elem) -> int:
    """Return the index of the first element equal to elem, or -1."""
    for i, x in enumerate(seq):
        if x == elem:
            return i
    return -1


def find_index(seq, pred) -> int:
    """Return the index of the first element satisfying pred, or -1."""
    for i, x in enumerate(seq):
        if pred(x):
            return i
    return -1


def join(seq, sep: Optional[str] = None) -> str:
    """Join the elements of seq into a string.

    Non-string elements are converted with str(). The separator defaults
    to the empty string.
    """
    if sep is None:
        sep = ""
    return sep.join(x if isinstance(x, str) else str(x) for x in seq)


def chunk(seq, n: int):
    """Split seq into consecutive lists of n elements (the last may be shorter)."""
    if n <= 0:
        raise ValueError(f"chunk requires a positive size, got {n}")
    items = list(seq)
    return [items[i : i + n] for i in range(0, len(items), n)]


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Mapping operations
    "merge",
    "invert",
    "select",
    "omit",
    "to_pairs",
    "map_values",
    "map_keys",
    # Set operations
    "union",
    "intersection",
    "difference",
    "symmetric_difference",
    "to_list",
    "is_subset",
    "is_superset",
    # Sequence operations
    "append",
    "prepend",
    "sort",
    "reverse",
    "unique",
    "last_n",
    "group_by",
    "partition",
    "index_of",
    "find_index",
    "join",
    "chunk",
]
