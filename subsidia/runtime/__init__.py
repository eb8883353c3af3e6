"""
subsidia.runtime - The collection helper runtime

This package contains everything generated code needs to call the
collection helpers. It has no dependencies outside the standard library.

Submodules:
- types: Shared definitions (type variables, HelperNotFound, normalize_name)
- core: The helper functions (mapping, set and sequence operations)
- utils: Helper registry (resolve_helper, setup_runtime_env)
"""

# Re-export core functions
from subsidia.runtime.core import (
    append,
    chunk,
    difference,
    find_index,
    group_by,
    index_of,
    intersection,
    invert,
    is_subset,
    is_superset,
    join,
    last_n,
    map_keys,
    map_values,
    merge,
    omit,
    partition,
    prepend,
    reverse,
    select,
    sort,
    symmetric_difference,
    to_list,
    to_pairs,
    union,
    unique,
)
from subsidia.runtime.types import HelperNotFound, normalize_name
from subsidia.runtime.utils import HELPERS, resolve_helper, setup_runtime_env

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
    # Registry
    "HELPERS",
    "HelperNotFound",
    "normalize_name",
    "resolve_helper",
    "setup_runtime_env",
]
