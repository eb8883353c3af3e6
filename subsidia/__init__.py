"""
subsidia - Collection helpers for generated code

Pure functions over mappings, sets and sequences that return new
containers: merge/invert/select/omit for mappings, union/intersection/
difference for sets, and sort/unique/last_n/group_by/partition for
sequences, among others.

Usage:
    from subsidia import merge, group_by

    merge({"a": 1, "b": 2}, {"b": 3})       # => {"a": 1, "b": 3}
    group_by(["a", "bb", "c"], len)         # => {1: ["a", "c"], 2: ["bb"]}
"""

from subsidia import runtime
from subsidia.runtime import *  # noqa: F401,F403

__all__ = list(runtime.__all__)

__version__ = "0.1.0"
