"""Fuzz testing suite for the collection helpers."""

from .fuzz import Fuzzer, FuzzResult, FuzzRunner, random_key, random_value, run_suite

__all__ = ["Fuzzer", "FuzzResult", "FuzzRunner", "random_key", "random_value", "run_suite"]
