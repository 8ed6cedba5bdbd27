"""Core domain logic: closure engine, normalizer and flag-name helpers.

Submodules in core/ perform no I/O and should not import from
manifest/ or cli/.
"""
from __future__ import annotations

from featclosure.core.closure import ClosureEngine, ImplicationMap, resolve
from featclosure.core.expand import expand_features
from featclosure.core.flags import QUALIFIER, is_qualified, local_flags, split_flag, unit_flags
from featclosure.core.normalize import normalize

__all__ = [
    "ClosureEngine",
    "ImplicationMap",
    "resolve",
    "normalize",
    "expand_features",
    "QUALIFIER",
    "is_qualified",
    "split_flag",
    "local_flags",
    "unit_flags",
]
