"""Helpers for plain and qualified flag names.

A qualified flag ``unit/flag`` names a flag on another unit.  The
closure engine treats it as an opaque leaf; these helpers let callers
split a resolved set into the unit's own flags and the flags it must
forward to each dependency.
"""
from __future__ import annotations

from collections.abc import Iterable

QUALIFIER: str = "/"


def is_qualified(name: str) -> bool:
    """Return True if ``name`` has the ``unit/flag`` form."""
    return QUALIFIER in name


def split_flag(name: str) -> tuple[str | None, str]:
    """Split a flag name into ``(unit, flag)``.

    Plain names yield ``(None, name)``.  Only the first separator is
    significant, so ``"a/b/c"`` yields ``("a", "b/c")``.
    """
    unit, sep, flag = name.partition(QUALIFIER)
    if not sep:
        return None, name
    return unit, flag


def local_flags(flags: Iterable[str]) -> list[str]:
    """Return the plain (unqualified) flags of ``flags``, sorted."""
    return sorted({name for name in flags if not is_qualified(name)})


def unit_flags(flags: Iterable[str], unit: str) -> list[str]:
    """Return the flags qualified with ``unit``, without the unit prefix.

    Parameters
    ----------
    flags:
        A resolved flag set, typically the output of ``expand_features``.
    unit:
        The dependency name on the left of the separator.

    Returns
    -------
    list[str]
        Sorted, deduplicated flag parts.

    Example
    -------
    ::

        unit_flags(["default", "tls/extra_feature", "tls/alpn"], "tls")
        ['alpn', 'extra_feature']
    """
    selected: set[str] = set()
    for name in flags:
        owner, flag = split_flag(name)
        if owner == unit:
            selected.add(flag)
    return sorted(selected)
