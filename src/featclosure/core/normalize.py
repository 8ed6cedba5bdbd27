"""Canonical ordering for resolved flag sets."""
from __future__ import annotations

from collections.abc import Iterable


def normalize(flags: Iterable[str]) -> list[str]:
    """Return ``flags`` deduplicated and sorted.

    ``str`` comparison is by code point, which matches the byte order of
    the UTF-8 encoding, so a name sorts before any longer name it is a
    prefix of (``"tls"`` < ``"tls/extra_feature"``).

    Parameters
    ----------
    flags:
        Any iterable of flag names, in any order.

    Returns
    -------
    list[str]
        A new list, independent of ``flags``.
    """
    return sorted(set(flags))
