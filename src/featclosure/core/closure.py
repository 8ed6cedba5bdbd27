"""Closure engine: transitive expansion of feature-flag implications.

Given an implication map (flag -> flags it enables) and a set of seed
flags, compute every flag reachable from the seeds.  Seeds are always
part of the result.  Names that are not keys of the map, including
qualified ``unit/flag`` references, are leaves.

Usage
-----
::

    from featclosure.core.closure import ClosureEngine, resolve

    engine = ClosureEngine({"default": ["tls"], "tls": []})
    engine.resolve(["default"])
    frozenset({'default', 'tls'})

    resolve({"a": ["b"], "b": ["a"]}, ["a"])
    frozenset({'a', 'b'})
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType

logger = logging.getLogger(__name__)

ImplicationMap = Mapping[str, Sequence[str]]


class ClosureEngine:
    """Resolve seed sets against a fixed implication map.

    The map is copied into a read-only snapshot on construction, so the
    caller may keep mutating its own dict and a single engine can be
    shared between threads.

    Parameters
    ----------
    implication_map:
        Mapping from a plain flag name to the flag names it implies.
    """

    def __init__(self, implication_map: ImplicationMap) -> None:
        self._implications: Mapping[str, tuple[str, ...]] = MappingProxyType(
            {flag: tuple(implied) for flag, implied in implication_map.items()}
        )

    @property
    def implications(self) -> Mapping[str, tuple[str, ...]]:
        """Return the read-only implication snapshot."""
        return self._implications

    def resolve(self, seeds: Iterable[str]) -> frozenset[str]:
        """Return every flag reachable from ``seeds``.

        Parameters
        ----------
        seeds:
            Initially enabled flag names.  May be empty, contain
            duplicates or name flags the map does not know.

        Returns
        -------
        frozenset[str]
            The seeds plus everything they imply, directly or through
            any number of intermediate flags.
        """
        frontier: list[str] = list(seeds)
        visited: set[str] = set()
        seed_count = len(frontier)

        while frontier:
            flag = frontier.pop()
            if flag in visited:
                continue
            visited.add(flag)
            # Unknown names and unit/flag references have no entry.
            frontier.extend(self._implications.get(flag, ()))

        logger.debug(
            "Resolved %d seed flag(s) to %d flag(s) over %d implication entries",
            seed_count,
            len(visited),
            len(self._implications),
        )
        return frozenset(visited)

    def __repr__(self) -> str:
        return f"ClosureEngine(flags={len(self._implications)})"


def resolve(implication_map: ImplicationMap, seeds: Iterable[str]) -> frozenset[str]:
    """Convenience function: resolve ``seeds`` against ``implication_map``.

    Parameters
    ----------
    implication_map:
        Mapping from flag name to the flag names it implies.
    seeds:
        Initially enabled flag names.

    Returns
    -------
    frozenset[str]
        The transitive closure of ``seeds``.
    """
    return ClosureEngine(implication_map).resolve(seeds)
