"""The single operation the resolver exposes to build-graph generators."""
from __future__ import annotations

from collections.abc import Iterable

from featclosure.core.closure import ImplicationMap, resolve
from featclosure.core.normalize import normalize


def expand_features(implication_map: ImplicationMap, seeds: Iterable[str]) -> list[str]:
    """Return every flag enabled by ``seeds``, sorted and deduplicated.

    Parameters
    ----------
    implication_map:
        Mapping from flag name to the flag names it implies.  Never
        modified.
    seeds:
        Flags the caller wants enabled.

    Returns
    -------
    list[str]
        The sorted transitive closure of ``seeds``.

    Example
    -------
    ::

        features = {
            "default": ["tls"],
            "resolvable": ["feature1", "tls/extra_feature"],
            "feature1": [],
        }
        expand_features(features, ["default", "resolvable"])
        ['default', 'feature1', 'resolvable', 'tls', 'tls/extra_feature']
    """
    return normalize(resolve(implication_map, seeds))
