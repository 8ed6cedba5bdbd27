"""feature-closure: transitive feature-flag expansion for build-graph generators.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import featclosure

    features = {
        "default": ["tls"],
        "resolvable": ["feature1", "tls/extra_feature"],
        "feature1": [],
    }

    # Every flag enabled by the seeds, sorted
    featclosure.expand_features(features, ["default", "resolvable"])
    ['default', 'feature1', 'resolvable', 'tls', 'tls/extra_feature']

    # Flags to forward to the "tls" dependency
    featclosure.unit_flags(featclosure.expand_features(features, ["resolvable"]), "tls")
    ['extra_feature']

    # Load a map from a manifest file
    features = featclosure.load_feature_map("Cargo.toml")

    featclosure.__version__
    '0.1.0'
"""
from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from featclosure.core.closure import ImplicationMap
    from featclosure.manifest.loader import FeatureMap


def expand_features(implication_map: "ImplicationMap", seeds: Iterable[str]) -> list[str]:
    """Return every flag enabled by ``seeds``, sorted and deduplicated.

    Parameters
    ----------
    implication_map:
        Mapping from flag name to the flag names it implies.
    seeds:
        Flags the caller wants enabled.

    Returns
    -------
    list[str]
        The seeds and everything they transitively imply.
    """
    from featclosure.core.expand import expand_features as _expand_features

    return _expand_features(implication_map, seeds)


def resolve(implication_map: "ImplicationMap", seeds: Iterable[str]) -> frozenset[str]:
    """Return the unordered transitive closure of ``seeds``."""
    from featclosure.core.closure import resolve as _resolve

    return _resolve(implication_map, seeds)


def normalize(flags: Iterable[str]) -> list[str]:
    """Return ``flags`` deduplicated and sorted."""
    from featclosure.core.normalize import normalize as _normalize

    return _normalize(flags)


def unit_flags(flags: Iterable[str], unit: str) -> list[str]:
    """Return the flags of ``flags`` qualified with ``unit``, prefix removed."""
    from featclosure.core.flags import unit_flags as _unit_flags

    return _unit_flags(flags, unit)


def load_feature_map(path: str | Path, fmt: str | None = None) -> "FeatureMap":
    """Read an implication map from a YAML, JSON or TOML file.

    Parameters
    ----------
    path:
        The file to read.
    fmt:
        Format name; inferred from the file suffix when omitted.

    Raises
    ------
    featclosure.manifest.FeatureMapError
        If the file cannot be read or is not a valid feature map.
    featclosure.manifest.LoaderNotFoundError
        If no loader handles ``fmt`` or the file suffix.
    """
    from featclosure.manifest.loader import load_feature_map as _load_feature_map

    return _load_feature_map(path, fmt)


__all__ = [
    "__version__",
    "expand_features",
    "resolve",
    "normalize",
    "unit_flags",
    "load_feature_map",
]
