"""Feature map loading.

Reads implication maps from YAML, JSON and TOML documents and hands
read-only snapshots to the closure engine.
"""
from __future__ import annotations

from featclosure.manifest.errors import (
    FeatureMapError,
    LoaderAlreadyRegisteredError,
    LoaderNotFoundError,
)
from featclosure.manifest.loader import (
    FeatureMap,
    FeatureMapLoader,
    JsonLoader,
    TomlLoader,
    YamlLoader,
    coerce_feature_map,
    load_feature_map,
    parse_feature_map,
)
from featclosure.manifest.registry import ENTRYPOINT_GROUP, LoaderRegistry, loader_registry

__all__ = [
    "FeatureMap",
    "FeatureMapError",
    "FeatureMapLoader",
    "JsonLoader",
    "TomlLoader",
    "YamlLoader",
    "LoaderAlreadyRegisteredError",
    "LoaderNotFoundError",
    "LoaderRegistry",
    "loader_registry",
    "ENTRYPOINT_GROUP",
    "coerce_feature_map",
    "load_feature_map",
    "parse_feature_map",
]
