"""Load implication maps from YAML, JSON and TOML documents.

Two document shapes are accepted:

* a bare mapping of flag name to implied flags::

      default: [tls]
      resolvable: [feature1, tls/extra_feature]

* a manifest with a top-level ``features`` table, as in ``Cargo.toml``::

      [features]
      default = ["tls"]

The result is a ``FeatureMap``: a read-only mapping of ``str`` to
``tuple[str, ...]`` that can be handed straight to the closure engine.
Referenced flags are not checked for existence.
"""
from __future__ import annotations

import json
import logging
import tomllib
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from featclosure.manifest.errors import FeatureMapError
from featclosure.manifest.registry import loader_registry

logger = logging.getLogger(__name__)

FeatureMap = Mapping[str, tuple[str, ...]]

_FEATURES_KEY = "features"


def coerce_feature_map(data: Any, source: str = "<string>") -> FeatureMap:
    """Validate decoded document ``data`` and freeze it into a ``FeatureMap``.

    Parameters
    ----------
    data:
        The decoded document.  ``None`` (an empty YAML document) is
        treated as an empty map.
    source:
        Used in error messages only.

    Raises
    ------
    FeatureMapError
        If the document is not a mapping, a key is not a string, or a
        value is not a string, a list of strings, or null.
    """
    if data is None:
        return MappingProxyType({})
    if not isinstance(data, Mapping):
        raise FeatureMapError(
            f"expected a mapping of flag names, got {type(data).__name__}", source
        )
    table = data.get(_FEATURES_KEY)
    if isinstance(table, Mapping):
        data = table

    implications: dict[str, tuple[str, ...]] = {}
    for flag, implied in data.items():
        if not isinstance(flag, str):
            raise FeatureMapError(f"flag name {flag!r} is not a string", source)
        implications[flag] = _coerce_implied(flag, implied, source)
    logger.debug("Loaded %d flag(s) from %s", len(implications), source)
    return MappingProxyType(implications)


def _coerce_implied(flag: str, implied: Any, source: str) -> tuple[str, ...]:
    if implied is None:
        return ()
    if isinstance(implied, str):
        return (implied,)
    if not isinstance(implied, (list, tuple)):
        raise FeatureMapError(
            f"flag {flag!r} must map to a list of flag names, "
            f"got {type(implied).__name__}",
            source,
        )
    for name in implied:
        if not isinstance(name, str):
            raise FeatureMapError(
                f"flag {flag!r} implies {name!r}, which is not a string", source
            )
    return tuple(implied)


# ---------------------------------------------------------------------------
# Loader base class
# ---------------------------------------------------------------------------


class FeatureMapLoader(ABC):
    """Decode one document format into a ``FeatureMap``.

    Subclasses implement ``load_data`` and translate their library's
    decode errors into ``FeatureMapError``.
    """

    @abstractmethod
    def load_data(self, text: str, source: str) -> Any:
        """Decode ``text`` into plain Python data."""

    def load(self, text: str, source: str = "<string>") -> FeatureMap:
        """Decode and validate ``text``."""
        return coerce_feature_map(self.load_data(text, source), source)


@loader_registry.register("yaml", suffixes=(".yaml", ".yml"))
class YamlLoader(FeatureMapLoader):
    def load_data(self, text: str, source: str) -> Any:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise FeatureMapError(f"invalid YAML: {exc}", source) from exc


@loader_registry.register("json", suffixes=(".json",))
class JsonLoader(FeatureMapLoader):
    def load_data(self, text: str, source: str) -> Any:
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise FeatureMapError(f"invalid JSON: {exc}", source) from exc


@loader_registry.register("toml", suffixes=(".toml",))
class TomlLoader(FeatureMapLoader):
    def load_data(self, text: str, source: str) -> Any:
        try:
            return tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise FeatureMapError(f"invalid TOML: {exc}", source) from exc


# ---------------------------------------------------------------------------
# Convenience functions
# ---------------------------------------------------------------------------


def parse_feature_map(text: str, fmt: str = "yaml", source: str = "<string>") -> FeatureMap:
    """Decode ``text`` with the loader registered as ``fmt``.

    Raises
    ------
    LoaderNotFoundError
        If ``fmt`` is not a registered format.
    FeatureMapError
        If the text cannot be decoded or has the wrong shape.
    """
    loader_cls = loader_registry.get(fmt)
    return loader_cls().load(text, source)


def load_feature_map(path: str | Path, fmt: str | None = None) -> FeatureMap:
    """Read a feature map from ``path``.

    Parameters
    ----------
    path:
        File to read.
    fmt:
        Registered format name.  When omitted, the loader is chosen by
        the file suffix.

    Raises
    ------
    LoaderNotFoundError
        If no loader matches ``fmt`` or the file suffix.
    FeatureMapError
        If the file cannot be read, decoded or shaped into a map.
    """
    path = Path(path)
    loader_cls = loader_registry.get(fmt) if fmt else loader_registry.for_suffix(path.suffix)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise FeatureMapError(f"cannot read file: {exc.strerror or exc}", str(path)) from exc
    except UnicodeDecodeError as exc:
        raise FeatureMapError(f"cannot decode file as UTF-8: {exc}", str(path)) from exc
    return loader_cls().load(text, str(path))
