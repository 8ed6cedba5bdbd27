"""Registry of feature map loaders.

Built-in loaders register themselves with the module-level
``loader_registry`` at import time.  Third-party packages can add
formats by declaring entry-points in their own ``pyproject.toml``
under the ``featclosure.loaders`` group.

Example
-------
::

    from featclosure.manifest.loader import FeatureMapLoader
    from featclosure.manifest.registry import loader_registry

    @loader_registry.register("ini", suffixes=(".ini",))
    class IniLoader(FeatureMapLoader):
        def load_data(self, text: str, source: str) -> object:
            ...

    loader_registry.for_suffix(".ini")
"""
from __future__ import annotations

import importlib.metadata
import logging
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from featclosure.manifest.errors import LoaderAlreadyRegisteredError, LoaderNotFoundError

if TYPE_CHECKING:
    from featclosure.manifest.loader import FeatureMapLoader

logger = logging.getLogger(__name__)

ENTRYPOINT_GROUP: str = "featclosure.loaders"


class LoaderRegistry:
    """Maps format names and file suffixes to loader classes.

    Parameters
    ----------
    name:
        A human-readable name for this registry (used in log records).
    """

    def __init__(self, name: str = "loaders") -> None:
        self._name = name
        self._loaders: dict[str, type[FeatureMapLoader]] = {}
        self._suffixes: dict[str, str] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(
        self, name: str, suffixes: Iterable[str] = ()
    ) -> Callable[[type[FeatureMapLoader]], type[FeatureMapLoader]]:
        """Return a class decorator that registers a loader under ``name``.

        Raises
        ------
        LoaderAlreadyRegisteredError
            If ``name`` is already in use.
        TypeError
            If the decorated class is not a ``FeatureMapLoader``.
        """

        def decorator(cls: type[FeatureMapLoader]) -> type[FeatureMapLoader]:
            self.register_class(name, cls, suffixes)
            return cls

        return decorator

    def register_class(
        self, name: str, cls: type[FeatureMapLoader], suffixes: Iterable[str] = ()
    ) -> None:
        """Register ``cls`` directly, optionally claiming file ``suffixes``.

        A suffix already claimed by another loader is reassigned to
        ``cls``; the most recent registration wins.
        """
        from featclosure.manifest.loader import FeatureMapLoader

        if name in self._loaders:
            raise LoaderAlreadyRegisteredError(name)
        if not (isinstance(cls, type) and issubclass(cls, FeatureMapLoader)):
            raise TypeError(
                f"Cannot register {cls!r} under {name!r}: "
                "it must be a subclass of FeatureMapLoader."
            )
        self._loaders[name] = cls
        for suffix in suffixes:
            self._suffixes[suffix.lower()] = name
        logger.debug(
            "Registered loader %r -> %s in registry %r",
            name,
            cls.__qualname__,
            self._name,
        )

    def deregister(self, name: str) -> None:
        """Remove a loader and every suffix that points at it."""
        if name not in self._loaders:
            raise LoaderNotFoundError(name, self.names())
        del self._loaders[name]
        self._suffixes = {s: n for s, n in self._suffixes.items() if n != name}
        logger.debug("Deregistered loader %r from registry %r", name, self._name)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, name: str) -> type[FeatureMapLoader]:
        """Return the loader class registered under ``name``."""
        try:
            return self._loaders[name]
        except KeyError:
            raise LoaderNotFoundError(name, self.names()) from None

    def for_suffix(self, suffix: str) -> type[FeatureMapLoader]:
        """Return the loader class claiming ``suffix`` (e.g. ``".yml"``)."""
        try:
            return self._loaders[self._suffixes[suffix.lower()]]
        except KeyError:
            raise LoaderNotFoundError(suffix, self.names()) from None

    def names(self) -> list[str]:
        """Return the registered format names in alphabetical order."""
        return sorted(self._loaders)

    def suffixes(self, name: str) -> list[str]:
        """Return the suffixes claimed by the loader ``name``, sorted."""
        return sorted(s for s, n in self._suffixes.items() if n == name)

    def __contains__(self, name: object) -> bool:
        return name in self._loaders

    def __len__(self) -> int:
        return len(self._loaders)

    def __repr__(self) -> str:
        return f"LoaderRegistry(name={self._name!r}, loaders={self.names()})"

    # ------------------------------------------------------------------
    # Entry-point loading
    # ------------------------------------------------------------------

    def load_entrypoints(self, group: str = ENTRYPOINT_GROUP) -> None:
        """Discover and register loaders declared as package entry-points.

        The entry-point name is the format name.  A loader class may
        declare a ``suffixes`` class attribute to claim file suffixes.
        Already-registered names are skipped, so repeated calls are
        idempotent.  Entry-points that fail to import are logged and
        skipped.
        """
        for ep in importlib.metadata.entry_points(group=group):
            if ep.name in self._loaders:
                logger.debug(
                    "Entry-point %r already registered in %r; skipping.",
                    ep.name,
                    self._name,
                )
                continue
            try:
                cls = ep.load()
            except Exception:
                logger.exception(
                    "Failed to load entry-point %r from group %r; skipping.",
                    ep.name,
                    group,
                )
                continue
            try:
                self.register_class(ep.name, cls, getattr(cls, "suffixes", ()))
            except (LoaderAlreadyRegisteredError, TypeError):
                logger.warning(
                    "Entry-point %r loaded but could not be registered "
                    "in registry %r; skipping.",
                    ep.name,
                    self._name,
                )


loader_registry: LoaderRegistry = LoaderRegistry()
