"""Error types for feature map loading.

The closure engine itself never fails; every error in this package
comes from reading or shaping an implication map before it reaches
the engine.
"""
from __future__ import annotations


class FeatureMapError(ValueError):
    """Raised when a feature map cannot be read or has the wrong shape.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    source:
        The file path the map came from, or ``"<string>"``.
    """

    def __init__(self, message: str, source: str = "<string>") -> None:
        self.message = message
        self.source = source
        super().__init__(f"{source}: {message}")


class LoaderNotFoundError(KeyError):
    """Raised when no loader is registered for a format name or suffix."""

    def __init__(self, key: str, available: list[str]) -> None:
        self.key = key
        self.available = available
        super().__init__(
            f"No feature map loader registered for {key!r}. "
            f"Available formats: {', '.join(available) or '(none)'}."
        )

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class LoaderAlreadyRegisteredError(ValueError):
    """Raised when attempting to register a format name that already exists."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"A feature map loader named {name!r} is already registered. "
            "Use a unique name or deregister the existing loader first."
        )
