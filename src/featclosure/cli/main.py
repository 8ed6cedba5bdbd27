"""CLI entry point for feature-closure.

Invoked as::

    featclosure [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m featclosure.cli.main

Commands
--------
expand      Expand a seed set of flags against a feature map file
formats     List registered feature map loaders
version     Show version information

Every option can also be supplied through an environment variable named
``FEATCLOSURE_<COMMAND>_<PARAMETER>``, e.g.
``FEATCLOSURE_EXPAND_OUTPUT_FORMAT=json``.
"""
from __future__ import annotations

import json
import logging
import sys
from typing import TYPE_CHECKING

import click
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from featclosure.manifest.loader import FeatureMap

console = Console()
err_console = Console(stderr=True)

DEFAULT_FLAG = "default"


def _configure_logging(verbose: bool) -> None:
    """Route ``featclosure`` log records to stderr through rich."""
    if not verbose:
        return
    logger = logging.getLogger("featclosure")
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=err_console, show_path=False))
    logger.setLevel(logging.DEBUG)


def _load_or_exit(path: str, input_format: str | None) -> "FeatureMap":
    """Load a feature map, printing errors and exiting on failure."""
    from featclosure.manifest import FeatureMapError, LoaderNotFoundError, load_feature_map
    from featclosure.manifest.registry import loader_registry

    loader_registry.load_entrypoints()
    try:
        return load_feature_map(path, input_format)
    except LoaderNotFoundError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False, soft_wrap=True)
        sys.exit(1)
    except FeatureMapError as exc:
        err_console.print(f"[red]Invalid feature map[/red] {escape(str(exc))}", highlight=False, soft_wrap=True)
        sys.exit(1)


def _split_seeds(flags: tuple[str, ...]) -> list[str]:
    """Accept ``a b``, ``a,b`` and ``"a, b"`` alike."""
    return [name.strip() for arg in flags for name in arg.split(",") if name.strip()]


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group(context_settings={"auto_envvar_prefix": "FEATCLOSURE"})
@click.version_option(package_name="feature-closure")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log resolver activity to stderr")
def cli(verbose: bool) -> None:
    """Transitive feature-flag expansion for build-graph generators."""
    _configure_logging(verbose)


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from featclosure import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]feature-closure[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# formats command
# ---------------------------------------------------------------------------


@cli.command(name="formats")
def formats_command() -> None:
    """List the registered feature map loaders and the suffixes they claim."""
    from featclosure.manifest.registry import loader_registry

    loader_registry.load_entrypoints()

    table = Table(title="Feature map formats")
    table.add_column("Format", style="bold")
    table.add_column("Suffixes")
    table.add_column("Loader")
    for name in loader_registry.names():
        cls = loader_registry.get(name)
        table.add_row(name, ", ".join(loader_registry.suffixes(name)) or "-", cls.__qualname__)
    console.print(table)


# ---------------------------------------------------------------------------
# expand command
# ---------------------------------------------------------------------------


@cli.command(name="expand")
@click.argument("file", type=click.Path(exists=False, dir_okay=False))
@click.argument("flags", nargs=-1)
@click.option(
    "--no-default-features",
    is_flag=True,
    default=False,
    help=f"Do not seed the {DEFAULT_FLAG!r} flag automatically",
)
@click.option(
    "--unit",
    default=None,
    metavar="NAME",
    help="Print only the flags forwarded to dependency NAME (NAME/flag references)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json", "yaml"], case_sensitive=False),
    default="text",
    help="Output format",
)
@click.option(
    "--input-format",
    default=None,
    help="Feature map format (defaults to detection by file suffix)",
)
def expand_command(
    file: str,
    flags: tuple[str, ...],
    no_default_features: bool,
    unit: str | None,
    output_format: str,
    input_format: str | None,
) -> None:
    """Expand FLAGS against the feature map in FILE.

    FILE is a YAML, JSON or TOML document mapping each flag to the flags
    it implies, either at the top level or under a ``features`` table.
    FLAGS may be given as separate arguments or comma-separated.

    Examples:

    \b
        featclosure expand Cargo.toml
        featclosure expand features.yaml resolvable --no-default-features
        featclosure expand Cargo.toml tls,json --unit tls --format json
    """
    from featclosure.core import expand_features, unit_flags

    feature_map = _load_or_exit(file, input_format)

    seeds = _split_seeds(flags)
    if not no_default_features and DEFAULT_FLAG in feature_map:
        seeds.append(DEFAULT_FLAG)

    result = expand_features(feature_map, seeds)
    if unit is not None:
        result = unit_flags(result, unit)

    if output_format == "json":
        console.print(json.dumps(result, indent=2), markup=False, highlight=False, soft_wrap=True)
    elif output_format == "yaml":
        text = yaml.safe_dump(result, default_flow_style=False).rstrip("\n")
        console.print(text, markup=False, highlight=False, soft_wrap=True)
    else:
        for flag in result:
            console.print(flag, markup=False, highlight=False, soft_wrap=True)


if __name__ == "__main__":
    cli()
