#!/usr/bin/env python3
"""Example: Loading a feature map from a manifest — feature-closure

Reads the ``[features]`` table of the bundled ``Cargo.toml`` sample and
expands it with and without the ``default`` flag.

Usage:
    python examples/02_manifest_file.py

Requirements:
    pip install feature-closure
"""
from __future__ import annotations

from pathlib import Path

import featclosure
from featclosure.core import ClosureEngine, local_flags, normalize

MANIFEST = Path(__file__).parent / "Cargo.toml"


def main() -> None:
    features = featclosure.load_feature_map(MANIFEST)
    print(f"Loaded {len(features)} flag(s) from {MANIFEST.name}")

    # One engine, many seed sets
    engine = ClosureEngine(features)
    for seeds in (["default"], ["json"], ["default", "full"]):
        enabled = normalize(engine.resolve(seeds))
        print(f"{seeds!s:<22} -> own flags {local_flags(enabled)}")
        for unit in ("serde", "tokio"):
            forwarded = featclosure.unit_flags(enabled, unit)
            if forwarded:
                print(f"{'':<22}    {unit}: {forwarded}")


if __name__ == "__main__":
    main()
