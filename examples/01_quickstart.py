#!/usr/bin/env python3
"""Example: Quickstart — feature-closure

Minimal working example: expand a seed set of flags against a
crate-style feature map and split out the flags forwarded to a
dependency.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install feature-closure
"""
from __future__ import annotations

import featclosure

FEATURES = {
    "default": ["tls"],
    "resolvable": ["feature1", "tls/extra_feature"],
    "feature1": [],
    "extra": [],
}


def main() -> None:
    print(f"feature-closure version: {featclosure.__version__}")

    # Step 1: Expand the requested flags
    enabled = featclosure.expand_features(FEATURES, ["default", "resolvable"])
    print(f"Enabled flags: {enabled}")

    # Step 2: Flags to pass on to the "tls" dependency
    print(f"Forwarded to tls: {featclosure.unit_flags(enabled, 'tls')}")

    # Step 3: Cycles are fine
    cyclic = {"a": ["b"], "b": ["a"]}
    print(f"Cyclic map: {featclosure.expand_features(cyclic, ['a'])}")


if __name__ == "__main__":
    main()
