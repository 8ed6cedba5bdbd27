"""Benchmark: feature expansion throughput on synthetic implication graphs.

Measures how many ``expand_features`` calls complete per second on a
wide layered graph with cross-links and cycles, and on a long chain.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import featclosure

_ITERATIONS: int = 500
_CHAIN_ITERATIONS: int = 200

_LAYERS: int = 10
_WIDTH: int = 50
_CHAIN_LENGTH: int = 5_000


def layered_feature_map(layers: int = _LAYERS, width: int = _WIDTH) -> dict[str, list[str]]:
    """Build a layered graph: each flag implies two flags of the next layer.

    The last layer points back at the first, so every flag sits on a
    cycle, and every tenth flag also implies a qualified dependency flag.
    """
    features: dict[str, list[str]] = {}
    for layer in range(layers):
        nxt = (layer + 1) % layers
        for i in range(width):
            implied = [f"l{nxt}_f{i}", f"l{nxt}_f{(i * 7 + 3) % width}"]
            if i % 10 == 0:
                implied.append(f"dep{i}/extra")
            features[f"l{layer}_f{i}"] = implied
    return features


def chain_feature_map(length: int = _CHAIN_LENGTH) -> dict[str, list[str]]:
    """Build ``f0 -> f1 -> ... -> f<length>``."""
    return {f"f{i}": [f"f{i + 1}"] for i in range(length)}


def _measure(
    operation: str, iterations: int, features: dict[str, list[str]], seeds: list[str]
) -> dict[str, object]:
    start = time.perf_counter()
    for _ in range(iterations):
        featclosure.expand_features(features, seeds)
    total = time.perf_counter() - start

    result: dict[str, object] = {
        "operation": operation,
        "iterations": iterations,
        "total_seconds": round(total, 4),
        "ops_per_second": round(iterations / total, 1),
        "avg_latency_ms": round(total / iterations * 1000, 4),
        "result_size": len(featclosure.expand_features(features, seeds)),
    }
    print(
        f"[bench_throughput] {result['operation']}: "
        f"{result['ops_per_second']:,.0f} ops/sec  "
        f"avg {result['avg_latency_ms']:.4f} ms"
    )
    return result


def bench_expand_throughput() -> dict[str, object]:
    """Benchmark expansion of a single seed over the layered graph.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms, result_size.
    """
    return _measure("expand_layered_throughput", _ITERATIONS, layered_feature_map(), ["l0_f0"])


def bench_chain_throughput() -> dict[str, object]:
    """Benchmark expansion along a long implication chain.

    Returns
    -------
    dict with the same keys as ``bench_expand_throughput``.
    """
    return _measure("expand_chain_throughput", _CHAIN_ITERATIONS, chain_feature_map(), ["f0"])


if __name__ == "__main__":
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)

    for bench_fn, fname in [
        (bench_expand_throughput, "expand_throughput_baseline.json"),
        (bench_chain_throughput, "chain_throughput_baseline.json"),
    ]:
        result = bench_fn()
        output_path = results_dir / fname
        with open(output_path, "w", encoding="utf-8") as fh:
            json.dump(result, fh, indent=2)
        print(f"Results saved to {output_path}")
