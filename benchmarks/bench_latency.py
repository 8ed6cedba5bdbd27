"""Benchmark: feature expansion latency (p50/p95/mean).

Measures per-call latency of ``expand_features`` on a crate-sized
feature map, the common case for a build-graph generator.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import featclosure

_WARMUP: int = 100
_ITERATIONS: int = 3_000

_CRATE_FEATURES: dict[str, list[str]] = {
    "default": ["std", "tls", "json"],
    "std": ["alloc", "serde/std"],
    "alloc": ["serde/alloc"],
    "tls": ["rustls", "tls/extra_feature"],
    "rustls": ["dep:rustls", "webpki-roots"],
    "webpki-roots": [],
    "json": ["serde", "serde_json"],
    "serde": ["serde/derive"],
    "serde_json": ["serde_json/std"],
    "full": ["default", "compression", "cookies", "stream"],
    "compression": ["gzip", "brotli"],
    "gzip": ["async-compression/gzip"],
    "brotli": ["async-compression/brotli"],
    "cookies": ["cookie_store"],
    "stream": ["tokio/fs"],
}


def bench_expand_latency() -> dict[str, object]:
    """Benchmark expansion latency of the ``full`` feature.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms, p50_ms, p95_ms.
    """
    seeds = ["full"]
    # Warmup
    for _ in range(_WARMUP):
        featclosure.expand_features(_CRATE_FEATURES, seeds)

    latencies_ms: list[float] = []
    for _ in range(_ITERATIONS):
        t0 = time.perf_counter()
        featclosure.expand_features(_CRATE_FEATURES, seeds)
        latencies_ms.append((time.perf_counter() - t0) * 1000)

    sorted_lats = sorted(latencies_ms)
    n = len(sorted_lats)
    total = sum(latencies_ms) / 1000

    result: dict[str, object] = {
        "operation": "expand_latency_crate",
        "iterations": _ITERATIONS,
        "total_seconds": round(total, 4),
        "ops_per_second": round(_ITERATIONS / total, 1),
        "avg_latency_ms": round(sum(latencies_ms) / n, 4),
        "p50_ms": round(sorted_lats[int(n * 0.50)], 4),
        "p95_ms": round(sorted_lats[min(int(n * 0.95), n - 1)], 4),
    }
    print(
        f"[bench_latency] {result['operation']}: "
        f"p50={result['p50_ms']:.4f}ms  p95={result['p95_ms']:.4f}ms  "
        f"mean={result['avg_latency_ms']:.4f}ms"
    )
    return result


if __name__ == "__main__":
    result = bench_expand_latency()
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    output_path = results_dir / "latency_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(result, fh, indent=2)
    print(f"Results saved to {output_path}")
