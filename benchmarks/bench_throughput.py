"""Benchmark: range parse and evaluation throughput.

Measures how many range parses and version checks can complete per
second using the public semrange.parse_range() and Range.matches() APIs.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import semrange
from semrange.version import parse_version

_ITERATIONS: int = 5_000
_MATCH_ITERATIONS: int = 20_000

_SAMPLE_RANGE = "^1.2.3 || ~2.4 || 3.x || 4.0.0 - 4.5 || >=5.0.0-beta <5.1.0"
_CANDIDATES = ["1.2.2", "1.9.0", "2.4.7", "3.99.0", "4.5.3", "5.0.0-rc.1", "6.0.0"]


def bench_parse_throughput() -> dict[str, object]:
    """Benchmark range parsing throughput.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    start = time.perf_counter()
    for _ in range(_ITERATIONS):
        semrange.parse_range(_SAMPLE_RANGE)
    total = time.perf_counter() - start

    result: dict[str, object] = {
        "operation": "semrange_parse_throughput",
        "iterations": _ITERATIONS,
        "total_seconds": round(total, 4),
        "ops_per_second": round(_ITERATIONS / total, 1),
        "avg_latency_ms": round(total / _ITERATIONS * 1000, 4),
    }
    print(
        f"[bench_throughput] {result['operation']}: "
        f"{result['ops_per_second']:,.0f} ops/sec  "
        f"avg {result['avg_latency_ms']:.4f} ms"
    )
    return result


def bench_match_throughput() -> dict[str, object]:
    """Benchmark evaluation of pre-parsed versions against a parsed range.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    expr = semrange.parse_range(_SAMPLE_RANGE)
    versions = [parse_version(text) for text in _CANDIDATES]

    start = time.perf_counter()
    for i in range(_MATCH_ITERATIONS):
        expr.matches(versions[i % len(versions)])
    total = time.perf_counter() - start

    result: dict[str, object] = {
        "operation": "semrange_match_throughput",
        "iterations": _MATCH_ITERATIONS,
        "total_seconds": round(total, 4),
        "ops_per_second": round(_MATCH_ITERATIONS / total, 1),
        "avg_latency_ms": round(total / _MATCH_ITERATIONS * 1000, 4),
    }
    print(
        f"[bench_throughput] {result['operation']}: "
        f"{result['ops_per_second']:,.0f} ops/sec  "
        f"avg {result['avg_latency_ms']:.4f} ms"
    )
    return result


if __name__ == "__main__":
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)

    for bench_fn, fname in [
        (bench_parse_throughput, "parse_throughput_baseline.json"),
        (bench_match_throughput, "match_throughput_baseline.json"),
    ]:
        result = bench_fn()
        output_path = results_dir / fname
        with open(output_path, "w", encoding="utf-8") as fh:
            json.dump(result, fh, indent=2)
        print(f"Results saved to {output_path}")
