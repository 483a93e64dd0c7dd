"""Benchmark: range parse latency (p50/p95/mean).

Measures per-call latency for parse_range on a short and a long range.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import semrange

_WARMUP: int = 100
_ITERATIONS: int = 3_000

_SHORT_RANGE = "^1.2.3"

_LONG_RANGE = " || ".join(
    [
        "1.2.3 - 1.9",
        "~2.4.1",
        "^0.0.7",
        ">=3.0.0-beta.2 <3.1.0",
        "4.x",
        "5.1.*",
        "!=6.0.0 >=6.0.0 <7.0.0",
        "> 7.2.x",
        "<= 8.x",
    ]
)


def _measure(range_text: str) -> list[float]:
    for _ in range(_WARMUP):
        semrange.parse_range(range_text)

    latencies_ms: list[float] = []
    for _ in range(_ITERATIONS):
        t0 = time.perf_counter()
        semrange.parse_range(range_text)
        latencies_ms.append((time.perf_counter() - t0) * 1000)
    return latencies_ms


def bench_parse_latency(range_text: str = _SHORT_RANGE) -> dict[str, object]:
    """Benchmark parse_range latency on one range string.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms, p50_ms, p95_ms.
    """
    latencies_ms = _measure(range_text)
    sorted_lats = sorted(latencies_ms)
    n = len(sorted_lats)
    total = sum(latencies_ms) / 1000
    label = "short" if range_text == _SHORT_RANGE else "long"

    result: dict[str, object] = {
        "operation": f"semrange_parse_latency_{label}",
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
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    results = [bench_parse_latency(_SHORT_RANGE), bench_parse_latency(_LONG_RANGE)]
    output_path = results_dir / "latency_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(results, fh, indent=2)
    print(f"Results saved to {output_path}")
