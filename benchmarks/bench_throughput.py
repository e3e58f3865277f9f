"""Benchmark: markup parse and native projection throughput.

Measures how many markup → document conversions and document → display
block projections complete per second using the public notedoc API.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import notedoc

_ITERATIONS: int = 2_000
_PROJECTION_ITERATIONS: int = 5_000

_SAMPLE_MARKUP = (
    "<h2>Vitals</h2>"
    "<p>BP <strong>120/80</strong>, HR <em>72</em> &amp; regular</p>"
    "<ul><li>Afebrile</li><li>No <u>acute</u> distress</li></ul>"
    "<blockquote><p>Follow up in <a href=\"https://example.com/plan\">two weeks</a></p></blockquote>"
    "<pre><code>dose = weight * 0.1</code></pre>"
    "<table><tr><th>Drug</th><th>Dose</th></tr><tr><td>A</td><td>5 mg</td></tr></table>"
)


def bench_parse_throughput() -> dict[str, object]:
    """Benchmark markup → document conversion throughput.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    start = time.perf_counter()
    for _ in range(_ITERATIONS):
        notedoc.to_document(_SAMPLE_MARKUP)
    total = time.perf_counter() - start

    result: dict[str, object] = {
        "operation": "notedoc_parse_throughput",
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


def bench_projection_throughput() -> dict[str, object]:
    """Benchmark document → native block projection throughput.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    document = notedoc.to_document(_SAMPLE_MARKUP)

    start = time.perf_counter()
    for _ in range(_PROJECTION_ITERATIONS):
        notedoc.project_native(document)
    total = time.perf_counter() - start

    result: dict[str, object] = {
        "operation": "notedoc_projection_throughput",
        "iterations": _PROJECTION_ITERATIONS,
        "total_seconds": round(total, 4),
        "ops_per_second": round(_PROJECTION_ITERATIONS / total, 1),
        "avg_latency_ms": round(total / _PROJECTION_ITERATIONS * 1000, 4),
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
        (bench_projection_throughput, "projection_throughput_baseline.json"),
    ]:
        result = bench_fn()
        output_path = results_dir / fname
        with open(output_path, "w", encoding="utf-8") as fh:
            json.dump(result, fh, indent=2)
        print(f"Results saved to {output_path}")
