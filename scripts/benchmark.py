#!/usr/bin/env python3
"""Benchmark script for code_generator performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from code_generator import Generator


def benchmark_import_time() -> float:
    """Measure import time of code_generator package."""
    start = time.perf_counter()
    import code_generator  # noqa: F401

    return time.perf_counter() - start


def _declare(g: Generator) -> None:
    g.public_method(
        "greet",
        lambda m: m.required("name").optional("greeting", "Hello").keyword_required("format"),
    )
    g.private_method("secret", lambda m: m.returns(42))
    g.protected_method("internal", lambda m: m.required("key"))
    g.public_class_method("token", lambda m: m.returns(str).generate())


def benchmark_build() -> float:
    """Measure declaration plus build time."""
    from code_generator import SeededRandomSource, generate_class

    start = time.perf_counter()
    for _ in range(1000):
        generate_class(_declare, random_source=SeededRandomSource(0))
    return time.perf_counter() - start


def benchmark_stub_call() -> float:
    """Measure call overhead of a public stub (visibility + arity + resolution)."""
    from code_generator import SeededRandomSource, generate_class

    obj = generate_class(_declare, random_source=SeededRandomSource(0))()
    start = time.perf_counter()
    for _ in range(100000):
        obj.greet("Alice", format="json")
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run code_generator benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    args = parser.parse_args()

    results = []

    # Import time
    import_time = benchmark_import_time()
    results.append(
        {
            "name": "Import Time",
            "unit": "seconds",
            "value": import_time,
        }
    )

    # Declaration + build
    build_time = benchmark_build()
    results.append(
        {
            "name": "Declare and Build (1k classes)",
            "unit": "seconds",
            "value": build_time,
        }
    )

    # Stub calls
    call_time = benchmark_stub_call()
    results.append(
        {
            "name": "Stub Call (100k calls)",
            "unit": "seconds",
            "value": call_time,
        }
    )

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
