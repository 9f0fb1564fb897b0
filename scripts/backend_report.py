#!/usr/bin/env python3
"""
Backend report utility.
Shows which provider serves the accelerated path, times each primitive on the
accelerated and portable paths, and checks that both paths agree.
"""

import argparse
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np

from linvec.core.config import validate_backend_config
from linvec.vector import FallbackKernels, KernelDispatcher, Vector, get_dispatcher, set_dispatcher

PRIMITIVES = ("add", "subtract", "scale", "dot", "magnitude")


def run_primitive(name, a, b):
    """Run one primitive on copies of the fixtures and return its result."""
    left, right = Vector(a), Vector(b)
    if name == "add":
        return left.add(right).to_list()
    if name == "subtract":
        return left.subtract(right).to_list()
    if name == "scale":
        return left.scale(0.5).to_list()
    if name == "dot":
        return left.dot(right)
    return left.magnitude()


def time_primitive(name, a, b, repeat):
    start = time.perf_counter()
    for _ in range(repeat):
        result = run_primitive(name, a, b)
    return result, (time.perf_counter() - start) / repeat


def compare_paths(size, repeat, seed=0):
    """
    Run every primitive on both paths over the same fixtures.

    Returns:
        List of (primitive, accelerated_sec, portable_sec, agree) rows
    """
    accelerated = get_dispatcher()
    portable = KernelDispatcher(accelerated=None, fallback=FallbackKernels())

    a = Vector.random(size, rng=seed)
    b = Vector.random(size, rng=seed + 1)

    rows = []
    try:
        for name in PRIMITIVES:
            set_dispatcher(accelerated)
            fast, fast_sec = time_primitive(name, a, b, repeat)
            set_dispatcher(portable)
            slow, slow_sec = time_primitive(name, a, b, repeat)
            rows.append((name, fast_sec, slow_sec, bool(np.allclose(fast, slow))))
    finally:
        set_dispatcher(accelerated)
    return rows


def main(argv=None):
    """Print the probe result and the per-primitive comparison."""
    parser = argparse.ArgumentParser(description="Report the active vector backend")
    parser.add_argument("--size", type=int, default=10000, help="vector length")
    parser.add_argument("--repeat", type=int, default=5, help="runs per primitive")
    args = parser.parse_args(argv)

    issues = validate_backend_config()
    for issue in issues:
        print(f"WARNING: {issue}")

    info = get_dispatcher().info
    print(f"Backend: {info.name} (accelerated: {'yes' if info.available else 'no'})")
    if info.reason:
        print(f"  reason: {info.reason}")

    rows = compare_paths(args.size, args.repeat)
    print(f"{'primitive':<10} {'accelerated ms':>15} {'portable ms':>12}  agree")
    for name, fast_sec, slow_sec, agree in rows:
        print(f"{name:<10} {fast_sec * 1000:>15.3f} {slow_sec * 1000:>12.3f}  {'✓' if agree else '✗'}")

    return 0 if all(row[3] for row in rows) else 1


if __name__ == "__main__":
    sys.exit(main())
