"""Benchmark tinting performance.

Compares across pixel counts:
- apply_tint (direct Numba kernel)
- Tint pipeline (compiled LUT)
- Plain NumPy formula
- Neutral tint early return
"""

import time

import numpy as np

from pivotrgb import NEUTRAL, Color, Tint, apply_tint

WARM = Color(0.6, 0.5, 0.4)


def create_test_pixels(n: int) -> np.ndarray:
    """Create synthetic RGBA pixels for benchmarking."""
    rng = np.random.default_rng(42)
    return rng.random((n, 4), dtype=np.float32)


def time_call(fn, n_iterations: int) -> float:
    """Return average milliseconds per call after a warmup."""
    for _ in range(5):
        fn()

    start = time.perf_counter()
    for _ in range(n_iterations):
        fn()
    return (time.perf_counter() - start) / n_iterations * 1000


def benchmark_size(n_pixels: int, n_iterations: int = 50) -> dict[str, float]:
    """Benchmark all tint paths at one size."""
    print(f"\n{'='*60}")
    print(f"Tint Benchmark ({n_pixels:,} pixels)")
    print(f"{'='*60}")

    pixels = create_test_pixels(n_pixels)
    out = pixels.copy()
    pipeline = Tint().multiply(WARM).contrast(1.2).lighten(0.1).compile()
    tint = np.array([WARM.r, WARM.g, WARM.b], dtype=np.float32) * 2.0

    def numpy_formula():
        np.clip(pixels[:, :3] * tint, 0.0, 1.0, out=out[:, :3])

    timings = {
        "apply_tint": time_call(lambda: apply_tint(pixels, WARM), n_iterations),
        "apply_tint_inplace": time_call(lambda: apply_tint(out, NEUTRAL, inplace=True), n_iterations),
        "pipeline": time_call(lambda: pipeline.apply(pixels), n_iterations),
        "numpy": time_call(numpy_formula, n_iterations),
    }

    for name, ms in timings.items():
        throughput = n_pixels / ms / 1000
        print(f"  {name:20s} {ms:8.3f} ms  ({throughput:8.1f} M pixels/s)")

    return timings


def main():
    sizes = [10_000, 100_000, 1_000_000]

    results = {n: benchmark_size(n) for n in sizes}

    print(f"\n\n{'='*60}")
    print("SUMMARY: Numba vs NumPy")
    print(f"{'='*60}")

    for n in sizes:
        timings = results[n]
        print(f"\n{n:,} pixels:")
        print(f"  apply_tint: {timings['numpy'] / timings['apply_tint']:.1f}x vs NumPy")
        print(f"  Tint pipeline: {timings['numpy'] / timings['pipeline']:.1f}x vs NumPy")
        print(f"  Neutral skip: {timings['apply_tint'] / timings['apply_tint_inplace']:.1f}x faster")


if __name__ == "__main__":
    main()
