"""Fit a linear model to synthetic data and report the result."""

from __future__ import annotations

import argparse
import math
import random
import sys
import time

from gradfit.linear_regression import compute_predictions, gradient_descent

FEATURES = 4


def generate_data(n: int, rng: random.Random) -> tuple[list[list[float]], list[float]]:
    """Return n samples of four features in 1..100 with noisy linear targets."""
    x: list[list[float]] = []
    y: list[float] = []
    for _ in range(n):
        row = [float(rng.randint(1, 100)) for _ in range(FEATURES)]
        x.append(row)
        y.append(5.0 + sum(row) + rng.randrange(10))
    return x, y


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Linear regression by gradient descent.")
    parser.add_argument("--samples", type=int, default=1000)
    parser.add_argument("--iterations", type=int, default=1000)
    parser.add_argument("--alpha", type=float, default=0.0001)
    parser.add_argument("--seed", type=int, default=None)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    rng = random.Random(args.seed if args.seed is not None else time.time())
    x, y = generate_data(args.samples, rng)

    for i, (row, target) in enumerate(zip(x, y)):
        if math.isnan(row[0]) or math.isnan(row[1]) or math.isnan(target):
            print(f"Error: NaN detected in generated data at index {i}", file=sys.stderr)
            return 1

    start = time.perf_counter()
    w, b = gradient_descent(x, y, [0.0] * FEATURES, 0.0, args.alpha, args.iterations)
    elapsed = time.perf_counter() - start

    print("Final weights: " + "".join(f"{v:g} " for v in w))
    print(f"Final bias: {b:g}")
    print(f"Execution Time: {elapsed:g} seconds")

    predictions = compute_predictions(x, w, b)
    print("\nPredictions vs Actual values (first 5):")
    for prediction, target in list(zip(predictions, y))[:5]:
        print(f"Prediction: {prediction:g}, Target value: {target:g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())