"""Fit a logistic model to synthetic data and report the result."""

from __future__ import annotations

import argparse
import math
import random
import sys
import time

from gradfit.logistic_regression import compute_predictions, gradient_descent


def generate_data(
    n: int, features: int, rng: random.Random
) -> tuple[list[list[float]], list[float]]:
    """Return n samples of features in 1..100, labelled by thresholding a noisy linear score."""
    if features < 4:
        raise ValueError("at least four features are required")
    x: list[list[float]] = []
    y: list[float] = []
    for _ in range(n):
        row = [float(rng.randint(1, 100)) for _ in range(features)]
        z = 5.0 + row[0] + row[1] + row[2] + row[3] + rng.randrange(10)
        x.append(row)
        y.append(1.0 if 1.0 / (1.0 + math.exp(-z)) > 0.5 else 0.0)
    return x, y


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Logistic regression by gradient descent.")
    parser.add_argument("--samples", type=int, default=1000)
    parser.add_argument("--features", type=int, default=4)
    parser.add_argument("--iterations", type=int, default=1000)
    parser.add_argument("--alpha", type=float, default=0.0001)
    parser.add_argument("--seed", type=int, default=None)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    rng = random.Random(args.seed if args.seed is not None else time.time())
    x, y = generate_data(args.samples, args.features, rng)

    for i, (row, label) in enumerate(zip(x, y)):
        if math.isnan(row[0]) or math.isnan(label):
            print(f"Error: NaN detected in data at index {i}", file=sys.stderr)
            return 1

    start = time.perf_counter()
    w, b = gradient_descent(x, y, [0.0] * args.features, 0.0, args.alpha, args.iterations)
    elapsed = time.perf_counter() - start

    print("\nFinal weights: " + "".join(f"{v:g} " for v in w))
    print(f"Final bias: {b:g}")
    print(f"Execution Time: {elapsed:g} seconds")

    predictions = compute_predictions(x, w, b)
    print("\nPredictions vs Actual (first 5 samples):")
    for prediction, label in list(zip(predictions, y))[:5]:
        predicted_class = 1 if prediction >= 0.5 else 0
        print(f"Prediction (prob): {prediction:g}, Label: {label:g}, P Class: {predicted_class}")
    return 0


if __name__ == "__main__":
    sys.exit(main())