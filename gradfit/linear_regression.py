"""Linear regression trained by batch gradient descent."""

from __future__ import annotations

from collections.abc import Sequence

from gradfit.linalg import dot_product

Matrix = Sequence[Sequence[float]]
Vector = Sequence[float]


def _sample_count(x: Matrix, y: Vector) -> int:
    if not x:
        raise ValueError("at least one sample is required")
    if len(x) != len(y):
        raise ValueError(f"{len(x)} samples but {len(y)} targets")
    return len(x)


def compute_cost(x: Matrix, y: Vector, w: Vector, b: float) -> float:
    """Return the halved mean squared error of the model on the data."""
    m = _sample_count(x, y)
    cost = sum((dot_product(row, w) + b - target) ** 2 for row, target in zip(x, y))
    return cost / (2 * m)


def compute_gradient(x: Matrix, y: Vector, w: Vector, b: float) -> tuple[list[float], float]:
    """Return the gradient of the cost with respect to the weights and the bias."""
    m = _sample_count(x, y)
    dj_dw = [0.0] * len(x[0])
    dj_db = 0.0
    for row, target in zip(x, y):
        error = dot_product(row, w) + b - target
        dj_dw = [g + error * v for g, v in zip(dj_dw, row)]
        dj_db += error
    return [g / m for g in dj_dw], dj_db / m


def gradient_descent(
    x: Matrix, y: Vector, w: Vector, b: float, alpha: float, iterations: int
) -> tuple[list[float], float]:
    """Run gradient descent from (w, b) and return the fitted weights and bias."""
    weights = [float(v) for v in w]
    bias = float(b)
    for _ in range(iterations):
        dj_dw, dj_db = compute_gradient(x, y, weights, bias)
        weights = [wj - alpha * gj for wj, gj in zip(weights, dj_dw)]
        bias -= alpha * dj_db
    return weights, bias


def compute_predictions(x: Matrix, w: Vector, b: float) -> list[float]:
    """Return the model output for every sample."""
    return [dot_product(row, w) + b for row in x]