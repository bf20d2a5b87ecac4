"""Logistic regression trained by batch gradient descent."""

from __future__ import annotations

import math
from collections.abc import Sequence

from gradfit.linalg import dot_product

Matrix = Sequence[Sequence[float]]
Vector = Sequence[float]

_EPSILON = 1e-15


def sigmoid(z: float) -> float:
    """Return the logistic function of z without overflowing for large |z|."""
    if z >= 0:
        return 1.0 / (1.0 + math.exp(-z))
    exp_pos = math.exp(z)
    return exp_pos / (1.0 + exp_pos)


def _sample_count(x: Matrix, y: Vector) -> int:
    if not x:
        raise ValueError("at least one sample is required")
    if len(x) != len(y):
        raise ValueError(f"{len(x)} samples but {len(y)} labels")
    return len(x)


def compute_cost(x: Matrix, y: Vector, w: Vector, b: float) -> float:
    """Return the mean cross-entropy loss, with probabilities clipped away from 0 and 1."""
    m = _sample_count(x, y)
    cost = 0.0
    for row, label in zip(x, y):
        p = sigmoid(dot_product(row, w) + b)
        p = min(max(p, _EPSILON), 1.0 - _EPSILON)
        cost += label * math.log(p) + (1 - label) * math.log(1 - p)
    return -cost / m


def gradient_cost(x: Matrix, y: Vector, w: Vector, b: float) -> tuple[list[float], float]:
    """Return the gradient of the loss with respect to the weights and the bias."""
    m = _sample_count(x, y)
    dj_dw = [0.0] * len(x[0])
    dj_db = 0.0
    for row, label in zip(x, y):
        error = sigmoid(dot_product(row, w) + b) - label
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
        dj_dw, dj_db = gradient_cost(x, y, weights, bias)
        weights = [wj - alpha * gj for wj, gj in zip(weights, dj_dw)]
        bias -= alpha * dj_db
    return weights, bias


def compute_predictions(x: Matrix, w: Vector, b: float) -> list[float]:
    """Return the predicted probability of the positive class for every sample."""
    return [sigmoid(dot_product(row, w) + b) for row in x]