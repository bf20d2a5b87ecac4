import math

import pytest

from gradfit.logistic_regression import (
    compute_cost,
    compute_predictions,
    gradient_cost,
    gradient_descent,
    sigmoid,
)

X = [[0.5, 1.0], [1.5, -0.5], [-1.0, 2.0], [2.0, 1.0], [-2.0, -1.0]]
Y = [1.0, 1.0, 0.0, 1.0, 0.0]


def test_sigmoid_at_zero_is_half():
    assert sigmoid(0.0) == 0.5


@pytest.mark.parametrize("z", [-30.0, -2.5, -0.1, 0.1, 1.0, 7.0])
def test_sigmoid_symmetry(z):
    assert sigmoid(z) + sigmoid(-z) == pytest.approx(1.0)


def test_sigmoid_saturates_without_overflow():
    assert sigmoid(1000.0) == 1.0
    assert sigmoid(-1000.0) == 0.0


def test_sigmoid_is_increasing():
    values = [sigmoid(z) for z in (-5.0, -1.0, 0.0, 1.0, 5.0)]
    assert values == sorted(values)
    assert len(set(values)) == len(values)


def test_cost_with_zero_model_is_log_two():
    assert compute_cost(X, Y, [0.0, 0.0], 0.0) == pytest.approx(math.log(2.0))


def test_gradient_matches_finite_differences():
    w = [0.2, -0.3]
    b = 0.1
    h = 1e-6
    dj_dw, dj_db = gradient_cost(X, Y, w, b)
    for j in range(len(w)):
        up = list(w)
        down = list(w)
        up[j] += h
        down[j] -= h
        numeric = (compute_cost(X, Y, up, b) - compute_cost(X, Y, down, b)) / (2 * h)
        assert dj_dw[j] == pytest.approx(numeric, rel=1e-4)
    numeric_b = (compute_cost(X, Y, w, b + h) - compute_cost(X, Y, w, b - h)) / (2 * h)
    assert dj_db == pytest.approx(numeric_b, rel=1e-4)


def test_gradient_descent_lowers_cost():
    w0 = [0.0, 0.0]
    w, b = gradient_descent(X, Y, w0, 0.0, 0.1, 100)
    assert compute_cost(X, Y, w, b) < compute_cost(X, Y, w0, 0.0)


def test_zero_iterations_returns_start():
    assert gradient_descent(X, Y, [0.25, -0.75], 1.0, 0.1, 0) == ([0.25, -0.75], 1.0)


def test_predictions_are_probabilities():
    predictions = compute_predictions(X, [1.3, -0.4], 0.2)
    assert len(predictions) == len(X)
    assert all(0.0 < p < 1.0 for p in predictions)


def test_predictions_with_zero_model_are_half():
    assert compute_predictions(X, [0.0, 0.0], 0.0) == [0.5] * len(X)


def test_empty_data_is_rejected():
    with pytest.raises(ValueError):
        gradient_cost([], [], [0.0], 0.0)


def test_mismatched_labels_are_rejected():
    with pytest.raises(ValueError):
        compute_cost(X, Y[:2], [0.0, 0.0], 0.0)