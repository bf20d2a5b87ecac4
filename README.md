# gradfit

Small, dependency-free implementations of linear and logistic regression,
trained with batch gradient descent on plain Python lists.

## Install

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Library use

Features are a list of rows (one list of floats per sample). Targets are a
list of floats. For logistic regression the targets are labels, 0.0 or 1.0.

```python
from gradfit import linear_regression, logistic_regression

x = [[1.0, 2.0], [2.0, 1.0], [3.0, 4.0]]
y = [8.0, 7.0, 16.0]

w, b = linear_regression.gradient_descent(x, y, [0.0, 0.0], 0.0, 0.01, 1000)
print(linear_regression.compute_cost(x, y, w, b))
print(linear_regression.compute_predictions(x, w, b))

labels = [0.0, 0.0, 1.0]
w, b = logistic_regression.gradient_descent(x, labels, [0.0, 0.0], 0.0, 0.1, 1000)
print(logistic_regression.compute_predictions(x, w, b))  # probabilities
```

What the modules provide:

- `gradfit.linalg.dot_product(a, b)`: the dot product of two vectors. It
  raises `ValueError` if their lengths differ.
- `gradfit.linear_regression`: `compute_cost(x, y, w, b)` (half the mean
  squared error), `compute_gradient(x, y, w, b)`,
  `gradient_descent(x, y, w, b, alpha, iterations)` and
  `compute_predictions(x, w, b)`.
- `gradfit.logistic_regression`: `sigmoid(z)`, computed so that large
  `|z|` does not overflow; `compute_cost(x, y, w, b)` (mean log loss, with
  probabilities clipped to `[1e-15, 1 - 1e-15]`); `gradient_cost(x, y, w, b)`;
  `gradient_descent(x, y, w, b, alpha, iterations)` and
  `compute_predictions(x, w, b)`, which returns probabilities of the
  positive class.

The gradient functions return a `(dj_dw, dj_db)` pair. `gradient_descent`
returns the trained `(w, b)` pair and leaves the arguments you passed
unchanged. The cost and gradient functions raise `ValueError` when there are
no samples or when the number of samples and targets differ.

## Demos

Two commands generate random samples whose features are whole numbers from
1 to 100, train a model from zero weights and bias, and print the final
weights, bias, training time and the first five predictions:

```
gradfit-linear
gradfit-logistic
```

The linear demo fits `y = 5 + x0 + x1 + x2 + x3 + noise`, where the noise is
a whole number from 0 to 9. The logistic demo labels each sample 1.0 when the
sigmoid of that same sum is above 0.5, and 0.0 otherwise; for each of the
first five samples it prints the probability, the label and the predicted
class (1 when the probability is at least 0.5).

Both commands take these options:

- `--samples N` (default 1000)
- `--iterations N` (default 1000)
- `--alpha RATE` (default 0.0001)
- `--seed N` (default: seeded from the current time)

`gradfit-logistic` also takes `--features N` (default 4, at least 4).

The demos are also available as functions: `gradfit.linear_demo.generate_data(n, rng)`
and `gradfit.logistic_demo.generate_data(n, features, rng)` return `(x, y)`
from a `random.Random`, and each module's `main(argv=None)` runs the demo
and returns its exit status.

## What it does not do

gradfit works only on data held in memory as Python lists. It does not read
data sets from files, save or load trained models, or report the cost during
training; the demos train only on data they generate themselves.