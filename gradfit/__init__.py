"""Linear and logistic regression trained by batch gradient descent, with two demo commands."""

__version__ = "0.1.0"
__all__ = [
    "linalg",
    "linear_regression",
    "logistic_regression",
    "linear_demo",
    "logistic_demo",
]