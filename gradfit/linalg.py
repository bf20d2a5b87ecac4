"""Small vector helpers shared by the regression models."""

from __future__ import annotations

from collections.abc import Sequence


def dot_product(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the dot product of two equally long vectors."""
    if len(a) != len(b):
        raise ValueError(f"vector lengths differ: {len(a)} and {len(b)}")
    return float(sum(p * q for p, q in zip(a, b)))