"""
settings.py

Значення параметрів за замовчуванням та їх перевірка.

Усі методи налаштовуються аргументами виклику; тут зібрано типові значення
(щоб не дублювати їх у кожному модулі) і спільні перевірки, які
виконуються ДО першого обчислення цільової функції.
"""

from __future__ import annotations

from math import sqrt

from .errors import InvalidRatio, InvalidTolerance

# Число золотого перерізу φ = (√5 + 1) / 2 ≈ 1.618...
GOLDEN_RATIO: float = (sqrt(5.0) + 1.0) / 2.0

DEFAULT_TOLERANCE: float = 1e-6
DEFAULT_MAX_ITER: int = 500


def validate_tolerance(tolerance: float) -> None:
    """tolerance >= 0; NaN також відхиляється."""
    if not tolerance >= 0.0:
        raise InvalidTolerance(
            f"Invalid tolerance {tolerance!r}, the tolerance must be greater than or equal to 0"
        )


def validate_ratio(ratio: float) -> None:
    """ratio >= 1; NaN також відхиляється."""
    if not ratio >= 1.0:
        raise InvalidRatio(
            f"Invalid ratio {ratio!r}, the ratio must be greater than or equal to 1"
        )


__all__ = [
    "GOLDEN_RATIO",
    "DEFAULT_TOLERANCE",
    "DEFAULT_MAX_ITER",
    "validate_tolerance",
    "validate_ratio",
]
