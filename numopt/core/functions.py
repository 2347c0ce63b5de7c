"""
functions.py

Типи цільових функцій та невеликий реєстр тестових функцій однієї змінної.

Формат:
    - скалярна функція однієї змінної: float -> float;
    - функція кількох змінних (для чисельного градієнта): np.ndarray -> float;
    - реєстр FUNCTIONS для прикладів, тестів і порівняння методів.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

import numpy as np

ArrayLike = np.ndarray
Scalar1DFunction = Callable[[float], float]
ScalarFunction = Callable[[ArrayLike], float]


# ---------------------------------------------------------------------------
# Тестові функції однієї змінної
# ---------------------------------------------------------------------------

def quadratic(x: float) -> float:
    """
    q(x) = x^2 + 6x + 3, мінімум у x* = -3, q(x*) = -6.
    """
    return x ** 2 + 6.0 * x + 3.0


def quartic(x: float) -> float:
    """
    p(x) = x^4 - 2x^3 + 4, локальний мінімум у x* = 1.5.

    p'(x) = 4x^3 - 6x^2 = 2x^2 (2x - 3); у x = 0 – точка перегину.
    """
    return x ** 4 - 2.0 * x ** 3 + 4.0


def shifted_abs(x: float) -> float:
    """
    a(x) = |x - 2| + 1 – негладкий мінімум у x* = 2.
    """
    return abs(x - 2.0) + 1.0


def cosine_well(x: float) -> float:
    """
    c(x) = -cos(x) + 0.1 x^2, мінімум у x* = 0.
    """
    return float(-np.cos(x) + 0.1 * x ** 2)


# ---------------------------------------------------------------------------
# Реєстр функцій
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TargetFunction:
    key: str
    name: str
    func: Scalar1DFunction
    x_min: float
    bracket: tuple[float, float, float]


FUNCTIONS: Dict[str, TargetFunction] = {
    "quadratic": TargetFunction(
        key="quadratic",
        name="q(x) = x^2 + 6x + 3",
        func=quadratic,
        x_min=-3.0,
        bracket=(-9.0, 1.0, 4.0),
    ),
    "quartic": TargetFunction(
        key="quartic",
        name="p(x) = x^4 - 2x^3 + 4",
        func=quartic,
        x_min=1.5,
        bracket=(0.5, 1.0, 2.0),
    ),
    "shifted_abs": TargetFunction(
        key="shifted_abs",
        name="a(x) = |x - 2| + 1",
        func=shifted_abs,
        x_min=2.0,
        bracket=(-1.0, 1.5, 6.0),
    ),
    "cosine_well": TargetFunction(
        key="cosine_well",
        name="c(x) = -cos(x) + 0.1 x^2",
        func=cosine_well,
        x_min=0.0,
        bracket=(-2.0, 0.3, 1.5),
    ),
}

__all__ = [
    "ArrayLike",
    "Scalar1DFunction",
    "ScalarFunction",
    "quadratic",
    "quartic",
    "shifted_abs",
    "cosine_well",
    "TargetFunction",
    "FUNCTIONS",
]
