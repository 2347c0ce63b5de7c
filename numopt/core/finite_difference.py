"""
finite_difference.py

Чисельне диференціювання методом скінченних різниць.

Ідея:
    Похідна порядку n наближається зваженою сумою значень функції у вузлах
    сітки з кроком h, ваги – біноміальні коефіцієнти зі знаком:

        вперед:   f^(n)(x) ≈ Σ_{i=0..n} (-1)^(n-i) C(n, i) f(x + i h)         / h^n
        назад:    f^(n)(x) ≈ Σ_{i=0..n} (-1)^i     C(n, i) f(x - i h)         / h^n
        центр.:   f^(n)(x) ≈ Σ_{i=0..n} (-1)^i     C(n, i) f(x + (n/2 - i) h) / h^n

    Центральна різниця має похибку O(h^2), інші – O(h).

Публічний інтерфейс:
    - forward_difference / backward_difference / central_difference;
    - derivative(...)  – виклик конкретного методу за константою FD_*;
    - gradient(...)    – чисельний градієнт функції кількох змінних.
"""

from __future__ import annotations

from typing import Callable, Dict

import numpy as np

from .arithmetic import binomial_coefficient
from .errors import InvalidOrder, InvalidStep
from .functions import ArrayLike, Scalar1DFunction, ScalarFunction

# ---------------------------------------------------------------------------
# Константи / "enum" для типів скінченних різниць
# ---------------------------------------------------------------------------

FD_FORWARD = "forward"
FD_BACKWARD = "backward"
FD_CENTRAL = "central"

DEFAULT_STEP = 1e-5

FiniteDifferenceMethod = str


def validate_step(step: float, order: int = 1) -> None:
    """h > 0 та n >= 0; NaN також відхиляється."""
    if not step > 0.0:
        raise InvalidStep(f"Invalid step h={step!r}, h must be greater than 0")
    if order < 0:
        raise InvalidOrder(f"Invalid order n={order!r}, n must be greater than or equal to 0")


# ---------------------------------------------------------------------------
# Скінченні різниці для функції однієї змінної
# ---------------------------------------------------------------------------

def forward_difference(
    func: Scalar1DFunction,
    x: float,
    step: float = DEFAULT_STEP,
    order: int = 1,
) -> float:
    """
    Різниця вперед порядку order у точці x.

    Parameters
    ----------
    func : Callable[[float], float]
        Функція, похідну якої шукаємо.
    x : float
        Точка, в якій обчислюється похідна.
    step : float
        Крок сітки h > 0. Менший крок зменшує похибку методу, але
        збільшує похибку округлення.
    order : int
        Порядок похідної n >= 0; потребує n + 1 виклик func.
    """
    validate_step(step, order)

    total = 0.0
    for i in range(order + 1):
        sign = -1.0 if (order - i) % 2 else 1.0
        total += sign * binomial_coefficient(order, i) * func(x + i * step)

    return total / step ** order


def backward_difference(
    func: Scalar1DFunction,
    x: float,
    step: float = DEFAULT_STEP,
    order: int = 1,
) -> float:
    """
    Різниця назад порядку order у точці x (вузли x, x - h, ..., x - n h).
    """
    validate_step(step, order)

    total = 0.0
    for i in range(order + 1):
        sign = -1.0 if i % 2 else 1.0
        total += sign * binomial_coefficient(order, i) * func(x - i * step)

    return total / step ** order


def central_difference(
    func: Scalar1DFunction,
    x: float,
    step: float = DEFAULT_STEP,
    order: int = 1,
) -> float:
    """
    Центральна різниця порядку order; вузли симетричні відносно x.

    Для order = 1 це (f(x + h/2) - f(x - h/2)) / h,
    для order = 2 – (f(x + h) - 2 f(x) + f(x - h)) / h^2.
    """
    validate_step(step, order)

    half = order / 2.0
    total = 0.0
    for i in range(order + 1):
        sign = -1.0 if i % 2 else 1.0
        total += sign * binomial_coefficient(order, i) * func(x + (half - i) * step)

    return total / step ** order


_METHODS: Dict[FiniteDifferenceMethod, Callable[..., float]] = {
    FD_FORWARD: forward_difference,
    FD_BACKWARD: backward_difference,
    FD_CENTRAL: central_difference,
}


def derivative(
    func: Scalar1DFunction,
    x: float,
    step: float = DEFAULT_STEP,
    order: int = 1,
    method: FiniteDifferenceMethod = FD_CENTRAL,
) -> float:
    """
    Обчислити похідну порядку order обраним методом скінченних різниць.

    method : "forward" | "backward" | "central" (див. константи FD_*).
    """
    impl = _METHODS.get(method)
    if impl is None:
        raise ValueError(
            f"Unknown finite difference method '{method}', "
            f"expected one of: {', '.join(_METHODS)}"
        )
    return impl(func, x, step, order)


# ---------------------------------------------------------------------------
# Градієнт функції кількох змінних
# ---------------------------------------------------------------------------

def gradient(
    func: ScalarFunction,
    x: ArrayLike,
    step: float = DEFAULT_STEP,
) -> ArrayLike:
    """
    Чисельний градієнт функції кількох змінних.

    Кожна компонента – перша центральна різниця (central_difference)
    вздовж відповідного базисного напрямку e_i:

        ∂f/∂x_i ≈ (f(x + h/2 e_i) - f(x - h/2 e_i)) / h

    Parameters
    ----------
    func : Callable[[np.ndarray], float]
        Скалярна функція вектора.
    x : array_like
        Точка (одномірний масив довжини n).
    step : float
        Крок h > 0.

    Returns
    -------
    np.ndarray
        Масив форми (n,).
    """
    validate_step(step, 1)

    point = np.asarray(x, dtype=float)
    directions = np.eye(point.size)

    def along(e: ArrayLike) -> Scalar1DFunction:
        return lambda t: func(point + t * e)

    return np.array(
        [central_difference(along(e), 0.0, step, 1) for e in directions],
        dtype=float,
    )


__all__ = [
    "FD_FORWARD",
    "FD_BACKWARD",
    "FD_CENTRAL",
    "DEFAULT_STEP",
    "FiniteDifferenceMethod",
    "validate_step",
    "forward_difference",
    "backward_difference",
    "central_difference",
    "derivative",
    "gradient",
]
