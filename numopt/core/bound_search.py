"""
bound_search.py

Мінімізація на відрізку [x1, x2] без тристочкової дужки.

Ідея:
    - на кожній ітерації тримаємо дві внутрішні точки
          c = x2 - (x2 - x1) / ratio,
          d = x1 + (x2 - x1) / ratio;
    - порівнюємо f(c) і f(d) та відкидаємо гіршу частину відрізка;
    - зупиняємось, коли |x2 - x1| < tolerance або вичерпано max_iter,
      і повертаємо середину відрізка.

Для ratio = φ ≈ 1.618 це класичний метод золотого перерізу.
Порядок x1, x2 довільний: формули працюють і для x1 > x2.
"""

from __future__ import annotations

import logging
from typing import Optional

from .functions import Scalar1DFunction
from .iteration_result import IterationCallback, IterationResult
from .settings import (
    DEFAULT_MAX_ITER,
    DEFAULT_TOLERANCE,
    GOLDEN_RATIO,
    validate_ratio,
    validate_tolerance,
)

logger = logging.getLogger(__name__)


def bound_minimize(
    func: Scalar1DFunction,
    x1: float,
    x2: float,
    ratio: float,
    tolerance: float = DEFAULT_TOLERANCE,
    max_iter: int = DEFAULT_MAX_ITER,
    callback: Optional[IterationCallback] = None,
) -> float:
    """
    Звуження відрізка [x1, x2] поділом у відношенні ratio.

    Parameters
    ----------
    func : Callable[[float], float]
        Цільова функція; бажано унімодальна на відрізку.
    x1, x2 : float
        Кінці початкового відрізка.
    ratio : float
        Відношення поділу, ratio >= 1.
    tolerance : float
        Поріг довжини відрізка, tolerance >= 0.
    max_iter : int
        Максимальна кількість звужень.
    callback : Optional[Callable[[IterationResult], None]]
        Викликається після кожного звуження.

    Returns
    -------
    float
        Середина кінцевого відрізка.
    """
    validate_tolerance(tolerance)
    validate_ratio(ratio)

    c = x2 - (x2 - x1) / ratio
    d = x1 + (x2 - x1) / ratio
    stopped_by = "max_iter"

    for k in range(1, max_iter + 1):
        if abs(x2 - x1) < tolerance:
            stopped_by = "tol"
            break

        if func(c) < func(d):
            # Мінімум між x1 і d
            x2 = d
        else:
            # Мінімум між c і x2
            x1 = c

        c = x2 - (x2 - x1) / ratio
        d = x1 + (x2 - x1) / ratio

        if callback is not None:
            callback(
                IterationResult(
                    index=k,
                    x=(x2 + x1) / 2.0,
                    f=None,
                    meta={"method": "bound", "interval": (x1, x2)},
                )
            )

    logger.debug(
        "bound: stopped by %s, interval=(%r, %r)", stopped_by, x1, x2
    )
    return (x2 + x1) / 2.0


def bound_golden_minimize(
    func: Scalar1DFunction,
    x1: float,
    x2: float,
    tolerance: float = DEFAULT_TOLERANCE,
    max_iter: int = DEFAULT_MAX_ITER,
    callback: Optional[IterationCallback] = None,
) -> float:
    """Метод золотого перерізу на відрізку: bound_minimize з ratio = φ."""
    return bound_minimize(func, x1, x2, GOLDEN_RATIO, tolerance, max_iter, callback)


__all__ = [
    "bound_minimize",
    "bound_golden_minimize",
]
