"""
newton.py

Метод Ньютона–Рафсона для мінімізації функції однієї змінної.

Ідея:
    x_{k+1} = x_k - f'(x_k) / f''(x_k),
    обидві похідні наближаються центральними скінченними різницями
    (core/finite_difference.py), тож аналітичні похідні не потрібні.

Зупинка: |x_{k+1} - x_k| < tolerance або max_iter.
Метод шукає стаціонарну точку: без перевірки знаку f'' він так само
охоче збігається до максимуму.
"""

from __future__ import annotations

import logging
from typing import Optional

from .errors import ZeroCurvature
from .finite_difference import central_difference, validate_step
from .functions import Scalar1DFunction
from .iteration_result import IterationCallback, IterationResult
from .settings import DEFAULT_MAX_ITER, DEFAULT_TOLERANCE, validate_tolerance

logger = logging.getLogger(__name__)


def newton_raphson(
    func: Scalar1DFunction,
    x0: float,
    tolerance: float = DEFAULT_TOLERANCE,
    max_iter: int = DEFAULT_MAX_ITER,
    step: float = 1e-4,
    callback: Optional[IterationCallback] = None,
) -> float:
    """
    Знайти стаціонарну точку func методом Ньютона–Рафсона.

    Parameters
    ----------
    func : Callable[[float], float]
        Цільова функція.
    x0 : float
        Початкове наближення.
    tolerance : float
        Поріг зміни x між ітераціями, tolerance >= 0.
    max_iter : int
        Максимальна кількість ітерацій.
    step : float
        Крок h скінченних різниць, h > 0.

    Raises
    ------
    InvalidTolerance, InvalidStep
        Некоректні параметри (до жодного виклику func).
    ZeroCurvature
        f''(x_k) = 0, крок Ньютона не визначений.
    """
    validate_tolerance(tolerance)
    validate_step(step, 2)

    x = float(x0)
    previous = x + tolerance
    stopped_by = "max_iter"

    for k in range(1, max_iter + 1):
        d1 = central_difference(func, x, step, 1)
        d2 = central_difference(func, x, step, 2)

        if d2 == 0.0:
            raise ZeroCurvature(
                f"The second derivative vanished at x={x!r} (iteration {k})"
            )

        x = x - d1 / d2

        logger.debug("newton: iteration %d, x=%r, f'=%r, f''=%r", k, x, d1, d2)

        if callback is not None:
            callback(
                IterationResult(
                    index=k,
                    x=x,
                    f=None,
                    meta={"method": "newton", "d1": d1, "d2": d2},
                )
            )

        if abs(previous - x) < tolerance:
            stopped_by = "tol"
            break

        previous = x

    logger.debug("newton: stopped by %s, x=%r", stopped_by, x)
    return x


__all__ = [
    "newton_raphson",
]
