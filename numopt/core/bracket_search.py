"""
bracket_search.py

Ітераційна мінімізація скалярної функції на основі дужки (Bracket).

Ідея:
    - будуємо початкову валідну дужку (left, center, right);
    - на кожній ітерації дужка пропонує пробну точку, ми обчислюємо в ній f
      і вбудовуємо результат у нову, вужчу дужку (Bracket.longer_bound);
    - повертаємо абсцису центру останньої дужки.

Підтримувані способи вибору пробної точки:

    1) поділ ширшого підінтервалу у відношенні ratio (minimize_by_ratio);
    2) золотий переріз, ratio = φ (minimize_golden_section);
    3) параболічна інтерполяція (minimize_by_parabolic_interpolation).

Критерій зупинки:
    |опорне значення - f(center)| < tolerance, де опорне значення на першій
    ітерації дорівнює f(center) + tolerance, а далі – абсцисі центру
    попередньої ітерації. Через це порівняння (абсциса проти значення
    функції) цикл на практиці здебільшого завершується вичерпанням точності
    або max_iter, а результат наближається до мінімуму з точністю, обмеженою
    лише арифметикою з плаваючою комою.

Обробка структурних помилок (BracketError) відрізняється:
    - методи з ratio трактують їх як вичерпання точності (дві межі злилися)
      і повертають поточний центр;
    - параболічна інтерполяція пробросить їх викликачу.

Публічний інтерфейс:
    - minimize_by_ratio(...)
    - minimize_golden_section(...)
    - minimize_by_parabolic_interpolation(...)
    - interpolate_once(...)
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from .bracket import Bracket
from .errors import BracketError, DeadEnd
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

# Імена методів для логів та meta
BRACKET_RATIO = "bracket_ratio"
BRACKET_GOLDEN_SECTION = "bracket_golden_section"
BRACKET_PARABOLIC = "bracket_parabolic"

TrialSelector = Callable[[Bracket], float]


# ---------------------------------------------------------------------------
# Спільний ітераційний цикл
# ---------------------------------------------------------------------------

def _iterate(
    func: Scalar1DFunction,
    bracket: Bracket,
    select_trial: TrialSelector,
    tolerance: float,
    max_iter: int,
    method: str,
    recover_bracket_errors: bool,
    detect_dead_end: bool,
    callback: Optional[IterationCallback],
) -> float:
    """
    Звужувати дужку, доки не спрацює критерій зупинки.

    recover_bracket_errors : якщо True, BracketError під час оновлення дужки
                             означає вичерпання точності -> повертаємо центр.
    detect_dead_end        : якщо True, f(center) нової дужки, побітово рівне
                             попередньому, дає DeadEnd (до перевірки tolerance).
    """
    reference = bracket.f_center + tolerance
    stopped_by = "max_iter"

    for k in range(1, max_iter + 1):
        trial = select_trial(bracket)
        f_trial = func(trial)

        try:
            folded = bracket.longer_bound(trial, f_trial)
        except BracketError as exc:
            if not recover_bracket_errors:
                raise
            logger.debug(
                "%s: iteration %d, precision exhausted (%s)", method, k, exc
            )
            stopped_by = "precision"
            break

        # Значення в центрі побітово те саме, що й на попередній ітерації
        if detect_dead_end and folded.f_center == bracket.f_center:
            raise DeadEnd(
                f"Reached a dead end at iteration {k}: f(center)={folded.f_center!r} "
                f"did not change, bracket=({folded.left!r}, {folded.center!r}, "
                f"{folded.right!r})"
            )

        bracket = folded

        logger.debug(
            "%s: iteration %d, trial=%r, f(trial)=%r, bracket=(%r, %r, %r)",
            method, k, trial, f_trial, bracket.left, bracket.center, bracket.right,
        )

        if callback is not None:
            callback(
                IterationResult(
                    index=k,
                    x=bracket.center,
                    f=bracket.f_center,
                    meta={
                        "method": method,
                        "trial": trial,
                        "f_trial": f_trial,
                        "bracket": bracket,
                    },
                )
            )

        if abs(reference - bracket.f_center) < tolerance:
            stopped_by = "tol"
            break

        reference = bracket.center

    logger.debug(
        "%s: stopped by %s, center=%r, f(center)=%r",
        method, stopped_by, bracket.center, bracket.f_center,
    )
    return bracket.center


# ---------------------------------------------------------------------------
# Методи з поділом у відношенні ratio
# ---------------------------------------------------------------------------

def minimize_by_ratio(
    func: Scalar1DFunction,
    x1: float,
    x2: float,
    x3: float,
    ratio: float,
    tolerance: float = DEFAULT_TOLERANCE,
    max_iter: int = DEFAULT_MAX_ITER,
    callback: Optional[IterationCallback] = None,
) -> float:
    """
    Мінімізація поділом ширшого підінтервалу дужки у відношенні ratio.

    Parameters
    ----------
    func : Callable[[float], float]
        Цільова функція однієї змінної.
    x1, x2, x3 : float
        Три точки початкової дужки (у довільному порядку). Середня з них
        повинна мати строго найменше значення f.
    ratio : float
        Відношення поділу, ratio >= 1.
    tolerance : float
        Поріг критерію зупинки, tolerance >= 0.
    max_iter : int
        Максимальна кількість ітерацій.
    callback : Optional[Callable[[IterationResult], None]]
        Викликається після кожного успішного оновлення дужки.

    Returns
    -------
    float
        Абсциса центру останньої дужки – наближення локального мінімуму.

    Raises
    ------
    InvalidTolerance, InvalidRatio
        Некоректні параметри (до жодного виклику func).
    DupeBoundForBracket, BracketNotADip
        Початкова дужка невалідна. Під час ітерацій ці помилки означають
        вичерпання точності й не пробросяться.
    """
    validate_tolerance(tolerance)
    validate_ratio(ratio)

    bracket = Bracket.new(x1, x2, x3, func)

    return _iterate(
        func,
        bracket,
        lambda b: b.new_val_from_ratio(ratio),
        tolerance,
        max_iter,
        method=BRACKET_RATIO,
        recover_bracket_errors=True,
        detect_dead_end=False,
        callback=callback,
    )


def minimize_golden_section(
    func: Scalar1DFunction,
    x1: float,
    x2: float,
    x3: float,
    tolerance: float = DEFAULT_TOLERANCE,
    max_iter: int = DEFAULT_MAX_ITER,
    callback: Optional[IterationCallback] = None,
) -> float:
    """
    Метод золотого перерізу на дужці: minimize_by_ratio з ratio = φ.

    Приклад:
        >>> round_dp(minimize_golden_section(quadratic, 4.0, -9.0, 1.0, 1e-4, 2000), 4)
        -3.0
    """
    validate_tolerance(tolerance)

    bracket = Bracket.new(x1, x2, x3, func)

    return _iterate(
        func,
        bracket,
        lambda b: b.new_val_from_ratio(GOLDEN_RATIO),
        tolerance,
        max_iter,
        method=BRACKET_GOLDEN_SECTION,
        recover_bracket_errors=True,
        detect_dead_end=False,
        callback=callback,
    )


# ---------------------------------------------------------------------------
# Параболічна інтерполяція
# ---------------------------------------------------------------------------

def interpolate_once(
    func: Scalar1DFunction,
    x1: float,
    x2: float,
    x3: float,
) -> float:
    """
    Один крок параболічної інтерполяції: вершина параболи через три точки.

    Приклад:
        >>> interpolate_once(quartic, 0.5, 1.0, 2.0)
        1.2142857142857142
    """
    return Bracket.new(x1, x2, x3, func).parabolic_interpolation()


def minimize_by_parabolic_interpolation(
    func: Scalar1DFunction,
    x1: float,
    x2: float,
    x3: float,
    tolerance: float = DEFAULT_TOLERANCE,
    max_iter: int = DEFAULT_MAX_ITER,
    callback: Optional[IterationCallback] = None,
) -> float:
    """
    Послідовна параболічна інтерполяція до збіжності.

    Збігається швидше за золотий переріз біля гладкого мінімуму, але
    пробна точка – лише кандидат.

    Raises
    ------
    InvalidTolerance
        tolerance < 0 (до жодного виклику func).
    DupeBoundForBracket, BracketNotADip
        Як для початкової дужки, так і під час ітерацій (без відновлення).
    DeadEnd
        Дві ітерації поспіль дали побітово однакове f(center): пробна
        точка виявилась не нижчою за центр, парабола "буксує".
    """
    validate_tolerance(tolerance)

    bracket = Bracket.new(x1, x2, x3, func)

    return _iterate(
        func,
        bracket,
        Bracket.parabolic_interpolation,
        tolerance,
        max_iter,
        method=BRACKET_PARABOLIC,
        recover_bracket_errors=False,
        detect_dead_end=True,
        callback=callback,
    )


__all__ = [
    "BRACKET_RATIO",
    "BRACKET_GOLDEN_SECTION",
    "BRACKET_PARABOLIC",
    "minimize_by_ratio",
    "minimize_golden_section",
    "minimize_by_parabolic_interpolation",
    "interpolate_once",
]
