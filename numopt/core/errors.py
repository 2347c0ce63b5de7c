"""
errors.py

Ієрархія винятків бібліотеки.

Групи:
    - структурні помилки дужки (BracketError):
        * DupeBoundForBracket – дві межі дужки збігаються;
        * BracketNotADip      – центр не є найнижчою з трьох точок;
    - помилки параметрів (InvalidParameter):
        * InvalidRatio, InvalidTolerance, InvalidStep, InvalidOrder,
          NegativeFactorial, InvalidBinomial;
    - помилки збіжності (ConvergenceError):
        * DeadEnd       – ітерація параболічної інтерполяції стала на місці;
        * ZeroCurvature – друга похідна дорівнює нулю (метод Ньютона).

Структурні помилки та помилки параметрів наслідуються також від ValueError,
помилки збіжності – від ArithmeticError, тож код, що ловить вбудовані типи,
продовжує працювати.
"""

from __future__ import annotations

from typing import Optional


class NumoptError(Exception):
    """Базовий клас усіх помилок numopt."""

    default_message: str = "numopt error"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)


# ---------------------------------------------------------------------------
# Структурні помилки дужки
# ---------------------------------------------------------------------------

class BracketError(NumoptError, ValueError):
    """Дужка (left, center, right) не задовольняє свої інваріанти."""

    default_message = "invalid bracket"


class DupeBoundForBracket(BracketError):
    default_message = (
        "A bracket bound is duplicated and therefore the bracket would be invalid"
    )


class BracketNotADip(BracketError):
    default_message = (
        "The bracket does not encapsulate a dip: the center value must be "
        "strictly lower than both bound values"
    )


# ---------------------------------------------------------------------------
# Помилки параметрів
# ---------------------------------------------------------------------------

class InvalidParameter(NumoptError, ValueError):
    """Некоректний параметр методу; перевіряється до першого виклику f."""

    default_message = "invalid parameter"


class InvalidRatio(InvalidParameter):
    default_message = "Invalid ratio, the ratio must be greater than or equal to 1"


class InvalidTolerance(InvalidParameter):
    default_message = "Invalid tolerance, the tolerance must be greater than or equal to 0"


class InvalidStep(InvalidParameter):
    default_message = "Invalid step, the finite difference step must be greater than 0"


class InvalidOrder(InvalidParameter):
    default_message = "Invalid order, the derivative order must be greater than or equal to 0"


class NegativeFactorial(InvalidParameter):
    default_message = "The input to a factorial must be positive or 0"


class InvalidBinomial(InvalidParameter):
    default_message = "The value of n must be larger than or equal to the value of k"


# ---------------------------------------------------------------------------
# Помилки збіжності
# ---------------------------------------------------------------------------

class ConvergenceError(NumoptError, ArithmeticError):
    """Ітераційний процес не може продовжуватись."""

    default_message = "the iterative process failed to converge"


class DeadEnd(ConvergenceError):
    default_message = "Reached a dead end: the bracket did not change between iterations"


class ZeroCurvature(ConvergenceError):
    default_message = "The second derivative vanished, the Newton step is undefined"


__all__ = [
    "NumoptError",
    "BracketError",
    "DupeBoundForBracket",
    "BracketNotADip",
    "InvalidParameter",
    "InvalidRatio",
    "InvalidTolerance",
    "InvalidStep",
    "InvalidOrder",
    "NegativeFactorial",
    "InvalidBinomial",
    "ConvergenceError",
    "DeadEnd",
    "ZeroCurvature",
]
