"""
arithmetic.py

Допоміжна арифметика:
    - factorial(n)               – факторіал цілого n >= 0;
    - binomial_coefficient(n, k) – біноміальний коефіцієнт C(n, k);
    - round_dp(value, dp)        – округлення до dp знаків після коми
                                   (половина – від нуля).
"""

from __future__ import annotations

from math import copysign, floor, isfinite

from .errors import InvalidBinomial, NegativeFactorial


def factorial(n: int) -> int:
    """
    n! для n >= 0.

    Raises
    ------
    NegativeFactorial
        Якщо n < 0.
    """
    n = int(n)
    if n < 0:
        raise NegativeFactorial()

    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def binomial_coefficient(n: int, k: int) -> int:
    """
    C(n, k) = n! / (k! (n - k)!).

    Використовується у формулах скінченних різниць порядку n.
    """
    if k > n:
        raise InvalidBinomial()

    return factorial(n) // (factorial(k) * factorial(n - k))


def round_dp(value: float, dp: int) -> float:
    """
    Округлити value до dp знаків після коми.

    На відміну від вбудованого round() (банківське округлення),
    половина завжди округлюється від нуля: round_dp(2.5, 0) == 3.0.

    Нескінченності й NaN повертаються без змін. Так само без змін
    повертається value, якщо 10^dp або value * 10^dp не вміщується у float.
    """
    if not isfinite(value):
        return value

    try:
        scale = 10.0 ** dp
    except OverflowError:
        return value

    # Від'ємне dp за межами float: округлення до 10^|dp| дає нуль
    if scale == 0.0:
        return copysign(0.0, value)

    scaled = value * scale
    if not isfinite(scaled):
        return value

    return copysign(floor(abs(scaled) + 0.5), scaled) / scale


__all__ = [
    "factorial",
    "binomial_coefficient",
    "round_dp",
]
