"""
bracket.py

Дужка (bracket) – три точки left < center < right, що "затискають" локальний
мінімум скалярної функції.

Інваріанти:
    - впорядкованість: left < center < right (жодні дві межі не збігаються);
    - "ямка" (dip):    f(center) < f(left) і f(center) < f(right).

Якщо обидва виконуються, то для неперервної f на (left, right) гарантовано
лежить локальний мінімум.

Дужка незмінна: кожен крок алгоритму створює нову дужку через конструктор,
який і є єдиним місцем перевірки інваріантів (див. Bracket.__post_init__).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .errors import BracketNotADip, DupeBoundForBracket
from .functions import Scalar1DFunction

Point = Tuple[float, float]


@dataclass(frozen=True)
class Bracket:
    """
    Валідна дужка з трьох точок та значень функції в них.

    Створення:
        Bracket.new(x1, x2, x3, func)      – з "сирих" абсцис (сортує, рахує f);
        Bracket.new_processed(l, fl, ...)  – з готових пар (x, f(x)), без сортування.

    Raises
    ------
    DupeBoundForBracket
        Межі не впорядковані строго (зокрема left == center або center == right).
    BracketNotADip
        Значення в центрі не є строго найменшим з трьох.
    """
    left: float
    f_left: float
    center: float
    f_center: float
    right: float
    f_right: float

    def __post_init__(self) -> None:
        if not (self.left < self.center < self.right):
            raise DupeBoundForBracket(
                f"A bracket bound is duplicated or out of order: "
                f"left={self.left!r}, center={self.center!r}, right={self.right!r}"
            )

        if not (self.f_center < self.f_left and self.f_center < self.f_right):
            raise BracketNotADip(
                f"The bracket does not encapsulate a dip: "
                f"f(left)={self.f_left!r}, f(center)={self.f_center!r}, "
                f"f(right)={self.f_right!r}"
            )

    # ------------------------------------------------------------------
    # Конструктори
    # ------------------------------------------------------------------

    @classmethod
    def new(
        cls,
        x1: float,
        x2: float,
        x3: float,
        func: Scalar1DFunction,
    ) -> "Bracket":
        """
        Побудувати дужку з трьох довільно впорядкованих абсцис.

        Абсциси приводяться до float і сортуються за зростанням,
        f обчислюється рівно тричі.
        """
        left, center, right = sorted((float(x1), float(x2), float(x3)))

        return cls.new_processed(
            left,
            func(left),
            center,
            func(center),
            right,
            func(right),
        )

    @classmethod
    def new_processed(
        cls,
        left: float,
        f_left: float,
        center: float,
        f_center: float,
        right: float,
        f_right: float,
    ) -> "Bracket":
        """
        Побудувати дужку з уже обчислених пар (x, f(x)).

        Порядок left < center < right забезпечує викликач; тут він лише
        перевіряється.
        """
        return cls(
            left=left,
            f_left=f_left,
            center=center,
            f_center=f_center,
            right=right,
            f_right=f_right,
        )

    # ------------------------------------------------------------------
    # Допоміжні властивості
    # ------------------------------------------------------------------

    @property
    def width(self) -> float:
        return self.right - self.left

    def as_points(self) -> Tuple[Point, Point, Point]:
        return (
            (self.left, self.f_left),
            (self.center, self.f_center),
            (self.right, self.f_right),
        )

    # ------------------------------------------------------------------
    # Вибір пробної точки
    # ------------------------------------------------------------------

    def new_val_from_ratio(self, ratio: float) -> float:
        """
        Пробна точка у ширшому з двох підінтервалів.

        Ширший підінтервал ділиться в точці, відстань якої від його
        зовнішнього краю дорівнює ширина / ratio. Для ratio = (√5 + 1) / 2
        це крок методу золотого перерізу.
        """
        if self.right - self.center > self.center - self.left:
            return self.right - (self.right - self.center) / ratio
        return self.left + (self.center - self.left) / ratio

    def parabolic_interpolation(self) -> float:
        """
        Абсциса вершини параболи через три точки дужки.

                 (f_r - f_c)(c² - l²) + (f_l - f_c)(r² - c²)
          x* = -----------------------------------------------
                 2 [ (f_r - f_c)(c - l) + (f_l - f_c)(r - c) ]

        Для валідної дужки обидва доданки знаменника додатні, тож x* завжди
        визначена. Результат – лише кандидат: він не гарантує покращення.
        """
        d_right = self.f_right - self.f_center
        d_left = self.f_left - self.f_center

        numerator = (
            d_right * (self.center ** 2 - self.left ** 2)
            + d_left * (self.right ** 2 - self.center ** 2)
        )
        denominator = 2.0 * (
            d_right * (self.center - self.left)
            + d_left * (self.right - self.center)
        )
        return numerator / denominator

    # ------------------------------------------------------------------
    # Оновлення дужки
    # ------------------------------------------------------------------

    def longer_bound(self, new_val: float, f_new_val: float) -> "Bracket":
        """
        Вбудувати обчислену пробну точку (new_val, f_new_val) у нову дужку.

        Класифікація за двома ознаками:
            нижче за центр & ліворуч   -> (left,    new_val, center)
            вище за центр  & ліворуч   -> (new_val, center,  right)
            нижче за центр & праворуч  -> (center,  new_val, right)
            вище за центр  & праворуч  -> (left,    center,  new_val)

        "Вище" включає рівність f_new_val == f_center, "праворуч" – збіг
        new_val == center; такі випадки дає конструктор у вигляді
        BracketNotADip / DupeBoundForBracket.
        """
        lower = f_new_val < self.f_center
        on_left = new_val < self.center

        if lower and on_left:
            return self.new_processed(
                self.left, self.f_left,
                new_val, f_new_val,
                self.center, self.f_center,
            )

        if on_left:
            return self.new_processed(
                new_val, f_new_val,
                self.center, self.f_center,
                self.right, self.f_right,
            )

        if lower:
            return self.new_processed(
                self.center, self.f_center,
                new_val, f_new_val,
                self.right, self.f_right,
            )

        return self.new_processed(
            self.left, self.f_left,
            self.center, self.f_center,
            new_val, f_new_val,
        )


__all__ = [
    "Point",
    "Bracket",
]
