"""
iteration_result.py

Структура даних для представлення окремих ітерацій одномірної мінімізації.
Передається у callback мінімізаторів (трасування, логи, графіки).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional


@dataclass
class IterationResult:
    """
    Опис однієї ітерації.

    Атрибути:
        index  - номер ітерації (1, 2, ...)
        x      - поточне наближення мінімуму (центр дужки або середина відрізка)
        f      - значення функції в x (None, якщо в цій точці f не обчислювали)
        meta   - додаткова інформація (дужка, пробна точка, f у пробній точці, ...)
    """
    index: int
    x: float
    f: Optional[float]
    meta: Dict[str, Any] = field(default_factory=dict)


# Тип callback'а для трасування
IterationCallback = Callable[[IterationResult], None]


__all__ = [
    "IterationResult",
    "IterationCallback",
]
