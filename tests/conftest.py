"""
Спільні фікстури для тестів numopt.
"""

import pytest


class CallCounter:
    """Обгортка над цільовою функцією, що рахує кількість викликів."""

    def __init__(self, func):
        self.func = func
        self.calls = 0

    def __call__(self, x):
        self.calls += 1
        return self.func(x)


@pytest.fixture
def counted():
    """
    Фабрика лічильників викликів.

    Приклад:
        def test_no_calls(counted):
            f = counted(quadratic)
            ...
            assert f.calls == 0
    """
    return CallCounter
