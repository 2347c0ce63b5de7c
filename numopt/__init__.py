"""
numopt

Чисельне диференціювання та мінімізація функцій однієї змінної.

Приклад:
    from numopt import minimize_golden_section, round_dp

    x_star = minimize_golden_section(lambda x: x**2 + 6*x + 3, -9.0, 1.0, 4.0, 1e-4, 2000)
    round_dp(x_star, 4)  # -3.0
"""

import logging

from .core import *  # noqa: F401,F403
from .core import __all__ as _core_all
from .logging_config import (
    configure_from_env,
    disable_logging,
    enable_console_logging,
    set_level,
    set_module_level,
)

__version__ = "0.1.0"

# Бібліотека "мовчить", доки користувач не увімкне логування
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = list(_core_all) + [
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "set_level",
    "set_module_level",
]
