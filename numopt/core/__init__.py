"""
core

Числові методи numopt: дужка та мінімізатори на її основі, мінімізація на
відрізку, метод Ньютона–Рафсона, скінченні різниці та допоміжна арифметика.
"""

from .arithmetic import binomial_coefficient, factorial, round_dp
from .bound_search import bound_golden_minimize, bound_minimize
from .bracket import Bracket
from .bracket_search import (
    interpolate_once,
    minimize_by_parabolic_interpolation,
    minimize_by_ratio,
    minimize_golden_section,
)
from .errors import (
    BracketError,
    BracketNotADip,
    ConvergenceError,
    DeadEnd,
    DupeBoundForBracket,
    InvalidBinomial,
    InvalidOrder,
    InvalidParameter,
    InvalidRatio,
    InvalidStep,
    InvalidTolerance,
    NegativeFactorial,
    NumoptError,
    ZeroCurvature,
)
from .finite_difference import (
    FD_BACKWARD,
    FD_CENTRAL,
    FD_FORWARD,
    backward_difference,
    central_difference,
    derivative,
    forward_difference,
    gradient,
)
from .iteration_result import IterationCallback, IterationResult
from .newton import newton_raphson
from .settings import DEFAULT_MAX_ITER, DEFAULT_TOLERANCE, GOLDEN_RATIO

__all__ = [
    "Bracket",
    "minimize_by_ratio",
    "minimize_golden_section",
    "minimize_by_parabolic_interpolation",
    "interpolate_once",
    "bound_minimize",
    "bound_golden_minimize",
    "newton_raphson",
    "forward_difference",
    "backward_difference",
    "central_difference",
    "derivative",
    "gradient",
    "FD_FORWARD",
    "FD_BACKWARD",
    "FD_CENTRAL",
    "factorial",
    "binomial_coefficient",
    "round_dp",
    "IterationResult",
    "IterationCallback",
    "GOLDEN_RATIO",
    "DEFAULT_TOLERANCE",
    "DEFAULT_MAX_ITER",
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
