"""Unit tests для мінімізаторів на основі дужки."""

import logging

import pytest

from numopt.core.arithmetic import round_dp
from numopt.core.bracket import Bracket
from numopt.core.bracket_search import (
    interpolate_once,
    minimize_by_parabolic_interpolation,
    minimize_by_ratio,
    minimize_golden_section,
)
from numopt.core.errors import (
    BracketNotADip,
    ConvergenceError,
    DeadEnd,
    DupeBoundForBracket,
    InvalidRatio,
    InvalidTolerance,
)
from numopt.core.functions import FUNCTIONS, quadratic, quartic, shifted_abs
from numopt.core.settings import GOLDEN_RATIO


class TestGoldenSection:
    """Золотий переріз на дужці."""

    def test_quadratic_end_to_end(self):
        """x^2 + 6x + 3 з дужки (-9, 1, 4) -> -3.0000."""
        x = minimize_golden_section(quadratic, -9.0, 1.0, 4.0, 1e-4, 2000)
        assert round_dp(x, 4) == -3.0

    def test_unsorted_input(self):
        x = minimize_golden_section(quadratic, 4.0, -9.0, 1.0, 1e-4, 2000)
        assert round_dp(x, 4) == -3.0

    def test_quartic(self):
        x = minimize_golden_section(quartic, 1.0, 2.0, 0.5, 1e-4, 2000)
        assert round_dp(x, 4) == 1.5

    @pytest.mark.parametrize("key", ["quadratic", "quartic", "cosine_well"])
    def test_registry_functions(self, key):
        tf = FUNCTIONS[key]
        x = minimize_golden_section(tf.func, *tf.bracket, 1e-8, 2000)
        assert x == pytest.approx(tf.x_min, abs=1e-6)

    def test_nonsmooth_minimum(self):
        tf = FUNCTIONS["shifted_abs"]
        x = minimize_golden_section(tf.func, *tf.bracket, 1e-8, 2000)
        assert x == pytest.approx(tf.x_min, abs=1e-6)

    def test_same_fixed_point_as_ratio_with_golden_ratio(self):
        golden = minimize_golden_section(quadratic, -9.0, 1.0, 4.0, 1e-4, 2000)
        ratio = minimize_by_ratio(quadratic, -9.0, 1.0, 4.0, GOLDEN_RATIO, 1e-4, 2000)
        assert golden == ratio

    def test_extra_iterations_after_convergence_do_not_move_center(self):
        """Подвоєння max_iter після збіжності зсуває центр менше ніж на tolerance."""
        x1 = minimize_golden_section(quadratic, -9.0, 1.0, 4.0, 1e-4, 2000)
        x2 = minimize_golden_section(quadratic, -9.0, 1.0, 4.0, 1e-4, 4000)
        assert abs(x1 - x2) < 1e-4

    def test_zero_iterations_returns_initial_center(self):
        assert minimize_golden_section(quadratic, -9.0, 1.0, 4.0, 1e-4, 0) == 1.0

    def test_large_tolerance_stops_once_center_settles(self):
        """
        Перший крок зсуває центр до -9 + 10/φ, другий лише звужує ліву межу;
        з tolerance = 10 цикл зупиняється після другої ітерації.
        """
        seen = []
        x = minimize_golden_section(
            quadratic, -9.0, 1.0, 4.0, 10.0, 2000, callback=seen.append
        )
        assert x == -9.0 + 10.0 / GOLDEN_RATIO
        assert [rec.index for rec in seen] == [1, 2]
        assert seen[1].meta["bracket"].left == pytest.approx(-5.180339887, abs=1e-8)


class TestRatio:
    """Поділ у довільному відношенні."""

    def test_quadratic_ratio_one_and_a_half(self):
        x = minimize_by_ratio(quadratic, 4.0, -9.0, 1.0, 1.5, 1e-4, 2000)
        assert round_dp(x, 4) == -3.0

    def test_invalid_ratio_fails_before_any_evaluation(self, counted):
        f = counted(quadratic)
        with pytest.raises(InvalidRatio):
            minimize_by_ratio(f, -9.0, 1.0, 4.0, 0.5, 1e-4, 2000)
        assert f.calls == 0

    def test_nan_ratio_is_invalid(self, counted):
        f = counted(quadratic)
        with pytest.raises(InvalidRatio):
            minimize_by_ratio(f, -9.0, 1.0, 4.0, float("nan"), 1e-4, 2000)
        assert f.calls == 0

    def test_tolerance_checked_before_ratio(self, counted):
        f = counted(quadratic)
        with pytest.raises(InvalidTolerance):
            minimize_by_ratio(f, -9.0, 1.0, 4.0, 0.5, -1.0, 2000)
        assert f.calls == 0

    def test_initial_bracket_errors_propagate(self):
        with pytest.raises(BracketNotADip):
            minimize_by_ratio(lambda x: x, 0.0, 1.0, 2.0, 1.5, 1e-4, 100)
        with pytest.raises(DupeBoundForBracket):
            minimize_by_ratio(quadratic, 1.0, 1.0, 4.0, 1.5, 1e-4, 100)

    def test_collapsed_bracket_is_treated_as_convergence(self, counted):
        """
        ratio = 1 дає пробну точку в самому центрі; DupeBoundForBracket
        перехоплюється, повертається поточний центр.
        """
        f = counted(quadratic)
        x = minimize_by_ratio(f, -9.0, 1.0, 4.0, 1.0, 1e-4, 2000)
        assert x == 1.0
        assert f.calls == 4

    def test_collapse_is_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="numopt")
        minimize_by_ratio(quadratic, -9.0, 1.0, 4.0, 1.0, 1e-4, 2000)
        assert "precision exhausted" in caplog.text
        assert "stopped by precision" in caplog.text


class TestParabolicInterpolation:
    """Параболічна інтерполяція: один крок та ітераційний метод."""

    def test_interpolate_once(self):
        assert interpolate_once(quartic, 0.5, 1.0, 2.0) == 1.2142857142857142

    def test_interpolate_once_requires_dip(self):
        with pytest.raises(BracketNotADip):
            interpolate_once(lambda x: x, 0.0, 1.0, 2.0)

    def test_quartic_five_iterations(self):
        x = minimize_by_parabolic_interpolation(quartic, 0.5, 1.0, 2.0, 1e-4, 5)
        assert round_dp(x, 6) == 1.482046

    def test_callback_receives_every_iteration(self):
        seen = []
        x = minimize_by_parabolic_interpolation(
            quartic, 0.5, 1.0, 2.0, 1e-4, 5, callback=seen.append
        )
        assert [rec.index for rec in seen] == [1, 2, 3, 4, 5]
        assert seen[0].meta["trial"] == 1.2142857142857142
        assert seen[-1].x == x
        assert isinstance(seen[-1].meta["bracket"], Bracket)

    def test_center_approaches_minimum_monotonically(self):
        seen = []
        minimize_by_parabolic_interpolation(
            quartic, 0.5, 1.0, 2.0, 1e-4, 5, callback=seen.append
        )
        centers = [rec.x for rec in seen]
        assert centers == sorted(centers)
        assert all(c < 1.5 for c in centers)

    def test_exact_parabola_converges(self):
        f = lambda x: (x - 2.0) ** 2 + 1.0
        x = minimize_by_parabolic_interpolation(f, 0.0, 1.0, 5.0, 1e-4, 1)
        assert x == 2.0

    def test_negative_tolerance_fails_before_any_evaluation(self, counted):
        f = counted(quartic)
        with pytest.raises(InvalidTolerance):
            minimize_by_parabolic_interpolation(f, 0.5, 1.0, 2.0, -1e-4, 5)
        assert f.calls == 0

    def test_bracket_errors_propagate_during_iterations(self, monkeypatch):
        """
        На відміну від методів з ratio, злиття меж під час ітерацій
        пробрасується викликачу.
        """
        monkeypatch.setattr(Bracket, "parabolic_interpolation", lambda self: self.center)
        with pytest.raises(DupeBoundForBracket):
            minimize_by_parabolic_interpolation(quartic, 0.5, 1.0, 2.0, 1e-4, 5)

    def test_ratio_and_parabolic_treat_collapse_differently(self, monkeypatch):
        """Одна й та сама вироджена пробна точка: ratio повертає центр, парабола – помилку."""
        assert minimize_by_ratio(quartic, 0.5, 1.0, 2.0, 1.0, 1e-4, 5) == 1.0

        monkeypatch.setattr(Bracket, "parabolic_interpolation", lambda self: self.center)
        with pytest.raises(DupeBoundForBracket):
            minimize_by_parabolic_interpolation(quartic, 0.5, 1.0, 2.0, 1e-4, 5)

    def test_unchanged_bracket_is_a_dead_end(self, monkeypatch):
        """Пробна точка на лівій межі повертає ту саму дужку -> DeadEnd."""
        monkeypatch.setattr(Bracket, "parabolic_interpolation", lambda self: self.left)
        with pytest.raises(DeadEnd):
            minimize_by_parabolic_interpolation(quartic, 0.5, 1.0, 2.0, 0.0, 5)

    def test_stalled_center_is_a_dead_end(self):
        """
        |x - 2| + 1 з (-1, 1.5, 6): друга вершина параболи (≈2.49) вища за
        центр 2.21875, тож f(center) повторюється побітово -> DeadEnd.
        """
        seen = []
        with pytest.raises(DeadEnd):
            minimize_by_parabolic_interpolation(
                shifted_abs, -1.0, 1.5, 6.0, 0.0, 3, callback=seen.append
            )
        assert [rec.index for rec in seen] == [1]
        assert seen[0].x == 2.21875

    def test_dead_end_checked_before_tolerance(self):
        with pytest.raises(DeadEnd):
            minimize_by_parabolic_interpolation(shifted_abs, -1.0, 1.5, 6.0, 1e3, 3)

    def test_dead_end_is_a_convergence_error(self):
        assert issubclass(DeadEnd, ConvergenceError)
        assert issubclass(DeadEnd, ArithmeticError)
