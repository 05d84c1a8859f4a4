"""
Тесты для Monotonicity Gate

Проверяет:
1. Предикат is_monotone (включая пустые кривые и повторяющиеся X)
2. Стабильную сортировку sort_ascending
3. Проверенное брендирование ensure_monotone
4. Неизменность входных данных
"""

import logging

import pytest

from pwlcurve.core.domain import XY, CurvePoint, MonotonicityViolation, POINT_COORDINATES
from pwlcurve.core.math.monotonicity import ensure_monotone, is_monotone, sort_ascending


@pytest.fixture
def two_points() -> list[dict]:
    """Кривая, монотонная по x и убывающая по y"""
    return [
        {"x": 0, "y": 0},
        {"x": 6, "y": -5},
    ]


class TestIsMonotone:
    """Тесты для is_monotone"""

    def test_predicate_per_coordinate(self, two_points) -> None:
        """Монотонность зависит от выбранной координаты"""
        assert is_monotone(two_points, XY)
        assert not is_monotone(two_points, XY.swapped())

    def test_empty_and_single_point(self) -> None:
        """Пустая кривая и кривая из одной точки монотонны"""
        assert is_monotone([], XY)
        assert is_monotone([{"x": 0, "y": 0}], XY)

    def test_repeated_x_is_weakly_monotone(self) -> None:
        """Равные X допустимы (вертикальные отрезки)"""
        curve = [{"x": 1, "y": 0}, {"x": 1, "y": 5}, {"x": 2, "y": 5}]
        assert is_monotone(curve, XY)

    def test_decrease_anywhere_detected(self) -> None:
        """Убывание в конце кривой обнаруживается"""
        curve = [{"x": 0, "y": 0}, {"x": 1, "y": 0}, {"x": 2, "y": 0}, {"x": 1.5, "y": 0}]
        assert not is_monotone(curve, XY)

    def test_infinite_coordinates(self) -> None:
        """Бесконечности участвуют в обычном сравнении"""
        assert is_monotone([{"x": float("-inf"), "y": 0}, {"x": float("inf"), "y": 0}], XY)
        assert not is_monotone([{"x": float("inf"), "y": 0}, {"x": 0, "y": 0}], XY)

    def test_pydantic_points(self) -> None:
        """Работает с точками CurvePoint"""
        curve = [CurvePoint(x=0, y=1), CurvePoint(x=2, y=0)]
        assert is_monotone(curve, POINT_COORDINATES)


class TestSortAscending:
    """Тесты для sort_ascending"""

    def test_sort_by_other_coordinate(self, two_points) -> None:
        """Сортировка по y делает кривую монотонной по y, но не по x"""
        yx = XY.swapped()
        sorted_curve = sort_ascending(two_points, yx)

        assert not is_monotone(sorted_curve, XY)
        assert is_monotone(sorted_curve, yx)

    def test_stable_for_ties(self) -> None:
        """Точки с равным X сохраняют исходный порядок"""
        curve = [
            {"x": 2, "y": "a"},
            {"x": 1, "y": "b"},
            {"x": 2, "y": "c"},
            {"x": 1, "y": "d"},
        ]
        labels = [p["y"] for p in sort_ascending(curve, XY)]
        assert labels == ["b", "d", "a", "c"]

    def test_input_not_mutated(self) -> None:
        """Исходная кривая не изменяется"""
        curve = [{"x": 3, "y": 0}, {"x": 1, "y": 0}]
        snapshot = list(curve)

        result = sort_ascending(curve, XY)

        assert curve == snapshot
        assert result is not curve

    def test_points_preserved(self) -> None:
        """Сортировка не создаёт новых точек и сохраняет доп. поля"""
        first = {"x": 3, "y": 0, "label": "late"}
        second = {"x": 1, "y": 0, "label": "early"}

        result = sort_ascending([first, second], XY)

        assert result[0] is second
        assert result[1] is first


class TestEnsureMonotone:
    """Тесты для ensure_monotone"""

    def test_monotone_passes_through(self, two_points) -> None:
        """Монотонная кривая возвращается без копирования"""
        assert ensure_monotone(two_points, XY) is two_points

    def test_violation_raises(self) -> None:
        """Нарушение порядка вызывает MonotonicityViolation"""
        curve = [{"x": 0, "y": 0}, {"x": 5, "y": 0}, {"x": 2, "y": 0}]

        with pytest.raises(MonotonicityViolation) as excinfo:
            ensure_monotone(curve, XY)

        assert excinfo.value.index == 2
        assert excinfo.value.previous_x == 5
        assert excinfo.value.current_x == 2

    def test_violation_logged(self, caplog) -> None:
        """Нарушение логируется на уровне DEBUG до исключения"""
        caplog.set_level(logging.DEBUG, logger="pwlcurve.core.math.monotonicity")

        with pytest.raises(MonotonicityViolation):
            ensure_monotone([{"x": 1, "y": 0}, {"x": 0, "y": 0}], XY)

        assert "Monotonicity violation" in caplog.text
