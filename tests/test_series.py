"""Тесты для рядов номиналов."""

import pytest
import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from res_divider.series import (
    E24_BASE_VALUES,
    SERIES_STEPS,
    get_series_step,
    series_indices,
    series_values,
)


class TestSeriesTable:
    """Тесты базовой таблицы E24."""
    
    def test_table_size(self):
        """В таблице ровно 24 номинала."""
        assert len(E24_BASE_VALUES) == 24
    
    def test_table_decade(self):
        """Номиналы лежат в декаде 10-99 и строго возрастают."""
        assert E24_BASE_VALUES[0] == 10.0
        assert E24_BASE_VALUES[-1] == 91.0
        for a, b in zip(E24_BASE_VALUES, E24_BASE_VALUES[1:]):
            assert a < b
    
    def test_table_immutable(self):
        """Таблица неизменяема."""
        assert isinstance(E24_BASE_VALUES, tuple)


class TestSeriesSteps:
    """Тесты выбора шага ряда."""
    
    def test_known_steps(self):
        """Шаги рядов E24/E12/E6/E3."""
        assert SERIES_STEPS == {24: 1, 12: 2, 6: 4, 3: 8}
    
    @pytest.mark.parametrize("series,step", [
        (24, 1), (12, 2), (6, 4), (3, 8),
        ("24", 1), ("E12", 2), ("e6", 4), (" E3 ", 8),
    ])
    def test_get_series_step(self, series, step):
        """Ряд можно задать числом или строкой."""
        assert get_series_step(series) == step
    
    @pytest.mark.parametrize("series", [48, 5, "E96", "abc", "", 0])
    def test_unknown_series(self, series):
        """Неизвестный ряд вызывает ValueError."""
        with pytest.raises(ValueError):
            get_series_step(series)


class TestSeriesStride:
    """Тесты прохода по таблице с шагом."""
    
    def test_e24_indices(self):
        assert series_indices(1) == list(range(24))
    
    def test_e12_indices(self):
        assert series_indices(2) == [0, 2, 4, 6, 8, 10, 12, 14, 16, 18, 20, 22]
    
    def test_e6_indices(self):
        assert series_indices(4) == [0, 4, 8, 12, 16, 20]
    
    def test_e3_indices(self):
        assert series_indices(8) == [0, 8, 16]
    
    def test_series_values(self):
        """Номиналы грубых рядов совпадают со стандартными."""
        assert series_values(12) == [10.0, 12.0, 15.0, 18.0, 22.0, 27.0,
                                     33.0, 39.0, 47.0, 56.0, 68.0, 82.0]
        assert series_values(6) == [10.0, 15.0, 22.0, 33.0, 47.0, 68.0]
        assert series_values(3) == [10.0, 22.0, 47.0]
