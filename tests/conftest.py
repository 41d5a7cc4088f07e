"""Конфигурация pytest."""

import pytest
import sys
import os

# Добавляем корневую папку в путь
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture
def solver():
    """Фикстура с решателем по умолчанию."""
    from res_divider.solver import DividerSolver
    return DividerSolver()


@pytest.fixture
def reference_divider():
    """Фикстура с эталонной задачей: 12.5 В -> 0.8 В, ряд E12."""
    return {
        "vin": 12.5,
        "vout": 0.8,
        "verror": 0.01,
        "series": 12,
    }


@pytest.fixture
def reference_pairs():
    """Ожидаемые пары (R1, R2, Vout) для эталонной задачи в порядке вывода."""
    return [
        (220.0, 15.0, 12.5 * 15.0 / 235.0),
        (390.0, 27.0, 12.5 * 27.0 / 417.0),
        (680.0, 47.0, 12.5 * 47.0 / 727.0),
        (820.0, 56.0, 12.5 * 56.0 / 876.0),
    ]
