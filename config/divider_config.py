"""Конфигурация поиска делителя напряжения."""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class DividerConfig:
    """Конфигурация для подбора резисторов делителя."""
    
    # Ряд по умолчанию (24, 12, 6 или 3)
    default_series: int = 24
    
    # Пороги отношения Vout/Vin -> множитель для R1, от меньшего порога к большему
    multiplier_thresholds: Tuple[Tuple[float, float], ...] = None
    default_multiplier: float = 1.0
    
    def __post_init__(self):
        if self.multiplier_thresholds is None:
            self.multiplier_thresholds = ((0.01, 100.0), (0.1, 10.0))
        # Порядок важен: сначала самый строгий порог
        self.multiplier_thresholds = tuple(sorted(self.multiplier_thresholds))
