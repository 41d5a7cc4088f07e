"""Модуль проверки допуска для найденных делителей.

Содержит ToleranceVerifier: проверку попадания рассчитанного напряжения
в допуск и расчёт абсолютного и относительного отклонения от цели.
"""

import numpy as np


class ToleranceVerifier:
    """Проверяет рассчитанное выходное напряжение относительно цели.
    
    Допуск абсолютный и строгий: кандидат принимается, если
    |V_calc - V_target| < V_error.
    """
    
    def is_within_tolerance(self, calculated: float, target: float, verror: float) -> bool:
        """Проверяет одно значение на попадание в допуск."""
        return abs(calculated - target) < verror
    
    def tolerance_mask(self, calculated: np.ndarray, target: float, verror: float) -> np.ndarray:
        """Векторная версия is_within_tolerance.
        
        Args:
            calculated: Массив рассчитанных напряжений любой формы
            target: Целевое выходное напряжение
            verror: Допустимое абсолютное отклонение
        
        Returns:
            Булев массив той же формы
        """
        return np.abs(calculated - target) < verror
    
    def deviation(self, calculated: float, target: float) -> float:
        """Знаковое отклонение от цели в вольтах."""
        return calculated - target
    
    def relative_deviation(self, calculated: float, target: float) -> float:
        """Относительное отклонение от цели в процентах.
        
        Формула: (V_calc / V_target - 1) * 100
        """
        return (calculated / target - 1.0) * 100.0
