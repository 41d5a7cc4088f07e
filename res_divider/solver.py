"""Подбор пар резисторов для делителя напряжения.

    | Vin
   | |
   | | R1
   | |
    | Vout
   | |
   | | R2
   | |
    |
   GND
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List, Union

import numpy as np

from config import DividerConfig
from res_divider.series import E24_BASE_VALUES, get_series_step, series_indices
from res_divider.verifier import ToleranceVerifier

logger = logging.getLogger(__name__)


class InvalidDivider(ValueError):
    """Делитель с заданными параметрами физически невозможен."""


@dataclass(frozen=True)
class DividerCandidate:
    """Найденная пара резисторов.

    Attributes:
        r1: Верхний резистор с учётом множителя
        r2: Нижний резистор
        vout: Рассчитанное выходное напряжение
        deviation: Отклонение от цели, В
        relative_deviation: Отклонение от цели, %
        r1_index: Индекс R1 в таблице E24
        r2_index: Индекс R2 в таблице E24
    """
    r1: float
    r2: float
    vout: float
    deviation: float
    relative_deviation: float
    r1_index: int
    r2_index: int


class DividerSolver:
    """Перебирает пары номиналов и отбирает попавшие в допуск.

    Решатель не хранит состояния между вызовами: таблица номиналов
    неизменна, множитель и результаты создаются заново при каждом поиске.
    """

    def __init__(self, config: DividerConfig = None) -> None:
        self.config = config or DividerConfig()
        self.verifier = ToleranceVerifier()
        self.values = E24_BASE_VALUES

    def compute_output_voltage(self, vin: float, r1: float, r2: float) -> float:
        """Выходное напряжение делителя: Vin * R2 / (R1 + R2).

        Raises:
            InvalidDivider: Если R1 + R2 == 0
        """
        total = r1 + r2
        if total == 0:
            raise InvalidDivider("Сумма сопротивлений R1 + R2 равна нулю")
        return vin * r2 / total

    def select_multiplier(self, vin: float, vout: float) -> float:
        """Выбирает декадный множитель для R1 по отношению Vout/Vin.

        Малое отношение требует большого R1, а таблица покрывает только
        одну декаду, поэтому R1 домножается на 10 или 100.
        """
        ratio = vout / vin
        for threshold, multiplier in self.config.multiplier_thresholds:
            if ratio < threshold:
                return multiplier
        return self.config.default_multiplier

    def validate(self, vin: float, vout: float, verror: float) -> None:
        """Проверяет параметры делителя.

        Raises:
            InvalidDivider: Если параметры не описывают реализуемый делитель
        """
        if vin <= 0:
            raise InvalidDivider(f"Vin должно быть положительным, получено {vin}")
        if vout <= 0:
            raise InvalidDivider(f"Vout должно быть положительным, получено {vout}")
        if verror <= 0:
            raise InvalidDivider(f"Verror должно быть положительным, получено {verror}")
        if vout > vin:
            raise InvalidDivider(f"Vout ({vout}) не может быть больше Vin ({vin})")

    def iter_solutions(
        self,
        vin: float,
        vout: float,
        verror: float,
        series: Union[int, str] = None
    ) -> Iterator[DividerCandidate]:
        """Генератор кандидатов в порядке индекса R1, затем индекса R2.

        Проверка параметров выполняется сразу при вызове, до получения
        первого кандидата.

        Raises:
            InvalidDivider: Если параметры делителя некорректны
            ValueError: Если ряд неизвестен
        """
        if series is None:
            series = self.config.default_series
        step = get_series_step(series)
        try:
            self.validate(vin, vout, verror)
        except InvalidDivider as e:
            logger.warning("Отклонены параметры делителя: %s", e)
            raise

        multiplier = self.select_multiplier(vin, vout)
        logger.debug(
            "Поиск: Vin=%s Vout=%s Verror=%s шаг=%d множитель=%s",
            vin, vout, verror, step, multiplier
        )
        return self._scan(vin, vout, verror, step, multiplier)

    def find_solutions(
        self,
        vin: float,
        vout: float,
        verror: float,
        series: Union[int, str] = None
    ) -> List[DividerCandidate]:
        """Находит все пары резисторов с |V_calc - Vout| < Verror.

        Args:
            vin: Входное напряжение
            vout: Целевое выходное напряжение
            verror: Допустимое абсолютное отклонение
            series: Ряд номиналов (24, 12, 6, 3), по умолчанию из конфигурации

        Returns:
            Список кандидатов, пустой если ничего не попало в допуск

        Raises:
            InvalidDivider: Если Vout > Vin или Vin, Vout, Verror не положительны
            ValueError: Если ряд неизвестен

        Example:
            >>> solver = DividerSolver()
            >>> [(c.r1, c.r2) for c in solver.find_solutions(12.5, 0.8, 0.01, 12)]
            [(220.0, 15.0), (390.0, 27.0), (680.0, 47.0), (820.0, 56.0)]
        """
        candidates = list(self.iter_solutions(vin, vout, verror, series))
        logger.debug("Найдено кандидатов: %d", len(candidates))
        return candidates

    def _scan(
        self,
        vin: float,
        vout: float,
        verror: float,
        step: int,
        multiplier: float
    ) -> Iterator[DividerCandidate]:
        indices = series_indices(step)
        base = np.array([self.values[idx] for idx in indices])
        r1_values = base * multiplier
        r2_values = base

        # Полный перебор: строки - R1, столбцы - R2
        vout_grid = vin * r2_values[np.newaxis, :] / (r1_values[:, np.newaxis] + r2_values[np.newaxis, :])
        mask = self.verifier.tolerance_mask(vout_grid, vout, verror)

        # argwhere отдаёт индексы построчно, то есть по R1, затем по R2
        for row, col in np.argwhere(mask):
            r1 = float(r1_values[row])
            r2 = float(r2_values[col])
            calculated = self.compute_output_voltage(vin, r1, r2)
            yield DividerCandidate(
                r1=r1,
                r2=r2,
                vout=calculated,
                deviation=self.verifier.deviation(calculated, vout),
                relative_deviation=self.verifier.relative_deviation(calculated, vout),
                r1_index=indices[row],
                r2_index=indices[col],
            )
