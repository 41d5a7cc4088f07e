"""Конфигурация вывода результатов."""

from dataclasses import dataclass


@dataclass
class ReportConfig:
    resistance_precision: int = 2  # Знаков после запятой для сопротивлений
    deviation_precision: int = 6   # Знаков после запятой для отклонений
