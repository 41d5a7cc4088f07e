"""Подбор стандартных резисторов для делителя напряжения.

Содержит таблицу ряда E24, решатель DividerSolver и форматирование вывода.
"""

from res_divider.series import E24_BASE_VALUES, SERIES_STEPS, get_series_step, series_values
from res_divider.solver import DividerSolver, DividerCandidate, InvalidDivider
from res_divider.verifier import ToleranceVerifier
from res_divider.report import format_candidate, format_report

__all__ = [
    "E24_BASE_VALUES",
    "SERIES_STEPS",
    "get_series_step",
    "series_values",
    "DividerSolver",
    "DividerCandidate",
    "InvalidDivider",
    "ToleranceVerifier",
    "format_candidate",
    "format_report",
]
