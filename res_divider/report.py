"""Текстовый вывод найденных делителей."""

from typing import Iterable

from config import ReportConfig
from res_divider.solver import DividerCandidate


def format_candidate(candidate: DividerCandidate, config: ReportConfig = None) -> str:
    """Форматирует кандидата в одну строку.

    Формат: "r1: <R1>  r2: <R2> <отклонение>(<отклонение в %>%)"

    Args:
        candidate: Найденная пара резисторов
        config: Точность вывода, по умолчанию ReportConfig()

    Returns:
        Строка без перевода строки

    Example:
        >>> format_candidate(DividerCandidate(220.0, 15.0, 0.797872, -0.002128, -0.265957, 8, 4))
        'r1: 220.00  r2: 15.00 -0.002128(-0.265957%)'
    """
    config = config or ReportConfig()
    rp = config.resistance_precision
    dp = config.deviation_precision
    return (
        f"r1: {candidate.r1:.{rp}f}  r2: {candidate.r2:.{rp}f} "
        f"{candidate.deviation:.{dp}f}({candidate.relative_deviation:.{dp}f}%)"
    )


def format_report(candidates: Iterable[DividerCandidate], config: ReportConfig = None) -> str:
    """Форматирует список кандидатов, по строке на кандидата."""
    return "\n".join(format_candidate(candidate, config) for candidate in candidates)
