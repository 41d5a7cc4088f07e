#!/usr/bin/env python3
"""
Подбор резисторов делителя напряжения из стандартных рядов.

Использование:
    python main.py [-s <ряд>] <Vin> <Vout> <Verror_max>

где <ряд> один из 24 (по умолчанию), 12, 6 или 3.
"""

import argparse
import logging
import sys
from pathlib import Path

# Добавляем текущую папку в путь
sys.path.append(str(Path(__file__).parent))

from config import DividerConfig, ReportConfig
from res_divider.series import get_series_step
from res_divider.solver import DividerSolver, InvalidDivider
from res_divider.report import format_candidate

# Коды возврата
EXIT_OK = 0
EXIT_INVALID_DIVIDER = 1


def build_parser(config: DividerConfig) -> argparse.ArgumentParser:
    """Создаёт парсер аргументов командной строки."""
    parser = argparse.ArgumentParser(
        prog="resdiv",
        description="Подбор резисторов R1/R2 делителя напряжения из рядов E24/E12/E6/E3"
    )
    parser.add_argument('vin', type=float, help='Входное напряжение Vin')
    parser.add_argument('vout', type=float, help='Требуемое выходное напряжение Vout')
    parser.add_argument('verror', type=float, help='Максимальное отклонение Vout')
    parser.add_argument(
        '--series', '-s', default=str(config.default_series),
        help='Ряд номиналов: 24 (по умолчанию), 12, 6 или 3'
    )
    parser.add_argument('--verbose', '-v', action='store_true', help='Отладочный вывод')
    return parser


def main(argv=None) -> int:
    """Точка входа: разбирает аргументы, ищет пары и печатает их.

    Returns:
        0 при успехе (в том числе если ничего не найдено),
        1 если делитель невозможен; ошибки аргументов завершают
        процесс через argparse с кодом 2
    """
    divider_config = DividerConfig()
    report_config = ReportConfig()
    parser = build_parser(divider_config)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        get_series_step(args.series)
    except ValueError as e:
        parser.error(str(e))

    solver = DividerSolver(divider_config)
    try:
        candidates = solver.find_solutions(args.vin, args.vout, args.verror, args.series)
    except InvalidDivider as e:
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_INVALID_DIVIDER

    for candidate in candidates:
        print(format_candidate(candidate, report_config))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
