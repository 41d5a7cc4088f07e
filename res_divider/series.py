"""Ряды номиналов резисторов.

Базовая таблица E24 нормирована на декаду 10-99. Более грубые ряды
(E12, E6, E3) получаются проходом по той же таблице с шагом 2, 4 и 8.
"""

from typing import List, Tuple, Union

# Ряд E24, декада 10-99
E24_BASE_VALUES: Tuple[float, ...] = (
    10.0, 11.0, 12.0, 13.0, 15.0, 16.0, 18.0, 20.0,
    22.0, 24.0, 27.0, 30.0, 33.0, 36.0, 39.0, 43.0,
    47.0, 51.0, 56.0, 62.0, 68.0, 75.0, 82.0, 91.0,
)

# Номер ряда -> шаг по таблице E24
SERIES_STEPS = {
    24: 1,
    12: 2,
    6: 4,
    3: 8,
}


def get_series_step(series: Union[int, str]) -> int:
    """Возвращает шаг по таблице E24 для заданного ряда.
    
    Args:
        series: Номер ряда: 24, 12, 6, 3 или строка вида "12", "E12", "e12"
    
    Returns:
        Шаг по базовой таблице (1, 2, 4 или 8)
    
    Raises:
        ValueError: Если ряд неизвестен
    """
    key = series
    if isinstance(series, str):
        text = series.strip().upper()
        if text.startswith("E"):
            text = text[1:]
        try:
            key = int(text)
        except ValueError:
            key = None
    
    if key not in SERIES_STEPS:
        raise ValueError(
            f"Неизвестный ряд E{series}. Известные ряды: E24, E12, E6 и E3"
        )
    return SERIES_STEPS[key]


def series_indices(step: int) -> List[int]:
    """Индексы таблицы E24, которые проходит ряд с шагом step."""
    return list(range(0, len(E24_BASE_VALUES), step))


def series_values(series: Union[int, str]) -> List[float]:
    """Номиналы ряда в декаде 10-99."""
    step = get_series_step(series)
    return [E24_BASE_VALUES[idx] for idx in series_indices(step)]
