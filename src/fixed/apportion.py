"""
Proportional Splitter — распределение без потери единиц

Делит scaled value на части, пропорциональные весам. Последовательное
распределение (largest-remainder), чувствительное к порядку весов:

    remaining_weight = sum(weights)
    remaining_value = value
    для каждого веса по порядку:
        если remaining_weight == 0: part = 0
        иначе:
            part = rounded_divide(remaining_value * weight, remaining_weight)
            remaining_weight -= weight
            remaining_value -= part

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. sum(parts) == value точно (ошибка округления каждого шага переносится дальше)
2. Нулевой вес всегда даёт ровно ноль
3. Порядок весов влияет на распределение и сохраняется
"""

from collections.abc import Sequence

import structlog

from src.fixed.errors import ArgumentError
from src.fixed.rounding import rounded_divide

logger = structlog.get_logger(__name__)


def validate_weights(weights: Sequence[int]) -> None:
    """
    Проверка весов split().

    Args:
        weights: Веса в scaled units

    Raises:
        ArgumentError: Если есть отрицательный вес или все веса нулевые
    """
    if any(weight < 0 for weight in weights):
        raise ArgumentError(f"split weights must be non-negative, got {list(weights)}")

    if all(weight == 0 for weight in weights):
        raise ArgumentError("split requires at least one non-zero weight")


def apportion(value: int, weights: Sequence[int]) -> list[int]:
    """
    Разбиение scaled value на части пропорционально весам.

    Args:
        value: Делимое значение (scaled)
        weights: Неотрицательные веса (scaled), хотя бы один ненулевой

    Returns:
        Список частей (scaled) в порядке весов, сумма == value

    Raises:
        ArgumentError: Если веса невалидны

    Examples:
        >>> apportion(10, [1, 1, 1])
        [3, 4, 3]
        >>> apportion(10, [1, 0, 1])
        [5, 0, 5]
    """
    validate_weights(weights)

    remaining_weight = sum(weights)
    remaining_value = value
    parts: list[int] = []

    for weight in weights:
        if remaining_weight == 0:
            parts.append(0)
            continue

        part = rounded_divide(remaining_value * weight, remaining_weight)
        remaining_weight -= weight
        remaining_value -= part
        parts.append(part)

    logger.debug("fixed_split", parts=len(parts), value=value)
    return parts
