"""
Rounding Arithmetic — целочисленные примитивы над scaled values

Модуль содержит единственный примитив округления, общий для умножения,
деления, split() и форматирования с понижением точности:

    rounded_divide(n, d) = floor((n + floor(d / 2)) / d)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Везде используется floor division (//), а не усечение к нулю
2. Результат всегда целое число (scaled value не бывает дробным)
3. Половина единицы округляется по правилу "floor после прибавления половины"

Таблица знаков (scaled 10, делитель 4):
    10 / 4   →  3
    10 / -4  → -2
    -10 / 4  → -2
    -10 / -4 →  3
"""

from src.fixed.constants import SCALE, SCALE_DIGITS


# =============================================================================
# ОКРУГЛЁННОЕ ДЕЛЕНИЕ
# =============================================================================


def rounded_divide(numerator: int, denominator: int) -> int:
    """
    Целочисленное деление с округлением к ближайшему.

    Половина делителя прибавляется к числителю, затем выполняется floor
    division. Оба деления — floor, поэтому для отрицательного делителя
    округление несимметрично (см. таблицу знаков в docstring модуля).

    Args:
        numerator: Числитель
        denominator: Знаменатель (не ноль)

    Returns:
        Округлённое частное

    Raises:
        ZeroDivisionError: Если denominator == 0

    Examples:
        >>> rounded_divide(10, 4)
        3
        >>> rounded_divide(-10, 4)
        -2
        >>> rounded_divide(10, -4)
        -2
        >>> rounded_divide(-10, -4)
        3
    """
    return (numerator + denominator // 2) // denominator


# =============================================================================
# ОПЕРАЦИИ С УЧЁТОМ МАСШТАБА
# =============================================================================


def scaled_multiply(a: int, b: int) -> int:
    """Произведение двух scaled values: round(a * b / 10^18)."""
    return rounded_divide(a * b, SCALE)


def scaled_divide(a: int, b: int) -> int:
    """
    Частное двух scaled values: round(10^18 * a / b).

    Raises:
        ZeroDivisionError: Если b == 0
    """
    return rounded_divide(SCALE * a, b)


def reduce_precision(scaled_value: int, precision: int) -> int:
    """
    Округление scaled value до `precision` дробных знаков.

    Результат выражен в единицах 10^-precision (а не 10^-18).

    Examples:
        >>> reduce_precision(4_800_000_000_000_000_000, 0)
        5
        >>> reduce_precision(1, 8)
        0
    """
    return rounded_divide(scaled_value, 10 ** (SCALE_DIGITS - precision))
