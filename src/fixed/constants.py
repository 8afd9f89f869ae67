"""
Константы масштаба FixedDecimal

Число хранится как целое количество единиц 10^-18 ("scaled value").
Масштаб фиксирован и не настраивается.
"""

from typing import Final

# =============================================================================
# МАСШТАБ
# =============================================================================

# Количество дробных знаков
SCALE_DIGITS: Final[int] = 18

# Делитель масштаба: 1.0 == 10^18 scaled units
SCALE: Final[int] = 10**SCALE_DIGITS

# Наименьшее представимое положительное значение (в scaled units)
SMALLEST_SCALED_VALUE: Final[int] = 1


# =============================================================================
# ОТОБРАЖЕНИЕ
# =============================================================================

# Точность по умолчанию для format() и str()
DEFAULT_DISPLAY_PRECISION: Final[int] = 8

# Точность pretty_format()
PRETTY_DISPLAY_PRECISION: Final[int] = 8

# Допустимый диапазон точности форматирования
MIN_DISPLAY_PRECISION: Final[int] = 0
MAX_DISPLAY_PRECISION: Final[int] = SCALE_DIGITS
