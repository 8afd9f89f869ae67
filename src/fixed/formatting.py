"""
Formatter — текстовые представления scaled value

Три представления:
- canonical_text: все 18 дробных знаков, без потерь (persist/transport формат)
- format_scaled: округление до 0..18 знаков, маркер `*` для "не совсем нуля"
- pretty_format_scaled: format с разделителем тысяч в целой части

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. parse(canonical_text(v)) == v для любого v
2. Знак `-` сохраняется, даже если отображаемое значение округлилось до нуля
3. Маркер `*` ставится только если отображены одни нули, а значение != 0
"""

from dataclasses import dataclass

from src.fixed.constants import (
    DEFAULT_DISPLAY_PRECISION,
    MAX_DISPLAY_PRECISION,
    MIN_DISPLAY_PRECISION,
    PRETTY_DISPLAY_PRECISION,
    SCALE_DIGITS,
)
from src.fixed.errors import ArgumentError
from src.fixed.rounding import reduce_precision


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class FormatConfig:
    """Конфигурация форматирования.

    Параметры отображения format() / pretty_format().
    """

    # Точность format() по умолчанию
    precision: int = DEFAULT_DISPLAY_PRECISION

    # Точность pretty_format()
    pretty_precision: int = PRETTY_DISPLAY_PRECISION

    # Разделитель групп цифр целой части в pretty_format()
    group_separator: str = ","

    # Количество цифр в группе
    group_size: int = 3

    # Маркер значения, округлённого до нуля, но не равного нулю
    truncation_marker: str = "*"


DEFAULT_FORMAT_CONFIG = FormatConfig()


# =============================================================================
# CANONICAL TEXT
# =============================================================================


def canonical_text(scaled_value: int) -> str:
    """
    Каноническое представление: все 18 дробных знаков.

    Examples:
        >>> canonical_text(1)
        '0.000000000000000001'
        >>> canonical_text(-17_500_000_000_000_000_000)
        '-17.500000000000000000'
    """
    digits = str(abs(scaled_value)).rjust(SCALE_DIGITS + 1, "0")
    text = f"{digits[:-SCALE_DIGITS]}.{digits[-SCALE_DIGITS:]}"
    return f"-{text}" if scaled_value < 0 else text


# =============================================================================
# PRECISION-LIMITED FORMAT
# =============================================================================


def validate_precision(precision: int) -> None:
    """
    Raises:
        ArgumentError: Если precision не int в диапазоне 0..18
    """
    if (
        isinstance(precision, bool)
        or not isinstance(precision, int)
        or not MIN_DISPLAY_PRECISION <= precision <= MAX_DISPLAY_PRECISION
    ):
        raise ArgumentError(
            f"expected {MIN_DISPLAY_PRECISION}..{MAX_DISPLAY_PRECISION}, got {precision!r}"
        )


def _display_parts(
    scaled_value: int, precision: int, config: FormatConfig
) -> tuple[str, str, str, str]:
    """Разбивка на (sign, whole, fraction, marker) после округления."""
    validate_precision(precision)

    rounded = reduce_precision(scaled_value, precision)
    digits = str(abs(rounded)).rjust(precision + 1, "0")

    if precision > 0:
        whole, fraction = digits[:-precision], digits[-precision:]
    else:
        whole, fraction = digits, ""

    sign = "-" if scaled_value < 0 else ""
    rounded_away = scaled_value != 0 and not (whole + fraction).strip("0")
    marker = config.truncation_marker if rounded_away else ""
    return sign, whole, fraction, marker


def format_scaled(
    scaled_value: int,
    precision: int | None = None,
    config: FormatConfig = DEFAULT_FORMAT_CONFIG,
) -> str:
    """
    Форматирование с округлением до `precision` дробных знаков.

    Args:
        scaled_value: Значение (scaled)
        precision: Количество дробных знаков 0..18 (default: config.precision)
        config: Конфигурация форматирования

    Returns:
        Строка вида "-3.20", "5", "0.00*"

    Raises:
        ArgumentError: Если precision вне диапазона 0..18

    Examples:
        >>> format_scaled(4_800_000_000_000_000_000, 0)
        '5'
        >>> format_scaled(-1, 2)
        '-0.00*'
    """
    if precision is None:
        precision = config.precision

    sign, whole, fraction, marker = _display_parts(scaled_value, precision, config)
    number = f"{whole}.{fraction}" if precision > 0 else whole
    return f"{sign}{number}{marker}"


def _group_digits(whole: str, separator: str, size: int) -> str:
    """Вставка разделителя каждые `size` цифр справа налево."""
    if size < 1:
        raise ArgumentError(f"group size must be positive, got {size!r}")

    head = len(whole) % size or size
    groups = [whole[:head]]
    groups.extend(whole[i : i + size] for i in range(head, len(whole), size))
    return separator.join(groups)


def pretty_format_scaled(
    scaled_value: int, config: FormatConfig = DEFAULT_FORMAT_CONFIG
) -> str:
    """
    Форматирование с разделителем тысяч в целой части.

    Разделитель вставляется после знака; маркер `*` остаётся последним.

    Examples:
        >>> pretty_format_scaled(5_000_000 * 10**18)
        '5,000,000.00000000'
        >>> pretty_format_scaled(-250_000 * 10**18)
        '-250,000.00000000'
    """
    precision = config.pretty_precision
    sign, whole, fraction, marker = _display_parts(scaled_value, precision, config)
    grouped = _group_digits(whole, config.group_separator, config.group_size)
    number = f"{grouped}.{fraction}" if precision > 0 else grouped
    return f"{sign}{number}{marker}"
