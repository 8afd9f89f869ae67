"""
String Parser & Number Converter

Преобразование внешнего ввода в scaled value (целое число единиц 10^-18):
- Строки: грамматика `-?digits(.digits{1,18})?`, всегда десятичная система
- int: точное умножение на 10^18
- float: через кратчайшее видимое десятичное представление (repr)
- Decimal: точное преобразование, если значение укладывается в 18 знаков

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ведущие нули не меняют систему счисления ("0031" == 31, не 25)
2. Float конвертируется по тексту repr(), а не по двоичному значению:
   16.50479841 → 16.504798410000000000 (а не 16.504798409999998976)
3. Лишние дробные знаки float отбрасываются без округления
4. Ошибка никогда не возвращает частично построенное значение
"""

import math
from decimal import Decimal
from typing import Final

import structlog

from src.fixed.constants import SCALE, SCALE_DIGITS
from src.fixed.errors import FormatError

logger = structlog.get_logger(__name__)

# Только ASCII цифры: str.isdigit() принимает и другие Unicode цифры
_ASCII_DIGITS: Final[frozenset[str]] = frozenset("0123456789")


# =============================================================================
# STRING PARSER
# =============================================================================


def _is_digit_run(chars: str) -> bool:
    return bool(chars) and all(ch in _ASCII_DIGITS for ch in chars)


def text_to_scaled(text: str) -> int:
    """
    Разбор десятичной строки в scaled value.

    Грамматика: необязательный `-`, одна или более цифр целой части,
    затем необязательно `.` и от 1 до 18 цифр дробной части.
    Дробная часть короче 18 знаков дополняется нулями справа.

    Args:
        text: Десятичная строка (например, "-3.14")

    Returns:
        Scaled value

    Raises:
        FormatError: Если строка не соответствует грамматике

    Examples:
        >>> text_to_scaled("2.65")
        2650000000000000000
        >>> text_to_scaled("-0.8")
        -800000000000000000
        >>> text_to_scaled("0031")
        31000000000000000000
    """
    if not isinstance(text, str):
        raise FormatError(f"expected valid string representation, got {text!r}")

    negative = text.startswith("-")
    body = text[1:] if negative else text
    whole, dot, decimals = body.partition(".")

    if (
        not _is_digit_run(whole)
        or (dot and not _is_digit_run(decimals))
        or len(decimals) > SCALE_DIGITS
    ):
        logger.debug("fixed_parse_rejected", text=text)
        raise FormatError(f"expected valid string representation, got {text!r}")

    scaled = int(whole) * SCALE + int(decimals.ljust(SCALE_DIGITS, "0"))
    return -scaled if negative else scaled


# =============================================================================
# NUMBER CONVERTER
# =============================================================================


def float_to_scaled(value: float) -> int:
    """
    Конверсия float → scaled value через видимое представление.

    repr(value) разбивается на целые цифры, дробные цифры и десятичную
    экспоненту. Бюджет дробных знаков = 18 + экспонента:
    - Если дробных цифр больше бюджета → лишние отбрасываются (усечение)
    - Иначе → дополняются нулями до бюджета

    Args:
        value: Конечный float

    Returns:
        Scaled value

    Raises:
        FormatError: Если value равен NaN или Inf

    Examples:
        >>> float_to_scaled(16.50479841)
        16504798410000000000
        >>> float_to_scaled(265e-19)
        26
        >>> float_to_scaled(265e-21)
        0
    """
    if not math.isfinite(value):
        logger.debug("fixed_float_rejected", value=repr(value))
        raise FormatError(f"unsupported floating-point value: {value!r}")

    mantissa, _, exponent = repr(value).partition("e")
    whole, _, decimals = mantissa.partition(".")
    budget = SCALE_DIGITS + int(exponent or "0")
    digits = whole + decimals

    if budget < len(decimals):
        # Отбрасываем лишние знаки с конца (без округления)
        keep = max(0, len(digits) - (len(decimals) - budget))
        digits = digits[:keep]
    else:
        digits += "0" * (budget - len(decimals))

    if not digits.lstrip("-"):
        return 0
    return int(digits)


def decimal_to_scaled(value: Decimal) -> int:
    """
    Точная конверсия Decimal → scaled value.

    Raises:
        FormatError: Если значение не конечно или требует больше 18 дробных знаков
    """
    if not value.is_finite():
        raise FormatError(f"unsupported decimal value: {value!r}")

    sign, digit_tuple, exponent = value.as_tuple()
    coefficient = int("".join(map(str, digit_tuple)) or "0")
    shift = exponent + SCALE_DIGITS

    if shift >= 0:
        scaled = coefficient * 10**shift
    else:
        divisor = 10**-shift
        if coefficient % divisor:
            raise FormatError(
                f"decimal value {value!r} has more than {SCALE_DIGITS} fractional digits"
            )
        scaled = coefficient // divisor

    return -scaled if sign else scaled


def number_to_scaled(value: int | float | Decimal) -> int:
    """
    Конверсия числа в scaled value с диспетчеризацией по типу.

    Args:
        value: int, float или Decimal

    Returns:
        Scaled value

    Raises:
        FormatError: Если значение невалидно или тип не поддерживается
    """
    # bool — подкласс int, но не число в смысле предметной области
    if isinstance(value, bool):
        raise FormatError(f"unsupported number type: {type(value).__name__}")
    if isinstance(value, int):
        return value * SCALE
    if isinstance(value, float):
        return float_to_scaled(value)
    if isinstance(value, Decimal):
        return decimal_to_scaled(value)
    raise FormatError(f"unsupported number type: {type(value).__name__}")
