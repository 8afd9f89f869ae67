"""
FixedDecimal — число с фиксированной точкой и 18 дробными знаками

Хранит одно целое `scaled_value`, интерпретируемое как scaled_value / 10^18.
Избегает ошибок округления двоичного float: все арифметические операции
выполняются над целыми числами с явно заданным правилом округления.

Пример:
    >>> a = FixedDecimal.from_number(1)
    >>> b = FixedDecimal.from_number(6)
    >>> (a / b).format(18)
    '0.166666666666666667'

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Immutable: каждая операция возвращает новый экземпляр
2. Публичного конструктора нет: только именованные фабрики
   (parse, from_number, from_scaled_value, zero, smallest)
3. Сравнение определено только между FixedDecimal; == с другим типом → False
"""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Final

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from src.fixed.apportion import apportion
from src.fixed.constants import SCALE_DIGITS, SMALLEST_SCALED_VALUE
from src.fixed.errors import FormatError
from src.fixed.formatting import (
    DEFAULT_FORMAT_CONFIG,
    FormatConfig,
    canonical_text,
    format_scaled,
    pretty_format_scaled,
)
from src.fixed.parsing import number_to_scaled, text_to_scaled
from src.fixed.rounding import scaled_divide, scaled_multiply

# JSON Schema паттерн текстового представления (совпадает с грамматикой parse).
# pattern ищет совпадение через search, а `$` допускает завершающий "\n",
# поэтому конец строки задан через (?![\s\S])
CANONICAL_TEXT_PATTERN: Final[str] = rf"^-?[0-9]+(\.[0-9]{{1,{SCALE_DIGITS}}})?(?![\s\S])"


# =============================================================================
# FIXED DECIMAL
# =============================================================================


@dataclass(frozen=True, slots=True, init=False, eq=False, repr=False)
class FixedDecimal:
    """
    Число с 18 дробными знаками.

    Immutable (frozen=True): присваивание атрибутов запрещено.
    Экземпляры создаются только через фабрики класса.
    """

    scaled_value: int

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        raise TypeError(
            "FixedDecimal has no public constructor; use parse(), from_number(), "
            "from_scaled_value(), zero() or smallest()"
        )

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def _make(cls, scaled_value: int) -> "FixedDecimal":
        instance = object.__new__(cls)
        object.__setattr__(instance, "scaled_value", scaled_value)
        return instance

    @classmethod
    def from_scaled_value(cls, scaled_value: int) -> "FixedDecimal":
        """
        Доверенный конструктор из scaled value.

        Raises:
            TypeError: Если scaled_value не int
        """
        if isinstance(scaled_value, bool) or not isinstance(scaled_value, int):
            raise TypeError(f"scaled value must be int, got {type(scaled_value).__name__}")
        return cls._make(scaled_value)

    @classmethod
    def parse(cls, text: str) -> "FixedDecimal":
        """
        Разбор десятичной строки ("-3.14", "0031", "0.000000000000000001").

        Raises:
            FormatError: Если строка не соответствует грамматике
        """
        return cls._make(text_to_scaled(text))

    @classmethod
    def from_number(cls, value: int | float | Decimal) -> "FixedDecimal":
        """
        Конверсия числа. Float конвертируется по видимому представлению.

        Raises:
            FormatError: Для NaN/Inf и неподдерживаемых типов
        """
        return cls._make(number_to_scaled(value))

    @classmethod
    def zero(cls) -> "FixedDecimal":
        return cls._make(0)

    @classmethod
    def smallest(cls) -> "FixedDecimal":
        """Наименьшее положительное значение: 0.000000000000000001"""
        return cls._make(SMALLEST_SCALED_VALUE)

    @classmethod
    def from_snapshot(cls, value: Any) -> "FixedDecimal":
        """
        Восстановление из snapshot: каноническая строка или готовый экземпляр.

        Raises:
            FormatError: Если value не строка и не FixedDecimal
        """
        if isinstance(value, FixedDecimal):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        raise FormatError(
            f"expected canonical text or FixedDecimal, got {type(value).__name__}"
        )

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def is_zero(self) -> bool:
        return self.scaled_value == 0

    @property
    def is_negative(self) -> bool:
        return self.scaled_value < 0

    @property
    def is_positive(self) -> bool:
        return self.scaled_value > 0

    def __bool__(self) -> bool:
        return self.scaled_value != 0

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: "FixedDecimal") -> "FixedDecimal":
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return self._make(self.scaled_value + other.scaled_value)

    def __sub__(self, other: "FixedDecimal") -> "FixedDecimal":
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return self._make(self.scaled_value - other.scaled_value)

    def __mul__(self, other: "FixedDecimal") -> "FixedDecimal":
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return self._make(scaled_multiply(self.scaled_value, other.scaled_value))

    def __truediv__(self, other: "FixedDecimal") -> "FixedDecimal":
        """
        Raises:
            ZeroDivisionError: Если делитель равен нулю
        """
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return self._make(scaled_divide(self.scaled_value, other.scaled_value))

    def __neg__(self) -> "FixedDecimal":
        return self._make(-self.scaled_value)

    def __pos__(self) -> "FixedDecimal":
        return self

    def __abs__(self) -> "FixedDecimal":
        return self._make(abs(self.scaled_value))

    def split(self, *weights: Any) -> list["FixedDecimal"]:
        """
        Разбиение на части, пропорциональные весам, без потери единиц.

        Веса принимаются в любом виде, который понимает to_fixed().
        Сумма частей всегда точно равна исходному значению.

        Args:
            *weights: Неотрицательные веса (хотя бы один ненулевой)

        Returns:
            Части в порядке весов

        Raises:
            ArgumentError: Если есть отрицательный вес или все веса нулевые

        Examples:
            >>> [p.canonical_text() for p in FixedDecimal.from_number(2).split(1, 0, 2)]
            ['0.666666666666666667', '0.000000000000000000', '1.333333333333333333']
        """
        ratios = [to_fixed(weight).scaled_value for weight in weights]
        return [self._make(part) for part in apportion(self.scaled_value, ratios)]

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        return isinstance(other, FixedDecimal) and self.scaled_value == other.scaled_value

    def __hash__(self) -> int:
        return hash(self.scaled_value)

    def __lt__(self, other: "FixedDecimal") -> bool:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return self.scaled_value < other.scaled_value

    def __le__(self, other: "FixedDecimal") -> bool:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return self.scaled_value <= other.scaled_value

    def __gt__(self, other: "FixedDecimal") -> bool:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return self.scaled_value > other.scaled_value

    def __ge__(self, other: "FixedDecimal") -> bool:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return self.scaled_value >= other.scaled_value

    # -------------------------------------------------------------------------
    # Текстовые представления
    # -------------------------------------------------------------------------

    def canonical_text(self) -> str:
        """Все 18 дробных знаков; parse(canonical_text()) == self."""
        return canonical_text(self.scaled_value)

    def format(
        self, precision: int | None = None, config: FormatConfig = DEFAULT_FORMAT_CONFIG
    ) -> str:
        """
        Округление до `precision` знаков (default: 8) с маркером `*`.

        Raises:
            ArgumentError: Если precision вне диапазона 0..18
        """
        return format_scaled(self.scaled_value, precision, config)

    def pretty_format(self, config: FormatConfig = DEFAULT_FORMAT_CONFIG) -> str:
        """format() с 8 знаками и разделителем тысяч: "5,000,000.00000000"."""
        return pretty_format_scaled(self.scaled_value, config)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"FixedDecimal('{self.canonical_text()}')"

    # -------------------------------------------------------------------------
    # Сериализация
    # -------------------------------------------------------------------------

    def __reduce__(self) -> tuple[Any, tuple[int]]:
        return (FixedDecimal.from_scaled_value, (self.scaled_value,))

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        # Валидация через from_snapshot, сериализация всегда в каноническую строку
        return core_schema.no_info_plain_validator_function(
            cls.from_snapshot,
            serialization=core_schema.plain_serializer_function_ser_schema(
                canonical_text_of, when_used="always"
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {
            "type": "string",
            "pattern": CANONICAL_TEXT_PATTERN,
            "examples": ["3.141592653589793238"],
        }


# =============================================================================
# СВОБОДНЫЕ ФУНКЦИИ
# =============================================================================


def canonical_text_of(value: FixedDecimal) -> str:
    return value.canonical_text()


def to_fixed(value: Any) -> FixedDecimal:
    """
    Приведение значения к FixedDecimal с диспетчеризацией по типу.

    - str → FixedDecimal.parse
    - int, float, Decimal → FixedDecimal.from_number
    - FixedDecimal → без изменений

    Raises:
        FormatError: Если значение не удаётся разобрать
        TypeError: Если тип не поддерживается

    Examples:
        >>> to_fixed("2.65") == to_fixed(2.65)
        True
    """
    if isinstance(value, FixedDecimal):
        return value
    if isinstance(value, str):
        return FixedDecimal.parse(value)
    if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        return FixedDecimal.from_number(value)
    raise TypeError(f"cannot convert {type(value).__name__} to FixedDecimal")


def compare(a: FixedDecimal, b: Any) -> int | None:
    """
    Трёхзначное сравнение.

    Returns:
        -1, 0, +1 если b — FixedDecimal; None если сравнение не определено
    """
    if not isinstance(a, FixedDecimal) or not isinstance(b, FixedDecimal):
        return None
    return (a.scaled_value > b.scaled_value) - (a.scaled_value < b.scaled_value)


def equals(a: Any, b: Any) -> bool:
    """Равенство для любых типов: False если хотя бы один не FixedDecimal."""
    return isinstance(a, FixedDecimal) and a == b


def split(value: FixedDecimal, weights: Iterable[Any]) -> list[FixedDecimal]:
    """Функциональная форма FixedDecimal.split()."""
    return value.split(*weights)
