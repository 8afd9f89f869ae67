"""
Исключения FixedDecimal

Все ошибки детерминированы и возникают синхронно в точке вызова.
FormatError и ArgumentError наследуют ValueError, поэтому внутри pydantic
моделей они превращаются в ValidationError.
"""


class FixedDecimalError(Exception):
    """Базовое исключение пакета."""

    pass


class FormatError(FixedDecimalError, ValueError):
    """
    Входное значение не может быть представлено как FixedDecimal.

    Возникает когда:
    1. Строка не соответствует грамматике `-?digits(.digits{1,18})?`
    2. Указано больше 18 дробных знаков
    3. Float равен NaN или Inf
    4. Тип числа не поддерживается конвертером
    """

    pass


class ArgumentError(FixedDecimalError, ValueError):
    """
    Некорректный аргумент операции.

    Возникает когда split() получает отрицательный вес или все веса нулевые,
    а также при точности форматирования вне диапазона 0..18.
    """

    pass
