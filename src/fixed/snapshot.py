"""
Snapshot — сериализация FixedDecimal

Единственный persist/transport формат — каноническая строка
(18 дробных знаков). Десериализация принимает эту строку или уже
готовый экземпляр (pass-through).

Для pydantic моделей FixedDecimal реализует core-schema hook; модуль
предоставляет готовый TypeAdapter и JSON Schema.
"""

import json
from typing import Any

from pydantic import TypeAdapter

from src.fixed.fixed_decimal import FixedDecimal

FIXED_DECIMAL_ADAPTER: TypeAdapter[FixedDecimal] = TypeAdapter(FixedDecimal)


def dump_snapshot(value: FixedDecimal) -> str:
    """Каноническая строка значения."""
    return value.canonical_text()


def load_snapshot(payload: Any) -> FixedDecimal:
    """
    Восстановление значения из snapshot.

    Args:
        payload: Каноническая строка или FixedDecimal

    Returns:
        FixedDecimal

    Raises:
        FormatError: Если payload не строка, не FixedDecimal или строка невалидна
    """
    return FixedDecimal.from_snapshot(payload)


def to_json(value: FixedDecimal) -> str:
    """
    JSON-кодирование: строковый литерал канонического текста.

    Examples:
        >>> to_json(FixedDecimal.smallest())
        '"0.000000000000000001"'
    """
    return json.dumps(dump_snapshot(value))


def from_json(document: str | bytes) -> FixedDecimal:
    """
    Декодирование JSON строкового литерала.

    Raises:
        FormatError: Если документ не содержит валидную каноническую строку
        json.JSONDecodeError: Если документ не является валидным JSON
    """
    return load_snapshot(json.loads(document))


def json_schema() -> dict[str, Any]:
    """JSON Schema канонического текстового представления."""
    return FIXED_DECIMAL_ADAPTER.json_schema()
