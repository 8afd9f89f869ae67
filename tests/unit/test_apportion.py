"""
Тесты для Proportional Splitter

Проверяет:
1. Сохранение суммы: sum(parts) == value
2. Нулевой вес → ровно ноль
3. Чувствительность к порядку весов
4. Отказ на отрицательных и полностью нулевых весах
"""

import pytest
from structlog.testing import capture_logs

from src.fixed import ArgumentError, FixedDecimal, split, to_fixed
from src.fixed.apportion import apportion, validate_weights


def _texts(parts: list[FixedDecimal]) -> list[str]:
    return [part.canonical_text() for part in parts]


def _total(parts: list[FixedDecimal]) -> FixedDecimal:
    total = FixedDecimal.zero()
    for part in parts:
        total += part
    return total


# =============================================================================
# INTEGER APPORTIONMENT
# =============================================================================


class TestApportion:
    """Тесты apportion на scaled values"""

    def test_even_weights(self) -> None:
        assert apportion(10, [1, 1, 1]) == [3, 4, 3]

    def test_zero_weight_in_middle(self) -> None:
        assert apportion(10, [1, 0, 1]) == [5, 0, 5]

    def test_order_affects_distribution(self) -> None:
        """Перестановка весов меняет распределение остатка"""
        forward = apportion(10, [1, 2])
        backward = apportion(10, [2, 1])
        assert forward == [3, 7]
        assert backward == [7, 3]
        assert sum(forward) == sum(backward) == 10

    def test_negative_value(self) -> None:
        parts = apportion(-10, [1, 1, 1])
        assert sum(parts) == -10

    def test_logs_split(self) -> None:
        with capture_logs() as logs:
            apportion(10, [1, 1])

        assert logs[0]["event"] == "fixed_split"
        assert logs[0]["parts"] == 2


class TestValidateWeights:
    """Тесты validate_weights"""

    def test_accepts_non_negative(self) -> None:
        validate_weights([0, 1, 2])

    def test_rejects_negative(self) -> None:
        with pytest.raises(ArgumentError, match="non-negative"):
            validate_weights([4, 7, -10])

    def test_rejects_all_zero(self) -> None:
        with pytest.raises(ArgumentError, match="non-zero weight"):
            validate_weights([0, 0, 0])

    def test_rejects_empty(self) -> None:
        with pytest.raises(ArgumentError):
            validate_weights([])


# =============================================================================
# FIXED DECIMAL SPLIT
# =============================================================================


class TestSplit:
    """Тесты FixedDecimal.split"""

    @pytest.fixture
    def num(self) -> FixedDecimal:
        return to_fixed(2)

    def test_even_parts(self, num: FixedDecimal) -> None:
        parts = num.split(1, 1, 1)

        assert _texts(parts) == [
            "0.666666666666666667",
            "0.666666666666666667",
            "0.666666666666666666",
        ]
        assert _total(parts) == num

    def test_proportional_parts(self) -> None:
        num = to_fixed(10)
        parts = num.split(4, 7, 10)

        assert _texts(parts) == [
            "1.904761904761904762",
            "3.333333333333333333",
            "4.761904761904761905",
        ]
        assert _total(parts) == num

    def test_no_fractions_lost(self) -> None:
        num = to_fixed("3.141592653589793238")
        parts = num.split(4, 7, 10)

        assert _total(parts) == num

    def test_very_skewed_ratios(self) -> None:
        """Сильно несбалансированные веса не теряют единицы"""
        num = to_fixed("1000000000.000000013287555072")
        parts = num.split(
            to_fixed("100000000.000000000000000000"),
            to_fixed("0.000000004764729344"),
        )

        assert _total(parts) == num

    def test_zero_ratio_in_middle(self, num: FixedDecimal) -> None:
        parts = num.split(1, 0, 2)

        assert _texts(parts) == [
            "0.666666666666666667",
            "0.000000000000000000",
            "1.333333333333333333",
        ]
        assert _total(parts) == num

    def test_trailing_zero_ratio(self, num: FixedDecimal) -> None:
        parts = num.split(1, 2, 0)

        assert _texts(parts) == [
            "0.666666666666666667",
            "1.333333333333333333",
            "0.000000000000000000",
        ]
        assert _total(parts) == num

    def test_mixed_weight_types(self, num: FixedDecimal) -> None:
        """Веса принимаются в любом виде, который понимает to_fixed"""
        assert num.split("1", 2.0, to_fixed(0)) == num.split(1, 2, 0)

    def test_all_ratios_zero(self, num: FixedDecimal) -> None:
        with pytest.raises(ArgumentError):
            num.split(0, 0, 0)

    def test_negative_ratio(self, num: FixedDecimal) -> None:
        with pytest.raises(ArgumentError):
            num.split(4, 7, -10)

    def test_no_ratios(self, num: FixedDecimal) -> None:
        with pytest.raises(ArgumentError):
            num.split()

    def test_functional_form(self, num: FixedDecimal) -> None:
        assert split(num, [1, 1, 1]) == num.split(1, 1, 1)

    @pytest.mark.parametrize(
        "value, weights",
        [
            ("0.000000000000000001", [1, 1, 1]),
            ("-7.5", [3, 0, 5, 1]),
            ("123456789.123456789123456789", ["0.1", "0.2", "0.7"]),
            ("1", [1] * 7),
        ],
    )
    def test_conservation(self, value: str, weights: list[object]) -> None:
        num = to_fixed(value)
        parts = num.split(*weights)

        assert len(parts) == len(weights)
        assert _total(parts) == num
