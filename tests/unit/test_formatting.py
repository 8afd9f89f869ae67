"""
Тесты для Formatter

Проверяет:
1. Каноническое представление (18 знаков)
2. format() для точности 0..18, положительных и отрицательных значений
3. Маркер `*` для значений, округлённых до нуля
4. pretty_format() с разделителем тысяч
5. FormatConfig
"""

import pytest

from src.fixed import (
    ArgumentError,
    FixedDecimal,
    FormatConfig,
    to_fixed,
)
from src.fixed.formatting import (
    canonical_text,
    format_scaled,
    pretty_format_scaled,
    validate_precision,
)


class TestCanonicalText:
    """Тесты canonical_text"""

    def test_zero(self) -> None:
        assert canonical_text(0) == "0.000000000000000000"

    def test_pads_whole_part(self) -> None:
        assert canonical_text(1) == "0.000000000000000001"
        assert canonical_text(-1) == "-0.000000000000000001"

    def test_large_whole_part(self) -> None:
        assert canonical_text(123_456 * 10**18 + 7) == "123456.000000000000000007"


class TestFormat:
    """Тесты format()"""

    def test_negative_numbers(self) -> None:
        num = to_fixed(-3.2)

        assert num.format(18) == "-3.200000000000000000"
        assert num.format(8) == "-3.20000000"
        assert num.format(2) == "-3.20"
        assert num.format(0) == "-3"

    def test_positive_numbers(self) -> None:
        num = to_fixed(4.8)

        assert num.format(18) == "4.800000000000000000"
        assert num.format(8) == "4.80000000"
        assert num.format(2) == "4.80"
        assert num.format(0) == "5"

    def test_marks_not_exactly_zero(self) -> None:
        num = FixedDecimal.smallest()

        assert num.format(18) == "0.000000000000000001"
        assert num.format(8) == "0.00000000*"
        assert num.format(2) == "0.00*"
        assert num.format(0) == "0*"

    def test_marks_negative_not_exactly_zero(self) -> None:
        num = -FixedDecimal.smallest()

        assert num.format(18) == "-0.000000000000000001"
        assert num.format(8) == "-0.00000000*"
        assert num.format(2) == "-0.00*"
        assert num.format(0) == "-0*"

    def test_zero_has_no_marker(self) -> None:
        assert FixedDecimal.zero().format(8) == "0.00000000"
        assert FixedDecimal.zero().format(0) == "0"

    def test_default_precision(self) -> None:
        assert to_fixed("0031").format() == "31.00000000"

    def test_rounding_carries_into_whole_part(self) -> None:
        assert to_fixed("9.999999999").format(2) == "10.00"
        assert to_fixed("0.995").format(2) == "1.00"

    @pytest.mark.parametrize("precision", [-1, 19, 2.0, "8", True])
    def test_rejects_invalid_precision(self, precision: object) -> None:
        with pytest.raises(ArgumentError, match="expected 0..18"):
            to_fixed(1).format(precision)  # type: ignore[arg-type]

    def test_validate_precision_bounds(self) -> None:
        validate_precision(0)
        validate_precision(18)

    def test_custom_marker(self) -> None:
        config = FormatConfig(truncation_marker="~")
        assert format_scaled(1, 2, config) == "0.00~"

    def test_config_precision(self) -> None:
        config = FormatConfig(precision=2)
        assert to_fixed(4.8).format(config=config) == "4.80"


class TestPrettyFormat:
    """Тесты pretty_format()"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (3.2, "3.20000000"),
            (1428.57, "1,428.57000000"),
            (5000000, "5,000,000.00000000"),
            (-250000, "-250,000.00000000"),
            (999, "999.00000000"),
            (1000, "1,000.00000000"),
        ],
    )
    def test_thousands_separators(self, value: float, expected: str) -> None:
        assert to_fixed(value).pretty_format() == expected

    def test_marker_after_grouped_number(self) -> None:
        assert FixedDecimal.smallest().pretty_format() == "0.00000000*"
        assert (-FixedDecimal.smallest()).pretty_format() == "-0.00000000*"

    def test_custom_separator(self) -> None:
        config = FormatConfig(group_separator=" ")
        assert pretty_format_scaled(5_000_000 * 10**18, config) == "5 000 000.00000000"

    def test_custom_precision(self) -> None:
        config = FormatConfig(pretty_precision=0)
        assert to_fixed(1428.57).pretty_format(config) == "1,429"

    @pytest.mark.parametrize(
        "group_size, expected",
        [
            (4, "123,4567.00000000"),
            (2, "1,23,45,67.00000000"),
            (7, "1234567.00000000"),
            (1, "1,2,3,4,5,6,7.00000000"),
        ],
    )
    def test_custom_group_size(self, group_size: int, expected: str) -> None:
        config = FormatConfig(group_size=group_size)
        assert to_fixed(1234567).pretty_format(config) == expected

    def test_group_size_with_negative_value(self) -> None:
        config = FormatConfig(group_size=4)
        assert to_fixed(-250000).pretty_format(config) == "-25,0000.00000000"

    def test_rejects_non_positive_group_size(self) -> None:
        with pytest.raises(ArgumentError, match="group size must be positive"):
            to_fixed(1000).pretty_format(FormatConfig(group_size=0))
