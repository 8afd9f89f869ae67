"""
Fixed-point decimal

Число с 18 дробными знаками на основе целочисленного scaled value:
точная арифметика, детерминированное округление, распределение без потерь.
"""

__version__ = "1.1.0"

# Value type
from src.fixed.fixed_decimal import (
    CANONICAL_TEXT_PATTERN,
    FixedDecimal,
    compare,
    equals,
    split,
    to_fixed,
)

# Constants
from src.fixed.constants import (
    DEFAULT_DISPLAY_PRECISION,
    MAX_DISPLAY_PRECISION,
    MIN_DISPLAY_PRECISION,
    PRETTY_DISPLAY_PRECISION,
    SCALE,
    SCALE_DIGITS,
)

# Errors
from src.fixed.errors import ArgumentError, FixedDecimalError, FormatError

# Formatting
from src.fixed.formatting import DEFAULT_FORMAT_CONFIG, FormatConfig

# Rounding
from src.fixed.rounding import rounded_divide

# Snapshot
from src.fixed.snapshot import (
    FIXED_DECIMAL_ADAPTER,
    dump_snapshot,
    from_json,
    json_schema,
    load_snapshot,
    to_json,
)

__all__ = [
    "__version__",
    # Value type
    "FixedDecimal",
    "CANONICAL_TEXT_PATTERN",
    "to_fixed",
    "compare",
    "equals",
    "split",
    # Constants
    "SCALE",
    "SCALE_DIGITS",
    "DEFAULT_DISPLAY_PRECISION",
    "PRETTY_DISPLAY_PRECISION",
    "MIN_DISPLAY_PRECISION",
    "MAX_DISPLAY_PRECISION",
    # Errors
    "FixedDecimalError",
    "FormatError",
    "ArgumentError",
    # Formatting
    "FormatConfig",
    "DEFAULT_FORMAT_CONFIG",
    # Rounding
    "rounded_divide",
    # Snapshot
    "FIXED_DECIMAL_ADAPTER",
    "dump_snapshot",
    "load_snapshot",
    "to_json",
    "from_json",
    "json_schema",
]
