"""String and number conversion demonstration."""

from __future__ import annotations

import struct


def _as_float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def type_cast_demo() -> list[str]:
    """Parse numbers from strings and format numbers as strings.

    Returns two lines: the parsed values, then the formatted values, where
    the single-precision value shows its rounding error.
    """
    int_value = int("1234")
    long_value = int("1234")
    double_value = float("1234.56")
    float_value = _as_float32(float("1234.56"))
    parsed = f"{int_value} {long_value} {double_value:g} {float_value:g}"

    int_value = 1234
    long_value = 1234
    double_value = 1234.56
    float_value = _as_float32(1234.56)
    formatted = " ".join(
        [str(int_value), str(long_value), f"{double_value:f}", f"{float_value:f}"]
    )
    return [parsed, formatted]