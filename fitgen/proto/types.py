"""Runtime descriptors for the scalar base types of field types.

The table below is the single source for the width, signedness and Python
representation of every base type a field type can be declared with.
Generated code uses it to narrow raw 64-bit values into range.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BaseType:
    """Describes a scalar base type."""

    name: str
    python_type: str
    bits: int | None = None
    signed: bool = False


BASE_TYPES: dict[str, BaseType] = {
    t.name: t
    for t in (
        BaseType("bool", "bool", 8),
        BaseType("sint8", "int", 8, signed=True),
        BaseType("uint8", "int", 8),
        BaseType("sint16", "int", 16, signed=True),
        BaseType("uint16", "int", 16),
        BaseType("sint32", "int", 32, signed=True),
        BaseType("uint32", "int", 32),
        BaseType("string", "str"),
        BaseType("float32", "float", 32),
        BaseType("float64", "float", 64),
        BaseType("uint8z", "int", 8),
        BaseType("uint16z", "int", 16),
        BaseType("uint32z", "int", 32),
        BaseType("byte", "int", 8),
        BaseType("sint64", "int", 64, signed=True),
        BaseType("uint64", "int", 64),
        BaseType("uint64z", "int", 64),
    )
}


def narrow(base_type: str, value: int) -> int | float | bool:
    """Convert a 64-bit value to the range of a base type.

    Integers wrap the way a two's-complement cast does, so narrowing never
    fails for an integer base type.
    """
    t = BASE_TYPES[base_type]

    if t.python_type == "float":
        return float(value)
    if t.python_type == "bool":
        return bool(value)
    if t.python_type != "int" or t.bits is None:
        raise ValueError(f"Cannot narrow a value to {base_type}")

    mask = (1 << t.bits) - 1
    value = int(value) & mask
    if t.signed and value >> (t.bits - 1):
        value -= 1 << t.bits
    return value


I64_MIN = -(1 << 63)
I64_MAX = (1 << 63) - 1


def to_i64(base_type: str, value: int | float | bool) -> int:
    """Widen a base type value to a signed 64-bit integer.

    Floats truncate toward zero and saturate at the i64 bounds, NaN becomes 0.
    Unsigned 64-bit values above the signed range wrap.
    """
    if BASE_TYPES[base_type].python_type == "float":
        if math.isnan(value):
            return 0
        if value >= I64_MAX:
            return I64_MAX
        if value <= I64_MIN:
            return I64_MIN
        return int(value)
    return narrow("sint64", int(value))
