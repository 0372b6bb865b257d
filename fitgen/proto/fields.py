"""Base class for generated field type enums."""

from enum import Enum
from typing import Any, Self

from .types import narrow


class FieldTypeEnum(Enum):
    """Base class for generated field types.

    Members are the named variants of a field type, declared as
    ``IDENT = value, "label"``. Any other numeric value is still accepted:
    looking it up returns a fallback member that carries the raw value and
    has no label, so construction from a number never fails.

    Subclasses declare their classification as non-members:

    Example:
        class DisplayMeasure(FieldTypeEnum):
            base_type = nonmember("uint16")
            true_enum = nonmember(True)
            other_name = nonmember("UNKNOWN_UINT16")

            METRIC = 0, "metric"
            STATUTE = 1, "statute"
    """

    label: str | None

    def __new__(cls, value: Any, label: str | None = None) -> Self:
        member = object.__new__(cls)
        member._value_ = value
        member.label = label
        return member

    @classmethod
    def _missing_(cls, value: object) -> Self | None:
        if not isinstance(value, (int, float)):
            return None
        member = object.__new__(cls)
        member._name_ = cls.other_name
        member._value_ = value
        member.label = None
        return member

    @classmethod
    def from_i64(cls, value: int) -> Self:
        """Look up a member from a 64-bit value, narrowed to the base type first."""
        return cls(narrow(cls.base_type, value))

    @property
    def is_other(self) -> bool:
        """True for the fallback member of a value with no named variant."""
        return self.label is None

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value_ == other._value_

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value_))

    def serialize(self) -> str | int | float | bool:
        """Return the external representation. Generated code overrides this."""
        raise NotImplementedError("serialize() must be implemented by generated code")


def json_default(obj: Any) -> Any:
    """Encode field type members, for use as ``json.dumps(default=json_default)``."""
    if isinstance(obj, FieldTypeEnum):
        return obj.serialize()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
