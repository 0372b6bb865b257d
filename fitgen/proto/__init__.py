"""Runtime support for generated field type modules."""

from .fields import FieldTypeEnum, json_default
from .types import BASE_TYPES, BaseType, narrow, to_i64

__all__ = ["BASE_TYPES", "BaseType", "FieldTypeEnum", "json_default", "narrow", "to_i64"]
