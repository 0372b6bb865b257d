"""Compile field type definitions into descriptors for code generation."""

import logging
from dataclasses import dataclass

from fitgen.proto.types import BASE_TYPES, narrow

from .config import GeneratorConfig
from .types import FieldTypeDefinition, FieldTypeVariant, Profile
from .util import docstring, is_identifier, to_camel_case, to_upper_snake

logger = logging.getLogger(__name__)

# Attributes every generated enum already defines, and names its class body looks up
RESERVED_MEMBER_NAMES = frozenset(
    [
        "as_i64",
        "base_type",
        "bool",
        "classmethod",
        "float",
        "from_i64",
        "int",
        "is_named_variant",
        "is_other",
        "label",
        "mro",
        "name",
        "other_name",
        "serialize",
        "str",
        "true_enum",
        "value",
    ]
)

# Module level names of the generated file
RESERVED_CLASS_NAMES = frozenset(
    [
        "FieldDataType",
        "FieldTypeEnum",
        "StrEnum",
        "get_field_variant_as_string",
        "nonmember",
        "to_i64",
    ]
)

# Numeric base types a named value can be declared for
ENUMERABLE_PYTHON_TYPES = frozenset(["bool", "int", "float"])


class CompileError(RuntimeError):
    """Raised when a field type cannot be turned into valid code."""


@dataclass(frozen=True)
class EnumVariant:
    """A generated enum member. Values and labels are Python literals."""

    ident: str
    value: str
    label: str
    doc: str | None


@dataclass(frozen=True)
class GeneratedFieldType:
    """Everything needed to emit the enum class of one field type."""

    name: str
    class_name: str
    base_type: str
    python_type: str
    doc: str | None
    variants: tuple[EnumVariant, ...]
    named_values: tuple[int | float | bool, ...]
    other_name: str
    true_enum: bool

    @property
    def as_base_type(self) -> str:
        return f"as_{self.base_type}"


@dataclass(frozen=True)
class RegistryTag:
    """A FieldDataType member. ``class_name`` is set for enum dispatched tags."""

    ident: str
    value: str
    class_name: str | None = None


@dataclass(frozen=True)
class Registry:
    """The FieldDataType registry over base types and every field type."""

    tags: tuple[RegistryTag, ...]

    @property
    def enum_tags(self) -> list[RegistryTag]:
        return [t for t in self.tags if t.class_name is not None]


def is_true_enum(field_type: FieldTypeDefinition, config: GeneratorConfig) -> bool:
    """Check if a field type's values form a closed label set."""
    return bool(field_type.variants) and field_type.name not in config.not_enum


def _other_value_name(field_type: FieldTypeDefinition, config: GeneratorConfig) -> str:
    try:
        other_name = config.other_value_template.format(base_type=field_type.base_type.upper())
    except (AttributeError, KeyError, IndexError, ValueError) as e:
        raise CompileError(
            f"{field_type.name}: invalid other value template "
            f"{config.other_value_template!r}: {e}"
        ) from e

    if not is_identifier(other_name) or other_name in RESERVED_MEMBER_NAMES:
        raise CompileError(f"{field_type.name}: {other_name!r} is not a valid member name")
    return other_name


def _check_variant_ident(field_type: FieldTypeDefinition, variant: FieldTypeVariant) -> None:
    if not is_identifier(variant.ident):
        raise CompileError(f"{field_type.name}: {variant.ident!r} is not a valid member name")
    if variant.ident in RESERVED_MEMBER_NAMES or variant.ident == f"as_{field_type.base_type}":
        raise CompileError(f"{field_type.name}: member name {variant.ident!r} is reserved")


def _compile_variants(
    field_type: FieldTypeDefinition,
) -> tuple[list[EnumVariant], tuple[int | float | bool, ...]]:
    """Build one enum member per variant, in declared order.

    Values are cast to the base type first, so the named values returned are
    the distinct cast values in declared order.
    """
    variants: list[EnumVariant] = []
    seen_idents: set[str] = set()
    seen_values: dict[int | float | bool, str] = {}

    for variant in field_type.variants:
        _check_variant_ident(field_type, variant)
        if variant.ident in seen_idents:
            raise CompileError(f"{field_type.name}: duplicate member name {variant.ident!r}")
        seen_idents.add(variant.ident)

        value = narrow(field_type.base_type, variant.value)
        if value in seen_values:
            logger.warning(
                "%s: %s has the same value (%s) as %s and becomes its alias",
                field_type.name,
                variant.ident,
                value,
                seen_values[value],
            )
        else:
            seen_values[value] = variant.ident

        variants.append(
            EnumVariant(
                ident=variant.ident,
                value=repr(value),
                label=repr(variant.name),
                doc=docstring(variant.comment) if variant.comment else None,
            )
        )

    return variants, tuple(seen_values)


def check_base_type(field_type: FieldTypeDefinition) -> None:
    """Raise CompileError unless the field type has a known base type."""
    if field_type.base_type not in BASE_TYPES:
        raise CompileError(f"{field_type.name}: unknown base type {field_type.base_type!r}")


def class_name(field_type: FieldTypeDefinition) -> str:
    """Return the generated class name of a field type."""
    name = to_camel_case(field_type.name)
    if not is_identifier(name) or name in RESERVED_CLASS_NAMES:
        raise CompileError(f"{field_type.name}: {name!r} is not a valid class name")
    return name


def compile_field_type(
    field_type: FieldTypeDefinition, config: GeneratorConfig
) -> GeneratedFieldType | None:
    """Compile one field type. Field types without variants generate nothing."""
    check_base_type(field_type)
    if not field_type.variants:
        return None

    python_type = BASE_TYPES[field_type.base_type].python_type
    if python_type not in ENUMERABLE_PYTHON_TYPES:
        raise CompileError(
            f"{field_type.name}: named values need a numeric base type, "
            f"not {field_type.base_type!r}"
        )

    variants, named_values = _compile_variants(field_type)
    other_name = _other_value_name(field_type, config)
    if any(v.ident == other_name for v in variants):
        raise CompileError(f"{field_type.name}: member {other_name!r} clashes with the fallback")

    result = GeneratedFieldType(
        name=field_type.name,
        class_name=class_name(field_type),
        base_type=field_type.base_type,
        python_type=python_type,
        doc=docstring(field_type.comment) if field_type.comment else None,
        variants=tuple(variants),
        named_values=named_values,
        other_name=other_name,
        true_enum=is_true_enum(field_type, config),
    )
    logger.debug(
        "Compiled %s: %d variants, true_enum=%s", result.class_name, len(variants), result.true_enum
    )
    return result


def build_registry(
    field_types: list[FieldTypeDefinition], compiled: list[GeneratedFieldType]
) -> Registry:
    """Build the FieldDataType registry once every field type is compiled."""
    dispatched = {c.name: c.class_name for c in compiled if c.true_enum}
    tags: list[RegistryTag] = [RegistryTag(ident=to_upper_snake(b), value=b) for b in BASE_TYPES]

    for field_type in field_types:
        tags.append(
            RegistryTag(
                ident=to_upper_snake(field_type.name),
                value=field_type.name,
                class_name=dispatched.get(field_type.name),
            )
        )

    idents: set[str] = set()
    values: set[str] = set()
    for tag in tags:
        if not is_identifier(tag.ident) or tag.ident in idents or tag.value in values:
            raise CompileError(f"{tag.value}: {tag.ident!r} is not a unique registry tag")
        idents.add(tag.ident)
        values.add(tag.value)

    return Registry(tags=tuple(tags))


def compile_profile(
    profile: Profile, config: GeneratorConfig
) -> tuple[list[GeneratedFieldType], Registry]:
    """Compile every field type of a profile, then build the registry."""
    compiled: list[GeneratedFieldType] = []
    class_names: dict[str, str] = {}
    for field_type in profile.field_types:
        result = compile_field_type(field_type, config)
        if result is None:
            continue
        if result.class_name in class_names:
            raise CompileError(
                f"{field_type.name}: class name {result.class_name!r} is already used by "
                f"{class_names[result.class_name]}"
            )
        class_names[result.class_name] = field_type.name
        compiled.append(result)

    return compiled, build_registry(profile.field_types, compiled)
