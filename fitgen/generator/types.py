"""Schema model of a field type catalog."""

from dataclasses import dataclass, field

from dataclasses_json import DataClassJsonMixin

from fitgen.proto.types import BASE_TYPES


@dataclass
class FieldTypeVariant(DataClassJsonMixin):
    """Represents a single named value of a field type.

    ``name`` is the display name, ``ident`` the identifier of the generated
    enum member.
    """

    name: str
    ident: str
    value: int
    comment: str | None = None


@dataclass
class FieldTypeDefinition(DataClassJsonMixin):
    """Represents a field type and its named values, in declared order."""

    name: str
    base_type: str
    comment: str | None = None
    variants: list[FieldTypeVariant] = field(default_factory=list)

    @property
    def variant_map(self) -> dict[int, FieldTypeVariant]:
        """Map each value to its first declared variant, in declaration order."""
        result: dict[int, FieldTypeVariant] = {}
        for variant in self.variants:
            result.setdefault(variant.value, variant)
        return result


@dataclass
class Profile(DataClassJsonMixin):
    """Represents a complete field type catalog."""

    version: str
    field_types: list[FieldTypeDefinition] = field(default_factory=list)


def base_types() -> list[str]:
    """Return the base type names in registry order."""
    return list(BASE_TYPES)


def is_base_type(name: str) -> bool:
    """Check if a name is a known base type."""
    return name in BASE_TYPES


def load_profile(text: str) -> Profile:
    """Load a profile from its JSON export."""
    return Profile.from_json(text)
