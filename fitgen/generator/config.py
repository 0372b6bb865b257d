"""Generator configuration."""

from dataclasses import dataclass, field

from dataclasses_json import DataClassJsonMixin

# Time valued field types have named breakpoints but are not label sets
DEFAULT_NOT_ENUM = ["date_time", "local_date_time"]


@dataclass
class GeneratorConfig(DataClassJsonMixin):
    """Options that shape the generated module.

    not_enum: field type names never classified as true enums.
    other_value_template: name of the fallback member, formatted with the
        upper case base type (e.g. "UNKNOWN_{base_type}" -> "UNKNOWN_UINT16").
    runtime_import: module the generated code imports its runtime from.
    """

    not_enum: list[str] = field(default_factory=lambda: list(DEFAULT_NOT_ENUM))
    other_value_template: str = "UNKNOWN_{base_type}"
    runtime_import: str = "fitgen.proto"


def load_config(text: str) -> GeneratorConfig:
    """Load a configuration from JSON."""
    return GeneratorConfig.from_json(text)
