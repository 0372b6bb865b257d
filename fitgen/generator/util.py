"""Name helpers for generated code."""

import keyword
import re

_WORD_SPLIT = re.compile(r"[^0-9a-zA-Z]+")


def to_camel_case(name: str) -> str:
    """Convert snake_case (or any separated name) to CamelCase."""
    return "".join(part[:1].upper() + part[1:] for part in _WORD_SPLIT.split(name) if part)


def to_upper_snake(name: str) -> str:
    """Convert a separated name to UPPER_SNAKE_CASE."""
    return "_".join(part.upper() for part in _WORD_SPLIT.split(name) if part)


def is_identifier(name: str) -> bool:
    """Check if a name can be used as a public Python identifier."""
    return name.isidentifier() and not keyword.iskeyword(name) and not name.startswith("_")


def docstring(text: str) -> str:
    """Quote text as a triple quoted Python string literal."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"""{escaped}"""'
