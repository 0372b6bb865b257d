"""Python code generator for field type catalogs."""

from importlib import resources
from typing import TextIO

from jinja2 import Environment, PackageLoader

from .compiler import compile_profile
from .config import GeneratorConfig
from .types import Profile
from .util import docstring

RUNTIME_FILES = [
    "__init__.py",
    "fields.py",
    "types.py",
]

env = Environment(
    loader=PackageLoader("fitgen.generator", "templates"),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    line_comment_prefix="%%",
    line_statement_prefix="%",
)

env.filters["pyrepr"] = repr

template = env.get_template("python.py.j2")


def render(profile: Profile, config: GeneratorConfig | None = None) -> str:
    """Render the field types of a profile to Python source code."""
    config = config or GeneratorConfig()
    field_types, registry = compile_profile(profile, config)

    header = (
        f"Auto generated profile field types from release: {profile.version}\n\n"
        "Not all of these may be used by the defined set of messages."
    )
    return template.render(
        header=docstring(header),
        registry=registry,
        field_types=field_types,
        runtime_import=config.runtime_import,
        BLANK_LINE="",
    )


def write_types_file(profile: Profile, out: TextIO, config: GeneratorConfig | None = None) -> None:
    """Render the profile and write it to ``out`` in a single call."""
    out.write(render(profile, config))


def runtime() -> dict[str, str]:
    """Return the Python runtime files as a dict of filename -> content."""
    result: dict[str, str] = {}
    for filename in RUNTIME_FILES:
        content = resources.files("fitgen.proto").joinpath(filename).read_text()
        result[filename] = content
    return result
