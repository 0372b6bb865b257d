"""Command-line interface for fitgen code generation."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from fitgen.generator import python
from fitgen.generator.compiler import CompileError, class_name, compile_profile, is_true_enum
from fitgen.generator.config import GeneratorConfig, load_config
from fitgen.generator.types import Profile, load_profile

logger = logging.getLogger(__name__)


def _read_profile(input_file: str) -> Profile:
    with open(input_file, encoding="utf-8") as f:
        return load_profile(f.read())


def _read_config(config_file: str | None) -> GeneratorConfig:
    if config_file is None:
        return GeneratorConfig()
    with open(config_file, encoding="utf-8") as f:
        return load_config(f.read())


@click.group()
def cli() -> None:
    """fitgen field type code generator."""


@cli.command()
@click.option("--input", "-i", "input_file", required=True, help="Input profile (JSON)")
@click.option("--output", "-o", "output_file", required=True, help="Output file")
@click.option("--config", "-c", "config_file", default=None, help="Generator config (JSON)")
@click.option(
    "--not-enum",
    "not_enum",
    multiple=True,
    help="Field type never classified as a true enum (repeatable, replaces the config list)",
)
@click.option(
    "--runtime-import",
    "runtime_import",
    is_flag=False,
    flag_value="fitgen.proto",
    default=None,
    help="Import path for runtime. No value=fitgen.proto, omit=config or fitgen_runtime",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log compiler progress")
def gen(
    input_file: str,
    output_file: str,
    config_file: str | None,
    not_enum: tuple[str, ...],
    runtime_import: str | None,
    verbose: bool,
) -> None:
    """Generate field type code from a profile."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )

    profile = _read_profile(input_file)
    config = _read_config(config_file)
    if not_enum:
        config.not_enum = list(not_enum)
    # Default to "fitgen_runtime" (vendored runtime) unless a flag or config sets it
    if runtime_import is not None:
        config.runtime_import = runtime_import
    elif config_file is None:
        config.runtime_import = "fitgen_runtime"

    try:
        compile_profile(profile, config)
    except CompileError as e:
        print(f"Compile error: {e}")
        sys.exit(1)

    logger.info("Writing %d field types to %s", len(profile.field_types), output_file)
    with open(output_file, "w", encoding="utf-8") as f:
        python.write_types_file(profile, f, config)


@cli.command()
@click.option("--output", "-o", "output_path", default=".", help="Output directory")
@click.option("--name", default="fitgen_runtime", help="Runtime folder name")
def runtime(output_path: str, name: str) -> None:
    """Generate runtime support code."""
    runtime_dir = Path(output_path) / name
    runtime_dir.mkdir(parents=True, exist_ok=True)
    for filename, content in python.runtime().items():
        (runtime_dir / filename).write_text(content)
    print(f"Generated Python runtime in {runtime_dir}")


@cli.command()
@click.option("--input", "-i", "input_file", required=True, help="Input profile (JSON)")
@click.option("--config", "-c", "config_file", default=None, help="Generator config (JSON)")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def info(input_file: str, config_file: str | None, output_json: bool) -> None:
    """Display the field types of a profile and how they are generated."""
    profile = _read_profile(input_file)
    config = _read_config(config_file)

    try:
        compile_profile(profile, config)
    except CompileError as e:
        print(f"Compile error: {e}")
        sys.exit(1)

    rows = [
        {
            "name": f.name,
            "class_name": class_name(f) if f.variants else None,
            "base_type": f.base_type,
            "variants": len(f.variants),
            "true_enum": is_true_enum(f, config),
        }
        for f in profile.field_types
    ]

    if output_json:
        print(json.dumps({"version": profile.version, "field_types": rows}, indent=2))
    else:
        _output_plain(profile, rows)


def _output_plain(profile: Profile, rows: list[dict]) -> None:
    """Output field type info using rich text formatting."""
    console = Console()

    console.print(f"[bold cyan]Profile[/bold cyan] {profile.version}")
    table = Table(show_header=True, box=None, padding=(0, 2, 0, 0))
    table.add_column("Name", style="white")
    table.add_column("Class", style="green")
    table.add_column("Base Type", style="dim")
    table.add_column("Variants", style="yellow", justify="right")
    table.add_column("Kind", style="dim")

    for row in rows:
        if row["class_name"] is None:
            kind = "scalar"
        elif row["true_enum"]:
            kind = "enum"
        else:
            kind = "numeric"
        table.add_row(
            row["name"], row["class_name"] or "", row["base_type"], str(row["variants"]), kind
        )

    console.print(table)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
