"""
Struct Code Generator - Generates Go structs from a MySQL schema catalog.

One struct is emitted per table and one field per column, optionally tagged
with the raw column name so database mappers can match fields to columns.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final, Iterable, Sequence

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from structgen.shared import (
    ColumnMetadata,
    Configuration,
    GenerationConfig,
    OutputSinkError,
    StructgenError,
    format_name,
    load_columns,
    load_config,
)
from structgen.shared.information_schema import fetch_columns

from .type_mapping import map_type

# Template configuration
TEMPLATE_DIR: Final[Path] = Path(__file__).parent / "templates"
STDOUT: Final[str] = "-"


@dataclass(frozen=True, slots=True)
class StructField:
    """One generated struct field."""

    name: str
    go_type: str
    column_name: str
    tag: str | None = None

    @property
    def annotation(self) -> str:
        return f"\t`{self.tag}`" if self.tag else ""


@dataclass(slots=True)
class StructBlock:
    """The generated struct for one table."""

    name: str
    table_name: str
    fields: list[StructField] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class EmittedOutput:
    """Generated source text and its size in bytes."""

    text: str
    byte_length: int


@dataclass
class GeneratorContext:
    """Context for code generation with cached resources."""

    template_env: Environment = field(init=False)

    def __post_init__(self) -> None:
        self.template_env = Environment(
            loader=FileSystemLoader(TEMPLATE_DIR),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
            auto_reload=False,
        )
        self._structs_template = self.template_env.get_template("structs.go.j2")

    @property
    def structs_template(self):
        return self._structs_template


def _field_tag(tag_label: str, column_name: str) -> str | None:
    if not tag_label:
        return None
    return f'{tag_label}:"{column_name}"'


def build_structs(
    columns: Iterable[ColumnMetadata],
    config: GenerationConfig,
) -> tuple[list[StructBlock], set[str]]:
    """Group ordered column records into struct blocks.

    A new block starts whenever the table name differs from the previous
    record's, so each table's rows must be contiguous.

    Returns:
        The struct blocks in input order and the imports they require.

    Raises:
        UnsupportedTypeError: If any column has no Go type mapping.
    """
    structs: list[StructBlock] = []
    imports: set[str] = set()
    current: StructBlock | None = None

    for column in columns:
        if current is None or column.table_name != current.table_name:
            current = StructBlock(
                name=format_name(column.table_name),
                table_name=column.table_name,
            )
            structs.append(current)

        go_type, required_import = map_type(column)
        if required_import:
            imports.add(required_import)

        current.fields.append(
            StructField(
                name=format_name(column.column_name),
                go_type=go_type,
                column_name=column.column_name,
                tag=_field_tag(config.tag_label, column.column_name),
            )
        )

    return structs, imports


def emit(
    columns: Iterable[ColumnMetadata],
    config: GenerationConfig,
    ctx: GeneratorContext | None = None,
) -> EmittedOutput:
    """Render the Go source for the given columns.

    Nothing is rendered if any column fails to map.

    Raises:
        UnsupportedTypeError: If any column has no Go type mapping.
    """
    structs, imports = build_structs(columns, config)

    if ctx is None:
        ctx = GeneratorContext()

    text = ctx.structs_template.render(
        package_name=config.package_name,
        imports=sorted(imports),
        structs=structs,
    )
    return EmittedOutput(text=text, byte_length=len(text.encode("utf-8")))


def write_output(output: EmittedOutput, destination: str | Path = STDOUT) -> None:
    """Write the generated source to stdout (``-``) or a file.

    A file destination is created or truncated and always closed again.

    Raises:
        OutputSinkError: If the destination cannot be created or written.
    """
    if str(destination) == STDOUT:
        try:
            sys.stdout.write(output.text)
            sys.stdout.flush()
        except OSError as e:
            raise OutputSinkError(f"Failed to write output: {e}", STDOUT) from e
        return

    path = Path(destination)
    try:
        with path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(output.text)
    except OSError as e:
        raise OutputSinkError(f"Failed to write output: {e}", str(path)) from e


def generate(
    columns: Sequence[ColumnMetadata],
    config: GenerationConfig,
    destination: str | Path = STDOUT,
) -> int:
    """Generate Go structs and write them to ``destination``.

    Args:
        columns: Column metadata ordered by table, then column position.
        config: Package name and tag label of the generated file.
        destination: ``-`` for stdout, otherwise a file path.

    Returns:
        Number of bytes written.
    """
    output = emit(columns, config)
    write_output(output, destination)
    return output.byte_length


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="structgen",
        description="Generate Go structs from a MySQL schema",
    )
    parser.add_argument(
        "--json",
        "--config",
        dest="config",
        type=Path,
        default=None,
        help="Config file (JSON or YAML); built-in defaults when omitted",
    )
    parser.add_argument(
        "--out",
        default=STDOUT,
        help="Output file, '-' for stdout",
    )
    parser.add_argument(
        "--schema-file",
        type=Path,
        default=None,
        help="Read column metadata from a schema snapshot instead of the database",
    )
    parser.add_argument(
        "--package",
        default=None,
        help="Override the package name of the generated file",
    )
    parser.add_argument(
        "--tag-label",
        default=None,
        help="Override the field tag label ('' disables tags)",
    )

    args = parser.parse_args(argv)

    try:
        config: Configuration = load_config(args.config).with_overrides(
            package_name=args.package,
            tag_label=args.tag_label,
        )

        if args.schema_file is not None:
            columns = load_columns(args.schema_file)
        else:
            columns = fetch_columns(config.connection)

        byte_count = generate(columns, config.generation, args.out)
    except StructgenError as e:
        raise SystemExit(f"Error: {e}") from e

    if args.out != STDOUT:
        print(f"Ok {byte_count}")


if __name__ == "__main__":
    main()
