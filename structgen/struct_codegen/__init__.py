"""Struct Code Generator - Generates Go structs from a MySQL schema catalog."""

from .main import (
    StructField,
    StructBlock,
    EmittedOutput,
    GeneratorContext,
    build_structs,
    emit,
    write_output,
    generate,
    main,
)
from .type_mapping import (
    DEFAULT_GO_TYPES,
    GoType,
    map_type,
)

__all__ = [
    "StructField",
    "StructBlock",
    "EmittedOutput",
    "GeneratorContext",
    "build_structs",
    "emit",
    "write_output",
    "generate",
    "main",
    "DEFAULT_GO_TYPES",
    "GoType",
    "map_type",
]
