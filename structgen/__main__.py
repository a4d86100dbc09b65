#!/usr/bin/env python3
"""
Command-line entry point for structgen.

Usage:
    python -m structgen [--json CONFIG] [--out FILE] [--schema-file SNAPSHOT]

Examples:
    python -m structgen --json db.json --out models/structs.go
    python -m structgen --schema-file schema.yaml --tag-label ""
"""

from structgen.struct_codegen.main import main

if __name__ == "__main__":
    main()
