from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from protoc_models.diagnostics import Diagnostics
from protoc_models.generator.proto_schema_generator import generate_schema, write_schema
from protoc_models.models import Definition, definition_name
from protoc_models.parser.declaration_parser import parse_definition
from protoc_models.source_index import SourceIndex
from protoc_models.type_resolver import TypeResolver

DEFAULT_SOURCE_ROOT = "./tachiyomi/app/src/main/java/eu/kanade/tachiyomi/data/backup/full/models/"


def collect_definitions(
    sources: SourceIndex,
    diagnostics: Diagnostics,
    verbose: bool = False,
) -> Tuple[List[Definition], List[str]]:
    """First pass: extract every source and record every definition name.

    Returns (definitions with at least one field, all definition names).
    """
    definitions: List[Definition] = []
    type_names: List[str] = []

    for source in sources:
        name = definition_name(source.identifier)
        type_names.append(name)

        definition = parse_definition(name, source.text, diagnostics)
        field_count = len(definition.entries) if definition else 0
        if verbose:
            print(f"  Parsed {source.identifier}: {field_count} field(s)")

        if definition is not None:
            definitions.append(definition)

    return definitions, type_names


def build_schema(
    sources: SourceIndex,
    diagnostics: Optional[Diagnostics] = None,
    verbose: bool = False,
) -> Tuple[str, Diagnostics]:
    """Extract all sources, then resolve types and render the schema."""
    if diagnostics is None:
        diagnostics = Diagnostics()

    definitions, type_names = collect_definitions(sources, diagnostics, verbose=verbose)
    resolver = TypeResolver(type_names, diagnostics)
    schema = generate_schema(definitions, resolver)
    return schema, diagnostics


def run(output_file: str, source_root: str = DEFAULT_SOURCE_ROOT, extension: Optional[str] = None) -> str:
    """Main pipeline: read sources, build schema, write it if nothing failed."""
    if not Path(source_root).is_dir():
        print(f"Source directory not found: {source_root}", file=sys.stderr)
        sys.exit(1)

    sources = SourceIndex.from_directory(source_root, extension)
    print(f"Found {len(sources)} source file(s) under {source_root}")

    diagnostics = Diagnostics(stream=sys.stderr)
    schema, diagnostics = build_schema(sources, diagnostics, verbose=True)

    if diagnostics.has_failure:
        print(
            f"FATAL: {len(diagnostics)} problem(s) found, {output_file} not written",
            file=sys.stderr,
        )
        sys.exit(1)

    out_path = write_schema(schema, output_file)
    print(f"Generated: {out_path}")
    return out_path


def main():
    parser = argparse.ArgumentParser(
        description="Generate a proto2 schema from @ProtoNumber-annotated Kotlin models",
    )
    parser.add_argument(
        "output_file",
        metavar="output-file",
        help="Path of the .proto file to write",
    )
    parser.add_argument(
        "source_root",
        metavar="source-root",
        nargs="?",
        default=DEFAULT_SOURCE_ROOT,
        help=f"Directory holding the Kotlin model files (default: {DEFAULT_SOURCE_ROOT})",
    )
    parser.add_argument(
        "--extension",
        default=None,
        help="Only read files with this suffix, e.g. .kt (default: every file)",
    )

    args = parser.parse_args()
    run(args.output_file, args.source_root, args.extension)


if __name__ == "__main__":
    main()
