from __future__ import annotations

from pathlib import Path
from typing import Dict, List

from jinja2 import Environment, FileSystemLoader

from protoc_models.models import Definition, FieldEntry
from protoc_models.type_resolver import TypeResolver

PROTO_SYNTAX = "proto2"


def _get_template_env() -> Environment:
    template_dir = Path(__file__).parent.parent / "templates"
    return Environment(
        loader=FileSystemLoader(str(template_dir)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def _build_field(entry: FieldEntry, definition: Definition, resolver: TypeResolver) -> Dict:
    return {
        "doc": entry.raw_text,
        "rule": entry.rule.value,
        "type": resolver.resolve(entry.type_name, f"{definition.name}.{entry.name}"),
        "name": entry.name,
        "number": entry.number,
    }


def generate_schema(definitions: List[Definition], resolver: TypeResolver) -> str:
    """Render proto2 schema text for the definitions, in the given order.

    Each field is preceded by a comment holding its original declaration.
    Fields keep their source order; numbers are emitted as found.
    """
    env = _get_template_env()
    template = env.get_template("schema.proto.j2")

    messages = []
    for definition in definitions:
        messages.append({
            "name": definition.name,
            "fields": [_build_field(e, definition, resolver) for e in definition.entries],
        })

    return template.render(syntax=PROTO_SYNTAX, messages=messages)


def write_schema(schema: str, output_file: str) -> str:
    """Write schema text to output_file, creating parent directories.

    Returns the written path.
    """
    path = Path(output_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(schema, encoding="utf-8")
    return str(path)
