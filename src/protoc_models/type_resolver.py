from __future__ import annotations

from typing import Dict, FrozenSet, Iterable

from protoc_models.diagnostics import Diagnostics, unknown_type

# Kotlin type -> proto2 scalar type
SCALAR_TYPE_MAP: Dict[str, str] = {
    "String": "string",
    "Int": "int32",
    "Long": "int64",
    "Boolean": "bool",
    "Float": "float",
}


class TypeResolver:
    """Map declared Kotlin types to proto types.

    Anything that is not a scalar must name a known definition. The set of
    known names has to be complete before the first call to resolve(), so
    forward and self references need no special handling.
    """

    def __init__(self, known_types: Iterable[str], diagnostics: Diagnostics) -> None:
        self.known_types: FrozenSet[str] = frozenset(known_types)
        self.diagnostics = diagnostics

    @staticmethod
    def is_scalar(type_name: str) -> bool:
        return type_name in SCALAR_TYPE_MAP

    def resolve(self, type_name: str, location: str = "") -> str:
        """Return the proto type for type_name.

        Unknown names are reported and passed through unchanged.
        """
        if self.is_scalar(type_name):
            return SCALAR_TYPE_MAP[type_name]

        if type_name not in self.known_types:
            self.diagnostics.report(unknown_type(type_name, location))

        return type_name
