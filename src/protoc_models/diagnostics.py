"""Accumulation of non-fatal problems found while building a schema.

Diagnostics never stop a run. The driver consults ``has_failure`` once, after
every source has been extracted and every field type resolved, to decide
whether the schema is written at all.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Optional, TextIO, Tuple


class DiagnosticKind(Enum):
    EXTRACTION_MISMATCH = "extraction-mismatch"
    UNKNOWN_TYPE = "unknown-type"


@dataclass(frozen=True)
class Diagnostic:
    kind: DiagnosticKind
    subject: str
    message: str
    details: Tuple[str, ...] = ()

    def __str__(self) -> str:
        return self.message


def extraction_mismatch(
    source_name: str,
    matched_names: Iterable[str],
    expected: int,
) -> Diagnostic:
    """Build the diagnostic for a source whose annotations did not all parse."""
    matched = tuple(matched_names)
    return Diagnostic(
        kind=DiagnosticKind.EXTRACTION_MISMATCH,
        subject=source_name,
        message=(
            f"Not all @ProtoNumber matched in {source_name} "
            f"({len(matched)} of {expected})\n"
            f"  matched: {', '.join(matched)}"
        ),
        details=matched,
    )


def unknown_type(type_name: str, location: str = "") -> Diagnostic:
    """Build the diagnostic for a field type that resolves to nothing."""
    message = f"Unknown type {type_name}"
    if location:
        message += f" (in {location})"
    return Diagnostic(
        kind=DiagnosticKind.UNKNOWN_TYPE,
        subject=type_name,
        message=message,
    )


class Diagnostics:
    """Ordered diagnostic list, optionally echoed to a stream as reported."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.items: List[Diagnostic] = []
        self.stream = stream

    def report(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)
        if self.stream is not None:
            print(diagnostic.message, file=self.stream)

    @property
    def has_failure(self) -> bool:
        return bool(self.items)

    def of_kind(self, kind: DiagnosticKind) -> List[Diagnostic]:
        return [d for d in self.items if d.kind is kind]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)
