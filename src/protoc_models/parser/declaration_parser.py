"""Extraction of @ProtoNumber-annotated Kotlin properties.

The model classes declare their fields as annotated properties, e.g.::

    @ProtoNumber(2) var url: String
    @ProtoNumber(3) var title: String = ""
    @ProtoNumber(6) var description: String?
    @ProtoNumber(7) var genre: List<String>

Only this narrow shape is recognized. A second, looser count of the
annotations catches declarations the main pattern could not parse.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from protoc_models.diagnostics import Diagnostics, extraction_mismatch
from protoc_models.models import Definition, FieldEntry, Rule

# Annotation must be the first thing on its line, so commented-out
# declarations ("// @ProtoNumber(3) ...") never match.
_DECLARATION_RE = re.compile(
    r"^[ \t]*@ProtoNumber\((?P<number>\d+)\)\s+va[rl]\s+(?P<name>\w+):\s*"
    r"(?:List<(?P<list>\w+)>|(?P<type>\w+))"
    r"(?P<optional>\?|\s*=)?",
    re.MULTILINE,
)

_ANNOTATION_RE = re.compile(r"^[ \t]*@ProtoNumber\b", re.MULTILINE)


@dataclass(frozen=True)
class Extraction:
    entries: Tuple[FieldEntry, ...]
    annotation_count: int

    @property
    def is_complete(self) -> bool:
        return len(self.entries) == self.annotation_count

    @property
    def matched_names(self) -> List[str]:
        return [e.name for e in self.entries]


def _rule_for(match: re.Match) -> Rule:
    if match.group("list"):
        return Rule.REPEATED
    if match.group("optional") is not None:
        return Rule.OPTIONAL
    return Rule.REQUIRED


def _single_line(text: str) -> str:
    """Collapse a declaration spanning several lines into one."""
    return " ".join(line.strip() for line in text.strip().splitlines())


def extract_declarations(text: str) -> Extraction:
    """Extract all annotated field declarations from a source text.

    Every call scans the whole text from offset 0.
    """
    entries: List[FieldEntry] = []
    for match in _DECLARATION_RE.finditer(text):
        entries.append(
            FieldEntry(
                rule=_rule_for(match),
                number=int(match.group("number")),
                type_name=match.group("list") or match.group("type"),
                name=match.group("name"),
                raw_text=_single_line(match.group(0)),
            )
        )

    annotation_count = len(_ANNOTATION_RE.findall(text))
    return Extraction(entries=tuple(entries), annotation_count=annotation_count)


def parse_definition(
    name: str,
    text: str,
    diagnostics: Diagnostics,
) -> Optional[Definition]:
    """Extract a Definition from one source text.

    Reports an extraction mismatch when some annotations did not parse, but
    still returns the entries that did. Returns None when nothing matched.
    """
    extraction = extract_declarations(text)

    if not extraction.is_complete:
        diagnostics.report(
            extraction_mismatch(name, extraction.matched_names, extraction.annotation_count)
        )

    if not extraction.entries:
        return None

    return Definition(name=name, entries=extraction.entries)
