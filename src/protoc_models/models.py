from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Tuple


class Rule(Enum):
    REQUIRED = "required"
    OPTIONAL = "optional"
    REPEATED = "repeated"


def definition_name(identifier: str) -> str:
    """Strip the file suffix from a source identifier: BackupManga.kt -> BackupManga."""
    return Path(identifier).stem


@dataclass(frozen=True)
class FieldEntry:
    rule: Rule
    number: int
    type_name: str
    name: str
    raw_text: str


@dataclass(frozen=True)
class Definition:
    name: str
    entries: Tuple[FieldEntry, ...] = field(default_factory=tuple)
