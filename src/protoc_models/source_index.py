from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Mapping, Optional


@dataclass(frozen=True)
class SourceFile:
    identifier: str
    text: str


class SourceIndex:
    """Ordered collection of named source texts."""

    def __init__(self, sources: List[SourceFile]) -> None:
        self.sources = list(sources)

    @classmethod
    def from_mapping(cls, texts: Mapping[str, str]) -> SourceIndex:
        """Build an index from identifier -> text, keeping the mapping's order."""
        return cls([SourceFile(identifier=k, text=v) for k, v in texts.items()])

    @classmethod
    def from_directory(cls, root: str, extension: Optional[str] = None) -> SourceIndex:
        """Read every regular file directly under root, sorted by file name.

        Subdirectories are not descended into. When extension is given only
        files with that suffix are kept. Invalid UTF-8 bytes are replaced
        with U+FFFD.
        """
        sources: List[SourceFile] = []
        for path in _list_files(root, extension):
            sources.append(
                SourceFile(identifier=path.name, text=path.read_text(encoding="utf-8", errors="replace"))
            )
        return cls(sources)

    def __iter__(self) -> Iterator[SourceFile]:
        return iter(self.sources)

    def __len__(self) -> int:
        return len(self.sources)


def _list_files(root: str, extension: Optional[str]) -> List[Path]:
    if extension and not extension.startswith("."):
        extension = f".{extension}"
    results = []
    for p in Path(root).iterdir():
        if not p.is_file():
            continue
        if extension and p.suffix != extension:
            continue
        results.append(p)
    return sorted(results, key=lambda p: p.name)
