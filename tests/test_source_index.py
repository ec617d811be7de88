from pathlib import Path

from protoc_models.models import definition_name
from protoc_models.source_index import SourceIndex


class TestFromDirectory:
    def test_sorted_regular_files_only(self, tmp_path: Path):
        (tmp_path / "BackupManga.kt").write_text("manga", encoding="utf-8")
        (tmp_path / "BackupChapter.kt").write_text("chapter", encoding="utf-8")
        (tmp_path / "nested").mkdir()
        (tmp_path / "nested" / "Hidden.kt").write_text("hidden", encoding="utf-8")

        index = SourceIndex.from_directory(str(tmp_path))

        assert [s.identifier for s in index] == ["BackupChapter.kt", "BackupManga.kt"]
        assert [s.text for s in index] == ["chapter", "manga"]
        assert len(index) == 2

    def test_extension_filter(self, tmp_path: Path):
        (tmp_path / "BackupManga.kt").write_text("manga", encoding="utf-8")
        (tmp_path / "README.md").write_text("docs", encoding="utf-8")

        assert [s.identifier for s in SourceIndex.from_directory(str(tmp_path), ".kt")] == ["BackupManga.kt"]
        assert [s.identifier for s in SourceIndex.from_directory(str(tmp_path), "kt")] == ["BackupManga.kt"]
        assert len(SourceIndex.from_directory(str(tmp_path))) == 2

    def test_empty_directory(self, tmp_path: Path):
        assert len(SourceIndex.from_directory(str(tmp_path))) == 0

    def test_invalid_utf8_replaced(self, tmp_path: Path):
        (tmp_path / "Manga.kt").write_bytes(b"@ProtoNumber(1) var url: String // \xff\xfe\n")

        index = SourceIndex.from_directory(str(tmp_path))

        text = next(iter(index)).text
        assert text.startswith("@ProtoNumber(1) var url: String")
        assert "�" in text


class TestFromMapping:
    def test_keeps_mapping_order(self):
        index = SourceIndex.from_mapping({"Manga": "a", "Chapter": "b"})
        assert [s.identifier for s in index] == ["Manga", "Chapter"]


class TestDefinitionName:
    def test_suffix_stripped(self):
        assert definition_name("BackupManga.kt") == "BackupManga"

    def test_no_suffix(self):
        assert definition_name("Manga") == "Manga"
