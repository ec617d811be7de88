import io

from protoc_models.diagnostics import (
    Diagnostics,
    DiagnosticKind,
    extraction_mismatch,
    unknown_type,
)


class TestDiagnostics:
    def test_empty_has_no_failure(self):
        diagnostics = Diagnostics()
        assert diagnostics.has_failure is False
        assert len(diagnostics) == 0
        assert list(diagnostics) == []

    def test_report_accumulates_in_order(self):
        diagnostics = Diagnostics()
        diagnostics.report(unknown_type("Score"))
        diagnostics.report(extraction_mismatch("BackupManga", ["url"], 2))

        assert diagnostics.has_failure is True
        assert [d.kind for d in diagnostics] == [
            DiagnosticKind.UNKNOWN_TYPE,
            DiagnosticKind.EXTRACTION_MISMATCH,
        ]
        assert len(diagnostics.of_kind(DiagnosticKind.UNKNOWN_TYPE)) == 1

    def test_report_echoes_to_stream_immediately(self):
        stream = io.StringIO()
        diagnostics = Diagnostics(stream=stream)

        diagnostics.report(unknown_type("Score"))
        assert stream.getvalue() == "Unknown type Score\n"

        diagnostics.report(unknown_type("Rank", "BackupManga.rank"))
        assert stream.getvalue().splitlines()[-1] == "Unknown type Rank (in BackupManga.rank)"


class TestMessages:
    def test_extraction_mismatch_message(self):
        diag = extraction_mismatch("BackupManga", ["url", "title"], 3)

        assert diag.subject == "BackupManga"
        assert diag.details == ("url", "title")
        assert str(diag) == (
            "Not all @ProtoNumber matched in BackupManga (2 of 3)\n"
            "  matched: url, title"
        )

    def test_unknown_type_without_location(self):
        assert str(unknown_type("Score")) == "Unknown type Score"
