import io

import pytest

from circomstruct.error_code import ReportCode
from circomstruct.error_definition import (
    Label,
    MessageCategory,
    Report,
    print_reports,
)
from circomstruct.file_definition import FileLibrary


@pytest.fixture
def library():
    lib = FileLibrary()
    lib.add_file("main.circom", "pragma circom 2.0.0;\npragma circom 2.1.0;\n")
    return lib


def test_error_and_warning_categories():
    err = Report.error("Multiple pragma directives", ReportCode.MULTIPLE_PRAGMA)
    warn = Report.warning("no version", ReportCode.NO_COMPILER_VERSION_WARNING)
    assert err.is_error() and not err.is_warning()
    assert warn.is_warning() and not warn.is_error()
    assert err.category is MessageCategory.ERROR


def test_labels_and_notes_are_recorded():
    report = Report.error("illegal expression", ReportCode.ILLEGAL_EXPRESSION)
    returned = report.add_primary(range(0, 4), 0, "here")
    assert returned is report
    report.add_secondary(range(5, 6), 0)
    report.add_secondary(range(7, 8), 0, "also")
    report.add_note("a note")
    assert report.primary == [Label(0, range(0, 4), "here", primary=True)]
    assert [label.message for label in report.secondary] == ["", "also"]
    assert all(not label.primary for label in report.secondary)
    assert report.notes == ["a note"]


def test_diagnostic_code():
    report = Report.error("Multiple pragma directives", ReportCode.MULTIPLE_PRAGMA)
    assert report.diagnostic_code() == "P1013"


def test_render_points_at_source(library):
    report = Report.error("Multiple pragma directives", ReportCode.MULTIPLE_PRAGMA)
    report.add_primary(range(21, 27), 0, "here")
    report.add_note("remove one")
    text = report.render(library)
    lines = text.splitlines()
    assert lines[0] == "error[P1013]: Multiple pragma directives"
    assert "main.circom:2:1" in lines[1]
    assert "pragma circom 2.1.0;" in text
    assert lines[-2].endswith("^^^^^^ here")
    assert lines[-1] == "  = remove one"


def test_render_secondary_marker_and_warning(library):
    report = Report.warning("careful", ReportCode.RUNTIME_WARNING)
    report.add_secondary(range(0, 6), 0, "this")
    text = report.render(library)
    assert text.startswith("warning[T3002]: careful")
    assert "------ this" in text


def test_render_unknown_file(library):
    report = Report.error("bad", ReportCode.FILE_OS)
    report.add_primary(range(1, 2), 9, "x")
    text = report.render(library)
    assert "<file 9>" in text


def test_print_reports_writes_renderings(library):
    first = Report.error("one", ReportCode.MULTIPLE_MAIN)
    second = Report.warning("two", ReportCode.UNUSED_INPUT).add_primary(range(0, 1), 0, "x")
    stream = io.StringIO()
    print_reports([first, second], library, stream)
    assert stream.getvalue() == first.render(library) + second.render(library)