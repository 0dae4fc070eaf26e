"""Ready-made reports for parse, include and version problems."""

from __future__ import annotations

from .error_code import ReportCode
from .error_definition import Report
from .syntax import Meta, Version

_LOCATED_PARSE_ERRORS = {
    ReportCode.UNCLOSED_COMMENT: ("unterminated /* */", "Comment starts here"),
    ReportCode.MISSING_SEMICOLON: ("Missing semicolon", "A semicolon is needed here"),
    ReportCode.UNRECOGNIZED_INCLUDE: (
        "unrecognized argument in include directive",
        "this argument",
    ),
    ReportCode.UNRECOGNIZED_PRAGMA: (
        "unrecognized argument in pragma directive",
        "this argument",
    ),
    ReportCode.UNRECOGNIZED_VERSION: (
        "unrecognized version argument in pragma directive",
        "this argument",
    ),
    ReportCode.ILLEGAL_EXPRESSION: ("illegal expression", "here"),
    ReportCode.MULTIPLE_PRAGMA: ("Multiple pragma directives", "here"),
    ReportCode.EXPECTED_IDENTIFIER: (
        "An identifier is expected",
        "This should be an identifier",
    ),
}

_PROJECT_ERRORS = {
    ReportCode.NO_MAIN_FOUND_IN_PROJECT: "No main specified in the project structure",
    ReportCode.MULTIPLE_MAIN: "Multiple main components in the project structure",
}


def produce_report(error_code: ReportCode, location: range, file_id: int) -> Report:
    """Report for a parse error; raises ValueError for codes it does not cover."""
    if error_code in _PROJECT_ERRORS:
        return Report.error(_PROJECT_ERRORS[error_code], error_code)
    try:
        message, label = _LOCATED_PARSE_ERRORS[error_code]
    except KeyError:
        raise ValueError(f"no parse report for code {error_code.name}") from None
    return Report.error(message, error_code).add_primary(location, file_id, label)


def produce_version_warning_report(path: str, version: Version) -> Report:
    report = Report.warning(
        f"File {path} does not include pragma version. "
        f"Assuming pragma version {tuple(version)}",
        ReportCode.NO_COMPILER_VERSION_WARNING,
    )
    report.add_note(
        f"At the beginning of file {path}, you should add the directive "
        '"pragma circom <Version>", to indicate which compiler version you are using.'
    )
    return report


def produce_report_with_message(error_code: ReportCode, msg: str) -> Report:
    """Report about a file that could not be read or found."""
    if error_code is ReportCode.FILE_OS:
        return Report.error(f"Could not open file {msg}", error_code)
    if error_code is ReportCode.INCLUDE_NOT_FOUND:
        report = Report.error(
            f" The file {msg} to be included has not been found", error_code
        )
        report.add_note(
            "Consider using compilation option -l to indicate include paths"
        )
        return report
    raise ValueError(f"no message report for code {error_code.name}")


def produce_compiler_version_report(
    path: str, required_version: Version, version: Version
) -> Report:
    return Report.error(
        f"File {path} requires pragma version {tuple(required_version)} that is not "
        f"supported by the compiler (version {tuple(version)})",
        ReportCode.COMPILER_VERSION_ERROR,
    )


def _located_error(meta: Meta, msg: str, code: ReportCode, label: str) -> Report:
    file_id = meta.require_file_id()
    return Report.error(msg, code).add_primary(meta.location, file_id, label)


def anonymous_inside_condition_error(meta: Meta) -> Report:
    return _located_error(
        meta,
        "An anonymous component cannot be used inside a condition ",
        ReportCode.ANONYMOUS_COMP_ERROR,
        "This is an anonymous component used inside a condition",
    )


def anonymous_general_error(meta: Meta, msg: str) -> Report:
    return _located_error(
        meta,
        msg,
        ReportCode.ANONYMOUS_COMP_ERROR,
        "This is the anonymous component whose use is not allowed",
    )


def tuple_general_error(meta: Meta, msg: str) -> Report:
    return _located_error(
        meta,
        msg,
        ReportCode.TUPLE_ERROR,
        "This is the tuple whose use is not allowed",
    )