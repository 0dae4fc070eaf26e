"""Reports produced by the compiler and their textual rendering."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, TextIO

from .error_code import ReportCode
from .file_definition import FileLibrary


class MessageCategory(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass
class Label:
    """A source span pointed at by a report."""

    file_id: int
    location: range
    message: str = ""
    primary: bool = True


@dataclass
class Report:
    category: MessageCategory
    message: str
    code: ReportCode
    primary: list[Label] = field(default_factory=list)
    secondary: list[Label] = field(default_factory=list)
    notes: list[str] = field(default_factory=list)

    @classmethod
    def error(cls, error_message: str, code: ReportCode) -> "Report":
        return cls(MessageCategory.ERROR, error_message, code)

    @classmethod
    def warning(cls, error_message: str, code: ReportCode) -> "Report":
        return cls(MessageCategory.WARNING, error_message, code)

    def add_primary(self, location: range, file_id: int, message: str) -> "Report":
        self.primary.append(Label(file_id, location, message, primary=True))
        return self

    def add_secondary(
        self, location: range, file_id: int, message: str | None = None
    ) -> "Report":
        self.secondary.append(Label(file_id, location, message or "", primary=False))
        return self

    def add_note(self, note: str) -> "Report":
        self.notes.append(note)
        return self

    def is_error(self) -> bool:
        return self.category is MessageCategory.ERROR

    def is_warning(self) -> bool:
        return self.category is MessageCategory.WARNING

    def diagnostic_code(self) -> str:
        return str(self.code)

    def render(self, file_library: FileLibrary) -> str:
        """Plain-text rendering: header, labelled source lines, then notes."""
        severity = "warning" if self.is_warning() else "error"
        lines = [f"{severity}[{self.diagnostic_code()}]: {self.message}"]
        for label in (*self.primary, *self.secondary):
            lines.extend(_render_label(label, file_library))
        lines.extend(f"  = {note}" for note in self.notes)
        return "\n".join(lines) + "\n"


def _render_label(label: Label, file_library: FileLibrary) -> list[str]:
    marker = "^" if label.primary else "-"
    start, end = label.location.start, label.location.stop
    suffix = f" {label.message}" if label.message else ""
    try:
        name = file_library.get_name(label.file_id)
        source = file_library.get_source(label.file_id)
    except KeyError:
        return [f"  --> <file {label.file_id}>:{start}..{end}{suffix}"]

    line = file_library.line_index(label.file_id, start)
    column = file_library.column_index(label.file_id, start)
    text = source.split("\n")[line].rstrip("\r")
    if file_library.line_index(label.file_id, end) == line:
        end_column = file_library.column_index(label.file_id, end)
    else:
        end_column = len(text)
    width = max(1, end_column - column)
    number = str(line + 1)
    gutter = " " * len(number)
    return [
        f"{gutter}--> {name}:{number}:{column + 1}",
        f"{gutter} |",
        f"{number} | {text}",
        f"{gutter} | {' ' * column}{marker * width}{suffix}",
    ]


def print_reports(
    reports: Iterable[Report], file_library: FileLibrary, stream: TextIO | None = None
) -> None:
    """Write every report to the stream (standard error by default)."""
    out = sys.stderr if stream is None else stream
    for report in reports:
        out.write(report.render(file_library))
    out.flush()