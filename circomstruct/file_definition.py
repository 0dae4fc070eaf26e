"""Registry of source files and byte-offset to line/column lookups."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field


@dataclass
class _SourceFile:
    name: str
    source: str
    encoded: bytes = field(init=False, repr=False)
    line_starts: list[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.encoded = self.source.encode("utf-8")
        starts = [0]
        starts.extend(i + 1 for i, byte in enumerate(self.encoded) if byte == 0x0A)
        self.line_starts = starts

    def line_index(self, byte_index: int) -> int:
        return max(bisect_right(self.line_starts, byte_index) - 1, 0)


class FileLibrary:
    """Holds every loaded file; each gets a sequential numeric id."""

    def __init__(self) -> None:
        self._files: list[_SourceFile] = []

    def _file(self, file_id: int) -> _SourceFile | None:
        if 0 <= file_id < len(self._files):
            return self._files[file_id]
        return None

    def add_file(self, file_name: str, file_source: str) -> int:
        self._files.append(_SourceFile(file_name, file_source))
        return len(self._files) - 1

    def get_name(self, file_id: int) -> str:
        file = self._file(file_id)
        if file is None:
            raise KeyError(file_id)
        return file.name

    def get_source(self, file_id: int) -> str:
        file = self._file(file_id)
        if file is None:
            raise KeyError(file_id)
        return file.source

    def line_index(self, file_id: int, byte_index: int) -> int | None:
        """Zero-based line holding the byte offset, or None for an unknown file."""
        file = self._file(file_id)
        if file is None:
            return None
        return file.line_index(byte_index)

    def column_index(self, file_id: int, byte_index: int) -> int | None:
        """Zero-based character column of the byte offset within its line."""
        file = self._file(file_id)
        if file is None:
            return None
        line_start = file.line_starts[file.line_index(byte_index)]
        prefix = file.encoded[line_start:byte_index]
        return len(prefix.decode("utf-8", errors="ignore"))

    def get_line(self, start: int, file_id: int) -> int | None:
        """One-based line number of a byte offset, or None for an unknown file."""
        index = self.line_index(file_id, start)
        return None if index is None else index + 1


def generate_file_location(start: int, end: int) -> range:
    return range(start, end)