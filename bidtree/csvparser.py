"""A small CSV reader with row access, editing and write-back."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Callable, Iterable


class CsvError(RuntimeError):
    """Raised for unreadable input, malformed rows and bad lookups."""

    def __init__(self, message: str) -> None:
        super().__init__(f"CSVparser : {message}")


class DataType(Enum):
    """Whether the parser's data is a file path or the CSV text itself."""

    FILE = 0
    PURE = 1


_MISSING_VALUE = "can't return this value (doesn't exist)"


class Row:
    """One data row, addressable by position or by header name."""

    def __init__(self, header: Iterable[str], values: Iterable[str] = ()) -> None:
        self._header = tuple(header)
        self._values = list(values)

    def __len__(self) -> int:
        return len(self._values)

    def push(self, value: str) -> None:
        """Append a value to the end of the row."""
        self._values.append(value)

    def set(self, key: str, value: str) -> bool:
        """Replace the value under column ``key``; return False if no such column."""
        try:
            position = self._header.index(key)
        except ValueError:
            return False
        if position >= len(self._values):
            raise CsvError(_MISSING_VALUE)
        self._values[position] = value
        return True

    def __getitem__(self, key: int | str) -> str:
        if isinstance(key, str):
            try:
                position = self._header.index(key)
            except ValueError:
                raise CsvError(_MISSING_VALUE) from None
        else:
            position = key
        if not 0 <= position < len(self._values):
            raise CsvError(_MISSING_VALUE)
        return self._values[position]

    def get_value(self, position: int, kind: Callable[[str], Any] = str) -> Any:
        """Read the first whitespace-separated token at ``position`` as ``kind``."""
        raw = self[position]
        tokens = raw.split()
        token = tokens[0] if tokens else ""
        try:
            return kind(token)
        except ValueError:
            raise CsvError(f"can't convert value {raw!r}") from None

    def __str__(self) -> str:
        return "".join(f"{value} | " for value in self._values)

    def to_csv(self) -> str:
        """Render the row as a comma-separated line without a newline."""
        return ",".join(self._values)


def _split_header(line: str, sep: str) -> list[str]:
    items = line.split(sep)
    if items and items[-1] == "":
        items.pop()
    return items


def _split_fields(line: str) -> list[str]:
    fields = []
    quoted = False
    start = 0
    for index, char in enumerate(line):
        if char == '"':
            quoted = not quoted
        elif char == "," and not quoted:
            fields.append(line[start:index])
            start = index + 1
    fields.append(line[start:])
    return fields


class Parser:
    """Parses CSV content from a file or a string into a header and rows."""

    def __init__(
        self,
        data: str | Path,
        data_type: DataType = DataType.FILE,
        sep: str = ",",
    ) -> None:
        self._type = data_type
        self._sep = sep
        self._file = ""
        if data_type is DataType.FILE:
            self._file = str(data)
            try:
                with open(self._file, encoding="utf-8", newline="") as handle:
                    text = handle.read()
            except OSError:
                raise CsvError(f"Failed to open {self._file}") from None
            empty_message = f"No Data in {self._file}"
        else:
            text = str(data)
            empty_message = "No Data in pure content"

        lines = [line for line in text.split("\n") if line != ""]
        if not lines:
            raise CsvError(empty_message)

        self._header = _split_header(lines[0], sep)
        self._content: list[Row] = []
        for line in lines[1:]:
            row = Row(self._header, _split_fields(line))
            if len(row) != len(self._header):
                raise CsvError("corrupted data !")
            self._content.append(row)

    def get_row(self, position: int) -> Row:
        """Return the data row at ``position``."""
        if not 0 <= position < len(self._content):
            raise CsvError("can't return this row (doesn't exist)")
        return self._content[position]

    def __getitem__(self, position: int) -> Row:
        return self.get_row(position)

    def __len__(self) -> int:
        return len(self._content)

    def row_count(self) -> int:
        """Number of data rows, header excluded."""
        return len(self._content)

    def column_count(self) -> int:
        """Number of header columns."""
        return len(self._header)

    @property
    def header(self) -> list[str]:
        """A copy of the header names."""
        return list(self._header)

    def header_element(self, position: int) -> str:
        """Return the header name at ``position``."""
        if not 0 <= position < len(self._header):
            raise CsvError("can't return this header (doesn't exist)")
        return self._header[position]

    @property
    def file_name(self) -> str:
        """The path read from, or an empty string for string content."""
        return self._file

    def delete_row(self, position: int) -> bool:
        """Remove the row at ``position``; return False if there is none."""
        if 0 <= position < len(self._content):
            del self._content[position]
            return True
        return False

    def add_row(self, position: int, values: Iterable[str]) -> bool:
        """Insert a row before ``position``; return False if out of range."""
        row = Row(self._header, values)
        if 0 <= position <= len(self._content):
            self._content.insert(position, row)
            return True
        return False

    def sync(self) -> None:
        """Write header and rows back to the source file, if there is one."""
        if self._type is not DataType.FILE:
            return
        with open(self._file, "w", encoding="utf-8", newline="") as handle:
            if self._header:
                handle.write(",".join(self._header) + "\n")
            for row in self._content:
                handle.write(row.to_csv() + "\n")