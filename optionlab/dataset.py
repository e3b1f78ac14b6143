"""Tabular numeric data loaded from comma-separated files."""

import sys
from dataclasses import dataclass, field

from .filereader import read_file_into_string, string_to_double
from .logger import log

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _split_records(text, delimiter):
    """Split like repeated line reads: no empty piece after a final delimiter."""
    if not text:
        return []
    parts = text.split(delimiter)
    if parts[-1] == "":
        parts.pop()
    return parts


def _strip_spaces(text):
    return "".join(ch for ch in text if ch not in _WHITESPACE)


@dataclass
class Dataset:
    """Column headers and row-major numeric values of a table."""

    fields: list = field(default_factory=list)
    data: list = field(default_factory=list)

    def import_data(self, file_name):
        """Load headers and values from a CSV file; return True on success."""
        try:
            contents = read_file_into_string(file_name)
            if not contents:
                log(1, f"import_data: Failed to read file: {file_name}\n")
                return False

            first_line = True
            for line in _split_records(contents, "\n"):
                for record in _split_records(line, ","):
                    record = _strip_spaces(record)
                    if first_line:
                        self.fields.append(record)
                    else:
                        self.data.append(string_to_double(record))
                first_line = False
            return True
        except (OSError, ValueError) as exc:
            log(1, f"import_data: Error importing data: {exc}\n")
            return False

    def format_data(self):
        """Render the table as text, or a message explaining why it cannot be."""
        if not self.fields:
            return "No fields (column headers) to display.\n"
        if not self.data:
            return "No data to display.\n"

        num_cols = len(self.fields)
        if len(self.data) % num_cols:
            return "Error: Inconsistent data size.  Not a proper table.\n"

        rows = [self.data[start:start + num_cols] for start in range(0, len(self.data), num_cols)]
        widths = [len(name) for name in self.fields]
        for row in rows:
            widths = [max(width, len("%f" % value)) for width, value in zip(widths, row)]

        lines = ["".join(name.rjust(width + 2) for name, width in zip(self.fields, widths))]
        lines.append("-" * sum(width + 2 for width in widths))
        for row in rows:
            lines.append("".join(("%g" % value).rjust(width + 2) for value, width in zip(row, widths)))
        return "\n".join(lines) + "\n"

    def print_data(self, file=None):
        """Write the formatted table to ``file`` (standard output by default)."""
        out = sys.stdout if file is None else file
        out.write(self.format_data())