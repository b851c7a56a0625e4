"""Reading of comma separated records and splitting of multi-valued fields."""

from __future__ import annotations

import re
from typing import Iterator, TextIO

MAX_LINE_LENGTH = 4096
MAX_FIELDS = 128

_LINE_END = re.compile(r"[\r\n]")


def parse_csv_line(line: str, separator: str = ",") -> list[str]:
    """Split one CSV line into its fields.

    A field may be wrapped in double quotes, in which case it may contain the
    separator and doubled quotes stand for a literal quote. Everything from
    the first line break on is ignored, a trailing separator does not open an
    empty field, and at most ``MAX_FIELDS - 1`` fields are returned.
    """
    if len(separator) != 1:
        raise ValueError("separator must be a single character")

    line = _LINE_END.split(line, maxsplit=1)[0]
    fields: list[str] = []
    pos, end = 0, len(line)

    while pos < end and len(fields) < MAX_FIELDS - 1:
        if line[pos] == '"':
            pos += 1
            chunk: list[str] = []
            while pos < end:
                char = line[pos]
                if char == '"':
                    if line.startswith('"', pos + 1):
                        chunk.append('"')
                        pos += 2
                        continue
                    pos += 1
                    break
                chunk.append(char)
                pos += 1
            if pos < end and line[pos] == separator:
                pos += 1
            fields.append("".join(chunk))
        else:
            stop = line.find(separator, pos)
            if stop == -1:
                fields.append(line[pos:])
                pos = end
            else:
                fields.append(line[pos:stop])
                pos = stop + 1

    return fields


def iter_csv_rows(stream: TextIO, separator: str = ",") -> Iterator[list[str]]:
    """Yield the fields of every line read from ``stream``.

    Lines longer than ``MAX_LINE_LENGTH - 1`` characters are read in pieces,
    each piece parsed as a row of its own.
    """
    while True:
        line = stream.readline(MAX_LINE_LENGTH - 1)
        if not line:
            return
        yield parse_csv_line(line, separator)


def split_string(text: str, delim: str) -> list[str]:
    """Split ``text`` on any character of ``delim``.

    Runs of delimiters count as one, empty pieces are dropped and spaces are
    trimmed from both ends of every piece.
    """
    if delim:
        parts = re.split("[" + re.escape(delim) + "]+", text)
    else:
        parts = [text]
    return [part.strip(" ") for part in parts if part]