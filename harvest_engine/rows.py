"""Delimited-row parsing.

Two separate passes over the same file, aligned by line index:
- `parse_rows` turns each line into a list of fields with a minimal parser.
- `lines_ending_in_delimiter` records, from the raw text, which lines end in a
  bare delimiter.

The parser drops the empty field after a trailing delimiter ("John," parses
to ["John"]). The flag list is how callers recover that lost field; the
parser itself stays unaware of it.
"""

from __future__ import annotations

from typing import List

from .utils import PathLike, read_lines


DELIMITER = ","
QUOTE = '"'


def parse_line(line: str, delimiter: str = DELIMITER) -> List[str]:
    """Split one line into fields.

    A field starting with a double quote runs to the closing quote, and a
    doubled quote inside it is a literal quote. A blank line gives [].
    """
    if not line:
        return []

    fields: List[str] = []
    i = 0
    n = len(line)
    while i < n:
        if line[i] == QUOTE:
            buf: List[str] = []
            i += 1
            while i < n:
                ch = line[i]
                if ch == QUOTE:
                    if i + 1 < n and line[i + 1] == QUOTE:
                        buf.append(QUOTE)
                        i += 2
                        continue
                    i += 1
                    break
                buf.append(ch)
                i += 1
            # Anything between the closing quote and the next delimiter is kept.
            end = line.find(delimiter, i)
            if end == -1:
                end = n
            buf.append(line[i:end])
            fields.append("".join(buf))
        else:
            end = line.find(delimiter, i)
            if end == -1:
                end = n
            fields.append(line[i:end])
        i = end + 1
        if end == n - 1:
            # Bare trailing delimiter: nothing follows, so no field is added.
            break
    return fields


def parse_rows(path: PathLike, delimiter: str = DELIMITER) -> List[List[str]]:
    """Parse every line of `path` into a row; blank lines become empty rows."""
    return [parse_line(line, delimiter) for line in read_lines(path)]


def lines_ending_in_delimiter(path: PathLike, delimiter: str = DELIMITER) -> List[bool]:
    """Return, per line of `path`, whether the raw text ends with `delimiter`."""
    return [line.endswith(delimiter) for line in read_lines(path)]
