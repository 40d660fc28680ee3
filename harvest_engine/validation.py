"""Structural validation of uploaded CSV files against a template.

An upload passes when:
- its first line (the header) is identical to the template's first line, and
- every later non-blank line has as many fields as the template header.

Validation returns None on success and a human-readable message otherwise.
Messages are shown to users verbatim, so each one carries the row/column and
the expected vs. found values.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .rows import lines_ending_in_delimiter, parse_rows
from .utils import PathLike

logger = logging.getLogger(__name__)


NO_DATA_MESSAGE = "No data in file"
NO_TEMPLATE_HEADER_MESSAGE = "Template file has no header row"
HEADER_MISMATCH_MESSAGE = "File header does not match template"


def validate_header(template_header: Sequence[str], header: Sequence[str]) -> Optional[str]:
    """Compare an upload's header row with the template's header row.

    Args:
        template_header: Parsed first line of the template file.
        header: Parsed first line of the uploaded file.

    Returns:
        None if the two match exactly, otherwise a message describing the first
        difference. A column-count difference lists both headers in full.
    """
    if len(header) != len(template_header):
        return (
            f"{HEADER_MISMATCH_MESSAGE}: "
            f"file header items = [{', '.join(header)}], "
            f"template items = [{', '.join(template_header)}]"
        )

    for col, (found, expected) in enumerate(zip(header, template_header), start=1):
        if found != expected:
            return (
                f"{HEADER_MISMATCH_MESSAGE}: "
                f"file header column {col} = {found}, template column {col} = {expected}"
            )
    return None


def _check_rows(template_header: List[str], rows: List[List[str]], ends_in_delimiter: List[bool]) -> Optional[str]:
    if not rows:
        return NO_DATA_MESSAGE

    expected = len(template_header)
    for i, row in enumerate(rows):
        if i == 0:
            message = validate_header(template_header, row)
            if message is not None:
                return message
        elif row:
            # The parser drops the empty field after a bare trailing delimiter.
            found = len(row) + (1 if ends_in_delimiter[i] else 0)
            if found != expected:
                return f"Mismatch in number of entries in row {i}: expected {expected}, found {found}"
    return None


def validate_upload(
    candidate_path: PathLike,
    template_path: PathLike,
    log: Optional[logging.Logger] = None,
) -> Optional[str]:
    """Validate an uploaded CSV file against a CSV template.

    Read failures are logged and their message is returned as-is, so the
    caller shows the same text it would get for a structural mismatch.
    """
    log = log or logger
    try:
        template_rows = parse_rows(template_path)
        rows = parse_rows(candidate_path)
        ends_in_delimiter = lines_ending_in_delimiter(candidate_path)
    except (OSError, UnicodeDecodeError) as exc:
        log.exception("Could not read CSV for validation: %s", exc)
        return str(exc)

    if not template_rows:
        log.error("Template %s is empty", template_path)
        return NO_TEMPLATE_HEADER_MESSAGE

    message = _check_rows(template_rows[0], rows, ends_in_delimiter)
    if message is None:
        log.debug("Upload %s matches template %s (%d rows)", candidate_path, template_path, len(rows))
    else:
        log.info("Upload %s rejected: %s", candidate_path, message)
    return message
