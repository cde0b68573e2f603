"""Reading an EDI 810 invoice file and breaking it into segments and elements."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from .document import ELEMENT_DELIMITER, ElementData, SegmentLine

LINE_DELIMITER = "~"
NULL_VALUE = "NULL"
DEFAULT_INPUT_PATH = "krogerSampleInvoice810.dat"


class InvoiceFileError(OSError):
    """Raised when the invoice input file cannot be opened or read."""


def read_invoice_text(path: str | os.PathLike[str] = DEFAULT_INPUT_PATH) -> str:
    """Return the contents of the invoice file with line breaks removed.

    Segments are terminated by ``~``, so physical line breaks (including
    ``\\r\\n``) carry no meaning and are dropped.
    """
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InvoiceFileError(
            f"ERROR. File cannot open. Please check the directory: {path}"
        ) from exc
    return "".join(raw.splitlines())


def count_delimiters(text: str) -> tuple[int, int]:
    """Return ``(element_delimiters, line_delimiters)`` found in ``text``."""
    return text.count(ELEMENT_DELIMITER), text.count(LINE_DELIMITER)


def split_segment_lines(text: str, line_count: int) -> list[SegmentLine]:
    """Split ``text`` into at most ``line_count`` segment lines.

    Anything after the last counted segment terminator is ignored.
    """
    lines = []
    for sequence, contents in enumerate(text.split(LINE_DELIMITER)[:line_count], 1):
        segment_id = contents.split(ELEMENT_DELIMITER, 1)[0]
        lines.append(SegmentLine(segment_id=segment_id, contents=contents, sequence=sequence))
    return lines


def element_id(segment_id: str, position: int) -> str:
    """Build an element id: the segment id followed by a two-digit position."""
    if 0 <= position < 10:
        return f"{segment_id}{position:02d}"
    return f"{segment_id}{position}"


def extract_elements(lines: Iterable[SegmentLine]) -> list[ElementData]:
    """Return every field of every line as an addressed element.

    Position 0 is the segment identifier itself; empty fields get the value
    ``"NULL"``.
    """
    elements = []
    for line in lines:
        tokens = line.contents.split(ELEMENT_DELIMITER)[: line.num_elements]
        for position, token in enumerate(tokens):
            elements.append(
                ElementData(
                    element_num=element_id(line.segment_id, position),
                    value=token or NULL_VALUE,
                    segment_id=line.segment_id,
                )
            )
    return elements


def parse_invoice(text: str) -> list[ElementData]:
    """Parse the text of an invoice into its list of elements."""
    _, line_count = count_delimiters(text)
    return extract_elements(split_segment_lines(text, line_count))


def load_invoice(path: str | os.PathLike[str] = DEFAULT_INPUT_PATH) -> list[ElementData]:
    """Read and parse the invoice file at ``path``."""
    return parse_invoice(read_invoice_text(path))