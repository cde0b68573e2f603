"""Turning parsed invoice elements into text for people and tables for machines."""

from __future__ import annotations

import math
import os
import re
from collections.abc import Sequence
from pathlib import Path

from .document import ElementData
from .schema import DocLocation, element_spec

DEFAULT_OUTPUT_PATH = "invoiceOutputFile.dat"

_TITLE_RULE = "~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~"
_SECTION_RULE = "_________________________________"
_TABLE_RULE = "----------------------------------------------------------------------------"

_NUMBER_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


class ElementNotFoundError(LookupError):
    """Raised when an element id does not occur in the parsed invoice."""

    def __init__(self, element_id: str) -> None:
        super().__init__(f"Error! Element {element_id!r} not found in the invoice.")
        self.element_id = element_id


def find_element(elements: Sequence[ElementData], element_id: str) -> ElementData:
    """Return the last element whose id is ``element_id``."""
    for element in reversed(elements):
        if element.element_num == element_id:
            return element
    raise ElementNotFoundError(element_id)


def parse_number(text: str) -> float:
    """Convert the leading numeric part of ``text`` to a float, or 0.0 if none."""
    match = _NUMBER_PREFIX.match(text)
    if match is None:
        return 0.0
    return float(match.group(1))


def _round_half_away(value: float) -> float:
    if not math.isfinite(value):
        return value
    return math.copysign(math.floor(abs(value) + 0.5), value)


def render_invoice(elements: Sequence[ElementData]) -> str:
    """Return a human-readable rendering of the invoice's key fields."""

    def value(element_id: str) -> str:
        return find_element(elements, element_id).value

    big01 = element_spec("BIG01", DocLocation.HEADING)
    big02 = element_spec("BIG02", DocLocation.HEADING)
    big04 = element_spec("BIG04", DocLocation.HEADING)
    n102 = element_spec("N102", DocLocation.HEADING)
    it102 = element_spec("IT102", DocLocation.DETAIL)
    it103 = element_spec("IT103", DocLocation.DETAIL)
    it104 = element_spec("IT104", DocLocation.DETAIL)
    it107 = element_spec("IT107", DocLocation.DETAIL)
    tds01 = element_spec("TDS01", DocLocation.SUMMARY)

    unit_price = parse_number(value("IT104"))
    total = _round_half_away(parse_number(value("TDS01")))

    parts = [
        "Human-Readable Invoice\n",
        f"{_TITLE_RULE}\n\n",
        "TOP-LEVEL\n",
        f"{_SECTION_RULE}\n\n",
        f"{big02.element_name}: {value('BIG02')}\n",
        f"{big01.element_name}: {value('BIG01')}\n",
        f"{big04.element_name} ({big04.description}): {value('BIG04')}\n",
        f"Vendor {n102.element_name}: {value('N102')}\n\n",
        "\nLINE ITEM DETAIL:*\n",
        f"{_SECTION_RULE}\n\n",
        f"{it107.element_name}: {value('IT107')}\n",
        f"{it102.element_name}: {value('IT102')}\n",
        f"{it103.element_name}: {value('IT103')}\n",
        f"{it104.element_name}**: ${unit_price:.2f}\n",
        "\nSUMMARY:\n",
        f"{_SECTION_RULE}\n\n",
        f"{tds01.element_name}***^: ${total:.2f}\n",
        "\n\nNOTES:\n",
        f"{_SECTION_RULE}\n",
        "\n*Only one line item is assumed on the invoice; segment loops are not handled.",
        "\n\n**When more than two decimal places are used, they are not formatted for "
        "display here even though they are still carried behind the scenes.",
        f"\n\n***{tds01.description}\n",
        "\n\n^Amount listed here is rounded to the nearest dollar.\n",
    ]
    return "".join(parts)


def render_element_table(elements: Sequence[ElementData]) -> str:
    """Return every element as a numbered table of element ids and values."""
    rows = [f"#{'Element ID':>20}{'Value':>30}", _TABLE_RULE]
    rows.extend(
        f"{index}{element.element_num:>20}{element.value:>30}"
        for index, element in enumerate(elements)
    )
    return "\n".join(rows) + "\n"


def write_invoice(
    elements: Sequence[ElementData],
    path: str | os.PathLike[str] = DEFAULT_OUTPUT_PATH,
) -> Path:
    """Write the human-readable invoice to ``path``, replacing any existing file."""
    target = Path(path)
    target.write_bytes(render_invoice(elements).encode("utf-8"))
    return target