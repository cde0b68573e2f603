"""Records describing the lines and elements of a parsed EDI document."""

from __future__ import annotations

from dataclasses import dataclass

ELEMENT_DELIMITER = "*"


@dataclass(frozen=True)
class SegmentLine:
    """One segment line of the document, without its terminator."""

    segment_id: str = ""
    contents: str = ""
    sequence: int = 0

    @property
    def segment_id_len(self) -> int:
        """Length of the segment identifier."""
        return len(self.segment_id)

    @property
    def line_length(self) -> int:
        """Length of the whole line."""
        return len(self.contents)

    @property
    def num_elements(self) -> int:
        """Number of fields on the line, the segment identifier included."""
        return self.contents.count(ELEMENT_DELIMITER) + 1


@dataclass(frozen=True)
class ElementData:
    """One data element, addressed by an element id such as ``"BIG02"``."""

    element_num: str = ""
    value: str = ""
    segment_id: str = ""

    @property
    def element_length(self) -> int:
        """Length of the element's value."""
        return len(self.value)

    def __str__(self) -> str:
        return f"{self.element_num}={self.value}"