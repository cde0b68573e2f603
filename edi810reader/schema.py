"""Schema for the EDI 810 invoice implementation convention.

The tables describe which segments an 810 invoice carries and what each
data element inside those segments means.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class DocLocation(Enum):
    """Area of the transaction set a segment belongs to."""

    HEADING = "heading"
    DETAIL = "detail"
    SUMMARY = "summary"


class Required(Enum):
    """Requirement designator of a segment or element."""

    MANDATORY = "M"
    OPTIONAL = "O"
    CONDITIONAL = "C"


@dataclass(frozen=True)
class SegmentUsage:
    """How a segment is used within the transaction set."""

    placement: DocLocation
    segment_id: str
    position: int
    name: str
    requirement: Required
    max_use: int
    repeat_limit: int
    loop_id: str = ""


@dataclass(frozen=True)
class ElementSpec:
    """Definition of one data element within a segment."""

    segment_id: str
    ref: str
    element_number: int
    element_name: str
    requirement: Required
    data_type: str
    min_length: int
    max_length: int
    must_use: bool
    description: str


_H = DocLocation.HEADING
_D = DocLocation.DETAIL
_S = DocLocation.SUMMARY
_M = Required.MANDATORY
_O = Required.OPTIONAL
_C = Required.CONDITIONAL

SEGMENT_USAGES: tuple[SegmentUsage, ...] = (
    SegmentUsage(_H, "ST", 0, "Transaction Set Header", _M, 1, 1, "None"),
    SegmentUsage(_H, "BIG", 200, "Beginning Segment for Invoice", _M, 1, 0, "None"),
    SegmentUsage(_H, "CUR", 400, "Currency", _O, 1, 0),
    SegmentUsage(_H, "N1", 700, "Party Identification", _O, 1, 200, "N1"),
    SegmentUsage(_H, "N1", 700, "Party Identification", _O, 1, 200, "N1"),
    SegmentUsage(
        _H, "ITD", 1300, "Terms of Sale/Deferred Terms of Sale", _O, 999, 0, "None"
    ),
    SegmentUsage(_D, "IT1", 100, "Baseline Item Data (Invoice)", _O, 1, 0, "IT1"),
    SegmentUsage(_D, "IT3", 300, "Additional Item Data", _O, 5, 0, "IT1"),
    SegmentUsage(
        _D,
        "SAC",
        1800,
        "Service, Promotion, Allowance, or Charge Information",
        _O,
        1,
        0,
        "SAC",
    ),
    SegmentUsage(_S, "TDS", 100, "Total Monetary Value Summary", _M, 1, 0, "None"),
    SegmentUsage(
        _S,
        "SAC",
        400,
        "Service, Promotion, Allowance, or Charge Information",
        _O,
        1,
        0,
        "SAC",
    ),
    SegmentUsage(_S, "SE", 0, "Ending Segment", _M, 1, 1, "None"),
)

_SAC02_DESCRIPTION = (
    "Code identifying the service, promotion, allowance, or charge. Refer to the "
    "implementation convention for a list of valid allowance/charge codes at the "
    "invoice and item level."
)

_HEADING_SPECS = (
    ElementSpec("BIG", "BIG01", 373, "Invoice Issue Date", _M, "DT", 8, 8, True,
                "Date expressed as CCYYMMDD where CC represents the first two digits "
                "of the calendar year. Note: Invoice issue date cannot be in the future."),
    ElementSpec("BIG", "BIG02", 76, "Invoice Number", _M, "AN", 1, 22, True,
                "Identifying number assigned by issuer."),
    ElementSpec("BIG", "BIG03", 373, "PO Issue Date", _O, "DT", 8, 8, False,
                "Date expressed as CCYYMMDD where CC represents the first two digits "
                "of the calendar year."),
    ElementSpec("BIG", "BIG04", 324, "Purchase Order Number", _O, "AN", 1, 22, False,
                "Identifying number for Purchase Order assigned by the orderer/purchaser."),
    ElementSpec("CUR", "CUR01", 98, "Entity Identifier Code", _M, "ID", 2, 3, True,
                "Code identifying an organizational entity, a physical location, "
                "property or an individual."),
    ElementSpec("CUR", "CUR02", 100, "Currency Code", _M, "ID", 3, 3, False,
                "Code (Standard ISO) for country in whose currency the charges are "
                "specified. Only required if not US Dollars."),
    ElementSpec("N1", "N101", 98, "Entity Identifier Code", _M, "ID", 2, 3, True,
                "Code identifying an organizational entity, a physical location, "
                "property, or an individual."),
    ElementSpec("N1", "N102", 93, "Name", _O, "AN", 1, 60, False, "Free-form name."),
    ElementSpec("N1", "N103", 66, "Identification Code Qualifier", _C, "ID", 1, 2, False,
                "Code designating the system/method of code structure used for "
                "Identification Code (67)."),
    ElementSpec("N1", "N104", 67, "Identification Code", _C, "AN", 2, 80, False,
                "Differing infromation for Ship To vs Supplier ID for this field. "
                "See the implementation convention."),
    ElementSpec("ITD", "ITD03", 338, "Terms Discount Percent", _O, "R", 1, 6, False,
                "Terms discount percentage, expressed as a percent, available to the "
                "purchaser if an invoice is paid on or before the Terms Discount Due Date. "),
    ElementSpec("ITD", "ITD05", 351, "Terms Discount Days Due", _C, "N0", 1, 3, False,
                "Number of days in the terms discount period by which payment discount "
                "is earned."),
    ElementSpec("ITD", "ITD06", 446, "Terms Net Due Date", _O, "DT", 8, 8, False,
                "Date when total invoice amount becomes due expressed in CCYYMMDD where "
                "CC represents the first two digits of the calendar year."),
    ElementSpec("ITD", "ITD07", 386, "Terms Net Days", _O, "N0", 1, 3, False,
                "Number of days until total invoice amount is due (discount not applicable)."),
    ElementSpec("ITD", "ITD08", 362, "Terms Discount Amount", _O, "N2", 1, 10, False,
                "Total amount of terms discount."),
)

_DETAIL_SPECS = (
    ElementSpec("IT1", "IT102", 358, "Quantity Invoiced", _C, "R", 1, 15, False,
                "Number of units invoiced (supplier units)."),
    ElementSpec("IT1", "IT103", 355, "Unit or Basis for Measurement Code", _C, "ID", 2, 2,
                False,
                "Code specifying the units in which a value is being expressed, or manner "
                "in which a measurement has been taken."),
    ElementSpec("IT1", "IT104", 212, "Unit Price", _C, "R", 1, 17, False,
                "Price per unit of product, service, commodity, etc."),
    ElementSpec("IT1", "IT106", 235, "Product/Service ID Qualifier", _C, "ID", 2, 2, False,
                "Code identifying the type/source of the descriptive number used in "
                "Product/Service ID (234). Note: must send at least 1 of the item formats "
                "from the purchase order."),
    ElementSpec("IT1", "IT107", 234, "Product/Service ID", _C, "AN", 2, 2, False,
                "Identifying number for a product or service."),
    ElementSpec("IT1", "IT108", 235, "Product/Service ID Qualifier", _C, "ID", 2, 2, False,
                "Code identifying the type/source of the descriptive number used in "
                "product/service ID (234). Note: only send 1 reference item format (UK/UP)."),
    ElementSpec("IT1", "IT109", 234, "Product/Service ID", _C, "AN", 1, 48, False,
                "Identifying number for a product or service."),
    ElementSpec("IT3", "IT301", 382, "Number of Units Shipped", _C, "R", 1, 10, False,
                "Numeric value of units shipped in manufacturer's shipping units for a "
                "line item or transaction set. Note: send if unit of measure code differs "
                "from IT103 as in Random Weight Items (LB)."),
    ElementSpec("IT3", "IT302", 355, "Unit or Basis for Measurement Code", _C, "ID", 2, 2,
                False,
                "Code specifying the units in which a value is being expressed, or manner "
                "in which a measurement has been taken. Note: CA = CASE. IT301 should "
                "contain number of cases & IT302 = CA. There's more in implementation "
                "convention to read..."),
    ElementSpec("SAC", "SAC01", 248, "Allowance or Charge Indicator", _M, "ID", 1, 1, True,
                "Code which indicates an allowance or charge for the service specified."),
    ElementSpec("SAC", "SAC02", 1300, "Service, Promotion, Allowance, or Charge Code", _C,
                "ID", 4, 4, False, _SAC02_DESCRIPTION),
    ElementSpec("SAC", "SAC08", 118, "Rate", _O, "R", 1, 9, False,
                "Rate expressed in the standard monetary denomination for the currency "
                "specified. Note: The rate is based on the same UOM (IT103) as the previous "
                "item/ IT1 segment. You must provide the decimal on the rate. Allowance "
                "rates must be negative; charge rates must be positive."),
)

_SUMMARY_SPECS = (
    ElementSpec("TDS", "TDS01", 610, "Amount", _M, "N2", 1, 15, True,
                "Monetary amount. Note: the total invoice amount (item quantities times "
                "cost, adjusted with any item allowance/charge; totaled for all items; "
                "adjusted with any invoice allowance/charge."),
    ElementSpec("SAC", "SAC01", 248, "Allowance or Charge Indicator", _M, "ID", 1, 1, True,
                "Code which indicates an allowance or charge for the service specified."),
    ElementSpec("SAC", "SAC02", 1300, "Service, Promotion, Allowance, or Charge Code", _C,
                "ID", 4, 4, False, _SAC02_DESCRIPTION),
    ElementSpec("SAC", "SAC05", 610, "Amount", _O, "N2", 1, 15, False,
                "Monetary amount, 2 decimals are implied on the amount. Allowance amounts "
                "must be negative; charge amounts must be positive. Note: this SAC segment "
                "is for invoice level allowance/charge. Must combine if more than 1."),
)

ELEMENT_SPECS: Mapping[DocLocation, Mapping[str, ElementSpec]] = MappingProxyType(
    {
        location: MappingProxyType({spec.ref: spec for spec in specs})
        for location, specs in (
            (DocLocation.HEADING, _HEADING_SPECS),
            (DocLocation.DETAIL, _DETAIL_SPECS),
            (DocLocation.SUMMARY, _SUMMARY_SPECS),
        )
    }
)


def element_spec(ref: str, location: DocLocation | None = None) -> ElementSpec:
    """Return the definition of element ``ref`` such as ``"BIG02"``.

    Without a location the reference must be defined in exactly one area;
    raises KeyError when it is unknown and LookupError when it is ambiguous.
    """
    if location is not None:
        try:
            return ELEMENT_SPECS[location][ref]
        except KeyError:
            raise KeyError(f"no element {ref!r} in the {location.value} area") from None
    matches = [specs[ref] for specs in ELEMENT_SPECS.values() if ref in specs]
    if not matches:
        raise KeyError(f"no element {ref!r} in the schema")
    if len(matches) > 1:
        raise LookupError(f"element {ref!r} is defined in several areas; give a location")
    return matches[0]