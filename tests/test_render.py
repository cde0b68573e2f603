import pytest

from edi810reader.document import ElementData
from edi810reader.parser import parse_invoice
from edi810reader.render import (
    ElementNotFoundError,
    find_element,
    parse_number,
    render_element_table,
    render_invoice,
    write_invoice,
)
from edi810reader.schema import DocLocation, element_spec

SAMPLE = (
    "ST*810*0001~"
    "BIG*20210520*5615789**9~"
    "N1*VN*VENDOR NAME*92*123456~"
    "IT1*ST*SAMPLE STORE*9*0000000000001~"
    "IT1**2*CA*9.6**UK*00000000000002~"
    "TDS*3840~"
    "SE*8*0001~"
)


@pytest.fixture
def elements():
    return parse_invoice(SAMPLE)


def test_find_element_returns_last_match(elements):
    assert find_element(elements, "IT102").value == "2"
    assert find_element(elements, "IT107").value == "00000000000002"


def test_find_element_missing_raises(elements):
    with pytest.raises(ElementNotFoundError) as info:
        find_element(elements, "CUR01")
    assert info.value.element_id == "CUR01"


def test_find_element_empty_sequence():
    with pytest.raises(LookupError):
        find_element([], "BIG01")


@pytest.mark.parametrize(
    "text, expected",
    [("9.6", 9.6), ("3840", 3840.0), ("12abc", 12.0), ("abc", 0.0), ("", 0.0)],
)
def test_parse_number(text, expected):
    assert parse_number(text) == expected


def test_parse_number_keeps_sign_and_exponent():
    assert parse_number("  -2.5e1x") == -25.0


def test_render_invoice_contains_values(elements):
    text = render_invoice(elements)
    assert text.startswith("Human-Readable Invoice\n")
    big02 = element_spec("BIG02", DocLocation.HEADING)
    assert f"{big02.element_name}: 5615789\n" in text
    assert "Vendor Name: VENDOR NAME\n" in text
    assert "Unit Price**: $9.60\n" in text
    assert "Amount***^: $3840.00\n" in text


def test_render_invoice_includes_schema_description(elements):
    text = render_invoice(elements)
    tds01 = element_spec("TDS01", DocLocation.SUMMARY)
    assert f"***{tds01.description}\n" in text


def test_render_invoice_rounds_half_away_from_zero():
    text = render_invoice(parse_invoice(SAMPLE.replace("TDS*3840~", "TDS*2.5~")))
    assert "Amount***^: $3.00\n" in text


def test_render_invoice_missing_element_raises():
    with pytest.raises(ElementNotFoundError):
        render_invoice(parse_invoice("ST*810*0001~TDS*1~SE*3*0001~"))


def test_render_element_table_shape(elements):
    lines = render_element_table(elements).splitlines()
    assert len(lines) == len(elements) + 2
    assert lines[0].startswith("#") and lines[0].endswith("Value")
    for index, (line, element) in enumerate(zip(lines[2:], elements)):
        assert line.startswith(str(index))
        assert line.endswith(element.value)
        assert element.element_num in line


def test_render_element_table_alignment():
    table = render_element_table([ElementData("ST01", "810", "ST")])
    row = table.splitlines()[2]
    assert row == "0" + "ST01".rjust(20) + "810".rjust(30)


def test_write_invoice_overwrites(tmp_path, elements):
    target = tmp_path / "out.dat"
    target.write_text("old contents")
    result = write_invoice(elements, target)
    assert result == target
    assert target.read_bytes().decode("utf-8") == render_invoice(elements)