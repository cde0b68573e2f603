# edi810reader

Reads an ANSI X12 EDI 810 (invoice) transaction and shows it two ways:

* as a human-readable invoice: invoice number and date, purchase order
  number, vendor name, the line item's product ID, quantity, unit of measure
  and unit price, and the invoice total;
* as a machine view: a numbered table of every element in the file, each
  tagged with its element ID (`BIG01`, `N102`, `IT104`, ...) and its value.

Element names and descriptions in the human-readable view come from a
built-in schema of the 810 segments used for heading, detail and summary
data (`BIG`, `CUR`, `N1`, `ITD`, `IT1`, `IT3`, `SAC`, `TDS`).

## Input format

Segments end with `~` and elements within a segment are separated by `*`.
When a file is read, physical line breaks (`\n` or `\r\n`) are dropped, so
segments may sit on separate lines or all on one. Anything after the last
`~` is ignored. An empty element (nothing between two delimiters) is
recorded as `NULL`. Position `00` of each segment is the segment ID itself.

```
ST*810*0001~
BIG*20240115*INV1001**PO42~
N1*VN*EXAMPLE VENDOR*92*000000~
IT1**2*CA*9.6**UK*00000000000000~
TDS*3840~
SE*6*0001~
```

The human-readable view needs the elements `BIG01`, `BIG02`, `BIG04`,
`N102`, `IT102`, `IT103`, `IT104`, `IT107` and `TDS01`. Where an element ID
occurs more than once, the last occurrence is used. The unit price is shown
with two decimals; the total is rounded to the nearest dollar (halves away
from zero).

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
edi810reader [--input FILE] [--output FILE]
```

* `--input` is the invoice to read (default `krogerSampleInvoice810.dat`
  in the current directory).
* `--output` is the file written by menu option 2 (default
  `invoiceOutputFile.dat`); an existing file is overwritten.

If the input file cannot be read, the command reports it, waits for Enter
and tries once more before giving up with exit status 1. Otherwise it
presents a menu:

1. View the human-readable invoice on the console.
2. Write the human-readable invoice to the output file.
3. View the machine-readable element table on the console.
4. Quit.

After each choice it asks whether you want to make another one (`Y`/`N`).
A missing element needed for the human-readable view, or end of input,
ends the program with exit status 1.

## Library use

```python
from edi810reader.parser import load_invoice, parse_invoice
from edi810reader.render import render_invoice, render_element_table, write_invoice

elements = load_invoice("invoice810.dat")
print(render_invoice(elements))
print(render_element_table(elements))
write_invoice(elements, "invoiceOutputFile.dat")
```

Modules:

* `edi810reader.parser`: `read_invoice_text`, `count_delimiters`,
  `split_segment_lines`, `element_id`, `extract_elements`,
  `parse_invoice` and `load_invoice`. A missing or unreadable input file
  raises `InvoiceFileError`. `element_id("IT1", 4)` gives `"IT104"`.
* `edi810reader.document`: the `SegmentLine` and `ElementData` records.
* `edi810reader.render`: `render_invoice`, `render_element_table`,
  `write_invoice`, `parse_number` (leading numeric part of a string, `0.0`
  if none) and `find_element`, which raises `ElementNotFoundError` when an
  element ID is missing.
* `edi810reader.schema`: `DocLocation`, `Required`, `SegmentUsage`,
  `ElementSpec`, the `SEGMENT_USAGES` and `ELEMENT_SPECS` tables, and
  `element_spec(ref, location)`, which returns the schema entry (name,
  type, length limits, description) for an element reference.
* `edi810reader.cli`: `main`, `MenuChoice`, `prompt_menu_choice` and
  `prompt_yes_no`.

## Limitations

* Only one line item is assumed; looping segments (several `IT1` or `N1`
  loops) are not interpreted.
* Elements are not validated against the schema: types, lengths and
  requirement designators are descriptive only.
* The package reads invoices; it does not generate 810 documents.