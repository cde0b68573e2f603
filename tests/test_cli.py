import io
import sys

import pytest

from edi810reader.cli import MenuChoice, main, prompt_menu_choice, prompt_yes_no
from edi810reader.parser import parse_invoice
from edi810reader.render import render_invoice

SAMPLE = (
    "ST*810*0001~\n"
    "BIG*20210520*5615789**9~\n"
    "N1*VN*VENDOR NAME*92*123456~\n"
    "IT1*ST*SAMPLE STORE*9*0000000000001~\n"
    "IT1**2*CA*9.6**UK*00000000000002~\n"
    "TDS*3840~\n"
    "SE*8*0001~\n"
)


def _reader(*answers):
    pending = list(answers)

    def read():
        if not pending:
            raise EOFError
        return pending.pop(0)

    return read


@pytest.fixture
def invoice_file(tmp_path):
    path = tmp_path / "invoice.dat"
    path.write_text(SAMPLE)
    return path


def _run(monkeypatch, argv, stdin_text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(stdin_text))
    return main(argv)


def test_prompt_menu_choice_retries_until_valid():
    out = []
    choice = prompt_menu_choice(_reader("7", "x", "3"), out.append)
    assert choice is MenuChoice.VIEW_MACHINE_INVOICE
    assert sum("Invalid input" in text for text in out) == 2
    assert out[0].endswith("Selection: ")


def test_prompt_menu_choice_accepts_each_entry():
    for member in MenuChoice:
        assert prompt_menu_choice(_reader(str(member.value)), lambda _: None) is member


def test_prompt_yes_no():
    out = []
    assert prompt_yes_no(_reader("maybe", "n"), out.append) is False
    assert any('"Y" or "N"' in text for text in out)
    assert prompt_yes_no(_reader("y"), lambda _: None) is True


def test_prompt_yes_no_eof():
    with pytest.raises(EOFError):
        prompt_yes_no(_reader(), lambda _: None)


def test_main_missing_file(monkeypatch, capsys, tmp_path):
    status = _run(monkeypatch, ["--input", str(tmp_path / "absent.dat")], "\n")
    out = capsys.readouterr().out
    assert status == 1
    assert "ERROR. File cannot open" in out
    assert "re-run the program" in out


def test_main_table_then_quit(monkeypatch, capsys, invoice_file):
    status = _run(monkeypatch, ["--input", str(invoice_file)], "3\nY\n4\n")
    out = capsys.readouterr().out
    assert status == 0
    assert "BIG02" in out
    assert "Program terminating..." in out


def test_main_console_then_stop(monkeypatch, capsys, invoice_file):
    status = _run(monkeypatch, ["--input", str(invoice_file)], "1\nN\n")
    out = capsys.readouterr().out
    assert status == 0
    assert render_invoice(parse_invoice(SAMPLE.replace("\n", ""))) in out


def test_main_writes_output_file(monkeypatch, capsys, invoice_file, tmp_path):
    target = tmp_path / "rendered.dat"
    argv = ["--input", str(invoice_file), "--output", str(target)]
    status = _run(monkeypatch, argv, "2\nN\n")
    out = capsys.readouterr().out
    assert status == 0
    assert "File output complete" in out
    expected = render_invoice(parse_invoice(SAMPLE.replace("\n", "")))
    assert target.read_text(encoding="utf-8") == expected


def test_main_end_of_input(monkeypatch, invoice_file):
    assert _run(monkeypatch, ["--input", str(invoice_file)], "") == 1