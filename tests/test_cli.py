import io

from loxscan.cli import EX_DATAERR, EX_INTERRUPTED, EX_NOINPUT, EX_USAGE, main


def test_scan_file_prints_tokens(tmp_path, capsys):
    script = tmp_path / "hello.lox"
    script.write_text('print "hi";\n', encoding="utf-8")

    code = main([str(script)])
    out, err = capsys.readouterr()

    assert code == 0
    assert out.splitlines() == ['PRINT print', 'STRING "hi" hi', "SEMICOLON ;", "EOF "]
    assert err == ""


def test_scan_file_with_errors_exits_with_data_error(tmp_path, capsys):
    script = tmp_path / "bad.lox"
    script.write_text("var x = 1;\n@\n", encoding="utf-8")

    code = main([str(script)])
    out, err = capsys.readouterr()

    assert code == EX_DATAERR
    assert "EOF " in out.splitlines()
    assert "[line 2] Error: Unexpected character '@'." in err


def test_missing_file_exits_with_no_input(tmp_path, capsys):
    code = main([str(tmp_path / "missing.lox")])
    _, err = capsys.readouterr()

    assert code == EX_NOINPUT
    assert "cannot read" in err


def test_too_many_arguments_is_usage_error(capsys):
    code = main(["a.lox", "b.lox"])
    _, err = capsys.readouterr()

    assert code == EX_USAGE
    assert "Usage: loxscan [script]" in err


def test_dump_prints_debug_table(tmp_path, capsys):
    script = tmp_path / "n.lox"
    script.write_text("1.5", encoding="utf-8")

    code = main(["--dump", str(script)])
    out, _ = capsys.readouterr()

    assert code == 0
    lines = out.splitlines()
    assert lines[0].startswith("000 NUMBER")
    assert "lexeme='1.5' 1.5" in lines[0]
    assert lines[1].startswith("001 EOF")


def test_prompt_echoes_tokens_and_survives_errors(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 + 2\n@\nnil\n"))

    code = main([])
    out, err = capsys.readouterr()

    assert code == 0
    assert "NUMBER 1 1" in out
    assert "PLUS +" in out
    assert "NIL nil" in out
    assert out.count("> ") == 4
    # one report, from the second line only; each line is scanned from line 1
    assert err.splitlines() == ["[line 1] Error: Unexpected character '@'."]


def test_invalid_utf8_is_reported_not_fatal(tmp_path, capsys):
    script = tmp_path / "latin1.lox"
    script.write_bytes(b"print \xff;")

    code = main([str(script)])
    out, err = capsys.readouterr()

    assert code == EX_DATAERR
    assert out.splitlines() == ["PRINT print", "SEMICOLON ;", "EOF "]
    assert err.splitlines() == ["[line 1] Error: Unexpected character '�'."]


def test_dump_includes_diagnostics(tmp_path, capsys):
    script = tmp_path / "bad.lox"
    script.write_text("x @", encoding="utf-8")

    code = main(["--dump", str(script)])
    out, _ = capsys.readouterr()

    assert code == EX_DATAERR
    assert "Diagnostics:" in out
    assert "- ERROR SCANNER_UNEXPECTED_CHARACTER line=1 range=(2, 3)" in out


class _InterruptedInput:
    def readline(self) -> str:
        raise KeyboardInterrupt


def test_prompt_interrupt_exits_cleanly(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", _InterruptedInput())

    code = main([])
    out, err = capsys.readouterr()

    assert code == EX_INTERRUPTED
    assert out == "> \n"
    assert err == ""
