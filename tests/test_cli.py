import io
import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.append(str(SRC))

from pseudomath.lex_cli import main  # noqa: E402


def test_table_output(tmp_path, capsys):
    src = tmp_path / "prog.pmath"
    src.write_text("function f(x)\n  return x", encoding="utf-8")
    assert main([str(src)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "KEYWORD\t'function'\t(line 1)"
    assert "INDENT\t0.5\t(line 2)" in lines
    assert lines[-1] == "DEDENT\t0\t(line 2)"


def test_json_output(tmp_path, capsys):
    src = tmp_path / "prog.pmath"
    src.write_text("a => 12", encoding="utf-8")
    assert main([str(src), "--format", "json"]) == 0
    records = json.loads(capsys.readouterr().out)
    assert records == [
        {"type": "IDENTIFIER", "value": "a"},
        {"type": "ARROW", "value": "=>"},
        {"type": "INTEGER", "value": 12},
    ]


def test_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("x <= y"))
    assert main(["-"]) == 0
    out = capsys.readouterr().out
    assert "COMPARISON\t'<='" in out


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.pmath")]) == 1
    err = capsys.readouterr().err
    assert "[pseudomath-lex:error] file not found" in err


def test_lexer_error_reported(tmp_path, capsys):
    src = tmp_path / "bad.pmath"
    src.write_text('x\nprint "oops', encoding="utf-8")
    assert main([str(src)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Unterminated string literal (line 2)" in captured.err


def test_verbose_steps_go_to_stderr(tmp_path, capsys):
    src = tmp_path / "prog.pmath"
    src.write_text("a", encoding="utf-8")
    assert main([str(src), "--verbose"]) == 0
    captured = capsys.readouterr()
    assert "[pseudomath-lex] lexing..." in captured.err
    assert "[pseudomath-lex] 1 tokens..." in captured.err
    assert captured.out.strip() == "IDENTIFIER\t'a'\t(line 1)"


def test_invalid_utf8_reported(tmp_path, capsys):
    src = tmp_path / "latin.pmath"
    src.write_bytes(b"x = \xff\xfe")
    assert main([str(src)]) == 1
    err = capsys.readouterr().err
    assert "[pseudomath-lex:error] not valid UTF-8" in err


def test_directory_path_reported(tmp_path, capsys):
    assert main([str(tmp_path)]) == 1
    err = capsys.readouterr().err
    assert "[pseudomath-lex:error] cannot read" in err
