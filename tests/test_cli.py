import io

import pytest

from parsley import cli


@pytest.fixture
def program(tmp_path):
    path = tmp_path / "prog.scm"
    path.write_text('(define (sq x) (* x x))\n(display "hi ")\n(sq 12)\n', encoding="utf-8")
    return path


def test_runs_a_file(program, capsys):
    assert cli.main([str(program)]) == 0
    assert capsys.readouterr().out == "hi 144\n"


def test_reports_errors_on_stderr(tmp_path, capsys):
    path = tmp_path / "bad.scm"
    path.write_text("(car '())", encoding="utf-8")
    assert cli.main([str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "Expected a pair, got null.\n"


def test_missing_file_is_an_io_error(tmp_path, capsys):
    assert cli.main([str(tmp_path / "missing.scm")]) == 1
    assert capsys.readouterr().err.startswith("I/O error:")


def test_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("(+ 1 2)"))
    assert cli.main(["-s"]) == 0
    assert capsys.readouterr().out == "3\n"


def test_undefined_results_print_nothing(tmp_path, capsys):
    path = tmp_path / "def.scm"
    path.write_text("(define x 1)", encoding="utf-8")
    assert cli.main([str(path)]) == 0
    assert capsys.readouterr().out == ""


def test_repl_session():
    stdin = io.StringIO("(define x 2)\n(* x 21)\n\n.help\n(car 1)\n.exit\n(never evaluated)\n")
    out, err = io.StringIO(), io.StringIO()
    cli.repl(cli.make_context(), stdin, out, err)
    text = out.getvalue()
    assert text.startswith("Parsley")
    assert "> 42\n" in text
    assert ".clear" in text
    assert err.getvalue() == "Expected a list, got 1\n"


def test_repl_clear_leaves_scope():
    ctx = cli.make_context()
    ctx.push()
    ctx.define("inner", 1)
    stdin = io.StringIO(".clear\ninner\n")
    out, err = io.StringIO(), io.StringIO()
    cli.repl(ctx, stdin, out, err)
    assert err.getvalue() == "Undefined symbol: inner\n"
    assert out.getvalue().endswith("> \n")


def test_repl_strings_are_written():
    out, err = io.StringIO(), io.StringIO()
    cli.repl(cli.make_context(), io.StringIO('"hi"\n'), out, err)
    assert '> "hi"\n' in out.getvalue()
