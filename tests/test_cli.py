import io

from ll1_recognizer.__main__ import main


def test_cli_accepts_arguments(capsys):
    assert main(["a", "b", "a", "."]) == 0
    out, err = capsys.readouterr()
    assert out.strip() == "Correct sentence."
    assert err == ""


def test_cli_reports_syntax_error_on_stderr(capsys):
    assert main(["a", "b", "c", "."]) == 1
    out, err = capsys.readouterr()
    assert out == ""
    assert err.strip() == "Syntax error: 'a', 'b' or '.' expected."


def test_cli_reads_stdin(monkeypatch, capsys):
    # trailing newline after the terminator is never read
    monkeypatch.setattr("sys.stdin", io.StringIO("a  b .\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.strip() == "Correct sentence."


def test_cli_unterminated_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("a b a"))
    assert main([]) == 1
    assert "'a', 'b' or '.' expected." in capsys.readouterr().err
