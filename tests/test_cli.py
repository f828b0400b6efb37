from qrtiny.bits import BitBuffer
from qrtiny.cli import DEFAULT_FORMAT, DEFAULT_TEXT, main, render
from qrtiny.segments import write_alphanumeric
from qrtiny.symbol import DIMENSION, generate


def _code(text):
    buffer = BitBuffer()
    write_alphanumeric(buffer, text)
    return generate(buffer, DEFAULT_FORMAT)


def test_render_shape():
    lines = render(_code("HELLO")).splitlines()
    assert len(lines) == DIMENSION
    assert all(len(line) == DIMENSION for line in lines)
    assert set("".join(lines)) <= {"\u2588", " "}


def test_render_finder_row():
    first = render(_code("HELLO")).splitlines()[0]
    assert first.startswith("\u2588" * 7 + " ")
    assert first.endswith(" " + "\u2588" * 7)


def test_main_prints_code(capsys):
    assert main(["HELLO"]) == 0
    out = capsys.readouterr().out
    assert out == "Calculating...\n\n" + render(_code("HELLO"))


def test_main_joins_arguments(capsys):
    assert main(["HELLO", "WORLD"]) == 0
    out = capsys.readouterr().out
    assert out.endswith(render(_code("HELLO WORLD")))


def test_main_default_text(capsys, monkeypatch):
    monkeypatch.setattr("sys.argv", ["qrtiny"])
    assert main() == 0
    out = capsys.readouterr().out
    assert out.endswith(render(_code(DEFAULT_TEXT)))


def test_main_too_long(capsys):
    assert main(["A" * 27]) == 1
    captured = capsys.readouterr()
    assert captured.out == "Calculating...\n\n"
    assert "qrtiny:" in captured.err


def test_main_invalid_character(capsys):
    assert main(["hi!"]) == 1
    assert "alphanumeric" in capsys.readouterr().err