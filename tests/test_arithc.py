import io

import pytest

from arithc import main


def run(text, argv = None):
    out = io.StringIO()
    main(argv or ["arithc"], stdin = io.StringIO(text), stdout = out)
    return out.getvalue()


def test_prints_rendering_then_value():
    assert run("2+3*4\n") == "(2 + (3 * 4))\n14\n"


def test_dash_reads_standard_input():
    assert run("7/2", ["arithc", "-"]) == "(7 / 2)\n3\n"


def test_reads_named_file(tmp_path):
    src = tmp_path / "expr.txt"
    src.write_text("1 -\n2 - 3\n")
    assert run("", ["arithc", str(src)]) == "((1 - 2) - 3)\n-4\n"


def test_missing_file_is_fatal(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        run("", ["arithc", str(tmp_path / "missing.txt")])
    assert exc.value.code == 1
    assert "cannot read input file" in capsys.readouterr().err


def test_division_by_zero_prints_no_result(capsys):
    out = io.StringIO()
    with pytest.raises(SystemExit) as exc:
        main(["arithc"], stdin = io.StringIO("5/0"), stdout = out)
    assert exc.value.code == 1
    assert out.getvalue() == "(5 / 0)\n"
    err = capsys.readouterr().err
    assert "{eval}" in err
    assert "division by zero" in err


def test_parse_failure_prints_nothing(capsys):
    out = io.StringIO()
    with pytest.raises(SystemExit):
        main(["arithc"], stdin = io.StringIO("3&4"), stdout = out)
    assert out.getvalue() == ""
    assert "unexpected token: ILLEGAL '&'" in capsys.readouterr().err


def test_too_many_arguments_end_the_run(capsys):
    with pytest.raises(SystemExit):
        run("1", ["arithc", "a", "b"])
    err = capsys.readouterr().err
    assert "didnt expect so many args" in err
    assert "error backlog at checkpoint" in err


def test_long_sum_prints_rendering_and_value():
    out = run("+".join(["2"] * 3000))
    rendering, value = out.splitlines()
    assert rendering == "(" * 2999 + "2" + " + 2)" * 2999
    assert value == "6000"


def test_oversized_result_is_fatal(capsys):
    out     = io.StringIO()
    operand = "9" * 3000
    with pytest.raises(SystemExit) as exc:
        main(["arithc"], stdin = io.StringIO(f"{operand}*{operand}"), stdout = out)
    assert exc.value.code == 1
    assert out.getvalue() == f"({operand} * {operand})\n"
    assert "cannot print result" in capsys.readouterr().err
