import pytest

from automaton_dot.cli import Args, AutomatonType, main, parse_args


@pytest.mark.parametrize(
    "kind, expected",
    [
        ("mealy", AutomatonType.MEALY),
        ("moore", AutomatonType.MOORE),
        ("finite", AutomatonType.FINITE),
    ],
)
def test_parse_args_accepts_each_type(kind, expected):
    assert parse_args([kind, "in.csv", "out.dot"]) == Args(expected, "in.csv", "out.dot")


@pytest.mark.parametrize("argv", [[], ["mealy"], ["mealy", "in.csv"], ["mealy", "a", "b", "c"]])
def test_parse_args_wrong_count(argv):
    with pytest.raises(ValueError, match="usage"):
        parse_args(argv)


def test_parse_args_invalid_type():
    with pytest.raises(ValueError, match="invalid automaton type"):
        parse_args(["turing", "in.csv", "out.dot"])


def test_main_draws_mealy(tmp_path):
    source = tmp_path / "in.csv"
    source.write_text(";a;b\nx;b/1;a/0\n", encoding="utf-8")
    target = tmp_path / "out.dot"
    assert main(["mealy", str(source), str(target)]) == 0
    text = target.read_text(encoding="utf-8")
    assert text.startswith("digraph G {\n")
    assert '0->1 [label="x/1"];' in text


def test_main_draws_finite(tmp_path):
    source = tmp_path / "in.csv"
    source.write_text(";F;\n;q0;q1\nx;q1;-\n", encoding="utf-8")
    target = tmp_path / "out.dot"
    assert main(["finite", str(source), str(target)]) == 0
    assert '0 [label="q0 (F)"];' in target.read_text(encoding="utf-8")


def test_main_bad_arguments_reports_usage(capsys):
    assert main(["mealy"]) == 1
    assert "usage" in capsys.readouterr().err


def test_main_invalid_type_reports_error(capsys):
    assert main(["turing", "in.csv", "out.dot"]) == 1
    assert "invalid automaton type" in capsys.readouterr().err


def test_main_missing_input_fails(tmp_path, capsys):
    assert main(["moore", str(tmp_path / "absent.csv"), str(tmp_path / "out.dot")]) == 1
    assert capsys.readouterr().err.strip()
    assert not (tmp_path / "out.dot").exists()