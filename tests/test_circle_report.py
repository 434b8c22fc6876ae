import io
import re

import pytest

from circle_report import (
    RadiusParseError, iter_tokens, read_radius, format_area_line,
    format_circumference_line, report_once, run
)


def _run(text, **kw):
    out, err = io.StringIO(), io.StringIO()
    code = run(stdin=io.StringIO(text), stdout=out, stderr=err, **kw)
    return code, out.getvalue(), err.getvalue()


def test_format_lines():
    assert format_area_line(3.14159) == "Circle's area is 3.14 (sq in)."
    assert format_circumference_line(12.566) == "Its circumference is 12.57 (in)."
    assert format_area_line(0.0) == "Circle's area is 0.00 (sq in)."
    assert format_area_line(1234.5) == "Circle's area is 1234.50 (sq in)."


def test_two_decimals_always():
    for v in [0.0, 0.004, 1.0, 99.999, 1e6, -0.001, -12.566]:
        for line in (format_area_line(v), format_circumference_line(v)):
            m = re.search(r"is (-?\d+\.(\d+)) ", line)
            assert m is not None, line
            assert len(m.group(2)) == 2
    assert format_circumference_line(-0.001) == "Its circumference is -0.00 (in)."


def test_tokens_split_on_any_whitespace():
    tokens = iter_tokens(io.StringIO("  1.5   2\n\n 3e1\n"))
    assert list(tokens) == ["1.5", "2", "3e1"]


def test_read_radius_errors():
    with pytest.raises(RadiusParseError) as exc:
        read_radius(iter(["abc"]))
    assert exc.value.token == "abc"
    assert isinstance(exc.value, ValueError)
    with pytest.raises(EOFError):
        read_radius(iter([]))


def test_report_once_returns_radius():
    out = io.StringIO()
    r = report_once(iter(["2.54"]), out, include_circumference=True)
    assert r == 2.54
    assert out.getvalue().splitlines() == [
        "Enter radius (in cm):",
        "Circle's area is 3.14 (sq in).",
        "Its circumference is 6.28 (in).",
    ]


def test_single_shot():
    code, out, err = _run("2.54\n")
    assert code == 0
    assert err == ""
    assert out == "Enter radius (in cm):\nCircle's area is 3.14 (sq in).\n"


def test_single_shot_reads_only_one_value():
    code, out, _ = _run("2.54 5.08\n")
    assert code == 0
    assert out.count("Enter radius") == 1
    assert "circumference" not in out


def test_single_shot_parse_error():
    code, out, err = _run("ten\n")
    assert code == 1
    assert out == "Enter radius (in cm):\n"
    assert err == "Error: invalid radius 'ten' (expected a number in cm).\n"


def test_single_shot_no_input():
    code, _, err = _run("")
    assert code == 1
    assert err == "Error: no radius supplied.\n"


def test_repeat_until_zero():
    code, out, err = _run("5.08\n2.54\n0\n", include_circumference=True, repeat=True)
    assert code == 0
    assert err == ""
    assert out.splitlines() == [
        "Enter radius (in cm):",
        "Circle's area is 12.57 (sq in).",
        "Its circumference is 12.57 (in).",
        "Enter radius (in cm):",
        "Circle's area is 3.14 (sq in).",
        "Its circumference is 6.28 (in).",
        "Enter radius (in cm):",
    ]


def test_repeat_zero_first_prints_no_result():
    code, out, _ = _run("0\n", include_circumference=True, repeat=True)
    assert code == 0
    assert out == "Enter radius (in cm):\n"


def test_repeat_stops_at_zero_and_ignores_rest():
    code, out, _ = _run("0.0 5.08\n", include_circumference=True, repeat=True)
    assert code == 0
    assert "area" not in out


def test_repeat_end_of_input_is_normal_exit():
    code, out, err = _run("2.54\n", include_circumference=True, repeat=True)
    assert code == 0
    assert err == ""
    assert out.count("Enter radius (in cm):") == 2


def test_repeat_parse_error_stops_loop():
    code, out, err = _run("2.54\nx\n5.08\n", include_circumference=True, repeat=True)
    assert code == 1
    assert out.count("Circle's area") == 1
    assert "invalid radius 'x'" in err


def test_entry_points(monkeypatch, capsys):
    import circle_area
    import circle_area_repeat

    monkeypatch.setattr("sys.stdin", io.StringIO("5.08\n"))
    assert circle_area.main() == 0
    assert capsys.readouterr().out.splitlines()[-1] == "Circle's area is 12.57 (sq in)."

    monkeypatch.setattr("sys.stdin", io.StringIO("5.08\n0\n"))
    assert circle_area_repeat.main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert "Its circumference is 12.57 (in)." in lines


def test_non_literal_tokens_rejected():
    # float() would take these, they are not numeric literals
    for tok in ["2_54", "１", "２.５４", "0x1p3", "1e", "."]:
        code, out, err = _run(tok + "\n")
        assert code == 1, tok
        assert "Circle's area" not in out
        assert err == f"Error: invalid radius {tok!r} (expected a number in cm).\n"


def test_literal_forms_accepted():
    for tok, r_cm in [("+2.54", 2.54), ("254e-2", 2.54), (".5", 0.5), ("5.", 5.0), ("-1", -1.0)]:
        assert read_radius(iter([tok])) == r_cm
    assert read_radius(iter(["INF"])) == float("inf")
    r = read_radius(iter(["nan"]))
    assert r != r


def test_repeat_rejects_underscore_token():
    code, out, err = _run("5.08\n2_54\n", include_circumference=True, repeat=True)
    assert code == 1
    assert out.count("Circle's area") == 1
    assert "invalid radius '2_54'" in err
