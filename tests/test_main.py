"""Tests for the HTML export command."""

from crashviz.main import main, parse_args


def test_parse_args_defaults():
    args = parse_args(["--year", "1985"])
    assert args.year == 1985
    assert args.operator == ""
    assert args.chart == "bar"


def test_main_writes_html(crash_csv, tmp_path):
    out = tmp_path / "charts" / "crashes.html"

    code = main(
        ["--source", str(crash_csv), "--year", "1985", "--chart", "pie", "--out", str(out)]
    )

    assert code == 0
    html = out.read_text(encoding="utf-8")
    assert "Aeroflot" in html
    assert "Airplane Crashes by Operator and Count" in html


def test_main_without_year_fails(crash_csv, tmp_path):
    out = tmp_path / "crashes.html"
    assert main(["--source", str(crash_csv), "--out", str(out)]) == 1
    assert not out.exists()
