"""Typer CLI against an isolated database."""
import pytest
from typer.testing import CliRunner

from paytrack.cli import app

runner = CliRunner()


@pytest.fixture
def cli(use_test_engine):
    def invoke(*args):
        return runner.invoke(app, list(args))
    return invoke


def test_entry_set_and_show(cli):
    result = cli("entry", "set", "2024-03-05", "--work", "8", "--ot", "2", "--extra", "50")
    assert result.exit_code == 0, result.output
    assert "฿1,150.00" in result.output

    result = cli("entry", "show", "2024-03-05")
    assert result.exit_code == 0
    assert "work 8.0h, OT 2.0h, extra 50.00" in result.output


def test_show_missing_entry_fails(cli):
    result = cli("entry", "show", "2024-03-05")
    assert result.exit_code == 1
    assert "No entry for 2024-03-05" in result.output


def test_bad_date_fails(cli):
    result = cli("entry", "set", "2024-13-01", "--work", "8")
    assert result.exit_code == 1
    assert "❌" in result.output


def test_entry_delete_clears_day(cli):
    cli("entry", "set", "2024-03-05", "--work", "8")
    result = cli("entry", "delete", "2024-03-05")
    assert result.exit_code == 0
    assert "฿0.00" in result.output


def test_rates_set_reprices_month(cli):
    cli("entry", "set", "2024-03-05", "--work", "8", "--ot", "2", "--extra", "50")
    assert cli("rates", "set", "120", "180").exit_code == 0

    shown = cli("rates", "show")
    assert "Hourly rate: 120" in shown.output
    assert "OT rate:     180" in shown.output

    month = cli("month", "show", "2024", "3")
    assert month.exit_code == 0
    assert "1,370.00" in month.output
    assert "March 2024" in month.output


def test_month_show_marks_flagged_days(cli):
    cli("entry", "set", "2024-03-05", "--work", "8", "--remark", "night shift")
    output = cli("month", "show", "2024", "3").output
    flagged = [line for line in output.splitlines() if line.endswith(" *")]
    assert len(flagged) == 1
    assert flagged[0].startswith("05/03")


def test_month_show_rejects_bad_month(cli):
    assert cli("month", "show", "2024", "13").exit_code == 1


def test_export_writes_png(cli, tmp_path):
    pytest.importorskip("PIL")
    cli("entry", "set", "2024-03-05", "--work", "8")
    result = cli("export", "2024", "3", "--out", str(tmp_path))
    assert result.exit_code == 0, result.output
    target = tmp_path / "Payroll_Statement_March_2024.png"
    assert target.read_bytes().startswith(b"\x89PNG")
