import json
from datetime import date
from types import SimpleNamespace

import httpx
import pytest

from paytrack.api.schemas.entries import EntrySubmit
from paytrack.config import settings
from paytrack.domain.calendar import MonthRef
from paytrack.ui import state
from paytrack.ui.api_client import APIError, PaytrackClient
from paytrack.ui.validation import run_all_checks, validate_api_url, validate_backend_connection


@pytest.fixture
def session(monkeypatch):
    fake_st = SimpleNamespace(session_state={})
    monkeypatch.setattr(state, "st", fake_st)
    return fake_st.session_state


def test_init_session_starts_on_current_month(session):
    state.init_session(date(2024, 3, 15))
    assert state.get_view() == MonthRef(2024, 3)
    assert state.get_selected_date() is None


def test_init_session_keeps_existing_view(session):
    session.update(view_year=2023, view_month=7)
    state.init_session(date(2024, 3, 15))
    assert state.get_view() == MonthRef(2023, 7)


def test_step_view_rolls_year(session):
    state.init_session(date(2024, 12, 1))
    assert state.step_view(1) == MonthRef(2025, 1)
    assert state.step_view(-1) == MonthRef(2024, 12)
    state.set_view(MonthRef(2024, 1))
    assert state.step_view(-1) == MonthRef(2023, 12)


def test_changing_month_closes_entry_form(session):
    state.init_session(date(2024, 3, 15))
    state.select_date("2024-03-05")
    assert state.get_selected_date() == "2024-03-05"
    state.step_view(1)
    assert state.get_selected_date() is None


def _client(handler) -> PaytrackClient:
    return PaytrackClient(base_url="http://testserver", transport=httpx.MockTransport(handler))


def test_client_get_entry_missing_returns_none():
    client = _client(lambda req: httpx.Response(404, json={"detail": "No entry for 2024-03-05"}))
    assert client.get_entry("2024-03-05") is None


def test_client_raises_api_error_with_detail():
    client = _client(lambda req: httpx.Response(422, json={"detail": "Month 13 is outside 1-12"}))
    with pytest.raises(APIError) as exc_info:
        client.navigate(2024, 13, 1)
    assert exc_info.value.status_code == 422
    assert "outside 1-12" in exc_info.value.detail


def test_client_submit_sends_snake_case_payload():
    seen = {}

    def handler(req: httpx.Request) -> httpx.Response:
        seen["method"] = req.method
        seen["path"] = req.url.path
        seen["body"] = json.loads(req.content)
        return httpx.Response(500, json={"detail": "boom"})

    with pytest.raises(APIError):
        _client(handler).submit_entry("2024-03-05", EntrySubmit(workHr="8", otHr="", extra=50))

    assert seen["method"] == "PUT"
    assert seen["path"] == "/entries/2024-03-05"
    assert seen["body"] == {"work_hr": 8.0, "ot_hr": 0.0, "extra": 50.0, "remark": ""}


def test_client_export_reads_filename():
    def handler(req: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            content=b"\x89PNG...",
            headers={"content-disposition": 'attachment; filename="Payroll_Statement_March_2024.png"'},
        )

    filename, content = _client(handler).export_statement(2024, 3)
    assert filename == "Payroll_Statement_March_2024.png"
    assert content == b"\x89PNG..."


def test_validate_api_url_accepts_default():
    assert validate_api_url() == []


@pytest.mark.parametrize("url", ["not a url", "ftp://example.com", "127.0.0.1:8000"])
def test_validate_api_url_rejects_unusable(monkeypatch, url):
    monkeypatch.setattr(settings, "API_URL", url)
    errors = validate_api_url()
    assert len(errors) == 1
    assert "API_URL" in errors[0]


def test_bad_url_skips_connection_check(monkeypatch):
    monkeypatch.setattr(settings, "API_URL", "not a url")
    assert len(run_all_checks()) == 1


def test_backend_connection_reports_failure():
    # No backend is running under test
    errors = validate_backend_connection()
    assert isinstance(errors, list)
    assert len(errors) > 0
