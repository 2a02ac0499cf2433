"""Typed HTTP client for Streamlit pages.

Only imports from ``paytrack.api.schemas``; never ORM or DB.
Instantiate via ``get_client()`` which caches per Streamlit session.
"""
from __future__ import annotations

import httpx
import streamlit as st

from paytrack.api.schemas.entries import EntryList, EntryRead, EntrySubmit
from paytrack.api.schemas.months import HoursDistribution, MonthRefRead, MonthView
from paytrack.api.schemas.settings import RateSettingsRead, RateSettingsUpdate
from paytrack.config import settings


class APIError(Exception):
    """Raised when the backend returns a 4xx/5xx response."""

    def __init__(self, status_code: int, detail: str) -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"[{status_code}] {detail}")


class PaytrackClient:
    """One method per backend endpoint.  All return pure Pydantic DTOs."""

    def __init__(self, base_url: str | None = None, transport: httpx.BaseTransport | None = None) -> None:
        self._client = httpx.Client(
            base_url=base_url or settings.API_URL, timeout=30.0, transport=transport,
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _raise_for_status(self, resp: httpx.Response) -> None:
        if resp.is_success:
            return
        try:
            detail = resp.json().get("detail", resp.text)
        except Exception:
            detail = resp.text
        raise APIError(resp.status_code, str(detail))

    # ------------------------------------------------------------------
    # Months
    # ------------------------------------------------------------------

    def get_month(self, year: int, month: int) -> MonthView:
        resp = self._client.get(f"/months/{year}/{month}")
        self._raise_for_status(resp)
        return MonthView.model_validate(resp.json())

    def navigate(self, year: int, month: int, step: int) -> MonthRefRead:
        resp = self._client.get(f"/months/{year}/{month}/navigate", params={"step": step})
        self._raise_for_status(resp)
        return MonthRefRead.model_validate(resp.json())

    def export_statement(self, year: int, month: int) -> tuple[str, bytes]:
        resp = self._client.get(f"/months/{year}/{month}/statement.png")
        self._raise_for_status(resp)
        disposition = resp.headers.get("content-disposition", "")
        filename = disposition.split("filename=")[-1].strip('"') if "filename=" in disposition else "statement.png"
        return filename, resp.content

    # ------------------------------------------------------------------
    # Entries
    # ------------------------------------------------------------------

    def list_entries(self) -> EntryList:
        resp = self._client.get("/entries")
        self._raise_for_status(resp)
        return EntryList.model_validate(resp.json())

    def get_entry(self, date: str) -> EntryRead | None:
        """Return the stored entry, or None when the day has none."""
        resp = self._client.get(f"/entries/{date}")
        if resp.status_code == 404:
            return None
        self._raise_for_status(resp)
        return EntryRead.model_validate(resp.json())

    def submit_entry(self, date: str, payload: EntrySubmit) -> MonthView:
        resp = self._client.put(f"/entries/{date}", json=payload.model_dump())
        self._raise_for_status(resp)
        return MonthView.model_validate(resp.json())

    def delete_entry(self, date: str) -> MonthView:
        resp = self._client.delete(f"/entries/{date}")
        self._raise_for_status(resp)
        return MonthView.model_validate(resp.json())

    # ------------------------------------------------------------------
    # Settings / charts
    # ------------------------------------------------------------------

    def get_rates(self) -> RateSettingsRead:
        resp = self._client.get("/settings")
        self._raise_for_status(resp)
        return RateSettingsRead.model_validate(resp.json())

    def update_rates(self, payload: RateSettingsUpdate, year: int, month: int) -> MonthView:
        resp = self._client.put(
            "/settings", json=payload.model_dump(), params={"year": year, "month": month},
        )
        self._raise_for_status(resp)
        return MonthView.model_validate(resp.json())

    def get_hours(self) -> HoursDistribution:
        resp = self._client.get("/charts/hours")
        self._raise_for_status(resp)
        return HoursDistribution.model_validate(resp.json())

    # ------------------------------------------------------------------
    # Health
    # ------------------------------------------------------------------

    def health(self) -> dict:
        resp = self._client.get("/health")
        self._raise_for_status(resp)
        return resp.json()


# ------------------------------------------------------------------
# Streamlit helper: one client per session
# ------------------------------------------------------------------

def get_client() -> PaytrackClient:
    """Return a cached ``PaytrackClient`` for the current Streamlit session."""
    if "paytrack_api_client" not in st.session_state:
        base_url = st.session_state.get("paytrack_api_url", settings.API_URL)
        st.session_state["paytrack_api_client"] = PaytrackClient(base_url=base_url)
    return st.session_state["paytrack_api_client"]
