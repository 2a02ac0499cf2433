"""Session-state helpers for the Streamlit UI.

No ORM, no DB. Only reads/writes ``st.session_state``. The viewed month
lives here; everything derived from it is refetched on every rerun.
"""
import streamlit as st
from datetime import date
from typing import Optional
from paytrack.domain.calendar import MonthRef


def init_session(today: Optional[date] = None) -> None:
    """Initialize session state variables."""
    if "view_year" not in st.session_state or "view_month" not in st.session_state:
        ref = MonthRef.of(today or date.today())
        st.session_state["view_year"] = ref.year
        st.session_state["view_month"] = ref.month
    if "selected_date" not in st.session_state:
        st.session_state["selected_date"] = None


def get_view() -> MonthRef:
    """Get the month currently on screen."""
    init_session()
    return MonthRef(st.session_state["view_year"], st.session_state["view_month"])


def set_view(ref: MonthRef) -> None:
    st.session_state["view_year"] = ref.year
    st.session_state["view_month"] = ref.month
    st.session_state["selected_date"] = None


def step_view(step: int) -> MonthRef:
    """Move the view one month back (-1) or forward (+1), rolling the year."""
    ref = get_view().shift(step)
    set_view(ref)
    return ref


def get_selected_date() -> Optional[str]:
    return st.session_state.get("selected_date")


def select_date(key: Optional[str]) -> None:
    """Open (or with None, close) the entry form for a day."""
    st.session_state["selected_date"] = key
