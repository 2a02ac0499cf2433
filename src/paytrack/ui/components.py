"""Month header with prev/next navigation, shared by the month-scoped pages."""
import streamlit as st
from paytrack.api.schemas.months import MonthView
from paytrack.ui.api_client import APIError, get_client
from paytrack.ui.state import get_view, step_view


def month_header() -> MonthView:
    """Render the navigation bar and return the freshly fetched month."""
    prev_col, title_col, next_col = st.columns([1, 4, 1])
    if prev_col.button("◀", key="prev_month", use_container_width=True):
        step_view(-1)
    if next_col.button("▶", key="next_month", use_container_width=True):
        step_view(1)

    ref = get_view()
    try:
        view = get_client().get_month(ref.year, ref.month)
    except APIError as e:
        st.error(f"Failed to load {ref.title}: {e.detail}")
        st.stop()

    title_col.markdown(
        f"<h3 style='text-align:center'>{view.period.title}</h3>", unsafe_allow_html=True,
    )
    st.metric("Month balance", view.balance_display)
    return view
