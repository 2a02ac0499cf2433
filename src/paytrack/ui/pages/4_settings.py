import streamlit as st
from paytrack.api.schemas.settings import RateSettingsUpdate
from paytrack.ui.api_client import get_client, APIError
from paytrack.ui.state import get_view

st.title("Rates")

client = get_client()

try:
    rates = client.get_rates()
except APIError as e:
    st.error(f"Failed to load rates: {e.detail}")
    st.stop()

st.caption("Changing a rate re-prices every recorded day, including past months.")

with st.form("rates_form"):
    c1, c2 = st.columns(2)
    hourly = c1.text_input("Hourly rate", value=f"{rates.hourly_rate:g}")
    ot = c2.text_input("OT rate", value=f"{rates.ot_rate:g}")
    saved = st.form_submit_button("Save rates")

if saved:
    ref = get_view()
    try:
        view = client.update_rates(RateSettingsUpdate(hourly_rate=hourly, ot_rate=ot), ref.year, ref.month)
    except APIError as e:
        st.error(f"Failed to save rates: {e.detail}")
    else:
        st.success(
            f"Saved {view.rates.hourly_rate:g} / {view.rates.ot_rate:g}. "
            f"{view.period.title} balance is now {view.balance_display}."
        )
