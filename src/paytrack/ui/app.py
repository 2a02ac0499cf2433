"""Streamlit entry point: ``streamlit run src/paytrack/ui/app.py``."""
import streamlit as st
from paytrack.ui.state import init_session
from paytrack.ui.validation import run_all_checks

st.set_page_config(page_title="Paytrack", page_icon="💰", layout="wide")
init_session()

st.title("💰 Paytrack")
st.write(
    "Record daily work, overtime and extra pay on the **Calendar** page; "
    "the **Statement** and **Charts** pages are derived from the same figures."
)

errors = run_all_checks()
if errors:
    for err in errors:
        st.error(err)
    st.info("Start the backend with `uvicorn paytrack.api.app:create_app --factory`.")
else:
    st.success("Backend reachable. Pick a page from the sidebar.")
