import streamlit as st
from paytrack.api.schemas.entries import EntrySubmit
from paytrack.ui.api_client import get_client, APIError
from paytrack.ui.components import month_header
from paytrack.ui.state import get_selected_date, select_date

st.title("Calendar")

view = month_header()
client = get_client()
cal = view.calendar

# --- Grid ---
header = st.columns(7)
for col, name in zip(header, cal.weekdays):
    col.markdown(f"**{name}**")

slots = [None] * cal.leading_blanks + list(cal.cells)
for week_start in range(0, len(slots), 7):
    cols = st.columns(7)
    for col, cell in zip(cols, slots[week_start:week_start + 7]):
        if cell is None:
            continue
        label = str(cell.day)
        if cell.daily_total_display:
            label += f"\n\n{cell.daily_total_display}"
        if cell.flagged:
            label = f"🟡 {label}"
        if col.button(label, key=f"day_{cell.date}", use_container_width=True):
            select_date(cell.date)

st.caption("🟡 = day has a remark")

# --- Entry form ---
selected = get_selected_date()
if selected:
    st.divider()
    st.subheader(f"Entry for {selected}")
    try:
        existing = client.get_entry(selected)
    except APIError as e:
        st.error(f"Failed to load entry: {e.detail}")
        st.stop()

    with st.form("entry_form"):
        c1, c2, c3 = st.columns(3)
        work_hr = c1.text_input("Work hours", value=str(existing.work_hr if existing else 0))
        ot_hr = c2.text_input("OT hours", value=str(existing.ot_hr if existing else 0))
        extra = c3.text_input("Extra pay", value=str(existing.extra if existing else 0))
        remark = st.text_input("Remark", value=existing.remark if existing else "")
        submitted = st.form_submit_button("Save")

    if submitted:
        payload = EntrySubmit(work_hr=work_hr, ot_hr=ot_hr, extra=extra, remark=remark)
        try:
            client.submit_entry(selected, payload)
        except APIError as e:
            st.error(f"Failed to save entry: {e.detail}")
        else:
            select_date(None)
            st.rerun()

    c_del, c_close = st.columns(2)
    if existing and c_del.button("Delete entry", type="secondary"):
        try:
            client.delete_entry(selected)
        except APIError as e:
            st.error(f"Failed to delete entry: {e.detail}")
        else:
            select_date(None)
            st.rerun()
    if c_close.button("Close"):
        select_date(None)
        st.rerun()
