import altair as alt
import pandas as pd
import streamlit as st
from paytrack.ui.api_client import get_client, APIError
from paytrack.ui.components import month_header

st.title("Charts")

view = month_header()
client = get_client()

# --- Hours distribution (all recorded entries, every month) ---
st.subheader("Hours distribution (all time)")
try:
    hours = client.get_hours()
except APIError as e:
    st.error(f"Failed to load hours: {e.detail}")
    st.stop()

if hours.work_hours == 0 and hours.ot_hours == 0:
    st.info("No hours recorded yet.")
else:
    pie_df = pd.DataFrame({"kind": hours.labels, "hours": [hours.work_hours, hours.ot_hours]})
    pie = alt.Chart(pie_df).mark_arc().encode(
        theta="hours:Q",
        color=alt.Color("kind:N", scale=alt.Scale(range=["#2cc5b1", "#58a6ff"]), title=None),
        tooltip=["kind", "hours"],
    )
    st.altair_chart(pie, use_container_width=True)

# --- Daily pay (viewed month) ---
st.subheader(f"Daily pay, {view.period.title}")
chart = view.bar_chart
records = []
for i, day in enumerate(chart.labels):
    records.append({"day": day, "kind": "Regular Pay", "pay": chart.regular_pay[i], "color": chart.regular_colors[i]})
    records.append({"day": day, "kind": "OT Pay", "pay": chart.ot_pay[i], "color": chart.ot_colors[i]})
bar_df = pd.DataFrame(records)

bars = alt.Chart(bar_df).mark_bar().encode(
    x=alt.X("day:O", title="Day of Month", axis=alt.Axis(labelAngle=-90)),
    y=alt.Y("pay:Q", stack="zero", title="Pay"),
    color=alt.Color("color:N", scale=None, legend=None),
    order=alt.Order("kind:N", sort="descending"),
    tooltip=["day", "kind", "pay"],
)
st.altair_chart(bars, use_container_width=True)
st.caption("Yellow bars mark days with a remark.")
