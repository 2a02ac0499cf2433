import pandas as pd
import streamlit as st
from paytrack.domain.formatting import format_hours, format_money
from paytrack.ui.api_client import get_client, APIError
from paytrack.ui.components import month_header

st.title("Payroll Statement")

view = month_header()
statement = view.statement

rows = [
    {
        "Date": r.label,
        "Work Hr": format_hours(r.work_hr),
        "OT Hr": format_hours(r.ot_hr),
        "Regular Pay": format_money(r.regular_pay),
        "OT Pay": format_money(r.ot_pay),
        "Extra": format_money(r.extra),
        "Total": format_money(r.daily_total),
        "Remark": r.remark.strip(),
    }
    for r in statement.rows
]
t = statement.totals
rows.append({
    "Date": "Total",
    "Work Hr": format_hours(t.total_work_hr),
    "OT Hr": format_hours(t.total_ot_hr),
    "Regular Pay": format_money(t.total_regular_pay),
    "OT Pay": format_money(t.total_ot_pay),
    "Extra": format_money(t.total_extra_pay),
    "Total": format_money(t.grand_total),
    "Remark": "",
})
flags = [r.flagged for r in statement.rows] + [False]
df = pd.DataFrame(rows)


def _highlight(row: pd.Series) -> list[str]:
    style = "background-color: rgba(255, 193, 7, 0.25)" if flags[row.name] else ""
    return [style] * len(row)


st.dataframe(df.style.apply(_highlight, axis=1), hide_index=True, use_container_width=True)

st.divider()
st.subheader("Export")

if st.button("Generate image"):
    try:
        filename, content = get_client().export_statement(view.period.year, view.period.month)
    except APIError as e:
        st.error(f"Could not generate image: {e.detail}")
    else:
        st.download_button("Download PNG", data=content, file_name=filename, mime="image/png")
