import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import streamlit as st
import pandas as pd
import numpy as np
import plotly.graph_objects as go
import plotly.express as px

from expenses.config import AppConfig
from expenses.domain import DaysPeriod
from expenses.frames import COLUMNS, records_from_frame, records_to_frame
from expenses.log import setup_logging, get_logger
from expenses.services import ExpenseLedger

config = AppConfig.load()
setup_logging(config.log_level)
logger = get_logger(__name__)

st.set_page_config(page_title="Expense Ledger", layout="wide")

SAMPLE_ROWS = [
    {"day": 1, "amount": 15.0, "category": "groceries"},
    {"day": 11, "amount": 300.0, "category": "utility-bills"},
    {"day": 12, "amount": 28.0, "category": "groceries"},
    {"day": 26, "amount": 300.0, "category": "university"},
    {"day": 28, "amount": 1300.0, "category": "rent"},
]


if "records_df" not in st.session_state:
    st.session_state.records_df = pd.DataFrame(SAMPLE_ROWS, columns=COLUMNS)

st.title("💸 Expense Ledger")

st.subheader("🧾 Records")
edited_df = st.data_editor(
    st.session_state.records_df,
    num_rows="dynamic",
    use_container_width=True,
    key="records_editor",
    column_config={
        "day": st.column_config.NumberColumn("day", min_value=1, step=1, format="%d"),
        "amount": st.column_config.NumberColumn("amount", format="%.2f"),
    },
)
ledger = ExpenseLedger(records_from_frame(edited_df))
logger.debug("ledger holds %d record(s)", len(ledger))

st.sidebar.markdown("### 📅 Period")
day_from, day_to = st.sidebar.slider(
    "Days",
    min_value=1,
    max_value=config.max_day,
    value=(1, config.max_day),
)
period = DaysPeriod(from_=day_from, to=day_to)

st.sidebar.markdown("### 🗂 Category")
category = st.sidebar.text_input(
    "Category",
    value=ledger.categories()[0] if len(ledger) else "",
    help="Known: " + ", ".join(ledger.categories()),
)

report = ledger.period_report(period)

k1, k2, k3 = st.columns(3)
with k1:
    st.metric("Records in period", report["count"])
with k2:
    st.metric("Total in period", f"{report['total']:,.2f} {config.currency}")
with k3:
    result = ledger.category_expenses(period, category)
    if result.is_right():
        st.metric(f"Spent on {category}", f"{result.get_or_else(0.0):,.2f} {config.currency}")
    else:
        st.error(result.get_error().message)

st.divider()

col_cat, col_days = st.columns(2)
with col_cat:
    if report["by_category"]:
        df_cat = pd.DataFrame(
            [{"Category": c, "Spent": v} for c, v in report["by_category"].items()]
        )
        fig_cat = px.bar(
            df_cat,
            x="Category",
            y="Spent",
            title=f"Spending by category, days {day_from}-{day_to}",
            template="plotly_dark",
        )
        st.plotly_chart(fig_cat, use_container_width=True)
    else:
        st.info("No records in the selected period.")

with col_days:
    days = np.arange(day_from, day_to + 1)
    daily = pd.Series(np.zeros(len(days)), index=days)
    for r in ledger.by_period(period):
        daily.loc[r.day] += r.amount
    fig_days = go.Figure()
    fig_days.add_trace(go.Scatter(x=days, y=daily.values, mode="lines+markers", name="Daily"))
    fig_days.add_trace(go.Scatter(x=days, y=daily.cumsum().values, mode="lines", name="Cumulative"))
    fig_days.update_layout(template="plotly_dark", margin=dict(t=30, b=10, l=10, r=10))
    st.plotly_chart(fig_days, use_container_width=True)

in_period = records_to_frame(ledger.by_period(period))
if not in_period.empty:
    st.subheader("📑 Records in period")
    st.table(in_period.reset_index(drop=True))

in_category = records_to_frame(ledger.in_period_and_category(period, category))
if not in_category.empty:
    st.subheader(f"🗂 {category} in period")
    st.table(in_category.reset_index(drop=True))
