"""Streamlit front-end for the cost-of-living calculator."""
from __future__ import annotations

from typing import Mapping

import pandas as pd
import streamlit as st

from living_cost import CalculatorContext, CalculatorSession, FileExpenditureRepository
from living_cost.config import SETTINGS
from living_cost.domain.errors import LivingCostError
from living_cost.domain.models import RegionRecord
from living_cost.infrastructure.storage import alias_store
from living_cost.presentation.report import (
    comparison_rows,
    format_currency,
    format_percentage,
    insight_summary,
    render_csv,
    render_html,
    status_label,
)


st.set_page_config(page_title="Kalkulator Beban Hidup", layout="wide")
st.title("Kalkulator Beban Hidup")


def load_alias_dataframe() -> pd.DataFrame:
    aliases = alias_store.load_geometry_aliases(SETTINGS.geometry_alias_path)
    return pd.DataFrame(
        [{"slug": key, "province_id": value} for key, value in sorted(aliases.items())],
        columns=["slug", "province_id"],
    )


def regions_to_dataframe(data: Mapping[str, RegionRecord]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "id": region_id,
                "name": record.name,
                "expenditure_per_capita": record.expenditure_per_capita,
                "expenditure_food": record.expenditure_food,
                "expenditure_non_food": record.expenditure_non_food,
                "ump": record.wage_benchmark,
            }
            for region_id, record in data.items()
        ]
    )


def build_session(csv_bytes: bytes) -> CalculatorSession:
    session = CalculatorSession(CalculatorContext(expenditure_source=FileExpenditureRepository(csv_bytes)))
    session.region_data()
    return session


if "session" not in st.session_state:
    st.session_state["session"] = None


uploaded = st.file_uploader("Upload BPS expenditure table", type=["csv", "xlsx"])
if uploaded is not None and st.button("Load data"):
    try:
        with st.spinner("Loading expenditure data..."):
            st.session_state["session"] = build_session(uploaded.read())
    except LivingCostError as exc:
        st.error(f"Could not load expenditure data: {exc}")

with st.expander("Geometry slug aliases"):
    alias_df = load_alias_dataframe()
    edited_df = st.data_editor(alias_df, num_rows="dynamic", hide_index=True, key="alias_editor")
    if st.button("Save aliases"):
        cleaned = {
            str(row["slug"]).strip(): str(row["province_id"]).strip()
            for _, row in edited_df.iterrows()
            if str(row["slug"]).strip()
        }
        try:
            alias_store.save_geometry_aliases(cleaned, path=SETTINGS.geometry_alias_path)
        except ValueError as exc:
            st.error(str(exc))
        else:
            st.success("Aliases saved")

session: CalculatorSession | None = st.session_state.get("session")
if session is None:
    st.info("Upload the expenditure table and load it to start.")
else:
    options = session.region_options()
    names = {option.id: option.name for option in options}
    ids = list(names)

    col1, col2, col3 = st.columns(3)
    with col1:
        session.set_income(st.number_input("Monthly income (Rp)", min_value=0, step=100000, value=int(session.state.income)))
    with col2:
        session.set_dependents(st.number_input("Dependents", min_value=1, step=1, value=session.state.dependents))
    with col3:
        session.select_region(st.selectbox("Province", ids, format_func=names.get) if ids else None)

    target_choice = st.selectbox("Compare with", [None] + ids, format_func=lambda value: "-" if value is None else names[value])
    session.select_target(target_choice)

    result = session.calculation_result()
    if result is None:
        st.warning("No expenditure data for the selected province.")
    else:
        st.subheader(status_label(result.status))
        m1, m2, m3, m4 = st.columns(4)
        m1.metric("Total expense", format_currency(result.total_expense))
        m2.metric("Balance", format_currency(result.balance), format_percentage(result.balance_percentage, 1))
        m3.metric("Income vs UMP", format_percentage(result.ump_comparison, 1))
        m4.metric("Income vs expense", format_percentage(result.income_vs_expense_ratio, 1))
        st.write(session.analysis_text())

        results = {names[session.state.selected_region_id]: result}
        target = session.target_result()
        insight = session.comparison_insight()
        if target is not None and insight is not None:
            results[names[target_choice]] = target
            st.subheader("Comparison")
            st.write(insight_summary(insight, names[target_choice]))

        rows = comparison_rows(results)
        st.dataframe(pd.DataFrame(rows))
        st.download_button("Download CSV", data=render_csv(rows), file_name="living_cost.csv", mime="text/csv")
        st.download_button(
            "Download HTML",
            data=render_html(rows).encode("utf-8"),
            file_name="living_cost.html",
            mime="text/html",
        )

    with st.expander("Province data"):
        st.dataframe(regions_to_dataframe(session.region_data()))
