"""Tabular exports of model results for spreadsheets and notebooks."""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from capture_fleet_sim.finance.sensitivity import SensitivityEntry
from capture_fleet_sim.models.results import ModelResult


def years_to_frame(result: ModelResult) -> pd.DataFrame:
    """One row per simulated year, indexed by calendar year."""
    rows = []
    for yr in result.years:
        rows.append({
            "Year": yr.calendar_year,
            "Offset": yr.year_offset,
            "Units": yr.units_deployed,
            "Output (t)": yr.fleet_output_t,
            "Incentive eligible": yr.incentive_eligible,
            "Incentive": yr.revenue.incentive,
            "Market": yr.revenue.market,
            "Offtake": yr.revenue.offtake,
            "Compliance": yr.revenue.compliance,
            "Revenue": yr.total_revenue,
            "OPEX": yr.total_opex,
            "CAPEX": yr.capex_spent,
            "Net CF": yr.net_cash_flow,
            "Cumulative CF": yr.cumulative_cash_flow,
            "DCF": yr.discounted_cash_flow,
            "Cumulative DCF": yr.cumulative_dcf,
            "Revenue / t": yr.revenue_per_t,
            "OPEX / t": yr.opex_per_t,
        })
    return pd.DataFrame(rows).set_index("Year")


def sensitivity_to_frame(entries: Sequence[SensitivityEntry], base_npv: float | None = None) -> pd.DataFrame:
    """Tornado table in ranked order.

    With ``base_npv`` the low/high swings relative to the base case are
    added as extra columns.
    """
    df = pd.DataFrame([{
        "Parameter": e.label,
        "Key": e.key,
        "Unit": e.unit,
        "Base": e.base_value,
        "Low": e.low_value,
        "High": e.high_value,
        "NPV @ Low": e.npv_low,
        "NPV @ High": e.npv_high,
        "Swing": e.delta,
    } for e in entries], columns=[
        "Parameter", "Key", "Unit", "Base", "Low", "High", "NPV @ Low", "NPV @ High", "Swing",
    ])
    if base_npv is not None:
        df["Δ Low"] = df["NPV @ Low"] - base_npv
        df["Δ High"] = df["NPV @ High"] - base_npv
    return df
