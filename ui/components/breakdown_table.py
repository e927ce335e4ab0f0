"""Table components for pack breakdowns."""

import streamlit as st
import pandas as pd

from pack_calculator.models import PackResponse

BREAKDOWN_COLUMNS = ['Pack Size', 'Packs', 'Items']


def build_breakdown_dataframe(response: PackResponse) -> pd.DataFrame:
    """
    Convert a pack breakdown into a DataFrame, largest pack first.

    Args:
        response: PackResponse to tabulate

    Returns:
        DataFrame with columns Pack Size, Packs, Items
    """
    data = []
    for size, count in sorted(response.pack_breakdown.items(), reverse=True):
        data.append({
            'Pack Size': size,
            'Packs': count,
            'Items': size * count,
        })

    return pd.DataFrame(data, columns=BREAKDOWN_COLUMNS)


def render_breakdown_table(response: PackResponse):
    """
    Render a pack breakdown as a Streamlit dataframe.

    Args:
        response: PackResponse to display
    """
    df = build_breakdown_dataframe(response)

    if df.empty:
        st.info("No packs to ship")
        return

    st.dataframe(df, use_container_width=True, hide_index=True)
    st.caption(f"{response.total_packs} packs, {response.total_items:,} items")
