"""Table of the configured pack sizes for the sidebar."""

from typing import List

import streamlit as st
import pandas as pd

from pack_calculator.models import PackSize

PACK_SIZE_COLUMNS = ['#', 'Pack Size']


def build_pack_sizes_dataframe(records: List[PackSize]) -> pd.DataFrame:
    """Convert PackSize records into a DataFrame, in record order."""
    data = [{'#': record.id, 'Pack Size': record.size} for record in records]
    return pd.DataFrame(data, columns=PACK_SIZE_COLUMNS)


def render_pack_sizes_table(records: List[PackSize]):
    """
    Render the configured pack sizes, or a warning when there are none.

    Args:
        records: PackSize records from the service
    """
    if not records:
        st.warning("No pack sizes configured")
        return

    st.dataframe(build_pack_sizes_dataframe(records), use_container_width=True, hide_index=True)
    st.caption(f"{len(records)} sizes configured")
