"""Streamlit application for the pack calculator.

Run with:
    streamlit run ui/app.py
"""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import streamlit as st
from ui import session_state
from ui.components import (
    apply_custom_css,
    section_header,
    colored_metric,
    render_breakdown_table,
    render_breakdown_chart,
    render_pack_sizes_table,
)
from ui.utils import parse_pack_size_input
from pack_calculator.models import PackRequest, PackServiceError, PackValidationError

st.set_page_config(
    page_title="Pack Calculator",
    page_icon="📦",
    layout="wide",
)

apply_custom_css()
session_state.initialize_session_state()
service = session_state.get_pack_service()

st.markdown(section_header("Pack Calculator", level=1, icon="📦"), unsafe_allow_html=True)
st.caption(
    "Ships whole packs only: the fewest items that cover the order, "
    "then the fewest packs that make up that amount."
)

# Sidebar: pack size configuration
with st.sidebar:
    st.markdown(section_header("Pack Sizes", level=2, icon="⚙️"), unsafe_allow_html=True)
    current_sizes = service.get_available_pack_sizes()

    with st.form("pack_sizes_form"):
        sizes_text = st.text_area(
            "Available pack sizes",
            value=", ".join(str(size) for size in current_sizes),
            help="Comma or space separated positive whole numbers",
        )
        update_clicked = st.form_submit_button("Update pack sizes", use_container_width=True)

    if update_clicked:
        parsed = parse_pack_size_input(sizes_text)
        if parsed.is_empty:
            st.error("At least one valid pack size is required (positive numbers only)")
        else:
            try:
                service.update_pack_sizes(parsed.sizes)
            except PackValidationError as e:
                st.error(str(e))
            else:
                session_state.clear_result()
                st.session_state.flash_message = "Pack sizes updated successfully!"
                if parsed.skipped:
                    st.session_state.flash_message += f" Skipped: {', '.join(parsed.skipped)}"
                st.rerun()

    if st.session_state.flash_message:
        st.success(st.session_state.flash_message)
        st.session_state.flash_message = None

    render_pack_sizes_table(service.get_pack_size_records())

# Main: calculation
st.markdown(section_header("Calculate", level=2, icon="🧮"), unsafe_allow_html=True)

with st.form("calculate_form"):
    quantity = st.number_input("Items ordered", min_value=1, value=1, step=1)
    calculate_clicked = st.form_submit_button("Calculate", type="primary")

if calculate_clicked:
    try:
        result = service.calculate_pack_distribution(PackRequest(quantity=int(quantity)))
    except (PackValidationError, PackServiceError) as e:
        session_state.store_error(str(e))
    else:
        session_state.store_result(result)

if st.session_state.last_error:
    st.error(st.session_state.last_error)

result = session_state.get_result()
if result is not None:
    st.divider()
    st.markdown(
        section_header(f"Result for {result.quantity:,} items", level=2, icon="✅"),
        unsafe_allow_html=True,
    )

    col1, col2, col3 = st.columns(3)
    with col1:
        st.markdown(colored_metric("Total Items", f"{result.total_items:,}", "primary"), unsafe_allow_html=True)
    with col2:
        st.markdown(colored_metric("Total Packs", f"{result.total_packs:,}", "success"), unsafe_allow_html=True)
    with col3:
        color = "warning" if result.overshipment else "success"
        st.markdown(colored_metric("Over-shipment", f"{result.overshipment:,}", color), unsafe_allow_html=True)

    table_col, chart_col = st.columns([1, 2])
    with table_col:
        render_breakdown_table(result)
    with chart_col:
        st.plotly_chart(render_breakdown_chart(result), use_container_width=True)
