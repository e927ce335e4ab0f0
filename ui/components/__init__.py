"""Reusable UI components for the pack calculator."""

from .styling import apply_custom_css, section_header, colored_metric
from .breakdown_table import build_breakdown_dataframe, render_breakdown_table
from .breakdown_chart import render_breakdown_chart
from .pack_size_table import build_pack_sizes_dataframe, render_pack_sizes_table

__all__ = [
    # Styling
    'apply_custom_css',
    'section_header',
    'colored_metric',
    # Breakdown display
    'build_breakdown_dataframe',
    'render_breakdown_table',
    'render_breakdown_chart',
    # Pack size configuration
    'build_pack_sizes_dataframe',
    'render_pack_sizes_table',
]
