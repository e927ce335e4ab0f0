"""Styling helpers for the pack calculator Streamlit app.

Usage:
    import streamlit as st
    from ui.components.styling import apply_custom_css, section_header

    apply_custom_css()
    st.markdown(section_header("Pack Calculator", level=1, icon="📦"), unsafe_allow_html=True)
"""

from typing import Literal, Optional
import streamlit as st

ColorType = Literal["primary", "success", "warning", "error"]
HeaderLevel = Literal[1, 2, 3]

COLORS = {
    "primary": "#1f77b4",
    "success": "#28a745",
    "warning": "#ffc107",
    "error": "#dc3545",
}

HEADER_CLASSES = {1: "page-title", 2: "section-header", 3: "subsection-header"}

CUSTOM_CSS = """
.page-title { font-size: 32px; font-weight: 700; margin-bottom: 8px; }
.section-header { font-size: 22px; font-weight: 600; margin: 16px 0 8px 0; }
.subsection-header { font-size: 17px; font-weight: 600; margin: 12px 0 6px 0; }
.metric-card { border-left: 4px solid; border-radius: 6px; padding: 12px 16px; background: #f8f9fa; }
.metric-label { font-size: 13px; color: #6c757d; }
.metric-value-large { font-size: 26px; font-weight: 700; }
"""


def apply_custom_css() -> None:
    """Inject the app's CSS. Call once at the top of the page."""
    st.markdown(f"<style>{CUSTOM_CSS}</style>", unsafe_allow_html=True)


def section_header(
    text: str,
    level: HeaderLevel = 1,
    icon: Optional[str] = None
) -> str:
    """Header HTML for the page title (level 1), the Calculate and Result
    sections (level 2) or sidebar subsections (level 3).

    Example:
        >>> section_header("Pack Sizes", level=2, icon="⚙️")
        '<div class="section-header">⚙️ Pack Sizes</div>'
    """
    css_class = HEADER_CLASSES.get(level, HEADER_CLASSES[2])
    prefix = f"{icon} " if icon else ""
    return f'<div class="{css_class}">{prefix}{text}</div>'


def colored_metric(label: str, value: str, color: ColorType = "primary") -> str:
    """Generate a metric card with a colored border.

    Example:
        >>> st.markdown(colored_metric("Total Items", "12,250", "primary"), unsafe_allow_html=True)
    """
    border = COLORS.get(color, COLORS["primary"])
    return f'''
    <div class="metric-card" style="border-color: {border};">
        <div class="metric-label">{label}</div>
        <div class="metric-value-large">{value}</div>
    </div>
    '''
