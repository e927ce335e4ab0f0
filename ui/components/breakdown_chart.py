"""Pack breakdown visualization using Plotly."""

import plotly.graph_objects as go

from pack_calculator.models import PackResponse


def render_breakdown_chart(response: PackResponse, height: int = 360):
    """
    Render packs per size as a bar chart.

    Args:
        response: PackResponse to chart
        height: Chart height in pixels

    Returns:
        Plotly figure object
    """
    sizes = sorted(response.pack_breakdown)
    counts = [response.pack_breakdown[size] for size in sizes]

    fig = go.Figure(data=[go.Bar(
        x=[str(size) for size in sizes],
        y=counts,
        marker_color='#4ECDC4',
        customdata=[size * count for size, count in zip(sizes, counts)],
        hovertemplate='<b>Pack of %{x}</b><br>Packs: %{y}<br>Items: %{customdata:,}<extra></extra>',
    )])

    fig.update_layout(
        title='Packs by Size',
        title_x=0.5,
        xaxis_title='Pack size (items)',
        yaxis_title='Packs',
        height=height,
        showlegend=False,
    )

    return fig
