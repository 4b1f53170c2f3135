"""
Quote Form Charts
=================

Plotly figures and formatting for the quote form app. Kept free of
Streamlit so they can be built and checked outside a running app.
"""

from decimal import Decimal

import plotly.graph_objects as go

from quote_engine.categories import get_category
from quote_engine.data.reference.ui import BREAKDOWN_COLORS
from quote_engine.models import Quote


def format_currency(value) -> str:
    if value is None:
        return "-"
    return f"${value:,.2f}"


def breakdown_items(quote: Quote) -> list[tuple[str, Decimal]]:
    """
    Cost components that add up to the total, in display order.

    Risk loading is the part of the subtotal added by the package risk
    multiplier, shown only for categories that carry one. Zero components
    are left out. Each field is rounded on its own, so any cent left over
    is put on the largest bar to keep the bars summing to the total.
    """
    items = [
        ("Base rate", quote.base_cost),
        ("Weight", quote.weight_cost),
        ("Handling", quote.handling_cost),
    ]
    if get_category(quote.package_category).risk_multiplier != 1.0:
        components = sum(amount for _, amount in items)
        items.append(("Risk loading", quote.subtotal - components))
    items.append(("Insurance", quote.insurance_cost))
    items = [(label, amount) for label, amount in items if amount != 0]

    residue = quote.total_cost - sum(amount for _, amount in items)
    if residue and items:
        largest = max(range(len(items)), key=lambda i: items[i][1])
        label, amount = items[largest]
        items[largest] = (label, amount + residue)
    return items


def apply_chart_layout(fig: go.Figure, extra_right: int = 0) -> go.Figure:
    """Apply consistent layout settings to prevent label cutoff."""
    fig.update_xaxes(automargin=True)
    fig.update_yaxes(automargin=True)
    fig.update_layout(
        margin=dict(l=10, r=10 + extra_right, t=50, b=10),
        autosize=True,
    )
    return fig


def breakdown_figure(quote: Quote) -> go.Figure:
    """Horizontal bar chart of the quote's cost components."""
    items = breakdown_items(quote)
    labels = [label for label, _ in items]
    values = [float(amount) for _, amount in items]
    max_val = max(values) if values else 0

    fig = go.Figure(go.Bar(
        x=values,
        y=labels,
        orientation="h",
        marker_color=[BREAKDOWN_COLORS[label] for label in labels],
        text=[format_currency(v) for v in values],
        textposition="outside",
        cliponaxis=False,
        hovertemplate="%{y}: %{x:$,.2f}<extra></extra>",
    ))
    fig.update_layout(
        title=f"Cost Breakdown (total {format_currency(quote.total_cost)})",
        xaxis_title="Cost ($)",
        xaxis_tickprefix="$",
        height=300,
        xaxis=dict(range=[0, max_val * 1.3] if max_val else None),
        yaxis=dict(autorange="reversed"),
    )
    return apply_chart_layout(fig, extra_right=40)
