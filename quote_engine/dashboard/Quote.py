"""
Shipping Quote Form
===================

Streamlit front end: shipment form, quote results, new-quote reset.
The QuoteSession lives in st.session_state, so the last quote survives
reruns for the browser session and nothing else.

Run with:
    streamlit run quote_engine/dashboard/Quote.py
"""

import time

import streamlit as st

from quote_engine.categories import ALL as CATEGORIES
from quote_engine.dashboard.charts import breakdown_figure, format_currency
from quote_engine.data import MAX_WEIGHT_KG
from quote_engine.data.reference.ui import SIMULATED_LATENCY_S
from quote_engine.errors import InvalidInput
from quote_engine.services import ALL as SERVICES
from quote_engine.session import QuoteSession
from quote_engine.version import VERSION

# =============================================================================
# PAGE CONFIG
# =============================================================================

st.set_page_config(
    page_title="Shipping Quote",
    page_icon="📦",
    layout="centered",
)

if "quote_session" not in st.session_state:
    st.session_state["quote_session"] = QuoteSession()
session: QuoteSession = st.session_state["quote_session"]


def new_quote() -> None:
    session.reset()


# =============================================================================
# RESULTS
# =============================================================================

st.title("Shipping Quote")
st.caption(f"Calculator version {VERSION}")

quote = session.last_quote

if quote is not None:
    st.success(f"Tracking number: **{quote.tracking_number}**")

    col1, col2 = st.columns(2)
    col1.metric("Total", format_currency(quote.total_cost))
    col2.metric("Estimated delivery", quote.estimated_delivery_date)

    st.markdown("---")
    st.markdown(f"Base rate: **{format_currency(quote.base_cost)}**")
    st.markdown(f"Weight: **{format_currency(quote.weight_cost)}**")
    st.markdown(f"Handling: **{format_currency(quote.handling_cost)}**")
    st.markdown(f"Insurance: **{format_currency(quote.insurance_cost)}**")

    st.plotly_chart(breakdown_figure(quote), use_container_width=True)

    with st.expander("Export"):
        st.json(session.export_quote())

    st.button("Get a new quote", on_click=new_quote, type="primary")
    st.stop()


# =============================================================================
# FORM
# =============================================================================

with st.form("shippingForm"):
    weight = st.number_input(
        "Weight (kg)",
        min_value=0.0,
        max_value=MAX_WEIGHT_KG,
        value=1.0,
        step=0.1,
    )
    dimensions = st.text_input("Dimensions (cm)", placeholder="30x20x15")
    shipping_type = st.selectbox(
        "Service",
        [s.name for s in SERVICES],
        format_func=lambda name: next(s.label for s in SERVICES if s.name == name),
    )
    package_type = st.selectbox(
        "Package type",
        [c.name for c in CATEGORIES],
        format_func=lambda name: next(c.label for c in CATEGORIES if c.name == name),
    )
    insurance = st.checkbox("Add insurance (3% of subtotal, minimum $5.00)")

    submitted = st.form_submit_button("Calculate Shipping Cost", type="primary")

if submitted:
    form = {
        "weight": str(weight),
        "dimensions": dimensions,
        "shippingType": shipping_type,
        "packageType": package_type,
    }
    if insurance:
        form["insurance"] = "on"

    try:
        with st.spinner("Calculating..."):
            time.sleep(SIMULATED_LATENCY_S)
            session.submit(form)
    except InvalidInput as e:
        st.error(str(e))
    else:
        st.rerun()
