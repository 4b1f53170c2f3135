"""
Quote Form Presentation

Display-only settings for the quote form app.
"""

SIMULATED_LATENCY_S = 1.5     # Spinner delay before showing a quote

BREAKDOWN_COLORS = {
    "Base rate": "#3498db",
    "Weight": "#2ecc71",
    "Handling": "#f39c12",
    "Risk loading": "#9b59b6",
    "Insurance": "#e74c3c",
}
