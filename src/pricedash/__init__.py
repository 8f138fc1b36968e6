"""Instrument price dashboard: load, sanitize, smooth and plot two price series.

The data-preparation modules (ingestion, features, charts, state) are pure and
importable without Streamlit; ``streamlit_app.py`` wires them to the page.
"""

from .config import load_config, DashboardConfig
