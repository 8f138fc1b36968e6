from __future__ import annotations

import logging
import os
import time
from typing import Callable

import streamlit as st

from pricedash.charts import build_figure, compose
from pricedash.config import DEFAULT_CONFIG_PATH, DashboardConfig, SourceConfig, load_config
from pricedash.connectors import SourceLoadError, connector_from_config
from pricedash.features import moving_averages
from pricedash.ingestion import sanitize_instruments
from pricedash.state import (
    Phase,
    ShellState,
    data_loaded,
    dismiss_warning,
    expire_warning,
    initial_state,
    load_failed,
    request_retry,
    set_window_size,
    toggle_moving_average,
)
from pricedash.utils import configure_logging

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "PRICEDASH_CONFIG"

STATE_KEY = "shell_state"
DATA_KEY = "instruments"
WINDOW_INPUT_KEY = "window_size_input"


@st.cache_resource
def get_config(path: str) -> DashboardConfig:
    cfg = load_config(path)
    configure_logging(cfg.logging)
    return cfg


@st.cache_data(show_spinner=False)
def load_instrument_document(source_json: str, instruments: tuple[str, ...]) -> dict:
    """Fetch the raw document once per session; errors are not cached."""
    source = SourceConfig.model_validate_json(source_json)
    return connector_from_config(source, list(instruments)).load_document()


# Page config
st.set_page_config(
    page_title="Instrument Prices · Dashboard",
    page_icon="📈",
    layout="wide",
    initial_sidebar_state="collapsed",
)

st.markdown("""
<style>
    [data-testid="stAppViewContainer"] {
        background: linear-gradient(180deg, #f8fafc 0%, #ffffff 100%);
    }
    #MainMenu, footer {visibility: hidden;}
    .block-container {
        padding-top: 1.5rem;
        max-width: 1400px;
    }
    .stButton > button {
        border-radius: 8px;
        font-weight: 600;
    }
</style>
""", unsafe_allow_html=True)


def _config_path() -> str:
    return os.environ.get(CONFIG_ENV_VAR, str(DEFAULT_CONFIG_PATH))


def _get_state(cfg: DashboardConfig) -> ShellState:
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = initial_state(cfg).to_dict()
    return ShellState.from_dict(st.session_state[STATE_KEY])


def _save_state(state: ShellState) -> None:
    st.session_state[STATE_KEY] = state.to_dict()


def _apply(transition: Callable[[ShellState], ShellState]) -> None:
    """Run a transition against the stored state; used from widget callbacks."""
    cfg = get_config(_config_path())
    _save_state(transition(_get_state(cfg)))


def _on_toggle() -> None:
    _apply(toggle_moving_average)


def _on_window_change() -> None:
    cfg = get_config(_config_path())
    raw = st.session_state.get(WINDOW_INPUT_KEY)
    _apply(lambda s: set_window_size(s, raw, cfg.display.min_window_size, cfg.display.max_window_size))


def _on_dismiss() -> None:
    _apply(dismiss_warning)


def _on_retry() -> None:
    load_instrument_document.clear()
    _apply(request_retry)


def load_data(cfg: DashboardConfig, state: ShellState) -> ShellState:
    """Fetch and sanitize the document; LOADING -> READY or FAILED."""
    with st.spinner("Loading data..."):
        try:
            document = load_instrument_document(
                cfg.source.model_dump_json(), tuple(cfg.instrument_names)
            )
        except SourceLoadError as e:
            logger.exception(f"Error fetching data: {e}")
            return load_failed(state, str(e))

    instruments, warnings = sanitize_instruments(document, cfg.instrument_names)
    st.session_state[DATA_KEY] = instruments
    return data_loaded(state, warnings, time.time(), cfg.notifications.aggregation)


def render_controls(cfg: DashboardConfig, state: ShellState) -> None:
    not_ready = state.phase is not Phase.READY
    col_toggle, col_window, _ = st.columns([1, 1, 2])

    with col_toggle:
        label = "Hide Moving Average" if state.options.show_moving_average else "Show Moving Average"
        st.button(label, key="toggle_moving_average", on_click=_on_toggle, disabled=not_ready)

    with col_window:
        st.number_input(
            "Window Size for Moving Average",
            min_value=cfg.display.min_window_size,
            max_value=cfg.display.max_window_size,
            value=state.options.window_size,
            step=1,
            key=WINDOW_INPUT_KEY,
            on_change=_on_window_change,
            disabled=not_ready,
        )


@st.fragment(run_every="1s")
def render_warning() -> None:
    """Warning banner; reruns on its own so it expires without interaction."""
    cfg = get_config(_config_path())
    state = _get_state(cfg)
    expired = expire_warning(state, time.time(), cfg.notifications.timeout_seconds)
    if expired != state:
        _save_state(expired)
        state = expired

    if state.warning.active:
        col_msg, col_btn = st.columns([6, 1])
        with col_msg:
            st.warning(state.warning.message, icon="⚠️")
        with col_btn:
            st.button("Dismiss", key="dismiss_warning", on_click=_on_dismiss)


def render_error(state: ShellState) -> None:
    st.error(f"Could not load data: {state.error}", icon="🚫")
    st.button("🔄 Retry", key="retry_load", on_click=_on_retry)


def render_chart(cfg: DashboardConfig, state: ShellState) -> None:
    instruments = st.session_state.get(DATA_KEY, {})
    if not any(instruments.values()):
        st.info("No valid observations to plot.")
        return

    averages = moving_averages(instruments, state.options.window_size)
    traces = compose(instruments, averages, state.options, cfg.instruments)
    st.plotly_chart(build_figure(traces, state.options), key="price_chart")


def main():
    cfg = get_config(_config_path())

    st.markdown(f"### 📈 {cfg.title}")

    state = _get_state(cfg)

    if state.phase is Phase.LOADING:
        state = load_data(cfg, state)
    _save_state(state)

    render_controls(cfg, state)
    render_warning()

    if state.phase is Phase.FAILED:
        render_error(state)
    elif state.phase is Phase.READY:
        render_chart(cfg, state)


if __name__ == "__main__":
    main()
