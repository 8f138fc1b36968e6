"""
UI state of the dashboard page.

The page holds one ShellState in the Streamlit session and replaces it through
the transition functions below; nothing else mutates it. Every transition is a
pure function of its inputs (the current time is passed in), which keeps the
page logic testable without a running Streamlit server.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field, replace
from enum import Enum
from typing import Any, Literal, Optional

from pricedash.charts.compose import DisplayOptions
from pricedash.config import DashboardConfig

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class WarningState:
    message: str = ""
    active: bool = False
    shown_at: Optional[float] = None  # epoch seconds


@dataclass(frozen=True)
class ShellState:
    phase: Phase = Phase.LOADING
    options: DisplayOptions = field(default_factory=DisplayOptions)
    warning: WarningState = field(default_factory=WarningState)
    error: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["phase"] = self.phase.value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ShellState":
        return cls(
            phase=Phase(data["phase"]),
            options=DisplayOptions(**data["options"]),
            warning=WarningState(**data["warning"]),
            error=data.get("error"),
        )


def initial_state(cfg: DashboardConfig) -> ShellState:
    return ShellState(
        options=DisplayOptions(
            show_moving_average=cfg.display.show_moving_average,
            window_size=cfg.display.default_window_size,
        )
    )


def aggregate_warnings(warnings: list[str], policy: Literal["concat", "last"] = "concat") -> str:
    if not warnings:
        return ""
    if policy == "last":
        return warnings[-1]
    return "\n".join(warnings)


def data_loaded(
    state: ShellState,
    warnings: list[str],
    now: float,
    policy: Literal["concat", "last"] = "concat",
) -> ShellState:
    """Enter READY; raise the warning if the sanitizer rejected anything."""
    state = replace(state, phase=Phase.READY, error=None)
    if warnings:
        state = replace(
            state,
            warning=WarningState(message=aggregate_warnings(warnings, policy), active=True, shown_at=now),
        )
    return state


def load_failed(state: ShellState, message: str) -> ShellState:
    return replace(state, phase=Phase.FAILED, error=message)


def request_retry(state: ShellState) -> ShellState:
    if state.phase is not Phase.FAILED:
        return state
    return replace(state, phase=Phase.LOADING, error=None)


def toggle_moving_average(state: ShellState) -> ShellState:
    if state.phase is not Phase.READY:
        return state
    options = replace(state.options, show_moving_average=not state.options.show_moving_average)
    return replace(state, options=options)


def parse_window_size(raw: Any) -> Optional[int]:
    """Return a positive integer window size, or None if ``raw`` is not one."""
    if isinstance(raw, bool) or raw is None:
        return None
    if isinstance(raw, str):
        raw = raw.strip()
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if value != value or value in (float("inf"), float("-inf")):
        return None
    if not value.is_integer() or value <= 0:
        return None
    return int(value)


def set_window_size(state: ShellState, raw: Any, min_size: int = 1, max_size: int = 50) -> ShellState:
    """Apply user input to the window size.

    Non-numeric, fractional and non-positive input is rejected and leaves the
    state unchanged; anything outside [min_size, max_size] is clamped.
    """
    value = parse_window_size(raw)
    if value is None:
        logger.info(f"Rejected window size input: {raw!r}")
        return state

    clamped = min(max(value, min_size), max_size)
    if clamped != value:
        logger.info(f"Clamped window size {value} to {clamped}")
    if clamped == state.options.window_size:
        return state
    return replace(state, options=replace(state.options, window_size=clamped))


def dismiss_warning(state: ShellState) -> ShellState:
    if not state.warning.active:
        return state
    return replace(state, warning=replace(state.warning, active=False))


def expire_warning(state: ShellState, now: float, timeout: float = 5.0) -> ShellState:
    w = state.warning
    if not w.active or w.shown_at is None:
        return state
    if now - w.shown_at >= timeout:
        return dismiss_warning(state)
    return state
