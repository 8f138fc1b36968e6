"""Tests for the dashboard page state machine."""
import pytest

from pricedash.config import DashboardConfig
from pricedash.state import (
    Phase,
    ShellState,
    aggregate_warnings,
    data_loaded,
    dismiss_warning,
    expire_warning,
    initial_state,
    load_failed,
    parse_window_size,
    request_retry,
    set_window_size,
    toggle_moving_average,
)


@pytest.fixture
def ready_state() -> ShellState:
    return data_loaded(initial_state(DashboardConfig()), [], now=0.0)


def test_initial_state_uses_config_defaults() -> None:
    state = initial_state(DashboardConfig())
    assert state.phase is Phase.LOADING
    assert state.options.window_size == 10
    assert state.options.show_moving_average is False
    assert state.warning.active is False


def test_toggle_is_noop_until_ready() -> None:
    state = initial_state(DashboardConfig())
    assert toggle_moving_average(state) == state


def test_toggle_flips_flag(ready_state: ShellState) -> None:
    toggled = toggle_moving_average(ready_state)
    assert toggled.options.show_moving_average is True
    assert toggle_moving_average(toggled).options.show_moving_average is False


@pytest.mark.parametrize("raw", ["0", "-3", "abc", "", None, 0, -1, 2.5, True, float("nan")])
def test_invalid_window_input_is_rejected(ready_state: ShellState, raw) -> None:
    assert parse_window_size(raw) is None
    assert set_window_size(ready_state, raw) == ready_state


@pytest.mark.parametrize("raw, expected", [(3, 3), ("7", 7), (" 12 ", 12), (4.0, 4), (50, 50), (75, 50), ("1000", 50)])
def test_window_input_applied_and_clamped(ready_state: ShellState, raw, expected: int) -> None:
    assert set_window_size(ready_state, raw, 1, 50).options.window_size == expected


def test_window_clamped_to_configured_minimum(ready_state: ShellState) -> None:
    assert set_window_size(ready_state, 1, min_size=3, max_size=50).options.window_size == 3


def test_data_loaded_without_warnings_keeps_warning_inactive(ready_state: ShellState) -> None:
    assert ready_state.phase is Phase.READY
    assert ready_state.warning.active is False


def test_data_loaded_with_warnings_activates_concatenated_message() -> None:
    state = data_loaded(initial_state(DashboardConfig()), ["a", "b"], now=100.0)
    assert state.warning.active is True
    assert state.warning.message == "a\nb"
    assert state.warning.shown_at == 100.0


def test_last_policy_keeps_final_warning() -> None:
    assert aggregate_warnings(["first", "second"], "last") == "second"
    assert aggregate_warnings([], "concat") == ""


def test_warning_expires_after_timeout() -> None:
    state = data_loaded(initial_state(DashboardConfig()), ["bad"], now=100.0)
    assert expire_warning(state, now=104.9, timeout=5.0).warning.active is True
    assert expire_warning(state, now=105.0, timeout=5.0).warning.active is False


def test_dismiss_warning() -> None:
    state = data_loaded(initial_state(DashboardConfig()), ["bad"], now=0.0)
    dismissed = dismiss_warning(state)
    assert dismissed.warning.active is False
    assert dismissed.warning.message == "bad"
    assert dismiss_warning(dismissed) == dismissed


def test_failed_load_and_retry() -> None:
    failed = load_failed(initial_state(DashboardConfig()), "boom")
    assert failed.phase is Phase.FAILED
    assert failed.error == "boom"

    retried = request_retry(failed)
    assert retried.phase is Phase.LOADING
    assert retried.error is None


def test_retry_is_noop_unless_failed(ready_state: ShellState) -> None:
    assert request_retry(ready_state) == ready_state


def test_state_round_trips_through_dict() -> None:
    state = toggle_moving_average(data_loaded(initial_state(DashboardConfig()), ["x"], now=1.0))
    data = state.to_dict()
    assert data["phase"] == "ready"
    assert ShellState.from_dict(data) == state
