from .shell import (
    Phase,
    ShellState,
    WarningState,
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

__all__ = [
    "Phase",
    "ShellState",
    "WarningState",
    "aggregate_warnings",
    "data_loaded",
    "dismiss_warning",
    "expire_warning",
    "initial_state",
    "load_failed",
    "parse_window_size",
    "request_retry",
    "set_window_size",
    "toggle_moving_average",
]
