from __future__ import annotations

from collections.abc import Mapping, Sequence
from numbers import Integral

import pandas as pd

from pricedash.ingestion.sanitize import Observation


class WindowSizeError(ValueError):
    """Window size is not a positive integer."""


def _check_window(window_size: int) -> int:
    if isinstance(window_size, bool) or not isinstance(window_size, Integral):
        raise WindowSizeError(f"window_size must be an integer, got {window_size!r}")
    if window_size < 1:
        raise WindowSizeError(f"window_size must be >= 1, got {window_size}")
    return int(window_size)


def moving_average(series: Sequence[Observation], window_size: int) -> list[float]:
    """Trailing simple moving average, same length as ``series``.

    The window at index i covers the last ``min(window_size, i + 1)`` prices,
    so the first values average over a shorter window instead of being NaN.
    """
    window_size = _check_window(window_size)
    if len(series) == 0:
        return []

    prices = pd.Series([obs.price for obs in series], dtype="float64")
    return prices.rolling(window=window_size, min_periods=1).mean().tolist()


def moving_averages(instruments: Mapping[str, Sequence[Observation]], window_size: int) -> dict[str, list[float]]:
    return {name: moving_average(series, window_size) for name, series in instruments.items()}
