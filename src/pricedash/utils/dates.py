from __future__ import annotations

from datetime import date

import pandas as pd


def parse_date(value: object) -> pd.Timestamp | None:
    """Parse a calendar date, returning None when the value is not one.

    Accepts date/datetime objects and text pandas understands (YYYY-MM-DD and
    similar). Tz-aware values are converted to UTC and made naive so dates
    from one document always compare.
    """
    if isinstance(value, str):
        # Words like "now" or "today" parse to the wall clock, not a calendar date.
        if not any(ch.isdigit() for ch in value):
            return None
    elif not isinstance(value, date):
        # Numbers would otherwise parse as epoch offsets.
        return None

    ts = pd.to_datetime(value, errors="coerce")
    if pd.isna(ts):
        return None
    ts = pd.Timestamp(ts)
    if ts.tzinfo is not None:
        ts = ts.tz_convert("UTC").tz_localize(None)
    return ts
