"""Validation and ordering of raw instrument series."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from numbers import Real
from typing import Any

import pandas as pd

from pricedash.utils.dates import parse_date

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Observation:
    """One (date, price) point of an instrument."""

    date: pd.Timestamp
    price: float


InstrumentSet = dict[str, list[Observation]]


def _parse_price(value: Any) -> float | None:
    # bool is a Real subclass but never a price.
    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    try:
        price = float(value)
    except OverflowError:
        return None
    if not math.isfinite(price):
        return None
    return price


def sanitize(raw_series: Iterable[Any]) -> tuple[list[Observation], list[str]]:
    """Drop invalid entries and sort the rest by date.

    Each rejected entry yields one warning; processing always continues with
    the next entry. Entries sharing a date keep their original order.

    Args:
        raw_series: Sequence of ``{"date": ..., "price": ...}`` mappings

    Returns:
        (observations sorted ascending by date, warning messages)
    """
    kept: list[Observation] = []
    warnings: list[str] = []

    for entry in raw_series:
        if not isinstance(entry, Mapping):
            warnings.append(f"Invalid entry found: {entry!r}")
            continue

        raw_date = entry.get("date")
        ts = parse_date(raw_date)
        if ts is None:
            warnings.append(f"Invalid date found: {raw_date}")
            continue

        raw_price = entry.get("price")
        price = _parse_price(raw_price)
        if price is None:
            warnings.append(f"Invalid price found: {raw_price} (date {raw_date})")
            continue

        kept.append(Observation(date=ts, price=price))

    # sorted() is stable, so equal dates stay in input order.
    kept = sorted(kept, key=lambda obs: obs.date)
    return kept, warnings


def sanitize_instruments(
    document: Mapping[str, Iterable[Any]],
    names: Iterable[str] | None = None,
) -> tuple[InstrumentSet, list[str]]:
    """Sanitize every instrument of a loaded document.

    Warnings are prefixed with the instrument name so the user can tell which
    series an entry was dropped from.
    """
    names = list(names) if names is not None else list(document.keys())

    instruments: InstrumentSet = {}
    warnings: list[str] = []
    for name in names:
        series, series_warnings = sanitize(document.get(name, []))
        instruments[name] = series
        for w in series_warnings:
            logger.warning(f"{name}: {w}")
            warnings.append(f"{name}: {w}")
        logger.info(f"{name}: kept {len(series)} observations, dropped {len(series_warnings)}")

    return instruments, warnings
