"""Assembly of the plot series shown on the dashboard.

Raw mode draws one line+markers trace per instrument; moving-average mode
draws one dotted line per instrument in the same color. The two modes are
never mixed in one figure.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

import plotly.graph_objects as go

from pricedash.config import InstrumentSpec
from pricedash.ingestion.sanitize import Observation

# Used for instruments without a configured color, by position.
DEFAULT_PALETTE = ("#17BECF", "#7F7F7F", "#3b82f6", "#10b981", "#f59e0b", "#ef4444")


@dataclass(frozen=True)
class DisplayOptions:
    show_moving_average: bool = False
    window_size: int = 10


@dataclass(frozen=True)
class TraceSpec:
    name: str
    x: tuple[Any, ...]
    y: tuple[float, ...]
    mode: str
    color: str
    dash: str | None = None
    marker_size: int | None = None

    def to_scatter(self) -> go.Scatter:
        line = dict(color=self.color)
        if self.dash:
            line["dash"] = self.dash
        kwargs: dict[str, Any] = dict(
            x=list(self.x),
            y=list(self.y),
            mode=self.mode,
            name=self.name,
            line=line,
        )
        if self.marker_size is not None:
            kwargs["marker"] = dict(color=self.color, size=self.marker_size)
        return go.Scatter(**kwargs)


def _resolve_styles(
    names: Sequence[str], styles: Sequence[InstrumentSpec] | None
) -> dict[str, InstrumentSpec]:
    configured = {spec.name: spec for spec in (styles or [])}
    resolved = {}
    for idx, name in enumerate(names):
        spec = configured.get(name) or InstrumentSpec(name=name)
        if spec.color is None:
            spec = spec.model_copy(update={"color": DEFAULT_PALETTE[idx % len(DEFAULT_PALETTE)]})
        resolved[name] = spec
    return resolved


def compose(
    instruments: Mapping[str, Sequence[Observation]],
    averages: Mapping[str, Sequence[float]],
    options: DisplayOptions,
    styles: Sequence[InstrumentSpec] | None = None,
) -> list[TraceSpec]:
    """Build the trace descriptors for the active display mode.

    Args:
        instruments: Sanitized series keyed by instrument name, in plot order
        averages: Moving averages keyed by instrument name; only read in
            moving-average mode
        options: Current display options
        styles: Per-instrument colors; missing ones fall back to DEFAULT_PALETTE

    Returns:
        One TraceSpec per instrument
    """
    resolved = _resolve_styles(list(instruments), styles)
    traces: list[TraceSpec] = []

    for name, series in instruments.items():
        spec = resolved[name]
        dates = tuple(obs.date for obs in series)

        if options.show_moving_average:
            avg = averages[name]
            if len(avg) != len(series):
                raise ValueError(
                    f"{name}: {len(avg)} averages for {len(series)} observations"
                )
            traces.append(
                TraceSpec(
                    name=f"{name} Moving Average ({options.window_size} days)",
                    x=dates,
                    y=tuple(float(v) for v in avg),
                    mode="lines",
                    color=spec.color,
                    dash="dot",
                )
            )
        else:
            traces.append(
                TraceSpec(
                    name=f"{name} Price",
                    x=dates,
                    y=tuple(obs.price for obs in series),
                    mode="lines+markers",
                    color=spec.color,
                    marker_size=spec.marker_size,
                )
            )

    return traces


def build_figure(traces: Sequence[TraceSpec], options: DisplayOptions) -> go.Figure:
    fig = go.Figure()
    for trace in traces:
        fig.add_trace(trace.to_scatter())

    fig.update_layout(
        title=dict(text="Moving Average" if options.show_moving_average else "Price"),
        height=500,
        margin=dict(l=60, r=20, t=60, b=50),
        xaxis=dict(gridcolor="rgba(148, 163, 184, 0.2)", showgrid=True, title="Date"),
        yaxis=dict(gridcolor="rgba(148, 163, 184, 0.2)", showgrid=True, title="Price"),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="center", x=0.5),
        hovermode="x unified",
    )
    return fig
