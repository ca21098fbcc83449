"""
Availability chart for the bottom sheet.

Turns the seven-day availability series into bar primitives and a plotly
figure. Values are already percentages (0-100); the y axis is pinned to that
range so short weeks are not stretched.
"""

import json
import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path

import plotly.graph_objects as go

import config
from log_setup import get_logger

logger = get_logger(__name__)

SERIES_LENGTH = 7

DAY_LABELS = {
    1: "10 Apr",
    2: "11 Apr",
    3: "12 Apr",
    4: "13 Apr",
    5: "14 Apr",
    6: "15 Apr",
    7: "16 Apr",
}
DEFAULT_DAY_LABEL = "17 Apr"
MISSING_PERCENT = "-%"


@dataclass(frozen=True)
class Bar:
    ordinal: int
    day: str
    axis_label: str
    value: float
    text: str
    color: str


def format_percent(value: float) -> str:
    """Nearest whole percent, halves rounded away from zero: 54.5 -> "55%".

    Rounds the exact binary value, so 0.49999999999999994 stays "0%".
    NaN and infinities have no percentage and render as ``MISSING_PERCENT``.
    """
    value = float(value)
    if not math.isfinite(value):
        return MISSING_PERCENT
    rounded = Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return f"{int(rounded)}%"


def day_label(ordinal) -> str:
    """Date label for bar ``ordinal`` (1..7); anything else gets the day after."""
    try:
        key = int(ordinal)
    except (TypeError, ValueError, OverflowError):
        return DEFAULT_DAY_LABEL
    if key != ordinal:
        return DEFAULT_DAY_LABEL
    return DAY_LABELS.get(key, DEFAULT_DAY_LABEL)


def bar_colors(count: int) -> list[str]:
    if count <= 0:
        return []
    return [config.ACCENT_COLOR] + [config.SECONDARY_COLOR] * (count - 1)


def load_series(path) -> tuple[tuple[str, float], ...]:
    """Read the availability fixture as (weekday, percent available) pairs."""
    with open(Path(path), "r") as f:
        j = json.load(f)

    try:
        capacity = float(j["capacity"])
        days = j["days"]
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError(f"{path}: expected numeric capacity and a days list") from exc
    if capacity <= 0:
        raise ValueError(f"{path}: capacity must be positive, got {capacity}")
    if len(days) != SERIES_LENGTH:
        raise ValueError(f"{path}: expected {SERIES_LENGTH} days, got {len(days)}")

    series = []
    for d in days:
        try:
            series.append((str(d["label"]), float(d["available"]) / capacity * 100))
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"{path}: bad day entry {d!r}") from exc

    logger.info("Loaded %d-day availability series from %s", len(series), path)
    return tuple(series)


def build_bars(series) -> list[Bar]:
    colors = bar_colors(len(series))
    bars = []
    for i, ((day, value), color) in enumerate(zip(series, colors), start=1):
        bars.append(
            Bar(
                ordinal=i,
                day=day,
                axis_label=day_label(i),
                value=float(value),
                text=format_percent(value),
                color=color,
            )
        )
    return bars


def availability_figure(series, height: int = config.CHART_HEIGHT) -> go.Figure:
    bars = build_bars(series)

    fig = go.Figure()
    fig.add_trace(
        go.Bar(
            x=[b.ordinal for b in bars],
            y=[b.value for b in bars],
            text=[b.text for b in bars],
            textposition="outside",
            marker=dict(color=[b.color for b in bars]),
            customdata=[b.day for b in bars],
            hovertemplate="%{customdata}: %{text}<extra></extra>",
            showlegend=False,
        )
    )
    fig.update_layout(
        height=height,
        margin=dict(l=0, r=0, t=10, b=0),
        showlegend=False,
        plot_bgcolor="rgba(0,0,0,0)",
    )
    fig.update_yaxes(
        range=list(config.CHART_Y_RANGE),
        autorange=False,
        fixedrange=True,
        showgrid=False,
        showticklabels=False,
        showline=False,
        zeroline=False,
    )
    fig.update_xaxes(
        tickmode="array",
        tickvals=[b.ordinal for b in bars],
        ticktext=[b.axis_label for b in bars],
        showgrid=False,
        showline=False,
        fixedrange=True,
    )
    return fig
