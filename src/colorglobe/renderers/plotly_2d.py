"""Plotly 2D animated globe renderer.

Each GlobeFrame becomes one animation frame; a play button loops through a
full turn. Plotly sizes markers by diameter in pixels, so the layout is fixed
at the frame's surface size to keep projected radii in screen units.
"""

from typing import Sequence

import numpy as np
import plotly.graph_objects as go

from colorglobe.colorspace import hsv_to_rgb
from colorglobe.compute import ROTATION_PERIOD_MS
from colorglobe.models import GlobeFrame, RGBColor
from colorglobe.picker import PickerState, clamp_offset

_BG = "#1e1f22"


def _dot_trace(frame: GlobeFrame) -> go.Scatter:
    c = frame.dot_color
    return go.Scatter(
        x=[p.screen_x for p in frame.points],
        y=[p.screen_y for p in frame.points],
        mode="markers",
        marker=dict(
            size=list(np.array([p.radius for p in frame.points]) * 2),
            color=f"rgba({c.red},{c.green},{c.blue},{c.opacity:.3f})",
            line=dict(width=0),
        ),
        hoverinfo="skip",
        name="dots",
    )


def render_plotly_globe(frames: Sequence[GlobeFrame]) -> go.Figure:
    """Render GlobeFrames as an animated Plotly figure.

    Args:
        frames: Frames of one turn, in rotation order. Must be non-empty and
            share one surface size.

    Returns:
        Plotly Figure object. The first frame is the static view.
    """
    if not frames:
        raise ValueError("render_plotly_globe needs at least one frame")
    first = frames[0]
    frame_ms = ROTATION_PERIOD_MS / len(frames)

    fig = go.Figure(
        data=[_dot_trace(first)],
        frames=[go.Frame(data=[_dot_trace(f)], name=str(i)) for i, f in enumerate(frames)],
    )

    fig.update_layout(
        paper_bgcolor=_BG,
        plot_bgcolor=_BG,
        showlegend=False,
        margin=dict(l=0, r=0, t=0, b=0),
        width=int(first.width),
        height=int(first.height),
        xaxis=dict(visible=False, range=[0, first.width], fixedrange=True),
        # Screen y grows downward
        yaxis=dict(visible=False, range=[first.height, 0], fixedrange=True),
        updatemenus=[
            dict(
                type="buttons",
                showactive=False,
                x=0.02,
                y=0.02,
                xanchor="left",
                yanchor="bottom",
                buttons=[
                    dict(
                        label="▶",
                        method="animate",
                        args=[
                            None,
                            dict(
                                frame=dict(duration=frame_ms, redraw=False),
                                transition=dict(duration=0),
                                fromcurrent=True,
                                mode="immediate",
                            ),
                        ],
                    )
                ],
            )
        ],
    )

    fig._config = {"displayModeBar": False}  # type: ignore[attr-defined]

    return fig


def _rgba(color: RGBColor) -> str:
    return f"rgba({color.red},{color.green},{color.blue},{color.opacity:.3f})"


def _selectable_layout(fig: go.Figure, width: float, height: float) -> None:
    # Clicks select a single marker; Streamlit reports its x/y in surface units
    fig.update_layout(
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        showlegend=False,
        margin=dict(l=0, r=0, t=0, b=0),
        width=int(width),
        height=int(height),
        xaxis=dict(visible=False, range=[0, width], fixedrange=True),
        yaxis=dict(visible=False, range=[height, 0], fixedrange=True),
        clickmode="event+select",
        dragmode=False,
    )
    fig._config = {"displayModeBar": False}  # type: ignore[attr-defined]


def render_spectrum(
    state: PickerState, width: float, height: float, steps: int = 21
) -> go.Figure:
    """Saturation/brightness spectrum at the state's hue.

    A steps x steps grid of square markers; x maps to saturation and y to
    brightness (top is brightest). Trace 0 is the grid, trace 1 the pointer
    at state.spectrum_offset().

    Args:
        state: Picker state supplying hue and pointer position.
        width: Spectrum width in pixels.
        height: Spectrum height in pixels.
        steps: Grid cells per side (>= 2).

    Returns:
        Plotly Figure object.
    """
    if steps < 2:
        raise ValueError(f"steps must be at least 2, got {steps}")
    grid_x, grid_y = np.meshgrid(np.linspace(0, width, steps), np.linspace(0, height, steps))
    grid_x = grid_x.ravel()
    grid_y = grid_y.ravel()
    colors = [
        "rgb({},{},{})".format(*hsv_to_rgb(state.hue, x / width * 100, (1 - y / height) * 100))
        for x, y in zip(grid_x, grid_y)
    ]
    pointer_x, pointer_y = state.spectrum_offset(width, height)

    fig = go.Figure(
        data=[
            go.Scatter(
                x=grid_x,
                y=grid_y,
                mode="markers",
                marker=dict(
                    symbol="square",
                    size=max(width, height) / (steps - 1) + 1,
                    color=colors,
                    line=dict(width=0),
                ),
                hoverinfo="none",
                name="spectrum",
            ),
            go.Scatter(
                x=[pointer_x],
                y=[pointer_y],
                mode="markers",
                marker=dict(
                    size=12,
                    color="rgba(0,0,0,0)",
                    line=dict(width=2, color="white"),
                ),
                hoverinfo="skip",
                name="pointer",
            ),
        ]
    )
    _selectable_layout(fig, width, height)
    return fig


def render_track(
    colors: Sequence[RGBColor],
    fraction: float,
    width: float,
    height: float = 14,
    thumb_width: float = 14,
) -> go.Figure:
    """Horizontal slider track with a thumb at fraction of its length.

    Colors are spread evenly from x=0 to x=width as clickable markers. The
    thumb is a rectangle positioned with clamp_offset().

    Args:
        colors: Track stops, left to right (at least two).
        fraction: Thumb position in [0, 1].
        width: Track length in pixels.
        height: Track height in pixels.
        thumb_width: Thumb width in pixels.

    Returns:
        Plotly Figure object.
    """
    if len(colors) < 2:
        raise ValueError("render_track needs at least two colors")
    xs = np.linspace(0, width, len(colors))
    left = clamp_offset(fraction * width, width, thumb_width)

    fig = go.Figure(
        data=[
            go.Scatter(
                x=xs,
                y=[height / 2] * len(colors),
                mode="markers",
                marker=dict(
                    symbol="square",
                    size=max(width / (len(colors) - 1) + 1, height),
                    color=[_rgba(c) for c in colors],
                    line=dict(width=0),
                ),
                hoverinfo="none",
                name="track",
            )
        ]
    )
    fig.add_shape(
        type="rect",
        x0=left,
        x1=left + thumb_width,
        y0=0,
        y1=height,
        line=dict(color="white", width=2),
        fillcolor="rgba(0,0,0,0)",
    )
    _selectable_layout(fig, width, height)
    return fig
