"""Matplotlib static PNG renderer."""

from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.collections import PatchCollection
from matplotlib.figure import Figure
from matplotlib.patches import Circle

from colorglobe.models import GlobeFrame

_ROOT = Path(__file__).parent.parent.parent.parent
_BG = "#1e1f22"


def render_static_globe(frame: GlobeFrame, chart_size: int = 6) -> Figure:
    """Render a GlobeFrame as a static matplotlib image.

    Dots are drawn as circles in surface units, so projected radii are kept
    exactly. The y axis is inverted to match screen coordinates.

    Args:
        frame: Fully projected globe frame.
        chart_size: Output image size in inches (longest side).

    Returns:
        matplotlib Figure object.
    """
    aspect = frame.height / frame.width
    fig, ax = plt.subplots(figsize=(chart_size, chart_size * aspect))
    fig.patch.set_facecolor(_BG)
    ax.set_facecolor(_BG)

    dots = [Circle((p.screen_x, p.screen_y), p.radius) for p in frame.points]
    c = frame.dot_color
    collection = PatchCollection(
        dots,
        facecolor=(c.red / 255, c.green / 255, c.blue / 255, c.opacity),
        edgecolor="none",
        zorder=2,
    )
    ax.add_collection(collection)

    ax.set_xlim(0, frame.width)
    ax.set_ylim(frame.height, 0)
    ax.set_aspect("equal")
    ax.axis("off")
    fig.subplots_adjust(left=0, right=1, top=1, bottom=0)

    return fig


def save_static_globe(frame: GlobeFrame, output_path: Path | None = None) -> Path:
    """Save a GlobeFrame as a PNG file.

    Args:
        frame: Fully projected globe frame.
        output_path: Destination path. Auto-generated under results/ if None.

    Returns:
        Path to the saved file.
    """
    if output_path is None:
        filename = (
            f"globe_{len(frame.points)}_{frame.dot_color.to_hex()}"
            f"_{frame.rotation:.2f}.png"
        ).replace(".", "_", 1)
        output_path = _ROOT / "results" / filename

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_static_globe(frame)
    fig.savefig(output_path, facecolor=_BG)
    plt.close(fig)
    return output_path
