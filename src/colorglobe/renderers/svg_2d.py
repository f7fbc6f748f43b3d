"""SVG globe renderer.

Produces a self-contained HTML string (SVG + JS) for embedding via
st.components.v1.html(). The viewBox equals the frame's surface size, so
projected coordinates and radii are used as-is:

  x in [0, width]   (left to right)
  y in [0, height]  (top to bottom, screen convention)
"""

from __future__ import annotations

from colorglobe.models import GlobeFrame, RGBColor

_BG = "#1e1f22"
_DOT_ZERO_RADIUS = 0.0005  # Radii below this are not drawn


def _fill(color: RGBColor) -> str:
    return f"#{color.to_hex()}"


def render_svg(frame: GlobeFrame) -> str:
    """Return the bare <svg> element for a frame."""
    fill = _fill(frame.dot_color)
    opacity = frame.dot_color.opacity
    dot_parts = [
        f'<circle cx="{p.screen_x:.2f}" cy="{p.screen_y:.2f}" r="{p.radius:.3f}"/>'
        for p in frame.points
        if p.radius > _DOT_ZERO_RADIUS
    ]
    dots_svg = "\n    ".join(dot_parts)
    return (
        f'<svg id="globe" viewBox="0 0 {frame.width:g} {frame.height:g}"'
        f' xmlns="http://www.w3.org/2000/svg" preserveAspectRatio="xMidYMid meet">\n'
        f'  <rect x="0" y="0" width="{frame.width:g}" height="{frame.height:g}" fill="{_BG}"/>\n'
        f'  <g id="dots" fill="{fill}" fill-opacity="{opacity:.3f}">\n'
        f"    {dots_svg}\n"
        f"  </g>\n"
        f"</svg>"
    )


def render_svg_html(
    frame: GlobeFrame,
    filename: str = "globe.png",
    save_label: str = "↓ Save",
) -> str:
    """Return a self-contained HTML page with an SVG globe.

    A save button rasterizes the SVG to PNG in the browser and downloads it.

    Args:
        frame: Fully projected globe frame.
        filename: Suggested filename for the downloaded PNG.
        save_label: Button label (already translated).

    Returns:
        HTML string suitable for st.components.v1.html().
    """
    svg = render_svg(frame)
    # Escape for safe embedding as a JS string literal.
    filename_js = filename.replace("\\", "\\\\").replace('"', '\\"')

    return f"""<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<style>
* {{ margin: 0; padding: 0; box-sizing: border-box; }}
html, body {{
    width: 100%;
    height: 100%;
    background: {_BG};
    overflow: hidden;
}}
svg#globe {{
    display: block;
    width: 100%;
    height: 100%;
}}
#save-btn {{
    position: fixed;
    bottom: 0.5rem;
    right: 0.5rem;
    background: rgba(30,31,34,0.85);
    color: #bbbbbb;
    border: 1px solid rgba(187,187,187,0.4);
    border-radius: 6px;
    padding: 0.3rem 0.7rem;
    font-size: 0.8rem;
    cursor: pointer;
}}
</style>
</head>
<body>
{svg}
<button id="save-btn" onclick="saveGlobe()">{save_label}</button>
<script>
function saveGlobe() {{
    var svg = document.getElementById('globe');
    var data = new XMLSerializer().serializeToString(svg);
    var img = new Image();
    img.onload = function() {{
        var canvas = document.createElement('canvas');
        canvas.width = {int(frame.width)};
        canvas.height = {int(frame.height)};
        canvas.getContext('2d').drawImage(img, 0, 0);
        var a = document.createElement('a');
        a.download = "{filename_js}";
        a.href = canvas.toDataURL('image/png');
        a.click();
    }};
    img.src = 'data:image/svg+xml;charset=utf-8,' + encodeURIComponent(data);
}}
</script>
</body>
</html>"""
