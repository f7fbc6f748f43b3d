"""Look-and-feel color defaults browser."""

import json
import logging
import math
from pathlib import Path

from colorglobe.colorspace import ColorParseError
from colorglobe.models import ColorEntry, RGBColor, ThemeColors

logger = logging.getLogger(__name__)

_ROOT = Path(__file__).parent.parent.parent
DEFAULTS_DIR = _ROOT / "resources" / "color_defaults"

SURFACE_KEY = "Panel.background"
ON_SURFACE_KEY = "Panel.foreground"
EDITOR_BACKGROUND_KEY = "EditorPane.background"


def load_color_defaults(path: Path) -> dict[str, RGBColor]:
    """Parse a JSON defaults table and return the color entries sorted by key.

    File format: a JSON object of ``"Key.name": "rrggbb"`` or ``"rrggbbaa"``.
    Entries that are not hex color strings (fonts, insets, flags) are skipped.

    Args:
        path: JSON file path.

    Returns:
        Mapping of key to RGBColor, in key order.

    Raises:
        ValueError: If the top level of the file is not a JSON object.
    """
    with path.open(encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, dict):
        raise ValueError(
            f"Color defaults in {path} must be a JSON object, got {type(raw).__name__}"
        )

    colors: dict[str, RGBColor] = {}
    for key, value in raw.items():
        if not isinstance(value, str):
            logger.debug("Skipping non-color default %s=%r", key, value)
            continue
        try:
            colors[key] = RGBColor.from_hex(value)
        except ColorParseError:
            logger.debug("Skipping unparseable color default %s=%r", key, value)
    logger.info("Loaded %d color defaults from %s", len(colors), path)
    return dict(sorted(colors.items()))


def filter_colors(
    defaults: dict[str, RGBColor], query: str, only_alpha: bool = False
) -> dict[str, RGBColor]:
    """Keep entries whose key contains query (case-insensitive).

    With only_alpha, also require a translucent color (alpha < 255).
    """
    needle = query.lower()
    return {
        key: color
        for key, color in defaults.items()
        if needle in key.lower() and (not only_alpha or color.alpha < 255)
    }


def group_by_color(defaults: dict[str, RGBColor]) -> dict[RGBColor, list[ColorEntry]]:
    """Group keys sharing the same color. Groups keep first-seen order."""
    grouped: dict[RGBColor, list[ColorEntry]] = {}
    for key, color in defaults.items():
        grouped.setdefault(color, []).append(ColorEntry(key=key, color=color))
    return grouped


def count_rows(defaults: dict[str, RGBColor], grouped: bool) -> int:
    """Number of list rows. Grouped lists add one header row per color."""
    if not grouped:
        return len(defaults)
    groups = group_by_color(defaults)
    return len(groups) + sum(len(entries) for entries in groups.values())


def rgba_string(color: RGBColor) -> str:
    """CSS-style label with hex, e.g. "rgb(60,63,65), #3c3f41".

    Translucent colors use rgba() with alpha floored to two decimals and an
    eight-digit hex.
    """
    if color.alpha < 255:
        alpha = math.floor(color.alpha / 255.0 * 100) / 100
        return (
            f"rgba({color.red},{color.green},{color.blue},{alpha}), "
            f"#{color.to_hex(include_alpha=True)}"
        )
    return f"rgb({color.red},{color.green},{color.blue}), #{color.to_hex()}"


def update_color(
    defaults: dict[str, RGBColor], key: str, color: RGBColor
) -> dict[str, RGBColor]:
    """Return a copy of defaults with key set to color, in key order."""
    updated = dict(defaults)
    updated[key] = color
    return dict(sorted(updated.items()))


def resolve_theme(
    defaults: dict[str, RGBColor], editor_background: RGBColor | None = None
) -> ThemeColors:
    """Resolve background/surface colors for hosting UI.

    A theme is dark when the panel background has HSV value below 50. Dark
    themes paint both background and surface with the editor background;
    light themes use the panel color as background and the editor color as
    surface.

    Raises:
        KeyError: If the panel background or foreground key is missing.
    """
    surface = defaults[SURFACE_KEY]
    on_surface = defaults[ON_SURFACE_KEY]
    if editor_background is None:
        editor_background = defaults.get(EDITOR_BACKGROUND_KEY, surface)

    is_dark = surface.to_hsv().value < 50
    if is_dark:
        background = editor_background
        resolved_surface = editor_background
    else:
        background = surface
        resolved_surface = editor_background

    return ThemeColors(
        is_dark=is_dark,
        background=background,
        on_background=on_surface,
        surface=resolved_surface,
        on_surface=on_surface,
    )
