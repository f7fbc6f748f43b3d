import json

import pytest

from colorglobe.models import ColorEntry, RGBColor
from colorglobe.palette import (
    DEFAULTS_DIR,
    count_rows,
    filter_colors,
    group_by_color,
    load_color_defaults,
    resolve_theme,
    rgba_string,
    update_color,
)

RED = RGBColor(255, 0, 0)
BLUE = RGBColor(0, 0, 255)
GLASS = RGBColor(255, 255, 255, 64)


@pytest.fixture
def table():
    return {
        "Button.background": RED,
        "Button.foreground": BLUE,
        "Panel.background": RED,
        "ScrollBar.thumbColor": GLASS,
    }


def test_load_color_defaults_skips_non_colors(tmp_path):
    path = tmp_path / "defaults.json"
    path.write_text(
        json.dumps(
            {
                "Tree.background": "ffffff",
                "Button.arc": 6,
                "Label.font": "JetBrains Mono",
                "Area.overlay": "#00000080",
                "Tree.paintLines": False,
            }
        ),
        encoding="utf-8",
    )
    colors = load_color_defaults(path)
    assert list(colors) == ["Area.overlay", "Tree.background"]
    assert colors["Area.overlay"] == RGBColor(0, 0, 0, 128)


def test_load_color_defaults_rejects_non_object(tmp_path):
    path = tmp_path / "defaults.json"
    path.write_text(json.dumps(["Tree.background", "ffffff"]), encoding="utf-8")
    with pytest.raises(ValueError, match="defaults.json"):
        load_color_defaults(path)


def test_shipped_defaults_load():
    colors = load_color_defaults(DEFAULTS_DIR / "darcula.json")
    assert colors["Panel.background"] == RGBColor(60, 63, 65)
    assert "Label.font" not in colors
    assert list(colors) == sorted(colors)


def test_filter_is_case_insensitive(table):
    assert list(filter_colors(table, "BACKGROUND")) == [
        "Button.background",
        "Panel.background",
    ]
    assert filter_colors(table, "") == table
    assert filter_colors(table, "missing") == {}


def test_filter_only_alpha(table):
    assert filter_colors(table, "", only_alpha=True) == {"ScrollBar.thumbColor": GLASS}
    assert filter_colors(table, "button", only_alpha=True) == {}


def test_group_by_color_keeps_first_seen_order(table):
    grouped = group_by_color(table)
    assert list(grouped) == [RED, BLUE, GLASS]
    assert grouped[RED] == [
        ColorEntry("Button.background", RED),
        ColorEntry("Panel.background", RED),
    ]


def test_count_rows(table):
    assert count_rows(table, grouped=False) == 4
    # 3 headers + 4 entries
    assert count_rows(table, grouped=True) == 7
    assert count_rows({}, grouped=True) == 0


@pytest.mark.parametrize(
    "color, expected",
    [
        (RGBColor(60, 63, 65), "rgb(60,63,65), #3c3f41"),
        (RGBColor(61, 125, 204, 85), "rgba(61,125,204,0.33), #3d7dcc55"),
        (RGBColor(0, 0, 0, 128), "rgba(0,0,0,0.5), #00000080"),
        (RGBColor(0, 0, 0, 0), "rgba(0,0,0,0.0), #00000000"),
    ],
)
def test_rgba_string(color, expected):
    assert rgba_string(color) == expected


def test_update_color_returns_copy(table):
    updated = update_color(table, "Button.foreground", RED)
    assert updated["Button.foreground"] == RED
    assert table["Button.foreground"] == BLUE
    added = update_color(table, "Aaa.new", GLASS)
    assert list(added)[0] == "Aaa.new"


def test_resolve_dark_theme():
    colors = load_color_defaults(DEFAULTS_DIR / "darcula.json")
    theme = resolve_theme(colors)
    assert theme.is_dark
    assert theme.background == RGBColor(43, 43, 43)
    assert theme.surface == RGBColor(43, 43, 43)
    assert theme.on_surface == RGBColor(187, 187, 187)


def test_resolve_light_theme():
    colors = load_color_defaults(DEFAULTS_DIR / "intellij_light.json")
    theme = resolve_theme(colors)
    assert not theme.is_dark
    assert theme.background == RGBColor(242, 242, 242)
    assert theme.surface == RGBColor(255, 255, 255)
    assert theme.on_background == RGBColor(0, 0, 0)


def test_resolve_theme_editor_override(table):
    table["Panel.foreground"] = BLUE
    theme = resolve_theme(table, editor_background=GLASS)
    assert theme.surface == GLASS


def test_resolve_theme_requires_panel_keys(table):
    with pytest.raises(KeyError):
        resolve_theme({"Button.background": RED})
