import pytest

from colorglobe.colorspace import ColorParseError
from colorglobe.models import RGBColor
from colorglobe.picker import PickerState, clamp_offset


@pytest.fixture
def state():
    return PickerState()


def test_default_state_is_consistent(state):
    assert (state.red, state.green, state.blue) == (0, 255, 255)
    assert state.color == RGBColor(0, 255, 255, 255)
    assert state.hex == "00ffff"


def test_transitions_return_new_state(state):
    moved = state.with_hue(120)
    assert moved is not state
    assert state.hue == 180


def test_with_hue_updates_rgb(state):
    green = state.with_hue(120)
    assert (green.red, green.green, green.blue) == (0, 255, 0)


def test_with_hue_clamps(state):
    wrapped = state.with_hue(400)
    assert wrapped.hue == 360
    assert (wrapped.red, wrapped.green, wrapped.blue) == (255, 0, 0)
    assert state.with_hue(-5).hue == 0


def test_with_red_updates_hsv(state):
    pale = state.with_red(128)
    assert (pale.hue, pale.saturation, pale.brightness) == (180, 50, 100)
    assert state.with_red(-10).red == 0
    assert state.with_blue(999).blue == 255


def test_saturation_and_brightness_clamp(state):
    assert state.with_saturation(150).saturation == 100
    assert state.with_brightness(-1).brightness == 0
    dark = state.with_brightness(0)
    assert (dark.red, dark.green, dark.blue) == (0, 0, 0)


def test_with_spectrum_point(state):
    picked = state.with_spectrum_point(120, 50, 240, 200)
    assert (picked.saturation, picked.brightness) == (50, 75)
    assert (picked.red, picked.green, picked.blue) == (96, 191, 191)


def test_with_spectrum_point_clamps_outside_drag(state):
    picked = state.with_spectrum_point(-10, 500, 240, 200)
    assert (picked.saturation, picked.brightness) == (0, 0)
    assert picked.color == RGBColor(0, 0, 0)


def test_spectrum_offset(state):
    assert state.spectrum_offset(240, 200) == (240.0, 0.0)
    half = state.with_spectrum_point(120, 100, 240, 200)
    assert half.spectrum_offset(240, 200) == (120.0, 100.0)


def test_fractions(state):
    assert state.with_hue_fraction(0.5).hue == 180
    assert state.with_hue_fraction(2.0).hue == 360
    assert state.with_opacity_fraction(0.333).opacity == 33
    assert state.with_opacity_fraction(-1).opacity == 0


def test_opacity_feeds_alpha(state):
    half = state.with_opacity(50)
    assert half.color.alpha == 128
    assert half.hex == "00ffff80"
    assert state.with_opacity(120).opacity == 100


def test_with_hex(state):
    red = state.with_hex("ff0000")
    assert (red.hue, red.saturation, red.brightness, red.opacity) == (0, 100, 100, 100)
    assert (red.red, red.green, red.blue) == (255, 0, 0)

    translucent = state.with_hex("#00ff0080")
    assert translucent.hue == 120
    assert translucent.opacity == 50


def test_with_hex_keeps_typed_channels():
    typed = PickerState(display_in_rgb=True).with_hex("123456")
    assert typed.hex == "123456"
    assert (typed.red, typed.green, typed.blue) == (18, 52, 86)
    assert (typed.hue, typed.saturation, typed.brightness) == (210, 79, 34)

    # HSV display mode reports the same color
    assert PickerState().with_hex("123456").color == RGBColor(18, 52, 86)


def test_with_hex_rejects_garbage(state):
    with pytest.raises(ColorParseError):
        state.with_hex("zzz")


def test_with_text_commits_and_clamps(state):
    yellow = state.with_text("hue", " 60 ")
    assert (yellow.red, yellow.green, yellow.blue) == (255, 255, 0)
    assert state.with_text("saturation", "150").saturation == 100
    assert state.with_text("opacity", "42").opacity == 42
    assert state.with_text("green", "0").hue == 240


def test_with_text_keeps_previous_value_on_garbage(state):
    assert state.with_text("hue", "abc") is state
    assert state.with_text("red", "") is state


def test_with_text_unknown_field(state):
    with pytest.raises(KeyError):
        state.with_text("luminance", "1")


def test_display_toggle_switches_channels(state):
    assert state.channel_labels == ("H", "S", "V")
    assert state.channel_values == (180, 100, 100)
    rgb = state.toggled_display()
    assert rgb.display_in_rgb
    assert rgb.channel_labels == ("R", "G", "B")
    assert rgb.channel_values == (0, 255, 255)
    assert rgb.toggled_display().display_in_rgb is False


def test_channel_text_follows_display_mode(state):
    assert state.with_channel_text(0, "0").hue == 0
    rgb = state.toggled_display().with_channel_text(0, "255")
    assert rgb.red == 255
    assert rgb.color == RGBColor(255, 255, 255)


def test_from_color():
    state = PickerState.from_color(RGBColor(255, 0, 0, 128))
    assert (state.hue, state.saturation, state.brightness) == (0, 100, 100)
    assert state.opacity == 50
    assert state.spectrum_hue == RGBColor(255, 0, 0)


def test_from_color_keeps_exact_channels():
    state = PickerState.from_color(RGBColor(18, 52, 86))
    assert state.color == RGBColor(18, 52, 86)
    assert state.channel_values == (210, 79, 34)


def test_spectrum_hue_ignores_saturation(state):
    assert state.with_saturation(10).spectrum_hue == RGBColor(0, 255, 255)


@pytest.mark.parametrize(
    "value, expected",
    [(5, -2), (300, 233), (-50, -7), (120, 113)],
)
def test_clamp_offset(value, expected):
    assert clamp_offset(value, 240, 14) == expected
