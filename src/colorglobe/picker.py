"""Color picker state model.

PickerState replaces the picker's reactive state cells with an immutable
value. Every input event maps to one method that returns the next state;
RGB and HSV fields are re-derived from whichever side the event edited.
"""

from dataclasses import dataclass, replace

from colorglobe.colorspace import clamp_float, clamp_int, hsv_to_rgb, rgb_to_hsv
from colorglobe.models import HSVColor, RGBColor

_HSV_FIELDS = ("hue", "saturation", "brightness")
_RGB_FIELDS = ("red", "green", "blue")
_TEXT_FIELDS = _HSV_FIELDS + _RGB_FIELDS + ("opacity",)


def clamp_offset(value: float, max_value: float, width: float, min_value: float = 0.0) -> float:
    """Clamp a thumb position so the thumb stays centered on [min, max].

    Args:
        value: Pointer position along the track.
        max_value: Track length.
        width: Thumb width.
        min_value: Track start.

    Returns:
        Top-left offset of the thumb.
    """
    half = width / 2
    return clamp_float(value - half, min_value - half, max_value - half)


@dataclass(frozen=True)
class PickerState:
    """Everything the picker displays. HSV and RGB are kept in sync."""

    hue: int = 180
    saturation: int = 100
    brightness: int = 100
    red: int = 0
    green: int = 255
    blue: int = 255
    opacity: int = 100  # Percent
    display_in_rgb: bool = False

    @classmethod
    def from_color(cls, color: RGBColor) -> "PickerState":
        return cls(
            red=color.red,
            green=color.green,
            blue=color.blue,
            opacity=int(color.alpha / 255 * 100),
        )._sync_hsv()

    # --- derived values ---

    @property
    def color(self) -> RGBColor:
        """Current color, read from the RGB fields.

        HSV edits re-derive the RGB fields, so both display modes agree. RGB and
        hex edits keep the exact channels that were entered.
        """
        alpha = round(self.opacity / 100 * 255)
        return RGBColor(self.red, self.green, self.blue, alpha)

    @property
    def hex(self) -> str:
        """Hex of the current color; alpha digits only when not fully opaque."""
        return self.color.to_hex(include_alpha=self.opacity < 100)

    @property
    def spectrum_hue(self) -> RGBColor:
        """Fully saturated, fully bright color at the current hue."""
        return HSVColor(self.hue, 100, 100).to_rgb()

    @property
    def channel_labels(self) -> tuple[str, str, str]:
        return ("R", "G", "B") if self.display_in_rgb else ("H", "S", "V")

    @property
    def channel_values(self) -> tuple[int, int, int]:
        if self.display_in_rgb:
            return self.red, self.green, self.blue
        return self.hue, self.saturation, self.brightness

    def spectrum_offset(self, width: float, height: float) -> tuple[float, float]:
        """Pointer position on the saturation/brightness spectrum."""
        return (
            self.saturation / 100 * width,
            (1 - self.brightness / 100) * height,
        )

    # --- transitions ---

    def _sync_rgb(self) -> "PickerState":
        red, green, blue = hsv_to_rgb(self.hue, self.saturation, self.brightness)
        return replace(self, red=red, green=green, blue=blue)

    def _sync_hsv(self) -> "PickerState":
        hue, saturation, brightness = rgb_to_hsv(self.red, self.green, self.blue)
        return replace(self, hue=hue, saturation=saturation, brightness=brightness)

    def with_hue(self, hue: int) -> "PickerState":
        return replace(self, hue=clamp_int(hue, 0, 360))._sync_rgb()

    def with_saturation(self, saturation: int) -> "PickerState":
        return replace(self, saturation=clamp_int(saturation))._sync_rgb()

    def with_brightness(self, brightness: int) -> "PickerState":
        return replace(self, brightness=clamp_int(brightness))._sync_rgb()

    def with_red(self, red: int) -> "PickerState":
        return replace(self, red=clamp_int(red, 0, 255))._sync_hsv()

    def with_green(self, green: int) -> "PickerState":
        return replace(self, green=clamp_int(green, 0, 255))._sync_hsv()

    def with_blue(self, blue: int) -> "PickerState":
        return replace(self, blue=clamp_int(blue, 0, 255))._sync_hsv()

    def with_opacity(self, opacity: int) -> "PickerState":
        return replace(self, opacity=clamp_int(opacity))

    def with_spectrum_point(
        self, x: float, y: float, width: float, height: float
    ) -> "PickerState":
        """Tap or drag on the spectrum: x picks saturation, y picks brightness."""
        saturation = int(clamp_float(x / width) * 100)
        brightness = int(clamp_float(1 - y / height) * 100)
        return replace(self, saturation=saturation, brightness=brightness)._sync_rgb()

    def with_hue_fraction(self, fraction: float) -> "PickerState":
        return replace(self, hue=int(clamp_float(fraction) * 360))._sync_rgb()

    def with_opacity_fraction(self, fraction: float) -> "PickerState":
        return replace(self, opacity=int(clamp_float(fraction) * 100))

    def with_hex(self, text: str) -> "PickerState":
        """Commit the hex field. Raises ColorParseError on malformed text."""
        parsed = RGBColor.from_hex(text)
        return replace(
            self,
            red=parsed.red,
            green=parsed.green,
            blue=parsed.blue,
            opacity=int(parsed.alpha / 255 * 100),
        )._sync_hsv()

    def with_text(self, field: str, text: str) -> "PickerState":
        """Commit a numeric text field. Unparseable text keeps the old value.

        Args:
            field: One of hue, saturation, brightness, red, green, blue, opacity.
            text: Raw field contents.
        """
        if field not in _TEXT_FIELDS:
            raise KeyError(field)
        try:
            value = int(text.strip())
        except ValueError:
            return self
        return getattr(self, f"with_{field}")(value)

    def with_channel_text(self, index: int, text: str) -> "PickerState":
        """Commit the index-th channel field in the current display mode."""
        fields = _RGB_FIELDS if self.display_in_rgb else _HSV_FIELDS
        return self.with_text(fields[index], text)

    def toggled_display(self) -> "PickerState":
        return replace(self, display_in_rgb=not self.display_in_rgb)
