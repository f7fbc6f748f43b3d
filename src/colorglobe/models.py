"""Data model definitions: explicit boundaries between input, compute, and render layers."""

from dataclasses import dataclass

from colorglobe.colorspace import (
    clamp_int,
    hsv_to_rgb,
    parse_hex,
    rgb_to_hsv,
    to_hex,
)


@dataclass(frozen=True)
class RGBColor:
    """Authoritative color value. Channels are integers 0-255."""

    red: int
    green: int
    blue: int
    alpha: int = 255  # 255 = opaque

    @classmethod
    def clamped(cls, red: int, green: int, blue: int, alpha: int = 255) -> "RGBColor":
        """Build a color with every channel clamped to 0-255."""
        return cls(
            red=clamp_int(red, 0, 255),
            green=clamp_int(green, 0, 255),
            blue=clamp_int(blue, 0, 255),
            alpha=clamp_int(alpha, 0, 255),
        )

    @classmethod
    def from_hex(cls, text: str) -> "RGBColor":
        """Parse "rrggbb" / "rrggbbaa" text. Raises ColorParseError."""
        red, green, blue, alpha = parse_hex(text)
        return cls(red=red, green=green, blue=blue, alpha=alpha)

    @property
    def opacity(self) -> float:
        """Alpha normalized to 0-1."""
        return self.alpha / 255.0

    def with_alpha(self, alpha: int) -> "RGBColor":
        return RGBColor(self.red, self.green, self.blue, clamp_int(alpha, 0, 255))

    def to_hsv(self) -> "HSVColor":
        hue, saturation, value = rgb_to_hsv(self.red, self.green, self.blue)
        return HSVColor(hue=hue, saturation=saturation, value=value)

    def to_hex(self, include_alpha: bool = False) -> str:
        return to_hex(self, include_alpha)


@dataclass(frozen=True)
class HSVColor:
    """Cylindrical color. Hue wraps at 360; saturation/value are percents."""

    hue: float  # 0-360
    saturation: float  # 0-100
    value: float  # 0-100 (brightness)

    def to_rgb(self, alpha: int = 255) -> RGBColor:
        red, green, blue = hsv_to_rgb(self.hue, self.saturation, self.value)
        return RGBColor(red=red, green=green, blue=blue, alpha=clamp_int(alpha, 0, 255))


@dataclass(frozen=True)
class DotSpec:
    """Spherical placement of a single globe dot. Fixed for the globe's lifetime."""

    azimuth_angle: float  # 0..pi, arccos(2u - 1)
    polar_angle: float  # 0..2pi, uniform


@dataclass(frozen=True)
class ProjectedPoint:
    """Screen position and size of a dot for one frame."""

    screen_x: float
    screen_y: float
    radius: float  # Distance-scaled dot radius


@dataclass(frozen=True)
class GlobeGeometry:
    """Sizes derived from the render surface."""

    min_dimension: float
    globe_radius: float
    field_of_view: float  # Camera distance
    dot_radius: float  # Unscaled dot radius


@dataclass(frozen=True)
class GlobeQuery:
    """Raw request for a single globe frame. Not yet validated."""

    total_dots: int = 1000
    progress: float = 0.0  # Animation progress 0..1 -> rotation 0..2pi
    width: float = 280.0
    height: float = 280.0
    seed: int | None = None
    dot_color: str = "ff00ff"  # Hex string


@dataclass(frozen=True)
class GlobeFrame:
    """The sole input to renderers. Fully computed state."""

    width: float
    height: float
    rotation: float  # Radians
    points: tuple[ProjectedPoint, ...]  # Same order as the DotSpecs
    dot_color: RGBColor


@dataclass(frozen=True)
class ColorEntry:
    """A single look-and-feel color default."""

    key: str  # e.g. "Panel.background"
    color: RGBColor


@dataclass(frozen=True)
class ThemeColors:
    """Theme colors resolved from a defaults table."""

    is_dark: bool
    background: RGBColor
    on_background: RGBColor
    surface: RGBColor
    on_surface: RGBColor
