"""Conversion between 8-bit RGB triples and the HSL colour model."""

from __future__ import annotations

from dataclasses import dataclass

_ALPHA_OPAQUE = 0xFFFF


def _check_channel(name: str, value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{name} channel must be in the range 0..255, got {value}")


def _to_channel(fraction: float) -> int:
    return max(0, min(255, int(fraction * 255 + 0.5)))


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1.0 / 6:
        return p + (q - p) * 6 * t
    if t < 0.5:
        return q
    if t < 2.0 / 3:
        return p + (q - p) * (2.0 / 3 - t) * 6
    return p


def rgb_to_hsl(r: int, g: int, b: int) -> tuple[float, float, float]:
    """Convert an 8-bit RGB triple to hue, saturation and lightness in 0..1."""
    for name, value in (("red", r), ("green", g), ("blue", b)):
        _check_channel(name, value)
    f_r, f_g, f_b = r / 255, g / 255, b / 255
    high = max(f_r, f_g, f_b)
    low = min(f_r, f_g, f_b)
    lightness = (high + low) / 2
    if high == low:
        return 0.0, 0.0, lightness

    delta = high - low
    if lightness > 0.5:
        saturation = delta / (2.0 - high - low)
    else:
        saturation = delta / (high + low)

    if high == f_r:
        hue = (f_g - f_b) / delta
        if f_g < f_b:
            hue += 6
    elif high == f_g:
        hue = (f_b - f_r) / delta + 2
    else:
        hue = (f_r - f_g) / delta + 4
    return hue / 6, saturation, lightness


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[int, int, int]:
    """Convert hue, saturation and lightness in 0..1 to an 8-bit RGB triple."""
    if s == 0:
        f_r = f_g = f_b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - s * l
        p = 2 * l - q
        f_r = _hue_to_rgb(p, q, h + 1.0 / 3)
        f_g = _hue_to_rgb(p, q, h)
        f_b = _hue_to_rgb(p, q, h - 1.0 / 3)
    return _to_channel(f_r), _to_channel(f_g), _to_channel(f_b)


@dataclass(frozen=True)
class HSL:
    """A colour as hue, saturation and lightness, each in the range 0 to 1."""

    h: float
    s: float
    l: float

    def rgba(self) -> tuple[int, int, int, int]:
        """Return 16-bit alpha-premultiplied red, green, blue and alpha values."""
        r, g, b = hsl_to_rgb(self.h, self.s, self.l)
        return r * 0x101, g * 0x101, b * 0x101, _ALPHA_OPAQUE

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "HSL":
        """Build an HSL colour from an 8-bit RGB triple."""
        return cls(*rgb_to_hsl(r, g, b))