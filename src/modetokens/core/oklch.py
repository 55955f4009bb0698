"""
Pure-Python sRGB to OKLCH conversion.

Converts hex colors through linear light, CIE XYZ (D65) and Oklab into the
``oklch(L C H)`` strings used by Tailwind v4 themes. No external color
libraries required.
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal

Vector3 = tuple[float, float, float]
Matrix3 = tuple[Vector3, Vector3, Vector3]

_HEX_RE = re.compile(r"^#(?:[0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})$")
_OKLCH_RE = re.compile(
    r"^oklch\(\s*(-?[\d.]+)\s+(-?[\d.]+)\s+(-?[\d.]+)\s*(?:/\s*[\d.]+%?\s*)?\)$",
    re.IGNORECASE,
)

# Unrounded chroma below this renders as a neutral gray with no hue.
ACHROMATIC_THRESHOLD = 0.004

# Linear sRGB -> CIE XYZ (D65), Lindbloom.
_SRGB_TO_XYZ: Matrix3 = (
    (0.4124564, 0.3575761, 0.1804375),
    (0.2126729, 0.7151522, 0.0721750),
    (0.0193339, 0.1191920, 0.9503041),
)

# CIE XYZ -> LMS cone response, Ottosson.
_XYZ_TO_LMS: Matrix3 = (
    (0.8189330101, 0.3618667424, -0.1288597137),
    (0.0329845436, 0.9293118715, 0.0361456387),
    (0.0482003018, 0.2643662691, 0.6338517070),
)

# Non-linear LMS -> Oklab.
_LMS_TO_OKLAB: Matrix3 = (
    (0.2104542553, 0.7936177850, -0.0040720468),
    (1.9779984951, -2.4285922050, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.8086757660),
)


def _transform(matrix: Matrix3, vector: Vector3) -> Vector3:
    x, y, z = vector
    return (
        matrix[0][0] * x + matrix[0][1] * y + matrix[0][2] * z,
        matrix[1][0] * x + matrix[1][1] * y + matrix[1][2] * z,
        matrix[2][0] * x + matrix[2][1] * y + matrix[2][2] * z,
    )


# =============================================================================
# Hex helpers
# =============================================================================


def is_hex_color(value: str) -> bool:
    """Return True for ``#rgb`` or ``#rrggbb`` strings."""
    return bool(_HEX_RE.match(value))


def hex_to_rgb(hex_color: str) -> Vector3:
    """Decode a 3- or 6-digit hex color into channels normalized to [0, 1].

    Raises:
        ValueError: If the string is not a valid hex color.
    """
    digits = hex_color.strip()
    if not digits.startswith("#"):
        digits = f"#{digits}"
    if not is_hex_color(digits):
        raise ValueError(f"Invalid hex color: {hex_color!r}")

    digits = digits[1:]
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)

    return (
        int(digits[0:2], 16) / 255,
        int(digits[2:4], 16) / 255,
        int(digits[4:6], 16) / 255,
    )


def _channel_to_byte(value: float) -> int:
    # Half-up, matching how design tools round 8-bit channels.
    return min(255, max(0, math.floor(value * 255 + 0.5)))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Encode float channels in [0, 1] as a lowercase ``#rrggbb`` string."""
    return "#" + "".join(f"{_channel_to_byte(ch):02x}" for ch in (r, g, b))


# =============================================================================
# Forward pipeline: sRGB -> OKLCH
# =============================================================================


def gamma_to_linear(value: float) -> float:
    """Apply the inverse sRGB transfer function to one channel."""
    if value <= 0.04045:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** 2.4


def linear_rgb_to_xyz(r: float, g: float, b: float) -> Vector3:
    return _transform(_SRGB_TO_XYZ, (r, g, b))


def xyz_to_oklab(x: float, y: float, z: float) -> Vector3:
    """Convert D65 XYZ to Oklab (L, a, b)."""
    lms = _transform(_XYZ_TO_LMS, (x, y, z))
    lms_root: Vector3 = (math.cbrt(lms[0]), math.cbrt(lms[1]), math.cbrt(lms[2]))
    return _transform(_LMS_TO_OKLAB, lms_root)


def oklab_to_oklch(lightness: float, a: float, b: float) -> Vector3:
    """Convert Oklab to its cylindrical form, hue in degrees within [0, 360)."""
    chroma = math.sqrt(a * a + b * b)
    hue = math.atan2(b, a) * (180 / math.pi)
    if hue < 0:
        hue += 360
    return (lightness, chroma, hue)


def rgb_to_oklch(r: float, g: float, b: float) -> Vector3:
    """Convert gamma-encoded sRGB channels in [0, 1] to unrounded OKLCH."""
    linear = (gamma_to_linear(r), gamma_to_linear(g), gamma_to_linear(b))
    x, y, z = linear_rgb_to_xyz(*linear)
    return oklab_to_oklch(*xyz_to_oklab(x, y, z))


def _round_half_up(value: float, places: int) -> float:
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def _format_number(value: float) -> str:
    # Shortest form: 1 not 1.0, 0 not -0.
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_oklch(lightness: float, chroma: float, hue: float) -> str:
    """Format an OKLCH triple as a CSS ``oklch()`` string.

    L and C are rounded to three decimals and H to one. Near-neutral colors
    collapse to ``oklch(L 0 0)`` so they carry no spurious hue.
    """
    L_fmt = _format_number(_round_half_up(lightness, 3))
    if chroma < ACHROMATIC_THRESHOLD:
        return f"oklch({L_fmt} 0 0)"
    C_fmt = _format_number(_round_half_up(chroma, 3))
    H_fmt = _format_number(_round_half_up(hue, 1))
    return f"oklch({L_fmt} {C_fmt} {H_fmt})"


def hex_to_oklch(hex_color: str) -> str:
    """Convert a 3- or 6-digit hex color to a CSS ``oklch(L C H)`` string.

    Examples:
        >>> hex_to_oklch("#ffffff")
        'oklch(1 0 0)'
        >>> hex_to_oklch("#000")
        'oklch(0 0 0)'
    """
    return format_oklch(*rgb_to_oklch(*hex_to_rgb(hex_color)))


# =============================================================================
# Parsing
# =============================================================================


def parse_oklch(css: str) -> Vector3:
    """Parse an ``oklch(L C H)`` string back into floats.

    Raises:
        ValueError: If the string is not an oklch() color.
    """
    match = _OKLCH_RE.match(css.strip())
    if not match:
        raise ValueError(f"Invalid oklch() color: {css!r}")
    return (float(match.group(1)), float(match.group(2)), float(match.group(3)))
