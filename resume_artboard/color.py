"""Colour helpers used to derive CSS values from the resume theme.

Both helpers accept a ``#RRGGBB`` string and never raise on malformed input:
a channel that cannot be parsed becomes ``NaN`` and flows through into the
result, so callers are expected to validate colours upstream.

Examples
--------
>>> from resume_artboard.color import hex_to_rgb, hue_from_hex
>>> hex_to_rgb("#112233")
'rgb(17, 34, 51)'
>>> hex_to_rgb("#112233", 0.5)
'rgba(17, 34, 51, 0.5)'
>>> hue_from_hex("#00FF00")
120.0
"""

from __future__ import annotations

import math
import re

_CHANNEL_PATTERN = re.compile(r"\s*([+-]?)(0[xX])?([0-9A-Fa-f]*)")
_CHANNEL_SLICES = (slice(1, 3), slice(3, 5), slice(5, 7))


def hex_to_rgb(hex_color: str, alpha: float = 0) -> str:
    """Return an ``rgb()`` or ``rgba()`` CSS string for ``hex_color``.

    Parameters
    ----------
    hex_color : str
        Colour in ``#RRGGBB`` notation.
    alpha : float, optional
        Opacity to embed. ``0`` (the default) or ``NaN`` yields an opaque ``rgb()``
        value; any other number yields ``rgba()`` carrying that alpha.

    Returns
    -------
    str
        CSS colour function. Channels that fail to parse are printed as
        ``NaN``.
    """
    red, green, blue = (_format_number(value) for value in _channels(hex_color))
    if alpha and not math.isnan(alpha):
        return f"rgba({red}, {green}, {blue}, {_format_number(alpha)})"
    return f"rgb({red}, {green}, {blue})"


def hue_from_hex(hex_color: str) -> float:
    """Return the HSL hue of ``hex_color`` in degrees within ``[0, 360)``.

    Achromatic colours (all channels equal) have hue ``0``. When several
    channels share the maximum, red wins over green and green over blue.
    """
    red, green, blue = (value / 255 for value in _channels(hex_color))
    if any(math.isnan(value) for value in (red, green, blue)):
        return math.nan

    low = min(red, green, blue)
    high = max(red, green, blue)
    delta = high - low

    if delta == 0:
        hue = 0.0
    elif high == red:
        hue = (green - blue) / delta
    elif high == green:
        hue = 2 + (blue - red) / delta
    else:
        hue = 4 + (red - green) / delta

    return (hue * 60 + 360) % 360


def _channels(hex_color: str) -> tuple[float, float, float]:
    """Split ``#RRGGBB`` into three base-16 channel values."""
    red, green, blue = (
        _parse_channel(hex_color[segment]) for segment in _CHANNEL_SLICES
    )
    return red, green, blue


def _parse_channel(text: str) -> float:
    """Parse the leading hexadecimal digits of ``text`` or return NaN."""
    match = _CHANNEL_PATTERN.match(text)
    if match is None or not match.group(3):
        return math.nan
    sign, _prefix, digits = match.groups()
    return float(int(f"{sign}{digits}", 16))


def _format_number(value: float) -> str:
    """Render ``value`` the way CSS expects: ``17``, ``0.5`` or ``NaN``."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


__all__ = ["hex_to_rgb", "hue_from_hex"]
