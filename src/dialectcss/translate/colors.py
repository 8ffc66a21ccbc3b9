from __future__ import annotations

import re

_HEX_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def is_hex_color(value: str) -> bool:
    return bool(_HEX_RE.match(value))


def hex_to_rgb(value: str) -> str:
    """Convert ``#RGB`` / ``#RRGGBB`` to ``rgb(r,g,b)``."""
    if not is_hex_color(value):
        raise ValueError(f"Not a hex color: {value!r}")
    digits = value[1:]
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    return f"rgb({r},{g},{b})"
