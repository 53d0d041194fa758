"""Theme colors and color utilities for the UI."""


class CanvasColors:
    """Light theme palette."""

    BG_TOP = "#fff8e1"
    BG_BOTTOM = "#ffe0b2"

    PRIMARY = "#6a4fc4"
    PRIMARY_LIGHT = "#9a86e0"
    PRIMARY_DARK = "#3f2a8c"

    TILE_LOCKED = "#b0bec5"
    TILE_UNLOCKED = "#6a4fc4"
    TILE_COMPLETED = "#2fbf93"
    TILE_CURRENT_RING = "#ffb74d"

    PANEL_BG = "rgba(255, 255, 255, 0.94)"
    PANEL_BORDER = "rgba(106, 79, 196, 0.18)"

    TEXT_PRIMARY = "#2b2340"
    TEXT_SECONDARY = "#5d5670"
    TEXT_MUTED = "#8d879c"
    WARNING = "#e65100"

    GRID_LINE = "#e0e0e0"


def tile_color(unlocked: bool, completed: bool) -> str:
    if completed:
        return CanvasColors.TILE_COMPLETED
    if unlocked:
        return CanvasColors.TILE_UNLOCKED
    return CanvasColors.TILE_LOCKED


def blend_hex(a: str, b: str, t: float) -> str:
    """Blend two #RRGGBB colors. t=0 -> a, t=1 -> b."""
    a = a.strip()
    b = b.strip()
    if not (a.startswith("#") and b.startswith("#") and len(a) == 7 and len(b) == 7):
        return a
    try:
        ar, ag, ab = int(a[1:3], 16), int(a[3:5], 16), int(a[5:7], 16)
        br, bg, bb = int(b[1:3], 16), int(b[3:5], 16), int(b[5:7], 16)
    except ValueError:
        return a
    t = max(0.0, min(1.0, float(t)))
    r = int(ar + (br - ar) * t)
    g = int(ag + (bg - ag) * t)
    bl = int(ab + (bb - ab) * t)
    return f"#{r:02X}{g:02X}{bl:02X}"
