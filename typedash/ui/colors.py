"""Theme colors and color utilities for the UI."""


class Palette:
    """Light theme palette for the typing test window."""

    BG = "#f3f4f6"
    CARD_BG = "#f9fafb"
    BORDER = "#d1d5db"
    FOCUS = "#3b82f6"

    PRIMARY = "#2563eb"
    PRIMARY_DARK = "#1d4ed8"

    TEXT_PRIMARY = "#111827"
    TEXT_SECONDARY = "#374151"
    TEXT_MUTED = "#6b7280"

    # Per-character feedback
    PENDING = "#6b7280"
    CORRECT = "#16a34a"
    INCORRECT = "#dc2626"

    # Results card values
    HIGHLIGHT = "#7e22ce"
    CORRECT_DARK = "#15803d"
    INCORRECT_DARK = "#b91c1c"


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
