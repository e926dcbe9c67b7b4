"""Theme colors and the rich-text stylesheet for the practice markup."""

from hakasha.core.markup import CORRECT, CSS_CLASSES, ERROR, NEXT


class HomeColors:
    """Light theme palette."""

    BG_TOP = "#e0f7fa"
    BG_BOTTOM = "#80deea"

    PRIMARY = "#00838f"
    PRIMARY_LIGHT = "#4fb3bf"
    PRIMARY_DARK = "#005662"

    CORAL = "#ff8a65"
    ERROR = "#d84315"

    CARD_BG = "rgba(255, 255, 255, 0.85)"
    CARD_BORDER = "rgba(255, 255, 255, 0.6)"

    TEXT_PRIMARY = "#1a3a3a"
    TEXT_SECONDARY = "#4a6572"
    TEXT_MUTED = "#78909c"


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


def markup_stylesheet() -> str:
    """<style> block giving each progress tag its color."""
    rules = {
        CORRECT: f"color: {HomeColors.PRIMARY};",
        ERROR: f"color: {HomeColors.ERROR}; background-color: {blend_hex(HomeColors.CORAL, '#FFFFFF', 0.7)};",
        NEXT: f"color: {HomeColors.PRIMARY_DARK}; background-color: {HomeColors.BG_TOP}; font-weight: 600;",
    }
    body = " ".join(f".{CSS_CLASSES[tag]} {{ {rule} }}" for tag, rule in rules.items())
    return f"<style>{body}</style>"
