"""
Styling constants and theme configuration for the viewer UI.
"""
import re

# =============================================================================
# Color Palette
# =============================================================================

# Dark theme colors
BG_COLOR = "#111111"          # Main background
BG_COLOR_LIGHT = "#181818"    # Lighter background (axes, panels)
TEXT_COLOR = "#EEEEEE"        # Main text
TEXT_COLOR_DIM = "#CCCCCC"    # Dimmed text (axis labels, etc.)
TEXT_COLOR_DARK = "#888888"   # Dark text (status line, empty chart hint)
BORDER_COLOR = "#555555"      # Borders
GRID_COLOR = "#333333"        # Grid lines

ACCENT_BLUE = "#6FA8FF"       # Buttons, slider handle

# =============================================================================
# CSS color conversion
# =============================================================================

_CSS_COLOR = re.compile(
    r"rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*(?:,\s*([0-9.]+)\s*)?\)"
)


def css_to_rgba(color: str) -> tuple:
    """
    Convert "rgb(r, g, b)" / "rgba(r, g, b, a)" to a matplotlib RGBA tuple.

    Anything else (hex strings, named colors) is returned unchanged.
    """
    match = _CSS_COLOR.fullmatch(color.strip())
    if not match:
        return color
    r, g, b, a = match.groups()
    alpha = float(a) if a is not None else 1.0
    return (int(r) / 255, int(g) / 255, int(b) / 255, alpha)

# =============================================================================
# PyQt5 Stylesheet
# =============================================================================

DARK_STYLESHEET = f"""
    QMainWindow {{
        background-color: {BG_COLOR};
        color: {TEXT_COLOR};
    }}
    QGroupBox {{
        border: 1px solid {BORDER_COLOR};
        border-radius: 4px;
        margin-top: 8px;
        padding-top: 10px;
        font-weight: bold;
        color: {TEXT_COLOR};
    }}
    QGroupBox::title {{
        subcontrol-origin: margin;
        left: 8px;
        padding: 0 4px 0 4px;
    }}
    QLabel {{
        color: {TEXT_COLOR};
        font-size: 10pt;
    }}
    QPushButton {{
        background-color: {ACCENT_BLUE};
        color: #FFFFFF;
        border: none;
        border-radius: 4px;
        padding: 6px 12px;
        font-weight: bold;
    }}
    QPushButton:hover {{
        background-color: #5A98EF;
    }}
    QPushButton:pressed {{
        background-color: #4A88DF;
    }}
    QSlider::groove:horizontal {{
        height: 4px;
        background: {BORDER_COLOR};
        border-radius: 2px;
    }}
    QSlider::handle:horizontal {{
        background: {ACCENT_BLUE};
        width: 14px;
        margin: -6px 0;
        border-radius: 7px;
    }}
    QMenuBar {{
        background-color: {BG_COLOR};
        color: {TEXT_COLOR};
        border-bottom: 1px solid {BORDER_COLOR};
    }}
    QMenuBar::item:selected {{
        background-color: {BG_COLOR_LIGHT};
    }}
"""
