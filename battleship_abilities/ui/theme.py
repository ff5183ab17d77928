class Theme:
    """Centralized colors used across the UI."""

    # Backgrounds
    BG_DARK = "#020617"  # slate-950
    BG_PANEL = "#0f172a"  # slate-900

    # Generic text
    TEXT_MAIN = "#e5e7eb"  # gray-200
    TEXT_LABEL = "#9ca3af"  # gray-400

    # Water cells
    WATER_BG = BG_DARK
    WATER_TEXT = "#334155"
    BORDER_EMPTY = "#1f2937"

    # Ship cells
    SHIP_BG = "#064e3b"
    SHIP_TEXT = "#a7f3d0"
    SHIP_BORDER = "#10b981"

    # Ability-affected cells
    AFFECTED_BG = "#7c2d12"
    AFFECTED_TEXT = "#fed7aa"
    AFFECTED_BORDER = "#f97316"

    # Links / highlights
    HIGHLIGHT = "#0ea5e9"
