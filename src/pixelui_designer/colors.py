"""ComputerCraft color palette lookups for previews."""

from typing import Optional

# The 16 ComputerCraft terminal colors as rendered by the designer preview
COMPUTERCRAFT_COLORS: dict[str, str] = {
    "white": "#F0F0F0",
    "orange": "#F2B233",
    "magenta": "#E57FD8",
    "lightBlue": "#99B2F2",
    "yellow": "#DEDE6C",
    "lime": "#7FCC19",
    "pink": "#F2B2CC",
    "gray": "#4C4C4C",
    "lightGray": "#999999",
    "cyan": "#4C99B2",
    "purple": "#B266E5",
    "blue": "#3366CC",
    "brown": "#7F664C",
    "green": "#57A64E",
    "red": "#CC4C4C",
    "black": "#191919",
}


def get_color_hex(color_name: Optional[str], fallback: Optional[str] = None) -> str:
    """
    Resolve a ComputerCraft color name to a CSS hex color.

    Args:
        color_name: Palette name such as "lightBlue" (case-sensitive), or None
        fallback: Value for unknown names; defaults to the palette's white

    Returns:
        CSS color string
    """
    if color_name in COMPUTERCRAFT_COLORS:
        return COMPUTERCRAFT_COLORS[color_name]
    return fallback if fallback is not None else COMPUTERCRAFT_COLORS["white"]
