"""
Element to display-category lookup (CPK colouring convention).

The categories are data for an external renderer; nothing here draws.
"""

from enum import Enum
from typing import Dict, Tuple


class DisplayCategory(Enum):
    """CPK colour categories."""

    WHITE = "white"
    BLACK = "black"
    BLUE = "blue"
    RED = "red"
    GREEN = "green"
    DARK_RED = "dark-red"
    DARK_VIOLET = "dark-violet"
    CYAN = "cyan"
    ORANGE = "orange"
    YELLOW = "yellow"
    PEACH = "peach"
    PURPLE = "purple"
    DARK_GREEN = "dark-green"
    GRAY = "gray"
    DARK_ORANGE = "dark-orange"
    UNKNOWN = "pink"


NOBLE_GASES = ("HE", "NE", "AR", "KR", "XE", "RN")
ALKALI_METALS = ("LI", "NA", "K", "RB", "CS", "FR")
ALKALINE_EARTH_METALS = ("BE", "MG", "CA", "SR", "BA", "RA")

_CATEGORY_BY_SYMBOL: Dict[str, DisplayCategory] = {
    "H": DisplayCategory.WHITE,
    "C": DisplayCategory.BLACK,
    "N": DisplayCategory.BLUE,
    "O": DisplayCategory.RED,
    "F": DisplayCategory.GREEN,
    "CL": DisplayCategory.GREEN,
    "BR": DisplayCategory.DARK_RED,
    "I": DisplayCategory.DARK_VIOLET,
    "P": DisplayCategory.ORANGE,
    "S": DisplayCategory.YELLOW,
    "B": DisplayCategory.PEACH,
    "TI": DisplayCategory.GRAY,
    "FE": DisplayCategory.DARK_ORANGE,
}
_CATEGORY_BY_SYMBOL.update({s: DisplayCategory.CYAN for s in NOBLE_GASES})
_CATEGORY_BY_SYMBOL.update({s: DisplayCategory.PURPLE for s in ALKALI_METALS})
_CATEGORY_BY_SYMBOL.update({s: DisplayCategory.DARK_GREEN for s in ALKALINE_EARTH_METALS})

# RGB triples in the 0-1 range
CATEGORY_RGB: Dict[DisplayCategory, Tuple[float, float, float]] = {
    DisplayCategory.WHITE: (1.0, 1.0, 1.0),
    DisplayCategory.BLACK: (0.0, 0.0, 0.0),
    DisplayCategory.BLUE: (0.13, 0.2, 1.0),
    DisplayCategory.RED: (1.0, 0.13, 0.0),
    DisplayCategory.GREEN: (0.12, 0.94, 0.12),
    DisplayCategory.DARK_RED: (0.6, 0.13, 0.0),
    DisplayCategory.DARK_VIOLET: (0.4, 0.0, 0.73),
    DisplayCategory.CYAN: (0.0, 1.0, 1.0),
    DisplayCategory.ORANGE: (1.0, 0.6, 0.0),
    DisplayCategory.YELLOW: (0.87, 0.87, 0.0),
    DisplayCategory.PEACH: (1.0, 0.67, 0.47),
    DisplayCategory.PURPLE: (0.47, 0.0, 1.0),
    DisplayCategory.DARK_GREEN: (0.0, 0.47, 0.0),
    DisplayCategory.GRAY: (0.6, 0.6, 0.6),
    DisplayCategory.DARK_ORANGE: (0.87, 0.4, 0.0),
    DisplayCategory.UNKNOWN: (0.87, 0.47, 1.0),
}


def normalize_symbol(element: str) -> str:
    """Trim a (right-justified) element code and upper-case it."""
    return element.strip().upper()


def category_for(element: str) -> DisplayCategory:
    """
    Map an element code to its display category.

    Total: any code without a group (including blanks) maps to
    DisplayCategory.UNKNOWN.

    Args:
        element: Element code, e.g. " C", "Cl", "FE"

    Returns:
        DisplayCategory for the element
    """
    return _CATEGORY_BY_SYMBOL.get(normalize_symbol(element), DisplayCategory.UNKNOWN)


def rgb_for(element: str) -> Tuple[float, float, float]:
    """RGB colour (0-1 floats) of an element's display category."""
    return CATEGORY_RGB[category_for(element)]
