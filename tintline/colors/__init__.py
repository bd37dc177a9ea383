# colors/__init__.py

from .definitions import AnsiColors, ESC, RESET
from .dynamic import (
    ColorName,
    DynColor,
    DynColors,
    Rgb,
    XtermColors,
    parse_color,
    to_dyn_color,
)
from . import css
from .static import (
    Color,
    CustomColor,
    Black, Red, Green, Yellow, Blue, Magenta, Cyan, White,
    BrightBlack, BrightRed, BrightGreen, BrightYellow,
    BrightBlue, BrightMagenta, BrightCyan, BrightWhite,
)

__all__ = [
    'css',
    'AnsiColors', 'ESC', 'RESET',
    'ColorName', 'DynColor', 'DynColors', 'Rgb', 'XtermColors',
    'parse_color', 'to_dyn_color',
    'Color', 'CustomColor',
    'Black', 'Red', 'Green', 'Yellow', 'Blue', 'Magenta', 'Cyan', 'White',
    'BrightBlack', 'BrightRed', 'BrightGreen', 'BrightYellow',
    'BrightBlue', 'BrightMagenta', 'BrightCyan', 'BrightWhite',
]
