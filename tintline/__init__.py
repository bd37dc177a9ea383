# __init__.py

from .colors import (
    AnsiColors,
    ColorName,
    DynColor,
    DynColors,
    Rgb,
    XtermColors,
    parse_color,
    to_dyn_color,
    Color,
    CustomColor,
)
from .colorize import Colorizable, colorize
from .display import (
    BgColorDisplay,
    BgDynColorDisplay,
    ComboColorDisplay,
    DefaultColorDisplay,
    Effect,
    EffectDisplay,
    FgColorDisplay,
    FgDynColorDisplay,
)
from .exceptions import ParseColorError
from .logger import Logger
from .overrides import (
    ColorLevel,
    ColorOverride,
    Override,
    override,
    override_ansi,
    override_set,
    override_status,
    override_truecolor,
    override_xterm,
    reset_override,
    set_override,
    unset_override,
    with_override,
)
from .style import Style, Styled, style
from .supports import Stream, SupportsColorsDisplay, TtyDisplay, clear_probe_cache, supports
from . import colors

__all__ = [
    "AnsiColors", "ColorName", "DynColor", "DynColors", "Rgb", "XtermColors",
    "parse_color", "to_dyn_color", "Color", "CustomColor", "colors",
    "Colorizable", "colorize",
    "BgColorDisplay", "BgDynColorDisplay", "ComboColorDisplay", "DefaultColorDisplay", "Effect",
    "EffectDisplay", "FgColorDisplay", "FgDynColorDisplay",
    "ParseColorError", "Logger",
    "ColorLevel", "ColorOverride", "Override", "override", "override_ansi",
    "override_set", "override_status", "override_truecolor", "override_xterm",
    "reset_override", "set_override", "unset_override", "with_override",
    "Style", "Styled", "style",
    "Stream", "SupportsColorsDisplay", "TtyDisplay", "clear_probe_cache", "supports",
]
