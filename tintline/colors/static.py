# colors/static.py

from functools import lru_cache
from typing import ClassVar, Dict, Type

from .definitions import COLOR_METHODS, AnsiColors, check_u8, rgb_to_ansi, rgb_to_raw_ansi, sgr
from .dynamic import DynColors, Rgb


class Color:
    """
    A color fixed at the call site.

    Subclasses are used as type tags and are never instantiated: the escape
    strings are class attributes computed when the class is created, so a
    wrapper holding one only concatenates constants when it renders.
    """
    ANSI_FG: ClassVar[str] = ''
    ANSI_BG: ClassVar[str] = ''
    RAW_ANSI_FG: ClassVar[str] = ''
    RAW_ANSI_BG: ClassVar[str] = ''

    def __new__(cls, *args, **kwargs):
        raise TypeError(f"{cls.__name__} is a color type and cannot be instantiated")

    @classmethod
    def into_dyncolors(cls) -> DynColors:
        """Return the runtime equivalent of this color."""
        raise NotImplementedError


def _named_color(member: AnsiColors) -> Type[Color]:
    return type(member.class_name, (Color,), {
        '__module__': __name__,
        '__doc__': f"The standard ANSI color {member.color_name}.",
        'ANSI_FG': sgr(member.fg_code),
        'ANSI_BG': sgr(member.bg_code),
        'RAW_ANSI_FG': str(member.fg_code),
        'RAW_ANSI_BG': str(member.bg_code),
        'into_dyncolors': classmethod(lambda cls: member),
    })


NAMED_COLORS: Dict[AnsiColors, Type[Color]] = {m: _named_color(m) for m in AnsiColors}

Black = NAMED_COLORS[AnsiColors.BLACK]
Red = NAMED_COLORS[AnsiColors.RED]
Green = NAMED_COLORS[AnsiColors.GREEN]
Yellow = NAMED_COLORS[AnsiColors.YELLOW]
Blue = NAMED_COLORS[AnsiColors.BLUE]
Magenta = NAMED_COLORS[AnsiColors.MAGENTA]
Cyan = NAMED_COLORS[AnsiColors.CYAN]
White = NAMED_COLORS[AnsiColors.WHITE]

BrightBlack = NAMED_COLORS[AnsiColors.BRIGHT_BLACK]
BrightRed = NAMED_COLORS[AnsiColors.BRIGHT_RED]
BrightGreen = NAMED_COLORS[AnsiColors.BRIGHT_GREEN]
BrightYellow = NAMED_COLORS[AnsiColors.BRIGHT_YELLOW]
BrightBlue = NAMED_COLORS[AnsiColors.BRIGHT_BLUE]
BrightMagenta = NAMED_COLORS[AnsiColors.BRIGHT_MAGENTA]
BrightCyan = NAMED_COLORS[AnsiColors.BRIGHT_CYAN]
BrightWhite = NAMED_COLORS[AnsiColors.BRIGHT_WHITE]


@lru_cache(maxsize=None)
def CustomColor(r: int, g: int, b: int) -> Type[Color]:
    """
    Return the static color class for an RGB triple.

    The same triple always yields the same class. Escapes use the
    fixed-width form, e.g. ``CustomColor(5, 64, 52).ANSI_FG`` is
    ``ESC[38;2;005;064;052m``.
    """
    check_u8('r', r)
    check_u8('g', g)
    check_u8('b', b)
    return type(f'CustomColor_{r}_{g}_{b}', (Color,), {
        '__module__': __name__,
        '__doc__': f"A custom RGB color ({r}, {g}, {b}).",
        'R': r,
        'G': g,
        'B': b,
        'ANSI_FG': rgb_to_ansi(r, g, b, True),
        'ANSI_BG': rgb_to_ansi(r, g, b, False),
        'RAW_ANSI_FG': rgb_to_raw_ansi(r, g, b, True),
        'RAW_ANSI_BG': rgb_to_raw_ansi(r, g, b, False),
        'into_dyncolors': classmethod(lambda cls: Rgb(r, g, b)),
    })


def color_methods(cls):
    """
    Class decorator adding one foreground and one background method per
    named color (``red``/``on_red``, ``purple``/``on_purple``, ...).

    The generated methods delegate to ``cls.fg`` and ``cls.bg``.
    """
    for method, member in COLOR_METHODS:
        color = NAMED_COLORS[member]

        def fg_method(self, _color=color):
            return self.fg(_color)

        def bg_method(self, _color=color):
            return self.bg(_color)

        fg_method.__name__ = method
        fg_method.__doc__ = f"Change the foreground color to {method.replace('_', ' ')}"
        bg_method.__name__ = f'on_{method}'
        bg_method.__doc__ = f"Change the background color to {method.replace('_', ' ')}"
        setattr(cls, method, fg_method)
        setattr(cls, f'on_{method}', bg_method)
    return cls
