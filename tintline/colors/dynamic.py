# colors/dynamic.py

import string
from dataclasses import dataclass
from typing import Protocol, Union, runtime_checkable

from rich.color import ANSI_COLOR_NAMES

from ..exceptions import ParseColorError
from .definitions import AnsiColors, check_u8, sgr, xterm_raw_bg, xterm_raw_fg


@runtime_checkable
class DynColor(Protocol):
    """Protocol for colors chosen at runtime."""
    def fmt_ansi_fg(self) -> str: ...
    def fmt_ansi_bg(self) -> str: ...
    def fmt_raw_ansi_fg(self) -> str: ...
    def fmt_raw_ansi_bg(self) -> str: ...
    def get_dyncolors_fg(self) -> 'DynColors': ...
    def get_dyncolors_bg(self) -> 'DynColors': ...


@dataclass(frozen=True)
class XtermColors:
    """A color from the xterm 256-color palette."""
    index: int

    def __post_init__(self):
        check_u8('index', self.index)

    @classmethod
    def from_name(cls, name: str) -> 'XtermColors':
        """Look up a palette entry by its xterm name, e.g. ``"navy_blue"``."""
        try:
            return cls(ANSI_COLOR_NAMES[name])
        except KeyError:
            raise ParseColorError(name, "unknown xterm color name") from None

    def fmt_ansi_fg(self) -> str:
        return sgr(self.fmt_raw_ansi_fg())

    def fmt_ansi_bg(self) -> str:
        return sgr(self.fmt_raw_ansi_bg())

    def fmt_raw_ansi_fg(self) -> str:
        return xterm_raw_fg(self.index)

    def fmt_raw_ansi_bg(self) -> str:
        return xterm_raw_bg(self.index)

    def get_dyncolors_fg(self) -> 'XtermColors':
        return self

    def get_dyncolors_bg(self) -> 'XtermColors':
        return self


@dataclass(frozen=True)
class Rgb:
    """A 24-bit truecolor value."""
    r: int
    g: int
    b: int

    def __post_init__(self):
        check_u8('r', self.r)
        check_u8('g', self.g)
        check_u8('b', self.b)

    def fmt_ansi_fg(self) -> str:
        return sgr(self.fmt_raw_ansi_fg())

    def fmt_ansi_bg(self) -> str:
        return sgr(self.fmt_raw_ansi_bg())

    def fmt_raw_ansi_fg(self) -> str:
        return f'38;2;{self.r};{self.g};{self.b}'

    def fmt_raw_ansi_bg(self) -> str:
        return f'48;2;{self.r};{self.g};{self.b}'

    def get_dyncolors_fg(self) -> 'Rgb':
        return self

    def get_dyncolors_bg(self) -> 'Rgb':
        return self


DynColors = Union[AnsiColors, XtermColors, Rgb]
DYN_COLOR_TYPES = (AnsiColors, XtermColors, Rgb)


def parse_color(descriptor: str) -> DynColors:
    """
    Parse a color descriptor.

    Accepts ``#RRGGBB`` or a lowercase ANSI name (``"red"``,
    ``"bright blue"``, ``"purple"``). Unrecognized names resolve to white;
    malformed hex forms raise ParseColorError.
    """
    if not descriptor:
        raise ParseColorError(descriptor, "empty color descriptor")
    if descriptor[0] != '#':
        return AnsiColors.from_name(descriptor)
    if len(descriptor) == 4:
        # TODO: expand #RGB shorthand to #RRGGBB
        raise ParseColorError(descriptor, "short hex colors are not supported")
    if len(descriptor) != 7:
        raise ParseColorError(descriptor, "hex colors must have the form #RRGGBB")
    digits = descriptor[1:]
    if any(c not in string.hexdigits for c in digits):
        raise ParseColorError(descriptor, "invalid hex digits")
    return Rgb(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


class ColorName(str):
    """
    A color descriptor string usable anywhere a runtime color is accepted.

    The descriptor is parsed once on construction, so an invalid one raises
    ParseColorError here and rendering never fails.
    """

    def __new__(cls, descriptor: str) -> 'ColorName':
        self = super().__new__(cls, descriptor)
        self._resolved = parse_color(descriptor)
        return self

    def resolve(self) -> DynColors:
        return self._resolved

    def fmt_ansi_fg(self) -> str:
        return self.resolve().fmt_ansi_fg()

    def fmt_ansi_bg(self) -> str:
        return self.resolve().fmt_ansi_bg()

    def fmt_raw_ansi_fg(self) -> str:
        return self.resolve().fmt_raw_ansi_fg()

    def fmt_raw_ansi_bg(self) -> str:
        return self.resolve().fmt_raw_ansi_bg()

    def get_dyncolors_fg(self) -> DynColors:
        return self.resolve()

    def get_dyncolors_bg(self) -> DynColors:
        return self.resolve()


def to_dyn_color(value, background: bool = False) -> DynColors:
    """
    Coerce any accepted color to a DynColors value.

    Accepts DynColors members, static Color classes, descriptor strings and
    other objects implementing the DynColor protocol.
    """
    if isinstance(value, DYN_COLOR_TYPES):
        return value
    if isinstance(value, ColorName):
        return value.resolve()
    if isinstance(value, str):
        return parse_color(value)
    if isinstance(value, type) and hasattr(value, 'into_dyncolors'):
        return value.into_dyncolors()
    if isinstance(value, DynColor):
        return value.get_dyncolors_bg() if background else value.get_dyncolors_fg()
    raise TypeError(f"not a color: {value!r}")
