# colors/definitions.py

from enum import Enum
from typing import Dict, Tuple

ESC = '\x1b'
RESET = f'{ESC}[0m'


def sgr(code) -> str:
    """Wrap bare SGR parameters in a complete escape sequence."""
    return f'{ESC}[{code}m'


# Every value 0-255 as exactly three ASCII digits, built once at import.
U8_TO_STR: Tuple[str, ...] = tuple(
    chr(48 + i // 100) + chr(48 + i // 10 % 10) + chr(48 + i % 10)
    for i in range(256)
)


def check_u8(name: str, value: int) -> int:
    if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 255:
        raise ValueError(f"{name} must be an integer 0-255, got {value!r}")
    return value


def rgb_to_raw_ansi(r: int, g: int, b: int, is_fg: bool) -> str:
    """
    Fixed-width truecolor parameters: ``38;2;rrr;ggg;bbb``.

    Components always occupy three digits, so values below 100 keep their
    leading zeros (terminals parse ``005`` as ``5``).
    """
    prefix = '38;2;' if is_fg else '48;2;'
    return f'{prefix}{U8_TO_STR[r]};{U8_TO_STR[g]};{U8_TO_STR[b]}'


def rgb_to_ansi(r: int, g: int, b: int, is_fg: bool) -> str:
    """Fixed-width truecolor escape: ``ESC[38;2;rrr;ggg;bbbm``."""
    return sgr(rgb_to_raw_ansi(r, g, b, is_fg))


def xterm_raw_fg(index: int) -> str:
    """Foreground parameters for a 256-color palette index."""
    if index < 8:
        return str(30 + index)
    if index < 16:
        return str(90 + index - 8)
    return f'38;5;{index}'


def xterm_raw_bg(index: int) -> str:
    """Background parameters for a 256-color palette index."""
    if index < 8:
        return str(40 + index)
    if index < 16:
        return str(100 + index - 8)
    return f'48;5;{index}'


class AnsiColors(Enum):
    """
    The sixteen standard ANSI colors. Each value is its (foreground,
    background) SGR code pair, and the enum doubles as the table every
    static color class and color method is generated from.
    """
    BLACK = (30, 40)
    RED = (31, 41)
    GREEN = (32, 42)
    YELLOW = (33, 43)
    BLUE = (34, 44)
    MAGENTA = (35, 45)
    CYAN = (36, 46)
    WHITE = (37, 47)

    BRIGHT_BLACK = (90, 100)
    BRIGHT_RED = (91, 101)
    BRIGHT_GREEN = (92, 102)
    BRIGHT_YELLOW = (93, 103)
    BRIGHT_BLUE = (94, 104)
    BRIGHT_MAGENTA = (95, 105)
    BRIGHT_CYAN = (96, 106)
    BRIGHT_WHITE = (97, 107)

    @property
    def fg_code(self) -> int:
        return self.value[0]

    @property
    def bg_code(self) -> int:
        return self.value[1]

    @property
    def color_name(self) -> str:
        """Canonical descriptor, e.g. ``"bright red"``."""
        return self.name.lower().replace('_', ' ')

    @property
    def class_name(self) -> str:
        """Static class name, e.g. ``BrightRed``."""
        return ''.join(part.capitalize() for part in self.name.split('_'))

    @classmethod
    def from_name(cls, name: str) -> 'AnsiColors':
        """Total name lookup: unrecognized names resolve to WHITE."""
        return COLOR_NAMES.get(name, cls.WHITE)

    def fmt_ansi_fg(self) -> str:
        return sgr(self.fg_code)

    def fmt_ansi_bg(self) -> str:
        return sgr(self.bg_code)

    def fmt_raw_ansi_fg(self) -> str:
        return str(self.fg_code)

    def fmt_raw_ansi_bg(self) -> str:
        return str(self.bg_code)

    def get_dyncolors_fg(self) -> 'AnsiColors':
        return self

    def get_dyncolors_bg(self) -> 'AnsiColors':
        return self


COLOR_NAMES: Dict[str, AnsiColors] = {c.color_name: c for c in AnsiColors}
COLOR_NAMES['purple'] = AnsiColors.MAGENTA

# Fluent method names: (method, AnsiColors member). "purple" aliases magenta.
COLOR_METHODS: Tuple[Tuple[str, AnsiColors], ...] = tuple(
    [(c.name.lower(), c) for c in AnsiColors]
    + [('purple', AnsiColors.MAGENTA), ('bright_purple', AnsiColors.BRIGHT_MAGENTA)]
)
