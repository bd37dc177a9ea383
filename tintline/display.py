# display.py

from enum import Enum
from typing import Any, Callable, Type

from .colors.definitions import ESC, RESET, sgr
from .colors.dynamic import DynColor, Rgb, to_dyn_color
from .colors.static import Color, color_methods
from .supports import Stream, SupportsColorsDisplay, TtyDisplay


class Effect(Enum):
    """Text effects, in the order they are emitted. Values are SGR codes."""
    BOLD = 1
    DIMMED = 2
    ITALIC = 3
    UNDERLINE = 4
    BLINK = 5
    BLINK_FAST = 6
    REVERSED = 7
    HIDDEN = 8
    STRIKETHROUGH = 9

    @property
    def attr(self) -> str:
        return self.name.lower()

    @property
    def escape(self) -> str:
        return sgr(self.value)


def effect_methods(cls):
    """Class decorator adding one method per Effect, delegating to ``cls._with_effect``."""
    for effect in Effect:
        def method(self, _effect=effect):
            return self._with_effect(_effect)

        method.__name__ = effect.attr
        method.__doc__ = f"Apply the {effect.attr.replace('_', ' ')} effect"
        setattr(cls, effect.attr, method)
    return cls


@color_methods
@effect_methods
class Colorize:
    """
    Fluent styling methods shared by every wrapper.

    Each method wraps ``self._target()`` in a new display; wrappers render
    through ``str()``, ``repr()`` and ``format()`` alike.
    """
    __slots__ = ()

    def _target(self) -> Any:
        return self

    def fg(self, color: Type[Color]) -> 'FgColorDisplay':
        """Set the foreground color from a static color class."""
        return FgColorDisplay(self._target(), color)

    def bg(self, color: Type[Color]) -> 'BgColorDisplay':
        """Set the background color from a static color class."""
        return BgColorDisplay(self._target(), color)

    def color(self, color) -> 'FgDynColorDisplay':
        """Set the foreground from a runtime color, static color class or descriptor."""
        return FgDynColorDisplay(self._target(), to_dyn_color(color))

    def on_color(self, color) -> 'BgDynColorDisplay':
        """Set the background from a runtime color, static color class or descriptor."""
        return BgDynColorDisplay(self._target(), to_dyn_color(color, background=True))

    def truecolor(self, r: int, g: int, b: int) -> 'FgDynColorDisplay':
        return FgDynColorDisplay(self._target(), Rgb(r, g, b))

    def on_truecolor(self, r: int, g: int, b: int) -> 'BgDynColorDisplay':
        return BgDynColorDisplay(self._target(), Rgb(r, g, b))

    def _with_effect(self, effect: Effect) -> 'EffectDisplay':
        return EffectDisplay(self._target(), effect)

    def style(self, style) -> Any:
        """Apply a Style."""
        return style.style(self._target())

    def if_supports_color(self, stream: Stream, apply: Callable[[Any], Any]) -> SupportsColorsDisplay:
        """Apply ``apply`` only if ``stream`` supports colors when rendered."""
        return SupportsColorsDisplay(self._target(), apply, stream)

    def if_tty(self, stream: Stream, apply: Callable[[Any], Any]) -> TtyDisplay:
        """Apply ``apply`` only if ``stream`` is a terminal when rendered."""
        return TtyDisplay(self._target(), apply, stream)

    def default_color(self) -> 'DefaultColorDisplay':
        """Switch the foreground back to the terminal default."""
        return DefaultColorDisplay(self._target())

    def on_default_color(self) -> 'DefaultColorDisplay':
        """Switch the background back to the terminal default."""
        return DefaultColorDisplay(self._target(), background=True)


class Display(Colorize):
    """Base wrapper: prefix, the wrapped value's own rendering, suffix."""
    __slots__ = ('value',)

    def __init__(self, value: Any):
        self.value = value

    def prefix(self) -> str:
        raise NotImplementedError

    def suffix(self) -> str:
        return RESET

    def __str__(self) -> str:
        return f"{self.prefix()}{str(self.value)}{self.suffix()}"

    def __repr__(self) -> str:
        return f"{self.prefix()}{repr(self.value)}{self.suffix()}"

    def __format__(self, format_spec: str) -> str:
        return f"{self.prefix()}{format(self.value, format_spec)}{self.suffix()}"


class FgColorDisplay(Display):
    """Foreground from a static color. Chaining replaces the color."""
    __slots__ = ('color_type',)

    def __init__(self, value: Any, color: Type[Color]):
        super().__init__(value)
        self.color_type = color

    def prefix(self) -> str:
        return self.color_type.ANSI_FG

    def fg(self, color: Type[Color]) -> 'FgColorDisplay':
        return FgColorDisplay(self.value, color)

    def bg(self, color: Type[Color]) -> 'ComboColorDisplay':
        return ComboColorDisplay(self.value, self.color_type, color)


class BgColorDisplay(Display):
    """Background from a static color. Chaining replaces the color."""
    __slots__ = ('color_type',)

    def __init__(self, value: Any, color: Type[Color]):
        super().__init__(value)
        self.color_type = color

    def prefix(self) -> str:
        return self.color_type.ANSI_BG

    def fg(self, color: Type[Color]) -> 'ComboColorDisplay':
        return ComboColorDisplay(self.value, color, self.color_type)

    def bg(self, color: Type[Color]) -> 'BgColorDisplay':
        return BgColorDisplay(self.value, color)


class ComboColorDisplay(Display):
    """Foreground and background merged into one ``ESC[<fg>;<bg>m`` sequence."""
    __slots__ = ('fg_type', 'bg_type')

    def __init__(self, value: Any, fg: Type[Color], bg: Type[Color]):
        super().__init__(value)
        self.fg_type = fg
        self.bg_type = bg

    def prefix(self) -> str:
        return f"{ESC}[{self.fg_type.RAW_ANSI_FG};{self.bg_type.RAW_ANSI_BG}m"

    def fg(self, color: Type[Color]) -> 'ComboColorDisplay':
        return ComboColorDisplay(self.value, color, self.bg_type)

    def bg(self, color: Type[Color]) -> 'ComboColorDisplay':
        return ComboColorDisplay(self.value, self.fg_type, color)


class FgDynColorDisplay(Display):
    __slots__ = ('dyn_color',)

    def __init__(self, value: Any, color: DynColor):
        super().__init__(value)
        self.dyn_color = color

    def prefix(self) -> str:
        return self.dyn_color.fmt_ansi_fg()


class BgDynColorDisplay(Display):
    __slots__ = ('dyn_color',)

    def __init__(self, value: Any, color: DynColor):
        super().__init__(value)
        self.dyn_color = color

    def prefix(self) -> str:
        return self.dyn_color.fmt_ansi_bg()


class EffectDisplay(Display):
    """A single text effect, always followed by a reset."""
    __slots__ = ('effect',)

    def __init__(self, value: Any, effect: Effect):
        super().__init__(value)
        self.effect = effect

    def prefix(self) -> str:
        return self.effect.escape


class DefaultColorDisplay(Display):
    """
    The terminal's default foreground (``ESC[39m``) or background
    (``ESC[49m``), followed by a reset like every other wrapper.
    """
    __slots__ = ('background',)

    def __init__(self, value: Any, background: bool = False):
        super().__init__(value)
        self.background = background

    def prefix(self) -> str:
        return sgr(49 if self.background else 39)
