# style.py

from dataclasses import dataclass, replace
from typing import Any, FrozenSet, Optional, Type

from .colors.definitions import RESET
from .colors.dynamic import DynColors, Rgb, to_dyn_color
from .colors.static import Color, color_methods
from .display import Display, Effect, effect_methods


@color_methods
@effect_methods
@dataclass(frozen=True)
class Style:
    """
    Accumulated styling intent: optional foreground and background colors
    plus a set of text effects.

    Every builder method returns a new Style. A channel left as None is
    never written, and a Style with nothing set renders its target
    unchanged.
    """
    foreground: Optional[DynColors] = None
    background: Optional[DynColors] = None
    active_effects: FrozenSet[Effect] = frozenset()

    @classmethod
    def new(cls) -> 'Style':
        return cls()

    def style(self, target: Any) -> 'Styled':
        """Bind this style to a value for rendering."""
        return Styled(target, self)

    def fg(self, color: Type[Color]) -> 'Style':
        return replace(self, foreground=color.into_dyncolors())

    def bg(self, color: Type[Color]) -> 'Style':
        return replace(self, background=color.into_dyncolors())

    def color(self, color) -> 'Style':
        """Set the foreground from a runtime color, static color class or descriptor."""
        return replace(self, foreground=to_dyn_color(color))

    def on_color(self, color) -> 'Style':
        """Set the background from a runtime color, static color class or descriptor."""
        return replace(self, background=to_dyn_color(color, background=True))

    def truecolor(self, r: int, g: int, b: int) -> 'Style':
        return replace(self, foreground=Rgb(r, g, b))

    def on_truecolor(self, r: int, g: int, b: int) -> 'Style':
        return replace(self, background=Rgb(r, g, b))

    def _with_effect(self, effect: Effect) -> 'Style':
        return replace(self, active_effects=self.active_effects | {effect})

    def effects(self, *effects: Effect) -> 'Style':
        return replace(self, active_effects=self.active_effects | frozenset(effects))

    def unset_effects(self, *effects: Effect) -> 'Style':
        return replace(self, active_effects=self.active_effects - frozenset(effects))

    def unset_all_effects(self) -> 'Style':
        return replace(self, active_effects=frozenset())

    def has_effect(self, effect: Effect) -> bool:
        return effect in self.active_effects

    @property
    def is_plain(self) -> bool:
        return self.foreground is None and self.background is None and not self.active_effects

    def prefix(self) -> str:
        parts = []
        if self.foreground is not None:
            parts.append(self.foreground.fmt_ansi_fg())
        if self.background is not None:
            parts.append(self.background.fmt_ansi_bg())
        # Declared order, independent of call order
        parts.extend(e.escape for e in Effect if e in self.active_effects)
        return ''.join(parts)


class Styled(Display):
    """A value bound to a Style. Resets only if the style set something."""
    __slots__ = ('applied',)

    def __init__(self, value: Any, style: Style):
        super().__init__(value)
        self.applied = style

    def prefix(self) -> str:
        return self.applied.prefix()

    def suffix(self) -> str:
        return '' if self.applied.is_plain else RESET


def style() -> Style:
    """Shorthand for ``Style()``."""
    return Style()
