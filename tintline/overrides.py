# overrides.py

from contextlib import contextmanager
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Iterator, TypeVar, Union

from .logger import Logger

logger = Logger(__name__)

T = TypeVar('T')


class ColorOverride(Enum):
    """Tri-state override for a single color tier."""
    NONE = 0b00
    ENABLE = 0b01
    DISABLE = 0b10

    def to_bool(self, default: bool) -> bool:
        if self is ColorOverride.ENABLE:
            return True
        if self is ColorOverride.DISABLE:
            return False
        return default

    @classmethod
    def from_num(cls, value: int) -> 'ColorOverride':
        if value == 0b01:
            return cls.ENABLE
        if value == 0b10:
            return cls.DISABLE
        return cls.NONE


@dataclass(frozen=True)
class ColorLevel:
    """Which color tiers a stream supports."""
    ansi: bool = False
    xterm: bool = False
    truecolor: bool = False

    @classmethod
    def none(cls) -> 'ColorLevel':
        return cls()


@dataclass(frozen=True)
class Override:
    """
    Overrides for the three color tiers.

    ansi:      basic 16-color escapes plus effects
    xterm:     the 256-color palette
    truecolor: 24-bit RGB
    """
    ansi: ColorOverride = ColorOverride.NONE
    xterm: ColorOverride = ColorOverride.NONE
    truecolor: ColorOverride = ColorOverride.NONE

    @classmethod
    def enable(cls) -> 'Override':
        return cls(ColorOverride.ENABLE, ColorOverride.ENABLE, ColorOverride.ENABLE)

    @classmethod
    def disable(cls) -> 'Override':
        return cls(ColorOverride.DISABLE, ColorOverride.DISABLE, ColorOverride.DISABLE)

    @classmethod
    def none(cls) -> 'Override':
        return cls()

    def with_ansi(self, value: ColorOverride) -> 'Override':
        return replace(self, ansi=value)

    def with_xterm(self, value: ColorOverride) -> 'Override':
        return replace(self, xterm=value)

    def with_truecolor(self, value: ColorOverride) -> 'Override':
        return replace(self, truecolor=value)

    @property
    def is_complete(self) -> bool:
        """True when no tier defers to capability detection."""
        return ColorOverride.NONE not in (self.ansi, self.xterm, self.truecolor)

    def to_num(self) -> int:
        return self.truecolor.value | (self.xterm.value << 2) | (self.ansi.value << 4)

    @classmethod
    def from_num(cls, value: int) -> 'Override':
        return cls(
            ansi=ColorOverride.from_num((value >> 4) & 0b11),
            xterm=ColorOverride.from_num((value >> 2) & 0b11),
            truecolor=ColorOverride.from_num(value & 0b11),
        )

    def to_level(self, default: Union[bool, ColorLevel]) -> ColorLevel:
        """Resolve each tier against a detected level (or one default for all)."""
        if isinstance(default, bool):
            default = ColorLevel(default, default, default)
        return ColorLevel(
            ansi=self.ansi.to_bool(default.ansi),
            xterm=self.xterm.to_bool(default.xterm),
            truecolor=self.truecolor.to_bool(default.truecolor),
        )


class AtomicOverride:
    """
    Process-wide override cell holding one packed int, laid out ``__AAXXTT``
    (two unused bits, then ansi, xterm and truecolor).

    ``load`` and ``store`` are each a single attribute read or write and take
    no lock. The single-tier stores read, modify and store the whole value,
    so two threads updating different tiers at once can lose one update:
    the last whole-value store wins.
    """
    __slots__ = ('_value',)

    def __init__(self, value: Override = Override()):
        self._value = value.to_num()

    def load(self) -> Override:
        return Override.from_num(self._value)

    def store(self, value: Override) -> None:
        self._value = value.to_num()

    def store_ansi(self, value: ColorOverride) -> None:
        self.store(self.load().with_ansi(value))

    def store_xterm(self, value: ColorOverride) -> None:
        self.store(self.load().with_xterm(value))

    def store_truecolor(self, value: ColorOverride) -> None:
        self.store(self.load().with_truecolor(value))


OVERRIDE = AtomicOverride()


def _as_override(value: Union[Override, bool]) -> Override:
    if isinstance(value, bool):
        return Override.enable() if value else Override.disable()
    return value


def override_ansi(value: ColorOverride) -> None:
    logger.debug(f"Override ansi -> {value.name}")
    OVERRIDE.store_ansi(value)


def override_xterm(value: ColorOverride) -> None:
    logger.debug(f"Override xterm -> {value.name}")
    OVERRIDE.store_xterm(value)


def override_truecolor(value: ColorOverride) -> None:
    logger.debug(f"Override truecolor -> {value.name}")
    OVERRIDE.store_truecolor(value)


def override_set(value: Union[Override, bool]) -> None:
    value = _as_override(value)
    logger.debug(f"Override set -> {value}")
    OVERRIDE.store(value)


def override_status() -> Override:
    return OVERRIDE.load()


def reset_override() -> None:
    """Return every tier to capability detection."""
    OVERRIDE.store(Override.none())


def set_override(enabled: bool) -> None:
    """Force basic ANSI support on or off."""
    override_ansi(ColorOverride.ENABLE if enabled else ColorOverride.DISABLE)


def unset_override() -> None:
    """Let basic ANSI support fall back to detection."""
    override_ansi(ColorOverride.NONE)


@contextmanager
def override(value: Union[Override, bool]) -> Iterator[Override]:
    """
    Install an override for the duration of a ``with`` block.

    The previous value is restored on every exit path. The cell is
    process-global, so other threads observe the temporary value while the
    block runs.
    """
    previous = OVERRIDE.load()
    value = _as_override(value)
    OVERRIDE.store(value)
    try:
        yield value
    finally:
        OVERRIDE.store(previous)


def with_override(value: Union[Override, bool], func: Callable[..., T], *args, **kwargs) -> T:
    """Call ``func`` with ``value`` installed, restoring the previous override afterwards."""
    with override(value):
        return func(*args, **kwargs)
