# supports.py

import sys
from enum import Enum
from functools import lru_cache
from typing import Any, Callable, Dict, Optional, TextIO

from prompt_toolkit.output.color_depth import ColorDepth
from rich.console import Console

from .logger import Logger
from .overrides import OVERRIDE, ColorLevel

logger = Logger(__name__)


class Stream(Enum):
    """Output streams whose color support can be queried."""
    STDOUT = 'stdout'
    STDERR = 'stderr'

    @property
    def file(self) -> TextIO:
        return sys.stdout if self is Stream.STDOUT else sys.stderr


_DEPTH_LEVELS: Dict[ColorDepth, ColorLevel] = {
    ColorDepth.DEPTH_1_BIT: ColorLevel.none(),
    ColorDepth.DEPTH_4_BIT: ColorLevel(ansi=True),
    ColorDepth.DEPTH_8_BIT: ColorLevel(ansi=True, xterm=True),
    ColorDepth.DEPTH_24_BIT: ColorLevel(ansi=True, xterm=True, truecolor=True),
}

_SYSTEM_LEVELS: Dict[Optional[str], ColorLevel] = {
    'standard': ColorLevel(ansi=True),
    'windows': ColorLevel(ansi=True),
    '256': ColorLevel(ansi=True, xterm=True),
    'truecolor': ColorLevel(ansi=True, xterm=True, truecolor=True),
}


@lru_cache(maxsize=None)
def probe(stream: Stream) -> ColorLevel:
    """
    Detect what a stream supports. Runs at most once per stream per process.

    An explicit depth from the environment (``NO_COLOR``,
    ``PROMPT_TOOLKIT_COLOR_DEPTH``) wins; otherwise a rich Console bound to
    the stream decides from TERM, COLORTERM, FORCE_COLOR and TTY state.
    """
    depth = ColorDepth.from_env()
    if depth is not None:
        level = _DEPTH_LEVELS[depth]
        logger.debug(f"Probed {stream.value} from environment: {depth.value} -> {level}")
        return level

    color_system = Console(file=stream.file).color_system
    level = _SYSTEM_LEVELS.get(color_system, ColorLevel.none())
    logger.debug(f"Probed {stream.value} via console: {color_system} -> {level}")
    return level


def clear_probe_cache() -> None:
    probe.cache_clear()


def supports(stream: Stream) -> ColorLevel:
    """Resolve the effective color level of a stream, overrides first."""
    status = OVERRIDE.load()
    if status.is_complete:
        return status.to_level(False)
    return status.to_level(probe(stream))


class ConditionalDisplay:
    """
    Renders ``apply(value)`` when ``enabled()`` holds at render time,
    otherwise renders ``value`` untouched.
    """
    __slots__ = ('value', 'apply', 'stream')

    def __init__(self, value: Any, apply: Callable[[Any], Any], stream: Stream):
        self.value = value
        self.apply = apply
        self.stream = stream

    def enabled(self) -> bool:
        raise NotImplementedError

    def _resolve(self) -> Any:
        if self.enabled():
            return self.apply(self.value)
        return self.value

    def __str__(self) -> str:
        return str(self._resolve())

    def __repr__(self) -> str:
        return repr(self._resolve())

    def __format__(self, format_spec: str) -> str:
        return format(self._resolve(), format_spec)


class SupportsColorsDisplay(ConditionalDisplay):
    """Styles only if the stream supports basic ANSI colors, overrides included."""
    __slots__ = ()

    def enabled(self) -> bool:
        return supports(self.stream).ansi


class TtyDisplay(ConditionalDisplay):
    """Styles only if the stream is attached to a terminal. Overrides are not consulted."""
    __slots__ = ()

    def enabled(self) -> bool:
        isatty = getattr(self.stream.file, 'isatty', None)
        return bool(isatty and isatty())
