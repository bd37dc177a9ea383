# colorize.py

from typing import Any

from .display import Colorize


class Colorizable(Colorize):
    """
    Entry point for fluent styling of any value.

    Renders exactly like the wrapped value until a styling method is called:

        colorize("warning").yellow().on_black()
        colorize(255).bold()
    """
    __slots__ = ('value',)

    def __init__(self, value: Any):
        self.value = value

    def _target(self) -> Any:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return repr(self.value)

    def __format__(self, format_spec: str) -> str:
        return format(self.value, format_spec)


def colorize(value: Any) -> Colorizable:
    return Colorizable(value)
