# exceptions.py

class ParseColorError(ValueError):
    """Raised when a color descriptor string cannot be parsed."""

    def __init__(self, descriptor: str, reason: str = "unrecognized color descriptor"):
        self.descriptor = descriptor
        self.reason = reason
        super().__init__(f"{reason}: {descriptor!r}")
