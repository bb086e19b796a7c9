from __future__ import annotations


class VCardError(Exception):
    """Base class for errors raised while reading vCard text."""


class VCardFormatError(VCardError):
    """Malformed vCard input.

    ``lineno`` is 1-based. When the input ends early it points one past the
    last line.
    """

    def __init__(self, message: str, lineno: int):
        super().__init__(f"line {lineno}: {message}")
        self.message = message
        self.lineno = lineno


__all__ = ["VCardError", "VCardFormatError"]
