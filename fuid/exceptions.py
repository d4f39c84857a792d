"""
FUID-specific exceptions.

These exceptions describe why a string could not be turned into an identifier.
"""


class DecodeError(ValueError):
    """Base exception for base62 decoding failures."""

    pass


class InvalidBase62Character(DecodeError):
    """Raised when the input contains a character outside [0-9A-Za-z]."""

    def __init__(self, char: str, position: int):
        self.char = char
        # 1-based, counted from the start of the string
        self.position = position
        super().__init__(
            f"Invalid base62 character {char!r} at position {position}"
        )


class ArithmeticOverflow(DecodeError):
    """Raised when the decoded value does not fit in 128 bits."""

    def __init__(self):
        super().__init__("Decoded value exceeds the 128-bit unsigned range")


class FuidLiteralError(Exception):
    """Raised by the fuid() literal helper when given a malformed value.

    Deliberately not a DecodeError: a bad literal is a bug in the calling
    code, not bad user input.
    """

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid FUID literal: {value!r}")
