"""
Short, human-friendly 128-bit identifiers.

A Fuid is generated like a random UUID but rendered in base62
([0-9A-Za-z], at most 22 characters):

    >>> from fuid import Fuid
    >>> fid = Fuid.new()
    >>> Fuid.from_string(str(fid)) == fid
    True
"""

from fuid.base62 import decode, encode
from fuid.exceptions import (
    ArithmeticOverflow,
    DecodeError,
    FuidLiteralError,
    InvalidBase62Character,
)
from fuid.identifier import Fuid, fuid

__version__ = "0.1.0"

__all__ = [
    "Fuid",
    "fuid",
    "encode",
    "decode",
    "DecodeError",
    "InvalidBase62Character",
    "ArithmeticOverflow",
    "FuidLiteralError",
]
