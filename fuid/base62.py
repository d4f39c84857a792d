"""
Base62 codec for 128-bit unsigned integers.

Encodes numbers into strings over [0-9A-Za-z], which produces identifiers
that are shorter than UUIDs and safe in URLs, filenames and double-click
selection.
"""
import string

from fuid.exceptions import ArithmeticOverflow, InvalidBase62Character

# Base62 character set: [0-9A-Za-z]. Order is part of the wire format.
ALPHABET = string.digits + string.ascii_uppercase + string.ascii_lowercase
BASE = len(ALPHABET)

MAX_VALUE = (1 << 128) - 1
# 62**21 < 2**128 < 62**22
MAX_LENGTH = 22

_CHAR_TO_VALUE = {char: index for index, char in enumerate(ALPHABET)}


def check_uint128(num: int) -> None:
    # bool is an int subclass, but True is not an identifier
    if not isinstance(num, int) or isinstance(num, bool):
        raise TypeError(f"Expected int, got {type(num).__name__}")
    if not 0 <= num <= MAX_VALUE:
        raise ValueError(f"{num} is outside the 128-bit unsigned range")


def encode(num: int) -> str:
    """
    Encode a 128-bit unsigned integer to a base62 string.

    Args:
        num: Integer in the range [0, 2**128 - 1]

    Returns:
        Base62 encoded string, most significant character first, without
        padding. Zero encodes to "0".

    Raises:
        TypeError: If num is not an int
        ValueError: If num is negative or wider than 128 bits

    Examples:
        >>> encode(852751187393)
        'F0ob4rZ'
        >>> encode(0)
        '0'
    """
    check_uint128(num)

    if num == 0:
        return ALPHABET[0]

    encoded = []

    while num > 0:
        num, remainder = divmod(num, BASE)
        encoded.append(ALPHABET[remainder])

    return "".join(reversed(encoded))


def decode(encoded: str) -> int:
    """
    Decode a base62 string into a 128-bit unsigned integer.

    Characters are consumed from the right (least significant) to the left.
    An empty string decodes to 0.

    Args:
        encoded: Base62 string over [0-9A-Za-z]

    Returns:
        The decoded integer

    Raises:
        TypeError: If encoded is not a str
        InvalidBase62Character: If a character is outside the alphabet. The
            reported position is 1-based from the start of the string.
        ArithmeticOverflow: If the value, or any positional weight on the
            way to it, exceeds 2**128 - 1

    Examples:
        >>> decode("F0ob4rZ")
        852751187393
    """
    if not isinstance(encoded, str):
        raise TypeError(f"Expected str, got {type(encoded).__name__}")

    length = len(encoded)
    total = 0

    for index, char in enumerate(reversed(encoded)):
        value = _CHAR_TO_VALUE.get(char)
        if value is None:
            raise InvalidBase62Character(char, length - index)

        weight = BASE ** index
        if weight > MAX_VALUE:
            raise ArithmeticOverflow()

        term = value * weight
        if term > MAX_VALUE:
            raise ArithmeticOverflow()

        total += term
        if total > MAX_VALUE:
            raise ArithmeticOverflow()

    return total
