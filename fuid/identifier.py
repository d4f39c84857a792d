"""
The Fuid identifier type.

A Fuid is a 128-bit value generated like a random UUID but rendered as a
short base62 string instead of hyphenated hex:

    >>> fid = Fuid.from_int(852751187393)
    >>> str(fid)
    'F0ob4rZ'
    >>> Fuid.from_string("F0ob4rZ") == fid
    True

The integer is the canonical form. The string form is derived on demand.
"""
import uuid
from functools import total_ordering
from typing import Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from fuid import base62
from fuid.entropy import random_uuid_int
from fuid.exceptions import DecodeError, FuidLiteralError
from fuid.logging_config import setup_logging

logger = setup_logging()

UUID_BYTES = 16


def _decode_logged(encoded: str) -> int:
    try:
        return base62.decode(encoded)
    except DecodeError as e:
        logger.debug(f"Rejected FUID string {encoded!r}: {e}")
        raise


@total_ordering
class Fuid:
    """
    Immutable 128-bit identifier with a base62 text form.

    Equality, ordering and hashing follow the wrapped integer, so ordering
    is numeric and not the lexicographic order of the encoded strings.

    Accepts an int, a base62 str, a uuid.UUID or another Fuid.
    """

    __slots__ = ("_value",)

    def __init__(self, value: "int | str | uuid.UUID | Fuid"):
        if isinstance(value, Fuid):
            num = value._value
        elif isinstance(value, uuid.UUID):
            num = value.int
        elif isinstance(value, str):
            num = _decode_logged(value)
        else:
            base62.check_uint128(value)
            num = value
        object.__setattr__(self, "_value", num)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def new(cls) -> "Fuid":
        """Generate a random identifier from a version 4 UUID."""
        return cls(random_uuid_int())

    @classmethod
    def from_int(cls, num: int) -> "Fuid":
        """
        Wrap a 128-bit unsigned integer verbatim.

        Raises:
            TypeError: If num is not an int
            ValueError: If num is outside [0, 2**128 - 1]
        """
        # The constructor also takes str, UUID and Fuid; from_int does not
        if not isinstance(num, int):
            raise TypeError(f"Expected int, got {type(num).__name__}")
        return cls(num)

    @classmethod
    def from_string(cls, encoded: str) -> "Fuid":
        """
        Decode a base62 string into an identifier.

        Raises:
            InvalidBase62Character: If a character is outside [0-9A-Za-z]
            ArithmeticOverflow: If the value does not fit in 128 bits
        """
        return cls(_decode_logged(encoded))

    @classmethod
    def parse(cls, text: str) -> "Fuid":
        """Parse text into a Fuid. Same contract as from_string()."""
        return cls.from_string(text)

    @classmethod
    def from_uuid(cls, value: uuid.UUID) -> "Fuid":
        """Reinterpret a UUID's 128 bits as an identifier."""
        return cls(value.int)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Fuid":
        """
        Build an identifier from 16 big-endian bytes (the uuid.UUID.bytes layout).

        Raises:
            ValueError: If data is not exactly 16 bytes long
        """
        if len(data) != UUID_BYTES:
            raise ValueError(f"Expected {UUID_BYTES} bytes, got {len(data)}")
        return cls(int.from_bytes(data, byteorder="big"))

    # Aliases
    with_int = from_int
    with_string = from_string

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    @property
    def value(self) -> int:
        return self._value

    def to_int(self) -> int:
        return self._value

    def to_string(self) -> str:
        return base62.encode(self._value)

    def to_uuid(self) -> uuid.UUID:
        return uuid.UUID(int=self._value)

    def to_bytes(self) -> bytes:
        return self._value.to_bytes(UUID_BYTES, byteorder="big")

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Fuid({self.to_string()!r})"

    def __format__(self, format_spec: str) -> str:
        # Non-empty specs format the integer, e.g. f"{fid:032x}"
        if not format_spec:
            return self.to_string()
        return format(self._value, format_spec)

    def __int__(self) -> int:
        return self._value

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fuid):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Fuid):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self._value,))

    def __copy__(self) -> "Fuid":
        return self

    def __deepcopy__(self, memo: dict) -> "Fuid":
        return self

    # ------------------------------------------------------------------
    # pydantic integration
    # ------------------------------------------------------------------

    @classmethod
    def _validate(cls, value: Any) -> "Fuid":
        if isinstance(value, cls):
            return value
        if isinstance(value, uuid.UUID):
            return cls.from_uuid(value)
        if isinstance(value, str):
            # DecodeError is a ValueError, so pydantic reports it as a ValidationError
            return cls.from_string(value)
        raise ValueError(
            f"Expected Fuid, UUID or base62 string, got {type(value).__name__}"
        )

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """
        Validate from str (or Fuid/UUID in Python mode), serialize to the base62 string.
        """
        from_str = core_schema.chain_schema(
            [
                core_schema.str_schema(),
                core_schema.no_info_plain_validator_function(cls._validate),
            ]
        )
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.no_info_plain_validator_function(cls._validate),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda fid: fid.to_string(),
                return_schema=core_schema.str_schema(),
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        json_schema = handler(schema)
        json_schema.update(
            type="string",
            pattern=f"^[0-9A-Za-z]{{0,{base62.MAX_LENGTH}}}$",
        )
        return json_schema


def fuid(value: "int | str | uuid.UUID") -> Fuid:
    """
    Build a Fuid from a literal value, failing loudly on bad input.

    Use this for identifiers written in source code or fixtures. Unlike
    Fuid.from_string(), a malformed value raises FuidLiteralError, which is
    not a DecodeError and therefore is not absorbed by handlers meant for
    bad user input.

    Examples:
        >>> fuid("F0ob4rZ").to_int()
        852751187393
        >>> fuid(0)
        Fuid('0')

    Raises:
        FuidLiteralError: If value is not a valid int, str or UUID literal
    """
    try:
        return Fuid(value)
    except (ValueError, TypeError) as e:
        logger.warning(f"Invalid FUID literal {value!r}: {e}")
        raise FuidLiteralError(value) from e
