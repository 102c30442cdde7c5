"""Decoding of protobuf wire-format messages."""

from __future__ import annotations

import argparse
import enum
from dataclasses import dataclass, field
from pprint import pprint
from typing import Optional, Protocol, Sequence, TypeVar, Union

_MAX_VARINT_BYTES = 7


class DecodeError(ValueError):
    """Raised when data is not a valid message."""


class WireType(enum.IntEnum):
    """A wire type as seen on the wire."""

    VARINT = 0
    """The value is a single VARINT."""
    LEN = 2
    """A VARINT length followed by exactly that number of bytes."""
    I32 = 5
    """Four bytes holding a little-endian signed 32-bit integer."""


@dataclass(frozen=True)
class FieldValue:
    """A field's value, typed by its wire type."""

    wire_type: WireType
    value: Union[int, bytes]

    def as_string(self) -> str:
        """Return the value as UTF-8 text."""
        if self.wire_type is not WireType.LEN:
            raise DecodeError("Expected string to be a `Len` field")
        try:
            return bytes(self.value).decode("utf-8")
        except UnicodeDecodeError as err:
            raise DecodeError("Invalid string") from err

    def as_bytes(self) -> bytes:
        """Return the value as raw bytes."""
        if self.wire_type is not WireType.LEN:
            raise DecodeError("Expected bytes to be a `Len` field")
        return bytes(self.value)

    def as_u64(self) -> int:
        """Return the value as an unsigned integer."""
        if self.wire_type is not WireType.VARINT:
            raise DecodeError("Expected `u64` to be a `Varint` field")
        return int(self.value)

    def as_i32(self) -> int:
        """Return the value as a signed 32-bit integer."""
        if self.wire_type is not WireType.I32:
            raise DecodeError("Expected `i32` to be an `I32` field")
        return int(self.value)


@dataclass(frozen=True)
class Field:
    """A field number and its value."""

    field_num: int
    value: FieldValue


class _Message(Protocol):
    def add_field(self, field: Field) -> None: ...


M = TypeVar("M", bound=_Message)


def parse_varint(data: bytes) -> tuple[int, bytes]:
    """Parse a VARINT, returning its value and the remaining bytes."""
    data = bytes(data)
    for index, byte in enumerate(data[:_MAX_VARINT_BYTES]):
        if not byte & 0x80:
            value = sum(
                (part & 0x7F) << (7 * shift)
                for shift, part in enumerate(data[: index + 1])
            )
            return value, data[index + 1 :]
    if len(data) < _MAX_VARINT_BYTES:
        raise DecodeError("Not enough bytes for varint")
    raise DecodeError("Too many bytes for varint")


def unpack_tag(tag: int) -> tuple[int, WireType]:
    """Split a tag into a field number and a wire type."""
    try:
        wire_type = WireType(tag & 0x7)
    except ValueError as err:
        raise DecodeError(f"Invalid wire type: {tag & 0x7}") from err
    return tag >> 3, wire_type


def parse_field(data: bytes) -> tuple[Field, bytes]:
    """Parse one field, returning it and the remaining bytes."""
    tag, remainder = parse_varint(data)
    field_num, wire_type = unpack_tag(tag)
    if wire_type is WireType.VARINT:
        value, remainder = parse_varint(remainder)
        field_value = FieldValue(wire_type, value)
    elif wire_type is WireType.LEN:
        length, remainder = parse_varint(remainder)
        if len(remainder) < length:
            raise DecodeError("Unexpected EOF")
        field_value = FieldValue(wire_type, remainder[:length])
        remainder = remainder[length:]
    else:
        if len(remainder) < 4:
            raise DecodeError("Unexpected EOF")
        number = int.from_bytes(remainder[:4], "little", signed=True)
        field_value = FieldValue(wire_type, number)
        remainder = remainder[4:]
    return Field(field_num, field_value), remainder


def parse_message(data: bytes, message_type: type[M]) -> M:
    """Parse all of ``data`` into a new ``message_type``, field by field."""
    result = message_type()
    remainder = bytes(data)
    while remainder:
        parsed, remainder = parse_field(remainder)
        result.add_field(parsed)
    return result


@dataclass
class PhoneNumber:
    """A phone number and its kind."""

    number: str = ""
    type_: str = ""

    def add_field(self, field: Field) -> None:
        """Store a decoded field; unknown fields are skipped."""
        if field.field_num == 1:
            self.number = field.value.as_string()
        elif field.field_num == 2:
            self.type_ = field.value.as_string()


@dataclass
class Person:
    """A person with a name, an id and phone numbers."""

    name: str = ""
    id: int = 0
    phone: list[PhoneNumber] = field(default_factory=list)

    def add_field(self, field: Field) -> None:
        """Store a decoded field; unknown fields are skipped."""
        if field.field_num == 1:
            self.name = field.value.as_string()
        elif field.field_num == 2:
            self.id = field.value.as_u64()
        elif field.field_num == 3:
            self.phone.append(parse_message(field.value.as_bytes(), PhoneNumber))


EXAMPLE_PERSON = bytes(
    [
        0x0A, 0x07, 0x6D, 0x61, 0x78, 0x77, 0x65, 0x6C, 0x6C, 0x10, 0x2A, 0x1A,
        0x16, 0x0A, 0x0E, 0x2B, 0x31, 0x32, 0x30, 0x32, 0x2D, 0x35, 0x35, 0x35,
        0x2D, 0x31, 0x32, 0x31, 0x32, 0x12, 0x04, 0x68, 0x6F, 0x6D, 0x65, 0x1A,
        0x18, 0x0A, 0x0E, 0x2B, 0x31, 0x38, 0x30, 0x30, 0x2D, 0x38, 0x36, 0x37,
        0x2D, 0x35, 0x33, 0x30, 0x38, 0x12, 0x06, 0x6D, 0x6F, 0x62, 0x69, 0x6C,
        0x65,
    ]
)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Decode an example person message and print it."""
    argparse.ArgumentParser(description=main.__doc__).parse_args(argv)
    pprint(parse_message(EXAMPLE_PERSON, Person))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())