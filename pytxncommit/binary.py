# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
Binary wire types for pytxncommit.

Schemas are declared as ordered Fields over a handful of primitive types,
then used to encode plain dataclass instances and to decode bytes back into
them. Nested repeated groups are expressed as an Array of a Schema.

Binary Format Conventions:
- All multi-byte integers are big-endian
- Strings are length-prefixed: [2 bytes len][N bytes UTF-8]
- Arrays are count-prefixed: [4 bytes count][N elements]
- Structs are their fields in declaration order, with no padding
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Any, Callable

from .exceptions import SchemaMismatchError, TruncatedBufferError


class ReadBuffer:
    """Cursor over an immutable byte buffer."""

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._data = memoryview(data)
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos

    def read(self, size: int, field: str) -> memoryview:
        """
        Consume the next size bytes.

        Raises:
            TruncatedBufferError: If fewer than size bytes remain.
        """
        if size > self.remaining:
            raise TruncatedBufferError(field, size, self.remaining)
        chunk = self._data[self._pos:self._pos + size]
        self._pos += size
        return chunk


class WireType:
    """Base class for anything that can be written to and read from the wire."""

    # Fewest bytes any encoded value of this type occupies.
    min_size: int = 0

    def encode(self, value: Any, out: bytearray, field: str) -> None:
        raise NotImplementedError

    def decode(self, buf: ReadBuffer, field: str) -> Any:
        raise NotImplementedError


class FixedInt(WireType):
    """Signed big-endian integer of fixed width."""

    def __init__(self, fmt: str, name: str) -> None:
        self.fmt = fmt
        self.name = name
        self.size = struct.calcsize(fmt)
        self.min_size = self.size
        bits = self.size * 8
        self.min_value = -(1 << (bits - 1))
        self.max_value = (1 << (bits - 1)) - 1

    def encode(self, value: int, out: bytearray, field: str) -> None:
        if not self.min_value <= value <= self.max_value:
            raise SchemaMismatchError(field, f"{value} does not fit in {self.name}")
        out += struct.pack(self.fmt, value)

    def decode(self, buf: ReadBuffer, field: str) -> int:
        return struct.unpack(self.fmt, buf.read(self.size, field))[0]

    def __repr__(self) -> str:
        return self.name.capitalize()


INT16 = FixedInt(">h", "int16")
INT32 = FixedInt(">i", "int32")


class String(WireType):
    """Non-nullable UTF-8 string with an int16 length prefix."""

    min_size = 2

    def encode(self, value: str, out: bytearray, field: str) -> None:
        try:
            data = value.encode("utf-8")
        except UnicodeEncodeError as e:
            raise SchemaMismatchError(field, f"invalid UTF-8 ({e.reason})") from e
        if len(data) > INT16.max_value:
            raise SchemaMismatchError(field, f"string of {len(data)} bytes is longer than {INT16.max_value}")
        INT16.encode(len(data), out, field)
        out += data

    def decode(self, buf: ReadBuffer, field: str) -> str:
        length = INT16.decode(buf, field)
        if length < 0:
            raise SchemaMismatchError(field, "null value for non-nullable string")
        raw = buf.read(length, field)
        try:
            return bytes(raw).decode("utf-8")
        except UnicodeDecodeError as e:
            raise SchemaMismatchError(field, f"invalid UTF-8 ({e.reason})") from e

    def __repr__(self) -> str:
        return "String"


STRING = String()


@dataclass(frozen=True)
class Field:
    """A named, typed slot in a Schema."""

    name: str
    type: WireType
    doc: str = ""


class Schema(WireType):
    """
    Ordered sequence of fields.

    Encoding reads each field by name from the value, so any object with
    the declared attributes can be written; attributes the schema does not
    declare are ignored. Decoding builds the result with ``factory``,
    passing every declared field as a keyword argument.
    """

    def __init__(self, *fields: Field, factory: Callable[..., Any]) -> None:
        self.fields = fields
        self.factory = factory

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.fields)

    @property
    def min_size(self) -> int:
        return sum(f.type.min_size for f in self.fields)

    def encode(self, value: Any, out: bytearray, field: str = "struct") -> None:
        for f in self.fields:
            f.type.encode(getattr(value, f.name), out, f.name)

    def decode(self, buf: ReadBuffer, field: str = "struct") -> Any:
        values = {}
        for f in self.fields:
            values[f.name] = f.type.decode(buf, f.name)
        return self.factory(**values)

    def to_bytes(self, value: Any) -> bytes:
        out = bytearray()
        self.encode(value, out)
        return bytes(out)

    def __repr__(self) -> str:
        inner = ", ".join(f"{f.name}: {f.type!r}" for f in self.fields)
        return "{" + inner + "}"


class Array(WireType):
    """Repeated group of structs with an int32 count prefix."""

    min_size = INT32.size

    def __init__(self, schema: Schema) -> None:
        self.schema = schema

    def encode(self, value: Any, out: bytearray, field: str) -> None:
        INT32.encode(len(value), out, field)
        for item in value:
            self.schema.encode(item, out, field)

    def decode(self, buf: ReadBuffer, field: str) -> tuple[Any, ...]:
        count = INT32.decode(buf, field)
        if count < 0:
            raise SchemaMismatchError(field, f"array size {count} cannot be negative")
        needed = count * self.schema.min_size
        if needed > buf.remaining:
            raise TruncatedBufferError(field, needed, buf.remaining)
        return tuple(self.schema.decode(buf, field) for _ in range(count))

    def __repr__(self) -> str:
        return f"ARRAY({self.schema!r})"
