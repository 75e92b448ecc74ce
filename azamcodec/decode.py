"""Decoding of Azam codec text to byte strings and unsigned integers."""

from __future__ import annotations

import io
from typing import BinaryIO, Iterator

from azamcodec.uints import UInt


def _build_table() -> dict[int, int]:
    table: dict[int, int] = {}
    low_groups = ["0oO", "1ilIL", "2", "3", "4", "5", "6", "7", "8", "9",
                  "aA", "bB", "cC", "dD", "eE", "fF"]
    high_groups = "ghjkmnpqrstvwxyz"
    for value, symbols in enumerate(low_groups):
        for symbol in symbols:
            table[ord(symbol)] = value
    for value, symbol in enumerate(high_groups):
        table[ord(symbol)] = 0x10 | value
        table[ord(symbol.upper())] = 0x10 | value
    return table


_NYBBLES = _build_table()


class InvalidSymbolError(ValueError):
    """Raised when encoded input holds a symbol that cannot appear where it does."""

    def __init__(self, symbol: int, reason: str = "invalid symbol") -> None:
        self.symbol = symbol
        self.reason = reason
        super().__init__(f"{reason}: {bytes([symbol])!r}")


def nybble_value(symbol: int | str) -> int | None:
    """Return the nybble for a symbol, with 0x10 added for high nybbles.

    ``symbol`` is a byte value or a one-character string. Returns None for
    symbols outside the alphabet.
    """
    if isinstance(symbol, str):
        if len(symbol) != 1:
            raise ValueError("expected a single character")
        symbol = ord(symbol)
    return _NYBBLES.get(symbol)


def _symbols(reader: BinaryIO, limit: int | None) -> Iterator[int]:
    remaining = limit
    while remaining is None or remaining > 0:
        chunk = reader.read(1)
        if not chunk:
            return
        if remaining is not None:
            remaining -= 1
        yield chunk[0]


def _decode(reader: BinaryIO, writer: BinaryIO, limit: int | None) -> int:
    nybbles: list[int] = []
    for symbol in _symbols(reader, limit):
        value = nybble_value(symbol)
        if value is None:
            raise InvalidSymbolError(symbol)
        if not nybbles and value == 0x10:
            raise InvalidSymbolError(symbol, "section starts with a zero high nybble")
        nybbles.append(value & 0x0F)
        if value < 0x10:
            break
    else:
        raise EOFError("encoded section ended before its final nybble")
    count = len(nybbles)
    if count % 2:
        nybbles.insert(0, 0)
    pairs = iter(nybbles)
    writer.write(bytes((high << 4) | low for high, low in zip(pairs, pairs)))
    return count


def decode_stream(reader: BinaryIO, writer: BinaryIO) -> int:
    """Decode the first section read from ``reader`` and write its bytes to ``writer``.

    Returns the number of symbols consumed. Raises EOFError if the input ends
    before the section does and InvalidSymbolError on a bad symbol.
    """
    return _decode(reader, writer, None)


def decode_stream_until(reader: BinaryIO, writer: BinaryIO, limit: int) -> int:
    """Like :func:`decode_stream`, reading at most ``limit`` symbols."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    return _decode(reader, writer, limit)


def _as_reader(value: str) -> io.BytesIO:
    return io.BytesIO(value.encode("utf-8"))


def decode_bytes(value: str) -> bytes:
    """Decode the first section of ``value``."""
    out = io.BytesIO()
    decode_stream(_as_reader(value), out)
    return out.getvalue()


def decode_bytes_until(value: str, limit: int) -> bytes:
    """Decode the first section of ``value``, reading at most ``limit`` symbols."""
    out = io.BytesIO()
    decode_stream_until(_as_reader(value), out, limit)
    return out.getvalue()


def decode_sections(value: str) -> list[bytes]:
    """Decode every section of ``value`` in order."""
    data = value.encode("utf-8")
    reader = io.BytesIO(data)
    sections: list[bytes] = []
    while reader.tell() < len(data):
        out = io.BytesIO()
        decode_stream(reader, out)
        sections.append(out.getvalue())
    return sections


def decode_uint_from(reader: BinaryIO, kind: UInt) -> int:
    """Decode one section from ``reader`` as an unsigned integer of width ``kind``."""
    out = io.BytesIO()
    decode_stream_until(reader, out, kind.size * 2)
    return kind.from_bytes(out.getvalue())


def decode_uint(value: str, kind: UInt) -> int:
    """Decode the first section of ``value`` as an unsigned integer of width ``kind``."""
    return decode_uint_from(_as_reader(value), kind)


def decode_values_from(reader: BinaryIO, *args: UInt) -> tuple[int, ...]:
    """Decode consecutive sections from ``reader``, one for each kind given."""
    return tuple(decode_uint_from(reader, kind) for kind in args)


def decode_values(value: str, *args: UInt) -> tuple[int, ...]:
    """Decode consecutive sections of ``value``, one for each kind given."""
    return decode_values_from(_as_reader(value), *args)