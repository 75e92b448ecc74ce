"""Encoding of byte strings and unsigned integers to Azam codec text."""

from __future__ import annotations

import io
from typing import BinaryIO, Iterable, Iterator

from azamcodec.uints import UInt

LOWER_ALPHABET = b"0123456789abcdef"
HIGHER_ALPHABET = b"ghjkmnpqrstvwxyz"


def _iter_bytes(reader: BinaryIO) -> Iterator[int]:
    for chunk in iter(lambda: reader.read(1), b""):
        yield chunk[0]


def encode_stream(reader: BinaryIO, writer: BinaryIO) -> int:
    """Encode all bytes from ``reader`` as one section written to ``writer``.

    Returns the number of bytes read. Raises EOFError if ``reader`` is empty.
    """
    count = 0
    started = False
    pending: int | None = None
    for byte in _iter_bytes(reader):
        count += 1
        nybbles: tuple[int, ...] = (byte >> 4, byte & 0x0F)
        if not started:
            if byte == 0:
                continue
            started = True
            if byte >> 4 == 0:
                nybbles = (byte & 0x0F,)
        for nybble in nybbles:
            if pending is not None:
                writer.write(HIGHER_ALPHABET[pending : pending + 1])
            pending = nybble
    if count == 0:
        raise EOFError("no bytes to encode")
    last = 0 if pending is None else pending
    writer.write(LOWER_ALPHABET[last : last + 1])
    return count


def encode_bytes_to_bytes(value: bytes) -> bytes:
    """Encode a non-empty byte string as one section, returned as ASCII bytes."""
    out = io.BytesIO()
    encode_stream(io.BytesIO(bytes(value)), out)
    return out.getvalue()


def encode_bytes(value: bytes) -> str:
    """Encode a non-empty byte string as one section."""
    return encode_bytes_to_bytes(value).decode("ascii")


def encode_sections_to_bytes(values: Iterable[bytes]) -> bytes:
    """Encode each byte string as a section and concatenate them as ASCII bytes."""
    return b"".join(encode_bytes_to_bytes(value) for value in values)


def encode_sections(values: Iterable[bytes]) -> str:
    """Encode each byte string as a section and concatenate them."""
    return encode_sections_to_bytes(values).decode("ascii")


def encode_uint_to(value: int, kind: UInt, writer: BinaryIO) -> int:
    """Write ``value`` of width ``kind`` as one section to ``writer``; return bytes read."""
    return encode_stream(io.BytesIO(kind.to_bytes(value)), writer)


def encode_uint(value: int, kind: UInt) -> str:
    """Encode ``value`` of width ``kind`` as one section."""
    out = io.BytesIO()
    encode_uint_to(value, kind, out)
    return out.getvalue().decode("ascii")


def encode_values(*args: tuple[int, UInt]) -> str:
    """Encode ``(value, kind)`` pairs as consecutive sections of one string."""
    out = io.BytesIO()
    for value, kind in args:
        encode_uint_to(value, kind, out)
    return out.getvalue().decode("ascii")