# azamcodec

Encoder and decoder for Azam Codec. It is a base16 encoding of byte strings
that sorts correctly as text and can hold several sections. It has no
third-party dependencies.

Each byte string is encoded as one *section*, with one symbol per nybble.
Every symbol except the last comes from the "high" alphabet
`ghjkmnpqrstvwxyz`. The last symbol comes from the "low" alphabet
`0123456789abcdef`. Because the low symbol marks where a section ends,
several sections can be written one after another and split apart again
when read. Leading zero nybbles are dropped, so encoded numbers sort
correctly as text. The bytes `b"\x00"` encode as `"0"`.

Decoding is lenient about input. It ignores case, reads `o` and `O` as `0`,
and reads `i`, `l`, `I` and `L` as `1`.

## Installation

```
pip install azamcodec
```

## Encoding

Module `azamcodec.encode`:

```python
from azamcodec.encode import encode_bytes, encode_sections

encode_bytes(bytes([0xDE, 0xAD, 0xBE, 0xEF]))   # "xytxvyyf"
encode_bytes(b"\x15")                           # "h5"
encode_bytes(b"\xc0\x01")                       # "wgg1"

encode_sections([b"\xde\xad\xbe\xef", b"\x15", b"\xc0\x01"])
# "xytxvyyfh5wgg1"
```

- `encode_bytes_to_bytes(value)` returns the encoded text as ASCII `bytes`.
- `encode_sections_to_bytes(values)` returns the encoded text as ASCII `bytes`.
- `encode_stream(reader, writer)` encodes every byte from one binary file-like object into another as a single section. It returns the number of bytes read.

Encoding an empty byte string raises `EOFError`.

### Unsigned integers

`azamcodec.uints.UInt` names a fixed width: `U8`, `U16`, `U32`, `U64` or
`U128`. Each member has these properties and methods:

- `size`: the width in bytes.
- `max_value`: the largest value the width can hold.
- `to_bytes(value)`: the value as big-endian bytes of exactly that width.
- `from_bytes(data)`: reads big-endian bytes, treating shorter input as zero-padded on the left.

```python
from azamcodec.encode import encode_uint, encode_values
from azamcodec.uints import UInt

encode_uint(0xDEADBEEF, UInt.U32)    # "xytxvyyf"
encode_uint(0x1000, UInt.U16)        # "hgg0"
encode_values((0xDEADBEEF, UInt.U32), (0x15, UInt.U8), (0xC001, UInt.U16))
# "xytxvyyfh5wgg1"
```

`encode_uint_to(value, kind, writer)` writes the section to a binary writer.

A value that does not fit the width raises `ValueError`. A value that is not
an `int` raises `TypeError`.

## Decoding

Module `azamcodec.decode`:

```python
from azamcodec.decode import decode_bytes, decode_sections, decode_uint, decode_values
from azamcodec.uints import UInt

decode_bytes("xytxvyyfh5wgg1")      # b"\xde\xad\xbe\xef"  (first section only)
decode_sections("xytxvyyfh5wgg1")   # [b"\xde\xad\xbe\xef", b"\x15", b"\xc0\x01"]

decode_uint("xytxvyyfh5wgg1", UInt.U32)                      # 0xDEADBEEF
decode_values("xytxvyyfh5wgg1", UInt.U32, UInt.U8, UInt.U16)
# (0xDEADBEEF, 0x15, 0xC001)
```

- `decode_bytes_until(value, limit)` reads at most `limit` symbols.
- `decode_stream(reader, writer)` works on binary file-like objects and returns the number of symbols consumed. The reader is left at the start of the next section.
- `decode_stream_until(reader, writer, limit)` is the same, but reads at most `limit` symbols. A negative limit raises `ValueError`.
- `decode_uint_from(reader, kind)` reads one section as an integer of the given width, reading at most twice its size in symbols.
- `decode_values_from(reader, *kinds)` reads one section per kind and returns the values as a tuple.
- `nybble_value(symbol)` takes a byte value or a one-character string. It returns the symbol's nybble, plus `0x10` for high symbols, or `None` if the symbol is not in the alphabet.

## Errors

`azamcodec.decode.InvalidSymbolError`, a subclass of `ValueError`, is raised
in two cases:

- a symbol is outside the alphabet;
- a section starts with a zero high nybble (`g`).

`EOFError` is raised when the input, or the symbol limit, ends before a
section is complete.

## Scope

This is a library only. It has no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```