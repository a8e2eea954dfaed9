import io
import struct

import pytest

from filezipper.container import (
    FORMAT_VERSION,
    MAGIC,
    ContainerHeader,
    read_header,
    write_header,
)
from filezipper.errors import MalformedContainerError
from filezipper.huffman import SYMBOL_COUNT


def _raw_header(original_size, entries, magic=MAGIC, version=FORMAT_VERSION, count=None):
    if count is None:
        count = len(entries)
    raw = magic + bytes((version,)) + struct.pack("<QI", original_size, count)
    for symbol, freq in entries:
        raw += struct.pack("<BQ", symbol, freq)
    return raw


def _frequencies(pairs):
    frequencies = [0] * SYMBOL_COUNT
    for symbol, freq in pairs.items():
        frequencies[symbol] = freq
    return frequencies


def test_header_layout_is_little_endian():
    header = ContainerHeader(4, _frequencies({98: 1, 97: 3}))
    out = io.BytesIO()
    write_header(out, header)

    assert out.getvalue() == (
        b"FZIP\x01"
        + b"\x04\x00\x00\x00\x00\x00\x00\x00"
        + b"\x02\x00\x00\x00"
        + b"a\x03\x00\x00\x00\x00\x00\x00\x00"
        + b"b\x01\x00\x00\x00\x00\x00\x00\x00"
    )
    assert header.size == len(out.getvalue())


def test_read_header_stops_at_body():
    source = io.BytesIO(_raw_header(4, [(97, 3), (98, 1)]) + b"\xe0")
    header = read_header(source)
    assert header == ContainerHeader(4, _frequencies({97: 3, 98: 1}))
    assert header.unique_symbols == 2
    assert source.read() == b"\xe0"


def test_header_written_then_read_back():
    header = ContainerHeader(2 ** 40, _frequencies({0: 2 ** 40 - 1, 255: 1}))
    out = io.BytesIO()
    write_header(out, header)
    out.seek(0)
    assert read_header(out) == header


@pytest.mark.parametrize(
    "raw, message",
    [
        (_raw_header(4, [(97, 4)], magic=b"ZIPF"), "magic"),
        (_raw_header(4, [(97, 4)], version=9), "version"),
        (_raw_header(4, [], count=0), "outside"),
        (_raw_header(4, [(97, 4)], count=257), "outside"),
        (_raw_header(4, [(97, 2), (97, 2)]), "twice"),
        (_raw_header(4, [(97, 4), (98, 0)]), "zero frequency"),
        (_raw_header(5, [(97, 4)]), "add up"),
        (_raw_header(0, [(97, 0)]), "zero"),
        (b"FZ", "truncated"),
        (_raw_header(4, [(97, 4)])[:-3], "truncated"),
    ],
)
def test_malformed_headers_are_rejected(raw, message):
    with pytest.raises(MalformedContainerError, match=message):
        read_header(io.BytesIO(raw))
