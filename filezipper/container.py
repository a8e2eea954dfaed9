"""
Header layout of a .huff container.

Every integer is little-endian:

    [4 bytes]  magic              b"FZIP"
    [1 byte]   format version
    [8 bytes]  original size      unsigned
    [4 bytes]  unique symbol count unsigned
    unique symbol count times:
        [1 byte]  symbol value
        [8 bytes] frequency       unsigned
    [variable] Huffman codes, MSB-first, zero-padded to a byte boundary
"""
import struct

from filezipper.errors import MalformedContainerError
from filezipper.huffman import SYMBOL_COUNT

MAGIC = b"FZIP"
FORMAT_VERSION = 1

PREAMBLE = struct.Struct("<4sB")
SIZES = struct.Struct("<QI")
SYMBOL_ENTRY = struct.Struct("<BQ")


class ContainerHeader:
    """Original byte count plus the 256-entry frequency table it was built from."""
    def __init__(self, original_size, frequencies):
        self.original_size = original_size
        self.frequencies = frequencies

    @property
    def unique_symbols(self):
        return sum(1 for freq in self.frequencies if freq > 0)

    @property
    def size(self):
        """Number of bytes the header takes up on disk."""
        return PREAMBLE.size + SIZES.size + self.unique_symbols * SYMBOL_ENTRY.size

    def __eq__(self, other):
        if not isinstance(other, ContainerHeader):
            return NotImplemented
        return (self.original_size, self.frequencies) == (
            other.original_size,
            other.frequencies,
        )

    def __repr__(self):
        return (
            f"ContainerHeader(original_size={self.original_size}, "
            f"unique_symbols={self.unique_symbols})"
        )


def write_header(out, header):
    """Serializes ``header`` to ``out``, symbols in ascending byte order."""
    out.write(PREAMBLE.pack(MAGIC, FORMAT_VERSION))
    out.write(SIZES.pack(header.original_size, header.unique_symbols))
    for symbol, freq in enumerate(header.frequencies):
        if freq > 0:
            out.write(SYMBOL_ENTRY.pack(symbol, freq))


def _read_exact(source, struct_format, what):
    chunk = source.read(struct_format.size)
    if len(chunk) < struct_format.size:
        raise MalformedContainerError(f"Header truncated while reading {what}.")
    return struct_format.unpack(chunk)


def read_header(source):
    """
    Reads and validates a header from ``source``, leaving the stream
    positioned at the first byte of the encoded body.
    """
    magic, version = _read_exact(source, PREAMBLE, "magic number")
    if magic != MAGIC:
        raise MalformedContainerError("Not a FileZipper container (bad magic number).")
    if version != FORMAT_VERSION:
        raise MalformedContainerError(f"Unsupported container version {version}.")

    original_size, unique_count = _read_exact(source, SIZES, "sizes")
    if unique_count == 0 or unique_count > SYMBOL_COUNT:
        raise MalformedContainerError(
            f"Unique symbol count {unique_count} is outside 1..{SYMBOL_COUNT}."
        )

    frequencies = [0] * SYMBOL_COUNT
    for _ in range(unique_count):
        symbol, freq = _read_exact(source, SYMBOL_ENTRY, "frequency table")
        if frequencies[symbol]:
            raise MalformedContainerError(f"Symbol {symbol} listed twice.")
        if freq == 0:
            raise MalformedContainerError(f"Symbol {symbol} has a zero frequency.")
        frequencies[symbol] = freq

    header = ContainerHeader(original_size, frequencies)
    validate_header(header)
    return header


def validate_header(header):
    if header.original_size == 0:
        raise MalformedContainerError("Original size is zero.")

    total = sum(header.frequencies)
    if total != header.original_size:
        raise MalformedContainerError(
            f"Frequencies add up to {total} but original size is {header.original_size}."
        )
