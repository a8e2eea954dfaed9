"""Static Huffman compression of arbitrary files."""

from filezipper.errors import (
    EmptyInputError,
    FileZipperError,
    MalformedContainerError,
    TruncatedStreamError,
)
from filezipper.file_compression import (
    compress,
    compress_file,
    compress_stream,
    decompress,
    decompress_file,
    decompress_stream,
)

__version__ = "1.0.0"

__all__ = [
    "compress",
    "compress_file",
    "compress_stream",
    "decompress",
    "decompress_file",
    "decompress_stream",
    "EmptyInputError",
    "FileZipperError",
    "MalformedContainerError",
    "TruncatedStreamError",
    "__version__",
]
