class FileZipperError(Exception):
    """Base class for every error raised by filezipper."""


class EmptyInputError(FileZipperError):
    """Raised when asked to compress zero bytes."""

    def __init__(self, message="Input is empty, nothing to compress."):
        super().__init__(message)


class MalformedContainerError(FileZipperError):
    """Raised when a container header or body is inconsistent."""


class TruncatedStreamError(FileZipperError):
    """Raised when the bitstream ends before every symbol was decoded."""

    def __init__(self, decoded, expected):
        self.decoded = decoded
        self.expected = expected
        super().__init__(
            f"Bitstream truncated: decoded {decoded} of {expected} bytes."
        )
