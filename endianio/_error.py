# Copyright (c) 2026 Endianio Developers
# This software is distributed under the terms of the MIT License.

from __future__ import annotations


class CodecError(RuntimeError):
    """
    This is the root exception class for all errors raised by the codec at runtime.
    Usage errors, such as a negative byte count or an integer that does not fit into the requested type,
    are reported via the standard :class:`ValueError` and :class:`TypeError` instead.
    """


class StreamError(CodecError):
    """
    The underlying stream could not supply or accept the requested number of bytes.
    If the failure was reported by the stream itself (e.g., :class:`OSError`, or :class:`ValueError`
    for a closed file object), the original exception is available via ``__cause__``.
    """


class UnexpectedEndOfStreamError(StreamError):
    """
    The source ran out of data before the required number of bytes could be read.
    The bytes that were read before the end of the stream have been consumed and are available in :attr:`partial`.

    >>> str(UnexpectedEndOfStreamError(4, b"ab"))
    'Unexpected end of stream: needed 4 bytes, got 2'
    """

    def __init__(self, expected_length: int, partial: bytes) -> None:
        self.expected_length = int(expected_length)
        self.partial = bytes(partial)
        super().__init__(f"Unexpected end of stream: needed {self.expected_length} bytes, got {self.actual_length}")

    @property
    def actual_length(self) -> int:
        return len(self.partial)


class EncodingError(CodecError):
    """
    A fixed-length text field could not be decoded as UTF-8.
    The original :class:`UnicodeDecodeError` is available via ``__cause__``.
    The bytes of the field have been consumed from the source regardless.
    """


class MagicNumberMismatchError(CodecError):
    """
    The prefix read from the source does not match the expected magic number.
    Both sequences are kept verbatim in :attr:`expected` and :attr:`read`.
    The string representation formats each side on its own: as text if it is valid UTF-8, otherwise as hex.

    >>> str(MagicNumberMismatchError(b"TEST", b"NEST"))
    "Incorrect magic number: expected 'TEST', read 'NEST'"
    >>> str(MagicNumberMismatchError(b"\\x89PNG", b"\\xff\\xd8\\xff\\xe0"))
    "Incorrect magic number: expected '89 50 4E 47', read 'FF D8 FF E0'"
    >>> str(MagicNumberMismatchError(b"TEST", b"\\xffEST"))
    "Incorrect magic number: expected 'TEST', read 'FF 45 53 54'"
    """

    def __init__(self, expected: bytes, read: bytes) -> None:
        self.expected = bytes(expected)
        self.read = bytes(read)
        super().__init__(
            f"Incorrect magic number: expected '{_format_bytes(self.expected)}', read '{_format_bytes(self.read)}'"
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(expected={self.expected!r}, read={self.read!r})"


def _format_bytes(x: bytes) -> str:
    try:
        return x.decode("utf8")
    except UnicodeDecodeError:
        return x.hex(" ").upper()
