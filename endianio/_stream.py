# Copyright (c) 2026 Endianio Developers
# This software is distributed under the terms of the MIT License.

"""
The minimal stream capability the codec is built upon.
Any object with a ``read(n)`` method is a source; any object with a ``write(b)`` method is a sink.
This includes :class:`io.BytesIO`, binary files, pipes, and ``socket.makefile("rb")``/``("wb")``.
"""

from __future__ import annotations
import typing
import logging

from ._error import StreamError, UnexpectedEndOfStreamError
from ._common import ensure_cardinal


BytesLike = typing.Union[bytes, bytearray, memoryview]


class ByteSource(typing.Protocol):
    def read(self, size: int = ..., /) -> typing.Optional[bytes]:
        """
        May return fewer bytes than requested. An empty result indicates the end of the stream.
        None is returned by non-blocking streams that have no data available right now.
        """
        raise NotImplementedError


class ByteSink(typing.Protocol):
    def write(self, data: typing.Any, /) -> typing.Optional[int]:
        """
        Returns the number of bytes accepted, which may be less than ``len(data)`` for raw streams.
        Buffered streams may return None, meaning that everything has been accepted.
        """
        raise NotImplementedError


_logger = logging.getLogger(__name__)


def read_exact(source: ByteSource, count: int) -> bytes:
    """
    Reads exactly ``count`` bytes from the source, never more.
    Short reads are repeated until the requested amount is collected or the stream ends.

    :raises: :class:`UnexpectedEndOfStreamError` if the stream ends prematurely;
        the bytes read so far are consumed and attached to the exception.
        :class:`StreamError` if the stream itself fails or it is non-blocking and has no data.
        :class:`ValueError` if the count is negative.

    >>> import io
    >>> src = io.BytesIO(b"abcdef")
    >>> read_exact(src, 4)
    b'abcd'
    >>> read_exact(src, 4)
    Traceback (most recent call last):
    ...
    endianio._error.UnexpectedEndOfStreamError: Unexpected end of stream: needed 4 bytes, got 2
    """
    ensure_cardinal(count)
    out = bytearray()
    while len(out) < count:
        try:
            chunk = source.read(count - len(out))
        except (OSError, ValueError) as ex:
            raise StreamError(f"Could not read {count} bytes from {source!r}: {ex}") from ex
        if chunk is None:
            raise StreamError(f"Source {source!r} has no data available (is it non-blocking?)")
        if not chunk:
            _logger.debug("End of stream after %d of %d bytes from %r", len(out), count, source)
            raise UnexpectedEndOfStreamError(count, out)
        if len(chunk) > count - len(out):  # pragma: no cover
            raise StreamError(f"Source {source!r} returned more data than requested")
        out += chunk
    assert len(out) == count
    return bytes(out)


def write_all(sink: ByteSink, data: BytesLike) -> None:
    """
    Writes every byte of ``data`` into the sink. Partial writes are continued until the data is exhausted.

    :raises: :class:`StreamError` if the sink fails or stops accepting data.

    >>> import io
    >>> dst = io.BytesIO()
    >>> write_all(dst, b"abc")
    >>> dst.getvalue()
    b'abc'
    """
    view = memoryview(data).cast("B")
    while len(view) > 0:
        try:
            accepted = sink.write(view)
        except (OSError, ValueError) as ex:
            raise StreamError(f"Could not write {len(view)} bytes into {sink!r}: {ex}") from ex
        if accepted is None:
            break
        if accepted <= 0:
            raise StreamError(f"Sink {sink!r} did not accept any of the remaining {len(view)} bytes")
        if accepted < len(view):
            _logger.debug("Partial write into %r: %d of %d bytes, continuing", sink, accepted, len(view))
        view = view[accepted:]
