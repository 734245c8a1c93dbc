# Copyright (c) 2026 Endianio Developers
# This software is distributed under the terms of the MIT License.

from __future__ import annotations
import logging

from ._error import MagicNumberMismatchError
from ._stream import ByteSource, BytesLike, read_exact


_logger = logging.getLogger(__name__)


def check_magic_number(source: ByteSource, expected: BytesLike) -> None:
    """
    Ensures that the source begins with the expected literal byte sequence, e.g., a file format signature.
    Exactly ``len(expected)`` bytes are consumed regardless of the outcome, so the position of the stream
    is deterministic afterwards.

    :raises: :class:`MagicNumberMismatchError` if the bytes differ.
        :class:`UnexpectedEndOfStreamError` if the source is shorter than the magic number;
        this is a transport problem and it is never reported as a mismatch.

    >>> import io
    >>> src = io.BytesIO(b"TEST1234")
    >>> check_magic_number(src, b"TEST")
    >>> src.tell()
    4
    >>> check_magic_number(io.BytesIO(b"TEST"), b"NEST")
    Traceback (most recent call last):
    ...
    endianio._error.MagicNumberMismatchError: Incorrect magic number: expected 'NEST', read 'TEST'
    """
    expected = bytes(expected)
    read = read_exact(source, len(expected))
    if read != expected:
        _logger.debug("Magic number mismatch in %r: expected %r, read %r", source, expected, read)
        raise MagicNumberMismatchError(expected=expected, read=read)
