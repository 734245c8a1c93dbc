# Copyright (c) 2026 Endianio Developers
# This software is distributed under the terms of the MIT License.

import io

from pytest import raises

import endianio
from . import TrickleSource


def _unittest_magic_number_valid() -> None:
    reader = io.BytesIO(b"TEST" + b"\x01\x02")
    endianio.check_magic_number(reader, b"TEST")
    assert reader.tell() == 4
    assert reader.read() == b"\x01\x02"

    reader = io.BytesIO(bytes([0x89]) + b"PNG\r\n\x1a\n")
    endianio.check_magic_number(reader, bytearray([0x89]) + b"PNG")
    endianio.check_magic_number(reader, memoryview(b"\r\n\x1a\n"))
    assert reader.read() == b""

    src = TrickleSource(b"RIFF....WAVE", chunk=1)
    endianio.check_magic_number(src, b"RIFF")
    assert src.remaining() == b"....WAVE"


def _unittest_magic_number_empty() -> None:
    reader = io.BytesIO(b"abc")
    endianio.check_magic_number(reader, b"")
    assert reader.tell() == 0
    endianio.check_magic_number(io.BytesIO(b""), b"")


def _unittest_magic_number_invalid() -> None:
    reader = io.BytesIO(b"TEST" + b"tail")
    with raises(endianio.MagicNumberMismatchError) as ei:
        endianio.check_magic_number(reader, b"NEST")
    assert ei.value.expected == b"NEST"
    assert ei.value.read == b"TEST"
    assert not isinstance(ei.value, endianio.StreamError)
    assert isinstance(ei.value, endianio.CodecError)
    assert str(ei.value) == "Incorrect magic number: expected 'NEST', read 'TEST'"
    assert repr(ei.value) == "MagicNumberMismatchError(expected=b'NEST', read=b'TEST')"
    # The prefix is drained even though it did not match.
    assert reader.read() == b"tail"


def _unittest_magic_number_display() -> None:
    e = endianio.MagicNumberMismatchError(expected=b"\x89PNG", read=b"GIF8")
    assert e.expected == b"\x89PNG"
    assert e.read == b"GIF8"
    assert str(e) == "Incorrect magic number: expected '89 50 4E 47', read 'GIF8'"

    e = endianio.MagicNumberMismatchError(expected=b"\x00\x01", read=b"\xFF\xFE")
    assert str(e) == "Incorrect magic number: expected '\x00\x01', read 'FF FE'"

    # Quotes inside the text do not change the quoting of the message.
    e = endianio.MagicNumberMismatchError(expected=b"it's", read=b"abcd")
    assert str(e) == "Incorrect magic number: expected 'it's', read 'abcd'"

    # Each side is formatted independently.
    e = endianio.MagicNumberMismatchError(expected=b"TEST", read=b"\xffEST")
    assert str(e) == "Incorrect magic number: expected 'TEST', read 'FF 45 53 54'"


def _unittest_magic_number_short_source() -> None:
    reader = io.BytesIO(b"TE")
    with raises(endianio.UnexpectedEndOfStreamError) as ei:
        endianio.check_magic_number(reader, b"TEST")
    assert not isinstance(ei.value, endianio.MagicNumberMismatchError)
    assert ei.value.partial == b"TE"
    assert ei.value.expected_length == 4

    # Even if the available bytes already differ, the short source is a transport failure, not a mismatch.
    with raises(endianio.StreamError):
        endianio.check_magic_number(io.BytesIO(b"XX"), b"TEST")
