# Copyright (c) 2026 Endianio Developers
# This software is distributed under the terms of the MIT License.

from __future__ import annotations
import typing

import numpy

from ._common import Endian, U8_WIDTH, U16_WIDTH, U32_WIDTH, F32_WIDTH, F64_WIDTH
from ._common import compose_unsigned, to_signed
from ._error import EncodingError
from ._stream import ByteSource, read_exact
from ._magic import check_magic_number


_T = typing.TypeVar("_T")


def decode_bytes(source: ByteSource, count: int) -> bytes:
    """Reads exactly ``count`` raw bytes. This is the primitive all other decoders are built upon."""
    return read_exact(source, count)


def decode_u8(source: ByteSource) -> int:
    (out,) = read_exact(source, U8_WIDTH)
    return out


def decode_i8(source: ByteSource) -> int:
    return to_signed(decode_u8(source), U8_WIDTH)


def decode_u16(source: ByteSource, order: Endian) -> int:
    """
    >>> import io
    >>> decode_u16(io.BytesIO(bytes([0xA2, 0x78])), Endian.LITTLE)
    30882
    >>> decode_u16(io.BytesIO(bytes([0x78, 0xA2])), Endian.BIG)
    30882
    """
    return compose_unsigned(read_exact(source, U16_WIDTH), order)


def decode_i16(source: ByteSource, order: Endian) -> int:
    return to_signed(decode_u16(source, order), U16_WIDTH)


def decode_u32(source: ByteSource, order: Endian) -> int:
    return compose_unsigned(read_exact(source, U32_WIDTH), order)


def decode_i32(source: ByteSource, order: Endian) -> int:
    return to_signed(decode_u32(source, order), U32_WIDTH)


def decode_f32(source: ByteSource, order: Endian) -> numpy.float32:
    """
    The bit pattern is reinterpreted as IEEE 754 binary32 without any validation; NaN and infinity pass through.
    The result is a :class:`numpy.float32` rather than a native :class:`float`, because widening a signaling NaN
    to binary64 would set its quiet bit. Passing the result to :func:`endianio.encode_f32` yields the same bytes.

    >>> import io
    >>> float(decode_f32(io.BytesIO(bytes([0x00, 0x00, 0x40, 0x44])), Endian.LITTLE))
    768.0
    """
    (out,) = numpy.frombuffer(read_exact(source, F32_WIDTH), dtype=numpy.dtype(order.dtype_prefix + "f4"))
    return typing.cast(numpy.float32, out)


def decode_f64(source: ByteSource, order: Endian) -> float:
    # The byte order is stated in the dtype, so numpy performs the swap (if any) on its own.
    (out,) = numpy.frombuffer(read_exact(source, F64_WIDTH), dtype=numpy.dtype(order.dtype_prefix + "f8"))
    return float(out)


def decode_fixed_string(source: ByteSource, length: int) -> str:
    """
    Reads exactly ``length`` bytes and decodes them as UTF-8.
    The bytes are consumed from the source even if they turn out to be invalid.

    :raises: :class:`EncodingError` if the bytes are not valid UTF-8.

    >>> import io
    >>> decode_fixed_string(io.BytesIO(bytes([72, 101, 108, 108, 111])), 5)
    'Hello'
    """
    raw = read_exact(source, length)
    try:
        return raw.decode("utf8")
    except UnicodeDecodeError as ex:
        raise EncodingError(
            f"The {length}-byte text field is not valid UTF-8: {ex.reason} at offset {ex.start}"
        ) from ex


class Decoder:
    """
    Binds the decoding functions to a particular source and keeps track of the number of bytes consumed.
    The instance holds no other state, so it is safe to mix it with direct reads from the same source
    (in which case :attr:`consumed_byte_length` will only account for the bytes read through this instance).

    >>> import io
    >>> des = Decoder(io.BytesIO(b"TEST" + bytes([0xA2, 0x78]) + b"Hello"))
    >>> des.check_magic_number(b"TEST")
    >>> des.fetch_u16(Endian.LITTLE)
    30882
    >>> des.fetch_fixed_string(5)
    'Hello'
    >>> des
    Decoder(consumed_byte_length=11)
    """

    def __init__(self, source: ByteSource) -> None:
        self._source = source
        self._consumed = 0

    @property
    def source(self) -> ByteSource:
        return self._source

    @property
    def consumed_byte_length(self) -> int:
        """
        Bytes drained from the source via this instance.
        This includes the bytes of fields that failed validation after reading (bad UTF-8, wrong magic number).
        """
        return self._consumed

    def fetch_bytes(self, count: int) -> bytes:
        return self._fetch(decode_bytes, count)

    def fetch_u8(self) -> int:
        return self._fetch(decode_u8)

    def fetch_i8(self) -> int:
        return self._fetch(decode_i8)

    def fetch_u16(self, order: Endian) -> int:
        return self._fetch(decode_u16, order)

    def fetch_i16(self, order: Endian) -> int:
        return self._fetch(decode_i16, order)

    def fetch_u32(self, order: Endian) -> int:
        return self._fetch(decode_u32, order)

    def fetch_i32(self, order: Endian) -> int:
        return self._fetch(decode_i32, order)

    def fetch_f32(self, order: Endian) -> numpy.float32:
        return self._fetch(decode_f32, order)

    def fetch_f64(self, order: Endian) -> float:
        return self._fetch(decode_f64, order)

    def fetch_fixed_string(self, length: int) -> str:
        return self._fetch(decode_fixed_string, length)

    def check_magic_number(self, expected: bytes) -> None:
        self._fetch(check_magic_number, expected)

    def _fetch(self, fun: typing.Callable[..., _T], *args: typing.Any) -> _T:
        counter = _CountingSource(self._source)
        try:
            return fun(counter, *args)
        finally:
            self._consumed += counter.count

    def __repr__(self) -> str:
        return f"{type(self).__name__}(consumed_byte_length={self.consumed_byte_length})"


class _CountingSource:
    def __init__(self, inferior: ByteSource) -> None:
        self._inferior = inferior
        self.count = 0

    def read(self, size: int = -1, /) -> typing.Optional[bytes]:
        out = self._inferior.read(size)
        if out:
            self.count += len(out)
        return out

    def __repr__(self) -> str:
        return repr(self._inferior)
