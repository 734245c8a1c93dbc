# Copyright (c) 2026 Endianio Developers
# This software is distributed under the terms of the MIT License.

from __future__ import annotations
import typing

import numpy

from ._common import Endian, U8_WIDTH, U16_WIDTH, U32_WIDTH
from ._common import decompose_unsigned, to_unsigned, ensure_in_range, ensure_cardinal
from ._stream import ByteSink, BytesLike, write_all


Integer = typing.Union[int, numpy.integer]
Real = typing.Union[float, int, numpy.floating, numpy.integer]


def encode_bytes(sink: ByteSink, data: BytesLike) -> None:
    write_all(sink, data)


def encode_u8(sink: ByteSink, value: Integer) -> None:
    _encode_integer(sink, value, U8_WIDTH, False, Endian.LITTLE)


def encode_i8(sink: ByteSink, value: Integer) -> None:
    _encode_integer(sink, value, U8_WIDTH, True, Endian.LITTLE)


def encode_u16(sink: ByteSink, value: Integer, order: Endian) -> None:
    """
    >>> import io
    >>> dst = io.BytesIO()
    >>> encode_u16(dst, 30882, Endian.LITTLE)
    >>> encode_u16(dst, 30882, Endian.BIG)
    >>> list(dst.getvalue())
    [162, 120, 120, 162]
    """
    _encode_integer(sink, value, U16_WIDTH, False, order)


def encode_i16(sink: ByteSink, value: Integer, order: Endian) -> None:
    _encode_integer(sink, value, U16_WIDTH, True, order)


def encode_u32(sink: ByteSink, value: Integer, order: Endian) -> None:
    _encode_integer(sink, value, U32_WIDTH, False, order)


def encode_i32(sink: ByteSink, value: Integer, order: Endian) -> None:
    _encode_integer(sink, value, U32_WIDTH, True, order)


def encode_f32(sink: ByteSink, value: Real, order: Endian) -> None:
    """
    A :class:`numpy.float32` is written bit-exact, including the NaN payload.
    A native :class:`float` is rounded to binary32 first;
    if the magnitude is too large, the value degenerates into infinity of the same sign.

    >>> import io
    >>> dst = io.BytesIO()
    >>> encode_f32(dst, 768.0, Endian.BIG)
    >>> dst.getvalue().hex()
    '44400000'
    """
    write_all(sink, _float_to_bytes(value, "f4", order))


def encode_f64(sink: ByteSink, value: Real, order: Endian) -> None:
    write_all(sink, _float_to_bytes(value, "f8", order))


def encode_fixed_string(sink: ByteSink, text: str, length: int) -> None:
    """
    Writes the text as UTF-8. The encoded length shall match the field length exactly,
    otherwise :class:`ValueError` is raised and nothing is written.
    Padding, if needed, is up to the caller because it is format-specific.
    """
    ensure_cardinal(length)
    raw = text.encode("utf8")
    if len(raw) != length:
        raise ValueError(f"The text {text!r} is {len(raw)} bytes long in UTF-8, but the field is {length} bytes long")
    write_all(sink, raw)


def _encode_integer(sink: ByteSink, value: Integer, width: int, signed: bool, order: Endian) -> None:
    ensure_in_range(value, width, signed)
    write_all(sink, decompose_unsigned(to_unsigned(int(value), width), width, order))


def _float_to_bytes(value: Real, type_code: str, order: Endian) -> bytes:
    if isinstance(value, bool) or not isinstance(value, (float, int, numpy.floating, numpy.integer)):
        raise TypeError(f"Expected a real number, got {type(value).__name__}")
    # Overflow is not an error here: it is saturated to infinity by the cast.
    with numpy.errstate(over="ignore"):
        out = numpy.array([value], dtype=numpy.dtype(order.dtype_prefix + type_code))
    return out.tobytes()


class Encoder:
    """
    Binds the encoding functions to a particular sink and keeps track of the number of bytes written.
    The methods mirror those of :class:`endianio.Decoder`.

    >>> import io
    >>> dst = io.BytesIO()
    >>> ser = Encoder(dst)
    >>> ser.add_bytes(b"TEST")
    >>> ser.add_u16(30882, Endian.LITTLE)
    >>> ser.add_f64(91024.5, Endian.LITTLE)
    >>> ser
    Encoder(produced_byte_length=14)
    >>> dst.getvalue()[4:].hex()
    'a278000000000839f640'
    """

    def __init__(self, sink: ByteSink) -> None:
        self._sink = sink
        self._produced = 0

    @property
    def sink(self) -> ByteSink:
        return self._sink

    @property
    def produced_byte_length(self) -> int:
        """Bytes accepted by the sink via this instance, including those of a failed partial write, if any."""
        return self._produced

    def add_bytes(self, data: BytesLike) -> None:
        self._add(encode_bytes, data)

    def add_u8(self, value: Integer) -> None:
        self._add(encode_u8, value)

    def add_i8(self, value: Integer) -> None:
        self._add(encode_i8, value)

    def add_u16(self, value: Integer, order: Endian) -> None:
        self._add(encode_u16, value, order)

    def add_i16(self, value: Integer, order: Endian) -> None:
        self._add(encode_i16, value, order)

    def add_u32(self, value: Integer, order: Endian) -> None:
        self._add(encode_u32, value, order)

    def add_i32(self, value: Integer, order: Endian) -> None:
        self._add(encode_i32, value, order)

    def add_f32(self, value: Real, order: Endian) -> None:
        self._add(encode_f32, value, order)

    def add_f64(self, value: Real, order: Endian) -> None:
        self._add(encode_f64, value, order)

    def add_fixed_string(self, text: str, length: int) -> None:
        self._add(encode_fixed_string, text, length)

    def _add(self, fun: typing.Callable[..., None], *args: typing.Any) -> None:
        counter = _CountingSink(self._sink)
        try:
            fun(counter, *args)
        finally:
            self._produced += counter.count

    def __repr__(self) -> str:
        return f"{type(self).__name__}(produced_byte_length={self.produced_byte_length})"


class _CountingSink:
    def __init__(self, inferior: ByteSink) -> None:
        self._inferior = inferior
        self.count = 0

    def write(self, data: typing.Any, /) -> typing.Optional[int]:
        out = self._inferior.write(data)
        self.count += len(data) if out is None else max(out, 0)
        return out

    def __repr__(self) -> str:
        return repr(self._inferior)
