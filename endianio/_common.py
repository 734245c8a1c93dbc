# Copyright (c) 2026 Endianio Developers
# This software is distributed under the terms of the MIT License.

from __future__ import annotations
import sys
import enum
import typing

import numpy


class Endian(enum.Enum):
    """
    Byte order of a multi-byte value in the serialized representation.
    The values match :data:`sys.byteorder` and the ``byteorder`` argument of :meth:`int.from_bytes`,
    so ``Endian("big")`` is valid.

    >>> Endian.BIG.dtype_prefix, Endian.LITTLE.dtype_prefix
    ('>', '<')
    >>> Endian("little") is Endian.LITTLE
    True
    """

    BIG = "big"
    """The most significant byte comes first."""

    LITTLE = "little"
    """The least significant byte comes first."""

    @property
    def dtype_prefix(self) -> str:
        """The byte order character understood by :class:`numpy.dtype` and :mod:`struct`."""
        return ">" if self is Endian.BIG else "<"

    @staticmethod
    def native() -> Endian:
        """
        The byte order of the local platform. This is informational only;
        none of the codec routines depend on it.
        """
        return Endian(sys.byteorder)


U8_WIDTH = 1
U16_WIDTH = 2
U32_WIDTH = 4
F32_WIDTH = 4
F64_WIDTH = 8


def ensure_cardinal(count: int) -> None:
    if count < 0:
        raise ValueError(f"Expected a non-negative byte count, got {count}")


def compose_unsigned(raw: typing.Union[bytes, bytearray, memoryview], order: Endian) -> int:
    """
    Builds an unsigned integer from the bytes in the order they were read.
    The composition is done with shifts, so the result does not depend on the native byte order.

    >>> compose_unsigned(b"\\xA2\\x78", Endian.LITTLE)
    30882
    >>> compose_unsigned(b"\\x78\\xA2", Endian.BIG)
    30882
    """
    out = 0
    if order is Endian.BIG:
        for b in raw:
            out = (out << 8) | b
    else:
        for i, b in enumerate(raw):
            out |= b << (i * 8)
    return out


def decompose_unsigned(value: int, width: int, order: Endian) -> bytes:
    """
    The inverse of :func:`compose_unsigned`. The value shall fit into the specified number of bytes.

    >>> decompose_unsigned(30882, 2, Endian.LITTLE).hex()
    'a278'
    >>> decompose_unsigned(30882, 2, Endian.BIG).hex()
    '78a2'
    """
    assert 0 <= value < 2 ** (width * 8)
    out = bytearray(width)
    for i in range(width):
        out[i] = value & 0xFF
        value >>= 8
    if order is Endian.BIG:
        out.reverse()
    return bytes(out)


def to_signed(value: int, width: int) -> int:
    bit_length = width * 8
    return (value - 2**bit_length) if value >= 2 ** (bit_length - 1) else value


def to_unsigned(value: int, width: int) -> int:
    return (2 ** (width * 8) + value) if value < 0 else value


def ensure_in_range(value: int, width: int, signed: bool) -> None:
    if not isinstance(value, (int, numpy.integer)) or isinstance(value, bool):
        raise TypeError(f"Expected an integer, got {type(value).__name__}")
    bit_length = width * 8
    lo, hi = (-(2 ** (bit_length - 1)), 2 ** (bit_length - 1) - 1) if signed else (0, 2**bit_length - 1)
    if not (lo <= value <= hi):
        kind = "int" if signed else "uint"
        raise ValueError(f"The value {value} is outside of the range of {kind}{bit_length} [{lo}, {hi}]")


def _unittest_signedness() -> None:
    from pytest import raises

    assert to_signed(0xFF, 1) == -1
    assert to_signed(0x7F, 1) == 127
    assert to_signed(0x8000, 2) == -32768
    assert to_unsigned(-2, 2) == 0xFFFE
    assert to_unsigned(-(2**31), 4) == 0x8000_0000

    ensure_in_range(255, 1, signed=False)
    ensure_in_range(-128, 1, signed=True)
    with raises(ValueError):
        ensure_in_range(256, 1, signed=False)
    with raises(ValueError):
        ensure_in_range(-1, 4, signed=False)
    with raises(ValueError):
        ensure_in_range(32768, 2, signed=True)
    with raises(TypeError):
        ensure_in_range(1.0, 2, signed=True)  # type: ignore
    with raises(TypeError):
        ensure_in_range(True, 1, signed=False)


def _unittest_endian_native() -> None:
    assert Endian.native() in (Endian.BIG, Endian.LITTLE)
    assert Endian.native().value == sys.byteorder
