# Copyright (c) 2026 Endianio Developers
# This software is distributed under the terms of the MIT License.

import io
import typing


class TrickleSource:
    """
    A source that returns at most ``chunk`` bytes per read, like a pipe or a socket under load.
    Used to verify that the codec keeps reading until the field is complete.
    """

    def __init__(self, data: bytes, chunk: int = 1) -> None:
        self._inner = io.BytesIO(data)
        self._chunk = int(chunk)
        self.calls = 0

    def read(self, size: int = -1, /) -> bytes:
        self.calls += 1
        if size < 0:
            size = self._chunk
        return self._inner.read(min(size, self._chunk))

    def remaining(self) -> bytes:
        pos = self._inner.tell()
        out = self._inner.read()
        self._inner.seek(pos)
        return out


class TrickleSink:
    """Accepts at most ``chunk`` bytes per write and reports it like a raw stream does."""

    def __init__(self, chunk: int = 1) -> None:
        self._chunk = int(chunk)
        self.data = bytearray()
        self.calls = 0

    def write(self, data: typing.Any, /) -> int:
        self.calls += 1
        accepted = bytes(data)[: self._chunk]
        self.data += accepted
        return len(accepted)


class FullSink:
    """Accepts ``capacity`` bytes, then refuses to accept more (returns zero), like a full device."""

    def __init__(self, capacity: int) -> None:
        self._capacity = int(capacity)
        self.data = bytearray()

    def write(self, data: typing.Any, /) -> int:
        accepted = bytes(data)[: self._capacity - len(self.data)]
        self.data += accepted
        return len(accepted)


class SilentSink:
    """A sink whose ``write`` returns None, which is understood as "everything accepted"."""

    def __init__(self) -> None:
        self.data = bytearray()

    def write(self, data: typing.Any, /) -> None:
        self.data += bytes(data)


class FailingStream:
    """Both a source and a sink that always fail with an OS-level error."""

    def read(self, size: int = -1, /) -> bytes:
        raise OSError("Read failure injected by the test")

    def write(self, data: typing.Any, /) -> int:
        raise OSError("Write failure injected by the test")


class NonBlockingSource:
    """Emulates a non-blocking raw stream with no data available."""

    def read(self, size: int = -1, /) -> typing.Optional[bytes]:
        return None
