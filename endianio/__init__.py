# Copyright (c) 2026 Endianio Developers
# This software is distributed under the terms of the MIT License.

r"""
Endianness-explicit encoding and decoding of fixed-width numeric primitives over arbitrary byte streams.

Any object with a ``read(n)`` method can be used as a source, and any object with a ``write(b)`` method
can be used as a sink; the library never opens or closes streams itself.
The byte order is always stated explicitly by the caller; the results do not depend on the byte order
of the local platform.

>>> import io
>>> import endianio
>>> dst = io.BytesIO()
>>> endianio.encode_u32(dst, 987654321, endianio.Endian.BIG)
>>> list(dst.getvalue())
[58, 222, 104, 177]
>>> endianio.decode_u32(io.BytesIO(dst.getvalue()), endianio.Endian.BIG)
987654321


Log level override
++++++++++++++++++

The environment variable ``ENDIANIO_LOGLEVEL`` can be set to one of the following values to override
the library log level:

- ``CRITICAL``
- ``FATAL``
- ``ERROR``
- ``WARNING``
- ``INFO``
- ``DEBUG``
"""

import os as _os

from ._version import __version__ as __version__

__version_info__ = tuple(map(int, __version__.split(".")[:3]))
__license__ = "MIT"


_log_level_from_env = _os.environ.get("ENDIANIO_LOGLEVEL")
if _log_level_from_env is not None:
    import logging as _logging

    _logging.basicConfig(
        format="%(asctime)s %(process)5d %(levelname)-8s %(name)s: %(message)s", level=_log_level_from_env
    )
    _logging.getLogger(__name__).setLevel(_log_level_from_env)
    _logging.getLogger(__name__).info("Log config from env var; level: %r", _log_level_from_env)


# pylint: disable=wrong-import-position
from ._common import Endian as Endian

from ._error import CodecError as CodecError
from ._error import StreamError as StreamError
from ._error import UnexpectedEndOfStreamError as UnexpectedEndOfStreamError
from ._error import EncodingError as EncodingError
from ._error import MagicNumberMismatchError as MagicNumberMismatchError

from ._stream import ByteSource as ByteSource
from ._stream import ByteSink as ByteSink
from ._stream import read_exact as read_exact
from ._stream import write_all as write_all

from ._magic import check_magic_number as check_magic_number

from ._decoder import Decoder as Decoder
from ._decoder import decode_bytes as decode_bytes
from ._decoder import decode_u8 as decode_u8
from ._decoder import decode_i8 as decode_i8
from ._decoder import decode_u16 as decode_u16
from ._decoder import decode_i16 as decode_i16
from ._decoder import decode_u32 as decode_u32
from ._decoder import decode_i32 as decode_i32
from ._decoder import decode_f32 as decode_f32
from ._decoder import decode_f64 as decode_f64
from ._decoder import decode_fixed_string as decode_fixed_string

from ._encoder import Encoder as Encoder
from ._encoder import encode_bytes as encode_bytes
from ._encoder import encode_u8 as encode_u8
from ._encoder import encode_i8 as encode_i8
from ._encoder import encode_u16 as encode_u16
from ._encoder import encode_i16 as encode_i16
from ._encoder import encode_u32 as encode_u32
from ._encoder import encode_i32 as encode_i32
from ._encoder import encode_f32 as encode_f32
from ._encoder import encode_f64 as encode_f64
from ._encoder import encode_fixed_string as encode_fixed_string
