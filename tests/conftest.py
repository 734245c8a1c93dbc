# Copyright (c) 2026 Endianio Developers
# This software is distributed under the terms of the MIT License.

import typing
import pytest
import endianio


@pytest.fixture(params=[endianio.Endian.BIG, endianio.Endian.LITTLE], ids=["big", "little"])  # type: ignore
def order(request: typing.Any) -> endianio.Endian:
    out = request.param
    assert isinstance(out, endianio.Endian)
    return out
