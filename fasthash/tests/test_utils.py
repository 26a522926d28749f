# Copyright 1999-2024 Alibaba Group Holding Ltd.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


import array

import numpy as np
import pytest

from .. import utils
from ..errors import NativeBoundaryError


def test_to_buffer():
    view = utils.to_buffer(b"abc")
    assert view.readonly
    assert view.format == "B"
    assert bytes(view) == b"abc"

    assert bytes(utils.to_buffer("é")) == "é".encode("utf-8")
    assert bytes(utils.to_buffer(bytearray(b"xy"))) == b"xy"

    buf = utils.to_buffer(array.array("I", [1, 2]))
    assert buf.ndim == 1 and buf.nbytes == 8

    buf = utils.to_buffer(np.zeros((2, 3), dtype="u2"))
    assert buf.ndim == 1 and len(buf) == 12

    with pytest.raises(TypeError, match="not 'int'"):
        utils.to_buffer(1)
    with pytest.raises(NativeBoundaryError):
        utils.to_buffer(np.zeros((4, 4))[:, 1])


def test_unpack():
    view = utils.to_buffer(bytes(range(1, 17)))
    assert utils.unpack_words(view, 2) == [0x04030201, 0x08070605]
    assert utils.unpack_words(view, 1, width=64) == [0x0807060504030201]
    assert utils.unpack_words(view, 0) == []
    assert utils.unpack_tail(view, 14) == 0x100F
    assert utils.unpack_tail(view, 16) == 0


def test_no_default_and_classproperty():
    assert repr(utils.no_default) == "<no_default>"

    class A:
        @utils.classproperty
        def kind(cls):
            return cls.__name__.lower()

    assert A.kind == "a"
    assert A().kind == "a"
