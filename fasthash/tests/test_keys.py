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


from enum import Enum

import numpy as np
import pytest

from .. import xx
from ..config import option_context
from ..keys import hash_key, register_key_writer, write_key


class Color(Enum):
    RED = 1
    GREEN = "green"


def test_hash_key_deterministic():
    key = ("user", 42, 3.5, None, True, b"\x00\x01", [1, (2, "x")])
    assert hash_key(*key) == hash_key(*key)
    assert hash_key(*key, algorithm="xx64") == hash_key(*key, algorithm="xx64")
    assert hash_key(*key, algorithm="xx64", seed=1) != hash_key(*key, algorithm="xx64")

    with option_context({"hasher.default_algorithm": "xx64"}):
        assert hash_key(*key) == hash_key(*key, algorithm="xx64")


@pytest.mark.parametrize(
    "one,other",
    [
        (("ab", "c"), ("a", "bc")),
        ((b"ab", b"c"), (b"a", b"bc")),
        ((1,), (1.0,)),
        ((1,), (True,)),
        ((0,), (None,)),
        (("1",), (1,)),
        (((1, 2), 3), (1, (2, 3))),
        (([],), ((), ())),
        ((1 << 70,), (1 << 71,)),
    ],
)
def test_hash_key_distinguishes(one, other):
    assert hash_key(*one, algorithm="xx64") != hash_key(*other, algorithm="xx64")


def test_sequence_types_equivalent():
    assert hash_key([1, 2]) == hash_key((1, 2))
    assert hash_key(bytearray(b"ab")) == hash_key(b"ab")
    assert hash_key(memoryview(b"ab")) == hash_key(b"ab")


def test_enum_and_numpy_fields():
    assert hash_key(Color.RED) == hash_key(1)
    assert hash_key(Color.GREEN) == hash_key("green")
    assert hash_key(np.int64(5)) == hash_key(5)
    assert hash_key(np.float64(0.5)) == hash_key(0.5)

    arr = np.arange(12, dtype="<i4").reshape(3, 4)
    assert hash_key(arr) == hash_key(arr.copy())
    assert hash_key(arr) == hash_key(np.asfortranarray(arr))
    assert hash_key(arr) != hash_key(arr.reshape(4, 3))
    assert hash_key(arr) != hash_key(arr.astype("<i8"))

    with pytest.raises(TypeError):
        hash_key(np.array([object()], dtype=object))


def test_unsupported_and_custom_fields():
    class Point:
        def __init__(self, x, y):
            self.x = x
            self.y = y

    with pytest.raises(TypeError, match="Point"):
        hash_key(Point(1, 2))

    @register_key_writer(Point)
    def _write_point(obj, hasher):
        write_key((obj.x, obj.y), hasher)

    assert hash_key(Point(1, 2)) == hash_key(Point(1, 2))
    assert hash_key(Point(1, 2)) != hash_key(Point(2, 1))


def test_write_key_into_hasher():
    hasher = xx.Hasher64()
    write_key("a", hasher)
    write_key(1, hasher)
    assert hasher.finish() == hash_key("a", 1, algorithm="xx64")
