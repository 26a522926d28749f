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


"""
Hashing of composite keys.

A key made of several fields is hashed by writing a representation of each
field, in order, into one streaming hasher. Variable-length fields are
prefixed with their length so that ``("ab", "c")`` and ``("a", "bc")``
hash differently.
"""

import enum
import functools
import struct

import numpy as np

from .registry import new
from .utils import no_default

_I64_MIN = -(1 << 63)
_I64_MAX = (1 << 63) - 1

# type tags keep values of different types with equal bytes apart
_TAG_NONE = 0
_TAG_BOOL = 1
_TAG_INT = 2
_TAG_BIGINT = 3
_TAG_FLOAT = 4
_TAG_BYTES = 5
_TAG_STR = 6
_TAG_SEQ = 7
_TAG_ARRAY = 8


@functools.singledispatch
def write_key(obj, hasher) -> None:
    raise TypeError(f"Cannot hash key field of type {type(obj).__name__}")


register_key_writer = write_key.register


@write_key.register(type(None))
def _write_none(obj, hasher):
    hasher.write_u8(_TAG_NONE)


@write_key.register(bool)
def _write_bool(obj, hasher):
    hasher.write_u8(_TAG_BOOL).write_u8(int(obj))


@write_key.register(int)
def _write_int(obj, hasher):
    if _I64_MIN <= obj <= _I64_MAX:
        hasher.write_u8(_TAG_INT).write_i64(obj)
    else:
        size = (obj.bit_length() + 8) // 8
        hasher.write_u8(_TAG_BIGINT).write_usize(size)
        hasher.write(obj.to_bytes(size, "little", signed=True))


@write_key.register(float)
def _write_float(obj, hasher):
    hasher.write_u8(_TAG_FLOAT).write(struct.pack("<d", obj))


@write_key.register(bytes)
@write_key.register(bytearray)
@write_key.register(memoryview)
def _write_bytes(obj, hasher):
    hasher.write_u8(_TAG_BYTES).write_usize(memoryview(obj).nbytes).write(obj)


@write_key.register(str)
def _write_str(obj, hasher):
    hasher.write_u8(_TAG_STR).write_str(obj)


@write_key.register(tuple)
@write_key.register(list)
def _write_sequence(obj, hasher):
    hasher.write_u8(_TAG_SEQ).write_usize(len(obj))
    for item in obj:
        write_key(item, hasher)


@write_key.register(enum.Enum)
def _write_enum(obj, hasher):
    write_key(obj.value, hasher)


@write_key.register(np.ndarray)
def _write_ndarray(obj, hasher):
    if obj.dtype.hasobject:
        raise TypeError("Cannot hash key field of object dtype")
    arr = np.ascontiguousarray(obj)
    hasher.write_u8(_TAG_ARRAY).write_str(arr.dtype.str).write_usize(arr.ndim)
    for dim in arr.shape:
        hasher.write_usize(dim)
    hasher.write(arr)


@write_key.register(np.generic)
def _write_numpy_scalar(obj, hasher):
    write_key(obj.item(), hasher)


def hash_key(*fields, algorithm: str = None, seed=no_default) -> int:
    """
    Hash the ordered ``fields`` of a composite key.

    Parameters
    ----------
    fields
        Key fields: None, bool, int, float, bytes-like, str, tuple, list,
        enum members and numpy arrays or scalars, or any type registered
        with :func:`register_key_writer`.
    algorithm : str, optional
        Registered algorithm name, option ``hasher.default_algorithm`` by
        default.
    seed : optional
        Seed of the algorithm, its default seed when omitted.

    Examples
    --------
    >>> hash_key("user", 42, algorithm="xx64") == hash_key("user", 42, algorithm="xx64")
    True
    """
    hasher = new(algorithm, seed)
    for field in fields:
        write_key(field, hasher)
    return hasher.finish()
