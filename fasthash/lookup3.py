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
`Lookup3`, non-cryptographic hash by Bob Jenkins.

http://burtleburtle.net/bob/c/lookup3.c

Streaming hashers buffer written bytes and hash them on ``finish``.

Examples
--------
>>> from fasthash import lookup3
>>> lookup3.hash32(b"hello")
885767278
>>> h = lookup3.Hasher32()
>>> h.write(b"hello").write(b"world").finish() == lookup3.hash32(b"helloworld")
True
"""

from . import ffi
from .hasher import FastHash, FastHasher
from .seed import SeedShape


class Hash32(FastHash):
    """
    `Lookup3` 32-bit hash functions

    Examples
    --------
    >>> Hash32.hash(b"hello")
    885767278
    >>> Hash32.hash_with_seed(b"hello", 123)
    632258402
    """

    name = "lookup3"
    bits = 32
    seed_shape = SeedShape.U32

    @classmethod
    def _hash(cls, view, seed):
        return ffi.lookup3(view, seed)


class Hasher32(FastHasher):
    fast_hash = Hash32


def hash32(data) -> int:
    """
    `Lookup3` 32-bit hash function for a byte array.
    """
    return Hash32.hash(data)


def hash32_with_seed(data, seed: int) -> int:
    """
    `Lookup3` 32-bit hash function for a byte array.
    For convenience, a 32-bit seed is also hashed into the result.
    """
    return Hash32.hash_with_seed(data, seed)
