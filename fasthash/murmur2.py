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
`MurmurHash2` family by Austin Appleby.

* ``Hash32``: MurmurHash2, 32-bit
* ``Hash32A``: MurmurHash2A, 32-bit, mixes tail and length as words
* ``Hash64A``: MurmurHash64A, 64-bit, tuned for 64-bit platforms
* ``Hash64B``: MurmurHash64B, 64-bit, tuned for 32-bit platforms

Streaming hashers buffer written bytes and hash them on ``finish``.
"""

from . import ffi
from .hasher import FastHash, FastHasher
from .seed import SeedShape


class Hash32(FastHash):
    name = "murmur2"
    bits = 32
    seed_shape = SeedShape.U32

    @classmethod
    def _hash(cls, view, seed):
        return ffi.murmur_hash2(view, seed)


class Hash32A(FastHash):
    name = "murmur2a"
    bits = 32
    seed_shape = SeedShape.U32

    @classmethod
    def _hash(cls, view, seed):
        return ffi.murmur_hash2a(view, seed)


class Hash64A(FastHash):
    name = "murmur64a"
    bits = 64
    seed_shape = SeedShape.U64

    @classmethod
    def _hash(cls, view, seed):
        return ffi.murmur_hash64a(view, seed)


class Hash64B(FastHash):
    name = "murmur64b"
    bits = 64
    seed_shape = SeedShape.U64

    @classmethod
    def _hash(cls, view, seed):
        return ffi.murmur_hash64b(view, seed)


class Hasher32(FastHasher):
    fast_hash = Hash32


class Hasher32A(FastHasher):
    fast_hash = Hash32A


class Hasher64A(FastHasher):
    fast_hash = Hash64A


class Hasher64B(FastHasher):
    fast_hash = Hash64B


def hash32(data) -> int:
    return Hash32.hash(data)


def hash32_with_seed(data, seed: int) -> int:
    return Hash32.hash_with_seed(data, seed)


def hash32a(data) -> int:
    return Hash32A.hash(data)


def hash32a_with_seed(data, seed: int) -> int:
    return Hash32A.hash_with_seed(data, seed)


def hash64(data) -> int:
    return Hash64A.hash(data)


def hash64_with_seed(data, seed: int) -> int:
    return Hash64A.hash_with_seed(data, seed)


def hash64b(data) -> int:
    return Hash64B.hash(data)


def hash64b_with_seed(data, seed: int) -> int:
    return Hash64B.hash_with_seed(data, seed)
