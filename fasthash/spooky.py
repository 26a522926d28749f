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
`SpookyHash` V2 by Bob Jenkins.

http://burtleburtle.net/bob/hash/spooky.html

The 128-bit digest is ``hash1 << 64 | hash2`` of the two 64-bit halves the
reference code returns, seeded by the pair ``(seed1, seed2)``. Streaming
hashers buffer written bytes and hash them on ``finish``.
"""

from . import ffi
from .hasher import FastHash, FastHasher
from .seed import SeedShape


class Hash32(FastHash):
    name = "spooky32"
    bits = 32
    seed_shape = SeedShape.U32

    @classmethod
    def _hash(cls, view, seed):
        return ffi.spooky_hash32(view, seed)


class Hash64(FastHash):
    name = "spooky64"
    bits = 64
    seed_shape = SeedShape.U64

    @classmethod
    def _hash(cls, view, seed):
        return ffi.spooky_hash64(view, seed)


class Hash128(FastHash):
    name = "spooky128"
    bits = 128
    seed_shape = SeedShape.U64_PAIR

    @classmethod
    def _hash(cls, view, seed):
        return ffi.spooky_hash128(view, *seed)


class Hasher32(FastHasher):
    fast_hash = Hash32


class Hasher64(FastHasher):
    fast_hash = Hash64


class Hasher128(FastHasher):
    fast_hash = Hash128


def hash32(data) -> int:
    return Hash32.hash(data)


def hash32_with_seed(data, seed: int) -> int:
    return Hash32.hash_with_seed(data, seed)


def hash64(data) -> int:
    return Hash64.hash(data)


def hash64_with_seed(data, seed: int) -> int:
    return Hash64.hash_with_seed(data, seed)


def hash128(data) -> int:
    return Hash128.hash(data)


def hash128_with_seed(data, seed1: int, seed2: int) -> int:
    return Hash128.hash_with_seed(data, (seed1, seed2))
