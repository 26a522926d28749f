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
`XXH3`, the 64 and 128-bit members of the xxHash family, bound through the
``xxhash`` package. Both take one 64-bit seed.
"""

from . import ffi
from .hasher import FastHasher
from .seed import SeedShape
from .xx import _XXHash


class Hash64(_XXHash):
    name = "xxh3_64"
    bits = 64
    seed_shape = SeedShape.U64

    @classmethod
    def _hash(cls, view, seed):
        return ffi.xxh3_64(view, seed)

    @classmethod
    def new_state(cls, seed):
        return ffi.xxh3_64_state(seed)


class Hash128(_XXHash):
    name = "xxh3_128"
    bits = 128
    seed_shape = SeedShape.U64

    @classmethod
    def _hash(cls, view, seed):
        return ffi.xxh3_128(view, seed)

    @classmethod
    def new_state(cls, seed):
        return ffi.xxh3_128_state(seed)


class Hasher64(FastHasher):
    fast_hash = Hash64


class Hasher128(FastHasher):
    fast_hash = Hash128


def hash64(data) -> int:
    return Hash64.hash(data)


def hash64_with_seed(data, seed: int) -> int:
    return Hash64.hash_with_seed(data, seed)


def hash128(data) -> int:
    return Hash128.hash(data)


def hash128_with_seed(data, seed: int) -> int:
    return Hash128.hash_with_seed(data, seed)
