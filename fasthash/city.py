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
`CityHash` by Google, bound through the ``cityhash`` package.

CityHash makes no promise of stable digests between releases. Streaming
hashers buffer written bytes and hash them on ``finish``.

Every seeded family hashes through its ``WithSeed`` routine, also for the
default seed, so ``hash(data) == hash_with_seed(data, 0)``. Note that
``hash64`` is therefore ``CityHash64WithSeed(data, 0)`` and ``hash128`` is
``CityHash128WithSeed(data, 0)``, which differ from the unseeded
``CityHash64`` and ``CityHash128``. Digests persisted with the unseeded
routines do not match.
"""

from . import ffi
from .hasher import FastHash, FastHasher
from .seed import SeedShape


class Hash32(FastHash):
    name = "city32"
    bits = 32
    seed_shape = SeedShape.NONE

    @classmethod
    def _hash(cls, view, seed):
        return ffi.city_hash32(view)


class Hash64(FastHash):
    name = "city64"
    bits = 64
    seed_shape = SeedShape.U64

    @classmethod
    def _hash(cls, view, seed):
        return ffi.city_hash64_with_seed(view, seed)


class Hash64WithSeeds(FastHash):
    name = "city64_seeds"
    bits = 64
    seed_shape = SeedShape.U64_PAIR

    @classmethod
    def _hash(cls, view, seed):
        return ffi.city_hash64_with_seeds(view, *seed)


class Hash128(FastHash):
    name = "city128"
    bits = 128
    seed_shape = SeedShape.U128

    @classmethod
    def _hash(cls, view, seed):
        return ffi.city_hash128_with_seed(view, seed)


class Hasher32(FastHasher):
    fast_hash = Hash32


class Hasher64(FastHasher):
    fast_hash = Hash64


class Hasher128(FastHasher):
    fast_hash = Hash128


def hash32(data) -> int:
    return Hash32.hash(data)


def hash64(data) -> int:
    return Hash64.hash(data)


def hash64_with_seed(data, seed: int) -> int:
    return Hash64.hash_with_seed(data, seed)


def hash64_with_seeds(data, seed0: int, seed1: int) -> int:
    return Hash64WithSeeds.hash_with_seed(data, (seed0, seed1))


def hash128(data) -> int:
    return Hash128.hash(data)


def hash128_with_seed(data, seed: int) -> int:
    """
    `CityHash` 128-bit hash function, ``seed`` being a 128-bit integer.
    """
    return Hash128.hash_with_seed(data, seed)
