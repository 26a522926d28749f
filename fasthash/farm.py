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
`FarmHash` by Google, bound through the ``farmhash`` module shipped with
the ``cityhash`` package.

``hash*`` functions may change between FarmHash releases, while
``fingerprint*`` functions are frozen and safe to persist. Streaming hashers
buffer written bytes and hash them on ``finish``.

Seeded families always call the ``WithSeed`` routine, so ``hash32``,
``hash64`` and ``hash128`` equal ``FarmHash32WithSeed``,
``FarmHash64WithSeed`` and ``FarmHash128WithSeed`` with seed 0, not the
unseeded ``FarmHash32``, ``FarmHash64`` and ``FarmHash128``. Use the
``fingerprint*`` functions for unseeded digests that can be persisted.
"""

from . import ffi
from .hasher import FastHash, FastHasher
from .seed import SeedShape


class Hash32(FastHash):
    name = "farm32"
    bits = 32
    seed_shape = SeedShape.U32

    @classmethod
    def _hash(cls, view, seed):
        return ffi.farm_hash32_with_seed(view, seed)


class Hash64(FastHash):
    name = "farm64"
    bits = 64
    seed_shape = SeedShape.U64

    @classmethod
    def _hash(cls, view, seed):
        return ffi.farm_hash64_with_seed(view, seed)


class Hash64WithSeeds(FastHash):
    name = "farm64_seeds"
    bits = 64
    seed_shape = SeedShape.U64_PAIR

    @classmethod
    def _hash(cls, view, seed):
        return ffi.farm_hash64_with_seeds(view, *seed)


class Hash128(FastHash):
    name = "farm128"
    bits = 128
    seed_shape = SeedShape.U128

    @classmethod
    def _hash(cls, view, seed):
        return ffi.farm_hash128_with_seed(view, seed)


class Fingerprint32(FastHash):
    name = "farm_fingerprint32"
    bits = 32
    seed_shape = SeedShape.NONE

    @classmethod
    def _hash(cls, view, seed):
        return ffi.farm_fingerprint32(view)


class Fingerprint64(FastHash):
    name = "farm_fingerprint64"
    bits = 64
    seed_shape = SeedShape.NONE

    @classmethod
    def _hash(cls, view, seed):
        return ffi.farm_fingerprint64(view)


class Fingerprint128(FastHash):
    name = "farm_fingerprint128"
    bits = 128
    seed_shape = SeedShape.NONE

    @classmethod
    def _hash(cls, view, seed):
        return ffi.farm_fingerprint128(view)


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


def hash64_with_seeds(data, seed0: int, seed1: int) -> int:
    return Hash64WithSeeds.hash_with_seed(data, (seed0, seed1))


def hash128(data) -> int:
    return Hash128.hash(data)


def hash128_with_seed(data, seed: int) -> int:
    return Hash128.hash_with_seed(data, seed)


def fingerprint32(data) -> int:
    return Fingerprint32.hash(data)


def fingerprint64(data) -> int:
    return Fingerprint64.hash(data)


def fingerprint128(data) -> int:
    return Fingerprint128.hash(data)
