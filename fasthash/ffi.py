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
Native entry points of every hash family.

Each function takes a read-only byte view produced by
:func:`fasthash.utils.to_buffer` plus the family's seed values, and
returns the raw digest as an unsigned integer. Compiled routines come from
``mmh3``, ``cityhash`` (which also ships ``farmhash``) and ``xxhash``;
Lookup3, MurmurHash1, MurmurHash2 in all its variants and SpookyHash V2 are
served by :mod:`fasthash.lib`.
"""

import cityhash
import farmhash
import mmh3
import xxhash

from .lib import lookup3 as _lookup3
from .lib import murmur as _murmur
from .lib import spooky as _spooky

# lookup3


def lookup3(view: memoryview, seed: int) -> int:
    return _lookup3.hashlittle(view, seed)


# CityHash


def city_hash32(view: memoryview) -> int:
    return cityhash.CityHash32(view)


def city_hash64_with_seed(view: memoryview, seed: int) -> int:
    return cityhash.CityHash64WithSeed(view, seed)


def city_hash64_with_seeds(view: memoryview, seed0: int, seed1: int) -> int:
    return cityhash.CityHash64WithSeeds(view, seed0, seed1)


def city_hash128_with_seed(view: memoryview, seed: int) -> int:
    return cityhash.CityHash128WithSeed(view, seed)


# FarmHash


def farm_hash32_with_seed(view: memoryview, seed: int) -> int:
    return farmhash.FarmHash32WithSeed(view, seed)


def farm_hash64_with_seed(view: memoryview, seed: int) -> int:
    return farmhash.FarmHash64WithSeed(view, seed)


def farm_hash64_with_seeds(view: memoryview, seed0: int, seed1: int) -> int:
    return farmhash.FarmHash64WithSeeds(view, seed0, seed1)


def farm_hash128_with_seed(view: memoryview, seed: int) -> int:
    return farmhash.FarmHash128WithSeed(view, seed)


def farm_fingerprint32(view: memoryview) -> int:
    return farmhash.Fingerprint32(view)


def farm_fingerprint64(view: memoryview) -> int:
    return farmhash.Fingerprint64(view)


def farm_fingerprint128(view: memoryview) -> int:
    return farmhash.Fingerprint128(view)


# MurmurHash1 / MurmurHash2


def murmur_hash1(view: memoryview, seed: int) -> int:
    return _murmur.murmur_hash1(view, seed)


def murmur_hash2(view: memoryview, seed: int) -> int:
    return _murmur.murmur_hash2(view, seed)


def murmur_hash2a(view: memoryview, seed: int) -> int:
    return _murmur.murmur_hash2a(view, seed)


def murmur_hash64a(view: memoryview, seed: int) -> int:
    return _murmur.murmur_hash64a(view, seed)


def murmur_hash64b(view: memoryview, seed: int) -> int:
    return _murmur.murmur_hash64b(view, seed)


# MurmurHash3


def _murmur_hash3(state, view: memoryview) -> int:
    # mmh3 one-shot functions reject memoryview, its hasher objects take any buffer
    state.update(view)
    return state.uintdigest()


def murmur_hash3_x86_32(view: memoryview, seed: int) -> int:
    return _murmur_hash3(mmh3.mmh3_32(seed=seed), view)


def murmur_hash3_x86_128(view: memoryview, seed: int) -> int:
    return _murmur_hash3(mmh3.mmh3_x86_128(seed=seed), view)


def murmur_hash3_x64_128(view: memoryview, seed: int) -> int:
    return _murmur_hash3(mmh3.mmh3_x64_128(seed=seed), view)


def murmur_hash3_x86_32_state(seed: int):
    return mmh3.mmh3_32(seed=seed)


def murmur_hash3_x86_128_state(seed: int):
    return mmh3.mmh3_x86_128(seed=seed)


def murmur_hash3_x64_128_state(seed: int):
    return mmh3.mmh3_x64_128(seed=seed)


def murmur_hash3_state_digest(state) -> int:
    return state.uintdigest()


# SpookyHash V2


def spooky_hash32(view: memoryview, seed: int) -> int:
    return _spooky.spooky_hash32(view, seed)


def spooky_hash64(view: memoryview, seed: int) -> int:
    return _spooky.spooky_hash64(view, seed)


def spooky_hash128(view: memoryview, seed1: int, seed2: int) -> int:
    hash1, hash2 = _spooky.spooky_hash128(view, seed1, seed2)
    return (hash1 << 64) | hash2


# xxHash


def xxh32(view: memoryview, seed: int) -> int:
    return xxhash.xxh32_intdigest(view, seed)


def xxh64(view: memoryview, seed: int) -> int:
    return xxhash.xxh64_intdigest(view, seed)


def xxh3_64(view: memoryview, seed: int) -> int:
    return xxhash.xxh3_64_intdigest(view, seed)


def xxh3_128(view: memoryview, seed: int) -> int:
    return xxhash.xxh3_128_intdigest(view, seed)


def xxh32_state(seed: int):
    return xxhash.xxh32(seed=seed)


def xxh64_state(seed: int):
    return xxhash.xxh64(seed=seed)


def xxh3_64_state(seed: int):
    return xxhash.xxh3_64(seed=seed)


def xxh3_128_state(seed: int):
    return xxhash.xxh3_128(seed=seed)


def xxh_state_digest(state) -> int:
    return state.intdigest()
