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
`MurmurHash3` by Austin Appleby, bound through the ``mmh3`` package.

All variants take a 32-bit seed. Streaming hashers thread the incremental
state of ``mmh3`` hasher objects unless option ``hasher.native_state`` is
turned off, in which case they buffer like other families.
"""

from . import ffi
from .hasher import FastHash, FastHasher
from .seed import SeedShape


class _MurmurHash3(FastHash):
    seed_shape = SeedShape.U32
    native_state = True

    @classmethod
    def state_digest(cls, state) -> int:
        return ffi.murmur_hash3_state_digest(state)


class Hash32(_MurmurHash3):
    name = "murmur3_32"
    bits = 32

    @classmethod
    def _hash(cls, view, seed):
        return ffi.murmur_hash3_x86_32(view, seed)

    @classmethod
    def new_state(cls, seed):
        return ffi.murmur_hash3_x86_32_state(seed)


class Hash128_x86(_MurmurHash3):
    name = "murmur3_x86_128"
    bits = 128

    @classmethod
    def _hash(cls, view, seed):
        return ffi.murmur_hash3_x86_128(view, seed)

    @classmethod
    def new_state(cls, seed):
        return ffi.murmur_hash3_x86_128_state(seed)


class Hash128_x64(_MurmurHash3):
    name = "murmur3_x64_128"
    bits = 128

    @classmethod
    def _hash(cls, view, seed):
        return ffi.murmur_hash3_x64_128(view, seed)

    @classmethod
    def new_state(cls, seed):
        return ffi.murmur_hash3_x64_128_state(seed)


class Hasher32(FastHasher):
    fast_hash = Hash32


class Hasher128_x86(FastHasher):
    fast_hash = Hash128_x86


class Hasher128_x64(FastHasher):
    fast_hash = Hash128_x64


def hash32(data) -> int:
    return Hash32.hash(data)


def hash32_with_seed(data, seed: int) -> int:
    return Hash32.hash_with_seed(data, seed)


def hash128(data) -> int:
    return Hash128_x64.hash(data)


def hash128_with_seed(data, seed: int) -> int:
    return Hash128_x64.hash_with_seed(data, seed)


def hash128_x86(data) -> int:
    return Hash128_x86.hash(data)


def hash128_x86_with_seed(data, seed: int) -> int:
    return Hash128_x86.hash_with_seed(data, seed)
