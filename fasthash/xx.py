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
`xxHash` XXH32 and XXH64 by Yann Collet, bound through the ``xxhash``
package.

Streaming hashers thread the incremental state of ``xxhash`` hasher objects
unless option ``hasher.native_state`` is turned off.
"""

from . import ffi
from .hasher import FastHash, FastHasher
from .seed import SeedShape


class _XXHash(FastHash):
    native_state = True

    @classmethod
    def state_digest(cls, state) -> int:
        return ffi.xxh_state_digest(state)


class Hash32(_XXHash):
    name = "xx32"
    bits = 32
    seed_shape = SeedShape.U32

    @classmethod
    def _hash(cls, view, seed):
        return ffi.xxh32(view, seed)

    @classmethod
    def new_state(cls, seed):
        return ffi.xxh32_state(seed)


class Hash64(_XXHash):
    name = "xx64"
    bits = 64
    seed_shape = SeedShape.U64

    @classmethod
    def _hash(cls, view, seed):
        return ffi.xxh64(view, seed)

    @classmethod
    def new_state(cls, seed):
        return ffi.xxh64_state(seed)


class Hasher32(FastHasher):
    fast_hash = Hash32


class Hasher64(FastHasher):
    fast_hash = Hash64


def hash32(data) -> int:
    return Hash32.hash(data)


def hash32_with_seed(data, seed: int) -> int:
    return Hash32.hash_with_seed(data, seed)


def hash64(data) -> int:
    return Hash64.hash(data)


def hash64_with_seed(data, seed: int) -> int:
    return Hash64.hash_with_seed(data, seed)
