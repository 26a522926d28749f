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
`MurmurHash1`, the original 32-bit hash by Austin Appleby.

Superseded by MurmurHash2 and MurmurHash3, kept for digests that were
persisted with it. Streaming hashers buffer written bytes and hash them on
``finish``.
"""

from . import ffi
from .hasher import FastHash, FastHasher
from .seed import SeedShape


class Hash32(FastHash):
    name = "murmur1"
    bits = 32
    seed_shape = SeedShape.U32

    @classmethod
    def _hash(cls, view, seed):
        return ffi.murmur_hash1(view, seed)


class Hasher32(FastHasher):
    fast_hash = Hash32


def hash32(data) -> int:
    return Hash32.hash(data)


def hash32_with_seed(data, seed: int) -> int:
    return Hash32.hash_with_seed(data, seed)
