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
MurmurHash1 and MurmurHash2 by Austin Appleby, public domain.

Words are read little-endian, matching the reference code on x86.
"""

from ..utils import unpack_tail, unpack_words

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF

_M1 = 0xC6A4A793
_M2 = 0x5BD1E995
_M64 = 0xC6A4A7935BD1E995


def murmur_hash1(view: memoryview, seed: int = 0) -> int:
    length = len(view)
    h = (seed ^ (length * _M1)) & _MASK32

    nblocks = length // 4
    for k in unpack_words(view, nblocks):
        h = ((h + k) * _M1) & _MASK32
        h ^= h >> 16

    if length & 3:
        h = ((h + unpack_tail(view, nblocks * 4)) * _M1) & _MASK32
        h ^= h >> 16

    h = (h * _M1) & _MASK32
    h ^= h >> 10
    h = (h * _M1) & _MASK32
    h ^= h >> 17
    return h


def _mix_word(h: int, k: int) -> int:
    k = (k * _M2) & _MASK32
    k ^= k >> 24
    k = (k * _M2) & _MASK32
    return ((h * _M2) & _MASK32) ^ k


def murmur_hash2(view: memoryview, seed: int = 0) -> int:
    length = len(view)
    h = (seed ^ length) & _MASK32

    nblocks = length // 4
    for k in unpack_words(view, nblocks):
        h = _mix_word(h, k)

    if length & 3:
        h ^= unpack_tail(view, nblocks * 4)
        h = (h * _M2) & _MASK32

    h ^= h >> 13
    h = (h * _M2) & _MASK32
    h ^= h >> 15
    return h


def murmur_hash2a(view: memoryview, seed: int = 0) -> int:
    """
    MurmurHash2A, the Merkle-Damgard variant which also mixes the tail
    and the length as full words.
    """
    length = len(view)
    h = seed & _MASK32

    nblocks = length // 4
    for k in unpack_words(view, nblocks):
        h = _mix_word(h, k)

    h = _mix_word(h, unpack_tail(view, nblocks * 4))
    h = _mix_word(h, length & _MASK32)

    h ^= h >> 13
    h = (h * _M2) & _MASK32
    h ^= h >> 15
    return h


def murmur_hash64a(view: memoryview, seed: int = 0) -> int:
    """
    64-bit MurmurHash2 for 64-bit platforms.
    """
    length = len(view)
    h = (seed ^ (length * _M64)) & _MASK64

    nblocks = length // 8
    for k in unpack_words(view, nblocks, width=64):
        k = (k * _M64) & _MASK64
        k ^= k >> 47
        k = (k * _M64) & _MASK64
        h = ((h ^ k) * _M64) & _MASK64

    if length & 7:
        h ^= unpack_tail(view, nblocks * 8)
        h = (h * _M64) & _MASK64

    h ^= h >> 47
    h = (h * _M64) & _MASK64
    h ^= h >> 47
    return h


def murmur_hash64b(view: memoryview, seed: int = 0) -> int:
    """
    64-bit MurmurHash2 for 32-bit platforms, two interleaved 32-bit lanes.
    """
    length = len(view)
    h1 = ((seed & _MASK32) ^ length) & _MASK32
    h2 = (seed >> 32) & _MASK32

    words = unpack_words(view, length // 4)
    npairs = length // 8
    for i in range(npairs):
        h1 = _mix_word(h1, words[2 * i])
        h2 = _mix_word(h2, words[2 * i + 1])
    if len(words) > 2 * npairs:
        h1 = _mix_word(h1, words[-1])

    if length & 3:
        h2 ^= unpack_tail(view, len(words) * 4)
        h2 = (h2 * _M2) & _MASK32

    h1 ^= h2 >> 18
    h1 = (h1 * _M2) & _MASK32
    h2 ^= h1 >> 22
    h2 = (h2 * _M2) & _MASK32
    h1 ^= h2 >> 17
    h1 = (h1 * _M2) & _MASK32
    h2 ^= h1 >> 19
    h2 = (h2 * _M2) & _MASK32

    return (h1 << 32) | h2
