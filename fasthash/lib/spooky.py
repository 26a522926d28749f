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
SpookyHash V2 by Bob Jenkins, 2012, public domain.

http://burtleburtle.net/bob/hash/spooky.html
"""

from typing import List, Tuple

from ..utils import unpack_tail, unpack_words

_MASK64 = 0xFFFFFFFFFFFFFFFF

_SC_NUM_VARS = 12
_SC_BLOCK_SIZE = _SC_NUM_VARS * 8
_SC_BUF_SIZE = 2 * _SC_BLOCK_SIZE
_SC_CONST = 0xDEADBEEFDEADBEEF

_MIX_ROTATIONS = (11, 32, 43, 31, 17, 28, 39, 57, 55, 54, 22, 46)
_END_ROTATIONS = (44, 15, 34, 21, 38, 33, 10, 13, 38, 53, 42, 54)
_SHORT_MIX_ROTATIONS = (50, 52, 30, 41, 54, 48, 38, 37, 62, 34, 5, 36)
_SHORT_END_ROTATIONS = (15, 52, 26, 51, 28, 9, 47, 54, 32, 25, 63)


def _rot64(x: int, k: int) -> int:
    return ((x << k) | (x >> (64 - k))) & _MASK64


def _mix(data: List[int], s: List[int]) -> None:
    for i in range(_SC_NUM_VARS):
        s[i] = (s[i] + data[i]) & _MASK64
        s[(i + 2) % 12] ^= s[(i + 10) % 12]
        s[(i + 11) % 12] ^= s[i]
        s[i] = _rot64(s[i], _MIX_ROTATIONS[i])
        s[(i + 11) % 12] = (s[(i + 11) % 12] + s[(i + 1) % 12]) & _MASK64


def _end_partial(h: List[int]) -> None:
    for i in range(_SC_NUM_VARS):
        j, k, l = (i + 11) % 12, (i + 1) % 12, (i + 2) % 12
        h[j] = (h[j] + h[k]) & _MASK64
        h[l] ^= h[j]
        h[k] = _rot64(h[k], _END_ROTATIONS[i])


def _end(data: List[int], h: List[int]) -> None:
    for i in range(_SC_NUM_VARS):
        h[i] = (h[i] + data[i]) & _MASK64
    _end_partial(h)
    _end_partial(h)
    _end_partial(h)


def _short_mix(h: List[int]) -> None:
    for i, r in enumerate(_SHORT_MIX_ROTATIONS):
        x, y, z = (i + 2) % 4, (i + 3) % 4, i % 4
        h[x] = (_rot64(h[x], r) + h[y]) & _MASK64
        h[z] ^= h[x]


def _short_end(h: List[int]) -> None:
    for i, r in enumerate(_SHORT_END_ROTATIONS):
        t, s = (i + 3) % 4, (i + 2) % 4
        h[t] ^= h[s]
        h[s] = _rot64(h[s], r)
        h[t] = (h[t] + h[s]) & _MASK64


def _short(view: memoryview, hash1: int, hash2: int) -> Tuple[int, int]:
    length = len(view)
    remainder = length % 32
    h = [hash1, hash2, _SC_CONST, _SC_CONST]
    pos = 0

    if length > 15:
        nchunks = length // 32
        words = unpack_words(view, nchunks * 4 + (2 if remainder >= 16 else 0), 64)
        for i in range(0, nchunks * 4, 4):
            h[2] = (h[2] + words[i]) & _MASK64
            h[3] = (h[3] + words[i + 1]) & _MASK64
            _short_mix(h)
            h[0] = (h[0] + words[i + 2]) & _MASK64
            h[1] = (h[1] + words[i + 3]) & _MASK64
        pos = nchunks * 32

        if remainder >= 16:
            h[2] = (h[2] + words[-2]) & _MASK64
            h[3] = (h[3] + words[-1]) & _MASK64
            _short_mix(h)
            pos += 16
            remainder -= 16

    h[3] = (h[3] + (length << 56)) & _MASK64
    if remainder >= 8:
        h[2] = (h[2] + unpack_tail(view[pos : pos + 8], 0)) & _MASK64
        h[3] = (h[3] + unpack_tail(view, pos + 8)) & _MASK64
    elif remainder > 0:
        h[2] = (h[2] + unpack_tail(view, pos)) & _MASK64
    else:
        h[2] = (h[2] + _SC_CONST) & _MASK64
        h[3] = (h[3] + _SC_CONST) & _MASK64

    _short_end(h)
    return h[0], h[1]


def spooky_hash128(view: memoryview, seed1: int = 0, seed2: int = 0) -> Tuple[int, int]:
    """
    Return the two 64-bit halves ``(hash1, hash2)`` of SpookyHash128.
    """
    length = len(view)
    if length < _SC_BUF_SIZE:
        return _short(view, seed1, seed2)

    h = [seed1, seed2, _SC_CONST] * 4
    nblocks = length // _SC_BLOCK_SIZE
    words = unpack_words(view, nblocks * _SC_NUM_VARS, 64)
    for i in range(0, len(words), _SC_NUM_VARS):
        _mix(words[i : i + _SC_NUM_VARS], h)

    remainder = length - nblocks * _SC_BLOCK_SIZE
    last = bytearray(_SC_BLOCK_SIZE)
    last[:remainder] = view[nblocks * _SC_BLOCK_SIZE :]
    last[-1] = remainder
    _end(unpack_words(memoryview(last), _SC_NUM_VARS, 64), h)
    return h[0], h[1]


def spooky_hash64(view: memoryview, seed: int = 0) -> int:
    return spooky_hash128(view, seed, seed)[0]


def spooky_hash32(view: memoryview, seed: int = 0) -> int:
    return spooky_hash128(view, seed, seed)[0] & 0xFFFFFFFF
