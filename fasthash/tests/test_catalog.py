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


import numpy as np
import pytest

from .. import city, farm, lookup3, murmur, murmur2, murmur3, spooky, xx, xxh3
from ..registry import get_hash, get_hasher, list_algorithms
from ..seed import SeedShape

ALGORITHMS = list_algorithms()

_seed_samples = {
    SeedShape.U32: 0x9E3779B9,
    SeedShape.U64: 0x9E3779B97F4A7C15,
    SeedShape.U64_PAIR: (0x9E3779B97F4A7C15, 0xC2B2AE3D27D4EB4F),
    SeedShape.U128: (1 << 100) | 0x9E3779B9,
}


def test_catalog_complete():
    assert set(ALGORITHMS) == {
        "city32",
        "city64",
        "city64_seeds",
        "city128",
        "farm32",
        "farm64",
        "farm64_seeds",
        "farm128",
        "farm_fingerprint32",
        "farm_fingerprint64",
        "farm_fingerprint128",
        "lookup3",
        "murmur1",
        "murmur2",
        "murmur2a",
        "murmur64a",
        "murmur64b",
        "murmur3_32",
        "murmur3_x86_128",
        "murmur3_x64_128",
        "spooky32",
        "spooky64",
        "spooky128",
        "xx32",
        "xx64",
        "xxh3_64",
        "xxh3_128",
    }


@pytest.mark.parametrize("name", ALGORITHMS)
def test_default_seed(name, sample_payloads):
    hash_cls = get_hash(name)
    for payload in sample_payloads:
        digest = hash_cls.hash(payload)
        assert 0 <= digest < 1 << hash_cls.bits
        assert digest == hash_cls.hash_with_seed(payload, hash_cls.default_seed)
        assert digest == hash_cls.hash(bytearray(payload))


@pytest.mark.parametrize("name", ALGORITHMS)
def test_seed_changes_digest(name):
    hash_cls = get_hash(name)
    if hash_cls.seed_shape is SeedShape.NONE:
        pytest.skip(f"{name} takes no seed")
    data = b"The quick brown fox jumps over the lazy dog"
    seed = _seed_samples[hash_cls.seed_shape]
    assert hash_cls.hash_with_seed(data, seed) != hash_cls.hash(data)
    assert hash_cls.hash_with_seed(data, seed) == hash_cls.hash_with_seed(data, seed)


@pytest.mark.parametrize("name", ALGORITHMS)
def test_streaming_matches_one_shot(name, sample_payloads):
    hasher_cls = get_hasher(name)
    hash_cls = hasher_cls.fast_hash
    for payload in sample_payloads:
        hasher = hasher_cls()
        for start in range(0, len(payload), 7):
            hasher.write(payload[start : start + 7])
        assert hasher.finish() == hash_cls.hash(payload)


@pytest.mark.parametrize("name", ALGORITHMS)
def test_buffered_streaming_matches_one_shot(name, buffered_hashers):
    hasher = get_hasher(name)()
    assert hasher.strategy == "buffer"
    data = bytes(range(256)) * 3
    for start in range(0, len(data), 100):
        hasher.write(data[start : start + 100])
        assert hasher.finish() == hasher.finish()
    assert hasher.finish() == get_hash(name).hash(data)


@pytest.mark.parametrize("name", ALGORITHMS)
def test_input_types(name):
    hash_cls = get_hash(name)
    arr = np.arange(64, dtype="<u4")
    assert hash_cls.hash(arr) == hash_cls.hash(arr.tobytes())
    assert hash_cls.hash(memoryview(arr)) == hash_cls.hash(arr.tobytes())
    assert hash_cls.hash("héllo") == hash_cls.hash("héllo".encode("utf-8"))


def test_lookup3_vectors():
    assert lookup3.hash32(b"hello") == 885767278
    assert lookup3.hash32_with_seed(b"hello", 123) == 632258402
    assert lookup3.hash32("helloworld") == 1392336737

    hasher = lookup3.Hasher32()
    assert hasher.write(b"hello").finish() == 885767278
    assert hasher.write(b"world").finish() == 1392336737


def test_city_functions():
    data = b"hello"
    assert city.hash64(data) == city.hash64_with_seed(data, 0)
    assert city.hash64_with_seeds(data, 1, 2) == city.Hash64WithSeeds.hash_with_seed(
        data, (1, 2)
    )
    assert city.hash128(data) == city.hash128_with_seed(data, 0)
    assert city.hash32(data) == city.Hasher32().write(data).finish()
    assert city.hash128(data) >> 64 != 0


def test_farm_functions():
    data = b"hello"
    assert farm.hash32(data) == farm.hash32_with_seed(data, 0)
    assert farm.hash64(data) == farm.hash64_with_seed(data, 0)
    assert farm.hash64_with_seeds(data, 1, 2) != farm.hash64_with_seeds(data, 2, 1)
    assert farm.hash128(data) == farm.hash128_with_seed(data, 0)
    assert farm.fingerprint32(data) == farm.Fingerprint32.hash(data)
    assert farm.fingerprint64(data) == farm.Fingerprint64.hash(data)
    assert farm.fingerprint128(data) == farm.Fingerprint128.hash(data)


def test_murmur_functions():
    data = b"hello"
    assert murmur.hash32(data) == murmur.hash32_with_seed(data, 0)
    assert murmur2.hash32(data) == murmur2.hash32_with_seed(data, 0)
    assert murmur2.hash32a(data) == murmur2.hash32a_with_seed(data, 0)
    assert murmur2.hash64(data) == murmur2.Hash64A.hash(data)
    assert murmur2.hash64b(data) == murmur2.hash64b_with_seed(data, 0)
    assert len({murmur.hash32(data), murmur2.hash32(data), murmur2.hash32a(data)}) == 3


def test_murmur3_matches_mmh3():
    import mmh3

    data = b"foo"
    assert murmur3.hash32(data) == mmh3.hash(data, 0, signed=False)
    assert murmur3.hash32_with_seed(data, 42) == mmh3.hash(data, 42, signed=False)
    assert murmur3.hash128(data) == mmh3.hash128(data, 0, signed=False)
    assert murmur3.hash128_x86(data) == mmh3.hash128(
        data, 0, x64arch=False, signed=False
    )
    assert murmur3.hash128_x86_with_seed(data, 1) != murmur3.hash128_x86(data)


def test_spooky_functions():
    data = b"hello"
    assert spooky.hash128_with_seed(data, 3, 3) >> 64 == spooky.hash64_with_seed(data, 3)
    assert spooky.hash32_with_seed(data, 3) == spooky.hash64_with_seed(data, 3) & 0xFFFFFFFF
    assert spooky.hash128(data) == spooky.hash128_with_seed(data, 0, 0)


def test_xxhash_matches_xxhash():
    import xxhash

    data = b"hello"
    assert xx.hash32(data) == xxhash.xxh32_intdigest(data)
    assert xx.hash64_with_seed(data, 7) == xxhash.xxh64_intdigest(data, 7)
    assert xxh3.hash64(data) == xxhash.xxh3_64_intdigest(data)
    assert xxh3.hash128_with_seed(data, 7) == xxhash.xxh3_128_intdigest(data, 7)


@pytest.mark.parametrize(
    "hash_cls,expected",
    [
        (lookup3.Hash32, 0x3D83917A),
        (murmur3.Hash32, 0xB0F57EE3),
        (murmur3.Hash128_x86, 0xB3ECE62A),
        (murmur3.Hash128_x64, 0x6384BA69),
    ],
)
def test_smhasher_verification(hash_cls, expected):
    nbytes = hash_cls.bits // 8
    key = bytes(range(256))
    digests = b"".join(
        hash_cls.hash_with_seed(key[:i], 256 - i).to_bytes(nbytes, "little")
        for i in range(256)
    )
    final = hash_cls.hash_with_seed(digests, 0).to_bytes(nbytes, "little")
    assert int.from_bytes(final[:4], "little") == expected


@pytest.mark.parametrize(
    "hash_cls", [murmur3.Hash32, murmur3.Hash128_x86, murmur3.Hash128_x64]
)
def test_murmur3_buffer_inputs(hash_cls, buffered_hashers):
    data = bytes(range(100))
    expected = hash_cls.hash(data)
    assert hash_cls.hash(memoryview(data)) == expected
    assert hash_cls.hash(bytearray(data)) == expected
    assert hash_cls.hash(np.frombuffer(data, dtype="u1")) == expected

    hasher = get_hasher(hash_cls.name).with_seed(3)
    assert hasher.strategy == "buffer"
    assert hasher.write(data[:10]).write(data[10:]).finish() == (
        hash_cls.hash_with_seed(data, 3)
    )


def test_seeded_routines_at_default_seed():
    import cityhash
    import farmhash

    data = b"The quick brown fox jumps over the lazy dog"
    assert city.hash64(data) == cityhash.CityHash64WithSeed(data, 0)
    assert city.hash128(data) == cityhash.CityHash128WithSeed(data, 0)
    assert farm.hash32(data) == farmhash.FarmHash32WithSeed(data, 0)
    assert farm.hash64(data) == farmhash.FarmHash64WithSeed(data, 0)
    assert farm.fingerprint64(data) == farmhash.Fingerprint64(data)
