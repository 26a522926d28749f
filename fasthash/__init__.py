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


from . import city, farm, lookup3, murmur, murmur2, murmur3, spooky, xx, xxh3
from .config import option_context, options
from .errors import (
    FastHashError,
    HashDefinitionError,
    NativeBoundaryError,
    SeedError,
    UnknownAlgorithmError,
)
from .hasher import FastHash, FastHasher, make_hasher
from .keys import hash_key, register_key_writer, write_key
from .registry import get_hash, get_hasher, list_algorithms, new
from .seed import RandomState, SeedShape

# ready-made hashers, one per family
Lookup3Hasher = lookup3.Hasher32
CityHasher = city.Hasher64
FarmHasher = farm.Hasher64
MurmurHasher = murmur.Hasher32
Murmur2Hasher = murmur2.Hasher64A
Murmur3Hasher = murmur3.Hasher32
SpookyHasher = spooky.Hasher64
XXHasher = xx.Hasher64
XXH3Hasher = xxh3.Hasher64


def _get_version():
    from importlib.metadata import version

    return version("fasthash")


try:
    __version__ = _get_version()
except ImportError:  # pragma: no cover
    pass
