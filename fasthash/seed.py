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


import enum
import logging
import numbers
import random
from typing import Any, Optional, Tuple, Union

from .errors import SeedError

logger = logging.getLogger(__name__)

SeedType = Union[None, int, Tuple[int, int]]

_system_random = random.SystemRandom()


class SeedShape(enum.Enum):
    """
    Arity and width of the seed a hash family accepts.
    """

    NONE = (0, 0)
    U32 = (1, 32)
    U64 = (1, 64)
    U64_PAIR = (2, 64)
    U128 = (1, 128)

    def __init__(self, arity: int, bits: int):
        self.arity = arity
        self.bits = bits

    @property
    def default(self) -> SeedType:
        if self is SeedShape.NONE:
            return None
        elif self is SeedShape.U64_PAIR:
            return 0, 0
        return 0

    def _check_int(self, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise SeedError(
                f"Seed of shape {self.name} must be an integer, "
                f"got {type(value).__name__}"
            )
        value = int(value)
        if not 0 <= value < 1 << self.bits:
            raise SeedError(f"Seed {value} is out of range for shape {self.name}")
        return value

    def validate(self, seed: Any) -> SeedType:
        if self is SeedShape.NONE:
            if seed is not None:
                raise SeedError(f"Hash family takes no seed, got {seed!r}")
            return None
        elif self is SeedShape.U64_PAIR:
            if not isinstance(seed, (tuple, list)) or len(seed) != 2:
                raise SeedError(f"Seed of shape {self.name} must be a pair, got {seed!r}")
            return tuple(self._check_int(s) for s in seed)
        return self._check_int(seed)

    def random(self, rng: Optional[random.Random] = None) -> SeedType:
        rng = rng or _system_random
        if self is SeedShape.NONE:
            return None
        elif self is SeedShape.U64_PAIR:
            return rng.getrandbits(64), rng.getrandbits(64)
        return rng.getrandbits(self.bits)


class RandomState:
    """
    Keys every hasher it builds with one seed drawn at construction,
    so digests are stable for the lifetime of the state but differ
    between processes.

    Parameters
    ----------
    hasher_cls
        A streaming hasher class, e.g. ``murmur3.Hasher32``.
    rng
        Source of randomness, ``random.SystemRandom`` by default.
    """

    def __init__(self, hasher_cls, rng: Optional[random.Random] = None):
        self._hasher_cls = hasher_cls
        self._seed = hasher_cls.fast_hash.seed_shape.random(rng)
        logger.debug("Drew random seed for %s", hasher_cls.fast_hash.name)

    @property
    def seed(self) -> SeedType:
        return self._seed

    def build_hasher(self):
        return self._hasher_cls(self._seed)

    def hash_one(self, data) -> int:
        return self._hasher_cls.fast_hash.hash_with_seed(data, self._seed)

    def __repr__(self):
        return f"RandomState({self._hasher_cls.__qualname__})"
