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


import logging
from typing import BinaryIO, Dict, Optional, Tuple, Type

from . import registry
from .config import options
from .errors import HashDefinitionError, NativeBoundaryError, SeedError
from .seed import SeedShape, SeedType
from .utils import classproperty, no_default, to_buffer

logger = logging.getLogger(__name__)

_VALID_BITS = (32, 64, 128)


class FastHashMeta(type):
    def __new__(mcs, name: str, bases: Tuple[Type], properties: Dict):
        cls = super().__new__(mcs, name, bases, properties)
        if cls.bits is None:
            # abstract base
            return cls

        if cls.bits not in _VALID_BITS:
            raise HashDefinitionError(
                f"{name}.bits must be one of {_VALID_BITS}, got {cls.bits!r}"
            )
        if not isinstance(cls.seed_shape, SeedShape):
            raise HashDefinitionError(
                f"{name}.seed_shape must be a SeedShape, got {cls.seed_shape!r}"
            )
        if cls.default_seed is no_default:
            cls.default_seed = cls.seed_shape.default
        try:
            cls.default_seed = cls.seed_shape.validate(cls.default_seed)
        except SeedError as ex:
            raise HashDefinitionError(f"Invalid default seed of {name}: {ex}") from ex
        if cls._hash.__func__ is FastHash._hash.__func__:
            raise HashDefinitionError(f"{name} does not implement _hash")
        if cls.native_state and (
            cls.new_state.__func__ is FastHash.new_state.__func__
            or cls.state_digest.__func__ is FastHash.state_digest.__func__
        ):
            raise HashDefinitionError(
                f"{name} declares native state without new_state and state_digest"
            )

        if "name" in properties and cls.name is not None:
            registry.register_hash(cls)
        return cls


class FastHash(metaclass=FastHashMeta):
    """
    Fingerprint function of one hash family, one digest width and one
    seed shape.

    Subclasses are never instantiated: ``hash`` and ``hash_with_seed`` are
    class methods, pure functions of the input bytes and the seed which can
    be called from any thread. A subclass sets ``bits`` and ``seed_shape``,
    optionally ``default_seed`` and ``name``, and implements ``_hash``
    against exactly one native routine. Declaring ``name`` makes the family
    available in :mod:`fasthash.registry`.

    Families whose native library keeps incremental state set
    ``native_state`` and implement ``new_state`` and ``state_digest``.
    """

    name: Optional[str] = None
    bits: Optional[int] = None
    seed_shape: SeedShape = SeedShape.NONE
    default_seed = no_default
    native_state: bool = False

    @classmethod
    def hash(cls, data) -> int:
        """
        Hash ``data`` with the default seed of the family.
        """
        return cls.hash_with_seed(data, cls.default_seed)

    @classmethod
    def hash_with_seed(cls, data, seed: SeedType) -> int:
        """
        Hash ``data`` with ``seed``.

        Parameters
        ----------
        data : bytes-like or str
            Input bytes. ``str`` is hashed as UTF-8.
        seed
            Seed matching ``seed_shape``: ``None``, an unsigned integer
            or a pair of unsigned 64-bit integers.

        Returns
        -------
        int
            Unsigned digest of ``bits`` bits.
        """
        seed = cls.seed_shape.validate(seed)
        return cls.check_digest(cls._hash(to_buffer(data), seed))

    @classmethod
    def check_digest(cls, digest) -> int:
        if (
            isinstance(digest, bool)
            or not isinstance(digest, int)
            or digest < 0
            or digest >> cls.bits
        ):
            raise NativeBoundaryError(
                f"{cls.name or cls.__name__} returned {digest!r}, "
                f"which is not a {cls.bits}-bit digest"
            )
        return digest

    @classmethod
    def _hash(cls, view: memoryview, seed: SeedType) -> int:
        raise NotImplementedError

    @classmethod
    def new_state(cls, seed: SeedType):
        raise NotImplementedError

    @classmethod
    def state_digest(cls, state) -> int:
        raise NotImplementedError


class FastHasher:
    """
    Streaming adapter over a :class:`FastHash` family.

    Bytes passed to ``write`` accumulate until ``finish``, which returns
    the digest of everything written so far without resetting the hasher:
    writing may go on after it and ``finish`` may be called again.

    When the family keeps native incremental state and option
    ``hasher.native_state`` is on, the hasher feeds that state directly and
    ``finish`` costs O(1) in the amount already written. Otherwise written
    bytes are buffered and hashed as a whole on every ``finish``.

    A hasher is owned by one caller at a time. Sharing it between threads
    needs external locking.
    """

    fast_hash: Type[FastHash] = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.__dict__.get("fast_hash") is not None:
            registry.register_hasher(cls)

    def __init__(self, seed: SeedType = no_default):
        fast_hash = self.fast_hash
        if fast_hash is None:
            raise TypeError(f"{type(self).__name__} is not bound to a hash family")
        if seed is no_default:
            seed = fast_hash.default_seed
        self._seed = fast_hash.seed_shape.validate(seed)

        if fast_hash.native_state and options.hasher.native_state:
            self._state = fast_hash.new_state(self._seed)
            self._buffer = None
        else:
            self._state = None
            self._buffer = bytearray()

    @classmethod
    def new(cls) -> "FastHasher":
        return cls()

    @classmethod
    def with_seed(cls, seed: SeedType) -> "FastHasher":
        return cls(seed)

    @classproperty
    def name(cls) -> str:
        return cls.fast_hash.name

    @classproperty
    def digest_size(cls) -> int:
        return cls.fast_hash.bits // 8

    @property
    def seed(self) -> SeedType:
        return self._seed

    @property
    def strategy(self) -> str:
        return "buffer" if self._state is None else "native"

    def write(self, data) -> "FastHasher":
        view = to_buffer(data)
        if self._state is None:
            self._buffer += view
        else:
            self._state.update(view)
        return self

    def update(self, data) -> None:
        self.write(data)

    def finish(self) -> int:
        fast_hash = self.fast_hash
        if self._state is None:
            return fast_hash.hash_with_seed(bytes(self._buffer), self._seed)
        return fast_hash.check_digest(fast_hash.state_digest(self._state))

    def intdigest(self) -> int:
        return self.finish()

    def digest(self) -> bytes:
        return self.finish().to_bytes(self.digest_size, "big")

    def hexdigest(self) -> str:
        return self.digest().hex()

    def copy(self) -> "FastHasher":
        other = type(self).__new__(type(self))
        other._seed = self._seed
        other._state = None if self._state is None else self._state.copy()
        other._buffer = None if self._buffer is None else bytearray(self._buffer)
        return other

    def _write_int(self, value: int, size: int, signed: bool) -> "FastHasher":
        return self.write(int(value).to_bytes(size, "little", signed=signed))

    def write_u8(self, value: int) -> "FastHasher":
        return self._write_int(value, 1, False)

    def write_u16(self, value: int) -> "FastHasher":
        return self._write_int(value, 2, False)

    def write_u32(self, value: int) -> "FastHasher":
        return self._write_int(value, 4, False)

    def write_u64(self, value: int) -> "FastHasher":
        return self._write_int(value, 8, False)

    def write_u128(self, value: int) -> "FastHasher":
        return self._write_int(value, 16, False)

    def write_i8(self, value: int) -> "FastHasher":
        return self._write_int(value, 1, True)

    def write_i16(self, value: int) -> "FastHasher":
        return self._write_int(value, 2, True)

    def write_i32(self, value: int) -> "FastHasher":
        return self._write_int(value, 4, True)

    def write_i64(self, value: int) -> "FastHasher":
        return self._write_int(value, 8, True)

    def write_i128(self, value: int) -> "FastHasher":
        return self._write_int(value, 16, True)

    write_usize = write_u64

    def write_str(self, s: str) -> "FastHasher":
        # 0xff never occurs in UTF-8, so it terminates the string
        return self.write(s.encode("utf-8")).write_u8(0xFF)

    def write_stream(self, stream: BinaryIO, chunk_size: int = None) -> int:
        """
        Read ``stream`` to its end into the hasher.

        Returns
        -------
        int
            Number of bytes consumed.
        """
        chunk_size = chunk_size or options.hasher.stream_chunk_size
        consumed = 0
        while True:
            chunk = stream.read(chunk_size)
            if not chunk:
                break
            self.write(chunk)
            consumed += len(chunk)
        logger.debug("Consumed %d bytes from %r into %s", consumed, stream, self.name)
        return consumed

    def __repr__(self):
        return f"<{type(self).__qualname__} {self.name} strategy={self.strategy}>"


def make_hasher(hash_cls: Type[FastHash]) -> Type[FastHasher]:
    """
    Build a streaming hasher class bound to ``hash_cls``.
    """
    return type(
        f"{hash_cls.__name__}Hasher",
        (FastHasher,),
        {"fast_hash": hash_cls, "__module__": hash_cls.__module__},
    )
