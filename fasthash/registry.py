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
from typing import Dict, List, Type

from .config import options
from .errors import HashDefinitionError, UnknownAlgorithmError
from .utils import no_default

logger = logging.getLogger(__name__)

_name_to_hash: Dict[str, Type] = dict()
_name_to_hasher: Dict[str, Type] = dict()


def register_hash(hash_cls: Type) -> None:
    name = hash_cls.name
    registered = _name_to_hash.get(name)
    if registered is not None and registered is not hash_cls:
        raise HashDefinitionError(
            f"Hash algorithm {name!r} has already been registered "
            f"by {registered.__module__}.{registered.__qualname__}"
        )
    _name_to_hash[name] = hash_cls
    logger.debug(
        "Registered hash algorithm %s, %d bits, seed shape %s",
        name,
        hash_cls.bits,
        hash_cls.seed_shape.name,
    )


def register_hasher(hasher_cls: Type) -> None:
    name = hasher_cls.fast_hash.name
    if name is not None:
        _name_to_hasher.setdefault(name, hasher_cls)


def unregister_hash(name: str) -> None:
    if name not in _name_to_hash:
        raise UnknownAlgorithmError(name)
    del _name_to_hash[name]
    _name_to_hasher.pop(name, None)


def get_hash(name: str) -> Type:
    try:
        return _name_to_hash[name]
    except KeyError:
        raise UnknownAlgorithmError(name) from None


def get_hasher(name: str) -> Type:
    hash_cls = get_hash(name)
    try:
        return _name_to_hasher[name]
    except KeyError:
        from .hasher import make_hasher

        # the new class registers itself on creation
        return make_hasher(hash_cls)


def list_algorithms() -> List[str]:
    return sorted(_name_to_hash)


def new(name: str = None, seed=no_default):
    """
    Create a streaming hasher for the algorithm registered as ``name``.

    Parameters
    ----------
    name : str, optional
        Algorithm name as listed by :func:`list_algorithms`. Defaults to
        option ``hasher.default_algorithm``.
    seed : optional
        Seed of the family's seed shape. The family default is used
        when omitted.
    """
    name = name or options.hasher.default_algorithm
    return get_hasher(name)(seed)
