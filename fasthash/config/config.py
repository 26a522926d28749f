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
Options of fasthash.

Options live in nested groups addressed with dotted names such as
``hasher.native_state``. Read them through ``options``, which always
resolves to the options of the current context, and change them locally
with :func:`option_context`.
"""

import contextlib
import contextvars
from copy import deepcopy
from typing import Any, Dict, Optional, Tuple

from .validators import (
    ValidatorType,
    is_algorithm_name,
    is_bool,
    is_positive_integer,
)


class OptionError(Exception):
    pass


class AttributeDict(dict):
    """
    Option group. Leaves are stored as ``(value, validator)`` pairs and
    read as plain values through attribute access.
    """

    def __getattr__(self, item: str):
        try:
            val = self[item]
        except KeyError:
            raise AttributeError(item) from None
        return val if isinstance(val, AttributeDict) else val[0]

    def __setattr__(self, key: str, value: Any):
        leaf = self.get(key)
        if leaf is None or isinstance(leaf, AttributeDict):
            raise OptionError(f"Cannot identify configuration name '{key}'.")
        validator = leaf[1]
        if validator is not None and not validator(value):
            raise ValueError(f"Cannot set value {value!r} to option '{key}'")
        self[key] = value, validator

    def to_dict(self) -> Dict[str, Any]:
        result_dict = dict()
        for k, v in self.items():
            if isinstance(v, AttributeDict):
                result_dict.update((f"{k}.{sk}", sv) for sk, sv in v.to_dict().items())
            else:
                result_dict[k] = v[0]
        return result_dict


class Config:
    def __init__(self, config: AttributeDict = None):
        if config is None:
            config = AttributeDict()
        object.__setattr__(self, "_config", config)

    def __getattr__(self, item: str):
        return getattr(self._config, item)

    def __setattr__(self, key: str, value: Any):
        setattr(self._config, key, value)

    def _resolve(
        self, option: str, create: bool = False
    ) -> Tuple[AttributeDict, str]:
        *groups, key = option.split(".")
        conf = self._config
        for name in groups:
            sub_conf = conf.get(name)
            if sub_conf is None and create:
                sub_conf = conf[name] = AttributeDict()
            if not isinstance(sub_conf, AttributeDict):
                raise OptionError(f"Cannot identify configuration name '{option}'.")
            conf = sub_conf
        return conf, key

    def register_option(
        self, option: str, value: Any, validator: Optional[ValidatorType] = None
    ) -> None:
        conf, key = self._resolve(option, create=True)
        if key in conf:
            raise AttributeError(f"Fail to set option: {option}, option has been set")
        conf[key] = value, validator

    def update(self, new_config: Dict[str, Any]) -> None:
        for option, value in new_config.items():
            conf, key = self._resolve(option)
            setattr(conf, key, value)

    def copy(self) -> "Config":
        return Config(deepcopy(self._config))

    def to_dict(self) -> Dict[str, Any]:
        return self._config.to_dict()


default_options = Config()

# use native incremental state of a family when it offers one
default_options.register_option("hasher.native_state", True, validator=is_bool)
# algorithm of fasthash.new() and hash_key() when none is named
default_options.register_option(
    "hasher.default_algorithm", "murmur3_32", validator=is_algorithm_name
)
# read size of FastHasher.write_stream()
default_options.register_option(
    "hasher.stream_chunk_size", 64 * 1024, validator=is_positive_integer
)

_options_ctx_var = contextvars.ContextVar("_options_ctx_var", default=None)


def get_global_options() -> Config:
    opts = _options_ctx_var.get()
    return default_options if opts is None else opts


@contextlib.contextmanager
def option_context(config: Dict[str, Any] = None):
    """
    Apply ``config``, a dict of dotted option names to values, on top of
    the current options until the block exits. Changes are local to the
    running thread or task.
    """
    local_options = get_global_options().copy()
    local_options.update(config or dict())
    token = _options_ctx_var.set(local_options)
    try:
        yield local_options
    finally:
        _options_ctx_var.reset(token)


class OptionsProxy:
    def __dir__(self):
        return list(get_global_options().to_dict())

    def __getattribute__(self, attr):
        return getattr(get_global_options(), attr)

    def __setattr__(self, key, value):
        setattr(get_global_options(), key, value)


options = OptionsProxy()
