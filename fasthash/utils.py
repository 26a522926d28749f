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
from typing import Any, List

import numpy as np

from .errors import NativeBoundaryError


class NoDefault(enum.Enum):
    no_default = "NO_DEFAULT"

    def __repr__(self) -> str:
        return "<no_default>"


no_default = NoDefault.no_default


class classproperty:
    def __init__(self, f):
        self.f = f

    def __get__(self, obj, owner):
        return self.f(owner)


def to_buffer(data: Any) -> memoryview:
    """
    Borrow a read-only, one-dimensional byte view of ``data``.

    ``str`` is hashed as its UTF-8 encoding. Any other object must expose a
    C-contiguous buffer, e.g. ``bytes``, ``bytearray``, ``memoryview`` or a
    numpy array. The view is the only way bytes reach native routines, so
    pointer and length always come from an object owned by the caller.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    try:
        view = memoryview(data)
    except TypeError:
        raise TypeError(
            f"a bytes-like object or str is required, not '{type(data).__name__}'"
        ) from None
    if not view.c_contiguous:
        raise NativeBoundaryError("Cannot hash a non-contiguous buffer")
    if view.ndim != 1 or view.format != "B":
        view = view.cast("B")
    return view.toreadonly()


def unpack_words(view: memoryview, count: int, width: int = 32) -> List[int]:
    """
    Decode ``count`` little-endian unsigned words of ``width`` bits from
    the start of ``view``.
    """
    if count <= 0:
        return []
    dtype = "<u4" if width == 32 else "<u8"
    return np.frombuffer(view, dtype=dtype, count=count).tolist()


def unpack_tail(view: memoryview, start: int) -> int:
    """
    Read the bytes of ``view`` from ``start`` on as one little-endian integer.
    """
    return int.from_bytes(view[start:], "little")
