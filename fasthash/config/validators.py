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


from typing import Callable

ValidatorType = Callable[..., bool]


class Validator:
    def __init__(self, func: ValidatorType):
        self._func = func

    def __call__(self, arg) -> bool:
        return self._func(arg)


is_bool = Validator(lambda x: isinstance(x, bool))
is_integer = Validator(lambda x: isinstance(x, int) and not isinstance(x, bool))
is_positive_integer = Validator(lambda x: is_integer(x) and x > 0)


def _is_algorithm_name(name: str) -> bool:
    """
    name of an algorithm present in the registry
    """
    from ..registry import list_algorithms

    return isinstance(name, str) and name in list_algorithms()


is_algorithm_name = Validator(_is_algorithm_name)
