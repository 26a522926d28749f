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


class FastHashError(Exception):
    pass


class HashDefinitionError(FastHashError, TypeError):
    """
    Raised when a hash class is declared with an invalid width,
    seed shape or default seed, or under a name already registered.
    """


class SeedError(FastHashError, ValueError):
    """
    Raised when a seed does not match the seed shape of a hash family.
    """


class NativeBoundaryError(FastHashError):
    """
    Raised when a native hash routine cannot be called safely or
    returns something that is not a digest of the declared width.
    """


class UnknownAlgorithmError(FastHashError, KeyError):
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self):
        return f"Unknown hash algorithm {self.name!r}"
