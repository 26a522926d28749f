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


import faulthandler

import pytest

from .config import option_context

faulthandler.enable(all_threads=True)


@pytest.fixture
def buffered_hashers():
    with option_context({"hasher.native_state": False}) as opts:
        yield opts


@pytest.fixture
def native_hashers():
    with option_context({"hasher.native_state": True}) as opts:
        yield opts


@pytest.fixture(scope="session")
def sample_payloads():
    # lengths chosen around the block sizes of the families
    sizes = [0, 1, 3, 4, 7, 8, 12, 13, 16, 24, 31, 32, 64, 95, 96, 191, 192, 300, 1025]
    return [bytes((i * 31 + size) & 0xFF for i in range(size)) for size in sizes]
