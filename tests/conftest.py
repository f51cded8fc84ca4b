# SPDX-FileCopyrightText: Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import os
import sys

import pytest

TESTS_DIR = os.path.dirname(__file__)
PROJECT_DIR = os.path.dirname(TESTS_DIR)
SRC_DIR = os.path.join(PROJECT_DIR, "src")
sys.path.append(SRC_DIR)

from _utils.requests import HttpMethod
from _utils.requests import RequestPayload
from _utils.requests import UserPayload


@pytest.fixture(name="user_payload")
def user_payload_fixture() -> UserPayload:
    return UserPayload(name="User Name", age=26, roles=["user", "admin"])


@pytest.fixture(name="request_payloads")
def request_payloads_fixture(user_payload: UserPayload) -> list[RequestPayload]:
    return [
        RequestPayload(method=HttpMethod.POST, host="service.example", path="user", body=user_payload),
        RequestPayload(method=HttpMethod.GET, host="service.example", path="user", params={"id": "3f5h67s4s"}),
    ]
