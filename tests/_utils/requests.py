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

from datetime import datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel
from pydantic import Field


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"


class UserPayload(BaseModel):
    name: str
    age: int
    roles: list[Literal["user", "admin"]] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    is_deleted: bool = False


class RequestPayload(BaseModel):
    method: HttpMethod
    host: str
    path: str
    body: UserPayload | None = None
    params: dict[str, str] = Field(default_factory=dict)
