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

import typing
from collections.abc import Callable
from collections.abc import Mapping

from pydantic import AliasChoices
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class ObserverHandlers(BaseModel):
    """
    The set of callbacks a consumer registers for one subscription. Every callback is optional; a missing callback
    makes the matching event a no-op.

    Both the Python names (`on_next`, `on_error`, `on_complete`) and the short names (`next`, `error`, `complete`)
    are accepted when validating a mapping.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    on_next: Callable[[typing.Any], None] | None = Field(default=None,
                                                         validation_alias=AliasChoices("on_next", "next"),
                                                         description="Called with every emitted value.")
    on_error: Callable[[Exception], None] | None = Field(default=None,
                                                         validation_alias=AliasChoices("on_error", "error"),
                                                         description="Called once with the stream error.")
    on_complete: Callable[[], None] | None = Field(default=None,
                                                   validation_alias=AliasChoices("on_complete", "complete"),
                                                   description="Called once when the stream ends normally.")

    @classmethod
    def coerce(cls, value: "ObserverHandlers | Mapping[str, typing.Any] | None") -> "ObserverHandlers":
        """
        Normalise a handler container into an `ObserverHandlers` instance.

        Raises
        ------
        TypeError
            If `value` is not `None`, a mapping or an `ObserverHandlers`.
        pydantic.ValidationError
            If a mapping holds unknown keys or non-callable values.
        """
        if (value is None):
            return cls()

        if (isinstance(value, cls)):
            return value

        if (isinstance(value, Mapping)):
            return cls.model_validate(dict(value))

        raise TypeError(f"Handlers must be a mapping or ObserverHandlers, not {type(value)}")
