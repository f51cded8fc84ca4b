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

from abc import ABC
from abc import abstractmethod
from typing import Generic
from typing import TypeVar

# Contravariant type param: an Observer that accepts X also accepts any
# subtype of X.
_T_in_contra = TypeVar("_T_in_contra", contravariant=True)  # pylint: disable=invalid-name


class ObserverBase(Generic[_T_in_contra], ABC):
    """
    Abstract receiver of stream events.

    `on_error` and `on_complete` are terminal: once either has been delivered,
    the observer is stopped and ignores every later event.
    """

    @abstractmethod
    def on_next(self, value: _T_in_contra) -> None:
        """
        Called for every value the producer emits. Ignored once stopped.
        """
        pass

    @abstractmethod
    def on_error(self, exc: Exception) -> None:
        """
        Called when the producer signals a stream error. Terminal.
        """
        pass

    @abstractmethod
    def on_complete(self) -> None:
        """
        Called when the producer has no more values. Terminal.
        """
        pass
