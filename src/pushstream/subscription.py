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

from pushstream.base.subscription_base import SubscriptionBase

if typing.TYPE_CHECKING:
    from pushstream.observer import Observer


class Subscription(SubscriptionBase):
    """
    Represents one run of an Observable.
    Unsubscribing stops the observer and releases the producer's resources.
    """

    def __init__(self, observer: "Observer"):  # noqa: F821
        self._observer = observer

    @property
    def closed(self) -> bool:
        return self._observer.is_stopped

    def unsubscribe(self) -> None:
        """
        Stop receiving further events. Calling this more than once, or after the stream has ended, does nothing.
        """
        self._observer.unsubscribe()
