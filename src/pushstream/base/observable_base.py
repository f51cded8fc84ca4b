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
from abc import ABC
from abc import abstractmethod
from collections.abc import Callable
from collections.abc import Mapping
from typing import Generic
from typing import TypeVar

from pushstream.base.observer_base import ObserverBase
from pushstream.base.subscription_base import SubscriptionBase

if typing.TYPE_CHECKING:
    from pushstream.handlers import ObserverHandlers

# Covariant type param: an Observable producing X may also produce
# a subtype of X.
_T_out_co = TypeVar("_T_out_co", covariant=True)  # pylint: disable=invalid-name
_T = TypeVar("_T")  # pylint: disable=invalid-name

OnNext = Callable[[_T], None]
OnError = Callable[[Exception], None]
OnComplete = Callable[[], None]


class ObservableBase(Generic[_T_out_co], ABC):
    """
    Abstract base class for an Observable that can be subscribed to.
    Produces items of type _T_out_co for its subscribers.
    """

    @typing.overload
    def subscribe(self, on_next: ObserverBase[_T_out_co]) -> SubscriptionBase:
        ...

    @typing.overload
    def subscribe(self, on_next: "ObserverHandlers | Mapping[str, typing.Any]") -> SubscriptionBase:
        ...

    @typing.overload
    def subscribe(self,
                  on_next: OnNext[_T_out_co] | None = None,
                  on_error: OnError | None = None,
                  on_complete: OnComplete | None = None) -> SubscriptionBase:
        ...

    @abstractmethod
    def subscribe(self,
                  on_next=None,
                  on_error: OnError | None = None,
                  on_complete: OnComplete | None = None) -> SubscriptionBase:
        """
        Subscribes an Observer, a handler bag or bare callbacks to this Observable.

        Every form is wrapped into a fresh Observer, including Observers passed
        in directly, so each subscription owns its own termination state and
        teardown. A wrapped Observer that stops itself stops the subscription.
        """
        pass
