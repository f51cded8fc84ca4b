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

import logging
import threading
from collections.abc import Callable
from typing import TypeVar

from pushstream.base.observer_base import ObserverBase
from pushstream.handlers import ObserverHandlers
from pushstream.utils.type_utils import Teardown

logger = logging.getLogger(__name__)

# Contravariant type param: An Observer that can accept type X can also
# accept any supertype of X.
_T_in_contra = TypeVar("_T_in_contra", contravariant=True)  # pylint: disable=invalid-name
_T = TypeVar("_T")  # pylint: disable=invalid-name

OnNext = Callable[[_T], None]
OnError = Callable[[Exception], None]
OnComplete = Callable[[], None]


class Observer(ObserverBase[_T_in_contra]):
    """
    Concrete Observer that wraps user-provided callbacks and tracks termination for a single subscription.

    The observer moves from active to stopped exactly once, on whichever comes first of `on_error`, `on_complete`
    or `unsubscribe`. After that no callback is invoked again. The producer's teardown action, attached with
    `attach_teardown`, runs at most once regardless of which path stopped the observer.
    """

    def __init__(
        self,
        on_next: OnNext | None = None,
        on_error: OnError | None = None,
        on_complete: OnComplete | None = None,
    ) -> None:
        self._handlers = ObserverHandlers(on_next=on_next, on_error=on_error, on_complete=on_complete)
        self._lock = threading.Lock()
        self._stopped = False
        self._teardown: Teardown | None = None
        self._teardown_attached = False

    @classmethod
    def from_handlers(cls, handlers: ObserverHandlers) -> "Observer":
        return cls(handlers.on_next, handlers.on_error, handlers.on_complete)

    @property
    def is_stopped(self) -> bool:
        return self._stopped

    def on_next(self, value: _T) -> None:
        if self._stopped:
            return
        if self._handlers.on_next is None:
            return
        try:
            self._handlers.on_next(value)
        except Exception as exc:
            # If the callback itself raises, treat that as an error
            self.on_error(exc)

    def on_error(self, exc: Exception) -> None:
        if not self._claim_stop():
            return
        if self._handlers.on_error:
            try:
                self._handlers.on_error(exc)
            except Exception as e:
                logger.exception("Error in on_error callback: %s", e)
        self.unsubscribe()

    def on_complete(self) -> None:
        if not self._claim_stop():
            return
        if self._handlers.on_complete:
            try:
                self._handlers.on_complete()
            except Exception as e:
                logger.exception("Error in on_complete callback: %s", e)
        self.unsubscribe()

    def unsubscribe(self) -> None:
        """
        Stop the observer and run the teardown action if one is attached and has not run yet.
        """
        with self._lock:
            self._stopped = True
            teardown, self._teardown = self._teardown, None

        if teardown is not None:
            self._run_teardown(teardown)

    def attach_teardown(self, teardown: Teardown | None) -> None:
        """
        Store the producer's teardown action. When the observer has already stopped (the producer terminated
        synchronously, or the consumer unsubscribed from inside a callback), the action runs immediately.

        Raises
        ------
        TypeError
            If `teardown` is neither `None` nor callable.
        RuntimeError
            If a teardown action was already attached.
        """
        if (teardown is not None and not callable(teardown)):
            raise TypeError(f"Teardown must be callable or None, not {type(teardown)}")

        with self._lock:
            if (self._teardown_attached):
                raise RuntimeError("A teardown action is already attached to this observer")
            self._teardown_attached = True

            if (teardown is None):
                return

            if (not self._stopped):
                self._teardown = teardown
                return

        self._run_teardown(teardown)

    def _claim_stop(self) -> bool:
        # True only for the single caller that moves the observer from active to stopped
        with self._lock:
            if self._stopped:
                return False
            self._stopped = True
            return True

    @staticmethod
    def _run_teardown(teardown: Teardown) -> None:
        try:
            teardown()
        except Exception as e:
            logger.exception("Error in teardown action: %s", e)
