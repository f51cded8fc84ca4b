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

import asyncio
import logging
from collections.abc import AsyncIterable
from collections.abc import Callable
from collections.abc import Iterable
from collections.abc import Mapping
from typing import TypeVar

from pushstream.base.observable_base import ObservableBase
from pushstream.base.observer_base import ObserverBase
from pushstream.handlers import ObserverHandlers
from pushstream.observer import Observer
from pushstream.subscription import Subscription
from pushstream.utils.type_utils import Teardown
from pushstream.utils.type_utils import override

logger = logging.getLogger(__name__)

# Covariant type param: An Observable producing type X can also produce
# a subtype of X.
_T_out_co = TypeVar("_T_out_co", covariant=True)  # pylint: disable=invalid-name
_T = TypeVar("_T")  # pylint: disable=invalid-name

OnNext = Callable[[_T], None]
OnError = Callable[[Exception], None]
OnComplete = Callable[[], None]

Producer = Callable[[Observer], Teardown | None]


class Observable(ObservableBase[_T_out_co]):
    """
    A lazy, re-runnable description of a value-producing process.

    The producer is called once per subscription with a fresh `Observer` and may return a teardown action. Nothing
    runs until `subscribe` is called, and separate subscriptions never share an observer or a producer run.
    """

    __slots__ = ("_producer", )

    def __init__(self, producer: Producer) -> None:
        if (not callable(producer)):
            raise TypeError(f"Producer must be callable, not {type(producer)}")
        self._producer = producer

    def _subscribe_core(self, observer: Observer) -> Subscription:
        try:
            teardown = self._producer(observer)
        except BaseException:
            # Stop any delivery the producer may have scheduled before failing
            observer.unsubscribe()
            raise

        if (teardown is not None and not callable(teardown)):
            observer.unsubscribe()
            raise TypeError(f"Producer must return a callable teardown or None, not {type(teardown)}")

        observer.attach_teardown(teardown)

        return Subscription(observer)

    @override
    def subscribe(self,
                  on_next: ObserverBase[_T_out_co] | ObserverHandlers | Mapping | OnNext[_T_out_co] | None = None,
                  on_error: OnError | None = None,
                  on_complete: OnComplete | None = None) -> Subscription:

        if (isinstance(on_next, (ObserverBase, ObserverHandlers, Mapping))):
            if (on_error is not None or on_complete is not None):
                raise TypeError("on_error and on_complete cannot be combined with an observer or a handler set")

            if (isinstance(on_next, ObserverBase)):
                observer = self._wrap_observer(on_next)
            else:
                observer = Observer.from_handlers(ObserverHandlers.coerce(on_next))
        else:
            observer = Observer(on_next, on_error, on_complete)

        logger.debug("Subscribing to observable %s", id(self))

        return self._subscribe_core(observer)

    @staticmethod
    def _wrap_observer(inner: ObserverBase) -> Observer:
        """
        Wrap `inner` in a fresh `Observer` so that each subscription owns its own termination state and teardown.

        When `inner` tracks its own stop state (`is_stopped`), the wrapper stops as soon as `inner` does, for
        example after `inner` routes a failing `on_next` callback to its own `on_error`.
        """

        def _inner_stopped() -> bool:
            return bool(getattr(inner, "is_stopped", False))

        def _forward_next(value) -> None:
            if (not _inner_stopped()):
                inner.on_next(value)
            if (_inner_stopped()):
                outer.unsubscribe()

        outer = Observer(_forward_next, inner.on_error, inner.on_complete)

        if (_inner_stopped()):
            outer.unsubscribe()

        return outer

    @classmethod
    def from_iterable(cls, values: Iterable[_T], on_teardown: Teardown | None = None) -> "Observable[_T]":
        """
        Create an Observable that emits each of `values` in order and then completes.

        `values` is materialised when this method is called, so every subscription sees the same items.

        Parameters
        ----------
        values : Iterable[_T]
            The finite sequence of values to emit.
        on_teardown : Teardown | None
            Hook invoked once when a subscription ends. Defaults to a DEBUG log message.

        Returns
        -------
        Observable[_T]
            A synchronous, cold observable over `values`.
        """
        items = tuple(values)

        def _teardown() -> None:
            if (on_teardown is not None):
                on_teardown()
            else:
                logger.debug("Unsubscribed from iterable of %d item(s)", len(items))

        def _produce(observer: Observer) -> Teardown:
            for item in items:
                if (observer.is_stopped):
                    break
                observer.on_next(item)

            observer.on_complete()

            return _teardown

        return cls(_produce)

    from_ = from_iterable

    @classmethod
    def from_async_iterable(cls,
                            source_factory: Callable[[], AsyncIterable[_T]],
                            on_teardown: Teardown | None = None) -> "Observable[_T]":
        """
        Create an Observable that drains a fresh async iterable in a task on the running event loop.

        `source_factory` is called once per subscription, inside the task, so every subscriber gets its own iterator.
        Items are forwarded to `on_next`, an exception raised by the iterable or by `source_factory` is forwarded to
        `on_error`, and exhaustion triggers `on_complete`. Unsubscribing before the source is exhausted cancels the
        task. Must be subscribed from within a running event loop.
        """
        if (not callable(source_factory)):
            raise TypeError(f"source_factory must be callable, not {type(source_factory)}")

        def _produce(observer: Observer) -> Teardown:

            async def _drain() -> None:
                try:
                    async for item in source_factory():
                        if (observer.is_stopped):
                            return
                        observer.on_next(item)
                except Exception as exc:
                    observer.on_error(exc)
                    return

                observer.on_complete()

            task = asyncio.get_running_loop().create_task(_drain())

            def _teardown() -> None:
                try:
                    current = asyncio.current_task()
                except RuntimeError:
                    current = None

                # A task reaching its own terminal event is already finishing
                if (task is not current and not task.done()):
                    task.cancel()

                if (on_teardown is not None):
                    on_teardown()
                else:
                    logger.debug("Unsubscribed from async iterable source %s", id(source_factory))

            return _teardown

        return cls(_produce)
