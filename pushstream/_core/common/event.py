from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import ExitStack, contextmanager, suppress
from typing import ContextManager, Self
from weakref import WeakSet


class Event(ABC):
    __slots__ = ()


class EventListener(ABC):
    __slots__ = ("__weakref__",)

    @abstractmethod
    def on_event(self, event: Event, /) -> ContextManager[None] | None:
        raise NotImplementedError


class EventChannel:
    __slots__ = ("__listeners",)

    __listeners: WeakSet[EventListener]

    def __init__(self) -> None:
        self.__listeners = WeakSet()

    def __contains__(self, listener: object, /) -> bool:
        return listener in self.__listeners

    def __len__(self) -> int:
        return len(self.__listeners)

    @contextmanager
    def dispatch(self, event: Event) -> Iterator[None]:
        listeners = tuple(self.__listeners)

        if not listeners:
            yield
            return

        with ExitStack() as stack:
            for listener in listeners:
                context_manager = listener.on_event(event)

                if context_manager is not None:
                    stack.enter_context(context_manager)

            yield

    def add_listener(self, listener: EventListener) -> Self:
        self.__listeners.add(listener)
        return self

    def remove_listener(self, listener: EventListener) -> Self:
        with suppress(KeyError):
            self.__listeners.remove(listener)

        return self
