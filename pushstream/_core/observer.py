from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, override


class Observer[V, E](ABC):
    __slots__ = ()

    @abstractmethod
    def next(self, value: V, /) -> None:
        raise NotImplementedError

    @abstractmethod
    def error(self, error: E, /) -> None:
        raise NotImplementedError

    @abstractmethod
    def complete(self) -> None:
        raise NotImplementedError


def _ignore(*_: Any) -> None:
    return


@dataclass(repr=False, eq=False, frozen=True, slots=True)
class SimpleObserver[V, E](Observer[V, E]):
    on_next: Callable[[V], Any] = _ignore
    on_error: Callable[[E], Any] = _ignore
    on_complete: Callable[[], Any] = _ignore

    @override
    def next(self, value: V, /) -> None:
        self.on_next(value)

    @override
    def error(self, error: E, /) -> None:
        self.on_error(error)

    @override
    def complete(self) -> None:
        self.on_complete()


class Subscription(ABC):
    __slots__ = ()

    @property
    @abstractmethod
    def closed(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def unsubscribe(self) -> None:
        raise NotImplementedError
