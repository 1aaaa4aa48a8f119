from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, NamedTuple, Self, override

from pushstream import Observer

__all__ = ("Notification", "NotificationKind", "RecordingObserver")


class NotificationKind(StrEnum):
    NEXT = "next"
    ERROR = "error"
    COMPLETE = "complete"


class Notification(NamedTuple):
    kind: NotificationKind
    value: Any = None

    @classmethod
    def next(cls, value: Any) -> Self:
        return cls(NotificationKind.NEXT, value)

    @classmethod
    def error(cls, error: Any) -> Self:
        return cls(NotificationKind.ERROR, error)

    @classmethod
    def complete(cls) -> Self:
        return cls(NotificationKind.COMPLETE)


@dataclass(repr=False, eq=False, frozen=True, slots=True)
class RecordingObserver[V, E](Observer[V, E]):
    name: str = "recorder"
    __history: list[Notification] = field(default_factory=list, init=False)

    @override
    def __str__(self) -> str:
        return self.name

    def __iter__(self) -> Iterator[Notification]:
        yield from self.__history

    def __len__(self) -> int:
        return len(self.__history)

    @property
    def values(self) -> list[V]:
        return self.__filter(NotificationKind.NEXT)

    @property
    def errors(self) -> list[E]:
        return self.__filter(NotificationKind.ERROR)

    @property
    def completions(self) -> int:
        return len(self.__filter(NotificationKind.COMPLETE))

    def assert_length(self, length: int):
        assert len(self) == length

    def clear(self) -> Self:
        self.__history.clear()
        return self

    @override
    def next(self, value: V, /) -> None:
        self.__history.append(Notification.next(value))

    @override
    def error(self, error: E, /) -> None:
        self.__history.append(Notification.error(error))

    @override
    def complete(self) -> None:
        self.__history.append(Notification.complete())

    def __filter(self, kind: NotificationKind) -> list[Any]:
        return [
            notification.value
            for notification in self.__history
            if notification.kind == kind
        ]
