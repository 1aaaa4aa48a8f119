from __future__ import annotations

from abc import ABC
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from enum import StrEnum
from logging import Logger, getLogger
from typing import Any, ClassVar, Self, override
from uuid import uuid4

from pushstream._core.common.event import Event, EventChannel, EventListener
from pushstream._core.observer import Observer, Subscription
from pushstream._core.stage import MappingStage, StageObserver, TransformStage
from pushstream.exceptions import StreamContractError

"""
Events
"""


@dataclass(frozen=True, slots=True)
class ObservableEvent(Event, ABC):
    observable: Observable[Any, Any]


@dataclass(frozen=True, slots=True)
class ObservableSubscribed(ObservableEvent):
    observer: Observer[Any, Any]

    @override
    def __str__(self) -> str:
        return (
            f"`{self.observer}` has subscribed to "
            f"`{self.observable}` ({self.observable.mode} mode)."
        )


@dataclass(frozen=True, slots=True)
class SubscriptionIgnored(ObservableEvent):
    observer: Observer[Any, Any]

    @override
    def __str__(self) -> str:
        state = "disposed" if self.observable.is_disposed else "completed"
        return (
            f"`{self.observable}` is already {state}, "
            f"`{self.observer}` won't be notified."
        )


@dataclass(frozen=True, slots=True)
class ObservableCompleted(ObservableEvent):
    @override
    def __str__(self) -> str:
        return f"`{self.observable}` has completed."


@dataclass(frozen=True, slots=True)
class ObservableDisposed(ObservableEvent):
    @override
    def __str__(self) -> str:
        return f"`{self.observable}` has been disposed."


"""
Emissions
"""


class Mode(StrEnum):
    SINGLE = "single"
    SEQUENCE = "sequence"
    ERROR_ONLY = "error_only"
    MAPPED = "mapped"


@dataclass(repr=False, frozen=True, slots=True)
class Single[V]:
    value: V

    mode: ClassVar[Mode] = Mode.SINGLE


@dataclass(repr=False, frozen=True, slots=True)
class Series[V]:
    values: tuple[V, ...]

    mode: ClassVar[Mode] = Mode.SEQUENCE


@dataclass(repr=False, frozen=True, slots=True)
class Failure[E]:
    error: E

    mode: ClassVar[Mode] = Mode.ERROR_ONLY


@dataclass(repr=False, frozen=True, slots=True)
class Mapped[V, E]:
    upstream: Observable[V, E]
    stage: MappingStage[V, E]

    mode: ClassVar[Mode] = Mode.MAPPED

    def __post_init__(self) -> None:
        if not isinstance(self.upstream, Observable):
            raise StreamContractError(
                f"`{self.upstream!r}` isn't an observable and can't be mapped."
            )

        if not isinstance(self.stage, MappingStage):
            raise StreamContractError(f"`{self.stage!r}` isn't a mapping stage.")


type Emission[V, E] = Single[V] | Series[V] | Failure[E] | Mapped[V, E]

"""
Observable
"""


class Observable[V, E]:
    __slots__ = (
        "__channel",
        "__completed",
        "__emission",
        "__loggers",
        "__mode",
        "__name",
    )

    __channel: EventChannel
    __completed: bool
    __emission: Emission[V, E] | None
    __loggers: list[Logger]
    __mode: Mode
    __name: str

    def __init__(self, emission: Emission[V, E], /, name: str | None = None) -> None:
        self.__channel = EventChannel()
        self.__completed = False
        self.__emission = emission
        self.__loggers = [getLogger("pushstream")]
        self.__mode = emission.mode
        self.__name = name or f"anonymous@{uuid4().hex[:7]}"

    @override
    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.__name!r} mode={self.__mode}>"

    @override
    def __str__(self) -> str:
        return self.__name

    @property
    def name(self) -> str:
        return self.__name

    @property
    def mode(self) -> Mode:
        return self.__mode

    @property
    def is_completed(self) -> bool:
        return self.__completed

    @property
    def is_disposed(self) -> bool:
        return self.__emission is None

    @classmethod
    def of(cls, value: V, /, *, name: str | None = None) -> Observable[V, E]:
        return cls(Single(value), name=name)

    @classmethod
    def from_(
        cls,
        values: Iterable[V],
        /,
        *,
        name: str | None = None,
    ) -> Observable[V, E]:
        if not isinstance(values, Iterable):
            raise StreamContractError(f"`{values!r}` isn't iterable.")

        return cls(Series(tuple(values)), name=name)

    @classmethod
    def throw_error(cls, error: E, /, *, name: str | None = None) -> Observable[V, E]:
        return cls(Failure(error), name=name)

    def map(
        self,
        stage: MappingStage[V, E] | Callable[[V], V],
        /,
        *,
        name: str | None = None,
    ) -> Observable[V, E]:
        if not isinstance(stage, MappingStage):
            if not callable(stage):
                raise StreamContractError(
                    f"`{stage!r}` should be a mapping stage or a callable."
                )

            stage = TransformStage(stage)

        return type(self)(Mapped(self, stage), name=name)

    def subscribe(self, observer: Observer[V, E], /) -> Subscription:
        if not isinstance(observer, Observer):
            raise StreamContractError(f"`{observer!r}` isn't an observer.")

        subscription = ObservableSubscription(self)

        if self.__completed or self.is_disposed:
            with self.dispatch(SubscriptionIgnored(self, observer)):
                return subscription

        with self.dispatch(ObservableSubscribed(self, observer)):
            self.__emit(observer)

        return subscription

    def dispose(self) -> Self:
        if self.is_disposed:
            return self

        with self.dispatch(ObservableDisposed(self)):
            self.__emission = None

        return self

    def add_listener(self, listener: EventListener) -> Self:
        self.__channel.add_listener(listener)
        return self

    def remove_listener(self, listener: EventListener) -> Self:
        self.__channel.remove_listener(listener)
        return self

    def add_logger(self, logger: Logger) -> Self:
        self.__loggers.append(logger)
        return self

    @contextmanager
    def dispatch(self, event: Event) -> Iterator[None]:
        with self.__channel.dispatch(event):
            yield
            self.__debug(event)

    def __emit(self, observer: Observer[V, E]) -> None:
        match self.__emission:
            case Single(value):
                observer.next(value)
                observer.complete()

            case Series(values):
                for value in values:
                    observer.next(value)

                observer.complete()

            case Failure(error):
                observer.error(error)
                observer.complete()

            case Mapped(upstream, stage):
                upstream.subscribe(StageObserver(stage, observer))

                if not upstream.is_completed:
                    return

        self.__complete()

    def __complete(self) -> None:
        with self.dispatch(ObservableCompleted(self)):
            self.__completed = True

    def __debug(self, message: object) -> None:
        for logger in tuple(self.__loggers):
            logger.debug(message)


@dataclass(repr=False, eq=False, frozen=True, slots=True)
class ObservableSubscription(Subscription):
    observable: Observable[Any, Any]

    @override
    def __str__(self) -> str:
        return f"subscription to `{self.observable}`"

    @property
    @override
    def closed(self) -> bool:
        return self.observable.is_disposed

    @override
    def unsubscribe(self) -> None:
        self.observable.dispose()
