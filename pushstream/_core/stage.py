from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, override

from pushstream._core.observer import Observer


class MappingStage[V, E](ABC):
    __slots__ = ()

    @abstractmethod
    def on_next(self, value: V, downstream: Observer[V, E], /) -> None:
        raise NotImplementedError

    def on_error(self, error: E, downstream: Observer[V, E], /) -> None:
        downstream.error(error)

    def on_complete(self, downstream: Observer[V, E], /) -> None:
        downstream.complete()


@dataclass(repr=False, eq=False, frozen=True, slots=True)
class TransformStage[V, E](MappingStage[V, E]):
    transform: Callable[[V], V]

    @override
    def on_next(self, value: V, downstream: Observer[V, E], /) -> None:
        downstream.next(self.transform(value))


@dataclass(repr=False, eq=False, frozen=True, slots=True)
class FilterStage[V, E](MappingStage[V, E]):
    predicate: Callable[[V], Any]

    @override
    def on_next(self, value: V, downstream: Observer[V, E], /) -> None:
        if self.predicate(value):
            downstream.next(value)


@dataclass(repr=False, eq=False, frozen=True, slots=True)
class StageObserver[V, E](Observer[V, E]):
    stage: MappingStage[V, E]
    downstream: Observer[V, E]

    @override
    def __str__(self) -> str:
        return f"{type(self.stage).__name__} -> {self.downstream}"

    @override
    def next(self, value: V, /) -> None:
        self.stage.on_next(value, self.downstream)

    @override
    def error(self, error: E, /) -> None:
        self.stage.on_error(error, self.downstream)

    @override
    def complete(self) -> None:
        self.stage.on_complete(self.downstream)
