from typing import override

from pushstream import MappingStage, Observer


class AlternatingDoubleStage(MappingStage[int, str]):
    __slots__ = ("__forward", "calls")

    def __init__(self) -> None:
        self.__forward = True
        self.calls = 0

    @override
    def on_next(self, value: int, downstream: Observer[int, str], /) -> None:
        self.calls += 1
        self.__forward = not self.__forward

        if self.__forward:
            downstream.next(2 * value)


class FaultyStage(MappingStage[int, str]):
    __slots__ = ()

    @override
    def on_next(self, value: int, downstream: Observer[int, str], /) -> None:
        raise ValueError(f"Can't handle `{value}`.")
