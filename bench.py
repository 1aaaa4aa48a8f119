import itertools
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from decimal import Decimal
from statistics import mean
from timeit import timeit
from typing import Annotated, Any, ClassVar, Self

from tabulate import tabulate
from typer import Option, Typer

from pushstream import MappingStage, Observer, SimpleObserver, from_, of


@dataclass(frozen=True, slots=True)
class Benchmark:
    x: Decimal
    y: Decimal

    @property
    def difference_rate(self) -> Decimal:
        return ((self.y - self.x) / self.x) * 100

    @classmethod
    def compare(
        cls,
        x: Callable[..., Any],
        y: Callable[..., Any],
        number: int = 1,
    ) -> Self:
        x = mean(cls._time_in_ns(x, number))
        y = mean(cls._time_in_ns(y, number))
        return cls(x, y)

    @staticmethod
    def _time_in_ns(callable_: Callable[..., Any], number: int) -> Iterator[Decimal]:
        for _ in range(number):
            delta = timeit(callable_, number=1)
            yield Decimal(delta) * (10**6)


@dataclass(frozen=True, slots=True)
class BenchmarkResult:
    title: str
    benchmark: Benchmark

    @property
    def row(self) -> tuple[str, str, str, str]:
        rate = self.benchmark.difference_rate
        return (
            self.title,
            f"{self.benchmark.x:.2f}μs",
            f"{self.benchmark.y:.2f}μs",
            f"{rate:.2f}% slower" if rate >= 0 else f"{abs(rate):.2f}% faster",
        )


@dataclass(frozen=True, slots=True)
class SubscribeBenchmark:
    size: int = 100

    cases: ClassVar[dict[str, tuple[Callable[..., Any], Callable[..., Any]]]] = {}

    def start(self, number: int = 1) -> Iterator[BenchmarkResult]:
        data = tuple(range(self.size))
        observer = SimpleObserver()

        for title, (reference, subscriber) in self.cases.items():
            benchmark = Benchmark.compare(
                lambda: reference(data, observer),
                lambda: subscriber(data, observer),
                number,
            )
            yield BenchmarkResult(f"{title} ({self.size} values)", benchmark)

    @classmethod
    def register(cls, *, title: str, reference: Callable[..., Any]):
        def decorator(wp):
            cls.cases[title] = (reference, wp)
            return wp

        return decorator


class Double(MappingStage[int, str]):
    __slots__ = ()

    def on_next(self, value: int, downstream: Observer[int, str], /) -> None:
        downstream.next(value * 2)


def loop_single(data: tuple[int, ...], observer: Observer[int, str]):
    for _ in data:
        observer.next(0)
        observer.complete()


def loop_sequence(data: tuple[int, ...], observer: Observer[int, str]):
    for value in data:
        observer.next(value)

    observer.complete()


def loop_mapped(data: tuple[int, ...], observer: Observer[int, str]):
    for value in data:
        observer.next(value * 2)

    observer.complete()


@SubscribeBenchmark.register(title="of", reference=loop_single)
def subscribe_single(data: tuple[int, ...], observer: Observer[int, str]):
    for _ in data:
        of(0).subscribe(observer)


@SubscribeBenchmark.register(title="from_", reference=loop_sequence)
def subscribe_sequence(data: tuple[int, ...], observer: Observer[int, str]):
    from_(data).subscribe(observer)


@SubscribeBenchmark.register(title="map", reference=loop_mapped)
def subscribe_mapped(data: tuple[int, ...], observer: Observer[int, str]):
    from_(data).map(Double()).subscribe(observer)


cli = Typer()


@cli.command()
def main(
    number: Annotated[int, Option("--number", "-n", min=1)] = 1000,
    size: Annotated[int, Option("--size", "-s", min=1)] = 100,
):
    results = SubscribeBenchmark(size).start(number)
    headers = ("", "Reference Time (μs)", "subscribe Time (μs)", "Difference Rate (%)")
    data = (result.row for result in itertools.chain(results))
    table = tabulate(data, headers=headers)
    print(table)


if __name__ == "__main__":
    cli()
