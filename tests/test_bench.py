import pytest
from typer.testing import CliRunner

from bench import Benchmark, SubscribeBenchmark, cli


class TestBench:
    @pytest.fixture(scope="class")
    def runner(self) -> CliRunner:
        return CliRunner()

    def test_bench_with_success(self, runner):
        result = runner.invoke(cli, ["--number", "2", "--size", "10"])
        assert result.exit_code == 0
        assert "from_ (10 values)" in result.output
        assert "map (10 values)" in result.output

    def test_bench_with_invalid_number(self, runner):
        result = runner.invoke(cli, ["--number", "0"])
        assert result.exit_code != 0

    def test_subscribe_benchmark_cases(self):
        results = tuple(SubscribeBenchmark(size=5).start(number=1))
        assert [result.title for result in results] == [
            "of (5 values)",
            "from_ (5 values)",
            "map (5 values)",
        ]

    def test_benchmark_compare(self):
        benchmark = Benchmark.compare(lambda: None, lambda: None, number=2)
        assert benchmark.x > 0
        assert benchmark.y > 0
