"""Compare `partition` against a copy-per-step split to show it stays linear."""

import timeit
from collections.abc import Callable, Iterable
from typing import Annotated, Final, NamedTuple

import typer
from rich.console import Console
from rich.table import Table

import grouptools as gt

type Splitter = Callable[[Iterable[int], Callable[[int], bool]], object]

CONSOLE: Final = Console()

app = typer.Typer(help="Benchmarks for grouptools.partition.")


class Timing(NamedTuple):
    """Best time of one splitter at one input size."""

    size: int
    fast: float
    naive: float

    @property
    def ratio(self) -> float:
        return self.naive / self.fast


def _copy_per_step(
    items: Iterable[int], predicate: Callable[[int], bool]
) -> tuple[list[int], list[int]]:
    passed: list[int] = []
    failed: list[int] = []
    for item in items:
        if predicate(item):
            passed = [*passed, item]
        else:
            failed = [*failed, item]
    return passed, failed


def _is_even(x: int) -> bool:
    return x % 2 == 0


def _time(func: Splitter, size: int, runs: int) -> float:
    data = list(range(size))
    return min(timeit.repeat(lambda: func(data, _is_even), number=1, repeat=runs))


def _to_table(timings: gt.Seq[Timing]) -> Table:
    table = Table(title="partition vs copy-per-step")
    table.add_column("size", justify="right", style="cyan")
    table.add_column("partition (ms)", justify="right", style="green")
    table.add_column("copy-per-step (ms)", justify="right", style="red")
    table.add_column("ratio", justify="right", style="magenta")
    for t in timings:
        table.add_row(
            str(t.size), f"{t.fast * 1e3:.3f}", f"{t.naive * 1e3:.3f}", f"{t.ratio:.1f}x"
        )
    return table


@app.command()
def run(
    *,
    min_exp: Annotated[int, typer.Option(help="Smallest size, as a power of 2.")] = 8,
    max_exp: Annotated[int, typer.Option(help="Largest size, as a power of 2.")] = 13,
    runs: Annotated[int, typer.Option(help="Repeats per measurement.")] = 5,
) -> None:
    """Time both splitters at doubling input sizes and print a table."""
    sizes = gt.Seq(2**exp for exp in range(min_exp, max_exp + 1))
    CONSOLE.print(f"Running {sizes.length()} sizes, {runs} runs each...", style="bold blue")
    timings = gt.Seq(
        Timing(size, _time(gt.partition, size, runs), _time(_copy_per_step, size, runs))
        for size in sizes
    )
    CONSOLE.print(_to_table(timings))


if __name__ == "__main__":
    app()
