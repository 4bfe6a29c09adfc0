"""Benchmarks of seqchain pipelines against their builtin equivalents."""

import itertools
import operator
import timeit
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial
from typing import Any, Final, NamedTuple

import polars as pl
import typer
from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeRemainingColumn,
)
from rich.table import Table
from rich.text import Text

import seqchain as sc

type BenchFn = Callable[[], object]


@dataclass(slots=True)
class _BaseRow:
    category: str
    name: str


@dataclass(slots=True)
class Row(_BaseRow):
    """Raw timing of one run."""

    impl: str
    size: int
    time: float


@dataclass(slots=True)
class TableRow(_BaseRow):
    """Formatted row of aggregated timings."""

    size: str
    runs: str
    chain_med: str
    builtin_med: str
    overhead_str: str
    style: str

    def add_to_table(self, table: Table) -> None:
        """Add this row to a Rich table."""
        return table.add_row(
            self.category,
            self.name,
            self.size,
            self.runs,
            self.chain_med,
            self.builtin_med,
            Text(self.overhead_str, style=self.style),
        )


class Variant(NamedTuple):
    """A specific benchmark variant size."""

    size: int
    n_runs: int
    builtin_fn: BenchFn
    chain_fn: BenchFn


class Benchmark(NamedTuple):
    """A benchmark with multiple data sizes."""

    category: str
    name: str
    variants: sc.Vec[Variant]


SIZES: Final = (256, 1024, 4096)
WARMUP_RUNS: Final = 5
CALLS_BY_RUN: Final = 10
MIN_RUNS: Final = 20

app = typer.Typer(help="Benchmarks of seqchain pipelines against builtin equivalents.")

CONSOLE: Final = Console()

BENCHMARKS = sc.Vec[Benchmark]([])


def bench[P](
    category: str,
    *,
    builtin: Callable[[P], Any],
    data_gen: Callable[[range], P] = list,
) -> Callable[[Callable[[P], Any]], Callable[[P], Any]]:
    """Register the decorated seqchain pipeline against its **builtin** counterpart."""

    def decorator(func: Callable[[P], Any]) -> Callable[[P], Any]:
        variants = sc.Vec[Variant]([])
        for size in SIZES:
            data = data_gen(range(size))
            assert func(data) == builtin(data), (
                f"{func.__name__}: both implementations must agree for size {size}"
            )
            variants.append(Variant(size, 0, partial(builtin, data), partial(func, data)))
        BENCHMARKS.append(Benchmark(category, func.__name__, variants))
        return func

    return decorator


def _is_odd(x: int) -> bool:
    return x % 2 == 1


@bench("maps", builtin=lambda d: [x * 2 for x in d if x % 2 == 1])
def filter_map_chain(data: list[int]) -> list[int]:
    return sc.Iter(data).filter(_is_odd).map(lambda x: x * 2).collect().inner()


@bench(
    "maps",
    builtin=lambda d: [x * 2 for x in d if x % 2 == 1],
)
def filter_map_fused(data: list[int]) -> list[int]:
    return (
        sc.Iter(data)
        .filter_map(lambda x: sc.Some(x * 2) if x % 2 == 1 else sc.NONE)
        .collect()
        .inner()
    )


@bench("windows", builtin=lambda d: list(itertools.batched(d, 8)))
def partition(data: list[int]) -> list[tuple[int, ...]]:
    return sc.Iter(data).partition(8).collect().inner()


@bench(
    "windows",
    builtin=lambda d: [k for k, _ in itertools.groupby(d)],
    data_gen=lambda r: [x // 3 for x in r],
)
def dedupe(data: list[int]) -> list[int]:
    return sc.Iter(data).dedupe().collect().inner()


@bench("consumers", builtin=lambda d: list(itertools.accumulate(d)))
def reductions(data: list[int]) -> list[int]:
    return sc.Iter(data).reductions(operator.add, 0).collect().inner()


@bench("consumers", builtin=max)
def maximum(data: list[int]) -> int:
    return sc.Iter(data).max().unwrap()


@bench("pairs", builtin=lambda d: list(map(operator.add, d, reversed(d))))
def zip_with_reversed(data: list[int]) -> list[int]:
    return (
        sc.Iter.from_indexed(data)
        .zip_with(operator.add, sc.Iter.from_indexed_reversed(data))
        .collect()
        .inner()
    )


def _estimate_n_runs(fn: BenchFn, target_sec: float) -> int:
    warmup_time = timeit.timeit(fn, number=WARMUP_RUNS) / WARMUP_RUNS
    est = int(target_sec / 2 / warmup_time / CALLS_BY_RUN)
    return max(MIN_RUNS, est)


def _with_runs(variant: Variant, target_sec: float) -> Variant:
    n_runs = max(
        _estimate_n_runs(variant.builtin_fn, target_sec),
        _estimate_n_runs(variant.chain_fn, target_sec),
    )
    return variant._replace(n_runs=n_runs)


def _collect_raw_timings(
    benchmarks: sc.Vec[Benchmark], target_sec: float
) -> sc.Vec[Row]:
    """Collect raw timing data for all benchmarks. Stats computed at the end."""
    planned = (
        sc.Iter(benchmarks)
        .map(
            lambda b: b._replace(
                variants=sc.Iter(b.variants)
                .map(lambda v: _with_runs(v, target_sec))
                .collect()
            )
        )
        .collect()
    )
    total_runs = (
        sc.Iter(planned)
        .map(lambda b: sc.Iter(b.variants).map(lambda v: v.n_runs).sum())
        .sum()
        * 2
    )
    CONSOLE.print(f"[dim]Found {len(planned)} benchmarks, {total_runs} total runs[/dim]")

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeRemainingColumn(),
        console=CONSOLE,
    ) as progress:
        task = progress.add_task("[cyan]Running benchmarks...", total=total_runs)
        rows = sc.Vec[Row]([])
        for b in planned:
            for variant in b.variants:
                _run_variant(progress, task, variant, b).extend(rows)
        return rows


def _run_variant(
    progress: Progress,
    task: Any,  # noqa: ANN401
    variant: Variant,
    bench: Benchmark,
) -> sc.Iter[Row]:
    def _timed(impl: str, fn: BenchFn) -> Row:
        progress.update(
            task,
            description=f"[cyan]{bench.category}: {bench.name} @ {variant.size} ({impl})",
        )
        time_taken = timeit.timeit(fn, number=CALLS_BY_RUN)
        progress.advance(task)
        return Row(bench.category, bench.name, impl, variant.size, time_taken)

    runs = range(variant.n_runs)
    chain_rows = sc.Iter(runs).map(lambda _: _timed("seqchain", variant.chain_fn))
    builtin_rows = sc.Iter(runs).map(lambda _: _timed("builtin", variant.builtin_fn))
    return sc.Iter(itertools.chain(chain_rows, builtin_rows))


def _compute_all_stats(rows: sc.Vec[Row]) -> pl.LazyFrame:
    """Median timings per variant, seqchain joined against builtin."""
    group = ["category", "name", "size"]
    return (
        pl.LazyFrame(
            rows.inner(),
            schema=["category", "name", "impl", "size", "time"],
            orient="row",
        )
        .group_by("category", "name", "size", "impl")
        .agg(
            pl.col("time").median().alias("median"),
            pl.len().alias("runs"),
        )
        .pipe(
            lambda stats: stats.filter(pl.col("impl").eq("seqchain")).join(
                stats.filter(pl.col("impl").eq("builtin")).select(
                    *group, pl.col("median").alias("builtin_median")
                ),
                on=group,
            )
        )
        .rename({"median": "chain_median"})
        .drop("impl")
        .with_columns(
            pl.col("chain_median")
            .truediv("builtin_median")
            .sub(1)
            .mul(100)
            .alias("overhead"),
        )
        .sort("overhead")
    )


def _build_results_table() -> Table:
    table = Table(title="Benchmark Results")
    table.add_column("Category", style="cyan")
    table.add_column("Operation", style="white")
    table.add_column("Size", justify="right", style="magenta")
    table.add_column("Runs", justify="right", style="magenta")
    table.add_column("seqchain (μs, median)", justify="right", style="green")
    table.add_column("builtin (μs, median)", justify="right", style="yellow")
    table.add_column("Overhead", justify="right")
    return table


def _fill_table(df: pl.DataFrame, table: Table) -> None:
    def _format_median(expr: pl.Expr) -> pl.Expr:
        return expr.mul(1_000_000).round(2).cast(pl.String)

    rows = (
        df.select(
            "category",
            "name",
            pl.col("size").cast(pl.String),
            pl.col("runs").cast(pl.String),
            pl.col("chain_median").pipe(_format_median),
            pl.col("builtin_median").pipe(_format_median),
            pl.col("overhead").round(1).cast(pl.String).add("%").alias("overhead_str"),
            pl.when(pl.col("overhead").le(0))
            .then(pl.lit("green bold"))
            .otherwise(pl.lit("red bold"))
            .alias("style"),
        )
        .pipe(lambda df: sc.Iter(df.iter_rows()))
        .map(lambda values: TableRow(*values))
    )
    for row in rows:
        row.add_to_table(table)


def _print_summary(df: pl.DataFrame) -> None:
    summary = df.select(
        pl.col("overhead").median().alias("median_overhead"),
        pl.col("overhead").le(0).sum().alias("wins"),
        pl.len().alias("total"),
    )
    median_overhead = summary.get_column("median_overhead").item(0)
    CONSOLE.print()
    CONSOLE.print(
        Text("Median overhead: ", style="bold").append(
            f"{median_overhead:+.1f}%",
            style="green bold" if median_overhead <= 0 else "red bold",
        )
    )
    CONSOLE.print(
        Text("seqchain wins: ", style="bold").append(
            f"{summary.get_column('wins').item(0)}/{summary.get_column('total').item(0)}",
            style="cyan",
        )
    )


@app.command()
def main(
    target_sec: float = typer.Option(1.0, help="Approximate time spent per variant."),
) -> None:
    """Run benchmarks."""
    CONSOLE.print("Running benchmarks...", style="bold blue")
    CONSOLE.print()
    df = (
        _collect_raw_timings(BENCHMARKS, target_sec)
        .into(_compute_all_stats)
        .collect()
    )
    CONSOLE.print()
    table = _build_results_table()
    df.pipe(_fill_table, table)
    CONSOLE.print(table)
    df.pipe(_print_summary)


if __name__ == "__main__":
    app()
