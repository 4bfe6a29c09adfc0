"""Tests for the aggregation step of the benchmark script."""

import importlib.util
import itertools
import sys
from collections.abc import Iterator
from pathlib import Path
from types import ModuleType

import pytest

import seqchain as sc

pytest.importorskip("polars")
pytest.importorskip("typer")
pytest.importorskip("rich")

BENCHS_PATH = Path(__file__).parents[1] / "scripts" / "benchs.py"


@pytest.fixture(scope="module")
def benchs() -> Iterator[ModuleType]:
    spec = importlib.util.spec_from_file_location("benchs", BENCHS_PATH)
    assert spec is not None
    assert spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    sys.modules["benchs"] = module
    spec.loader.exec_module(module)
    yield module
    sys.modules.pop("benchs", None)


def _rows(benchs: ModuleType) -> sc.Vec:
    timings = {
        "slow": ([2.0, 2.0, 4.0], [1.0, 1.0, 1.0]),
        "fast": ([1.0, 1.0, 1.0], [2.0, 2.0, 3.0]),
    }
    rows = sc.Vec([])
    for name, (chain, builtin) in timings.items():
        sc.Iter(
            itertools.chain(
                (benchs.Row("maps", name, "seqchain", 256, t) for t in chain),
                (benchs.Row("maps", name, "builtin", 256, t) for t in builtin),
            )
        ).extend(rows)
    return rows


def test_stats_join_medians_per_variant(benchs: ModuleType) -> None:
    """Test that each variant gets both medians, its run count and overhead."""
    df = benchs._compute_all_stats(_rows(benchs)).collect()
    assert df.get_column("name").to_list() == ["fast", "slow"]
    assert df.get_column("runs").to_list() == [3, 3]
    assert df.get_column("chain_median").to_list() == [1.0, 2.0]
    assert df.get_column("builtin_median").to_list() == [2.0, 1.0]
    assert df.get_column("overhead").to_list() == [-50.0, 100.0]


def test_table_rows_styled_by_overhead(benchs: ModuleType) -> None:
    """Test that each variant fills one row, green when seqchain is not slower."""
    df = benchs._compute_all_stats(_rows(benchs)).collect()
    table = benchs._build_results_table()
    benchs._fill_table(df, table)
    assert table.row_count == 2
    assert list(table.columns[1].cells) == ["fast", "slow"]
    styles = [cell.style for cell in table.columns[6].cells]
    assert styles == ["green bold", "red bold"]
