"""
Tests for the command line driver scripts.
"""

import importlib.util
import json

import pytest


def _load_script(project_root, name):
    path = project_root / "scripts" / f"{name}.py"
    spec = importlib.util.spec_from_file_location(f"scripts_{name}", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def solve_script(project_root):
    return _load_script(project_root, "solve")


@pytest.fixture
def benchmark_script(project_root):
    return _load_script(project_root, "benchmark")


class TestSolveScript:
    """Test scripts/solve.py."""

    def test_sample_problem(self, solve_script, capsys):
        """Without input the sample problem is solved by every default solver."""
        assert solve_script.main([]) == 0
        out = capsys.readouterr().out
        assert "BFS Path: 0 -> 1 -> 2 -> 3 -> 0 with cost 93" in out
        assert "UCS Path:" in out and "with cost 73" in out
        assert "ASTAR Path:" in out

    def test_matrix_file_with_start(self, solve_script, tmp_path, capsys):
        """The start city stored in a file is used."""
        path = tmp_path / "problem.json"
        path.write_text(json.dumps({"matrix": [[0, 1, 5], [3, 0, 1], [10, 5, 0]], "start": 1}))
        assert solve_script.main(["--matrix", str(path), "--solver", "ucs"]) == 0
        assert "UCS Path: 1 -> " in capsys.readouterr().out

    def test_random_problem(self, solve_script, capsys):
        """Random problems are solved with the requested solvers."""
        assert solve_script.main(["--random", "5", "--seed", "1", "--solver", "brute-force"]) == 0
        assert "BRUTE-FORCE Path: 0 -> " in capsys.readouterr().out

    def test_start_out_of_range(self, solve_script, capsys):
        """An invalid start city is an input error."""
        assert solve_script.main(["--start", "9"]) == 2
        assert "out of range" in capsys.readouterr().err

    def test_missing_file(self, solve_script, tmp_path):
        """A missing matrix file is an input error."""
        assert solve_script.main(["--matrix", str(tmp_path / "none.json")]) == 2

    def test_no_tour_found(self, solve_script, capsys):
        """An empty problem reports failure."""
        assert solve_script.main(["--random", "0", "--solver", "ucs"]) == 1
        assert "UCS: no tour found" in capsys.readouterr().out


class TestBenchmarkScript:
    """Test scripts/benchmark.py."""

    def test_runs_and_writes_results(self, benchmark_script, tmp_path, monkeypatch, capsys):
        """Results are printed and optionally saved as JSON."""
        monkeypatch.setattr(benchmark_script, "RESULTS_DIR", tmp_path)
        code = benchmark_script.main(["--sizes", "3", "4", "--seeds", "2", "--output"])
        assert code == 0
        assert "[n=4, seed=1]" in capsys.readouterr().out

        saved = list(tmp_path.glob("benchmark_*.json"))
        assert len(saved) == 1
        records = json.loads(saved[0].read_text())
        assert len(records) == 2 * 2 * 3
        assert {r["solver"] for r in records} == {"bfs", "ucs", "astar"}
