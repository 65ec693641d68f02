"""
Benchmark module.

Runs several solvers on the same distance matrix and compares tour cost
and search effort.
"""

from tsp_search.benchmark.runner import compare_solvers, format_table, summarize

__all__ = ["compare_solvers", "summarize", "format_table"]
