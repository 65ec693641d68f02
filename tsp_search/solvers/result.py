"""
Result dataclasses for tour searches.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field


@dataclass
class SearchStats:
    """
    Counters collected while a solver runs.

    Attributes:
        nodes_generated: Nodes created, including the root
        nodes_expanded: Nodes whose successors were generated
        max_frontier_size: Largest frontier seen during the search
        hit_expansion_limit: Whether the search stopped at max_expansions
    """

    nodes_generated: int = 0
    nodes_expanded: int = 0
    max_frontier_size: int = 0
    hit_expansion_limit: bool = False


@dataclass
class SolveResult:
    """
    Complete record of one solver run.

    Attributes:
        solver_name: Name of the solver that ran
        start_city: Tour origin
        path: Closed tour (first and last city equal), or None
        cost: Total cost of path, or None when no tour was found
        stats: Search counters
        elapsed_ms: Wall-clock search time in milliseconds
    """

    solver_name: str
    start_city: int
    path: list[int] | None
    cost: int | None
    stats: SearchStats = field(default_factory=SearchStats)
    elapsed_ms: float = 0.0

    @property
    def found(self) -> bool:
        """Whether a tour was found."""
        return self.path is not None

    def to_dict(self) -> dict:
        """Plain-dict form for JSON output."""
        return asdict(self)
