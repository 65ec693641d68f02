"""
Unit tests for SearchNode.
"""

import dataclasses

import pytest

from tsp_search.search import SearchNode


class TestSearchNode:
    """Test partial-tour nodes."""

    def test_root_holds_only_start(self):
        """The root node has visited just the start city at no cost."""
        root = SearchNode.root(2)
        assert root.city == 2
        assert root.path == (2,)
        assert root.cost == 0
        assert root.heuristic == 0

    def test_extend_appends_city_and_adds_cost(self):
        """A child extends the path and accumulates cost."""
        child = SearchNode.root(0).extend(3, 21, heuristic=17)
        assert child.city == 3
        assert child.path == (0, 3)
        assert child.cost == 21
        assert child.heuristic == 17
        assert child.priority == 38

    def test_extend_leaves_parent_untouched(self):
        """Siblings never share or mutate their parent's path."""
        parent = SearchNode.root(0).extend(1, 5)
        left = parent.extend(2, 1)
        right = parent.extend(3, 2)
        assert parent.path == (0, 1)
        assert left.path == (0, 1, 2)
        assert right.path == (0, 1, 3)

    def test_nodes_are_immutable(self):
        """Nodes are frozen value objects."""
        node = SearchNode.root(0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.cost = 5

    def test_is_complete(self):
        """A node is complete once its path covers every city."""
        node = SearchNode.root(0).extend(1, 1).extend(2, 1)
        assert node.is_complete(3)
        assert not node.is_complete(4)

    def test_visits(self):
        """visits() reports whether a city is already on the path."""
        node = SearchNode.root(0).extend(2, 4)
        assert node.visits(0)
        assert node.visits(2)
        assert not node.visits(1)

    def test_closed_path_returns_to_start(self):
        """closed_path() appends the start city."""
        node = SearchNode.root(1).extend(0, 1).extend(2, 1)
        assert node.closed_path() == [1, 0, 2, 1]
