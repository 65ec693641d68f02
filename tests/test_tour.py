"""
Unit tests for tour utilities.
"""

import pytest

from tsp_search.tour import format_path, is_valid_tour, path_cost


class TestPathCost:
    """Test cost summation."""

    def test_closed_tour_cost(self, sample_matrix):
        """Every consecutive edge is summed, including the return."""
        assert path_cost(sample_matrix, [0, 2, 1, 3, 0]) == 73
        assert path_cost(sample_matrix, [0, 1, 2, 3, 0]) == 93

    def test_direction_matters(self, greedy_trap_matrix):
        """Asymmetric costs are read in travel direction."""
        assert path_cost(greedy_trap_matrix, [0, 1, 2, 0]) == 12
        assert path_cost(greedy_trap_matrix, [0, 2, 1, 0]) == 13

    def test_open_path_not_validated(self, sample_matrix):
        """Incomplete paths are summed as given."""
        assert path_cost(sample_matrix, [0, 2]) == 20

    @pytest.mark.parametrize("path", [[], [3]])
    def test_short_paths_cost_nothing(self, sample_matrix, path):
        """Paths without edges cost 0."""
        assert path_cost(sample_matrix, path) == 0

    def test_accepts_nested_lists(self):
        """Raw nested lists work as the matrix."""
        assert path_cost([[0, 4], [6, 0]], [0, 1, 0]) == 10

    def test_out_of_range_city_raises(self, sample_matrix):
        """Bounds violations propagate."""
        with pytest.raises(IndexError):
            path_cost(sample_matrix, [0, 4, 0])


class TestIsValidTour:
    """Test tour validation."""

    def test_valid_tour(self):
        """A closed permutation is valid."""
        assert is_valid_tour([2, 0, 1, 3, 2], 4, 2)

    @pytest.mark.parametrize("path", [
        None,
        [0, 1, 2, 3],
        [0, 1, 1, 3, 0],
        [1, 0, 2, 3, 1],
        [0, 1, 2, 3, 1],
    ])
    def test_invalid_tours(self, path):
        """Open, repeating, or wrongly anchored paths are rejected."""
        assert not is_valid_tour(path, 4, 0)


class TestFormatPath:
    """Test path display."""

    def test_arrow_format(self):
        """Cities are joined with arrows."""
        assert format_path([0, 2, 1, 3, 0]) == "0 -> 2 -> 1 -> 3 -> 0"

    def test_none(self):
        """A missing path renders as text."""
        assert format_path(None) == "no path"
