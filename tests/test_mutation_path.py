"""
Test suite for the top-level mutation path entry points.

Tests strategy resolution, caller-collection safety, and report rendering.
"""

import pytest

from src.gene_path.genetics.path_strategies import BreadthFirstPathStrategy
from src.gene_path.mutation_path import find_mutation_path, render_path_report


class TestFindMutationPath:
    """Test find_mutation_path orchestration."""

    def test_default_strategy_is_greedy(self):
        """Greedy picks the last match, ending away from the target."""
        path = find_mutation_path("AAAA", "AAAT", ["AAAT", "TAAA"])

        assert path == ["AAAA", "TAAA"]

    def test_single_step_scenario(self):
        """AACCGGTA reaches AACCGGTT in two genes."""
        path = find_mutation_path("AACCGGTA", "AACCGGTT", ["AACCGGTA", "AACCGGTT"])

        assert path == ["AACCGGTA", "AACCGGTT"]

    def test_no_path_returns_none(self):
        """Unbridgeable inputs return None."""
        assert find_mutation_path("AACCGGTT", "CCCCTTTT", ["AACCGGTA", "AAACGGTT", "CCCCTTTT"]) is None

    def test_identical_genes(self):
        """Starting equal to target returns the starting gene alone."""
        assert find_mutation_path("AACCGGTT", "AACCGGTT", ["AACCGGTA"]) == ["AACCGGTT"]

    def test_caller_candidates_not_mutated(self):
        """The caller's list keeps every entry after a successful search."""
        candidates = ["AACCGGTA", "AACCGGTT"]

        find_mutation_path("AACCGGTA", "AACCGGTT", candidates)

        assert candidates == ["AACCGGTA", "AACCGGTT"]

    def test_strategy_by_name(self):
        """Named breadth-first strategy finds the path greedy misses."""
        candidates = ["CAAA", "CCAA", "AAAC"]

        assert find_mutation_path("AAAA", "CCAA", candidates) is None
        assert find_mutation_path("AAAA", "CCAA", candidates, strategy="breadth_first") == [
            "AAAA",
            "CAAA",
            "CCAA",
        ]

    def test_strategy_instance(self):
        """A configured strategy instance is used as given."""
        strategy = BreadthFirstPathStrategy(max_depth=1)

        assert find_mutation_path("AAAA", "CCAA", ["CAAA", "CCAA"], strategy=strategy) is None

    def test_unknown_strategy_name(self):
        """Unknown names raise ValueError."""
        with pytest.raises(ValueError, match="Unknown path strategy"):
            find_mutation_path("AAAA", "AAAT", [], strategy="random")

    def test_invalid_strategy_type(self):
        """Non-string, non-strategy values raise TypeError."""
        with pytest.raises(TypeError, match="strategy must be a name"):
            find_mutation_path("AAAA", "AAAT", [], strategy=42)

    def test_mismatched_lengths(self):
        """Gene length mismatches surface as ValueError."""
        with pytest.raises(ValueError, match="Target gene length"):
            find_mutation_path("AAAA", "AAA", [])


class TestRenderPathReport:
    """Test output formatting."""

    def test_no_path_renders_sentinel(self):
        """A missing path renders as -1."""
        assert render_path_report(None) == ["-1"]

    def test_path_renders_count_then_genes(self):
        """Header counts genes in the path, then one gene per line."""
        lines = render_path_report(["AACCGGTA", "AACCGGTT"])

        assert lines == ["Mutation count: 2", "AACCGGTA", "AACCGGTT"]

    def test_single_gene_path(self):
        """A path of only the starting gene still renders its count."""
        assert render_path_report(["AACCGGTT"]) == ["Mutation count: 1", "AACCGGTT"]
