"""
Abstract strategy class for mutation path search.

Strategies decide how a starting gene is walked toward a target gene through
a pool of candidates. The abstract class validates inputs and delegates to a
hook; concrete implementations (in path_strategies.py) provide the search.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from .candidate_pool import CandidatePool


class AbstractPathStrategy(ABC):
    """
    Path search strategy using a validate-then-dispatch pattern.

    apply_strategy checks that all genes agree on length, then hands off to
    find_path. Failure to find a path is a normal outcome and is reported as
    None, never as an exception. Strategies may consume entries of the pool
    they are given.

    Stateless. Concrete subclasses define search parameters.
    """

    def apply_strategy(
        self, starting: str, target: str, pool: CandidatePool
    ) -> Optional[List[str]]:
        """
        Search for a mutation path from starting toward target.

        Args:
            starting: Gene the path begins with
            target: Gene the path heads toward
            pool: Candidates usable as intermediate steps; consumed as used

        Returns:
            Mutation path beginning with starting, or None if no path exists

        Raises:
            ValueError: If starting is empty, or if target or any candidate
                differs in length from starting
        """
        # Validation 1: genes must be non-empty
        if not starting:
            raise ValueError("Starting gene must not be empty")

        # Validation 2: target must match starting length
        if len(target) != len(starting):
            raise ValueError(
                f"Target gene length ({len(target)}) must equal starting gene length ({len(starting)})"
            )

        # Validation 3: every candidate must match starting length
        for candidate in pool:
            if len(candidate) != len(starting):
                raise ValueError(
                    f"Candidate {candidate!r} has length {len(candidate)}, expected {len(starting)}"
                )

        return self.find_path(starting, target, pool)

    @abstractmethod
    def find_path(
        self, starting: str, target: str, pool: CandidatePool
    ) -> Optional[List[str]]:
        """
        Abstract hook for the search itself.

        Inputs are already validated. Implementations return the path as a
        list beginning with starting, or None when the search fails.
        """
        ...
