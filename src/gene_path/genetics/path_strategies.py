"""
Concrete path strategies and the greedy path constructor.

Each strategy fulfills AbstractPathStrategy's find_path contract. The greedy
strategy is the default and reproduces the established output exactly; the
breadth-first strategy is an opt-in alternative that can find paths the
greedy one misses.
"""

import logging
from collections import deque
from typing import Any, Dict, List, Literal, Optional, Sequence, Union

import numpy

from .abstract_strategies import AbstractPathStrategy
from .candidate_pool import CandidatePool
from .genes import find_difference, find_needed_mutations, pairwise_hamming

logger = logging.getLogger(__name__)


# ─── Greedy Construction ───────────────────────────────────────────────────────


def construct_path(
    required_mutations: Sequence[str],
    starting: str,
    pool: Union[CandidatePool, List[str]],
) -> Optional[List[str]]:
    """
    Build a mutation path greedily, one required character at a time.

    For each required character the whole remaining pool is scanned in pool
    order. A candidate matches when it is exactly one mismatch away from the
    current gene and the differing character is the required one. The scan
    never stops early, so the last match in pool order wins. The winner is
    appended to the path and removed from the pool.

    Greedy and non-backtracking: a choice made for an earlier step is never
    revisited, so a path can be missed even when one exists.

    Args:
        required_mutations: Characters to introduce, in order (see find_needed_mutations)
        starting: Gene the path begins with
        pool: Candidates, consumed in place. A plain list works too.

    Returns:
        Path of len(required_mutations) + 1 genes, or None as soon as one
        required character cannot be introduced. Removals made by earlier
        steps are not rolled back on failure.
    """
    path = [starting]
    current = starting

    for step, wanted in enumerate(required_mutations):
        chosen = None
        for index in range(len(pool)):
            is_single, difference = find_difference(current, pool[index])
            if is_single and difference == wanted:
                chosen = index

        if chosen is None:
            logger.info("No candidate introduces %r at step %d from %s", wanted, step, current)
            return None

        current = pool.pop(chosen)
        path.append(current)
        logger.debug("Step %d: introduced %r via %s", step, wanted, current)

    logger.info("Greedy path found with %d genes", len(path))
    return path


class GreedyPathStrategy(AbstractPathStrategy):
    """
    Greedy, non-optimal path search with last-match-wins tie-breaking.

    Derives the required mutations from starting and target, then defers to
    construct_path. The last gene of the path need not equal the target: a
    step only has to introduce the right character, not at the right position.
    """

    def find_path(
        self, starting: str, target: str, pool: CandidatePool
    ) -> Optional[List[str]]:
        required = find_needed_mutations(starting, target)
        return construct_path(required, starting, pool)


# ─── Breadth-First Search ──────────────────────────────────────────────────────


class BreadthFirstPathStrategy(AbstractPathStrategy):
    """
    Shortest path search over one-mismatch edges.

    Nodes are the starting gene plus every remaining pool entry; two nodes
    are adjacent when their genes differ in exactly one position. The search
    ends at the first discovered entry equal to target, so the result always
    reaches the target literally. Ties are broken by pool order.

    Only entries on the returned path are removed from the pool. On failure
    the pool is left untouched.
    """

    def __init__(self, max_depth: Optional[int] = None):
        """
        Args:
            max_depth: Longest path allowed, counted in mutation steps.
                None searches without limit.
        """
        if max_depth is not None and max_depth <= 0:
            raise ValueError("max_depth must be positive")
        self.max_depth = max_depth

    def find_path(
        self, starting: str, target: str, pool: CandidatePool
    ) -> Optional[List[str]]:
        if starting == target:
            return [starting]

        # Node 0 is the starting gene, node i > 0 is pool entry i - 1
        genes = [starting] + list(pool)
        adjacency = pairwise_hamming(genes) == 1

        parents: Dict[int, int] = {0: 0}
        depths = {0: 0}
        frontier = deque([0])
        found = None

        while frontier and found is None:
            node = frontier.popleft()
            if self.max_depth is not None and depths[node] >= self.max_depth:
                continue
            for neighbour in numpy.flatnonzero(adjacency[node]):
                neighbour = int(neighbour)
                if neighbour in parents:
                    continue
                parents[neighbour] = node
                depths[neighbour] = depths[node] + 1
                if genes[neighbour] == target:
                    found = neighbour
                    break
                frontier.append(neighbour)

        if found is None:
            logger.info("No path from %s to %s through %d candidates", starting, target, len(pool))
            return None

        chain = []
        node = found
        while node != 0:
            chain.append(node)
            node = parents[node]
        chain.reverse()
        logger.debug("Breadth-first search reached %s at depth %d", target, depths[found])

        steps = pool.remove_all(index - 1 for index in chain)
        path = [starting] + steps
        logger.info("Breadth-first path found with %d genes", len(path))
        return path


# ─── Registry ──────────────────────────────────────────────────────────────────


# Name registry for string-based dispatch
_PATH_STRATEGY_REGISTRY: Dict[str, type] = {
    "greedy": GreedyPathStrategy,
    "breadth_first": BreadthFirstPathStrategy,
}

PathStrategyKey = Literal["greedy", "breadth_first"]


def build_path_strategy(name: PathStrategyKey, **kwargs: Any) -> AbstractPathStrategy:
    """
    Construct a path strategy by name.

    Args:
        name: One of "greedy" or "breadth_first"
        **kwargs: Constructor arguments for the chosen strategy

    Raises:
        ValueError: If name is not registered
    """
    if name not in _PATH_STRATEGY_REGISTRY:
        known = ", ".join(sorted(_PATH_STRATEGY_REGISTRY))
        raise ValueError(f"Unknown path strategy '{name}', expected one of: {known}")
    return _PATH_STRATEGY_REGISTRY[name](**kwargs)
