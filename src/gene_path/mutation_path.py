"""
Top-level entry points: find a mutation path and render the result.

Input gathering (reading genes from the console or a file, alphabet checks)
happens outside this package; callers pass already-validated genes in.
"""

from typing import Iterable, List, Optional, Union

from .genetics.abstract_strategies import AbstractPathStrategy
from .genetics.candidate_pool import CandidatePool
from .genetics.path_strategies import PathStrategyKey, build_path_strategy

NO_PATH_SENTINEL = "-1"


def find_mutation_path(
    starting: str,
    target: str,
    candidates: Iterable[str],
    strategy: Union[PathStrategyKey, AbstractPathStrategy] = "greedy",
) -> Optional[List[str]]:
    """
    Find a mutation path from starting toward target through candidates.

    The candidates are copied into a fresh CandidatePool, so the caller's
    collection is never modified.

    Args:
        starting: Gene the path begins with
        target: Gene the path heads toward
        candidates: Genes usable as intermediate steps, in scan order
        strategy: Registered strategy name, or a strategy instance. Defaults
            to the greedy strategy.

    Returns:
        The mutation path, or None if the strategy found none

    Raises:
        TypeError: If strategy is neither a name nor an AbstractPathStrategy
        ValueError: On unknown strategy names or mismatched gene lengths
    """
    if isinstance(strategy, str):
        strategy = build_path_strategy(strategy)
    elif not isinstance(strategy, AbstractPathStrategy):
        raise TypeError(f"strategy must be a name or AbstractPathStrategy, got {type(strategy).__name__}")

    pool = CandidatePool(candidates)
    return strategy.apply_strategy(starting, target, pool)


def render_path_report(path: Optional[List[str]]) -> List[str]:
    """
    Format a search result as output lines.

    A path renders as a "Mutation count: N" header followed by one gene per
    line; a missing path renders as the single line "-1".
    """
    if path is None:
        return [NO_PATH_SENTINEL]
    return [f"Mutation count: {len(path)}"] + list(path)
