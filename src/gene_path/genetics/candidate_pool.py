"""Candidate pool: the genes available as intermediate path steps."""

from typing import Iterable, Iterator, List, Optional


class CandidatePool:
    """
    Order-preserving pool of candidate genes, consumed as a path is built.

    Pool order matters: path strategies break ties by scanning it front to
    back, so removing an entry never reorders the ones left behind. Duplicate
    genes are separate entries and are consumed separately.

    Mutable. Owned by a single path construction at a time; once a search has
    failed the pool may be partially drained and should not be reused.
    """

    def __init__(self, genes: Optional[Iterable[str]] = None):
        """
        Args:
            genes: Initial candidates, in scan order. Copied, never aliased.
        """
        self._genes: List[str] = list(genes) if genes is not None else []

    @property
    def genes(self) -> List[str]:
        """Snapshot of the remaining candidates in pool order."""
        return list(self._genes)

    def pop(self, index: int) -> str:
        """
        Remove and return the candidate at index, keeping the rest in order.

        Raises:
            IndexError: If index is outside the pool
        """
        if not -len(self._genes) <= index < len(self._genes):
            raise IndexError(f"Pool index {index} out of range for pool of size {len(self._genes)}")
        return self._genes.pop(index)

    def remove_all(self, indices: Iterable[int]) -> List[str]:
        """
        Remove several candidates at once, given their current indices.

        All indices are checked before anything is removed, so a bad index
        leaves the pool unchanged.

        Returns:
            The removed genes, in the order the indices were given

        Raises:
            IndexError: If any index is outside the pool
            ValueError: If two indices name the same entry
        """
        positions = []
        for index in indices:
            if not -len(self._genes) <= index < len(self._genes):
                raise IndexError(f"Pool index {index} out of range for pool of size {len(self._genes)}")
            positions.append(range(len(self._genes))[index])

        if len(set(positions)) != len(positions):
            raise ValueError(f"Indices {positions} name the same pool entry more than once")

        removed = [self._genes[i] for i in positions]
        for i in sorted(positions, reverse=True):
            del self._genes[i]
        return removed

    def __getitem__(self, index: int) -> str:
        return self._genes[index]

    def __len__(self) -> int:
        return len(self._genes)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._genes))

    def __contains__(self, gene: object) -> bool:
        return gene in self._genes

    def __repr__(self) -> str:
        return f"CandidatePool({self._genes!r})"
