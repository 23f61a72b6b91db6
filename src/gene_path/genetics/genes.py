"""
Gene utilities for mutation path search.

A gene is a plain fixed-length string over a small alphabet (the reference
domain uses "ACGT" and length 8, but nothing here depends on either). These
helpers are pure and stateless; callers are expected to pass genes of equal
length.
"""

from typing import Iterable, List, Optional, Tuple

import numpy


def find_difference(current: str, other: str) -> Tuple[bool, Optional[str]]:
    """
    Check whether two genes differ in exactly one position.

    Compares position by position, counting mismatches and remembering the
    character of `other` at the last mismatching position seen.

    Args:
        current: Gene being mutated from
        other: Gene being compared against; the reported character comes from here

    Returns:
        (True, differing character) if exactly one mismatch was found,
        otherwise (False, None)
    """
    mismatches = 0
    difference = None
    for ours, theirs in zip(current, other):
        if ours != theirs:
            mismatches += 1
            difference = theirs

    if mismatches != 1:
        return False, None
    return True, difference


def find_needed_mutations(starting: str, target: str) -> List[str]:
    """
    List the target characters the path has to introduce, in position order.

    One entry per position where starting and target disagree, scanning left
    to right. Empty if and only if the genes are identical.

    Args:
        starting: Gene the path starts from
        target: Gene the path is heading toward

    Returns:
        Characters of target at every mismatching position
    """
    return [wanted for have, wanted in zip(starting, target) if have != wanted]


def hamming_distance(first: str, second: str) -> int:
    """Number of positions at which two equal-length genes differ."""
    return sum(1 for a, b in zip(first, second) if a != b)


def encode_genes(genes: Iterable[str]) -> numpy.ndarray:
    """
    Pack genes into a (n, length) uint32 array of code points, one row per gene.

    Genes must share one length; any alphabet works. An empty iterable gives an
    array of shape (0, 0).
    """
    rows = [numpy.frombuffer(gene.encode("utf-32-le"), dtype="<u4") for gene in genes]
    if not rows:
        return numpy.zeros((0, 0), dtype=numpy.uint32)
    return numpy.stack(rows)


def pairwise_hamming(genes: Iterable[str]) -> numpy.ndarray:
    """
    Hamming distance between every pair of genes.

    Args:
        genes: Equal-length genes, in the order rows and columns should follow

    Returns:
        (n, n) integer matrix where entry [i, j] counts mismatches between
        gene i and gene j. Diagonal is zero.
    """
    encoded = encode_genes(genes)
    # Broadcast (n, 1, L) against (1, n, L) and count mismatches along L
    return (encoded[:, None, :] != encoded[None, :, :]).sum(axis=-1)
