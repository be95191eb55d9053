"""Algebraic invariants of reversible gates.

Building blocks of the classifier. Every function here is pure and works on
a raw truth table (any integer sequence or numpy array of length 2^n), so it
can be reused outside the full classification pipeline.

Whole-domain scans (bijectivity, affineness, Hamming spectrum) are
vectorised with numpy. Matrix columns are plain Python ints used as n-bit
vectors over GF(2): AND is multiplication and popcount parity is the sum.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from itertools import combinations

import numpy as np

TableLike = Sequence[int] | np.ndarray


def _as_array(table: TableLike) -> np.ndarray:
    return np.asarray(table, dtype=np.int64)


# --- Invertibility ---


def is_invertible(n: int, table: TableLike) -> bool:
    """Checks that the table is a bijection on [0, 2^n).

    Marks every output value in a presence set sized 2^n; the table is
    bijective iff exactly 2^n distinct values were marked. Values outside the
    domain, or a table of the wrong length, make the gate non-invertible.
    """
    size = 1 << n
    g = _as_array(table)
    if g.shape != (size,):
        return False
    if np.any((g < 0) | (g >= size)):
        return False
    hit = np.zeros(size, dtype=bool)
    hit[g] = True
    return int(np.count_nonzero(hit)) == size


# --- Affine / linear ---


def is_affine(n: int, table: TableLike) -> bool:
    """Checks whether G(x) = L(x) XOR c for some GF(2)-linear L.

    An affine map satisfies G(a) ^ G(b) ^ G(a ^ b) == G(0) for every a, b.
    Checking only the triples where b is the lowest set bit of a suffices:
    every input decomposes into single bits, so the identity propagates to
    all pairs. This keeps the test linear in the table size.
    """
    g = _as_array(table)
    x = np.arange(1 << n, dtype=np.int64)
    low = x & -x
    return bool(np.all((g ^ g[low] ^ g[x ^ low]) == g[0]))


def is_linear(table: TableLike) -> bool:
    """An affine gate is linear iff its constant offset G(0) is zero."""
    return int(table[0]) == 0


def linear_matrix(n: int, table: TableLike) -> tuple[int, ...]:
    """Matrix of the linear part of an affine gate, as n column bit vectors.

    Column i is G(2^i) XOR G(0): the offset cancels, leaving the action of
    the linear part on basis vector i. Bit j of column i is matrix entry (j, i).
    """
    g0 = int(table[0])
    return tuple(int(table[1 << i]) ^ g0 for i in range(n))


# --- Difference spectra ---


def hw_diffs(n: int, table: TableLike) -> frozenset[int]:
    """Hamming-weight change spectrum { | |x| - |G(x)| | : x in domain }."""
    g = _as_array(table)
    x = np.arange(1 << n, dtype=np.int64)
    diffs = np.abs(np.bitwise_count(x).astype(np.int64) - np.bitwise_count(g).astype(np.int64))
    return frozenset(int(d) for d in np.unique(diffs))


def inf_diffs(columns: Iterable[int]) -> frozenset[int]:
    """Column weight spectrum { |A e_i| - 1 : unit vectors e_i }."""
    return frozenset(column.bit_count() - 1 for column in columns)


def mod_class(values: Iterable[int]) -> int:
    """Folds gcd over a set of non-negative integers.

    gcd(k, 0) = k, so the empty set yields 0 and a singleton yields itself.
    """
    result = 0
    for value in values:
        result = math.gcd(result, value)
    return result


def all_odd(values: Iterable[int]) -> bool:
    """True if every value is odd (vacuously true for an empty set)."""
    return all(value % 2 == 1 for value in values)


# --- Orthogonality ---


def matrix_orthogonal(columns: Sequence[int]) -> bool:
    """Checks that distinct columns are pairwise orthogonal over GF(2).

    Does NOT check any property of individual columns, so this alone does not
    place a gate in the class of orthogonal gates.
    """
    return all((a & b).bit_count() % 2 == 0 for a, b in combinations(columns, 2))
