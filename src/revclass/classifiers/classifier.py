"""Reversible Gate Classifier.

This module reduces a gate to its algebraic fingerprint and names its class.
The pipeline is:

1. Reject tables that are not bijections (``NonReversibleGate``).
2. Compute the Hamming-weight difference spectrum and its gcd (the modulus).
3. If the gate is affine, extract the matrix of its linear part and derive
   the column flags (INF0/INF4/INF2) and orthogonality from it. Otherwise
   only the parity of the Hamming spectrum is recorded.
4. Name the class from (flags, modulus).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..exceptions import NonReversibleGate
from ..models.classification import NO_FLAGS, ClassFlag, ClassificationResult
from ..models.gate import Gate
from .invariants import (
    all_odd,
    hw_diffs,
    inf_diffs,
    is_affine,
    is_invertible,
    is_linear,
    linear_matrix,
    matrix_orthogonal,
    mod_class,
)

logger = logging.getLogger(__name__)


def analyze_gate(gate: Gate) -> ClassificationResult:
    """Computes the fingerprint of a gate.

    Args:
        gate: The gate to analyze.

    Returns:
        The flags, Hamming-weight modulus and supporting spectra.

    Raises:
        NonReversibleGate: If the truth table is not a bijection.
    """
    n, table = gate.n, gate.table
    if not is_invertible(n, table):
        raise NonReversibleGate(n)

    spectrum = hw_diffs(n, table)
    modulus = mod_class(spectrum)
    flags = NO_FLAGS

    if not is_affine(n, table):
        if all_odd(spectrum):
            flags |= ClassFlag.INF2
        result = ClassificationResult(n=n, flags=flags, modulus=modulus, hw_spectrum=spectrum)
    else:
        flags |= ClassFlag.AFFINE
        if is_linear(table):
            flags |= ClassFlag.LINEAR

        columns = linear_matrix(n, table)
        inf = mod_class(inf_diffs(columns))
        if inf == 0:
            flags |= ClassFlag.INF0
        if inf % 4 == 0:
            flags |= ClassFlag.INF4
        if inf % 2 == 0:
            flags |= ClassFlag.INF2

        if ClassFlag.INF2 in flags and matrix_orthogonal(columns):
            flags |= ClassFlag.ORTHO

        result = ClassificationResult(
            n=n,
            flags=flags,
            modulus=modulus,
            hw_spectrum=spectrum,
            columns=columns,
            inf_modulus=inf,
        )

    logger.debug(
        f"{n}-bit gate: flags={flags.names} modulus={modulus} -> {result.name}"
    )
    return result


def classify_gate(gate: Gate) -> str:
    """Returns the class name of a gate.

    Raises:
        NonReversibleGate: If the truth table is not a bijection.
    """
    return analyze_gate(gate).name


def classify(n: int, table: Sequence[int]) -> str:
    """Classifies the n-bit gate with the given truth table.

    Args:
        n: Bit-width, 1 <= n <= 31.
        table: Output for each input 0 .. 2^n - 1.

    Returns:
        The canonical class name.

    Raises:
        NonReversibleGate: If the table is not a bijection on [0, 2^n).
        pydantic.ValidationError: If n is out of range or the table has the
            wrong length.
    """
    return classify_gate(Gate(n=n, table=tuple(table)))
