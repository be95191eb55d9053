"""Classification result types.

The class of a gate is not stored by name but by the set of invariants it
satisfies (its fingerprint) together with the Hamming-weight modulus. The
name is derived from that pair on demand.
"""

from dataclasses import dataclass
from enum import Flag, auto
from typing import Optional


class ClassFlag(Flag):
    """Algebraic invariants a gate may satisfy.

    - AFFINE: G(x) = L(x) XOR c for a GF(2)-linear L.
    - LINEAR: affine with G(0) = 0.
    - ORTHO: distinct matrix columns are pairwise orthogonal (and INF2 holds).
    - INF0: every matrix column is a unit vector.
    - INF4: every matrix column has weight 1 (mod 4).
    - INF2: every matrix column has weight 1 (mod 2); for non-affine gates,
      every input changes weight by an odd amount.
    """

    AFFINE = auto()
    LINEAR = auto()
    ORTHO = auto()
    INF0 = auto()
    INF4 = auto()
    INF2 = auto()

    @property
    def names(self) -> list[str]:
        """Names of the individual flags set, in declaration order."""
        return [member.name for member in ClassFlag if member in self]


NO_FLAGS = ClassFlag(0)


@dataclass(frozen=True)
class ClassificationResult:
    """Fingerprint of one gate.

    Attributes:
        n: Bit-width of the classified gate.
        flags: Invariants satisfied by the gate.
        modulus: gcd of the Hamming-weight difference spectrum.
        hw_spectrum: The Hamming-weight differences |x| - |G(x)| observed.
        columns: Matrix columns of the linear part (affine gates only).
        inf_modulus: gcd of the column weight differences (affine gates only).
    """

    n: int
    flags: ClassFlag
    modulus: int
    hw_spectrum: frozenset[int] = frozenset()
    columns: Optional[tuple[int, ...]] = None
    inf_modulus: Optional[int] = None

    @property
    def is_affine(self) -> bool:
        return ClassFlag.AFFINE in self.flags

    @property
    def name(self) -> str:
        """Canonical class name for this fingerprint."""
        from ..classifiers.naming import class_name

        return class_name(self.flags, self.modulus)

    def to_dict(self) -> dict:
        """Converts the result to a dictionary for JSON serialization."""
        return {
            "n": self.n,
            "name": self.name,
            "flags": self.flags.names,
            "modulus": self.modulus,
            "hw_spectrum": sorted(self.hw_spectrum),
            "columns": list(self.columns) if self.columns is not None else None,
            "inf_modulus": self.inf_modulus,
        }
