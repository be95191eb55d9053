"""Class naming.

Maps a gate fingerprint (flag set, Hamming-weight modulus) to the canonical
name of its class. The tree is total: every flag combination and modulus
reaches exactly one name.

Affine classes are told apart by their linear part first (INF0, then INF4,
then ORTHO, then INF2) and by the modulus second, which records how much
NOT the class contains (mod 1: NOT, mod 2: NOTNOT). A linear ORTHO gate is
T4 regardless of modulus; an affine gate with none of the column flags is
CNOT. Non-affine classes are named by modulus alone, with INF2 (every input
flips weight parity) separating FREDKIN+NOT from ALL.
"""

from ..models.classification import ClassFlag

AFFINE_CLASSES = (
    "EMPTY",
    "NOT",
    "NOTNOT",
    "T6",
    "T6+NOT",
    "T6+NOTNOT",
    "T4",
    "F4",
    "F4+NOT",
    "F4+NOTNOT",
    "CNOTNOT",
    "CNOTNOT+NOT",
    "CNOT",
)

NON_AFFINE_CLASSES = ("FREDKIN", "FREDKIN+NOT", "ALL")  # plus MOD<k> for k >= 2


def is_affine_class(name: str) -> bool:
    """True if the class name belongs to the affine branch."""
    return name in AFFINE_CLASSES


def class_name(flags: ClassFlag, modulus: int) -> str:
    """Names the class of a gate from its fingerprint.

    Args:
        flags: Invariants satisfied by the gate.
        modulus: gcd of the gate's Hamming-weight difference spectrum.

    Returns:
        The canonical class name, e.g. 'EMPTY', 'CNOT', 'T6+NOT', 'MOD4'.
    """
    if ClassFlag.AFFINE not in flags:
        if modulus == 0:
            return "FREDKIN"
        if modulus == 1:
            return "FREDKIN+NOT" if ClassFlag.INF2 in flags else "ALL"
        return f"MOD{modulus}"

    if ClassFlag.INF0 in flags:
        return {0: "EMPTY", 1: "NOT"}.get(modulus, "NOTNOT")
    if ClassFlag.INF4 in flags:
        return {1: "T6+NOT", 2: "T6+NOTNOT"}.get(modulus, "T6")
    if ClassFlag.ORTHO in flags:
        if ClassFlag.LINEAR in flags:
            return "T4"
        return {1: "F4+NOT", 2: "F4+NOTNOT"}.get(modulus, "F4")
    if ClassFlag.INF2 in flags:
        return "CNOTNOT+NOT" if modulus == 1 else "CNOTNOT"
    return "CNOT"
