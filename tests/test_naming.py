"""Tests for the class naming decision tree."""

import pytest

from revclass.classifiers.naming import (
    AFFINE_CLASSES,
    NON_AFFINE_CLASSES,
    class_name,
    is_affine_class,
)
from revclass.models.classification import ClassFlag

AFFINE = ClassFlag.AFFINE
LINEAR = ClassFlag.LINEAR
ORTHO = ClassFlag.ORTHO
INF0 = ClassFlag.INF0
INF4 = ClassFlag.INF4
INF2 = ClassFlag.INF2

ALL_FLAG_SETS = [ClassFlag(value) for value in range(1 << len(ClassFlag))]


def _is_reachable(flags: ClassFlag) -> bool:
    """Flag combinations the classifier can actually produce."""
    if AFFINE not in flags:
        return not flags & (LINEAR | ORTHO | INF0 | INF4)
    if INF0 in flags and INF4 not in flags:
        return False
    if INF4 in flags and INF2 not in flags:
        return False
    if ORTHO in flags and INF2 not in flags:
        return False
    return True


def _name_checking_t4_first(flags: ClassFlag, modulus: int) -> str:
    """The other observed ordering: T4 and CNOT are decided up front."""
    if AFFINE not in flags:
        return class_name(flags, modulus)
    if ORTHO in flags and LINEAR in flags and INF4 not in flags:
        return "T4"
    if INF2 not in flags:
        return "CNOT"
    if INF0 in flags:
        return {0: "EMPTY", 1: "NOT"}.get(modulus, "NOTNOT")
    if INF4 in flags:
        return {1: "T6+NOT", 2: "T6+NOTNOT"}.get(modulus, "T6")
    if ORTHO in flags:
        return {1: "F4+NOT", 2: "F4+NOTNOT"}.get(modulus, "F4")
    return "CNOTNOT+NOT" if modulus == 1 else "CNOTNOT"


class TestNonAffine:
    """Names for gates outside the affine branch."""

    def test_fredkin(self):
        assert class_name(ClassFlag(0), 0) == "FREDKIN"

    def test_fredkin_not(self):
        assert class_name(INF2, 1) == "FREDKIN+NOT"

    def test_all(self):
        assert class_name(ClassFlag(0), 1) == "ALL"

    @pytest.mark.parametrize("modulus", [2, 3, 4, 6, 12])
    def test_mod(self, modulus):
        assert class_name(ClassFlag(0), modulus) == f"MOD{modulus}"


class TestAffine:
    """Names for affine gates."""

    @pytest.mark.parametrize(
        "modulus,expected", [(0, "EMPTY"), (1, "NOT"), (2, "NOTNOT")]
    )
    def test_inf0(self, modulus, expected):
        flags = AFFINE | LINEAR | ORTHO | INF0 | INF4 | INF2
        assert class_name(flags, modulus) == expected

    @pytest.mark.parametrize(
        "modulus,expected", [(1, "T6+NOT"), (2, "T6+NOTNOT"), (4, "T6"), (0, "T6")]
    )
    def test_inf4(self, modulus, expected):
        assert class_name(AFFINE | INF4 | INF2 | ORTHO, modulus) == expected

    def test_t4_ignores_modulus(self):
        for modulus in (0, 1, 2, 4):
            assert class_name(AFFINE | LINEAR | ORTHO | INF2, modulus) == "T4"

    @pytest.mark.parametrize(
        "modulus,expected", [(1, "F4+NOT"), (2, "F4+NOTNOT"), (4, "F4")]
    )
    def test_f4(self, modulus, expected):
        assert class_name(AFFINE | ORTHO | INF2, modulus) == expected

    def test_cnotnot(self):
        assert class_name(AFFINE | INF2, 1) == "CNOTNOT+NOT"
        assert class_name(AFFINE | INF2, 2) == "CNOTNOT"
        assert class_name(AFFINE | LINEAR | INF2, 2) == "CNOTNOT"

    def test_cnot(self):
        assert class_name(AFFINE, 1) == "CNOT"
        assert class_name(AFFINE | LINEAR, 1) == "CNOT"


class TestTotality:
    """Every fingerprint reaches exactly one name."""

    @pytest.mark.parametrize("flags", ALL_FLAG_SETS, ids=lambda f: str(f.value))
    def test_every_combination_named(self, flags):
        for modulus in range(9):
            name = class_name(flags, modulus)
            if AFFINE in flags:
                assert name in AFFINE_CLASSES
                assert is_affine_class(name)
            else:
                assert name in NON_AFFINE_CLASSES or name == f"MOD{modulus}"
                assert not is_affine_class(name)

    def test_orderings_agree_on_reachable_fingerprints(self):
        reachable = [flags for flags in ALL_FLAG_SETS if _is_reachable(flags)]
        assert reachable
        for flags in reachable:
            for modulus in range(9):
                assert class_name(flags, modulus) == _name_checking_t4_first(flags, modulus)
