"""Pytest configuration and fixtures.

Provides reference gates covering every class family, helpers to build affine
gates and truth table text, and a CLI runner shared across multiple tests.
"""

from collections.abc import Callable, Sequence

import pytest
from typer.testing import CliRunner

from revclass.models.gate import Gate


def _parity(x: int) -> int:
    return x.bit_count() & 1


def _toffoli(x: int) -> int:
    # (a, b, c) -> (a, b, c ^ ab) with a, b the two low bits
    return x ^ 0b100 if x & 0b011 == 0b011 else x


def _fredkin(x: int) -> int:
    # Swap the two low bits when the high bit is set
    if x & 0b100 and (x & 1) != ((x >> 1) & 1):
        return x ^ 0b011
    return x


def _swap_values(a: int, b: int) -> Callable[[int], int]:
    return lambda x: b if x == a else a if x == b else x


def _tn(n: int) -> Callable[[int], int]:
    # T_n: every bit is XORed with the parity of the whole word
    mask = (1 << n) - 1
    return lambda x: x ^ mask if _parity(x) else x


@pytest.fixture
def runner():
    """Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def reference_gates() -> dict[str, Gate]:
    """One known gate per class name, keyed by the expected class.

    - Trivial affine: identity, SWAP, NOT, NOTNOT.
    - Linear parts with column weights 1 (mod 2) / (mod 4): CNOTNOT, T4, T6,
      each also composed with constant NOTs to move the modulus.
    - Non-affine: Toffoli, Fredkin, Fredkin followed by NOT on every wire,
      and weight-class swaps producing MOD2 / MOD4.
    """
    t4 = _tn(4)
    t6 = _tn(6)

    def cnotnot(x: int) -> int:
        return x ^ 0b110 if x & 1 else x

    return {
        "EMPTY": Gate.from_function(2, _swap_values(1, 2)),
        "NOT": Gate(n=1, table=(1, 0)),
        "NOTNOT": Gate.from_function(2, lambda x: x ^ 0b11),
        "CNOT": Gate(n=2, table=(0, 1, 3, 2)),
        "CNOTNOT": Gate.from_function(3, cnotnot),
        "CNOTNOT+NOT": Gate.from_function(3, lambda x: cnotnot(x) ^ 1),
        "T4": Gate.from_function(4, t4),
        "F4": Gate.from_function(4, lambda x: t4(x) ^ 0b1111),
        "F4+NOT": Gate.from_function(4, lambda x: t4(x) ^ 1),
        "F4+NOTNOT": Gate.from_function(4, lambda x: t4(x) ^ 0b11),
        "T6": Gate.from_function(6, t6),
        "T6+NOT": Gate.from_function(6, lambda x: t6(x) ^ 1),
        "T6+NOTNOT": Gate.from_function(6, lambda x: t6(x) ^ 0b11),
        "ALL": Gate.from_function(3, _toffoli),
        "FREDKIN": Gate.from_function(3, _fredkin),
        "FREDKIN+NOT": Gate.from_function(3, lambda x: _fredkin(x) ^ 0b111),
        "MOD2": Gate.from_function(3, _swap_values(0b000, 0b011)),
        "MOD4": Gate.from_function(4, _swap_values(0b0000, 0b1111)),
    }


@pytest.fixture
def make_affine() -> Callable[[Sequence[int], int], Gate]:
    """Builds the affine gate x -> A x XOR offset from the columns of A."""

    def build(columns: Sequence[int], offset: int = 0) -> Gate:
        def apply(x: int) -> int:
            y = offset
            for i, column in enumerate(columns):
                if (x >> i) & 1:
                    y ^= column
            return y

        return Gate.from_function(len(columns), apply)

    return build


@pytest.fixture
def table_text() -> Callable[[Gate], str]:
    """Renders a gate as truth table text, one 'input output' row per line."""

    def render(gate: Gate) -> str:
        return "".join(
            f"{x:0{gate.n}b} {y:0{gate.n}b}\n" for x, y in enumerate(gate.table)
        )

    return render
