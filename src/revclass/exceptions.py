"""RevClass Exceptions.

This module defines custom exceptions for the RevClass framework. Every error
is fatal for the gate being read: there is no partial or best-effort result.
"""

from typing import Optional


class RevClassError(Exception):
    """Base class for all RevClass errors."""


class NonReversibleGate(RevClassError):
    """Raised when a truth table is not a bijection on its domain.

    Attributes:
        n: Bit-width of the rejected gate.
    """

    def __init__(self, n: int):
        self.n = n
        super().__init__("Non-reversible gate.")


class TruthTableFormatError(RevClassError):
    """Base class for malformed truth table streams.

    Attributes:
        line_no: 1-based line number where the problem was detected, if known.
    """

    def __init__(self, message: str, line_no: Optional[int] = None):
        self.line_no = line_no
        if line_no is not None:
            message = f"Line {line_no}: {message}"
        super().__init__(message)


class MalformedRow(TruthTableFormatError):
    """Raised when a row's input or output width disagrees with the gate width.

    Attributes:
        column: Which side of the row is wrong ("input" or "output").
        length: Length of the offending binary string.
        expected: Bit-width established by the first row of the gate.
    """

    def __init__(self, column: str, length: int, expected: int, line_no: Optional[int] = None):
        self.column = column
        self.length = length
        self.expected = expected
        super().__init__(
            f"{column.capitalize()} length does not match gate size ({length} != {expected}).",
            line_no,
        )


class DuplicateRow(TruthTableFormatError):
    """Raised when the same input value appears twice within one gate."""

    def __init__(self, bits: str, line_no: Optional[int] = None):
        self.bits = bits
        super().__init__(f"Duplicate row for input {bits}.", line_no)


class GateTooWide(TruthTableFormatError):
    """Raised when a gate is wider than the supported bit-width."""

    def __init__(self, width: int, limit: int, line_no: Optional[int] = None):
        self.width = width
        self.limit = limit
        super().__init__(f"Gate width {width} exceeds the supported maximum of {limit}.", line_no)


class TruncatedStream(TruthTableFormatError):
    """Raised when input ends while a gate is only partially populated.

    Attributes:
        rows: Number of rows collected for the pending gate.
        expected: Number of rows a complete gate of that width needs.
    """

    def __init__(self, rows: int, expected: int):
        self.rows = rows
        self.expected = expected
        super().__init__(
            f"End of file in the middle of a gate ({rows} of {expected} rows)."
        )
