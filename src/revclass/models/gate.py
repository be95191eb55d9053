"""Gate model.

A gate is a function on n-bit integers given as a complete truth table:
``table[x]`` is the output for input ``x``. The model validates shape only;
whether the table is a bijection is decided by the classifier.
"""

from typing import Callable

from pydantic import BaseModel, Field, model_validator

MAX_BITS = 31  # Widest gate whose values fit a signed 32-bit word


class Gate(BaseModel):
    """An n-bit gate given by its truth table.

    Attributes:
        n: Bit-width of the gate.
        table: Output value for each input 0 .. 2^n - 1, in input order.
    """

    n: int = Field(ge=1, le=MAX_BITS, description="Bit-width")
    table: tuple[int, ...] = Field(description="Output for each input value")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_table_size(self) -> "Gate":
        if len(self.table) != self.size:
            raise ValueError(
                f"Truth table of a {self.n}-bit gate needs {self.size} entries, got {len(self.table)}"
            )
        return self

    @property
    def size(self) -> int:
        """Number of inputs in the domain (2^n)."""
        return 1 << self.n

    @classmethod
    def from_function(cls, n: int, func: Callable[[int], int]) -> "Gate":
        """Tabulates a Python callable over every n-bit input."""
        return cls(n=n, table=tuple(func(x) for x in range(1 << n)))
