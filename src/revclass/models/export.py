"""Pydantic models for the RevClass JSON export format.

One ``ExportedClassification`` is written per gate (JSON Lines) by
``revclass classify --json``.
"""

from pydantic import BaseModel, Field

from .classification import ClassificationResult


class ExportedClassification(BaseModel):
    """Exported classification of a single gate."""

    index: int = Field(description="0-based position of the gate in the input stream")
    n: int = Field(description="Bit-width")
    name: str = Field(description="Class name")
    flags: list[str] = Field(default_factory=list, description="Invariant flags set")
    modulus: int = Field(default=0, description="Hamming-weight modulus")

    @classmethod
    def from_result(cls, index: int, result: ClassificationResult) -> "ExportedClassification":
        return cls(
            index=index,
            n=result.n,
            name=result.name,
            flags=result.flags.names,
            modulus=result.modulus,
        )
