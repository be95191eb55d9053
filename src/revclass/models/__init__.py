"""Data models for gates and their classification"""

from .classification import NO_FLAGS, ClassFlag, ClassificationResult
from .export import ExportedClassification
from .gate import MAX_BITS, Gate

__all__ = [
    "MAX_BITS",
    "Gate",
    "ClassFlag",
    "NO_FLAGS",
    "ClassificationResult",
    "ExportedClassification",
]
