"""Parsers for truth table streams"""

from .base import BaseParser
from .truth_table import TruthTableParser

__all__ = [
    "BaseParser",
    "TruthTableParser",
]
