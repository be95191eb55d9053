"""Classifiers for reversible gates"""

from .classifier import analyze_gate, classify, classify_gate
from .naming import AFFINE_CLASSES, NON_AFFINE_CLASSES, class_name

__all__ = [
    "analyze_gate",
    "classify",
    "classify_gate",
    "class_name",
    "AFFINE_CLASSES",
    "NON_AFFINE_CLASSES",
]
