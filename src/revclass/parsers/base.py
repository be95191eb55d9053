"""Base parser module with shared file handling.

Provides the abstract base class for all truth table parsers, including
transparent handling of gzip-compressed input.
"""

import gzip
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Generic, TextIO, TypeVar

T = TypeVar("T")


class BaseParser(ABC, Generic[T]):
    """Abstract base class for all truth table parsers.

    Attributes:
        Generic[T]: The type of the model returned by the parser (e.g., list[Gate]).
    """

    def _open_text(self, path: Path, encoding: str = "utf-8", errors: str = "strict") -> TextIO:
        """Opens a file for line-by-line reading, handling .gz compression.

        Args:
            path: Path to the file.
            encoding: Text encoding (default: utf-8).
            errors: Error handling scheme for encoding errors (default: strict).

        Returns:
            A text-mode file object. The caller is responsible for closing it.
        """
        if path.suffix == ".gz":
            return gzip.open(path, mode="rt", encoding=encoding, errors=errors)
        return open(path, mode="r", encoding=encoding, errors=errors)

    @abstractmethod
    def parse(self, path: Path) -> T:
        """Parses a file from a given path.

        Args:
            path: Path to the truth table file.

        Returns:
            The parsed and validated data model.
        """
        ...

    @abstractmethod
    def parse_string(self, content: str) -> T:
        """Parses content held in a string.

        Args:
            content: The raw content string.

        Returns:
            The parsed and validated data model.
        """
        ...
