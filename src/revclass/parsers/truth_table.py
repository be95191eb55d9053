"""Truth table stream parser using Lark.

A stream holds any number of gates, one row per line. A row is two binary
strings (input and output) separated by non-binary characters; any other
line is ignored. The width of a gate is fixed by the first row read since the
previous gate completed, and the gate completes once all 2^n inputs have a
row. Rows may appear in any order.

Gates are produced lazily so that a caller can classify and report each one
before later (possibly malformed) input is read.
"""

import functools
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Optional

from lark import Lark, Transformer
from lark.exceptions import UnexpectedInput

from ..exceptions import DuplicateRow, GateTooWide, MalformedRow, TruncatedStream
from ..models.gate import MAX_BITS, Gate
from .base import BaseParser

logger = logging.getLogger(__name__)

# Load grammar from file (relative to this module)
GRAMMAR_PATH = Path(__file__).parent / "truth_table.lark"


@functools.cache
def _get_lark_parser() -> Lark:
    """Returns a cached Lark parser instance for single rows."""
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", maybe_placeholders=False)


class RowTransformer(Transformer):
    """Transforms a row parse tree into an (input bits, output bits) pair."""

    def start(self, items) -> tuple[str, str]:
        return str(items[0]), str(items[1])


class TruthTableParser(BaseParser[list[Gate]]):
    """Parser for line-oriented truth table streams."""

    def __init__(self):
        self._parser = _get_lark_parser()
        self._transformer = RowTransformer()

    def match_row(self, line: str) -> Optional[tuple[str, str]]:
        """Extracts the (input, output) bit strings of a row.

        Returns:
            The pair of binary strings, or None if the line is not a row.
        """
        try:
            tree = self._parser.parse(line)
        except UnexpectedInput:
            return None
        return self._transformer.transform(tree)

    def iter_gates(self, lines: Iterable[str]) -> Iterator[Gate]:
        """Yields each gate of a stream as soon as its last row is read.

        Args:
            lines: The stream, one row per item (line endings are allowed).

        Yields:
            Completed gates, in stream order.

        Raises:
            GateTooWide: If a gate's first row is wider than MAX_BITS.
            MalformedRow: If a row's width differs from its gate's width.
            DuplicateRow: If an input value repeats within one gate.
            TruncatedStream: If the stream ends in the middle of a gate.
        """
        width = 0
        rows: dict[int, int] = {}

        for line_no, line in enumerate(lines, start=1):
            row = self.match_row(line)
            if row is None:
                logger.debug(f"Skipping line {line_no}: {line.rstrip()!r}")
                continue

            bits_in, bits_out = row
            if not width:
                width = len(bits_in)
                if width > MAX_BITS:
                    raise GateTooWide(width, MAX_BITS, line_no)

            if len(bits_in) != width:
                raise MalformedRow("input", len(bits_in), width, line_no)
            if len(bits_out) != width:
                raise MalformedRow("output", len(bits_out), width, line_no)

            x = int(bits_in, 2)
            if x in rows:
                raise DuplicateRow(bits_in, line_no)
            rows[x] = int(bits_out, 2)

            if len(rows) == 1 << width:
                logger.debug(f"Completed {width}-bit gate at line {line_no}")
                yield Gate(n=width, table=tuple(rows[i] for i in range(len(rows))))
                width = 0
                rows = {}

        if rows:
            raise TruncatedStream(len(rows), 1 << width)

    def iter_file(self, path: Path) -> Iterator[Gate]:
        """Yields the gates of a (possibly gzip-compressed) file lazily."""
        logger.info(f"Reading truth tables from {path}")
        with self._open_text(path, errors="replace") as f:
            yield from self.iter_gates(f)

    def parse(self, path: Path) -> list[Gate]:
        """Parses every gate in a file.

        Args:
            path: Path to the truth table file.

        Returns:
            The gates, in file order.
        """
        return list(self.iter_file(path))

    def parse_string(self, content: str) -> list[Gate]:
        """Parses every gate in a string.

        Args:
            content: The truth table text.

        Returns:
            The gates, in stream order.
        """
        logger.debug(f"Parsing content string, length: {len(content)}")
        return list(self.iter_gates(content.splitlines()))
