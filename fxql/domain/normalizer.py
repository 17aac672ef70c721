"""FXQL input normalization and offset-to-position lookup."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass

_DOMAIN_FXQL_ESCAPED_LINE_BREAK = "\\n"


@dataclass(frozen=True)
class NormalizedSource:
    """Normalized FXQL text with indexed line boundaries.

    Attributes:
        text: Source text with escaped line breaks replaced by real ones.
        line_starts: Absolute offsets at which each line begins.
    """

    text: str
    line_starts: tuple[int, ...]

    @property
    def line_count(self) -> int:
        """Return number of indexed lines."""

        return len(self.line_starts)

    def position(self, offset: int) -> tuple[int, int]:
        """Map one absolute offset to its line and column.

        Args:
            offset: Absolute character offset into normalized text.

        Returns:
            tuple[int, int]: 1-based line number and 0-based column.

        Raises:
            ValueError: Raised when offset lies outside normalized text.
        """

        if offset < 0 or offset > len(self.text) or not self.line_starts:
            raise ValueError(f"offset {offset} is outside normalized text")

        line_index = bisect_right(self.line_starts, offset) - 1
        return line_index + 1, offset - self.line_starts[line_index]


def domain_fxql_normalize_source(raw_text: str) -> NormalizedSource:
    """Replace escaped line breaks and index line starts.

    Clients that cannot send literal control characters may submit the
    two-character sequence backslash + `n` instead of a line break.

    Args:
        raw_text: FXQL text as received.

    Returns:
        NormalizedSource: Normalized text and line index. Empty input yields
        zero lines.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    text = raw_text.replace(_DOMAIN_FXQL_ESCAPED_LINE_BREAK, "\n")
    if not text:
        return NormalizedSource(text="", line_starts=())

    line_starts = [0]
    line_starts.extend(index + 1 for index, character in enumerate(text) if character == "\n")
    return NormalizedSource(text=text, line_starts=tuple(line_starts))
