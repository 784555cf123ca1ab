"""Text normalization for plain-text email bodies.

Handles:
- Line ending normalization
- Folding "On <date>, <author> wrote:" headers that clients wrap over
  several lines
- Separating underline delimiters from the text directly above them
"""

import re
from dataclasses import dataclass

# A reply header span runs from the first line starting "On " to the last
# "wrote:" ending a line. Each end is found in its own linear pass.
_REPLY_HEADER_START_PATTERN = re.compile(r"^On\s", re.MULTILINE)
_REPLY_HEADER_END_PATTERN = re.compile(r"wrote:$", re.MULTILINE)

# A non-empty line sitting directly on top of a line of 7+ underscores
_UNDERLINE_DELIMITER_PATTERN = re.compile(r"([^\n])(?=\n_{7,}[ \t]*$)", re.MULTILINE)


@dataclass(frozen=True, slots=True)
class NormalizedEmail:
    """Result of normalizing an email body.

    Attributes:
        lines: Normalized lines (without line endings).
        text: Full normalized text with newlines.
        reply_header_folded: Whether a multi-line reply header was folded.
    """

    lines: tuple[str, ...]
    text: str
    reply_header_folded: bool


class Normalizer:
    """Normalizes email body text for line scanning.

    Applies the following transformations:
    1. Line ending normalization (CRLF/CR → LF)
    2. Multi-line "On ... wrote:" folding (at most once)
    3. Blank line insertion above underline delimiters
    """

    def normalize(self, text: str) -> NormalizedEmail:
        """Normalize email body text.

        Args:
            text: Decoded email body.

        Returns:
            NormalizedEmail with normalized lines and text. Empty input
            gives an empty tuple of lines.
        """
        # Normalize line endings: CRLF and CR to LF
        text = text.replace("\r\n", "\n").replace("\r", "\n")

        text, folded = self._fold_reply_header(text)

        text = _UNDERLINE_DELIMITER_PATTERN.sub("\\1\n", text)

        lines = tuple(text.split("\n")) if text else ()

        return NormalizedEmail(lines=lines, text=text, reply_header_folded=folded)

    def _fold_reply_header(self, text: str) -> tuple[str, bool]:
        """Join a reply header broken over several lines into one line.

        Some clients wrap "On DATE, NAME <EMAIL> wrote:" across lines. A
        matched span containing a blank line is not a header and is left
        alone.

        Args:
            text: Text with normalized line endings.

        Returns:
            Tuple of (possibly folded text, whether a fold was applied).
        """
        # Keep the last match
        end_match = None
        for end_match in _REPLY_HEADER_END_PATTERN.finditer(text):
            pass
        if end_match is None:
            return text, False

        start_match = _REPLY_HEADER_START_PATTERN.search(text, 0, end_match.start())
        # At least one character must sit between "On " and "wrote:"
        if start_match is None or start_match.end() >= end_match.start():
            return text, False

        start, end = start_match.start(), end_match.end()
        span = text[start:end]
        if "\n" not in span or "\n\n" in span:
            return text, False

        folded = span.replace("\n", " ")
        return text[:start] + folded + text[end:], True
