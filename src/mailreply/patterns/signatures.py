"""Signature line detection.

A fragment is a signature when its topmost line looks like the start of
one. Two kinds of checks are made:
- Delimiter and phrase patterns ("--", "-Jane", "-----Original Message-----",
  "Sent from my iPhone")
- The sender's own name making up a large part of the line
"""

import re
from functools import lru_cache

DEFAULT_NAME_RATIO = 0.25

_SIGNATURE_PATTERNS: tuple[re.Pattern[str], ...] = (
    # Two or more hyphens or underscores alone on a line: "--", "___"
    re.compile(r"^\s*[-_]{2,}\s*$"),
    # One hyphen directly followed by a word: "-Sandro"
    re.compile(r"^\s*-\w"),
    # "-----Original Message-----" or a bare dash/underscore run
    re.compile(r"^[\s_-]+(Original Message)?[\s_-]+$"),
    # "Sent from my iPhone", up to three words, optional <link>
    re.compile(r"^Sent from my (\s*\w+){1,3}(\s*<.*>)?$"),
)

# Extra words, initials or periods allowed between name parts
_NAME_PART_SEPARATOR = r"[\w.\s]*"


@lru_cache(maxsize=128)
def _name_pattern(normalized_name: str) -> re.Pattern[str] | None:
    """Build a case-insensitive pattern matching the name's parts in order."""
    parts = normalized_name.split()
    if not parts:
        return None
    return re.compile(
        _NAME_PART_SEPARATOR.join(re.escape(part) for part in parts),
        re.IGNORECASE,
    )


def is_signature_name_line(
    line: str,
    normalized_name: str,
    name_ratio: float = DEFAULT_NAME_RATIO,
) -> bool:
    """Check if the sender's name is a big part of a line.

    "Jane Doe" matches "Jane Doe", "jane q. doe" and "Jane Quincy Doe".
    The line counts only if the name is more than ``name_ratio`` of the
    line's length, so a name mentioned inside a sentence is ignored.

    Args:
        line: A single line of text.
        normalized_name: Sender name in "First Last" order.
        name_ratio: Minimum share of the line the name must take up.

    Returns:
        True if the line looks like a sign-off with the sender's name.
    """
    if not normalized_name or not line:
        return False

    pattern = _name_pattern(normalized_name)
    if pattern is None or not pattern.search(line):
        return False

    return len(normalized_name) / len(line) > name_ratio


def is_signature_line(
    line: str,
    normalized_name: str = "",
    name_ratio: float = DEFAULT_NAME_RATIO,
) -> bool:
    """Check if a line is the beginning of a signature.

    Args:
        line: A single line of text.
        normalized_name: Sender name in "First Last" order, or empty to
            skip the name check.
        name_ratio: See is_signature_name_line.

    Returns:
        True if the line starts a signature block.
    """
    if any(pattern.match(line) for pattern in _SIGNATURE_PATTERNS):
        return True

    return is_signature_name_line(line, normalized_name, name_ratio)
