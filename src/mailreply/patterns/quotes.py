"""Quote marker and reply header detection.

Reply headers are the attribution lines mail clients write above quoted
text, e.g. "On Tue, Mar 1, 2011 at 6:02 PM, Jane <jane@example.com> wrote:".
"""

import re

_QUOTE_MARKER_PATTERN = re.compile(r"^\s*>+")

_REPLY_HEADER_PATTERNS: tuple[re.Pattern[str], ...] = (
    # On <date>, <author> wrote:
    re.compile(r"^On(.+)wrote:$", re.DOTALL),
    # 2012/2/24 Jane Doe <jane@example.com>
    re.compile(r"^\d{4}/\d{1,2}/\d{1,2}\s+.{1,80}\s<[^@]+@[^@]+>$"),
)


def is_quoted_marker(line: str) -> bool:
    """Check if a line starts with one or more ``>`` quote markers.

    Leading whitespace before the first marker is ignored.
    """
    return _QUOTE_MARKER_PATTERN.match(line) is not None


def is_reply_header_line(line: str) -> bool:
    """Check if a line is a common reply header.

    Args:
        line: A single line of text.

    Returns:
        True if the line introduces quoted content.
    """
    return any(pattern.match(line) for pattern in _REPLY_HEADER_PATTERNS)
