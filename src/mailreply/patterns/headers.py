"""Multi-line quote header detection.

Outlook and friends introduce quoted text with a block such as:

    From: Jane Doe [mailto:jane@example.com]
    Sent: Monday, February 13, 2012 10:00 AM
    To: John Smith
    Subject: Project status

Labels may be bolded (``*From:*``) and translated. The label table lives
in quote_header_labels.yaml next to this module.
"""

import logging
import re
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

import yaml

logger = logging.getLogger(__name__)

DEFAULT_QUOTE_HEADER_GROUPS = 3

_LABELS_PATH = Path(__file__).parent / "quote_header_labels.yaml"

# "label: value" or "*label:* value"
_LABEL_PREFIX_PATTERN = re.compile(r"^\s*\*?([^:]+):(\s|\*)")


def _load_labels_data(path: Path) -> dict[str, list[str]]:
    """Load the group -> labels table from YAML."""
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


@lru_cache(maxsize=1)
def load_quote_header_labels() -> Mapping[str, str]:
    """Get the packaged label table.

    Returns:
        Read-only mapping of lowercased label to its group name
        (``from``, ``to``, ``cc``, ``reply_to``, ``date`` or ``subject``).
    """
    data = _load_labels_data(_LABELS_PATH)

    labels: dict[str, str] = {}
    for group, names in data.items():
        for name in names:
            labels[str(name).lower()] = str(group)

    logger.debug("Loaded %d quote header labels from %s", len(labels), _LABELS_PATH)
    return MappingProxyType(labels)


def is_multiline_quote_header(
    block: str,
    labels: Mapping[str, str] | None = None,
    required_groups: int = DEFAULT_QUOTE_HEADER_GROUPS,
) -> bool:
    """Check if a block of lines is a client-generated quote header.

    Lines are read top to bottom. The first line must carry a known
    label. A line without a known label is accepted only as a folded
    continuation of the line above it. Each label group may appear once.

    Args:
        block: Newline-joined lines with no blank line among them.
        labels: Lowercased label -> group mapping. Defaults to the
            packaged table.
        required_groups: Number of distinct groups that make a header.

    Returns:
        True once ``required_groups`` distinct groups have been seen.
    """
    if labels is None:
        labels = load_quote_header_labels()

    folding = False
    seen_groups: list[str] = []

    for line in block.split("\n"):
        match = _LABEL_PREFIX_PATTERN.match(line)
        # French puts a space before the colon: "De : Jean"
        group = labels.get(match.group(1).strip().lower()) if match else None

        if group is None:
            if not folding:
                return False
            continue

        if group in seen_groups:
            return False
        seen_groups.append(group)
        if len(seen_groups) >= required_groups:
            return True
        folding = True

    return False
