"""Sender address parsing.

Pulls a display name and an email address out of a ``Name <email>``
string. The name feeds the name-based signature heuristic only, so a
malformed address simply yields an empty name.
"""

import re
from dataclasses import dataclass

# Display name: everything before "<", minus surrounding quotes
_DISPLAY_NAME_PATTERN = re.compile(r"""^\s*["']*(.*?)["']*\s*<""")

_ANGLE_ADDRESS_PATTERN = re.compile(r"<(.*)>")


@dataclass(frozen=True, slots=True)
class NormalizedAddress:
    """A sender address split into its parts.

    Attributes:
        raw_name: Display name as written, or empty if there is none.
        normalized_name: Display name reordered to "First Last".
        email: The address inside angle brackets, or the whole input.
    """

    raw_name: str
    normalized_name: str
    email: str


def normalize_name(name: str) -> str:
    """Normalize a display name to "First Last".

    "Doe, Jane" becomes "Jane Doe". When the part before the comma
    already contains a space ("Jane Doe, PhD") that part is used as-is.

    Args:
        name: Raw display name.

    Returns:
        The reordered name, or the input unchanged if it has no comma.
    """
    if "," not in name:
        return name

    parts = name.split(",")
    if " " in parts[0]:
        return parts[0]

    return f"{parts[1].strip()} {parts[0].strip()}".strip()


class AddressParser:
    """Parses the optional ``from_address`` passed alongside a body."""

    def parse(self, address: str | None) -> NormalizedAddress:
        """Split an address into raw name, normalized name and email.

        Args:
            address: A string such as ``"Doe, Jane" <jane@example.com>``.

        Returns:
            NormalizedAddress. Missing parts are empty strings.
        """
        if not address:
            return NormalizedAddress(raw_name="", normalized_name="", email="")

        name_match = _DISPLAY_NAME_PATTERN.match(address)
        raw_name = name_match.group(1).strip() if name_match else ""

        email_match = _ANGLE_ADDRESS_PATTERN.search(address)
        email = email_match.group(1) if email_match else address

        return NormalizedAddress(
            raw_name=raw_name,
            normalized_name=normalize_name(raw_name),
            email=email,
        )
