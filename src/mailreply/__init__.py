"""mailreply - Split plain-text email replies into visible, quoted and signature fragments."""

from mailreply.exceptions import InvalidInputError, ReplyParserError
from mailreply.parser import ReplyParser, parse_reply, read
from mailreply.pipeline import (
    AddressParser,
    Email,
    Fragment,
    FragmentBuilder,
    LineScanner,
    NormalizedAddress,
    NormalizedEmail,
    Normalizer,
    VisibilityResolver,
)

__version__ = "0.1.0"

__all__ = [
    "AddressParser",
    "Email",
    "Fragment",
    "FragmentBuilder",
    "InvalidInputError",
    "LineScanner",
    "NormalizedAddress",
    "NormalizedEmail",
    "Normalizer",
    "ReplyParser",
    "ReplyParserError",
    "VisibilityResolver",
    "parse_reply",
    "read",
]
