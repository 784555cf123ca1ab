"""Pipeline components for reply parsing."""

from mailreply.pipeline.address import AddressParser, NormalizedAddress
from mailreply.pipeline.email import Email
from mailreply.pipeline.fragment import Fragment, FragmentBuilder
from mailreply.pipeline.normalizer import NormalizedEmail, Normalizer
from mailreply.pipeline.scanner import LineScanner
from mailreply.pipeline.visibility import VisibilityResolver

__all__ = [
    "AddressParser",
    "Email",
    "Fragment",
    "FragmentBuilder",
    "LineScanner",
    "NormalizedAddress",
    "NormalizedEmail",
    "Normalizer",
    "VisibilityResolver",
]
