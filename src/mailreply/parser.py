"""ReplyParser - Main public interface for reply parsing.

Provides two entry points:
- read(): Full Email with every fragment and its flags
- parse_reply(): Just the visible text
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType

from mailreply.exceptions import InvalidInputError
from mailreply.patterns.headers import DEFAULT_QUOTE_HEADER_GROUPS
from mailreply.patterns.signatures import DEFAULT_NAME_RATIO
from mailreply.pipeline.address import AddressParser
from mailreply.pipeline.email import Email
from mailreply.pipeline.normalizer import Normalizer
from mailreply.pipeline.scanner import LineScanner

logger = logging.getLogger(__name__)


class ReplyParser:
    """Splits plain-text email bodies into quoted, signature and visible fragments.

    The parsing pipeline:
    1. Parse the sender address for the name-based signature check
    2. Normalize text (line endings, wrapped reply headers, underlines)
    3. Scan lines bottom to top into fragments
    4. Hide fragments below the last block of original content

    A parser only holds configuration, so one instance can be shared
    between threads.

    Example:
        parser = ReplyParser()

        # Visible text only
        text = parser.parse_reply(body, from_address='"Jane Doe" <jane@example.com>')

        # Every fragment
        email = parser.read(body)
        for fragment in email.fragments:
            print(fragment.quoted, fragment.hidden, fragment.content)
    """

    def __init__(
        self,
        *,
        name_ratio: float = DEFAULT_NAME_RATIO,
        quote_header_groups: int = DEFAULT_QUOTE_HEADER_GROUPS,
        quote_header_labels: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize the parser.

        Args:
            name_ratio: Minimum share of a line the sender's name must take
                up for the line to start a signature.
            quote_header_groups: Distinct label groups (From, To, Date, ...)
                that make a block a client-written quote header.
            quote_header_labels: Replacement label -> group table. Labels
                are matched case-insensitively. Defaults to the packaged
                English, French, Spanish and Portuguese table.

        Raises:
            ValueError: If a threshold is out of range.
        """
        if not 0 <= name_ratio < 1:
            raise ValueError(f"name_ratio must be in [0, 1), got {name_ratio}")
        if quote_header_groups < 1:
            raise ValueError(f"quote_header_groups must be positive, got {quote_header_groups}")

        self._name_ratio = name_ratio
        self._quote_header_groups = quote_header_groups
        self._quote_header_labels: Mapping[str, str] | None = None
        if quote_header_labels is not None:
            self._quote_header_labels = MappingProxyType(
                {label.lower(): group for label, group in quote_header_labels.items()}
            )

        self._normalizer = Normalizer()
        self._address_parser = AddressParser()

    def read(self, body: str | None, from_address: str | None = "") -> Email:
        """Split an email body into fragments.

        Args:
            body: Decoded plain-text email body.
            from_address: Sender address such as ``Jane Doe <jane@example.com>``.

        Returns:
            Email with fragments in top-to-bottom order.

        Raises:
            InvalidInputError: If body or from_address is not text.
        """
        body = self._ensure_text(body, "body")
        from_address = self._ensure_text(from_address, "from_address")

        address = self._address_parser.parse(from_address)
        normalized = self._normalizer.normalize(body)

        scanner = LineScanner(
            address.normalized_name,
            name_ratio=self._name_ratio,
            quote_header_labels=self._quote_header_labels,
            quote_header_groups=self._quote_header_groups,
        )
        email = Email(fragments=scanner.scan(normalized.lines))

        logger.debug(
            "Parsed %d lines into %d fragments (%d hidden, reply header folded=%s)",
            len(normalized.lines),
            len(email.fragments),
            len(email.hidden_fragments),
            normalized.reply_header_folded,
        )
        return email

    def parse_reply(self, body: str | None, from_address: str | None = "") -> str:
        """Get the visible text of an email body.

        Args:
            body: Decoded plain-text email body.
            from_address: Sender address, optional.

        Returns:
            The text the sender wrote, without quoted replies or signatures.

        Raises:
            InvalidInputError: If body or from_address is not text.
        """
        return self.read(body, from_address).visible_text

    @staticmethod
    def _ensure_text(value: str | None, name: str) -> str:
        if value is None:
            return ""
        if not isinstance(value, str):
            raise InvalidInputError(
                message=f"{name} must be str, got {type(value).__name__}; decode bytes before parsing"
            )
        return value


_default_parser = ReplyParser()


def read(body: str | None, from_address: str | None = "") -> Email:
    """Split an email body into fragments with the default parser."""
    return _default_parser.read(body, from_address)


def parse_reply(body: str | None, from_address: str | None = "") -> str:
    """Get the visible text of an email body with the default parser."""
    return _default_parser.parse_reply(body, from_address)
