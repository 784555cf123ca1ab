"""Exceptions for mailreply."""

from dataclasses import dataclass


class ReplyParserError(Exception):
    """Base exception for all reply parsing errors."""

    pass


@dataclass
class InvalidInputError(ReplyParserError):
    """Input is not text.

    Raised when the body or the sender address is not a ``str``.
    Byte strings must be decoded by the caller before parsing.
    """

    message: str

    def __str__(self) -> str:
        return self.message
