"""Parsed email aggregate."""

from collections.abc import Iterator
from dataclasses import dataclass

from mailreply.pipeline.fragment import Fragment


@dataclass(frozen=True, slots=True)
class Email:
    """A parsed email body.

    Attributes:
        fragments: Fragments in top-to-bottom order.
    """

    fragments: tuple[Fragment, ...]

    @property
    def visible_text(self) -> str:
        """Combined text of the fragments that are not hidden."""
        return "\n".join(f.content for f in self.fragments if not f.hidden).rstrip()

    @property
    def visible_fragments(self) -> tuple[Fragment, ...]:
        return tuple(f for f in self.fragments if not f.hidden)

    @property
    def hidden_fragments(self) -> tuple[Fragment, ...]:
        return tuple(f for f in self.fragments if f.hidden)

    def __len__(self) -> int:
        return len(self.fragments)

    def __iter__(self) -> Iterator[Fragment]:
        return iter(self.fragments)
