"""Line scanner splitting an email body into fragments.

Lines are read from the bottom of the email to the top. That way a reply
header such as "On <date>, <author> wrote:" is met right after the quoted
block it introduces and can be folded into it, and hidden fragments can be
decided in a single pass.
"""

import logging
from collections.abc import Mapping, Sequence

from mailreply.patterns.headers import DEFAULT_QUOTE_HEADER_GROUPS, is_multiline_quote_header
from mailreply.patterns.quotes import is_quoted_marker, is_reply_header_line
from mailreply.patterns.signatures import DEFAULT_NAME_RATIO, is_signature_line
from mailreply.pipeline.fragment import Fragment, FragmentBuilder
from mailreply.pipeline.visibility import VisibilityResolver

logger = logging.getLogger(__name__)


class LineScanner:
    """Bottom-up state machine producing finished fragments.

    A scanner holds per-parse state and is not meant to be shared between
    threads. Each call to scan() starts from a clean state.
    """

    def __init__(
        self,
        normalized_name: str = "",
        *,
        name_ratio: float = DEFAULT_NAME_RATIO,
        quote_header_labels: Mapping[str, str] | None = None,
        quote_header_groups: int = DEFAULT_QUOTE_HEADER_GROUPS,
    ) -> None:
        """Initialize the scanner.

        Args:
            normalized_name: Sender name for the name-based signature check.
            name_ratio: Minimum share of a line the sender name must take up.
            quote_header_labels: Label -> group table for quote headers.
            quote_header_groups: Distinct label groups that make a header.
        """
        self._normalized_name = normalized_name
        self._name_ratio = name_ratio
        self._quote_header_labels = quote_header_labels
        self._quote_header_groups = quote_header_groups

        self._fragment: FragmentBuilder | None = None
        self._visibility = VisibilityResolver()
        self._finished: list[Fragment] = []

    def scan(self, lines: Sequence[str]) -> tuple[Fragment, ...]:
        """Split normalized lines into fragments.

        Args:
            lines: Normalized lines, top to bottom.

        Returns:
            Finished fragments, top to bottom.
        """
        self._fragment = None
        self._visibility.reset()
        self._finished = []

        for index in range(len(lines) - 1, -1, -1):
            self._scan_line(lines[index], last=index == 0)

        self._finish_fragment()

        fragments = tuple(reversed(self._finished))
        self._finished = []
        return fragments

    def _scan_line(self, line: str, last: bool) -> None:
        """Add one line to the current fragment or start a new one."""
        line = line.rstrip()

        # A blank line closes the block above it: the block may turn out
        # to be a signature or a quote header.
        if self._fragment is not None and line == "":
            self._check_boundary()

        is_quoted = is_quoted_marker(line)

        fragment = self._fragment
        if fragment is None or not self._continues(fragment, line, is_quoted):
            self._finish_fragment()
            fragment = self._fragment = FragmentBuilder(quoted=is_quoted)
        elif fragment.quoted and not is_quoted and line:
            fragment.reply_header = True

        fragment.add_line(line)

        # Nothing above the first line will close its block
        if last:
            self._check_boundary()

    def _continues(self, fragment: FragmentBuilder, line: str, is_quoted: bool) -> bool:
        """Check if a line belongs to the fragment being built.

        A reply header or blank line above a quoted fragment is part of it
        even though it has no quote marker.
        """
        if fragment.quoted == is_quoted:
            return True
        return fragment.quoted and (line == "" or is_reply_header_line(line))

    def _check_boundary(self) -> None:
        """Finish the current fragment if its top block is a signature or header."""
        fragment = self._fragment
        if fragment is None:
            return

        first_line = fragment.first_line or ""
        if is_signature_line(first_line, self._normalized_name, self._name_ratio):
            fragment.signature = True
            self._finish_fragment()
        elif is_multiline_quote_header(
            fragment.current_block,
            self._quote_header_labels,
            self._quote_header_groups,
        ):
            fragment.quoted = True
            fragment.reply_header = True
            self._finish_fragment()

    def _finish_fragment(self) -> None:
        """Seal the current fragment and decide whether it is hidden."""
        if self._fragment is None:
            return

        fragment = self._visibility.resolve(self._fragment.finish())
        self._fragment = None
        self._finished.append(fragment)

        logger.debug(
            "Finished fragment %d: quoted=%s signature=%s reply_header=%s hidden=%s",
            len(self._finished),
            fragment.quoted,
            fragment.signature,
            fragment.reply_header,
            fragment.hidden,
        )
