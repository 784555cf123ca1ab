"""Email fragments.

A fragment is a run of lines sharing one classification: original text,
quoted text, or a signature. Scanning runs from the bottom of the email to
the top, so lines reach a FragmentBuilder in reverse order. finish() seals
the builder into an immutable Fragment.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Fragment:
    """A finished fragment of an email body.

    Attributes:
        content: The fragment's lines joined with newlines, top to bottom.
        quoted: Text reproduced from an earlier message.
        signature: A trailing sign-off block.
        reply_header: Carries a client-written reply header.
        hidden: Excluded from the email's visible text.
    """

    content: str
    quoted: bool = False
    signature: bool = False
    reply_header: bool = False
    hidden: bool = False

    @property
    def lines(self) -> tuple[str, ...]:
        """The fragment's lines, top to bottom."""
        return tuple(self.content.split("\n"))

    def __str__(self) -> str:
        return self.content


class FragmentBuilder:
    """Accumulates lines for one fragment while scanning bottom to top.

    Lines are stored in the order they arrive (bottom first) and reversed
    when read, so each add_line() places the line above everything added
    before it.
    """

    def __init__(self, quoted: bool = False) -> None:
        self.quoted = quoted
        self.signature = False
        self.reply_header = False

        self._lines: list[str] = []
        # Lines since the last blank line, bottom first
        self._current_block: list[str] = []
        self._finished = False

    def add_line(self, line: str) -> None:
        """Add a line above all previously added lines.

        An empty line starts a new current block.
        """
        self._lines.append(line)
        if line == "":
            self._current_block.clear()
        else:
            self._current_block.append(line)

    @property
    def first_line(self) -> str | None:
        """The most recently added line, i.e. the topmost one so far."""
        return self._lines[-1] if self._lines else None

    @property
    def current_block(self) -> str:
        """Lines above the most recent blank line, joined top to bottom."""
        return "\n".join(reversed(self._current_block))

    def finish(self) -> Fragment:
        """Seal the builder into a Fragment.

        Returns:
            The immutable fragment. ``hidden`` is left False; visibility is
            decided by the caller.

        Raises:
            RuntimeError: If the builder was already finished.
        """
        if self._finished:
            raise RuntimeError("Fragment already finished")

        content = "\n".join(reversed(self._lines))
        self._lines = []
        self._current_block = []
        self._finished = True

        return Fragment(
            content=content,
            quoted=self.quoted,
            signature=self.signature,
            reply_header=self.reply_header,
        )
