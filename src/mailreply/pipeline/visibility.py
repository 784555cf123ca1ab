"""Hidden fragment detection.

Fragments are resolved in the order the scanner finishes them, bottom of
the email first. Quoted text, signatures, reply headers and blank
fragments are hidden until the first fragment of original content is
seen. Everything above that fragment stays visible, so quoted text that
a reply answers inline keeps its context:

    some original text          (visible)

    > do you have any two's?    (quoted, visible)

    Go fish!                    (visible)

    > --
    > Player 1                  (quoted, hidden)

    --
    Player 2                    (signature, hidden)
"""

from dataclasses import replace

from mailreply.pipeline.fragment import Fragment


class VisibilityResolver:
    """Single bottom-up sweep assigning ``hidden`` to finished fragments."""

    def __init__(self) -> None:
        self._found_visible = False

    def reset(self) -> None:
        self._found_visible = False

    def resolve(self, fragment: Fragment) -> Fragment:
        """Decide whether a just-finished fragment is hidden.

        Args:
            fragment: The next fragment up from the bottom of the email.

        Returns:
            The fragment, marked hidden when it falls below all original
            content.
        """
        if self._found_visible:
            return fragment

        if (
            fragment.quoted
            or fragment.signature
            or fragment.reply_header
            or not fragment.content.strip()
        ):
            return replace(fragment, hidden=True)

        self._found_visible = True
        return fragment
