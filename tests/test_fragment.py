"""Tests for Fragment and FragmentBuilder."""

import pytest

from mailreply import Fragment, FragmentBuilder


class TestFragmentBuilder:
    """Tests for FragmentBuilder."""

    def test_lines_read_top_to_bottom(self) -> None:
        """Lines arrive bottom first and are read top first."""
        builder = FragmentBuilder()
        builder.add_line("bottom")
        builder.add_line("middle")
        builder.add_line("top")

        assert builder.first_line == "top"
        assert builder.finish().content == "top\nmiddle\nbottom"

    def test_first_line_empty_builder(self) -> None:
        """A builder with no lines has no first line."""
        assert FragmentBuilder().first_line is None

    def test_current_block_resets_on_blank_line(self) -> None:
        """Only lines above the latest blank line form the current block."""
        builder = FragmentBuilder()
        builder.add_line("old block")
        builder.add_line("")
        builder.add_line("Subject: c")
        builder.add_line("From: a")

        assert builder.current_block == "From: a\nSubject: c"

    def test_current_block_empty_after_blank_line(self) -> None:
        """A blank line just added leaves an empty current block."""
        builder = FragmentBuilder()
        builder.add_line("text")
        builder.add_line("")

        assert builder.current_block == ""

    def test_finish(self) -> None:
        """Finishing copies the flags into the sealed fragment."""
        builder = FragmentBuilder(quoted=True)
        builder.add_line("> second")
        builder.add_line("> first")
        builder.reply_header = True

        fragment = builder.finish()

        assert fragment.content == "> first\n> second"
        assert fragment.quoted is True
        assert fragment.reply_header is True
        assert fragment.signature is False
        assert fragment.hidden is False

    def test_finish_twice(self) -> None:
        """A builder can only be sealed once."""
        builder = FragmentBuilder()
        builder.add_line("text")
        builder.finish()

        with pytest.raises(RuntimeError, match="already finished"):
            builder.finish()

    def test_trailing_blank_lines_kept(self) -> None:
        """Blank lines are part of the content."""
        builder = FragmentBuilder()
        builder.add_line("")
        builder.add_line("")
        builder.add_line("-Abhishek Kona")

        assert builder.finish().content == "-Abhishek Kona\n\n"


class TestFragment:
    """Tests for the Fragment dataclass."""

    def test_defaults(self) -> None:
        """All flags default to False."""
        fragment = Fragment(content="Hello")

        assert not fragment.quoted
        assert not fragment.signature
        assert not fragment.reply_header
        assert not fragment.hidden

    def test_lines(self) -> None:
        """Content is split back into lines."""
        assert Fragment(content="a\n\nb").lines == ("a", "", "b")

    def test_str(self) -> None:
        """str() gives the content."""
        assert str(Fragment(content="Hello\nWorld")) == "Hello\nWorld"

    def test_immutable(self) -> None:
        """Fragment is immutable."""
        fragment = Fragment(content="Hello")

        with pytest.raises(AttributeError):
            fragment.hidden = True  # type: ignore[misc]
