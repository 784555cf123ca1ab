"""Tests for multi-line quote header detection."""

import pytest

from mailreply.patterns import is_multiline_quote_header, load_quote_header_labels


class TestLoadQuoteHeaderLabels:
    """Tests for the packaged label table."""

    def test_groups(self) -> None:
        """Labels map to their header group."""
        labels = load_quote_header_labels()

        assert labels["from"] == "from"
        assert labels["de"] == "from"
        assert labels["sent"] == "date"
        assert labels["enviada em"] == "date"
        assert labels["à"] == "to"
        assert labels["reply-to"] == "reply_to"
        assert labels["objet"] == "subject"

    def test_keys_are_lowercase(self) -> None:
        """Labels are stored lowercased."""
        labels = load_quote_header_labels()

        assert all(label == label.lower() for label in labels)

    def test_cached(self) -> None:
        """The table is loaded once."""
        assert load_quote_header_labels() is load_quote_header_labels()

    def test_read_only(self) -> None:
        """The packaged table cannot be modified."""
        labels = load_quote_header_labels()

        with pytest.raises(TypeError):
            labels["von"] = "from"  # type: ignore[index]


class TestIsMultilineQuoteHeader:
    """Tests for is_multiline_quote_header."""

    def test_outlook_header(self) -> None:
        """A full Outlook header block is recognized."""
        block = "From: Jane Doe\nSent: Monday, February 13, 2012 10:00 AM\nTo: John Smith\nSubject: Status"
        assert is_multiline_quote_header(block)

    def test_three_groups_are_enough(self) -> None:
        """Three distinct groups make a header."""
        assert is_multiline_quote_header("From: a\nTo: b\nSubject: c")

    def test_two_groups_not_enough(self) -> None:
        """Two groups are not a header by default."""
        assert not is_multiline_quote_header("From: a\nTo: b")

    def test_required_groups_is_configurable(self) -> None:
        """The group threshold can be raised or lowered."""
        block = "From: a\nTo: b\nSubject: c"

        assert is_multiline_quote_header("From: a\nTo: b", required_groups=2)
        assert not is_multiline_quote_header(block, required_groups=4)

    def test_bold_labels(self) -> None:
        """Labels wrapped in asterisks are recognized."""
        assert is_multiline_quote_header("*From:* Jane\n*Sent:* Monday\n*To:* John")

    def test_case_insensitive(self) -> None:
        """Labels match regardless of case."""
        assert is_multiline_quote_header("FROM: a\nto: b\nsubject: c")

    def test_folded_line(self) -> None:
        """An unlabeled line after a labeled one is a continuation."""
        block = "From: Jane Doe\n[mailto:jane@example.com]\nSent: Monday\nTo: John"
        assert is_multiline_quote_header(block)

    def test_first_line_must_be_labeled(self) -> None:
        """A block starting with plain text is not a header."""
        assert not is_multiline_quote_header("Hello\nFrom: a\nTo: b\nSubject: c")

    def test_repeated_group(self) -> None:
        """Each group may appear only once."""
        assert not is_multiline_quote_header("From: a\nFrom: b\nTo: c\nSubject: d")
        assert not is_multiline_quote_header("From: a\nDe: b\nTo: c\nSubject: d")

    def test_label_needs_space_after_colon(self) -> None:
        """"From:a" is not a label."""
        assert not is_multiline_quote_header("From:a\nTo:b\nSubject:c")

    def test_french_header(self) -> None:
        """French labels with a space before the colon."""
        block = "De : Jean Dupont\nEnvoyé : lundi 13 février 2012\nÀ : Marie Martin\nObjet : Rapport"
        assert is_multiline_quote_header(block)

    def test_portuguese_header(self) -> None:
        """Brazilian Portuguese labels are recognized."""
        block = "De: Ana\nEnviada em: segunda-feira\nPara: Bruno\nAssunto: Relatório"
        assert is_multiline_quote_header(block)

    def test_custom_labels(self) -> None:
        """A caller-supplied table replaces the packaged one."""
        labels = {"von": "from", "an": "to", "betreff": "subject"}
        block = "Von: Hans\nAn: Eva\nBetreff: Termin"

        assert is_multiline_quote_header(block, labels)
        assert not is_multiline_quote_header(block)

    def test_plain_text(self) -> None:
        """Ordinary text is not a header."""
        assert not is_multiline_quote_header("")
        assert not is_multiline_quote_header("Thanks for the update.\nSee you soon.")
