"""Pattern classifiers for plain-text email lines and blocks."""

from mailreply.patterns.headers import is_multiline_quote_header, load_quote_header_labels
from mailreply.patterns.quotes import is_quoted_marker, is_reply_header_line
from mailreply.patterns.signatures import is_signature_line, is_signature_name_line

__all__ = [
    "is_multiline_quote_header",
    "is_quoted_marker",
    "is_reply_header_line",
    "is_signature_line",
    "is_signature_name_line",
    "load_quote_header_labels",
]
