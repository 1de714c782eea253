"""Tests for the comment archive loader."""

import pytest

from nicoass.core.exceptions import CommentSourceError
from nicoass.models.comment import CommentRecord
from nicoass.services.loader import load_comments, parse_comments

ARCHIVE = """<?xml version="1.0" encoding="UTF-8"?>
<packet>
  <thread thread="1" />
  <chat thread="1" vpos="100" user_id="abc" mail="184 red" premium="1">hello</chat>
  <chat thread="1" vpos="250" user_id="-" premium="3">/vote stop</chat>
  <chat thread="1" user_id="xyz">no timestamp</chat>
</packet>
"""


@pytest.mark.unit
class TestLoader:
    """Tests for XML comment loading."""

    def test_parse(self):
        """Test chat elements become records in document order."""
        comments = parse_comments(ARCHIVE)

        assert comments == [
            CommentRecord(content="hello", user_id="abc", mail="184 red", vpos=100, premium=1),
            CommentRecord(content="/vote stop", user_id="-", vpos=250, premium=3),
            CommentRecord(content="no timestamp", user_id="xyz"),
        ]

    def test_empty_chat(self):
        """Test an empty chat element has empty content."""
        assert parse_comments('<packet><chat vpos="1" /></packet>')[0].content == ""

    def test_invalid_xml(self):
        """Test malformed XML raises CommentSourceError."""
        with pytest.raises(CommentSourceError):
            parse_comments("<packet><chat>")

    def test_invalid_vpos(self):
        """Test non-numeric attributes raise CommentSourceError."""
        with pytest.raises(CommentSourceError) as exc_info:
            parse_comments('<packet><chat vpos="soon">x</chat></packet>', source="live.xml")

        assert exc_info.value.context["attribute"] == "vpos"
        assert exc_info.value.source == "live.xml"

    def test_load_file(self, tmp_path):
        """Test loading from disk."""
        path = tmp_path / "live.xml"
        path.write_text(ARCHIVE, encoding="utf-8")

        assert len(load_comments(path)) == 3

    def test_missing_file(self, tmp_path):
        """Test a missing file raises CommentSourceError."""
        with pytest.raises(CommentSourceError):
            load_comments(tmp_path / "missing.xml")
