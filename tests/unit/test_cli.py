"""Tests for the command line interface."""

import pytest

from nicoass.cli import build_parser, main

ARCHIVE = """<packet>
  <chat vpos="100" user_id="abc" premium="1">hello</chat>
  <chat vpos="200" user_id="-" premium="3">Welcome</chat>
</packet>
"""


@pytest.fixture
def archive(tmp_path):
    """Write a small comment archive."""
    path = tmp_path / "live.xml"
    path.write_text(ARCHIVE, encoding="utf-8")
    return path


@pytest.mark.unit
class TestCli:
    """Tests for the nicoass command."""

    def test_default_output(self, archive):
        """Test the document is written next to the archive."""
        assert main([str(archive)]) == 0

        document = archive.with_suffix(".ass").read_text(encoding="utf-8")
        assert document.startswith("[Script Info]")
        assert "hello" in document

    def test_explicit_output_and_config(self, archive, tmp_path):
        """Test output path and rendering overrides."""
        config = tmp_path / "render.yaml"
        config.write_text("canvas:\n  width: 1920\n  height: 1080\n", encoding="utf-8")
        output = tmp_path / "out" / "subs.ass"

        assert main([str(archive), "-o", str(output), "--config", str(config)]) == 0
        assert "PlayResX: 1920" in output.read_text(encoding="utf-8")

    def test_missing_input(self, tmp_path):
        """Test a missing archive exits with status 1."""
        assert main([str(tmp_path / "missing.xml")]) == 1

    def test_invalid_config(self, archive, tmp_path):
        """Test an invalid render config exits with status 1."""
        config = tmp_path / "render.yaml"
        config.write_text("canvas:\n  width: -1\n", encoding="utf-8")

        assert main([str(archive), "--config", str(config)]) == 1

    def test_log_level_choices(self):
        """Test log levels are case-insensitive."""
        args = build_parser().parse_args(["live.xml", "--log-level", "debug"])

        assert args.log_level == "DEBUG"

    def test_version(self, capsys):
        """Test --version prints the version and exits."""
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--version"])

        assert exc_info.value.code == 0
        assert "nicoass" in capsys.readouterr().out
