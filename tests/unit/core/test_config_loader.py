"""Tests for render config loader."""

import pytest
import yaml

from nicoass.config.render import RenderConfig
from nicoass.core.config_loader import load_render_config
from nicoass.core.exceptions import ConfigError, ConfigNotFoundError, ConfigValidationError


@pytest.fixture
def config_dir(tmp_path):
    """Create a temporary config directory.

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Path to config directory
    """
    config_dir = tmp_path / "configs"
    config_dir.mkdir()
    return config_dir


@pytest.mark.unit
class TestLoadRenderConfig:
    """Tests for load_render_config."""

    def test_defaults_without_path(self):
        """Test that no path yields the built-in defaults."""
        assert load_render_config() == RenderConfig()

    def test_partial_override(self, config_dir):
        """Test that given keys override and the rest keep defaults."""
        path = config_dir / "render.yaml"
        path.write_text(
            yaml.safe_dump({"canvas": {"width": 1920}, "danmaku": {"lane_capacity": 15}}),
            encoding="utf-8",
        )

        config = load_render_config(path)

        assert config.canvas.width == 1920
        assert config.canvas.height == 720
        assert config.danmaku.lane_capacity == 15
        assert config.danmaku.burst_limit == 11

    def test_empty_file(self, config_dir):
        """Test that an empty file yields the defaults."""
        path = config_dir / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert load_render_config(str(path)) == RenderConfig()

    def test_missing_file(self, config_dir):
        """Test that a missing file raises ConfigNotFoundError."""
        with pytest.raises(ConfigNotFoundError) as exc_info:
            load_render_config(config_dir / "missing.yaml")

        assert exc_info.value.config_key == "missing.yaml"

    def test_invalid_yaml(self, config_dir):
        """Test that malformed YAML raises ConfigError."""
        path = config_dir / "broken.yaml"
        path.write_text("canvas: [unclosed", encoding="utf-8")

        with pytest.raises(ConfigError):
            load_render_config(path)

    def test_non_mapping(self, config_dir):
        """Test that a top-level list is rejected."""
        path = config_dir / "list.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")

        with pytest.raises(ConfigError):
            load_render_config(path)

    def test_validation_error(self, config_dir):
        """Test that schema violations name the offending field."""
        path = config_dir / "invalid.yaml"
        path.write_text(yaml.safe_dump({"canvas": {"width": 0}}), encoding="utf-8")

        with pytest.raises(ConfigValidationError) as exc_info:
            load_render_config(path)

        assert "canvas.width" in str(exc_info.value)
        assert exc_info.value.context["config_path"] == str(path)
