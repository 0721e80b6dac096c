"""
Unit tests for theme configuration loading and saving.
"""

import logging
from pathlib import Path

import pytest

from jupiter_design import Color, ThemeConfig, ThemeConfigError, load_theme_config, save_theme_config
from jupiter_design.themes import JupiterColors


class TestThemeConfigModel:
    """Tests for the ThemeConfig model."""

    def test_defaults(self):
        """Test the default config selects vibe with no overrides."""
        config = ThemeConfig()
        assert config.preset == "vibe"
        assert config.colors == {}

    def test_unknown_preset_rejected(self):
        """Test an unknown preset fails validation."""
        with pytest.raises(ValueError, match="unknown preset"):
            ThemeConfig(preset="neon")

    def test_unknown_color_rejected(self):
        """Test an unknown palette field fails validation."""
        with pytest.raises(ValueError, match="brand"):
            ThemeConfig(colors={"brand": "pink-500"})

    def test_extra_keys_rejected(self):
        """Test unknown top-level keys are rejected."""
        with pytest.raises(ValueError):
            ThemeConfig(mode="dark")

    def test_build_colors(self):
        """Test building a provider from the config."""
        colors = ThemeConfig(preset="jupiter", colors={"accent": "teal-500"}).build_colors()
        assert isinstance(colors, JupiterColors)
        assert colors.resolve_color(Color.ACCENT) == "teal-500"

    def test_build_colors_call_site_wins(self):
        """Test call-site overrides beat config overrides."""
        config = ThemeConfig(colors={"primary": "from-config"})
        colors = config.build_colors({"primary": "from-call"})
        assert colors.resolve_color(Color.PRIMARY) == "from-call"


class TestLoadThemeConfig:
    """Tests for load_theme_config."""

    def test_load_toml(self, tmp_path: Path):
        """Test loading a [theme] table from TOML."""
        path = tmp_path / "jupiter.toml"
        path.write_text(
            '[theme]\npreset = "llasi"\n\n[theme.colors]\nprimary = "purple-600"\n',
            encoding="utf-8",
        )

        config = load_theme_config(path)
        assert config.preset == "llasi"
        assert config.colors == {"primary": "purple-600"}

    def test_load_yaml_with_theme_key(self, tmp_path: Path):
        """Test loading YAML with a top-level theme key."""
        path = tmp_path / "theme.yaml"
        path.write_text("theme:\n  preset: jupiter\n", encoding="utf-8")

        assert load_theme_config(path).preset == "jupiter"

    def test_load_yaml_without_theme_key(self, tmp_path: Path):
        """Test loading YAML with the config at the top level."""
        path = tmp_path / "theme.yml"
        path.write_text("preset: psychedelic\ncolors:\n  accent: teal-500\n", encoding="utf-8")

        config = load_theme_config(path)
        assert config.preset == "psychedelic"
        assert config.colors == {"accent": "teal-500"}

    def test_toml_without_theme_table(self, tmp_path: Path):
        """Test a TOML file with only other tables yields the default config."""
        path = tmp_path / "jupiter.toml"
        path.write_text('[project]\nname = "demo"\n', encoding="utf-8")

        assert load_theme_config(path) == ThemeConfig()
        assert load_theme_config(path, use_defaults=False).preset == "vibe"

    def test_toml_ignores_sibling_tables(self, tmp_path: Path):
        """Test tables next to [theme] are not validated."""
        path = tmp_path / "jupiter.toml"
        path.write_text(
            '[project]\nname = "demo"\n\n[theme]\npreset = "jupiter"\n',
            encoding="utf-8",
        )

        assert load_theme_config(path).preset == "jupiter"

    def test_default_path(self, tmp_path: Path, monkeypatch):
        """Test jupiter.toml in the working directory is read by default."""
        (tmp_path / "jupiter.toml").write_text('[theme]\npreset = "llasi"\n', encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        assert load_theme_config().preset == "llasi"

    def test_missing_file_uses_defaults(self, tmp_path: Path):
        """Test a missing file returns the default config."""
        assert load_theme_config(tmp_path / "missing.toml") == ThemeConfig()

    def test_missing_file_raises_without_defaults(self, tmp_path: Path):
        """Test a missing file raises when defaults are disabled."""
        with pytest.raises(ThemeConfigError, match="not found"):
            load_theme_config(tmp_path / "missing.toml", use_defaults=False)

    def test_empty_file_logs_warning(self, tmp_path: Path, caplog):
        """Test an empty file returns defaults and logs a warning."""
        path = tmp_path / "theme.yaml"
        path.write_text("", encoding="utf-8")

        with caplog.at_level(logging.WARNING, logger="jupiter_design.config"):
            config = load_theme_config(path)

        assert config == ThemeConfig()
        assert "Empty theme config" in caplog.text

    def test_empty_file_raises_without_defaults(self, tmp_path: Path):
        """Test an empty file raises when defaults are disabled."""
        path = tmp_path / "theme.yaml"
        path.write_text("", encoding="utf-8")

        with pytest.raises(ThemeConfigError):
            load_theme_config(path, use_defaults=False)

    def test_invalid_toml(self, tmp_path: Path):
        """Test malformed TOML is wrapped in ThemeConfigError."""
        path = tmp_path / "jupiter.toml"
        path.write_text("[theme\npreset = ", encoding="utf-8")

        with pytest.raises(ThemeConfigError, match="Invalid TOML") as exc_info:
            load_theme_config(path)
        assert str(path) in str(exc_info.value)

    def test_invalid_yaml(self, tmp_path: Path):
        """Test malformed YAML is wrapped in ThemeConfigError."""
        path = tmp_path / "theme.yaml"
        path.write_text("theme: [unclosed\n", encoding="utf-8")

        with pytest.raises(ThemeConfigError, match="Invalid YAML"):
            load_theme_config(path)

    def test_non_mapping(self, tmp_path: Path):
        """Test a list document is rejected."""
        path = tmp_path / "theme.yaml"
        path.write_text("- vibe\n- jupiter\n", encoding="utf-8")

        with pytest.raises(ThemeConfigError, match="mapping"):
            load_theme_config(path)

    def test_validation_error_wrapped(self, tmp_path: Path):
        """Test schema failures are wrapped with file context."""
        path = tmp_path / "jupiter.toml"
        path.write_text('[theme]\npreset = "neon"\n', encoding="utf-8")

        with pytest.raises(ThemeConfigError, match="Invalid theme config") as exc_info:
            load_theme_config(path)
        assert exc_info.value.context.file == path
        assert exc_info.value.context.key == "theme"

    def test_unsupported_suffix(self, tmp_path: Path):
        """Test unknown file formats are rejected."""
        path = tmp_path / "theme.json"
        path.write_text("{}", encoding="utf-8")

        with pytest.raises(ThemeConfigError, match="Unsupported"):
            load_theme_config(path)


class TestSaveThemeConfig:
    """Tests for save_theme_config."""

    def test_round_trip(self, tmp_path: Path):
        """Test save then load yields the same config."""
        path = tmp_path / "theme.yaml"
        config = ThemeConfig(preset="jupiter", colors={"primary": "purple-600", "accent": "teal-500"})

        saved = save_theme_config(path, config)

        assert saved == path
        assert load_theme_config(path) == config

    def test_saved_yaml_layout(self, tmp_path: Path):
        """Test the file has a theme key and keeps field order."""
        path = tmp_path / "theme.yaml"
        save_theme_config(path, ThemeConfig(preset="llasi"))

        content = path.read_text(encoding="utf-8")
        assert content.startswith("theme:\n  preset: llasi\n")

    def test_save_rejects_toml(self, tmp_path: Path):
        """Test saving is YAML-only."""
        with pytest.raises(ThemeConfigError):
            save_theme_config(tmp_path / "jupiter.toml", ThemeConfig())
