"""Tests for speckit.config.manager and speckit.config.settings modules."""

from unittest.mock import patch

import pytest

from speckit.config.manager import ConfigManager
from speckit.config.settings import CONFIG_FILE, Settings


@pytest.mark.usefixtures("clean_env")
class TestConfigManagerLoad:
    """Tests for ConfigManager.load method."""

    def test_load_missing_file(self, tmp_path):
        """Returns defaults when config file doesn't exist."""
        manager = ConfigManager(tmp_path / "missing-config")

        settings = manager.load()

        assert settings.default_ai == ""
        assert settings.no_git is False
        assert settings.skip_tls is False

    def test_load_valid_file(self, temp_config_file):
        """Parses double- and single-quoted values."""
        manager = ConfigManager(temp_config_file)

        settings = manager.load()

        assert settings.default_ai == "gemini"
        assert settings.no_git is True
        assert settings.skip_tls is False

    def test_load_ignores_comments_and_blank_lines(self, tmp_path):
        config_file = tmp_path / "config"
        config_file.write_text(
            """# comment

SPECKIT_DEFAULT_AI=codex
# SPECKIT_NO_GIT=true
"""
        )

        settings = ConfigManager(config_file).load()

        assert settings.default_ai == "codex"
        assert settings.no_git is False

    @pytest.mark.parametrize("raw", ["true", "1", "yes", "TRUE"])
    def test_boolean_true_values(self, tmp_path, raw):
        config_file = tmp_path / "config"
        config_file.write_text(f'SPECKIT_NO_GIT="{raw}"\n')

        assert ConfigManager(config_file).load().no_git is True

    def test_boolean_other_values_are_false(self, tmp_path):
        config_file = tmp_path / "config"
        config_file.write_text("SPECKIT_NO_GIT=nope\n")

        assert ConfigManager(config_file).load().no_git is False

    def test_unknown_keys_ignored(self, tmp_path):
        """Unknown keys do not touch settings."""
        config_file = tmp_path / "config"
        config_file.write_text("SOMETHING_ELSE=value\nSPECKIT_DEFAULT_AI=qwen\n")

        settings = ConfigManager(config_file).load()

        assert settings == Settings(default_ai="qwen")

    def test_double_quoted_values_unescaped(self, tmp_path):
        config_file = tmp_path / "config"
        config_file.write_text('SPECKIT_DEFAULT_AI="a \\"quoted\\" \\\\ value"\n')

        settings = ConfigManager(config_file).load()

        assert settings.default_ai == 'a "quoted" \\ value'

    def test_single_quoted_values_literal(self, tmp_path):
        config_file = tmp_path / "config"
        config_file.write_text("SPECKIT_DEFAULT_AI='a \\\"b'\n")

        settings = ConfigManager(config_file).load()

        assert settings.default_ai == 'a \\"b'

    def test_environment_overrides_file(self, temp_config_file, monkeypatch):
        monkeypatch.setenv("SPECKIT_DEFAULT_AI", "qwen")
        manager = ConfigManager(temp_config_file)

        settings = manager.load()

        assert settings.default_ai == "qwen"
        assert manager.get_config_source("SPECKIT_DEFAULT_AI") == "environment"
        assert manager.get_config_source("SPECKIT_NO_GIT") == "global"
        assert manager.get_config_source("SPECKIT_SKIP_TLS") == "global"

    def test_default_source(self, tmp_path):
        manager = ConfigManager(tmp_path / "missing")
        manager.load()

        assert manager.get_config_source("SPECKIT_DEFAULT_AI") == "default"

    def test_load_is_idempotent(self, tmp_path):
        """A second load does not keep values removed from the file."""
        config_file = tmp_path / "config"
        config_file.write_text("SPECKIT_DEFAULT_AI=claude\n")
        manager = ConfigManager(config_file)
        manager.load()

        config_file.write_text("")
        settings = manager.load()

        assert settings.default_ai == ""
        assert manager.get_config_source("SPECKIT_DEFAULT_AI") == "default"

    def test_default_path(self):
        assert ConfigManager().global_config_path == CONFIG_FILE


@pytest.mark.usefixtures("clean_env")
class TestConfigManagerShow:
    """Tests for ConfigManager.show method."""

    @patch("speckit.config.manager.print_header")
    @patch("speckit.config.manager.print_info")
    @patch("speckit.config.manager.console")
    def test_show_prints_settings(self, mock_console, mock_info, mock_header, temp_config_file):
        manager = ConfigManager(temp_config_file)
        manager.load()

        manager.show()

        mock_header.assert_called_once_with("Current Configuration")
        printed = " ".join(str(c) for c in mock_console.print.call_args_list)
        assert "gemini" in printed
        assert "Skip Git: True" in printed


class TestSettings:
    """Tests for Settings dataclass."""

    def test_config_keys(self):
        assert Settings.get_config_keys() == [
            "SPECKIT_DEFAULT_AI",
            "SPECKIT_NO_GIT",
            "SPECKIT_SKIP_TLS",
        ]

    def test_attribute_lookup(self):
        settings = Settings()

        assert settings.get_attribute_for_key("SPECKIT_NO_GIT") == "no_git"
        assert settings.get_attribute_for_key("UNKNOWN") is None
