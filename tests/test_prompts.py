"""Tests for speckit.ui.prompts module."""

from unittest.mock import patch

import pytest

from speckit.ui.prompts import custom_style, prompt_confirm, prompt_select
from speckit.utils.errors import UserCancelledError


class TestCustomStyle:
    """Tests for custom_style."""

    def test_style_has_qmark(self):
        assert any("qmark" in str(s) for s in custom_style.style_rules)


class TestPromptConfirm:
    """Tests for prompt_confirm function."""

    @patch("questionary.confirm")
    def test_returns_true_for_yes(self, mock_confirm):
        mock_confirm.return_value.ask.return_value = True

        assert prompt_confirm("Continue?") is True

    @patch("questionary.confirm")
    def test_returns_false_for_no(self, mock_confirm):
        mock_confirm.return_value.ask.return_value = False

        assert prompt_confirm("Continue?") is False

    @patch("questionary.confirm")
    def test_passes_default(self, mock_confirm):
        mock_confirm.return_value.ask.return_value = False

        prompt_confirm("Continue?", default=False)

        assert mock_confirm.call_args.kwargs["default"] is False

    @patch("questionary.confirm")
    def test_raises_on_cancel(self, mock_confirm):
        """Raises UserCancelledError when the prompt returns None."""
        mock_confirm.return_value.ask.return_value = None

        with pytest.raises(UserCancelledError):
            prompt_confirm("Continue?")

    @patch("questionary.confirm")
    def test_raises_on_keyboard_interrupt(self, mock_confirm):
        mock_confirm.return_value.ask.side_effect = KeyboardInterrupt

        with pytest.raises(UserCancelledError):
            prompt_confirm("Continue?")


class TestPromptSelect:
    """Tests for prompt_select function."""

    CHOICES = {"claude": "Claude Code", "gemini": "Gemini CLI"}

    @patch("questionary.select")
    def test_returns_selected_key(self, mock_select):
        mock_select.return_value.ask.return_value = "gemini"

        assert prompt_select("Pick", self.CHOICES) == "gemini"

    @patch("questionary.select")
    def test_titles_include_key(self, mock_select):
        """Each option shows the display name followed by its key."""
        mock_select.return_value.ask.return_value = "claude"

        prompt_select("Pick", self.CHOICES)

        options = mock_select.call_args.kwargs["choices"]
        assert [o.title for o in options] == ["Claude Code (claude)", "Gemini CLI (gemini)"]
        assert [o.value for o in options] == ["claude", "gemini"]

    @patch("questionary.select")
    def test_default_preselected(self, mock_select):
        mock_select.return_value.ask.return_value = "gemini"

        prompt_select("Pick", self.CHOICES, default="gemini")

        assert mock_select.call_args.kwargs["default"].value == "gemini"

    @patch("questionary.select")
    def test_unknown_default_is_ignored(self, mock_select):
        mock_select.return_value.ask.return_value = "claude"

        prompt_select("Pick", self.CHOICES, default="missing")

        assert mock_select.call_args.kwargs["default"] is None

    @patch("questionary.select")
    def test_raises_on_cancel(self, mock_select):
        mock_select.return_value.ask.return_value = None

        with pytest.raises(UserCancelledError):
            prompt_select("Pick", self.CHOICES)
