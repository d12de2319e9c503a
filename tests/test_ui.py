"""Tests for interactive recipient prompts."""

from unittest.mock import MagicMock, patch

from prompt_toolkit.document import Document

from medrunner_tools.models import CrewChoice, LeadChoice
from medrunner_tools.tips.splitter import generate_recipients
from medrunner_tools.tips.ui import (
    ChoiceCompleter,
    prompt_lead_choice,
    prompt_recipients,
)


def completions(completer: ChoiceCompleter, text: str) -> list[str]:
    return [c.text for c in completer.get_completions(Document(text), None)]


class TestChoiceCompleter:
    def test_empty_query_lists_everything(self):
        completer = ChoiceCompleter(["keep", "decline", "logistics"])
        assert completions(completer, "") == ["keep", "decline", "logistics"]

    def test_fuzzy_match(self):
        completer = ChoiceCompleter(["keep", "decline", "logistics"])
        assert completions(completer, "lg") == ["logistics"]
        assert completions(completer, "e") == ["keep", "decline"]
        assert completions(completer, "xyz") == []


class TestPromptRecipients:
    @patch("medrunner_tools.tips.ui.PromptSession")
    def test_names_and_choices(self, mock_session_cls):
        session = MagicMock()
        # name 1, choice 1, name 2, choice 2
        session.prompt.side_effect = ["Ace", "logistics", "", "d"]
        mock_session_cls.return_value = session

        updated = prompt_recipients(generate_recipients(2))

        assert updated[0].name == "Ace"
        assert updated[0].choice == CrewChoice.LOGISTICS
        assert updated[1].name == "Recipient 2"
        assert updated[1].choice == CrewChoice.DECLINE

    @patch("medrunner_tools.tips.ui.PromptSession")
    def test_invalid_choice_reprompts(self, mock_session_cls):
        session = MagicMock()
        session.prompt.side_effect = ["", "maybe", "keep"]
        mock_session_cls.return_value = session

        updated = prompt_recipients(generate_recipients(1))

        assert updated[0].choice == CrewChoice.KEEP
        assert session.prompt.call_count == 3

    @patch("medrunner_tools.tips.ui.PromptSession")
    def test_ctrl_c_keeps_current_values(self, mock_session_cls):
        session = MagicMock()
        session.prompt.side_effect = [KeyboardInterrupt, EOFError]
        mock_session_cls.return_value = session

        recipients = generate_recipients(1)
        updated = prompt_recipients(recipients)

        assert updated == recipients


class TestPromptLeadChoice:
    @patch("medrunner_tools.tips.ui.PromptSession")
    def test_choice(self, mock_session_cls):
        mock_session_cls.return_value.prompt.return_value = "logistics"
        assert prompt_lead_choice() == LeadChoice.LOGISTICS

    @patch("medrunner_tools.tips.ui.PromptSession")
    def test_enter_keeps_default(self, mock_session_cls):
        mock_session_cls.return_value.prompt.return_value = ""
        assert prompt_lead_choice(LeadChoice.DECLINE) == LeadChoice.DECLINE

    @patch("medrunner_tools.tips.ui.PromptSession")
    def test_ctrl_c_keeps_current(self, mock_session_cls):
        mock_session_cls.return_value.prompt.side_effect = KeyboardInterrupt
        assert prompt_lead_choice(LeadChoice.KEEP) == LeadChoice.KEEP
