"""Interactive prompts for entering tip recipients."""

import logging
from typing import Any

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from ..models import CrewChoice, LeadChoice, Recipient

logger = logging.getLogger(__name__)

CHOICE_LABELS = {
    CrewChoice.KEEP: "Keep Tip",
    CrewChoice.DECLINE: "Don't Want Tip",
    CrewChoice.LOGISTICS: "Donate to Logistics",
}


class ChoiceCompleter(Completer):
    """Fuzzy completer over the keep/decline/logistics choices."""

    def __init__(self, choices: list[str]):
        """Initialize the completer with the available choice names."""
        self.choices = choices

    def get_completions(self, document: Document, complete_event: Any):
        """Get fuzzy-matched completions."""
        query = document.text.lower()

        for choice in self.choices:
            if not query or self._fuzzy_match(query, choice):
                yield Completion(
                    text=choice,
                    start_position=-len(document.text),
                    display=choice,
                )

    def _fuzzy_match(self, query: str, text: str) -> bool:
        """
        Fuzzy match: all characters in query must appear in order in text.

        Example:
            query="lg" matches "logistics"
            query="dc" matches "decline"
        """
        query_idx = 0
        for char in text:
            if query_idx < len(query) and char == query[query_idx]:
                query_idx += 1
        return query_idx == len(query)


def _prompt_choice(session: PromptSession, message: str, default: str) -> str | None:
    """Prompt until a valid crew choice is entered. None on Ctrl+C/EOF."""
    while True:
        try:
            result = session.prompt(message, default=default)
        except (KeyboardInterrupt, EOFError):
            return None

        if not result.strip():
            return default

        try:
            return CrewChoice.parse(result).value
        except ValueError:
            print("❌ Invalid choice. Type keep, decline or logistics (Tab completes)")


def prompt_recipients(recipients: list[Recipient]) -> list[Recipient]:
    """
    Ask for each recipient's optional name and choice.

    Enter keeps the current value, Ctrl+C keeps it and moves on.

    Args:
        recipients: Current recipients

    Returns:
        A new list with the operator's edits applied
    """
    completer = ChoiceCompleter([choice.value for choice in CrewChoice])
    name_session: PromptSession[str] = PromptSession()
    choice_session: PromptSession[str] = PromptSession(completer=completer)

    print("\n👥 Recipients")
    print("   Enter a name (optional) and a choice for each crew member")
    print(
        "   Choices: "
        + ", ".join(f"{c.value} ({label})" for c, label in CHOICE_LABELS.items())
        + "\n"
    )

    updated = []
    for recipient in recipients:
        try:
            name = name_session.prompt(f"#{recipient.id} name: ", default="")
        except (KeyboardInterrupt, EOFError):
            name = ""
        name = name.strip() or recipient.name

        choice = _prompt_choice(
            choice_session, f"#{recipient.id} choice: ", recipient.choice.value
        )
        new_choice = CrewChoice(choice) if choice else recipient.choice

        logger.debug(f"Recipient {recipient.id}: {name} -> {new_choice.value}")
        updated.append(Recipient(id=recipient.id, name=name, choice=new_choice))

    return updated


def prompt_lead_choice(current: LeadChoice = LeadChoice.KEEP) -> LeadChoice:
    """Ask for the lead's own choice. Ctrl+C keeps ``current``."""
    completer = ChoiceCompleter([choice.value for choice in CrewChoice])
    session: PromptSession[str] = PromptSession(completer=completer)

    default = current.value.removeprefix("lead-")
    choice = _prompt_choice(session, "Your choice (lead): ", default)
    if choice is None:
        return current
    return LeadChoice.parse(choice)
