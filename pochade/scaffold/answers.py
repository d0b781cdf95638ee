"""Answer sources used by the prompter."""
from typing import Optional

from rich.console import Console


class ConsoleAnswerSource:
    """Reads answers from the operator's terminal."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def ask(self, question: str, default: str = "") -> str:
        prompt = f"{question} ({default}): " if default else f"{question}: "
        answer = self.console.input(prompt).strip()
        return answer or default


class DefaultsAnswerSource:
    """Accepts every default without asking (``--yes``)."""

    def ask(self, question: str, default: str = "") -> str:
        return default
