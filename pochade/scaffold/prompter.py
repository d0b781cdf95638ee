"""Sequential question/answer collection with validation."""
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional, Protocol

from rich.console import Console

from pochade.core.logger import get_logger
from pochade.scaffold.errors import UsageError

logger = get_logger(__name__)

Validator = Callable[[str], Optional[str]]


class AnswerSource(Protocol):
    """Anything that can answer a question, falling back to a default."""

    def ask(self, question: str, default: str = "") -> str:
        ...


@dataclass(frozen=True)
class PromptSpec:
    """One question asked while collecting project configuration."""

    key: str
    question: str
    default: str = ""
    validator: Optional[Validator] = None


class Prompter:
    """Runs prompt specs through an answer source."""

    def __init__(
        self,
        source: AnswerSource,
        console: Optional[Console] = None,
        max_attempts: Optional[int] = None,
    ):
        """Initialize prompter.

        Args:
            source: Where answers come from
            console: Console for rejection messages
            max_attempts: Give up after this many rejected answers
                (None = keep asking; non-interactive sources need a limit)
        """
        self.source = source
        self.console = console or Console()
        self.max_attempts = max_attempts

    def ask(self, spec: PromptSpec) -> str:
        """Ask one question, repeating until the validator accepts the answer.

        Raises:
            UsageError: If max_attempts answers were rejected
        """
        attempts = 0
        while True:
            answer = self.source.ask(spec.question, spec.default) or spec.default
            if spec.validator is None:
                return answer

            reason = spec.validator(answer)
            if reason is None:
                return answer

            logger.debug(f"Rejected answer for {spec.key}: {reason}")
            self.console.print(f"[red]❌ {reason}[/red]")

            attempts += 1
            if self.max_attempts is not None and attempts >= self.max_attempts:
                raise UsageError(f"Invalid {spec.key} '{answer}': {reason}")

    def collect(
        self,
        specs: Iterable[PromptSpec],
        initial: Optional[Dict[str, str]] = None,
    ) -> Dict[str, str]:
        """Ask every spec in order.

        Args:
            specs: Prompt specifications, asked in the given order
            initial: Values known before prompting (e.g. project_name)

        Returns:
            Mapping of spec key to final answer, in asking order
        """
        answers = dict(initial or {})
        for spec in specs:
            answers[spec.key] = self.ask(spec)
        return answers
