"""
Rich-based user prompts
"""
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from ...core.interfaces import PromptProvider
from ...core.logging import get_stdout_console

# Accepted "yes" answers (English and Serbian, Latin and Cyrillic)
YES_ANSWERS = frozenset({"y", "yes", "d", "da", "д", "да"})


class RichPromptProvider(PromptProvider):
    """Rich-based prompt provider; end of input counts as an empty answer"""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or get_stdout_console()

    def _ask(self, message: str, default: str, show_default: bool) -> str:
        try:
            return Prompt.ask(
                message,
                default=default,
                show_default=show_default,
                console=self.console,
            )
        except EOFError:
            self.console.print()
            return default

    def prompt(self, message: str, default: Optional[str] = None) -> str:
        """Prompt user for input; empty input returns default"""
        return self._ask(escape(message), default or "", bool(default))

    def confirm(self, message: str) -> bool:
        """Prompt user for a yes/no answer (default no)"""
        answer = self._ask(escape(f"{message} [y/N]"), "", False)
        return answer.strip().lower() in YES_ANSWERS
