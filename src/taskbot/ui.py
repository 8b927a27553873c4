"""Terminal presentation for taskbot.

Wraps interpreter replies in a border and indents every line, the way
the assistant has always talked.
"""

from typing import IO, Optional

import click

from .config import ConfigModel


class Ui:
    """Prints framed messages to a text stream (stdout by default)."""

    def __init__(self, config: ConfigModel, out: Optional[IO[str]] = None):
        self.config = config
        self.out = out

    def frame(self, message: str) -> str:
        """Put ``message`` between two borders and indent each line."""
        lines = [self.config.border, *message.split("\n"), self.config.border]
        return "\n".join(f"{self.config.indent}{line}" for line in lines)

    def show_message(self, message: str):
        # Written as-is: tabs stay tabs and task text is never interpreted.
        click.echo(self.frame(message), file=self.out)

    def show_welcome(self):
        self.show_message(self.config.greeting)

    def show_farewell(self):
        self.show_message(self.config.farewell)
