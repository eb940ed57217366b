# SimParse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Interactive shell that parses each entered line and prints its structure.

Handy for checking how a simulated tool will see a command before wiring a handler:

    $ simparse shell --config tools.yaml
    simparse > nvidia-smi -i 0 -q
    nvidia-smi
    └── Flags
        ├── --i = 0
        └── --q
"""
from __future__ import annotations

from functools import cached_property

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import FormattedText
from rich.console import Console

from simparse.completer import SchemaCompleter
from simparse.console import console as default_console
from simparse.logger import logger
from simparse.registry import SchemaRegistry
from simparse.render import print_parsed_command
from simparse.themes import OneColors

EXIT_WORDS = frozenset({"exit", "quit"})


class ParseShell:
    """Read-parse-print loop over a `SchemaRegistry`."""

    def __init__(
        self,
        registry: SchemaRegistry | None = None,
        console: Console | None = None,
        session: PromptSession | None = None,
    ) -> None:
        self.registry = registry if registry is not None else SchemaRegistry()
        self.console = console or default_console
        self._session = session

    @cached_property
    def session(self) -> PromptSession:
        if self._session is None:
            self._session = PromptSession(
                message=FormattedText([(OneColors.BLUE_b, "simparse > ")]),
                completer=SchemaCompleter(self.registry),
                multiline=False,
            )
        return self._session

    def handle(self, line: str) -> bool:
        """Parse and print one line. Returns False when the shell should stop."""
        if line.strip() in EXIT_WORDS:
            return False
        if not line.strip():
            return True
        print_parsed_command(self.registry.parse(line), self.console)
        return True

    def run(self) -> None:
        self.console.print(
            f"[{OneColors.CYAN_b}]SimParse shell[/] "
            f"[{OneColors.COMMENT_GREY}]({len(self.registry)} command schema(s) loaded, "
            "type 'exit' to leave)[/]"
        )
        while True:
            try:
                line = self.session.prompt()
            except (EOFError, KeyboardInterrupt):
                logger.info("EOF or KeyboardInterrupt. Exiting shell.")
                break
            if not self.handle(line):
                break
