# SimParse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides `SchemaCompleter`, a Prompt Toolkit completer backed by a `SchemaRegistry`.

- The first word completes to registered command names.
- A word starting with `-` completes to the flags of the current command, spelled
  the way its definition writes them: `-` + short, `--` + long, or the free-form
  `flag` as given.
- A plain word right after the command completes to its subcommand names.

Input is split with SimParse's own tokenizer, so quoting behaves exactly like it
does for `parse()`.
"""
from __future__ import annotations

import os
from typing import Iterable

from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document

from simparse.parser import is_flag, tokenize
from simparse.registry import SchemaRegistry


class SchemaCompleter(Completer):
    """Complete command names, subcommands and flags from a registry."""

    def __init__(self, registry: SchemaRegistry):
        self.registry = registry

    def get_completions(
        self, document: Document, complete_event: CompleteEvent
    ) -> Iterable[Completion]:
        text = document.text_before_cursor
        tokens = tokenize(text)
        cursor_at_end_of_token = text.endswith((" ", "\t"))

        if not tokens or (len(tokens) == 1 and not cursor_at_end_of_token):
            stub = tokens[0] if tokens else ""
            yield from self._yield_matches(self.registry.command_names(), stub)
            return

        definition = self.registry.get(tokens[0])
        if definition is None:
            return

        stub = "" if cursor_at_end_of_token else tokens[-1]
        if stub.startswith("-"):
            yield from self._yield_matches(definition.flag_spellings(), stub)
            return

        previous = tokens[1:] if cursor_at_end_of_token else tokens[1:-1]
        if not any(is_flag(token) for token in previous):
            yield from self._yield_matches(definition.subcommand_names(), stub)

    def _yield_matches(self, suggestions: list[str], stub: str) -> Iterable[Completion]:
        matches = [s for s in suggestions if s.startswith(stub)]
        if len(matches) > 1:
            lcp = os.path.commonprefix(matches)
            if len(lcp) > len(stub) and not lcp.startswith("-"):
                yield Completion(lcp, start_position=-len(stub), display=lcp)
        for match in matches:
            yield Completion(match, start_position=-len(stub), display=match)
