# SimParse — (c) 2025 rtj.dev LLC — MIT Licensed
"""Rich rendering of parsed commands and command definition help."""
from __future__ import annotations

from collections import defaultdict
from typing import Iterable

from rich import box
from rich.console import Console, Group, RenderableType
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

from simparse.console import console as default_console
from simparse.parser import ParsedCommand
from simparse.schema import CommandDefinition, CommandOption


def render_parsed_command(parsed: ParsedCommand) -> Tree:
    """Build a tree with the base command as root and one branch per section."""
    label = escape(parsed.base_command) if parsed.base_command else "(empty)"
    tree = Tree(f"[command]{label}[/]")

    if parsed.subcommands:
        branch = tree.add("[title]Subcommands[/]")
        for subcommand in parsed.subcommands:
            branch.add(f"[subcommand]{escape(subcommand)}[/]")

    if parsed.flags:
        branch = tree.add("[title]Flags[/]")
        for name, value in parsed.flags.items():
            if isinstance(value, bool):
                branch.add(f"[flag]--{escape(name)}[/]")
            else:
                branch.add(f"[flag]--{escape(name)}[/] = [flag.value]{escape(value)}[/]")

    if parsed.positional_args:
        branch = tree.add("[title]Positional args[/]")
        for arg in parsed.positional_args:
            branch.add(f"[positional]{escape(arg)}[/]")

    return tree


def print_parsed_command(parsed: ParsedCommand, console: Console | None = None) -> None:
    (console or default_console).print(render_parsed_command(parsed))


def render_command_help(definition: CommandDefinition) -> Group:
    """Usage, description, options and subcommands of one command definition."""
    usage = escape(definition.synopsis or definition.command)
    lines: list[RenderableType] = [f"[bold]usage:[/bold] [command]{usage}[/]", ""]
    if definition.description:
        lines += [escape(definition.description), ""]

    if definition.global_options:
        lines.append("[title]options:[/]")
        lines += [_option_line(option) for option in definition.global_options]
        lines.append("")

    for subcommand in definition.subcommands:
        heading = f"[subcommand]{escape(subcommand.name)}[/]"
        if subcommand.description:
            heading += f"  [muted]{escape(subcommand.description)}[/]"
        lines.append(heading)
        lines += [_option_line(option) for option in subcommand.options]

    return Group(*lines)


def render_flag_help(option: CommandOption) -> Panel:
    body = escape(option.description) or "[muted]No description.[/]"
    if option.example:
        body += f"\n\n[bold]example:[/bold] {escape(option.example)}"
    return Panel(
        body,
        title=f"[flag]{escape(option.usage_text())}[/]",
        title_align="left",
        expand=False,
    )


def render_command_table(definitions: Iterable[CommandDefinition]) -> Table:
    """Table of commands grouped by category."""
    grouped: dict[str, list[CommandDefinition]] = defaultdict(list)
    for definition in definitions:
        grouped[definition.category].append(definition)

    table = Table(title="Commands", show_header=False, box=box.SIMPLE)
    for category in sorted(grouped):
        title = category.replace("_", " ").capitalize()
        table.add_row(f"[bold underline]{escape(title)} Commands[/]")
        for definition in grouped[category]:
            table.add_row(
                f"[command]{escape(definition.command)}[/]  "
                f"{escape(definition.description)}"
            )
        table.add_row("")
    return table


def _option_line(option: CommandOption) -> str:
    usage = escape(option.usage_text())
    return f"  [flag]{usage:<30}[/] {escape(option.description)}".rstrip()
