"""
SimParse Command-Line Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import json
import logging
import sys
from argparse import ArgumentParser, Namespace, _SubParsersAction
from pathlib import Path
from typing import Sequence

from rich.markup import escape

from simparse.config import find_config, load_registry
from simparse.console import console
from simparse.exceptions import SimParseError
from simparse.logger import logger
from simparse.parser import debug_parsed_command, parse
from simparse.registry import SchemaRegistry
from simparse.render import (
    print_parsed_command,
    render_command_help,
    render_command_table,
    render_flag_help,
)
from simparse.shell import ParseShell
from simparse.themes import OneColors
from simparse.utils import setup_logging
from simparse.version import __version__


def get_root_parser(prog: str = "simparse") -> ArgumentParser:
    parser = ArgumentParser(
        prog=prog,
        description="SimParse - inspect how simulated tools parse a command line.",
        epilog="Tip: quote the whole line, e.g. simparse parse 'nvidia-smi -i 0 -q'.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help=f"Enable debug logging for {prog}."
    )
    parser.add_argument(
        "--log-mode",
        choices=["cli", "json"],
        default=None,
        help="Console log format (defaults to $SIMPARSE_LOG_MODE or auto-detect).",
    )
    parser.add_argument("--version", action="version", version=f"{prog} {__version__}")
    return parser


def add_config_argument(parser: ArgumentParser) -> None:
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        action="append",
        default=None,
        help="Command definition file or directory (repeatable).",
    )


def get_parsers() -> tuple[ArgumentParser, _SubParsersAction]:
    root_parser = get_root_parser()
    subparsers = root_parser.add_subparsers(
        title="SimParse Commands", dest="command", required=True
    )

    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse one command line and print its structure",
        description="Parse one command line using the schema of its base command.",
    )
    parse_parser.add_argument("line", help="The command line to parse.")
    add_config_argument(parse_parser)
    parse_parser.add_argument(
        "--no-schema",
        action="store_true",
        help="Ignore command definitions and use heuristics only.",
    )
    output = parse_parser.add_mutually_exclusive_group()
    output.add_argument("--json", action="store_true", help="Print JSON.")
    output.add_argument("--plain", action="store_true", help="Print plain text.")

    shell_parser = subparsers.add_parser(
        "shell",
        help="Start an interactive parsing shell",
        description="Parse lines interactively with command and flag completion.",
    )
    add_config_argument(shell_parser)

    check_parser = subparsers.add_parser(
        "check",
        help="Report flags a command definition does not know",
        description="Parse a line and validate its flags against its definition.",
    )
    check_parser.add_argument("line", help="The command line to check.")
    add_config_argument(check_parser)

    help_parser = subparsers.add_parser(
        "help",
        help="Show help from command definitions",
        description="List defined commands, or show help for one command or flag.",
    )
    help_parser.add_argument("tool", nargs="?", metavar="COMMAND", help="Command name.")
    help_parser.add_argument("flag", nargs="?", metavar="FLAG", help="Flag of COMMAND, dashes optional.")
    help_parser.add_argument(
        "--category", default=None, help="Only list commands in this category."
    )
    help_parser.add_argument("--plain", action="store_true", help="Print plain text.")
    add_config_argument(help_parser)
    return root_parser, subparsers


def build_registry(config_paths: Sequence[Path] | None) -> SchemaRegistry:
    if config_paths:
        return load_registry(*config_paths)
    found = find_config()
    if found:
        logger.debug("Using config file %s", found)
        return load_registry(found)
    return SchemaRegistry()


def run_parse(args: Namespace) -> int:
    if args.no_schema:
        parsed = parse(args.line)
    else:
        parsed = build_registry(args.config).parse(args.line)

    if args.json:
        console.print_json(json.dumps(parsed.as_dict()))
    elif args.plain:
        console.print(debug_parsed_command(parsed), markup=False, highlight=False)
    else:
        print_parsed_command(parsed, console)
    return 0


def run_shell(args: Namespace) -> int:
    ParseShell(build_registry(args.config), console).run()
    return 0


def run_check(args: Namespace) -> int:
    registry = build_registry(args.config)
    parsed = registry.parse(args.line)
    if parsed.base_command not in registry:
        console.print(
            f"[{OneColors.DARK_RED}]❌ No definition for command:[/] "
            f"{escape(parsed.base_command)}"
        )
        return 1

    invalid = 0
    for flag in parsed.flags:
        result = registry.validate_flag(parsed.base_command, flag)
        if result.valid:
            continue
        invalid += 1
        hint = ""
        if result.suggestions:
            hint = f" (did you mean {', '.join(result.suggestions)}?)"
        console.print(
            f"[{OneColors.DARK_YELLOW_b}]⚠️ Unknown flag:[/] {escape(flag)}{escape(hint)}"
        )

    if invalid:
        return 1
    console.print(f"[{OneColors.GREEN_b}]✅ All flags are known.[/]")
    return 0


def run_help(args: Namespace) -> int:
    registry = build_registry(args.config)
    if args.tool is None:
        definitions = (
            registry.by_category(args.category) if args.category else list(registry)
        )
        if not definitions:
            console.print(f"[{OneColors.DARK_YELLOW}]No command definitions found.[/]")
            return 1
        console.print(render_command_table(definitions))
        return 0

    definition = registry.get(args.tool)
    if definition is None:
        console.print(
            f"[{OneColors.DARK_RED}]❌ No definition for command:[/] {escape(args.tool)}"
        )
        return 1

    if args.flag is None:
        if args.plain:
            text = registry.get_command_help(args.tool)
            console.print(text, markup=False, highlight=False)
        else:
            console.print(render_command_help(definition))
        return 0

    option = definition.find_option(args.flag)
    if option is None:
        result = registry.validate_flag(args.tool, args.flag)
        hint = ""
        if result.suggestions:
            hint = f" (did you mean {', '.join(result.suggestions)}?)"
        console.print(
            f"[{OneColors.DARK_YELLOW_b}]⚠️ Unknown flag:[/] {escape(args.flag)}{escape(hint)}"
        )
        return 1
    if args.plain:
        text = registry.get_flag_help(args.tool, args.flag)
        console.print(text, markup=False, highlight=False)
    else:
        console.print(render_flag_help(option))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    root_parser, _ = get_parsers()
    args = root_parser.parse_args(argv)
    setup_logging(
        mode=args.log_mode,
        console_log_level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    handlers = {
        "parse": run_parse,
        "shell": run_shell,
        "check": run_check,
        "help": run_help,
    }
    try:
        return handlers[args.command](args)
    except (SimParseError, FileNotFoundError) as error:
        logger.debug("Command '%s' failed", args.command, exc_info=True)
        console.print(
            f"[{OneColors.DARK_RED}]❌ {escape(str(error))}[/]", highlight=False
        )
        return 1


if __name__ == "__main__":
    sys.exit(main())
