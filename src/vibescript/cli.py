"""
Command line interface for the VibeScript playground.

    vibescript run program.vibe [--format text|html|json|yaml]
    vibescript transpile program.vibe
    vibescript example [--count N]

Use "-" as the file name to read the program from stdin.
"""

import argparse
import logging
import sys
from typing import List, Optional

from vibescript.backends import render_html, render_text
from vibescript.config import ConfigError, PlaygroundConfig, load_config
from vibescript.serialization import run_result_to_json, run_result_to_yaml
from vibescript.session import PlaygroundSession


logger = logging.getLogger(__name__)

FORMATS = ("text", "html", "json", "yaml")


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="vibescript", description="VibeScript playground")
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Transpile and simulate a program")
    run_parser.add_argument("file", help="VibeScript file, or - for stdin")
    run_parser.add_argument("--format", choices=FORMATS, default="text", help="Output format")

    transpile_parser = subparsers.add_parser("transpile", help="Print the transpiled program")
    transpile_parser.add_argument("file", help="VibeScript file, or - for stdin")

    example_parser = subparsers.add_parser("example", help="Print built-in examples in rotation")
    example_parser.add_argument("--count", type=int, default=1, help="Number of examples to print")

    return parser


def _cmd_run(session: PlaygroundSession, args: argparse.Namespace) -> int:
    result = session.run(_read_source(args.file))
    if args.format == "json":
        print(run_result_to_json(result))
    elif args.format == "yaml":
        print(run_result_to_yaml(result), end="")
    elif args.format == "html":
        print(render_html(result.simulation))
    else:
        print(result.transpiled_text)
        print("-" * 40)
        print(render_text(result.simulation))
    return 0


def _cmd_transpile(session: PlaygroundSession, args: argparse.Namespace) -> int:
    print(session.run(_read_source(args.file)).transpiled_text)
    return 0


def _cmd_example(session: PlaygroundSession, args: argparse.Namespace) -> int:
    for i in range(max(args.count, 0)):
        if i:
            print()
        print(session.load_next_example())
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else PlaygroundConfig()
    except (OSError, ConfigError) as e:
        logger.error("Could not load configuration: %s", e)
        return 2

    session = PlaygroundSession(config)
    handlers = {"run": _cmd_run, "transpile": _cmd_transpile, "example": _cmd_example}
    try:
        return handlers[args.command](session, args)
    except OSError as e:
        logger.error("Could not read program: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
