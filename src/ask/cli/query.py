"""One-shot query CLI implementation."""

import argparse
import json
import logging
import sys

from ask import __version__, history
from ask.ask import build_request
from ask.ask import run as ask_llm
from ask.cli.shared import RenderMode, format_history, render
from ask.clipboard import copy_to_clipboard
from ask.config import API_KEY_ENV_VARS, read_config, resolve_api_key, update_api_key
from ask.errors import CompletionError
from ask.wait_indicator import WaitIndicator

log = logging.getLogger(__name__)

API_KEY_CLI_WARNING = (
    "Warning: --api-key may leak secrets via shell history and process lists. "
    f"Prefer the {' / '.join(API_KEY_ENV_VARS)} environment variables."
)
MISSING_API_KEY_MESSAGE = (
    "No API key configured. Use: ask --api-key YOUR_KEY or set "
    f"{' / '.join(API_KEY_ENV_VARS)}."
)


def build_parser() -> argparse.ArgumentParser:
    """Build parser for one-shot query mode."""
    parser = argparse.ArgumentParser(
        prog="ask",
        description="ask: terminal assistant that generates shell commands",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "-x",
        "--explain",
        action="store_true",
        help="Explain the given command instead of generating one",
    )
    parser.add_argument("--silent", action="store_true", help="Suppress spinner and typewriter")
    output_group = parser.add_mutually_exclusive_group()
    output_group.add_argument(
        "--type", action="store_true", help="Show output with typewriter effect"
    )
    output_group.add_argument(
        "--json", action="store_true", help="Print the answer as a JSON object"
    )
    parser.add_argument(
        "--no-copy", action="store_true", help="Do not copy the answer to the clipboard"
    )
    parser.add_argument(
        "--history", action="store_true", help="Show previous questions and commands"
    )
    parser.add_argument("--api-key", metavar="API_KEY", help="Set or replace your LLM API key")
    parser.add_argument(
        "words",
        nargs="*",
        metavar="question",
        help="What you want to do (natural language), or a command with --explain",
    )
    return parser


def _render_mode(args: argparse.Namespace) -> RenderMode:
    if args.json:
        return RenderMode.JSON
    if args.type and not args.silent:
        return RenderMode.PROGRESSIVE
    return RenderMode.PLAIN


def _print_history(as_json: bool) -> None:
    entries = history.read_history()
    if as_json:
        payload = [entry.model_dump(mode="json") for entry in entries]
        print(json.dumps(payload, indent=2))
        return
    print(format_history(entries))


def run(argv: list[str]) -> int:
    """Execute one-shot query mode."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    if args.api_key is not None:
        print(API_KEY_CLI_WARNING, file=sys.stderr)
        try:
            update_api_key(args.api_key)
        except OSError as e:
            print(f"Error: could not save config: {e}", file=sys.stderr)
            return 1
        print("API key updated.")
        return 0

    if args.history:
        _print_history(args.json)
        return 0

    request = build_request(args.words, explain=args.explain)
    if request is None:
        parser.print_help()
        return 0

    api_key = resolve_api_key(read_config())
    if not api_key:
        print(MISSING_API_KEY_MESSAGE, file=sys.stderr)
        return 1

    mode = _render_mode(args)
    spinner = WaitIndicator(enabled=not args.silent and mode is not RenderMode.JSON)
    try:
        with spinner:
            answer = ask_llm(request, api_key)
    except CompletionError as e:
        log.debug("completion failed: kind=%s detail=%s", e.kind.value, e.detail)
        print(f"Error: {e.user_message}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    render(request, answer, mode)

    if mode is not RenderMode.JSON and not args.no_copy and answer.primary_text:
        copied = copy_to_clipboard(answer.primary_text)
        if not args.silent:
            print("Copied to clipboard." if copied else "Clipboard unavailable.", file=sys.stderr)

    return 0
