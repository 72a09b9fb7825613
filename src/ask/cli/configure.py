"""`ask configure` command: show, set or clear the stored credential."""

import argparse
import logging
import os
import sys

from ask import config
from ask.cli.query import API_KEY_CLI_WARNING


def build_parser() -> argparse.ArgumentParser:
    """Build parser for the configure command."""
    parser = argparse.ArgumentParser(
        prog="ask configure",
        description="Manage the stored ask credential",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    key_group = parser.add_mutually_exclusive_group()
    key_group.add_argument(
        "--api-key",
        help=(
            "Provider API key to store in config "
            "(not recommended; may leak via shell history/process list)"
        ),
    )
    key_group.add_argument(
        "--clear-api-key",
        action="store_true",
        help="Remove stored API key from config",
    )
    key_group.add_argument(
        "--show",
        action="store_true",
        help="Print the current configuration without changing it (default)",
    )
    return parser


def _describe_key_source(stored: str | None) -> str:
    if stored:
        return "set (config file)"
    for name in config.API_KEY_ENV_VARS:
        if os.environ.get(name):
            return f"from {name}"
    return "not set"


def run(argv: list[str]) -> int:
    """Execute the configure command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    if args.api_key is not None:
        print(API_KEY_CLI_WARNING, file=sys.stderr)

    try:
        if args.api_key is not None:
            stored = config.update_api_key(args.api_key)
        elif args.clear_api_key:
            stored = config.update_api_key(None)
        else:
            stored = config.read_config()
    except OSError as e:
        print(f"Error: could not save config: {e}", file=sys.stderr)
        return 1

    print(f"\nConfiguration file: {config.CONFIG_FILE}")
    print(f"  api_key: {_describe_key_source(stored.api_key)}")
    print(f"  model: {config.get_model()}")
    print("")
    return 0
