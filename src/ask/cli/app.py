"""Top-level CLI router for ask.

``ask configure ...`` manages the stored credential; everything else
(questions, ``--explain``, ``--history``, ``--api-key``) goes to query mode.
"""

import sys

from . import configure as configure_cmd
from . import query as query_cmd


def main(argv: list[str] | None = None) -> int:
    """Dispatch ``argv`` (default: ``sys.argv[1:]``) and return the exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args[:1] == ["configure"]:
        return configure_cmd.run(args[1:])
    return query_cmd.run(args)


def entrypoint() -> None:
    """Console script entrypoint for ``ask``."""
    raise SystemExit(main())
