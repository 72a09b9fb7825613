"""Normalize raw model output and split it into command and annotations."""

import logging
import re

from ask.constants import CLARIFY_SENTINEL, EXPLAIN_SENTINEL
from ask.models import ParsedAnswer

log = logging.getLogger(__name__)

FENCE = "```"
# A fence opener line that only names a language, e.g. "bash" or "shell-session".
LANGUAGE_TAG_RE = re.compile(r"[A-Za-z0-9_+#.-]*")


def _strip_fence(text: str) -> str:
    body = text[len(FENCE) : -len(FENCE)]
    first, sep, rest = body.partition("\n")
    if sep and LANGUAGE_TAG_RE.fullmatch(first.strip()):
        body = rest
    return body.strip()


def normalize(raw: str) -> str:
    """Remove incidental wrapping from model output.

    A triple-backtick fence around the whole text is checked first and
    removed together with its language tag line. Otherwise a single pair of
    wrapping backticks is removed. At most one layer is stripped.
    """
    text = raw.strip()
    if text.startswith(FENCE) and text.endswith(FENCE):
        # Opening and closing fence overlap: nothing sits between them.
        text = "" if len(text) < 2 * len(FENCE) else _strip_fence(text)
    elif len(text) > 2 and text.startswith("`") and text.endswith("`"):
        text = text[1:-1].strip()
    return text


def _sentinel_body(line: str) -> tuple[str, str] | None:
    """Return (sentinel, remainder) when ``line`` starts with a sentinel."""
    stripped = line.lstrip()
    for sentinel in (EXPLAIN_SENTINEL, CLARIFY_SENTINEL):
        if stripped.startswith(sentinel):
            return sentinel, stripped[len(sentinel) :].strip()
    return None


def split(normalized: str) -> ParsedAnswer:
    """Partition normalized text into primary lines and sentinel annotations.

    Lines that match no sentinel are kept as primary content; blank lines
    are dropped.
    """
    primary: list[str] = []
    annotations: list[str] = []
    needs_clarification = False
    for line in normalized.splitlines():
        if not line.strip():
            continue
        match = _sentinel_body(line)
        if match is None:
            primary.append(line.rstrip())
            continue
        sentinel, body = match
        annotations.append(body)
        if sentinel == CLARIFY_SENTINEL:
            needs_clarification = True

    log.debug("split: %d primary lines, %d annotations", len(primary), len(annotations))
    return ParsedAnswer(
        primary_text="\n".join(primary),
        annotations=annotations,
        needs_clarification=needs_clarification,
    )
