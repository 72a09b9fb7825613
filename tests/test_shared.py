"""Unit tests for ask.cli.shared presentation helpers."""

import io
import json
from unittest.mock import MagicMock

import pytest

from ask.cli.shared import (
    RenderMode,
    answer_payload,
    format_answer,
    format_history,
    render,
    supports_color,
    typewrite,
)
from ask.models import ExplainRequest, GenerateRequest, HistoryEntry, Mode, ParsedAnswer


class _TtyStream(io.StringIO):
    def isatty(self) -> bool:
        return True


class TestFormatAnswer:
    def test_single_line(self):
        assert format_answer(ParsedAnswer(primary_text="ls -la")) == "> ls -la"

    def test_continuation_lines_are_indented(self):
        answer = ParsedAnswer(primary_text="cd /tmp\nls")
        assert format_answer(answer) == "> cd /tmp\n  ls"

    def test_annotations_joined_with_space(self):
        answer = ParsedAnswer(primary_text="rm -rf a b", annotations=["deletes a", "and b"])
        assert format_answer(answer) == "> rm -rf a b\n  # deletes a and b"

    def test_empty_command_with_warning(self):
        answer = ParsedAnswer(primary_text="", annotations=["wipes the disk"])
        assert format_answer(answer) == "> \n  # wipes the disk"

    def test_color_wraps_marker(self):
        colored = format_answer(ParsedAnswer(primary_text="ls"), color=True)
        assert colored.startswith("\033[1m\033[36m> \033[0m")
        assert colored.endswith("ls")


class TestSupportsColor:
    def test_no_color_env_disables(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        assert supports_color(_TtyStream()) is False

    def test_dumb_terminal_disables(self, monkeypatch):
        monkeypatch.setenv("TERM", "dumb")
        assert supports_color(_TtyStream()) is False

    def test_tty_enables(self, monkeypatch):
        monkeypatch.setenv("TERM", "xterm-256color")
        assert supports_color(_TtyStream()) is True

    def test_non_tty_disables(self):
        assert supports_color(io.StringIO()) is False


class TestAnswerPayload:
    def test_generate_shape(self):
        payload = answer_payload(
            GenerateRequest(question="clean up"),
            ParsedAnswer(primary_text="rm -rf build", annotations=["deletes build"]),
        )
        assert payload == {
            "mode": "generate",
            "question": "clean up",
            "command": "rm -rf build",
            "explanation": "deletes build",
        }

    def test_explain_shape(self):
        payload = answer_payload(
            ExplainRequest(command_text="rm -rf build"),
            ParsedAnswer(primary_text="Deletes build recursively.", annotations=["irreversible"]),
        )
        assert payload == {
            "mode": "explain",
            "command": "rm -rf build",
            "explanation": "Deletes build recursively.\nirreversible",
        }


class TestRender:
    def test_plain_output(self):
        stream = io.StringIO()
        render(GenerateRequest(question="q"), ParsedAnswer(primary_text="ls"), stream=stream)
        assert stream.getvalue() == "> ls\n"

    def test_json_output_has_no_ornamentation(self, monkeypatch):
        monkeypatch.setenv("TERM", "xterm")
        stream = _TtyStream()
        render(
            GenerateRequest(question="q"),
            ParsedAnswer(primary_text="ls"),
            RenderMode.JSON,
            stream=stream,
        )
        output = stream.getvalue()
        assert "\033[" not in output
        assert json.loads(output)["command"] == "ls"

    def test_progressive_matches_plain(self, monkeypatch):
        monkeypatch.setattr("ask.cli.shared.time.sleep", lambda _: None)
        request = GenerateRequest(question="q")
        answer = ParsedAnswer(primary_text="cd /tmp\nls", annotations=["note"])
        plain, progressive = io.StringIO(), io.StringIO()

        render(request, answer, RenderMode.PLAIN, stream=plain)
        render(request, answer, RenderMode.PROGRESSIVE, stream=progressive)

        assert progressive.getvalue() == plain.getvalue()


class TestTypewrite:
    def test_writes_one_character_per_delay(self):
        stream = io.StringIO()
        sleep = MagicMock()
        typewrite("abc", stream, delay=0.5, sleep=sleep)
        assert stream.getvalue() == "abc\n"
        assert sleep.call_count == 3
        sleep.assert_called_with(0.5)

    def test_interrupt_flushes_remaining_text(self):
        stream = io.StringIO()
        sleep = MagicMock(side_effect=[None, KeyboardInterrupt()])
        typewrite("hello", stream, sleep=sleep)
        assert stream.getvalue() == "hello\n"
        assert sleep.call_count == 2


class TestFormatHistory:
    def test_empty(self):
        assert format_history([]) == "No history yet."

    def test_entries(self):
        entries = [
            HistoryEntry(timestamp="t1", mode=Mode.GENERATE, question="list", answer="ls"),
            HistoryEntry(timestamp="t2", mode=Mode.EXPLAIN, question="ls", answer="Lists."),
        ]
        assert format_history(entries) == (
            "[t1] generate\nQ: list\n> ls\n\n[t2] explain\nQ: ls\n> Lists."
        )


@pytest.mark.parametrize("mode", list(RenderMode))
def test_render_modes_print_command(mode, monkeypatch):
    monkeypatch.setattr("ask.cli.shared.time.sleep", lambda _: None)
    stream = io.StringIO()
    render(GenerateRequest(question="q"), ParsedAnswer(primary_text="pwd"), mode, stream=stream)
    assert "pwd" in stream.getvalue()
