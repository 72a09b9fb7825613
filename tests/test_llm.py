"""Unit tests for ask.llm and ask.errors."""

from unittest.mock import MagicMock, patch

import pytest

from ask.errors import CompletionError, ErrorKind, classify_error
from ask.llm import complete


def _response(content):
    response = MagicMock()
    response.choices[0].message.content = content
    return response


class TestClassifyError:
    @pytest.mark.parametrize(
        "message",
        [
            "AuthenticationError: invalid credentials",
            "API key not valid. Please pass a valid API key.",
            "401 Unauthorized",
        ],
    )
    def test_auth_failures(self, message):
        assert classify_error(message) is ErrorKind.AUTH_FAILURE

    @pytest.mark.parametrize("message", ["Request Timeout", "read timed out after 600s"])
    def test_timeouts(self, message):
        assert classify_error(message) is ErrorKind.TIMEOUT

    @pytest.mark.parametrize("message", ["", "Rate limit exceeded", "connection reset"])
    def test_everything_else_is_unclassified(self, message):
        assert classify_error(message) is ErrorKind.UNCLASSIFIED


class TestCompletionError:
    def test_message_is_human_readable(self):
        error = CompletionError(ErrorKind.AUTH_FAILURE, "raw provider text")
        assert "Authentication failed" in str(error)
        assert "raw provider text" not in error.user_message

    def test_unclassified_includes_detail(self):
        error = CompletionError(ErrorKind.UNCLASSIFIED, "connection reset")
        assert error.user_message == "LLM call failed. connection reset"


class TestComplete:
    @patch("ask.llm.litellm.completion")
    def test_returns_raw_content(self, mock_completion):
        mock_completion.return_value = _response("```bash\nls\n```")

        assert complete("prompt", "key-123", model="test/model") == "```bash\nls\n```"

        kwargs = mock_completion.call_args.kwargs
        assert kwargs["model"] == "test/model"
        assert kwargs["api_key"] == "key-123"
        assert kwargs["messages"] == [{"role": "user", "content": "prompt"}]
        assert kwargs["temperature"] == 0
        assert kwargs["num_retries"] == 0
        assert "timeout" not in kwargs

    @patch("ask.llm.litellm.completion")
    def test_transport_error_is_classified(self, mock_completion):
        mock_completion.side_effect = RuntimeError("authentication failed for project")

        with pytest.raises(CompletionError) as exc_info:
            complete("prompt", "bad", model="test/model")

        assert exc_info.value.kind is ErrorKind.AUTH_FAILURE
        assert mock_completion.call_count == 1

    @patch("ask.llm.litellm.completion")
    def test_custom_classifier_is_used(self, mock_completion):
        mock_completion.side_effect = RuntimeError("anything")

        with pytest.raises(CompletionError) as exc_info:
            complete("p", "k", model="m", classifier=lambda message: ErrorKind.TIMEOUT)

        assert exc_info.value.kind is ErrorKind.TIMEOUT

    @pytest.mark.parametrize("content", [None, "", "   \n"])
    @patch("ask.llm.litellm.completion")
    def test_blank_content_is_empty_content(self, mock_completion, content):
        mock_completion.return_value = _response(content)

        with pytest.raises(CompletionError) as exc_info:
            complete("p", "k", model="m")

        assert exc_info.value.kind is ErrorKind.EMPTY_CONTENT
