"""Tests for LLM adapter."""
import pytest
import requests as real_requests
from unittest.mock import MagicMock, patch

from symbol_quest.services.llm_adapter import LLMAdapter, LLMError, completions_url

ADAPTER_REQUESTS = "symbol_quest.services.llm_adapter.requests"


def _ok(content="Ok"):
    mock_resp = MagicMock()
    mock_resp.status_code = 200
    mock_resp.json.return_value = {"choices": [{"message": {"content": content}}]}
    return mock_resp


class TestLLMAdapter:
    def setup_method(self):
        self.adapter = LLMAdapter(
            api_endpoint="https://api.example.com/v1",
            api_key="sk-test-key",
            model="gpt-4o-mini",
            system_prompt="You are a tarot reader.",
            timeout=10,
            max_tokens=400,
            temperature=0.7,
        )

    def test_endpoint_gets_completions_path(self):
        assert self.adapter.api_endpoint == "https://api.example.com/v1/chat/completions"

    def test_full_endpoint_kept(self):
        adapter = LLMAdapter("https://llm.local/v1/chat/completions/", "k", "m")
        assert adapter.api_endpoint == "https://llm.local/v1/chat/completions"

    def test_is_configured(self):
        assert self.adapter.is_configured is True
        assert LLMAdapter("", "key", "m").is_configured is False
        assert LLMAdapter("https://llm.local/v1", "", "m").is_configured is False

    @patch(ADAPTER_REQUESTS)
    def test_complete_returns_content(self, mock_requests):
        mock_requests.post.return_value = _ok("The Star shines.")

        assert self.adapter.complete("Read the Star") == "The Star shines."

    @patch(ADAPTER_REQUESTS)
    def test_payload_includes_prompt_and_sampling(self, mock_requests):
        mock_requests.post.return_value = _ok()

        self.adapter.complete("Read the Star")

        call = mock_requests.post.call_args
        payload = call.kwargs["json"]
        assert payload["model"] == "gpt-4o-mini"
        assert payload["messages"][0] == {"role": "system", "content": "You are a tarot reader."}
        assert payload["messages"][1] == {"role": "user", "content": "Read the Star"}
        assert payload["max_tokens"] == 400
        assert payload["temperature"] == 0.7
        assert call.kwargs["headers"]["Authorization"] == "Bearer sk-test-key"
        assert call.kwargs["timeout"] == 10

    @patch(ADAPTER_REQUESTS)
    def test_optional_fields_omitted(self, mock_requests):
        mock_requests.post.return_value = _ok()
        adapter = LLMAdapter("https://llm.local/v1", "k", "m")

        adapter.chat([{"role": "user", "content": "Hi"}])

        payload = mock_requests.post.call_args.kwargs["json"]
        assert "max_tokens" not in payload
        assert "temperature" not in payload
        assert payload["messages"] == [{"role": "user", "content": "Hi"}]

    def test_missing_endpoint_raises(self):
        with pytest.raises(LLMError, match="not configured"):
            LLMAdapter("", "k", "m").complete("Hi")

    @patch(ADAPTER_REQUESTS)
    def test_raises_on_non_200(self, mock_requests):
        mock_resp = MagicMock()
        mock_resp.status_code = 500
        mock_resp.text = "Internal Server Error"
        mock_requests.post.return_value = mock_resp

        with pytest.raises(LLMError, match="500"):
            self.adapter.complete("Hi")

    @patch(ADAPTER_REQUESTS)
    def test_raises_on_timeout(self, mock_requests):
        mock_requests.post.side_effect = real_requests.Timeout("timed out")
        mock_requests.Timeout = real_requests.Timeout
        mock_requests.RequestException = real_requests.RequestException

        with pytest.raises(LLMError, match="timed out"):
            self.adapter.complete("Hi")

    @patch(ADAPTER_REQUESTS)
    def test_raises_on_connection_error(self, mock_requests):
        mock_requests.post.side_effect = real_requests.ConnectionError("refused")
        mock_requests.Timeout = real_requests.Timeout
        mock_requests.RequestException = real_requests.RequestException

        with pytest.raises(LLMError, match="request failed"):
            self.adapter.complete("Hi")

    @patch(ADAPTER_REQUESTS)
    def test_raises_on_unexpected_body(self, mock_requests):
        mock_resp = MagicMock()
        mock_resp.status_code = 200
        mock_resp.json.return_value = {"choices": []}
        mock_requests.post.return_value = mock_resp

        with pytest.raises(LLMError, match="Invalid LLM API response"):
            self.adapter.complete("Hi")

    @patch(ADAPTER_REQUESTS)
    def test_reply_is_trimmed(self, mock_requests):
        mock_requests.post.return_value = _ok("\n  The Star shines.  \n")

        assert self.adapter.complete("Read the Star") == "The Star shines."

    @pytest.mark.parametrize("content", ["", "   \n", None])
    @patch(ADAPTER_REQUESTS)
    def test_raises_on_empty_reply(self, mock_requests, content):
        mock_requests.post.return_value = _ok(content)

        with pytest.raises(LLMError, match="empty reply"):
            self.adapter.complete("Hi")

    def test_build_request_does_not_mutate_messages(self):
        messages = [{"role": "user", "content": "Hi"}]

        body = self.adapter.build_request(messages)

        assert messages == [{"role": "user", "content": "Hi"}]
        assert [m["role"] for m in body["messages"]] == ["system", "user"]


class TestCompletionsUrl:
    @pytest.mark.parametrize(
        "endpoint, expected",
        [
            ("https://api.example.com/v1", "https://api.example.com/v1/chat/completions"),
            ("https://api.example.com/v1/", "https://api.example.com/v1/chat/completions"),
            ("https://api.example.com/v1/chat/completions", "https://api.example.com/v1/chat/completions"),
            ("", ""),
            (None, ""),
        ],
    )
    def test_completions_url(self, endpoint, expected):
        assert completions_url(endpoint) == expected
