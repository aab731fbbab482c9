"""Client for OpenAI-compatible chat completion endpoints used for card readings."""
import logging
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)

CHAT_COMPLETIONS_PATH = "/chat/completions"
DEFAULT_TIMEOUT = 30

Message = Dict[str, str]


class LLMError(Exception):
    """Raised when the completion request fails."""
    pass


def completions_url(endpoint: str) -> str:
    """Full completions URL for a base URL or an already complete one.

    https://api.openai.com/v1                  -> .../v1/chat/completions
    https://api.openai.com/v1/chat/completions -> unchanged
    """
    endpoint = (endpoint or "").rstrip("/")
    if endpoint and not endpoint.endswith(CHAT_COMPLETIONS_PATH):
        endpoint += CHAT_COMPLETIONS_PATH
    return endpoint


class LLMAdapter:
    """
    Turns a reading prompt into reply text.

    Sampling settings (max_tokens, temperature) are sent only when set, so
    providers that reject unknown fields keep working.
    """

    def __init__(
        self,
        api_endpoint: str,
        api_key: str,
        model: str,
        system_prompt: str = "",
        timeout: int = DEFAULT_TIMEOUT,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ):
        self.api_endpoint = completions_url(api_endpoint)
        self.api_key = api_key
        self.model = model
        self.system_prompt = system_prompt
        self.timeout = timeout
        self.max_tokens = max_tokens
        self.temperature = temperature

    @property
    def is_configured(self) -> bool:
        return bool(self.api_endpoint and self.api_key)

    def build_request(self, messages: List[Message]) -> Dict[str, Any]:
        """Request body for messages, prefixed with the system prompt."""
        conversation = list(messages)
        if self.system_prompt:
            conversation = [{"role": "system", "content": self.system_prompt}] + conversation

        body: Dict[str, Any] = {"model": self.model, "messages": conversation}
        for field, value in (("max_tokens", self.max_tokens), ("temperature", self.temperature)):
            if value is not None:
                body[field] = value
        return body

    def complete(self, prompt: str) -> str:
        """Reply to a single user prompt."""
        return self.chat([{"role": "user", "content": prompt}])

    def chat(self, messages: List[Message]) -> str:
        """
        Reply text for a conversation.

        Raises:
            LLMError: endpoint missing, transport failure, non-200 status,
                or a body without reply text.
        """
        if not self.api_endpoint:
            raise LLMError("LLM API endpoint is not configured")

        data = self._send(self.build_request(messages))
        return self._reply_text(data)

    def _send(self, body: Dict[str, Any]) -> Any:
        logger.debug(f"Requesting completion from {self.model} ({len(body['messages'])} messages)")
        try:
            response = requests.post(
                self.api_endpoint,
                json=body,
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                },
                timeout=self.timeout,
            )
        except requests.Timeout:
            raise LLMError("LLM API request timed out")
        except requests.RequestException as e:
            raise LLMError(f"LLM API request failed: {e}")

        if response.status_code != 200:
            raise LLMError(f"LLM API returned {response.status_code}: {response.text}")

        try:
            return response.json()
        except ValueError as e:
            raise LLMError(f"Invalid LLM API response: {e}")

    @staticmethod
    def _reply_text(data: Any) -> str:
        try:
            text = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise LLMError(f"Invalid LLM API response: missing {e}")

        if not isinstance(text, str) or not text.strip():
            raise LLMError("Invalid LLM API response: empty reply")
        return text.strip()
