"""HTTP client for the remote draw service."""
import logging
from typing import Any, Dict, Optional

import requests

from symbol_quest.client.errors import (
    AlreadyDrawnError,
    ApiError,
    AuthenticationError,
    QuotaExceededError,
    ServiceUnavailableError,
)
from symbol_quest.client.responses import (
    AuthResult,
    DailyDrawResult,
    DrawHistory,
    TodayStatus,
)
from symbol_quest.models.card import Card

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:8080/api"
DEFAULT_TIMEOUT = 15


class ApiClient:
    """
    Thin wrapper over the draw service REST API.

    Holds the bearer token for the current session; callers own the
    instance (see ClientSession) instead of sharing a module-level one.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        token: Optional[str] = None,
        timeout: int = DEFAULT_TIMEOUT,
    ):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout

    def _headers(self, auth: bool) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if auth and self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _request(
        self,
        method: str,
        path: str,
        payload: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        auth: bool = True,
    ) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            response = requests.request(
                method,
                url,
                json=payload,
                params=params,
                headers=self._headers(auth),
                timeout=self.timeout,
            )
        except requests.Timeout:
            raise ServiceUnavailableError(f"Request to {path} timed out")
        except requests.RequestException as e:
            raise ServiceUnavailableError(f"Request to {path} failed: {e}")

        return self._handle_response(response)

    @staticmethod
    def _handle_response(response: requests.Response) -> Dict[str, Any]:
        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        status = response.status_code
        if 200 <= status < 300:
            return data

        message = (
            data.get("message")
            or data.get("error")
            or response.reason
            or f"HTTP Error {status}"
        )

        if status == 401:
            raise AuthenticationError(message, status, data)
        if status == 409:
            raise AlreadyDrawnError(message, status, data)
        if status == 403 and data.get("upgrade_required"):
            raise QuotaExceededError(message, status, data)
        raise ApiError(message, status, data)

    # Authentication

    def register(self, email: str, password: str) -> AuthResult:
        data = self._request(
            "POST", "/auth/register", {"email": email, "password": password}, auth=False
        )
        result = AuthResult.from_payload(data)
        if result.token:
            self.token = result.token
        return result

    def login(self, email: str, password: str) -> AuthResult:
        data = self._request(
            "POST", "/auth/login", {"email": email, "password": password}, auth=False
        )
        result = AuthResult.from_payload(data)
        if result.token:
            self.token = result.token
        return result

    def logout(self) -> None:
        """Notify the service and drop the token even if the call fails."""
        try:
            self._request("POST", "/auth/logout")
        except ApiError as e:
            logger.warning(f"Logout request failed: {e}")
        finally:
            self.token = None

    def get_profile(self) -> Dict[str, Any]:
        return self._request("GET", "/auth/profile")

    # Card draws

    def perform_daily_draw(self, mood: str, question: str) -> DailyDrawResult:
        data = self._request("POST", "/draws/daily", {"mood": mood, "question": question})
        return DailyDrawResult.from_payload(data)

    def get_draw_history(self, limit: int = 20) -> DrawHistory:
        data = self._request("GET", "/draws/history", params={"limit": limit})
        return DrawHistory.from_payload(data)

    def get_today_status(self) -> TodayStatus:
        return TodayStatus.from_payload(self._request("GET", "/draws/today"))

    # Card meanings

    def get_card_meaning(self, card_id: int) -> Optional[Card]:
        """Card details from the catalog endpoint, None if the payload has no card."""
        data = self._request("GET", f"/cards/{card_id}/meaning", auth=False)
        card = data.get("card")
        if not isinstance(card, dict) or card.get("id") is None:
            return None
        return Card.from_dict(card)

    def get_enhanced_interpretation(
        self,
        card_id: int,
        mood: str,
        question: str,
        draw_date: Optional[str] = None,
    ) -> str:
        data = self._request(
            "POST",
            "/interpretations/enhanced",
            {
                "card_id": card_id,
                "mood": mood,
                "question": question,
                "draw_date": draw_date,
            },
        )
        return str(data.get("interpretation") or "")

    def health_check(self) -> bool:
        """True when the service answers its health endpoint."""
        root = self.base_url[: -len("/api")] if self.base_url.endswith("/api") else self.base_url
        try:
            response = requests.get(f"{root}/health", timeout=self.timeout)
        except requests.RequestException:
            return False
        return response.status_code == 200

    def is_authenticated(self) -> bool:
        return bool(self.token)
