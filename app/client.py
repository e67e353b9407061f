"""HTTP client and view state for the guestbook UI.

``WishApiClient`` wraps the REST endpoints with ``requests``.
``GuestbookState`` holds what the guestbook window shows (the list, the
form fields, whether a submission is in flight) and keeps the list in step
with the server after every change. The server stays the source of truth;
nothing here is persisted.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

import requests
from requests import Response, Session
from requests.exceptions import RequestException

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:3000")
DEFAULT_TIMEOUT = 10


class WishApiError(RuntimeError):
    """Raised when the guestbook API cannot be reached or rejects a call."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


@dataclass(frozen=True)
class WishEntry:
    id: int
    name: str
    message: str
    timestamp: datetime

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "WishEntry":
        raw_timestamp = str(payload["timestamp"])
        if raw_timestamp.endswith("Z"):
            raw_timestamp = raw_timestamp[:-1] + "+00:00"
        return cls(
            id=int(payload["id"]),
            name=str(payload["name"]),
            message=str(payload["message"]),
            timestamp=datetime.fromisoformat(raw_timestamp),
        )

    def display_time(self) -> str:
        """Timestamp converted to local time for display."""

        return self.timestamp.astimezone().strftime("%Y-%m-%d %H:%M")


class WishApiClient:
    """Thin ``requests`` wrapper around the guestbook endpoints."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        session: Optional[Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def list_wishes(self) -> list[WishEntry]:
        payload = self._request("GET", "/wishes")
        return [WishEntry.from_payload(item) for item in payload or []]

    def create_wish(self, name: str, message: str) -> WishEntry:
        payload = self._request("POST", "/wishes", json={"name": name, "message": message})
        return WishEntry.from_payload(payload)

    def delete_wish(self, wish_id: int) -> str:
        payload = self._request("DELETE", f"/wishes/{wish_id}")
        return payload.get("message", "")

    def reset_wishes(self) -> int:
        payload = self._request("DELETE", "/wishes")
        return int(payload.get("count", 0))

    def _request(self, method: str, endpoint: str, **kwargs: Any) -> Any:
        url = f"{self.base_url}{endpoint}"
        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(
                method=method,
                url=url,
                timeout=self.timeout,
                **kwargs,
            )
        except RequestException as exc:
            raise WishApiError(f"Could not reach guestbook API: {exc}") from exc

        if response.status_code >= 400:
            raise WishApiError(
                self._error_message(response),
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise WishApiError(
                "Guestbook API returned a non-JSON response",
                status_code=response.status_code,
            ) from exc

    @staticmethod
    def _error_message(response: Response) -> str:
        try:
            payload = response.json()
        except ValueError:
            return f"Request failed with status {response.status_code}"

        if isinstance(payload, dict):
            message = payload.get("error") or payload.get("message")
            if message:
                return str(message)
        return f"Request failed with status {response.status_code}"


@dataclass
class GuestbookState:
    api: WishApiClient
    wishes: list[WishEntry] = field(default_factory=list)
    name: str = ""
    message: str = ""
    show_form: bool = False
    submitting: bool = False

    def refresh(self) -> list[WishEntry]:
        self.wishes = self.api.list_wishes()
        return self.wishes

    def open_form(self) -> None:
        self.show_form = True

    def close_form(self) -> None:
        self.show_form = False

    def can_submit(self) -> bool:
        return bool(self.name.strip() and self.message.strip()) and not self.submitting

    def submit(self) -> Optional[WishEntry]:
        """Send the form; returns the created wish, or None if the form is incomplete.

        On failure the fields are kept so the guest can retry, and the
        ``WishApiError`` propagates to the caller.
        """

        if not self.name.strip() or not self.message.strip():
            return None

        self.submitting = True
        try:
            created = self.api.create_wish(self.name, self.message)
            self.name = ""
            self.message = ""
            self.show_form = False
            self.refresh()
            return created
        finally:
            self.submitting = False

    def delete(self, wish_id: int) -> None:
        self.api.delete_wish(wish_id)
        self.refresh()

    def reset(self) -> int:
        count = self.api.reset_wishes()
        self.refresh()
        return count
