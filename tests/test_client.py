"""Tests for the guestbook HTTP client and UI state."""

from __future__ import annotations

from typing import Any, Optional

import pytest
from requests.exceptions import ConnectionError as RequestsConnectionError

from app.client import GuestbookState, WishApiClient, WishApiError


class FakeResponse:
    def __init__(self, status_code: int, payload: Any = None) -> None:
        self.status_code = status_code
        self._payload = payload

    def json(self) -> Any:
        if self._payload is None:
            raise ValueError("No JSON body")
        return self._payload


class FakeSession:
    def __init__(self, *responses: FakeResponse, error: Optional[Exception] = None) -> None:
        self.responses = list(responses)
        self.error = error
        self.calls: list[tuple[str, str, dict[str, Any]]] = []

    def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append((method, url, kwargs))
        if self.error is not None:
            raise self.error
        return self.responses.pop(0)


WISH_PAYLOAD = {
    "id": 1,
    "name": "Alice",
    "message": "Congrats!",
    "timestamp": "2026-06-20T18:30:00.123456Z",
}


@pytest.fixture
def api(client) -> WishApiClient:
    """API client routed through the in-process test server."""

    return WishApiClient("http://testserver", session=client)


def test_client_round_trip_against_app(api):
    created = api.create_wish("Alice", "Congrats!")

    assert created.id == 1
    assert [wish.name for wish in api.list_wishes()] == ["Alice"]
    assert api.delete_wish(created.id) == "Wish deleted successfully"
    assert api.list_wishes() == []


def test_client_surfaces_server_error_message(api):
    with pytest.raises(WishApiError) as excinfo:
        api.create_wish("", "hi")

    assert excinfo.value.status_code == 400
    assert excinfo.value.message == "Name and message are required"

    with pytest.raises(WishApiError) as excinfo:
        api.delete_wish(404)

    assert excinfo.value.status_code == 404


def test_client_builds_urls_and_parses_timestamps():
    session = FakeSession(FakeResponse(200, [WISH_PAYLOAD]))
    api = WishApiClient("http://localhost:3000/", session=session, timeout=3)

    wishes = api.list_wishes()

    method, url, kwargs = session.calls[0]
    assert (method, url) == ("GET", "http://localhost:3000/wishes")
    assert kwargs["timeout"] == 3
    assert wishes[0].timestamp.utcoffset().total_seconds() == 0
    assert wishes[0].timestamp.microsecond == 123456


def test_client_wraps_transport_errors():
    api = WishApiClient(session=FakeSession(error=RequestsConnectionError("refused")))

    with pytest.raises(WishApiError) as excinfo:
        api.list_wishes()

    assert excinfo.value.status_code is None
    assert "refused" in excinfo.value.message


def test_client_handles_non_json_error_body():
    api = WishApiClient(session=FakeSession(FakeResponse(502)))

    with pytest.raises(WishApiError) as excinfo:
        api.reset_wishes()

    assert excinfo.value.status_code == 502
    assert excinfo.value.message == "Request failed with status 502"


def test_state_refresh_loads_wishes(api):
    api.create_wish("Bob", "hi")
    state = GuestbookState(api=api)

    state.refresh()

    assert [wish.name for wish in state.wishes] == ["Bob"]


def test_state_submit_clears_form_and_refetches(api):
    state = GuestbookState(api=api)
    state.open_form()
    state.name = "Carol"
    state.message = "All the best"

    created = state.submit()

    assert created is not None
    assert state.name == ""
    assert state.message == ""
    assert state.show_form is False
    assert state.submitting is False
    assert [wish.id for wish in state.wishes] == [created.id]


def test_state_submit_ignores_blank_form():
    session = FakeSession()
    state = GuestbookState(api=WishApiClient(session=session))
    state.name = "Dana"
    state.message = "   "

    assert state.can_submit() is False
    assert state.submit() is None
    assert session.calls == []


def test_state_submit_failure_keeps_fields():
    session = FakeSession(FakeResponse(500, {"error": "database is locked"}))
    state = GuestbookState(api=WishApiClient(session=session))
    state.open_form()
    state.name = "Eve"
    state.message = "Cheers"

    with pytest.raises(WishApiError):
        state.submit()

    assert state.name == "Eve"
    assert state.message == "Cheers"
    assert state.show_form is True
    assert state.submitting is False


def test_state_delete_and_reset_refetch(api):
    state = GuestbookState(api=api)
    first = api.create_wish("Frank", "one")
    api.create_wish("Gina", "two")
    api.create_wish("Hank", "three")

    state.delete(first.id)
    assert [wish.name for wish in state.wishes] == ["Hank", "Gina"]

    assert state.reset() == 2
    assert state.wishes == []
