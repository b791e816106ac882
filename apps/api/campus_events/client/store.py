"""HTTP client for the events API.

Reads never fail: any transport problem or error response is logged and the
caller gets an empty list. Writes validate the draft locally first and raise
``EventStoreError`` for anything the server refuses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

import httpx
import structlog
from pydantic import ValidationError as SchemaValidationError

from campus_events.api.schemas.events import EventOut
from campus_events.auth.shared_secret import PseudoIdentity
from campus_events.client.forms import EventDraft, validate_draft
from campus_events.core.config import Settings

logger = structlog.get_logger()

GENERIC_CREATE_FAILURE = "Failed to create event. Please try again."


class EventStoreError(Exception):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DraftValidationError(EventStoreError):
    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = errors
        super().__init__("event draft is invalid", status_code=None)


def _body(response: httpx.Response) -> dict[str, Any]:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


@dataclass
class EventStoreClient:
    http: httpx.Client
    identity: PseudoIdentity = field(default_factory=PseudoIdentity)

    @classmethod
    def from_settings(cls, settings: Settings) -> "EventStoreClient":
        return cls(http=httpx.Client(base_url=settings.api_base_url))

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "EventStoreClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def list_events(self, status: str = "scheduled") -> list[EventOut]:
        try:
            response = self.http.get("/api/events", params={"status": status})
        except httpx.HTTPError as exc:
            logger.error("event_store_list_failed", error=str(exc))
            return []

        body = _body(response)
        if not response.is_success or not isinstance(body.get("data"), list):
            logger.error(
                "event_store_list_failed",
                status_code=response.status_code,
                error=body.get("error"),
            )
            return []

        try:
            return [EventOut.model_validate(item) for item in body["data"]]
        except SchemaValidationError as exc:
            logger.error("event_store_list_failed", error=str(exc))
            return []

    def get_event(self, event_id: str) -> EventOut:
        return self._send_event("GET", f"/api/events/{event_id}")

    def create_event(self, draft: EventDraft, now: datetime | None = None) -> EventOut:
        errors = validate_draft(draft, now=now)
        if errors:
            raise DraftValidationError(errors)

        payload = draft.to_payload()
        if self.identity.creator_id:
            payload["creator_id"] = self.identity.creator_id

        event = self._send_event("POST", "/api/events", json=payload, failure=GENERIC_CREATE_FAILURE)
        logger.info("event_store_created", event_id=event.id)
        return event

    def update_event(self, event_id: str, draft: EventDraft) -> EventOut:
        payload = draft.to_payload()
        payload["creator_id"] = self.identity.creator_id
        return self._send_event("PUT", f"/api/events/{event_id}", json=payload)

    def delete_event(self, event_id: str) -> str:
        url = f"/api/events/{event_id}"
        data = self._send("DELETE", url, json={"creator_id": self.identity.creator_id})
        if data.get("id") is None:
            raise self._unexpected("DELETE", url, "Request failed", "missing id")
        return str(data["id"])

    def login(self, password: str) -> bool:
        try:
            data = self._send("POST", "/api/session", json={"password": password})
        except EventStoreError:
            return False

        creator_id = data.get("creator_id")
        if not isinstance(creator_id, str) or not creator_id:
            logger.error("event_store_login_failed", error="missing creator_id")
            return False
        self.identity.creator_id = creator_id
        return True

    def logout(self) -> None:
        self.identity.logout()

    def can_edit(self, event: EventOut) -> bool:
        return self.identity.can_edit(event.creator_id)

    def _send(
        self,
        method: str,
        url: str,
        json: dict[str, Any] | None = None,
        failure: str = "Request failed",
    ) -> dict[str, Any]:
        """Perform the request and return the ``data`` object of a 2xx body."""
        try:
            response = self.http.request(method, url, json=json)
        except httpx.HTTPError as exc:
            logger.error("event_store_request_failed", method=method, url=url, error=str(exc))
            raise EventStoreError(failure) from exc

        body = _body(response)
        if not response.is_success:
            message = body.get("error") or failure
            logger.error(
                "event_store_request_failed",
                method=method,
                url=url,
                status_code=response.status_code,
                error=message,
            )
            raise EventStoreError(message, status_code=response.status_code)

        data = body.get("data")
        if not isinstance(data, dict):
            raise self._unexpected(method, url, failure, "missing data", response.status_code)
        return data

    def _send_event(
        self,
        method: str,
        url: str,
        json: dict[str, Any] | None = None,
        failure: str = "Request failed",
    ) -> EventOut:
        data = self._send(method, url, json=json, failure=failure)
        try:
            return EventOut.model_validate(data)
        except SchemaValidationError as exc:
            raise self._unexpected(method, url, failure, str(exc)) from exc

    def _unexpected(
        self,
        method: str,
        url: str,
        failure: str,
        error: str,
        status_code: int | None = None,
    ) -> EventStoreError:
        logger.error(
            "event_store_unexpected_response",
            method=method,
            url=url,
            status_code=status_code,
            error=error,
        )
        return EventStoreError(failure, status_code=status_code)
