"""Shared-secret pseudo-identity.

A flat list of passwords is configured; knowing any of them yields a creator
id (the SHA-256 hex of the password) that is stamped on created events and
compared on update/delete. This is a convenience label, not access control:
the id travels in request bodies and anyone who knows it can act as it.
"""

from __future__ import annotations

import hashlib
from collections.abc import Sequence
from dataclasses import dataclass

import structlog

logger = structlog.get_logger()


def creator_id_for(password: str) -> str:
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def authenticate(password: str, valid_passwords: Sequence[str]) -> str | None:
    """Return the creator id for ``password`` or None when it is not listed."""
    if not valid_passwords:
        logger.error("no_passwords_configured", hint="set EVENT_PASSWORDS")
        return None

    candidate = password.strip()
    if any(valid.strip() == candidate for valid in valid_passwords):
        return creator_id_for(password)
    return None


def can_edit_event(creator_id: str | None, event_creator_id: str | None) -> bool:
    if not creator_id or not event_creator_id:
        return False
    return creator_id == event_creator_id


@dataclass
class PseudoIdentity:
    """Session-scoped holder for the creator id, passed to whoever needs it."""

    creator_id: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.creator_id is not None

    def can_edit(self, event_creator_id: str | None) -> bool:
        return can_edit_event(self.creator_id, event_creator_id)

    def logout(self) -> None:
        self.creator_id = None
