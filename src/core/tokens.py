"""
In-process credential storage.
"""

import threading
import time
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CredentialBundle:
    """Tokens obtained from a successful authorization code exchange."""

    access_token: str
    refresh_token: str | None = None
    expiry_date: int | None = None  # epoch millis
    scope: str | None = None
    token_type: str | None = None

    @classmethod
    def from_token_response(cls, payload: dict[str, Any]) -> "CredentialBundle":
        """Build a bundle from the token endpoint's JSON response."""
        expiry_date = None
        expires_in = payload.get("expires_in")
        if isinstance(expires_in, (int, float)) and not isinstance(expires_in, bool):
            expiry_date = int(time.time() * 1000) + int(expires_in * 1000)

        return cls(
            access_token=payload["access_token"],
            refresh_token=payload.get("refresh_token"),
            expiry_date=expiry_date,
            scope=payload.get("scope"),
            token_type=payload.get("token_type"),
        )


class TokenStore:
    """
    Single-slot holder for the current credential bundle.

    Setting a bundle replaces the previous one entirely. Expiry is not
    checked: an expired bundle still counts as authenticated.
    """

    def __init__(self):
        self._bundle: CredentialBundle | None = None
        self._lock = threading.Lock()

    def get(self) -> CredentialBundle | None:
        with self._lock:
            return self._bundle

    def set(self, bundle: CredentialBundle) -> None:
        with self._lock:
            self._bundle = bundle

    def clear(self) -> None:
        with self._lock:
            self._bundle = None

    def is_authenticated(self) -> bool:
        return self.get() is not None
