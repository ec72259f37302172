"""Cookie-backed storage for the vote identity."""

from collections.abc import Mapping
from datetime import timedelta

from fastapi import Request, Response

from feedback.config import IdentitySettings
from feedback.domain.service import IdentityStorage
from feedback.domain.service.identity_service import VOTE_IDENTITY_KEY

# Longer values cannot be tokens we issued
MAX_TOKEN_LENGTH = 255


def _valid(value: str | None) -> str | None:
    return value if value and len(value) <= MAX_TOKEN_LENGTH else None


class CookieIdentityStorage(IdentityStorage):
    """Reads identity tokens from request cookies and writes them to the response.

    A value set during the request is visible to later ``get`` calls in the
    same request, so the identity is created at most once per browser.
    """

    def __init__(
        self, request: Request, response: Response, settings: IdentitySettings
    ) -> None:
        self.request = request
        self.response = response
        self.max_age = int(
            timedelta(days=settings.vote_cookie_max_age_days).total_seconds()
        )
        self.cookie_names: Mapping[str, str] = {
            VOTE_IDENTITY_KEY: settings.vote_cookie_name
        }
        self._written: dict[str, str] = {}

    def _cookie(self, key: str) -> str:
        return self.cookie_names.get(key, key)

    def get(self, key: str) -> str | None:
        if key in self._written:
            return self._written[key]
        return _valid(self.request.cookies.get(self._cookie(key)))

    def set(self, key: str, value: str) -> None:
        self._written[key] = value
        self.response.set_cookie(
            key=self._cookie(key),
            value=value,
            max_age=self.max_age,
            httponly=True,
            samesite="lax",
        )


def read_vote_identity(request: Request, settings: IdentitySettings) -> str | None:
    """Vote token from the request, without creating one."""
    return _valid(request.cookies.get(settings.vote_cookie_name))
