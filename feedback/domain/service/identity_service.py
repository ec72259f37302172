"""Anonymous identity domain service."""

import secrets
import string
import time
from abc import ABC, abstractmethod

import logfire

from feedback.domain.value import AnonymousId

from .base import Service

# Key under which the vote identity is kept in client-local storage
VOTE_IDENTITY_KEY = "user_session"

SUBMISSION_PREFIX = "anon"
VOTE_PREFIX = "session"

_ALPHABET = string.digits + string.ascii_lowercase
_RANDOM_LENGTH = 9


class IdentityStorage(ABC):
    """Client-local key/value storage holding the vote identity.

    Browsers back this with a cookie; anything that survives between
    requests from the same client will do.
    """

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Read a stored value.

        Args:
            key: Storage key

        Returns:
            The stored value, or None if nothing is stored
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store a value.

        Args:
            key: Storage key
            value: Value to store
        """
        pass


class InMemoryIdentityStorage(IdentityStorage):
    """Dictionary-backed storage, one instance per simulated client."""

    def __init__(self) -> None:
        self._values: dict[str, str] = {}
        self.writes = 0

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value
        self.writes += 1


class IdentityService(Service):
    """Generates anonymous identity tokens.

    Tokens look like ``<prefix>_<epoch millis>_<9 base36 chars>``. They are
    not authenticated and are never resolved back to a person. Generation
    cannot fail.
    """

    def new_submission_identity(self) -> AnonymousId:
        """Create a fresh authorship token for one thread or reply.

        Returns:
            New ``anon_...`` token
        """
        return self._generate(SUBMISSION_PREFIX)

    def get_or_create_vote_identity(self, storage: IdentityStorage) -> AnonymousId:
        """Return the client's vote identity, creating it on first use.

        The token is written to ``storage`` only when none is stored yet;
        later calls against the same storage return the stored token.

        Args:
            storage: The client's local storage

        Returns:
            The ``session_...`` vote token for this client
        """
        existing = storage.get(VOTE_IDENTITY_KEY)
        if existing:
            return AnonymousId(existing)

        identity = self._generate(VOTE_PREFIX)
        storage.set(VOTE_IDENTITY_KEY, identity.root)
        logfire.info("Vote identity created", anonymous_id=identity.root)
        return identity

    @staticmethod
    def _generate(prefix: str) -> AnonymousId:
        millis = int(time.time() * 1000)
        suffix = "".join(secrets.choice(_ALPHABET) for _ in range(_RANDOM_LENGTH))
        return AnonymousId(f"{prefix}_{millis}_{suffix}")
