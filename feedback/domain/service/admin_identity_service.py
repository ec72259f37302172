"""Admin identity domain service."""

import secrets

import logfire

from feedback.config import AdminSettings
from feedback.domain.error import NotAuthorizedError
from feedback.domain.value import AdminId

from .base import Service


class AdminIdentityService(Service):
    """Resolves whether a caller is the moderator.

    This is a shared-token equality check against configuration, standing in
    for a real login. The rest of the core only consumes the resulting
    admin id.
    """

    def __init__(self, admin_settings: AdminSettings) -> None:
        """Initialize admin identity service.

        Args:
            admin_settings: Admin token and account id
        """
        self.admin_settings = admin_settings

    def resolve(self, token: str | None) -> AdminId | None:
        """Resolve a presented token to the moderator's id.

        Args:
            token: Token presented by the caller

        Returns:
            Admin id if the token matches, None otherwise
        """
        if not token:
            return None
        if not secrets.compare_digest(
            token.encode(), self.admin_settings.token.encode()
        ):
            logfire.warn("Invalid admin token presented")
            return None
        return AdminId(self.admin_settings.admin_id)

    def require(self, token: str | None, action: str) -> AdminId:
        """Resolve the moderator's id or fail.

        Args:
            token: Token presented by the caller
            action: Description of the attempted action (for the error)

        Returns:
            Admin id

        Raises:
            NotAuthorizedError: If the token does not match
        """
        admin_id = self.resolve(token)
        if admin_id is None:
            raise NotAuthorizedError(action)
        return admin_id
