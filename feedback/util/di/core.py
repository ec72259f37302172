"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from feedback.config import (
    AdminSettings,
    ContentSettings,
    IdentitySettings,
    Settings,
)
from feedback.util.di.base import ProviderBase
from feedback.util.error import ConfigurationError

DEFAULT_ADMIN_TOKEN = AdminSettings().token


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment.

        Raises:
            ConfigurationError: If production runs with the default admin token
        """
        settings = Settings()
        if (
            settings.environment == "production"
            and settings.admin.token == DEFAULT_ADMIN_TOKEN
        ):
            raise ConfigurationError("ADMIN__TOKEN must be set in production")
        return settings

    @provide(scope=Scope.APP)
    def provide_admin_settings(self, settings: Settings) -> AdminSettings:
        """Provide admin settings."""
        return settings.admin

    @provide(scope=Scope.APP)
    def provide_content_settings(self, settings: Settings) -> ContentSettings:
        """Provide content limits."""
        return settings.content

    @provide(scope=Scope.APP)
    def provide_identity_settings(self, settings: Settings) -> IdentitySettings:
        """Provide anonymous identity settings."""
        return settings.identity
