"""Application configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from infrastructure.configuration.infrastructure import I18nSettings


class Settings(BaseSettings):
    """Application configuration settings - main aggregator.

    Aggregates all domain-specific settings into a single configuration object.

    Environment Variables:
        ENVIRONMENT: Deployment environment name (default: development)
        SIMULATE_PROD: Force production behavior outside production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Deployed commit, reported by /version

    Example:
        ```python
        from infrastructure.configuration import settings

        default_language = settings.i18n.default_language

        if settings.is_production:
            # Production-specific logic...
        ```
    """

    ENVIRONMENT: str = "development"
    SIMULATE_PROD: bool = False
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    i18n: I18nSettings

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        """Check if the application is running with production behavior.

        Returns:
            True if ENVIRONMENT is "production" or SIMULATE_PROD is set.
        """
        return self.ENVIRONMENT.lower() == "production" or self.SIMULATE_PROD

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "i18n": I18nSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)
