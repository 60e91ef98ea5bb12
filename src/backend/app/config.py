"""AppSettings -- Employee Manager application configuration.

All environment variables are read via pydantic-settings.
DB_URL is required and will cause a startup failure if missing.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Employee Manager settings, loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Database - Required, application fails to start if missing
    DB_URL: str
    DB_ECHO: bool = False
    DB_POOL_SIZE: int = 5

    # Names given to sentinel rows when they have to be created at runtime.
    # Lookup goes by the is_reserve / is_unemployed flags, never by name.
    RESERVE_DEPARTMENT_NAME: str = "Reserve"
    UNEMPLOYED_POSITION_TITLE: str = "Unemployed"


settings = AppSettings()
