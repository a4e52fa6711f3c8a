"""Settings for the `flatstore` service."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from .enums import StoragesIDs


class Settings(BaseSettings):
    """Settings for the project."""

    model_config = SettingsConfigDict(
        env_prefix="FLATSTORE__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    DO_USE_FILE_LOGS: bool = False

    # File storage
    STORAGE_SERVICE_ID: StoragesIDs | None = None  # `None` means the default of `choose_storage_service()`
    STORAGE_LOCATION: str = "upload-dir"  # Relative to the current working directory

    # Wipes the storage root on every application startup. Handy for demos, dangerous anywhere else.
    DO_RESET_STORAGE_ON_STARTUP: bool = False


settings = Settings()
