"""Console settings.

Values come from a .env file at the repository root, then OS environment
variables, then the defaults below.
"""

from pathlib import Path
from typing import Tuple, Type

from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

# customer_admin/core/config.py → repository root
_ENV_FILE = Path(__file__).resolve().parents[2] / ".env"


class Settings(BaseSettings):
    """Settings for one console session."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        """Read .env before OS env vars."""
        return (init_settings, dotenv_settings, env_settings, file_secret_settings)

    # --- Backend REST API ---
    api_base_url: str = "http://localhost:8080"
    http_timeout_seconds: float = 5.0

    # --- Supabase (sales reps table) ---
    supabase_url: str = ""
    supabase_anon_key: str = ""

    # --- Auth ---
    token_store_path: str = str(Path.home() / ".customer_admin" / "storage.json")

    # --- Attachments ---
    max_upload_size_mb: int = 10

    # --- Forms ---
    username_warning_seconds: float = 3.0

    # --- App ---
    app_env: str = "development"
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @property
    def max_upload_size_bytes(self) -> int:
        return self.max_upload_size_mb * 1024 * 1024


settings = Settings()
