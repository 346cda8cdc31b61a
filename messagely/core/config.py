"""
Application settings for Messagely.

Settings are read once at startup (environment variables prefixed with
``MESSAGELY_`` or a ``.env`` file) and passed into ``create_app``.
"""
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DOTENV = Path(__file__).resolve().parent.parent.parent / ".env"


class Settings(BaseSettings):
    secret_key: str
    algorithm: str = "HS256"
    token_expire_minutes: Optional[int] = None

    bcrypt_work_factor: int = 12

    database_url: str = "sqlite:///.data/messagely.db"

    twilio_account_sid: Optional[str] = None
    twilio_auth_token: Optional[str] = None
    twilio_from_number: Optional[str] = None

    # Include the raw recovery code in the forgot-password response
    expose_recovery_code: bool = False

    debug: bool = False
    log_to_file: bool = True

    model_config = SettingsConfigDict(
        env_prefix="MESSAGELY_",
        env_file=DOTENV,
        env_ignore_empty=True,
        extra="ignore",
    )

    @property
    def sms_enabled(self) -> bool:
        return bool(
            self.twilio_account_sid
            and self.twilio_auth_token
            and self.twilio_from_number
        )


@lru_cache
def get_settings() -> Settings:
    """Load settings from the environment (cached for the process lifetime)."""
    return Settings()
