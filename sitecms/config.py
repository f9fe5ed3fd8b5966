"""Application configuration from environment."""
from pathlib import Path

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache

# Load .env from project root (parent of sitecms/) so env vars are available everywhere
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=_env_path)

DEFAULT_SESSION_SECRET = "dev_secret_key"
DEFAULT_ADMIN_PASSWORD = "admin123"


class Settings(BaseSettings):
    app_name: str = "Site CMS"
    app_env: str = "development"
    debug: bool = True

    # Flat-file storage: events.json, logs.json, contentBlocks.json, staticTexts.json
    data_dir: Path = Path("data")

    session_secret: str = DEFAULT_SESSION_SECRET
    session_cookie_name: str = "sitecms_session"
    session_ttl_hours: int = 24

    @field_validator("session_secret", "admin_username", mode="before")
    @classmethod
    def strip_value(cls, v: str) -> str:
        return (v or "").strip()

    # Single privileged account. admin_password_hash wins over the plain seed when set.
    admin_user_id: str = "1"
    admin_username: str = "admin"
    admin_password: str = DEFAULT_ADMIN_PASSWORD
    admin_password_hash: str = ""
    bcrypt_rounds: int = 12

    audit_log_default_limit: int = 100
    audit_log_max_entries: int = 0  # 0 = keep every entry

    static_text_watch_enabled: bool = True
    static_text_poll_seconds: float = 1.0
    static_text_debounce_ms: int = 100

    @property
    def is_production(self) -> bool:
        return self.app_env.strip().lower() == "production"

    class Config:
        env_file = str(_env_path)
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()
