import os
from dataclasses import dataclass, field
from datetime import tzinfo
from zoneinfo import ZoneInfo

from dotenv import load_dotenv

load_dotenv()


def _bool(val: str | None, default: bool = False) -> bool:
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "y", "on"}


def _csv(val: str | None, default: list[str]) -> list[str]:
    if not val:
        return default
    return [v.strip() for v in val.split(",") if v.strip()]


@dataclass(frozen=True)
class Settings:
    env: str = field(default_factory=lambda: os.getenv("ENV", "local"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    # Hosted database; unset means degraded mode (empty reads, synthesized writes)
    database_url: str | None = field(default_factory=lambda: os.getenv("DATABASE_URL") or None)

    # Shared-secret pseudo-identity, not an access control mechanism
    event_passwords: list[str] = field(
        default_factory=lambda: _csv(os.getenv("EVENT_PASSWORDS"), default=[])
    )

    # Viewer calendar for "local" day math; None means the process local zone
    timezone_name: str | None = field(default_factory=lambda: os.getenv("APP_TIMEZONE") or None)

    api_base_url: str = field(
        default_factory=lambda: os.getenv("API_BASE_URL", "http://localhost:8000")
    )

    cors_allow_origins: list[str] = field(
        default_factory=lambda: _csv(
            os.getenv("CORS_ALLOW_ORIGINS"),
            default=["http://localhost:3000", "http://127.0.0.1:3000"],
        )
    )

    security_headers_enabled: bool = field(
        default_factory=lambda: _bool(os.getenv("SECURITY_HEADERS_ENABLED"), default=True)
    )

    @property
    def database_configured(self) -> bool:
        return bool(self.database_url)

    @property
    def timezone(self) -> tzinfo | None:
        if not self.timezone_name:
            return None
        return ZoneInfo(self.timezone_name)


settings = Settings()
