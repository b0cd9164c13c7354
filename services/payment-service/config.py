"""Configuration from environment variables."""

import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from packages.shared.errors import ConfigurationError

_project_root = Path(__file__).resolve().parents[2]
load_dotenv(_project_root / ".env")


def get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(key, default)


class Settings:
    """Payment service settings."""

    supabase_url: str = get_env("SUPABASE_URL") or ""
    supabase_key: str = get_env("SUPABASE_SECRET_KEY") or get_env("SUPABASE_SERVICE_KEY") or ""
    stripe_secret_key: str = get_env("STRIPE_SECRET_KEY") or ""
    stripe_webhook_secret: str = get_env("STRIPE_WEBHOOK_SECRET") or ""

    # Post-payment redirect target and default CORS origin
    frontend_url: str = (get_env("FRONTEND_URL") or "").rstrip("/")
    cors_origins: str = get_env("CORS_ORIGINS") or get_env("FRONTEND_URL") or ""

    port: int = int(get_env("PORT", "8000"))
    environment: str = get_env("ENVIRONMENT", "development")
    log_level: str = get_env("LOG_LEVEL", "INFO")

    @property
    def supabase_configured(self) -> bool:
        return bool(self.supabase_url and self.supabase_key)

    @property
    def stripe_configured(self) -> bool:
        return bool(self.stripe_secret_key)

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    def missing(self) -> List[str]:
        """Names of required settings that are not set."""
        required = {
            "SUPABASE_URL": self.supabase_url,
            "SUPABASE_SECRET_KEY": self.supabase_key,
            "STRIPE_SECRET_KEY": self.stripe_secret_key,
            "STRIPE_WEBHOOK_SECRET": self.stripe_webhook_secret,
            "FRONTEND_URL": self.frontend_url,
        }
        return [name for name, value in required.items() if not value]

    def validate(self) -> None:
        """Fail fast at startup instead of at first use."""
        missing = self.missing()
        if missing:
            raise ConfigurationError(
                f"Missing required settings: {', '.join(missing)}",
                details={"missing": missing},
            )


settings = Settings()
