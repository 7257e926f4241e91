"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) away from the CLI.
- Lets adapters (HTTP, checkout) read the same settings consistently.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ACCOUNTS_API = "https://httptoolkitmgmnt.viorsan.com/api"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "plan-prices"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "plan-prices"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "plan-prices"
    return Path.home() / ".config" / "plan-prices"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str], env_path: Path | None = None) -> Path:
    """Writes/updates variables in the user's global .env."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# plan-prices user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central application settings.

    The accounts API base URL also honours the bare ``ACCOUNTS_API`` variable so
    deployments can point every client at another host with one override.
    """

    model_config = SettingsConfigDict(
        env_prefix="PLAN_PRICES_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    accounts_api: str = Field(
        default=DEFAULT_ACCOUNTS_API,
        min_length=8,
        validation_alias=AliasChoices("accounts_api", "PLAN_PRICES_ACCOUNTS_API", "ACCOUNTS_API"),
        description="Base URL of the accounts service (get-prices, redirect-to-checkout).",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    user_agent: str = Field(
        default="plan-prices/0.1 (+https://httptoolkit.com)",
        min_length=1,
        description="User-Agent sent to the accounts service.",
    )

    price_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="How long one price lookup attempt may run before it is abandoned.",
    )
    retry_cooldown_seconds: float = Field(
        default=1.0,
        ge=0,
        description="Pause after every lookup attempt, whatever its outcome.",
    )
    price_locale: str | None = Field(
        default=None,
        description="Locale used to render prices (e.g. en_US); defaults to the process locale.",
    )

    checkout_source: str = Field(
        default="app.httptoolkit.tech",
        min_length=1,
        description="Source tag sent to the checkout redirect.",
    )
    checkout_return_url: str = Field(
        default="https://httptoolkit.com/app-purchase-thank-you/",
        min_length=8,
        description="Where the checkout sends the user after purchase.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR).",
    )
    log_json: bool = Field(
        default=False,
        description="Render logs as JSON lines instead of console output.",
    )

    @field_validator("accounts_api")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")
