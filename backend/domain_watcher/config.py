"""
Configuration for the domain watcher.

Values come from the environment (or a ``.env`` file):

    DOMAINS               comma-separated list of domains to watch (required)
    DISCORD_WEBHOOK_URL   webhook that receives availability notices
    DOH_ENDPOINT          DNS-over-HTTPS JSON endpoint
    LOOKUP_TIMEOUT        seconds allowed for each outbound call
    MAX_CONCURRENCY       number of lookups in flight at once
    LOG_LEVEL             standard logging level name
"""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

DEFAULT_DOH_ENDPOINT = "https://dns.google/resolve"
DOMAIN_SEPARATOR = ","


def parse_domain_list(raw: Optional[str]) -> List[str]:
    if raw is None:
        raise ConfigurationError("DOMAINS environment variable is not set")
    return [
        domain
        for domain in (item.strip().lower() for item in raw.split(DOMAIN_SEPARATOR))
        if domain
    ]


class WatchConfig(BaseModel):
    """Immutable per-invocation context handed to the resolver, evaluator and notifier."""

    model_config = ConfigDict(frozen=True)

    domains: Tuple[str, ...]
    webhook_url: Optional[str] = None
    doh_endpoint: str = DEFAULT_DOH_ENDPOINT
    lookup_timeout: float = Field(default=10.0, gt=0)
    max_concurrency: int = Field(default=10, ge=1, le=100)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    domains: Optional[str] = Field(default=None, description="Comma-separated list of domains")
    discord_webhook_url: Optional[str] = Field(default=None, description="Discord webhook URL")
    doh_endpoint: str = DEFAULT_DOH_ENDPOINT
    lookup_timeout: float = Field(default=10.0, gt=0, description="Per-request timeout in seconds")
    max_concurrency: int = Field(default=10, ge=1, le=100)
    log_level: str = "INFO"

    def to_watch_config(self) -> WatchConfig:
        domains = parse_domain_list(self.domains)
        if not domains:
            raise ConfigurationError("DOMAINS environment variable does not list any domains")
        return WatchConfig(
            domains=tuple(domains),
            webhook_url=self.discord_webhook_url or None,
            doh_endpoint=self.doh_endpoint,
            lookup_timeout=self.lookup_timeout,
            max_concurrency=self.max_concurrency,
        )


def load_settings(**overrides: Any) -> Settings:
    try:
        return Settings(**overrides)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc


def get_settings() -> Settings:
    return load_settings()
