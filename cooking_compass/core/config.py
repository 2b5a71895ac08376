"""
Application configuration loaded from environment variables.

Uses pydantic-settings for type-safe env var parsing with automatic
.env file loading. The OpenAI key is injected via environment and is
only checked per request: a missing key is a 500 for that request,
not a startup failure.

See https://docs.pydantic.dev/latest/concepts/pydantic_settings/
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # ─── Core ──────────────────────────────────────────────────────
    environment: str = "development"
    debug: bool = False

    # ─── CORS ──────────────────────────────────────────────────────
    # Comma-separated allowed origins for the browser front-end.
    cors_origins_str: str = "http://localhost:5173,http://localhost:3000"

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_origins_str.split(",") if o.strip()]

    # ─── OpenAI ────────────────────────────────────────────────────
    openai_api_key: str = ""
    openai_base_url: str = "https://api.openai.com/v1"
    openai_model: str = "gpt-4.1-mini"
    openai_temperature: float = 0.65
    openai_max_tokens: int = 650
    openai_timeout_seconds: float = 30.0

    # ─── Rate limiting ─────────────────────────────────────────────
    # Minimum gap between two accepted requests from one client.
    rate_limit_window_ms: int = 2500

    # Headers holding the caller's address, most trusted first.
    # The first is set by Netlify's edge, the second by most proxies.
    client_ip_headers_str: str = "x-nf-client-connection-ip,x-forwarded-for"

    @property
    def client_ip_headers(self) -> list[str]:
        return [h.strip().lower() for h in self.client_ip_headers_str.split(",") if h.strip()]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Don't fail on unknown env vars
    )


# Module-level singleton — import this everywhere instead of instantiating Settings()
settings = Settings()
