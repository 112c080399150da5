"""Settings loaded from the environment.

Every value can be set through a ``CARDS_``-prefixed environment variable or
a ``.env`` file, e.g. ``CARDS_API_KEY`` or ``CARDS_OCR_URL``.
"""

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Required configuration is missing or invalid."""

    pass


class Settings(BaseSettings):
    """Pipeline configuration loaded from environment variables."""

    # Credential shared by both endpoints
    api_key: SecretStr | None = None

    # Remote endpoints
    ocr_url: str | None = None
    generation_url: str | None = None

    # Transport
    request_timeout: float = 60.0
    max_attempts: int = 1
    check_status: bool = True

    # Pipeline behaviour
    jpeg_quality: float = 0.8
    max_tokens: int = 1000
    supersede: bool = False

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="CARDS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def require_api_key(self) -> str:
        """Return the API key, failing if it is not configured."""
        if self.api_key is None or not self.api_key.get_secret_value():
            raise ConfigurationError("CARDS_API_KEY is not set")
        return self.api_key.get_secret_value()

    def require_endpoints(self) -> tuple[str, str]:
        """Return the OCR and generation URLs, failing if either is missing."""
        missing = [
            name
            for name, value in (
                ("CARDS_OCR_URL", self.ocr_url),
                ("CARDS_GENERATION_URL", self.generation_url),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(f"Missing endpoint settings: {', '.join(missing)}")
        return self.ocr_url, self.generation_url  # type: ignore[return-value]

