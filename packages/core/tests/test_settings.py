"""Tests for environment settings."""

import pytest

from cards_core.graph import PipelineConfig
from cards_core.settings import ConfigurationError, Settings


def test_reads_prefixed_environment(monkeypatch) -> None:
    monkeypatch.setenv("CARDS_API_KEY", "from-env")
    monkeypatch.setenv("CARDS_OCR_URL", "https://ocr.test")
    monkeypatch.setenv("CARDS_MAX_TOKENS", "250")

    settings = Settings()

    assert settings.require_api_key() == "from-env"
    assert settings.ocr_url == "https://ocr.test"
    assert settings.max_tokens == 250
    assert settings.max_attempts == 1


def test_api_key_is_not_printed() -> None:
    settings = Settings(api_key="super-secret")

    assert "super-secret" not in repr(settings)


def test_empty_api_key_rejected() -> None:
    with pytest.raises(ConfigurationError):
        Settings(api_key="").require_api_key()


@pytest.mark.parametrize("kwargs", [{"jpeg_quality": 0}, {"max_tokens": 0}])
def test_pipeline_config_validates(kwargs) -> None:
    with pytest.raises(ValueError):
        PipelineConfig(**kwargs)
