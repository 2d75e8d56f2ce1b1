import pytest
from pydantic import ValidationError

from resumi.config.settings import Settings


def _settings() -> Settings:
    return Settings(_env_file=None)  # type: ignore[call-arg]


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        assert _settings().app_env == "development"

    def test_default_max_file_size_is_ten_mebibytes(self) -> None:
        assert _settings().max_file_size_bytes == 10 * 1024 * 1024

    def test_default_text_thresholds(self) -> None:
        s = _settings()
        assert s.min_extracted_text_length == 50
        assert s.min_resume_text_length == 100
        assert s.max_analyzed_length == 50_000

    def test_default_pdf_settings(self) -> None:
        s = _settings()
        assert s.pdf_engine == "pdfplumber"
        assert s.pdf_parse_timeout_seconds == 30.0

    def test_default_inference_settings(self) -> None:
        s = _settings()
        assert s.inference_model_name == "mistralai/Mistral-7B-Instruct-v0.2"
        assert s.inference_max_tokens == 1000
        assert s.inference_temperature == 0.7

    def test_default_frontend_url(self) -> None:
        assert _settings().frontend_url == "http://localhost:3000"


class TestSettingsFromEnv:
    def test_loads_app_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_ENV", "production")
        s = _settings()
        assert s.app_env == "production"
        assert s.is_production is True
        assert s.is_development is False

    def test_loads_db_port(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB_PORT", "5433")
        assert _settings().db_port == 5433

    def test_loads_inference_provider(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INFERENCE_PROVIDER", "groq")
        monkeypatch.setenv("INFERENCE_API_KEY", "gsk_test")
        s = _settings()
        assert s.inference_provider == "groq"
        assert s.inference_api_key == "gsk_test"

    def test_loads_frontend_url(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FRONTEND_URL", "https://resumi.example.com")
        assert _settings().frontend_url == "https://resumi.example.com"


class TestSettingsValidation:
    def test_invalid_db_port_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB_PORT", "not_a_number")
        with pytest.raises(ValidationError):
            _settings()

    def test_invalid_max_file_size_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_FILE_SIZE_BYTES", "ten megabytes")
        with pytest.raises(ValidationError):
            _settings()
