import pytest
from pydantic import ValidationError

from pdfnamer.config.settings import Settings


class TestSettingsDefaults:
    def test_default_pdf_engine(self) -> None:
        s = Settings()
        assert s.pdf_engine == "pdfplumber"

    def test_default_llm_provider(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("LLM_PROVIDER", raising=False)
        s = Settings()
        assert s.llm_provider == "ollama"

    def test_default_llm_model(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("LLM_MODEL_NAME", raising=False)
        s = Settings()
        assert s.llm_model_name == "llama3.2"

    def test_default_llm_timeout(self) -> None:
        s = Settings()
        assert s.llm_timeout_seconds == 60

    def test_default_base_url_is_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("LLM_BASE_URL", raising=False)
        s = Settings()
        assert s.llm_base_url is None


class TestSettingsFromEnv:
    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_provider_and_model(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LLM_PROVIDER", "openai")
        monkeypatch.setenv("LLM_MODEL_NAME", "gpt-4o-mini")
        s = Settings()
        assert s.llm_provider == "openai"
        assert s.llm_model_name == "gpt-4o-mini"

    def test_loads_poll_interval(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WORKER_POLL_INTERVAL_SECONDS", "0.25")
        s = Settings()
        assert s.worker_poll_interval_seconds == 0.25


class TestSettingsValidation:
    def test_invalid_timeout_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LLM_TIMEOUT_SECONDS", "soon")
        with pytest.raises(ValidationError):
            Settings()
