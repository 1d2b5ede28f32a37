from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"

    pdf_engine: str = "pdfplumber"

    llm_provider: str = "ollama"
    llm_model_name: str = "llama3.2"
    llm_api_key: str = ""
    llm_base_url: str | None = None
    llm_timeout_seconds: int = 60

    worker_poll_interval_seconds: float = 1.0
