from typing import ClassVar

from pdfnamer.config.settings import Settings
from pdfnamer.llm.client_base import BaseChatClient
from pdfnamer.llm.openai_client_adapter import OpenAIClientAdapter


class ChatClientFactory:
    """Creates the chat client for the configured provider."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "ollama": "http://localhost:11434/v1",
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
    }

    # Local servers ignore the key but the SDK refuses an empty one.
    PLACEHOLDER_API_KEY: ClassVar[str] = "unused"

    @classmethod
    def create(cls, settings: Settings) -> BaseChatClient:
        provider = settings.llm_provider.strip().lower()
        return OpenAIClientAdapter(
            api_key=settings.llm_api_key or cls.PLACEHOLDER_API_KEY,
            timeout_seconds=settings.llm_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = (settings.llm_base_url or "").strip()
            if not url:
                raise ValueError(
                    "llm_base_url is required for llm_provider=openai_compatible"
                )
            return url
        if provider in cls.OPENAI_COMPATIBLE_BASE_URLS:
            return settings.llm_base_url or cls.OPENAI_COMPATIBLE_BASE_URLS[provider]
        supported = ["openai", "openai_compatible", *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS)]
        raise ValueError(f"Unknown LLM provider '{provider}'. Choose from: {supported}")
