import httpx
import openai

from pdfnamer.llm.client_base import BaseChatClient
from pdfnamer.llm.exceptions import ModelInvocationError


class OpenAIClientAdapter(BaseChatClient):
    """Chat client built on the OpenAI-compatible chat completions API.

    Works against OpenAI itself and any server speaking the same protocol,
    including a local Ollama instance.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        user_prompt: str,
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                messages=[{"role": "user", "content": user_prompt}],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ModelInvocationError(f"Model provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise ModelInvocationError(f"Model provider API error: {exc}") from exc

        if not response.choices:
            raise ModelInvocationError("Model returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise ModelInvocationError("Model returned empty response")
        return content
