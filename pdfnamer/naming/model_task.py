from pathlib import Path
from typing import ClassVar

from pdfnamer.llm.client_base import BaseChatClient
from pdfnamer.llm.prompt_loader import load_prompt_template
from pdfnamer.logging.logger import Log


class ModelTask:
    """A single prompt/response exchange with the language model.

    Subclasses name their bundled template through ``TEMPLATE_NAME`` and call
    ``_ask`` with the template's placeholders.
    """

    TEMPLATE_NAME: ClassVar[str]

    def __init__(
        self,
        *,
        client: BaseChatClient,
        model: str,
        temperature: float = 0.0,
        prompt_template_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = temperature
        self._prompt_template = load_prompt_template(self.TEMPLATE_NAME, prompt_template_path)

    def _ask(self, **fields: object) -> str:
        prompt = self._prompt_template.format(**fields)
        Log.debug(f"{self.TEMPLATE_NAME} prompt:\n{prompt}")
        response = self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            user_prompt=prompt,
        )
        Log.debug(f"{self.TEMPLATE_NAME} response: {response!r}")
        return response.strip()
