from typing import ClassVar

from pdfnamer.naming.model_task import ModelTask


class Summarizer(ModelTask):
    """Asks the model for a short neutral summary of a document.

    The word limit is requested in the prompt only; the reply is returned as-is.
    """

    TEMPLATE_NAME: ClassVar[str] = "summary"
    MAX_WORDS: ClassVar[int] = 250

    def summarize(self, text: str) -> str:
        return self._ask(document=text, max_words=self.MAX_WORDS)
