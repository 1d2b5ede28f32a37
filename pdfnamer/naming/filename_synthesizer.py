"""Turn a document summary into a legal, descriptive filename.

Flow:
1. Ask the model for a short noun phrase describing the document.
2. Strip an echoed ``Filename:`` label and surrounding whitespace.
3. Split the phrase into words and drop stop words (by lemma or surface form).
4. Prefix the resolved date, if any, as ``YYYY-MM-DD``.
5. Join with single spaces, keeping whole words only while the result plus
   the extension fits in ``MAX_FILENAME_BYTES`` of UTF-8.
"""

import re
from collections.abc import Iterable, Iterator
from datetime import date
from pathlib import Path
from typing import ClassVar

from pdfnamer.llm.client_base import BaseChatClient
from pdfnamer.logging.logger import Log
from pdfnamer.naming.lemmatizer import Lemmatizer
from pdfnamer.naming.model_task import ModelTask
from pdfnamer.naming.stop_words import STOP_WORDS

MAX_FILENAME_BYTES = 255

_LABEL_RE = re.compile(r"^\s*filename\s*:\s*", re.IGNORECASE)
_WORD_RE = re.compile(r"\w+")


class FilenameSynthesizer(ModelTask):
    TEMPLATE_NAME: ClassVar[str] = "filename"
    MAX_WORDS: ClassVar[int] = 12

    def __init__(
        self,
        *,
        client: BaseChatClient,
        model: str,
        temperature: float = 0.0,
        prompt_template_path: Path | None = None,
        lemmatizer: Lemmatizer | None = None,
        stop_words: frozenset[str] = STOP_WORDS,
    ) -> None:
        super().__init__(
            client=client,
            model=model,
            temperature=temperature,
            prompt_template_path=prompt_template_path,
        )
        self._lemmatizer = lemmatizer or Lemmatizer()
        self._stop_words = stop_words

    def synthesize(self, summary: str, date_: date | None, extension: str | None) -> str:
        """Return ``stem + "." + extension``; the stem may be empty."""
        date_instruction = (
            f"Don't include this date in the filename: {date_.isoformat()}" if date_ else ""
        )
        response = self._ask(
            summary=summary,
            date_instruction=date_instruction,
            max_words=self.MAX_WORDS,
        )
        phrase = strip_label(response)
        filename = self.sanitize(phrase, date_, extension)
        Log.debug(f"Phrase {phrase!r} sanitized to {filename!r}")
        return filename

    def sanitize(self, phrase: str, date_: date | None, extension: str | None) -> str:
        tokens: list[str] = []
        if date_ is not None:
            iso = date_.isoformat()
            tokens.append(iso)
            phrase = phrase.replace(iso, " ")
        tokens.extend(self._content_words(phrase))

        suffix = extension_suffix(extension)
        limit = MAX_FILENAME_BYTES - len(suffix.encode("utf-8"))
        return join_within_byte_limit(tokens, limit) + suffix

    def _content_words(self, phrase: str) -> Iterator[str]:
        for word in _WORD_RE.findall(phrase):
            if word.lower() in self._stop_words:
                continue
            if self._lemmatizer.lemmatize(word) in self._stop_words:
                continue
            yield word


def strip_label(response: str) -> str:
    return _LABEL_RE.sub("", response.strip(), count=1).strip()


def extension_suffix(extension: str | None) -> str:
    extension = (extension or "").lstrip(".")
    return f".{extension}" if extension else ""


def join_within_byte_limit(tokens: Iterable[str], limit: int) -> str:
    """Join tokens with spaces, stopping before the first one that would overflow."""
    stem = ""
    for token in tokens:
        candidate = f"{stem} {token}" if stem else token
        if len(candidate.encode("utf-8")) > limit:
            break
        stem = candidate
    return stem
