import simplemma


class Lemmatizer:
    """Dictionary-based lemmatizer (case-insensitive)."""

    def __init__(self, language: str = "en") -> None:
        self._language = language

    def lemmatize(self, word: str) -> str:
        """Return the lowercased base form of *word*, or the word itself if unknown."""
        return simplemma.lemmatize(word.lower(), lang=self._language).lower()
