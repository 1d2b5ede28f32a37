from pdfnamer.naming.date_resolver import NO_DATE_SENTINEL, DateResolver
from pdfnamer.naming.filename_synthesizer import MAX_FILENAME_BYTES, FilenameSynthesizer
from pdfnamer.naming.lemmatizer import Lemmatizer
from pdfnamer.naming.summarizer import Summarizer

__all__ = [
    "MAX_FILENAME_BYTES",
    "NO_DATE_SENTINEL",
    "DateResolver",
    "FilenameSynthesizer",
    "Lemmatizer",
    "Summarizer",
]
