"""Resolve the most relevant calendar date of a document.

The model is asked for ``YYYY-MM-DD`` or the literal ``NO_DATE_SENTINEL``.
Anything else is run through free-text date detection; a reply that still
yields nothing means "no date", never an error.
"""

import re
from datetime import date
from typing import ClassVar

from dateparser.search import search_dates

from pdfnamer.logging.logger import Log
from pdfnamer.naming.model_task import ModelTask

NO_DATE_SENTINEL = "No date found"

_ISO_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")
# Partial dates (missing day, month or year) are not completed from today.
_SEARCH_SETTINGS = {"RETURN_AS_TIMEZONE_AWARE": False, "STRICT_PARSING": True}


class DateResolver(ModelTask):
    TEMPLATE_NAME: ClassVar[str] = "date"

    def resolve_date(self, text: str) -> date | None:
        response = self._ask(document=text, sentinel=NO_DATE_SENTINEL)
        return parse_date_response(response)


def parse_date_response(response: str) -> date | None:
    """Turn a model reply into a date, or None when it carries no date."""
    response = response.strip()
    if not response or response == NO_DATE_SENTINEL:
        return None

    if _ISO_DATE_RE.fullmatch(response):
        try:
            return date.fromisoformat(response)
        except ValueError:
            Log.debug(f"Reply {response!r} looks like ISO but is not a valid date")

    try:
        matches = search_dates(response, languages=["en"], settings=_SEARCH_SETTINGS)
    except ValueError as exc:
        Log.warning(f"Date detection failed on {response!r}: {exc}")
        return None
    if not matches:
        return None
    return matches[0][1].date()
