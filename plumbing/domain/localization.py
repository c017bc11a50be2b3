"""Localization rules.

Collections, items, categories and vacancies are written in every
supported language at once.
"""

from collections.abc import Iterable

from plumbing.domain.exceptions import InvalidLanguageCodeError, RequiredLanguageError

# Codes every localized write must cover, in display order.
REQUIRED_LANGUAGES: tuple[str, ...] = ("ru", "kgz", "en")

# Language used when a search does not name one.
DEFAULT_LANGUAGE = "ru"


def validate_language_codes(codes: Iterable[str]) -> None:
    """Check that a set of translations covers each required language once.

    Args:
        codes: Language codes of the submitted translations.

    Raises:
        RequiredLanguageError: If the number of translations is wrong.
        InvalidLanguageCodeError: If a code is unknown or repeated.
    """
    codes = list(codes)
    required = list(REQUIRED_LANGUAGES)

    if len(codes) != len(required):
        raise RequiredLanguageError(required, len(codes))

    seen: set[str] = set()
    for code in codes:
        if code not in REQUIRED_LANGUAGES or code in seen:
            raise InvalidLanguageCodeError(code, required)
        seen.add(code)
