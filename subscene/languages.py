"""
Language filter support.

Subscene restricts listings to a set of languages through a
``LanguageFilter`` cookie holding up to three comma-joined numeric ids
(see https://subscene.com/filter).  This module keeps the static
name -> id table and the encoding rules for that cookie.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, Optional, Union

logger = logging.getLogger(__name__)

# Site-imposed: the filter accepts at most three languages.
MAX_LANGUAGE_FILTER_IDS = 3

LANGUAGE_IDS = MappingProxyType({
    'Albanian': 1,
    'Arabic': 2,
    'Big 5 code': 3,
    'Brazillian Portuguese': 4,
    'Bulgarian': 5,
    'Bulgarian/ English': 6,
    'Chinese BG code': 7,
    'Croatian': 8,
    'Czech': 9,
    'Danish': 10,
    'Dutch': 11,
    'Dutch/ English': 12,
    'English': 13,
    'English/ German': 15,
    'Estonian': 16,
    'Finnish': 17,
    'French': 18,
    'German': 19,
    'Greek': 21,
    'Hebrew': 22,
    'Hungarian': 23,
    'Hungarian/ English': 24,
    'Icelandic': 25,
    'Italian': 26,
    'Japanese': 27,
    'Korean': 28,
    'Latvian': 29,
    'Norwegian': 30,
    'Polish': 31,
    'Portuguese': 32,
    'Romanian': 33,
    'Russian': 34,
    'Serbian': 35,
    'Slovak': 36,
    'Slovenian': 37,
    'Spanish': 38,
    'Swedish': 39,
    'Thai': 40,
    'Turkish': 41,
    'Urdu': 42,
    'Lithuanian': 43,
    'Indonesian': 44,
    'Vietnamese': 45,
    'Farsi/Persian': 46,
    'Esperanto': 47,
    'Macedonian': 48,
    'Catalan': 49,
    'Malay': 50,
    'Hindi': 51,
    'Kurdish': 52,
    'Tagalog': 53,
    'Bengali': 54,
    'Azerbaijani': 55,
    'Ukrainian': 56,
    'Greenlandic': 57,
    'Sinhala': 58,
    'Tamil': 59,
    'Bosnian': 60,
    'Burmese': 61,
    'Georgian': 62,
    'Telugu': 63,
    'Malayalam': 64,
    'Manipuri': 65,
    'Punjabi': 66,
    'Pashto': 67,
    'Belarusian': 68,
    'Somali': 70,
    'Yoruba': 71,
    'Mongolian': 72,
    'Armenian': 73,
    'Basque': 74,
    'Swahili': 75,
    'Sundanese': 76,
    'Kannada': 78,
    'Cambodian/Khmer': 79,
    'Nepali': 80,
})


def language_id(name: str) -> Optional[int]:
    """Return the site id for a language name, or None if unknown."""
    return LANGUAGE_IDS.get(name.strip())


def _check_cap(ids: list) -> None:
    if len(ids) > MAX_LANGUAGE_FILTER_IDS:
        raise ValueError(
            f"Subscene accepts at most {MAX_LANGUAGE_FILTER_IDS} languages "
            f"in the filter, got {len(ids)}"
        )


def encode_language_names(names: str) -> Optional[str]:
    """Encode ``"English,Spanish"`` as ``"13,38"``.

    Unknown names are dropped without error; order follows the input and
    duplicates are kept.  Returns None when no name is recognised.
    """
    ids = []
    for name in names.split(','):
        lang_id = language_id(name)
        if lang_id is None:
            logger.debug("Ignoring unknown language name: %r", name)
            continue
        ids.append(str(lang_id))

    _check_cap(ids)
    return ','.join(ids) or None


def encode_language_ids(ids: Union[int, str, Iterable[int], None]) -> Optional[str]:
    """Normalise exact ids (``13``, ``"13,38"`` or ``[13, 38]``) to the cookie form."""
    if ids is None:
        return None
    if isinstance(ids, int):
        parts = [str(ids)]
    elif isinstance(ids, str):
        parts = [p.strip() for p in ids.split(',') if p.strip()]
    else:
        parts = [str(int(i)) for i in ids]

    for part in parts:
        if not part.isdigit():
            raise ValueError(f"Language id must be numeric: {part!r}")

    _check_cap(parts)
    return ','.join(parts) or None


class LanguageFilter:
    """Language filter held by a client session.

    One writer at a time: concurrent callers sharing a filter race and the
    last assignment wins.  There is no locking.
    """

    def __init__(self, value: Optional[str] = None):
        self._value = encode_language_ids(value)

    @property
    def value(self) -> Optional[str]:
        return self._value

    def set_names(self, names: str) -> Optional[str]:
        self._value = encode_language_names(names)
        logger.debug("Language filter set from names %r -> %s", names, self._value)
        return self._value

    def set_ids(self, ids) -> Optional[str]:
        self._value = encode_language_ids(ids)
        logger.debug("Language filter set from ids %r -> %s", ids, self._value)
        return self._value

    def clear(self) -> None:
        self._value = None

    def cookie(self) -> Optional[str]:
        """The ``Cookie`` header value, or None when no filter is set."""
        if not self._value:
            return None
        return f"LanguageFilter={self._value};"

    def __repr__(self) -> str:
        return f"LanguageFilter({self._value!r})"
