"""Built-in locale data for text fields and localized styles.

Only a handful of locales are provided, as hand-written tables:

    - en: English (the fallback)
    - fr: French
    - de: German

A locale is named by a language tag such as "fr", "fr_FR" or "fr-CA";
only the language part is used. Unknown languages fall back to English,
which is logged at debug level.
"""

from __future__ import annotations

import enum
from types import MappingProxyType
from typing import Mapping

from isochron.config.logging import get_logger

logger = get_logger(__name__)

FALLBACK_LOCALE = "en"


class TextStyle(enum.Enum):
    """Width of the text used for a field such as month-of-year."""

    FULL = "full"
    SHORT = "short"
    NARROW = "narrow"


class FormatStyle(enum.Enum):
    """Length of a localized date or time format."""

    FULL = "full"
    LONG = "long"
    MEDIUM = "medium"
    SHORT = "short"


class LocaleData:
    """Text and pattern tables for one language.

    Attributes:
        language: The language code, e.g. "fr".
        months: Month names by style, January first.
        days: Day-of-week names by style, Monday first.
        ampm: AM and PM markers.
        date_patterns: Date pattern by FormatStyle.
        time_patterns: Time pattern by FormatStyle.
        date_time_join: Template joining a date and a time pattern, with
            "{date}" and "{time}" placeholders.
    """

    __slots__ = (
        "language",
        "months",
        "days",
        "ampm",
        "date_patterns",
        "time_patterns",
        "date_time_join",
    )

    def __init__(
        self,
        language: str,
        months: dict[TextStyle, tuple[str, ...]],
        days: dict[TextStyle, tuple[str, ...]],
        ampm: tuple[str, str],
        date_patterns: dict[FormatStyle, str],
        time_patterns: dict[FormatStyle, str],
        date_time_join: str,
    ) -> None:
        self.language = language
        self.months = MappingProxyType(months)
        self.days = MappingProxyType(days)
        self.ampm = ampm
        self.date_patterns = MappingProxyType(date_patterns)
        self.time_patterns = MappingProxyType(time_patterns)
        self.date_time_join = date_time_join

    def texts(self, kind: str, style: TextStyle) -> dict[int, str]:
        """Return the text for each value of a field kind.

        Args:
            kind: "month", "day_of_week" or "ampm".
            style: The text width.

        Returns:
            A mapping from field value to text, e.g. {1: "January", ...}.
        """
        if kind == "month":
            return {index + 1: text for index, text in enumerate(self.months[style])}
        if kind == "day_of_week":
            return {index + 1: text for index, text in enumerate(self.days[style])}
        if kind == "ampm":
            return {0: self.ampm[0], 1: self.ampm[1]}
        raise ValueError(f"no locale text for field kind {kind!r}")

    def pattern(
        self, date_style: FormatStyle | None, time_style: FormatStyle | None
    ) -> str:
        """Return the pattern for a combination of date and time styles.

        Raises:
            ValueError: If both styles are None.
        """
        if date_style is None and time_style is None:
            raise ValueError("either the date or the time style must be given")
        if time_style is None:
            return self.date_patterns[date_style]
        if date_style is None:
            return self.time_patterns[time_style]
        return self.date_time_join.format(
            date=self.date_patterns[date_style], time=self.time_patterns[time_style]
        )

    def __repr__(self) -> str:
        return f"LocaleData({self.language!r})"


_TIME_PATTERNS_24H = {
    FormatStyle.FULL: "HH:mm:ss z",
    FormatStyle.LONG: "HH:mm:ss Z",
    FormatStyle.MEDIUM: "HH:mm:ss",
    FormatStyle.SHORT: "HH:mm",
}

_LOCALES: Mapping[str, LocaleData] = MappingProxyType(
    {
        "en": LocaleData(
            "en",
            months={
                TextStyle.FULL: (
                    "January", "February", "March", "April", "May", "June",
                    "July", "August", "September", "October", "November", "December",
                ),
                TextStyle.SHORT: (
                    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
                    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
                ),
                TextStyle.NARROW: (
                    "J", "F", "M", "A", "M", "J", "J", "A", "S", "O", "N", "D",
                ),
            },
            days={
                TextStyle.FULL: (
                    "Monday", "Tuesday", "Wednesday", "Thursday",
                    "Friday", "Saturday", "Sunday",
                ),
                TextStyle.SHORT: ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
                TextStyle.NARROW: ("M", "T", "W", "T", "F", "S", "S"),
            },
            ampm=("AM", "PM"),
            date_patterns={
                FormatStyle.FULL: "EEEE, MMMM d, y",
                FormatStyle.LONG: "MMMM d, y",
                FormatStyle.MEDIUM: "MMM d, y",
                FormatStyle.SHORT: "M/d/yy",
            },
            time_patterns={
                FormatStyle.FULL: "h:mm:ss a z",
                FormatStyle.LONG: "h:mm:ss a Z",
                FormatStyle.MEDIUM: "h:mm:ss a",
                FormatStyle.SHORT: "h:mm a",
            },
            date_time_join="{date}, {time}",
        ),
        "fr": LocaleData(
            "fr",
            months={
                TextStyle.FULL: (
                    "janvier", "février", "mars", "avril", "mai", "juin",
                    "juillet", "août", "septembre", "octobre", "novembre", "décembre",
                ),
                TextStyle.SHORT: (
                    "janv.", "févr.", "mars", "avr.", "mai", "juin",
                    "juil.", "août", "sept.", "oct.", "nov.", "déc.",
                ),
                TextStyle.NARROW: (
                    "J", "F", "M", "A", "M", "J", "J", "A", "S", "O", "N", "D",
                ),
            },
            days={
                TextStyle.FULL: (
                    "lundi", "mardi", "mercredi", "jeudi",
                    "vendredi", "samedi", "dimanche",
                ),
                TextStyle.SHORT: (
                    "lun.", "mar.", "mer.", "jeu.", "ven.", "sam.", "dim.",
                ),
                TextStyle.NARROW: ("L", "M", "M", "J", "V", "S", "D"),
            },
            ampm=("AM", "PM"),
            date_patterns={
                FormatStyle.FULL: "EEEE d MMMM y",
                FormatStyle.LONG: "d MMMM y",
                FormatStyle.MEDIUM: "d MMM y",
                FormatStyle.SHORT: "dd/MM/y",
            },
            time_patterns=dict(_TIME_PATTERNS_24H),
            date_time_join="{date} {time}",
        ),
        "de": LocaleData(
            "de",
            months={
                TextStyle.FULL: (
                    "Januar", "Februar", "März", "April", "Mai", "Juni",
                    "Juli", "August", "September", "Oktober", "November", "Dezember",
                ),
                TextStyle.SHORT: (
                    "Jan.", "Feb.", "März", "Apr.", "Mai", "Juni",
                    "Juli", "Aug.", "Sept.", "Okt.", "Nov.", "Dez.",
                ),
                TextStyle.NARROW: (
                    "J", "F", "M", "A", "M", "J", "J", "A", "S", "O", "N", "D",
                ),
            },
            days={
                TextStyle.FULL: (
                    "Montag", "Dienstag", "Mittwoch", "Donnerstag",
                    "Freitag", "Samstag", "Sonntag",
                ),
                TextStyle.SHORT: ("Mo.", "Di.", "Mi.", "Do.", "Fr.", "Sa.", "So."),
                TextStyle.NARROW: ("M", "D", "M", "D", "F", "S", "S"),
            },
            ampm=("AM", "PM"),
            date_patterns={
                FormatStyle.FULL: "EEEE, d. MMMM y",
                FormatStyle.LONG: "d. MMMM y",
                FormatStyle.MEDIUM: "dd.MM.y",
                FormatStyle.SHORT: "dd.MM.yy",
            },
            time_patterns=dict(_TIME_PATTERNS_24H),
            date_time_join="{date}, {time}",
        ),
    }
)


def language_of(locale: str) -> str:
    """Return the lower-case language part of a locale tag.

    Examples:
        >>> language_of("fr_CA")
        'fr'
        >>> language_of("DE-at")
        'de'
    """
    return locale.replace("-", "_").split("_", 1)[0].lower()


def available_locales() -> tuple[str, ...]:
    return tuple(_LOCALES)


def get_locale_data(locale: str) -> LocaleData:
    """Return the tables for a locale, falling back to English.

    Args:
        locale: A locale tag such as "fr" or "de_DE".
    """
    language = language_of(locale)
    data = _LOCALES.get(language)
    if data is None:
        logger.debug("locale fallback", requested=locale, used=FALLBACK_LOCALE)
        data = _LOCALES[FALLBACK_LOCALE]
    return data


__all__ = [
    "FALLBACK_LOCALE",
    "FormatStyle",
    "LocaleData",
    "TextStyle",
    "available_locales",
    "get_locale_data",
    "language_of",
]
