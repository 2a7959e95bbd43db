"""
Form field model and value builders for the card delivery form.

Everything here is browser-free: it computes what should be typed into
the form and what the form should say back, so it can be unit tested
without Playwright.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum

DATE_FORMAT = "%d.%m.%Y"

VALID_NAME = "Иванов Иван-Петр"
VALID_PHONE = "+79998887766"

INVALID_CITY = "Ура"
INVALID_NAME = "John Smith"
INVALID_PHONE = "12345"

CITY_ERROR = "Доставка в выбранный город недоступна"
NAME_ERROR = (
    "Имя и Фамилия указаные неверно. "
    "Допустимы только русские буквы, пробелы и дефисы."
)
PHONE_ERROR = "Телефон указан неверно"
SUCCESS_TITLE = "Успешно"
SUCCESS_MESSAGE_PREFIX = "Встреча успешно забронирована на "


class FormField(Enum):
    """Fields of the delivery form; NONE means "skip nothing"."""

    CITY = "city"
    DATE = "date"
    NAME = "name"
    PHONE = "phone"
    AGREEMENT = "agreement"
    NONE = "none"


def meeting_date(days_ahead: int = 3, today: date | None = None) -> str:
    """Return ``today + days_ahead`` formatted as ``dd.MM.yyyy``."""
    if today is None:
        today = date.today()
    return (today + timedelta(days=days_ahead)).strftime(DATE_FORMAT)


def success_message(date_text: str) -> str:
    return f"{SUCCESS_MESSAGE_PREFIX}{date_text}"


@dataclass(frozen=True)
class ValidFormValues:
    """One set of values the delivery app accepts."""

    city: str
    date: str
    name: str = VALID_NAME
    phone: str = VALID_PHONE

    @classmethod
    def build(
        cls,
        cities: Sequence[str],
        rng: random.Random,
        days_ahead: int = 3,
        today: date | None = None,
    ) -> ValidFormValues:
        """
        Pick a uniformly random city and compute the meeting date.

        Args:
            cities: Non-empty sequence of accepted city names.
            rng: Source of randomness; seed it for reproducible runs.
            days_ahead: Offset of the meeting date from today.
            today: Reference date, defaults to the current date.
        """
        return cls(
            city=rng.choice(list(cities)),
            date=meeting_date(days_ahead, today),
        )
