"""Player records and the validation rules for their personal data."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

MAX_TEXT_LENGTH = 15
MAX_PLAYERS = 5
INITIAL_BALANCE = 1000
CI_LENGTH = 8
MIN_YEAR = 1925
MAX_YEAR = 2025

_CI_WEIGHTS = (2, 9, 8, 7, 6, 3, 4)
_LONG_MONTHS = {1, 3, 5, 7, 8, 10, 12}
_SHORT_MONTHS = {4, 6, 9, 11}
_DATE_PATTERN = re.compile(r"\s*([+-]?\d+)/\s*([+-]?\d+)/\s*([+-]?\d+)\s*")


class ValidationError(ValueError):
    """Raised when an identity document or a date is not acceptable."""


@dataclass(frozen=True)
class Document:
    """An eight digit identity card number."""

    digits: tuple[int, ...]

    def __str__(self) -> str:
        return "".join(str(digit) for digit in self.digits)


@dataclass(frozen=True)
class BirthDate:
    day: int
    month: int
    year: int

    def __str__(self) -> str:
        return f"{self.day}/{self.month}/{self.year}"


@dataclass
class PersonalData:
    ci: Document
    birth_date: BirthDate
    name: str
    surname: str
    alias: str


@dataclass(frozen=True)
class Bet:
    """One round played by a user."""

    initial_balance: int
    won: bool
    amount: int
    resulting_balance: int


@dataclass
class User:
    data: PersonalData
    balance: int = INITIAL_BALANCE
    active: bool = True
    streak: int = 0
    bets: list[Bet] = field(default_factory=list)

    @property
    def alias(self) -> str:
        return self.data.alias


def ci_is_valid(digits) -> bool:
    """Check the eight digits against their check digit."""
    digits = tuple(digits)
    if len(digits) != CI_LENGTH:
        return False
    check = sum(weight * digit for weight, digit in zip(_CI_WEIGHTS, digits)) % 10
    return check == digits[-1]


def parse_ci(text: str) -> Document:
    """Read an identity card number from its first eight characters."""
    chars = text.rstrip("\n")[:CI_LENGTH]
    if len(chars) != CI_LENGTH or not all(c in "0123456789" for c in chars):
        raise ValidationError(f"invalid identity card: {text!r}")
    digits = tuple(int(c) for c in chars)
    if not ci_is_valid(digits):
        raise ValidationError(f"check digit does not match: {text!r}")
    return Document(digits)


def date_is_valid(day: int, month: int, year: int) -> bool:
    """Check day against month and the accepted range of years.

    The 29th of February of a year divisible by four is always accepted.
    """
    valid = MIN_YEAR <= year <= MAX_YEAR
    if month in _LONG_MONTHS:
        if not 1 <= day <= 31:
            valid = False
    elif month in _SHORT_MONTHS:
        if not 1 <= day <= 30:
            valid = False
    elif month == 2:
        if not 1 <= day <= 28:
            valid = False
        if day == 29 and year % 4 == 0:
            valid = True
    else:
        valid = False
    return valid


def parse_date(text: str) -> BirthDate:
    """Read a date written as dd/mm/yyyy."""
    match = _DATE_PATTERN.fullmatch(text.rstrip("\n"))
    if match is None:
        raise ValidationError(f"not a date: {text!r}")
    day, month, year = (int(part) for part in match.groups())
    if not date_is_valid(day, month, year):
        raise ValidationError(f"invalid date: {text!r}")
    return BirthDate(day, month, year)


def clip_text(text: str) -> str:
    """Drop the line ending and keep at most the allowed number of characters."""
    return text.split("\n", 1)[0][:MAX_TEXT_LENGTH]