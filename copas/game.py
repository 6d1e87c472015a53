"""The player registry and the cup guessing table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .models import MAX_PLAYERS, Bet, BirthDate, Document, PersonalData, User

STREAK_LIMIT = 2


class GameError(Exception):
    """Base class for refused game operations."""


class DuplicateAliasError(GameError):
    pass


class UnknownAliasError(GameError, LookupError):
    pass


class InactiveUserError(GameError):
    pass


class NoBalanceError(GameError):
    pass


class InvalidBetError(GameError, ValueError):
    pass


class RegistryFullError(GameError):
    pass


def cup_for_round(round_number: int) -> int:
    """The cup (1 to 3) hiding the ball in the given round."""
    return round_number % 3 + 1


@dataclass(frozen=True)
class BetResult:
    bet: Bet
    cup: int
    revealed: bool

    @property
    def won(self) -> bool:
        return self.bet.won

    @property
    def balance(self) -> int:
        return self.bet.resulting_balance


class Registry:
    """Users kept in order of registration."""

    def __init__(self, capacity: int = MAX_PLAYERS):
        self.capacity = capacity
        self._users: list[User] = []

    def __len__(self) -> int:
        return len(self._users)

    def __iter__(self) -> Iterator[User]:
        return iter(self._users)

    def find(self, alias: str) -> User:
        for user in self._users:
            if user.alias == alias:
                return user
        raise UnknownAliasError(alias)

    def add(self, data: PersonalData) -> User:
        if any(user.alias == data.alias for user in self._users):
            raise DuplicateAliasError(data.alias)
        if len(self._users) >= self.capacity:
            raise RegistryFullError(data.alias)
        user = User(data)
        self._users.append(user)
        return user

    def modify(
        self, alias: str, ci: Document, birth_date: BirthDate, name: str, surname: str
    ) -> User:
        user = self.find(alias)
        user.data.ci = ci
        user.data.birth_date = birth_date
        user.data.name = name
        user.data.surname = surname
        return user

    def active_by_alias(self) -> list[User]:
        return sorted((u for u in self._users if u.active), key=lambda u: u.alias)


class Table:
    """Plays rounds; the winning cup rotates with the round number."""

    def __init__(self, round_number: int = 0):
        self.round = round_number

    def player(self, registry: Registry, alias: str) -> User:
        user = registry.find(alias)
        if not user.active:
            raise InactiveUserError(alias)
        return user

    def play(self, user: User, choice: int, amount: int) -> BetResult:
        if user.balance <= 0:
            raise NoBalanceError(user.alias)
        if choice not in (1, 2, 3):
            raise InvalidBetError(f"no cup {choice}")
        if amount <= 0 or amount > user.balance:
            raise InvalidBetError(f"amount {amount} out of range")

        initial = user.balance
        cup = cup_for_round(self.round)
        revealed = True
        if choice == cup and user.streak != STREAK_LIMIT:
            won = True
            user.balance += amount
            user.streak += 1
        else:
            won = False
            revealed = choice != cup
            user.balance -= amount
            user.streak = 0

        bet = Bet(initial, won, amount, user.balance)
        user.bets.append(bet)
        self.round += 1
        return BetResult(bet, cup, revealed)