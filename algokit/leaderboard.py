"""A leaderboard of users ranked by score, kept up to date as scores change."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass
class User:
    """A user and their score."""

    id: int
    number: int


class Leaderboard:
    """Users ranked from the highest score down.

    Users with equal scores keep the order in which they were inserted.
    """

    def __init__(self) -> None:
        self._users: list[User] = []

    def insert(self, user: User) -> None:
        """Add a copy of ``user``."""
        self._users.append(replace(user))

    def delete(self, user_id: int) -> None:
        """Remove every entry with id ``user_id``."""
        self._users = [u for u in self._users if u.id != user_id]

    def update(self, user: User) -> None:
        """Set the score of every entry with ``user.id`` to ``user.number``."""
        for stored in self._users:
            if stored.id == user.id:
                stored.number = user.number

    def ranking(self) -> list[User]:
        """Copies of all users, highest score first."""
        ordered = sorted(self._users, key=lambda u: u.number, reverse=True)
        return [replace(u) for u in ordered]

    def __len__(self) -> int:
        return len(self._users)