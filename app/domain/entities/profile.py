"""Profile entity — display attributes of an actor."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Profile:
    id: str
    name: str | None = None
    email: str | None = None
    role: str | None = None
