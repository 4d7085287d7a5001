"""User profile as supplied by the authentication backend."""

from __future__ import annotations

from dataclasses import dataclass

from upvote.domain.exceptions import ValidationError
from upvote.domain.model.value_objects import Credits


@dataclass(frozen=True)
class UserProfile:
    username: str
    credits: Credits
    profile_image: str | None = None

    def __post_init__(self) -> None:
        if not self.username or not self.username.strip():
            raise ValidationError("Username is required")
