"""Dashboard session: who is signed in and how many credits they hold.

A DashboardSession is created by the composition root and passed to the
components that need it.  It is started once the authentication backend
has produced a profile and ended on sign-out.  The balance is read-only
here; the credit ledger lives on the server.
"""

from __future__ import annotations

import logging

from upvote.application.dto import SessionHeaderDTO
from upvote.domain.exceptions import SessionError
from upvote.domain.model.account import UserProfile
from upvote.domain.model.value_objects import Credits

logger = logging.getLogger(__name__)


class DashboardSession:

    def __init__(self) -> None:
        self._profile: UserProfile | None = None

    # --- Lifecycle ------------------------------------------------------------

    def start(self, profile: UserProfile) -> None:
        if self._profile is not None:
            raise SessionError(
                f"Session already active for '{self._profile.username}'"
            )
        self._profile = profile
        logger.info("Session started for %s", profile.username)

    def end(self) -> None:
        if self._profile is None:
            return
        logger.info("Session ended for %s", self._profile.username)
        self._profile = None

    @property
    def is_active(self) -> bool:
        return self._profile is not None

    # --- Read access ----------------------------------------------------------

    @property
    def profile(self) -> UserProfile:
        if self._profile is None:
            raise SessionError("No active session; sign in first")
        return self._profile

    @property
    def username(self) -> str:
        return self.profile.username

    @property
    def credits(self) -> Credits:
        return self.profile.credits

    def credits_display(self) -> str:
        return str(self.credits)

    def can_afford(self, cost: Credits) -> bool:
        return self.credits >= cost

    def header(self) -> SessionHeaderDTO:
        profile = self.profile
        return SessionHeaderDTO(
            username=profile.username,
            credits=str(profile.credits),
            profile_image=profile.profile_image,
        )
