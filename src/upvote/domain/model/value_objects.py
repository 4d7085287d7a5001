"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from upvote.domain.exceptions import ValidationError


@dataclass(frozen=True, order=True)
class Credits:
    """An amount of account credits.

    Uses Decimal so order costs and balances compare exactly.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Credits amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Credits amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Credits amount cannot be negative, got {self.amount}"
            )

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.amount:.2f} credits"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Credits:
        """Convenient factory that coerces to Decimal safely."""
        if isinstance(amount, bool):
            raise ValidationError(f"Invalid credits amount: {amount!r}")
        try:
            return Credits(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid credits amount: {amount!r}") from exc


@dataclass(frozen=True)
class VoteCount:
    """A positive number of upvotes purchased by an order."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Vote count must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Vote count must be positive")

    def __str__(self) -> str:
        return str(self.value)
