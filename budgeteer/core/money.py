"""
Money value type.

Amounts are stored as integer cents in the database and only become Money
at the service boundary, where they pick up the configured currency.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Optional, Union

from budgeteer.core.config import get_currency

CENT = Decimal("0.01")


@dataclass(frozen=True, order=True)
class Money:
    amount: Decimal
    currency: str = "EUR"

    @classmethod
    def from_cents(cls, cents: Union[int, float, Decimal, None], currency: Optional[str] = None) -> "Money":
        """Build Money from a minor-unit amount. None counts as zero."""
        whole_cents = Decimal(str(cents or 0)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        value = whole_cents / 100
        return cls(value.quantize(CENT), currency or get_currency())

    @classmethod
    def zero(cls, currency: Optional[str] = None) -> "Money":
        return cls.from_cents(0, currency)

    @property
    def cents(self) -> int:
        return int((self.amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        if other.currency != self.currency:
            raise ValueError(f"Cannot add {other.currency} to {self.currency}")
        return Money(self.amount + other.amount, self.currency)

    def __str__(self) -> str:
        return f"{self.amount:,.2f} {self.currency}"

    def to_dict(self) -> Dict[str, Any]:
        return {"amount": str(self.amount), "currency": self.currency}

