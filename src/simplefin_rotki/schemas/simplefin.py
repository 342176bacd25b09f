"""SimpleFin Account-Set wire schemas.

Field names follow Python conventions; the hyphenated SimpleFin keys
(``sfin-url``, ``available-balance``, ``balance-date``) are the aliases used on
the wire. Inbound parsing accepts either form.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class Organization(BaseModel):
    """Source descriptor attached to every account."""

    model_config = ConfigDict(populate_by_name=True)

    domain: str | None = None
    name: str | None = None
    sfin_url: str = Field(..., alias="sfin-url")


class Transaction(BaseModel):
    """A posted or pending transaction on an account."""

    id: str
    posted: datetime
    amount: Decimal
    description: str
    transacted_at: datetime | None = None
    pending: bool | None = None

    @field_serializer("amount", when_used="json")
    def serialize_amount(self, value: Decimal) -> str:
        return format(value, "f")

    @field_serializer("posted", "transacted_at")
    def serialize_timestamp(self, value: datetime | None) -> int | None:
        """SimpleFin timestamps are unix seconds."""
        return int(value.timestamp()) if value is not None else None


class Account(BaseModel):
    """A SimpleFin account with its current balance."""

    model_config = ConfigDict(populate_by_name=True)

    org: Organization
    id: str
    name: str
    currency: str
    balance: Decimal
    available_balance: Decimal | None = Field(None, alias="available-balance")
    balance_date: datetime = Field(..., alias="balance-date")
    transactions: list[Transaction] = Field(default_factory=list)

    @field_serializer("balance", "available_balance", when_used="json-unless-none")
    def serialize_balance(self, value: Decimal) -> str:
        """Fixed-point strings; Decimal's default str() may use exponent form."""
        return format(value, "f")

    @field_serializer("balance_date")
    def serialize_balance_date(self, value: datetime) -> int:
        return int(value.timestamp())


class AccountSet(BaseModel):
    """Response body of ``GET {access URL}/accounts``."""

    errors: list[str] = Field(default_factory=list)
    accounts: list[Account] = Field(default_factory=list)
