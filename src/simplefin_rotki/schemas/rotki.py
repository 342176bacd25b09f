"""Rotki balance response schemas and the internal balance snapshot."""

from decimal import Decimal

from pydantic import BaseModel

from simplefin_rotki.core.constants import SimpleFinConstants


class RotkiBalanceLocationValue(BaseModel):
    """Per-location balance entry. Rotki sends amounts as numbers or strings."""

    usd_value: Decimal


class RotkiBalanceResult(BaseModel):
    location: dict[str, RotkiBalanceLocationValue]


class RotkiBalanceResponse(BaseModel):
    """Body of ``GET /api/1/balances``. Extra keys (assets, liabilities, ...) are ignored."""

    result: RotkiBalanceResult
    message: str = ""


class BalanceSnapshot(BaseModel):
    """
    Balances per location in a single currency.

    Keys are Rotki location names, unique within a snapshot; values keep the
    exact decimal precision received from the backend.
    """

    currency: str = SimpleFinConstants.CURRENCY
    balances: dict[str, Decimal]

    @classmethod
    def from_rotki(cls, response: RotkiBalanceResponse) -> "BalanceSnapshot":
        return cls(
            balances={
                name: value.usd_value for name, value in response.result.location.items()
            }
        )
