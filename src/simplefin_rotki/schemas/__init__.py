"""Schemas package."""

from simplefin_rotki.schemas.rotki import (
    BalanceSnapshot,
    RotkiBalanceLocationValue,
    RotkiBalanceResponse,
    RotkiBalanceResult,
)
from simplefin_rotki.schemas.simplefin import (
    Account,
    AccountSet,
    Organization,
    Transaction,
)

__all__ = [
    # Rotki schemas
    "BalanceSnapshot",
    "RotkiBalanceLocationValue",
    "RotkiBalanceResponse",
    "RotkiBalanceResult",
    # SimpleFin schemas
    "Account",
    "AccountSet",
    "Organization",
    "Transaction",
]
