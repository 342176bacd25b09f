"""Translate Rotki balance snapshots into SimpleFin Account-Sets."""

from datetime import UTC, datetime

from simplefin_rotki.schemas.rotki import BalanceSnapshot
from simplefin_rotki.schemas.simplefin import Account, AccountSet, Organization


def translate(
    snapshot: BalanceSnapshot,
    organization: Organization,
    now: datetime | None = None,
) -> AccountSet:
    """Build one SimpleFin account per snapshot location.

    The location name doubles as account id and display name. Rotki does not
    report when a balance was taken, so every account is stamped with the
    translation time. The balances endpoint has no transaction history, so
    transaction lists are always empty.

    Args:
        snapshot: Balances keyed by location name
        organization: Descriptor stamped on every account
        now: Balance timestamp override (defaults to the current UTC time)

    Returns:
        Account-Set with an empty error list
    """
    balance_date = (now or datetime.now(UTC)).replace(microsecond=0)

    accounts = [
        Account(
            org=organization,
            id=name,
            name=name,
            currency=snapshot.currency,
            balance=balance,
            available_balance=None,
            balance_date=balance_date,
            transactions=[],
        )
        for name, balance in snapshot.balances.items()
    ]

    return AccountSet(errors=[], accounts=accounts)
