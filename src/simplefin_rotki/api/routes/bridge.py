"""SimpleFin bridge endpoints: token exchange and account polling."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from simplefin_rotki.core.config import settings
from simplefin_rotki.core.deps import get_forwarded_headers, get_organization
from simplefin_rotki.schemas.simplefin import AccountSet, Organization
from simplefin_rotki.services import bridge_service

router = APIRouter()


# Tokens use the standard base64 alphabet and may contain "/", hence the path converter.
@router.post("/{token:path}", response_class=PlainTextResponse)
async def exchange_token(token: str) -> str:
    """
    Exchange a claim token for an access URL.

    SimpleFin clients POST to the claim link decoded from their setup token.
    Nothing is consumed: the access URL points back at the same token, and
    later GETs to ``{access URL}/accounts`` fetch the Rotki data.
    """
    return bridge_service.exchange(settings.PUBLIC_URL, token)


@router.get(
    "/{token:path}/accounts",
    response_model=AccountSet,
    response_model_exclude_none=True,
)
async def get_accounts(
    token: str,
    headers: Annotated[dict[str, str], Depends(get_forwarded_headers)],
    organization: Annotated[Organization, Depends(get_organization)],
) -> AccountSet:
    """
    Return live Rotki balances as a SimpleFin Account-Set.

    Query parameters sent by SimpleFin clients (``start-date``,
    ``balances-only``, ...) are accepted and ignored: every call returns
    current balances with no transactions.
    """
    return await bridge_service.poll(token, organization, headers=headers)
