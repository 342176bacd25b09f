"""Bridge protocol: claim, exchange and poll.

The handshake is stateless. Each step's output fully determines the next
step's input, and the backend URL travels inside the token itself:

1. Claim: backend URL -> claim token -> claim link -> setup token
2. Exchange: claim token -> access URL (same token, echoed back)
3. Poll: access token -> backend URL -> live balances -> Account-Set

Claim and access tokens decode to the same backend URL, and exchanging a claim
token any number of times returns the same access URL. Single-use or
confidential tokens would need a server-side token store, which this gateway
deliberately does not have.
"""

import logging

from simplefin_rotki.core.constants import BridgeConstants
from simplefin_rotki.core.exceptions import AppException, ErrorKind
from simplefin_rotki.schemas.simplefin import AccountSet, Organization
from simplefin_rotki.services import token_codec
from simplefin_rotki.services.account_set_service import translate
from simplefin_rotki.services.rotki_service import fetch_balances

logger = logging.getLogger(__name__)


def token_url(public_url: str, token: str) -> str:
    """Absolute gateway URL for a bridge token."""
    return f"{public_url}{BridgeConstants.TOKEN_PATH_PREFIX}/{token}"


def build_claim_url(public_url: str, backend_url: str) -> str:
    """Encode a backend URL into a claim token and embed it in a claim link."""
    claim_token = token_codec.encode(backend_url.encode("utf-8"))
    return token_url(public_url, claim_token)


def build_setup_token(claim_url: str) -> str:
    """Wrap a claim link into the opaque setup token a SimpleFin client expects."""
    return token_codec.encode(claim_url.encode("utf-8"))


def decode_backend_url(token: str) -> str:
    """Recover the backend URL carried by a claim or access token.

    Raises:
        AppException: ``ErrorKind.TOKEN_DECODE`` if the token is malformed or empty
    """
    backend_url = token_codec.decode_text(token)
    if not backend_url.strip():
        raise AppException(ErrorKind.TOKEN_DECODE, "Bridge token carries no backend URL")
    return backend_url


def exchange(public_url: str, token: str) -> str:
    """Validate a claim token and return the access URL for it.

    Raises:
        AppException: ``ErrorKind.TOKEN_DECODE`` if the token is malformed or empty
    """
    decode_backend_url(token)
    return token_url(public_url, token)


async def poll(
    token: str,
    organization: Organization,
    headers: dict[str, str] | None = None,
) -> AccountSet:
    """Fetch live balances for the backend embedded in an access token.

    Raises:
        AppException: ``TOKEN_DECODE`` for a malformed token,
            ``BACKEND_FETCH`` if Rotki cannot be read
    """
    backend_url = decode_backend_url(token)
    snapshot = await fetch_balances(backend_url, headers=headers)
    account_set = translate(snapshot, organization)
    logger.debug(f"Translated {len(account_set.accounts)} accounts")
    return account_set
