"""Minimal SimpleFin client.

Performs the client side of the SimpleFin handshake: turn a setup token into
an access URL, then read the Account-Set behind it. Useful for checking a
setup token end to end against a running gateway.
"""

import logging

import httpx
from pydantic import ValidationError

from simplefin_rotki.core.constants import BridgeConstants, SimpleFinConstants
from simplefin_rotki.core.exceptions import AppException, ErrorKind
from simplefin_rotki.schemas.simplefin import AccountSet
from simplefin_rotki.services import token_codec

logger = logging.getLogger(__name__)

_DEFAULT_TIMEOUT = 30.0


async def claim_access_url(
    setup_token: str,
    client: httpx.AsyncClient | None = None,
) -> str:
    """Exchange a setup token for an access URL.

    Args:
        setup_token: Base64-encoded claim URL
        client: Optional HTTP client (a new one is opened when omitted)

    Returns:
        The access URL returned by the claim endpoint

    Raises:
        AppException: ``TOKEN_DECODE`` for a malformed setup token,
            ``BACKEND_FETCH`` if the claim request fails
    """
    claim_url = token_codec.decode_text(setup_token.strip())
    logger.debug(f"SimpleFin claim: POST {claim_url}")

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=_DEFAULT_TIMEOUT) as own_client:
                response = await own_client.post(claim_url)
        else:
            response = await client.post(claim_url)
        response.raise_for_status()
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise AppException(ErrorKind.BACKEND_FETCH, f"Claim request failed: {e}") from e
    except Exception as e:
        raise AppException(ErrorKind.BACKEND_FETCH, f"Unexpected error claiming {claim_url}: {e}") from e

    return response.text.strip()


async def fetch_accounts(
    access_url: str,
    start_date: int = 0,
    client: httpx.AsyncClient | None = None,
) -> AccountSet:
    """Read the Account-Set behind an access URL.

    Raises:
        AppException: ``BACKEND_FETCH`` on transport, status or parse failure
    """
    url = f"{access_url.rstrip('/')}{BridgeConstants.ACCOUNTS_SUFFIX}"
    params = {SimpleFinConstants.START_DATE_PARAM: str(start_date)}

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=_DEFAULT_TIMEOUT) as own_client:
                response = await own_client.get(url, params=params)
        else:
            response = await client.get(url, params=params)
        response.raise_for_status()
        return AccountSet.model_validate_json(response.text)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise AppException(ErrorKind.BACKEND_FETCH, f"Accounts request failed: {e}") from e
    except ValidationError as e:
        raise AppException(ErrorKind.BACKEND_FETCH, f"Unexpected Account-Set: {e}") from e
    except Exception as e:
        raise AppException(ErrorKind.BACKEND_FETCH, f"Unexpected error fetching {url}: {e}") from e
