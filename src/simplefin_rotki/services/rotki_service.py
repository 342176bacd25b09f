"""Rotki balance source adapter.

Fetches the balance summary from a Rotki backend and parses it into a
``BalanceSnapshot``. Every failure mode (transport error, non-2xx status,
invalid JSON, unexpected shape) is raised as ``ErrorKind.BACKEND_FETCH``.
"""

import logging
from decimal import Decimal

import httpx
from pydantic import ValidationError

from simplefin_rotki.core.config import settings
from simplefin_rotki.core.exceptions import AppException, ErrorKind
from simplefin_rotki.schemas.rotki import BalanceSnapshot, RotkiBalanceResponse

logger = logging.getLogger(__name__)


def balances_url(backend_url: str) -> str:
    """Build the balances endpoint URL for a Rotki backend."""
    return f"{backend_url.rstrip('/')}{settings.ROTKI_BALANCES_PATH}"


async def fetch_balances(
    backend_url: str,
    headers: dict[str, str] | None = None,
) -> BalanceSnapshot:
    """Fetch current balances per location from a Rotki backend.

    Args:
        backend_url: Base URL of the Rotki instance (e.g. ``http://localhost:8080``)
        headers: Opaque header set forwarded with the request (tracing context)

    Returns:
        Snapshot of USD balances keyed by location name

    Raises:
        AppException: ``ErrorKind.BACKEND_FETCH`` on any failure
    """
    url = balances_url(backend_url)
    request_headers = {**(headers or {}), "Content-Type": "application/json"}

    logger.debug(f"Rotki request: GET {url}")

    try:
        async with httpx.AsyncClient(timeout=settings.ROTKI_TIMEOUT) as client:
            response = await client.get(url, headers=request_headers)
            response.raise_for_status()

        # Parse numbers straight into Decimal so no float rounding creeps in
        payload = response.json(parse_float=Decimal)
        parsed = RotkiBalanceResponse.model_validate(payload)

    except httpx.HTTPStatusError as e:
        raise AppException(
            ErrorKind.BACKEND_FETCH,
            f"Rotki returned HTTP {e.response.status_code} for {url}",
        ) from e
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise AppException(ErrorKind.BACKEND_FETCH, f"Rotki request to {url} failed: {e}") from e
    except ValidationError as e:
        raise AppException(
            ErrorKind.BACKEND_FETCH,
            f"Unexpected Rotki balance response from {url}: {e}",
        ) from e
    except ValueError as e:
        raise AppException(ErrorKind.BACKEND_FETCH, f"Invalid JSON from {url}: {e}") from e
    except Exception as e:
        raise AppException(ErrorKind.BACKEND_FETCH, f"Unexpected error fetching {url}: {e}") from e

    snapshot = BalanceSnapshot.from_rotki(parsed)
    logger.info(f"Fetched {len(snapshot.balances)} Rotki location balances")
    return snapshot
