"""Dependencies for FastAPI routes."""

from fastapi import Request

from simplefin_rotki.core.config import settings
from simplefin_rotki.schemas.simplefin import Organization


def get_forwarded_headers(request: Request) -> dict[str, str]:
    """
    Collect the inbound tracing headers that should reach the Rotki backend.

    Only header names listed in ``settings.FORWARDED_HEADERS`` are kept; the
    values are passed through untouched.
    """
    wanted = {name.lower() for name in settings.FORWARDED_HEADERS}
    return {name: value for name, value in request.headers.items() if name.lower() in wanted}


def get_organization() -> Organization:
    """Organization descriptor stamped on every account this gateway produces."""
    return Organization(
        domain=settings.ORGANIZATION_DOMAIN,
        name=settings.ORGANIZATION_NAME,
        sfin_url=settings.PUBLIC_URL,
    )
