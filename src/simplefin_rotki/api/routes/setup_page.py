"""Setup page: turns a Rotki URL into a SimpleFin setup token."""

import html
import logging

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from simplefin_rotki.core.config import settings
from simplefin_rotki.services import bridge_service

logger = logging.getLogger(__name__)

router = APIRouter()

_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
</head>
<body>
<h1>{title}</h1>
<form action="/" method="get">
<label for="rotki_url">Rotki URL</label>
<input id="rotki_url" name="rotki_url" value="{rotki_url}" placeholder="http://localhost:8080">
<button type="submit">Create token</button>
</form>
{result}
</body>
</html>
"""


def render_setup_page(rotki_url: str = "", setup_token: str | None = None) -> str:
    """Render the setup form, plus the setup token once one has been built."""
    result = ""
    if setup_token is not None:
        result = f"<p>Token URL: <code>{html.escape(setup_token)}</code></p>"
    return _PAGE.format(
        title=html.escape(settings.APP_NAME),
        rotki_url=html.escape(rotki_url, quote=True),
        result=result,
    )


@router.get("/", response_class=HTMLResponse)
async def setup_page(rotki_url: str | None = None) -> str:
    """
    Show the setup form.

    When ``rotki_url`` is given, build the claim link for it and wrap that
    link into the setup token to paste into the SimpleFin client.
    """
    rotki_url = (rotki_url or "").strip()
    if not rotki_url:
        return render_setup_page()

    claim_url = bridge_service.build_claim_url(settings.PUBLIC_URL, rotki_url)
    setup_token = bridge_service.build_setup_token(claim_url)
    logger.debug(f"Built setup token for claim URL {claim_url}")

    return render_setup_page(rotki_url, setup_token)
