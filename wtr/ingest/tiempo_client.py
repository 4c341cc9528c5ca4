"""Tiempo (ilmeteo.net) API endpoint details."""

from urllib.parse import quote

SOURCE_ID = "tiempo"
TIEMPO_BASE_URL = "http://api.ilmeteo.net/index.php"
# Affiliate ID used by the Tiempo API for accounting and throttling.
DEFAULT_AFFILIATE_ID = "0123456789abcd"


def forecast_url(
    code: str,
    affiliate_id: str = DEFAULT_AFFILIATE_ID,
    base_url: str = TIEMPO_BASE_URL,
    lang: str = "it",
) -> str:
    """URL of the 5-day XML forecast for a location code.

    The query string layout is fixed by the remote API.
    """
    return (
        f"{base_url}?api_lang={quote(lang, safe='')}"
        f"&localidad={quote(code, safe='')}"
        f"&affiliate_id={quote(affiliate_id, safe='')}&v=2&h=1"
    )
