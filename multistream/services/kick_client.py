"""HTTP transport for the unofficial Kick web API.

The endpoints are undocumented and unauthenticated, and kick.com sits behind
Cloudflare, which rejects plain HTTP library TLS fingerprints. Requests go
through curl_cffi with impersonate="chrome" so the TLS fingerprint and the
User-Agent both look like a desktop browser. Do NOT set a User-Agent header
here; it must match the impersonated fingerprint.
"""

from curl_cffi import requests as curl_requests
from curl_cffi.requests.exceptions import RequestException

from multistream.exceptions import UpstreamError

BASE_URL = "https://kick.com"


def _build_headers(referer: str) -> dict:
    return {
        "Accept": "application/json, text/plain, */*",
        "Accept-Language": "en-US,en;q=0.9",
        "Origin": BASE_URL,
        "Referer": referer,
    }


def kick_get(url: str, timeout: float, params: dict | None = None, referer: str | None = None):
    """GET a kick.com URL with browser impersonation.

    Returns the raw response whatever its status; only transport failures
    (DNS, TLS, timeout) raise UpstreamError.
    """
    try:
        return curl_requests.get(
            url,
            headers=_build_headers(referer or f"{BASE_URL}/"),
            params=params,
            impersonate="chrome",
            timeout=timeout,
        )
    except RequestException as e:
        raise UpstreamError(f"Kick request failed: {e}") from e
