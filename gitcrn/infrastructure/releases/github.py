"""
GitHub releases lookup
"""
from typing import Optional

import httpx

from ...core.constants import APP_NAME, LATEST_RELEASE_API, UPDATE_CHECK_TIMEOUT


def fetch_latest_release_tag(
    url: str = LATEST_RELEASE_API,
    timeout: float = UPDATE_CHECK_TIMEOUT,
    transport: Optional[httpx.BaseTransport] = None,
) -> str:
    """
    Fetch tag_name of the latest GitHub release.

    Raises:
        httpx.HTTPError: On transport errors or non-2xx status
        ValueError: If the response is not a JSON object or has no tag_name
    """
    headers = {"Accept": "application/vnd.github+json", "User-Agent": APP_NAME}
    with httpx.Client(timeout=timeout, headers=headers, transport=transport) as client:
        response = client.get(url)
        response.raise_for_status()
        payload = response.json()
    if not isinstance(payload, dict):
        raise ValueError("release response is not a JSON object")
    tag = str(payload.get("tag_name") or "").strip()
    if not tag:
        raise ValueError("empty tag_name")
    return tag
