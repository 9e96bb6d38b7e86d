"""HTTP client implementation for infrastructure.

Usage example:
    import requests

    from mentor_matching.infrastructure.io.http import RequestsHttpClient

    client = RequestsHttpClient(session=requests.Session(), timeout_seconds=10.0)
    mentors = client.get_json("https://mentors.example.com/api/mentors")
"""

from __future__ import annotations

from typing_extensions import override

import requests

from ...observability import get_logger
from ...protocols import HttpClient
from .validation import parse_json_document

logger = get_logger("mentor_matching.infrastructure.http")


def _response_details(response: requests.Response) -> str:
    """Return a compact status/body summary for error reporting."""
    try:
        body = response.text
    except (UnicodeDecodeError, ValueError, requests.RequestException):
        body = "<unreadable>"
    body = " ".join(body.split())
    if len(body) > 300:
        body = body[:300] + "..."
    return f"status={response.status_code}, body={body}"


class RequestsHttpClient(HttpClient):
    """Requests-backed JSON client with a fixed timeout and no retries."""

    def __init__(
        self,
        *,
        session: requests.Session | None = None,
        timeout_seconds: float = 30.0,
    ) -> None:
        self._session = session or requests.Session()
        self.timeout_seconds = timeout_seconds

    @override
    def get_json(self, url: str) -> object:
        """Fetch JSON from URL.

        Raises:
            requests.RequestException: For network failures and non-2xx responses.
            IncomingDataError: When the body is not JSON.
        """
        response = self._session.get(
            url,
            timeout=self.timeout_seconds,
            headers={"Accept": "application/json"},
        )
        if not response.ok:
            logger.warning("GET %s failed: %s", url, _response_details(response))
        response.raise_for_status()
        return parse_json_document(response.text)
