"""
Trello API client — async httpx wrapper with auth.

Shared by all Trello tool modules. Uses query-param auth (?key=...&token=...).
"""

import logging

import httpx

from config import TrelloConfig, TrelloError

logger = logging.getLogger(__name__)

# Trello API base URL
API_BASE = "https://api.trello.com/1"

JSON_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


class TrelloAPIError(TrelloError):
    """Trello answered with a non-success status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Trello API error ({status_code}): {body}")


class TrelloConnectionError(TrelloError):
    """The request never got an answer from Trello."""


async def trello_request(
    config: TrelloConfig,
    method: str,
    path: str,
    params: dict | None = None,
    json: dict | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> dict | list:
    """
    Make an authenticated Trello API request.

    Args:
        config: Resolved Trello configuration (supplies key and token).
        method: HTTP method (GET, POST, PUT, DELETE)
        path: API path (e.g. "/boards/{id}/lists")
        params: Extra query params; None values are dropped.
        json: JSON body for POST/PUT.
        transport: Optional httpx transport, used by tests.

    Returns:
        Parsed JSON response.

    Raises:
        TrelloAPIError: On a non-2xx response, carrying the body text verbatim.
        TrelloConnectionError: On network/connection failures.
    """
    query = {k: v for k, v in (params or {}).items() if v is not None}
    query.update({"key": config.api_key, "token": config.api_token})

    url = f"{API_BASE}{path}"
    logger.debug("[Trello] %s %s params=%s", method, path,
                 {k: ("***" if k in ("key", "token") else v) for k, v in query.items()})

    try:
        async with httpx.AsyncClient(timeout=30.0, transport=transport) as client:
            resp = await client.request(method, url, params=query, json=json, headers=JSON_HEADERS)
    except httpx.RequestError as e:
        raise TrelloConnectionError(f"Error connecting to Trello: {e}") from e

    if not resp.is_success:
        raise TrelloAPIError(resp.status_code, resp.text)
    if resp.status_code == 204 or not resp.content:
        return {}
    return resp.json()
