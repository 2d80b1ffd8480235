"""Fetch a schema from a live GraphQL endpoint via introspection."""

import logging
from typing import Any

import httpx
from graphql import get_introspection_query

from .errors import SchemaError

log = logging.getLogger(__name__)


def fetch_introspection(
    url: str,
    headers: dict[str, str] | None = None,
    *,
    timeout: float = 30.0,
    transport: httpx.BaseTransport | None = None,
) -> dict[str, Any]:
    """POST the introspection query to ``url`` and return its ``data``.

    Args:
        url: GraphQL endpoint URL
        headers: Extra request headers (e.g. Authorization)
        timeout: Request timeout in seconds
        transport: Optional httpx transport, mainly for tests

    Raises:
        SchemaError: If the request fails or the response carries errors
    """
    request_headers = {"Content-Type": "application/json"}
    request_headers.update(headers or {})
    payload = {"query": get_introspection_query(descriptions=True)}

    log.info("Fetching schema from %s", url)
    with httpx.Client(timeout=timeout, headers=request_headers, transport=transport) as client:
        try:
            response = client.post(url, json=payload)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise SchemaError(f"Failed to fetch schema from {url}: {e}") from e

    try:
        result = response.json()
    except ValueError as e:
        raise SchemaError(f"Endpoint {url} did not return JSON: {e}") from e

    if result.get("errors"):
        error_messages = "; ".join(e.get("message", str(e)) for e in result["errors"])
        raise SchemaError(f"Introspection failed: {error_messages}")
    if not result.get("data"):
        raise SchemaError(f"Introspection response from {url} has no data")
    return result["data"]


def parse_header(value: str) -> tuple[str, str]:
    """Split a ``"Name: value"`` header option into a pair."""
    name, sep, header_value = value.partition(":")
    if not sep or not name.strip():
        raise ValueError(f"Invalid header '{value}', expected 'Name: value'")
    return name.strip(), header_value.strip()
