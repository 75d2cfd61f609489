"""Build authenticated requests for the Trello REST API."""

from __future__ import annotations

from typing import Any

import requests

from trello_manager.credentials import Credentials

API_BASE_URL = "https://api.trello.com/1"


def build_request(
    credentials: Credentials,
    method: str,
    path: str,
    *,
    params: dict[str, Any] | None = None,
    json_body: Any = None,
    files: dict[str, Any] | None = None,
    base_url: str = API_BASE_URL,
) -> requests.PreparedRequest:
    """Prepare one authenticated Trello request

    Every request the client sends goes through here, so the key and token
    query parameters are always present and always the configured ones.

    Args:
        credentials: Key/token pair appended to the query string
        method: HTTP method (GET, POST, PUT, DELETE)
        path: Endpoint path relative to the API root, e.g. "cards/abc123"
        params: Extra query parameters. ``key`` and ``token`` entries are
            overwritten by the credentials.
        json_body: Serialized as the JSON request body when not None
        files: Multipart form fields, in the ``requests`` ``files=`` format.
            The form encoder sets the multipart Content-Type and boundary.
        base_url: API root, without trailing slash

    Returns:
        A prepared request, ready to be sent by a ``requests.Session``

    Raises:
        ValueError: If both ``json_body`` and ``files`` are given
    """
    if json_body is not None and files is not None:
        raise ValueError("A request can carry a JSON body or a multipart form, not both")

    query: dict[str, Any] = dict(params) if params else {}
    # Auth goes last so caller params can never shadow it
    query.pop("key", None)
    query.pop("token", None)
    query.update(credentials.as_params())

    url = f"{base_url.rstrip('/')}/{path.lstrip('/')}"
    request = requests.Request(
        method=method.upper(),
        url=url,
        headers={"Accept": "application/json"},
        params=query,
        json=json_body,
        files=files,
    )
    return request.prepare()
