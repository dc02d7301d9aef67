"""HTTP plumbing shared by all services.

A :class:`Requester` holds an HTTP session (which may carry OAuth1 or OAuth2
authorisation) and a base URL. Services derive their own requester with
:meth:`Requester.path` and call :meth:`Requester.receive`, which decodes JSON
and raises :class:`~tweetkit.errors.APIError` when the API reports errors.
Optional request parameters are dataclasses derived from :class:`Params`.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, fields
from typing import Any, Mapping
from urllib.parse import urljoin

import requests

from tweetkit.errors import APIError, relevant_error

DEFAULT_BASE_URL = "https://api.twitter.com/1.1/"


def _format(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_format(item) for item in value)
    return str(value)


def _omitted(value: Any, metadata: Mapping[str, Any]) -> bool:
    if value is None:
        return True
    if isinstance(value, bool):
        return not value and bool(metadata.get("omit_false"))
    if metadata.get("keep_empty"):
        return False
    if isinstance(value, (str, int, float, list, tuple)):
        return not value
    return False


@dataclass
class Params:
    """Base for optional request parameters.

    Fields that are None, empty strings, zero numbers or empty sequences are
    left out. Booleans are sent as ``true``/``false`` unless None; a field
    with ``metadata={"omit_false": True}`` also drops False. Other metadata
    keys: ``name`` sets the wire name, ``keep_empty`` keeps empty values.
    Sequences are joined with commas.
    """

    def to_query(self) -> dict[str, str]:
        """Encode the set fields as query or form values."""
        return {
            f.metadata.get("name", f.name): _format(value)
            for f in fields(self)
            if not _omitted(value := getattr(self, f.name), f.metadata)
        }


def encode_params(params: Params | Mapping[str, Any] | None) -> dict[str, str]:
    """Encode parameters given as a Params object, a mapping or None."""
    if params is None:
        return {}
    if isinstance(params, Params):
        return params.to_query()
    if isinstance(params, Mapping):
        return {
            str(key): _format(value)
            for key, value in params.items()
            if not _omitted(value, {})
        }
    raise TypeError(f"cannot encode parameters of type {type(params).__name__}")


def _jsonable(body: Any) -> Any:
    to_dict = getattr(body, "to_dict", None)
    return to_dict() if callable(to_dict) else body


class Requester:
    """Sends requests relative to a base URL through an HTTP session."""

    def __init__(
        self,
        session: requests.Session | None = None,
        base_url: str = DEFAULT_BASE_URL,
    ) -> None:
        self.session = session if session is not None else requests.Session()
        self.base_url = base_url

    def __repr__(self) -> str:
        return f"Requester(base_url={self.base_url!r})"

    def path(self, path: str) -> "Requester":
        """Return a requester whose base URL has ``path`` resolved onto it."""
        return Requester(self.session, urljoin(self.base_url, path))

    def request(
        self,
        method: str,
        path: str,
        query: Params | Mapping[str, Any] | None = None,
        form: Params | Mapping[str, Any] | None = None,
        json_body: Any = None,
    ) -> requests.Response:
        """Send a request and return the raw response."""
        kwargs: dict[str, Any] = {}
        encoded_query = encode_params(query)
        if encoded_query:
            kwargs["params"] = encoded_query
        if form is not None:
            kwargs["data"] = encode_params(form)
        if json_body is not None:
            kwargs["data"] = json.dumps(_jsonable(json_body), separators=(",", ":"))
            kwargs["headers"] = {"Content-Type": "application/json"}
        return self.session.request(method, urljoin(self.base_url, path), **kwargs)

    def receive(
        self,
        method: str,
        path: str,
        query: Params | Mapping[str, Any] | None = None,
        form: Params | Mapping[str, Any] | None = None,
        json_body: Any = None,
    ) -> tuple[Any, requests.Response]:
        """Send a request and return ``(decoded_json, response)``.

        The decoded value is None for empty bodies, 204 responses and
        non-success responses that carry no error details. A non-success
        response with error details raises :class:`APIError`; a body that is
        not JSON raises :class:`ValueError`.
        """
        response = self.request(method, path, query=query, form=form, json_body=json_body)
        if response.status_code == 204 or not response.content:
            return None, response
        payload = json.loads(response.content)
        if 200 <= response.status_code < 300:
            return payload, response
        api_error = APIError.from_dict(payload if isinstance(payload, Mapping) else None)
        error = relevant_error(None, api_error)
        if error is not None:
            raise error
        return None, response