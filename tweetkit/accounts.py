"""Account credential verification."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tweetkit.api import Params, Requester


@dataclass
class AccountVerifyParams(Params):
    """Optional parameters for :meth:`AccountService.verify_credentials`."""

    include_entities: bool | None = None
    skip_status: bool | None = None
    include_email: bool | None = None


class AccountService:
    """Access to the ``account/`` endpoints."""

    def __init__(self, requester: Requester) -> None:
        self._account = requester.path("account/")

    def verify_credentials(self, params: AccountVerifyParams | None = None) -> dict[str, Any]:
        """Return the authorised user as decoded JSON if the credentials are valid.

        Requires a user auth context. Raises :class:`~tweetkit.errors.APIError`
        when the API rejects the credentials.
        """
        user, _ = self._account.receive("GET", "verify_credentials.json", query=params)
        return dict(user or {})