"""Liked ("favorited") tweets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tweetkit.api import Params, Requester


@dataclass
class FavoriteListParams(Params):
    """Parameters for :meth:`FavoriteService.list`."""

    user_id: int = 0
    screen_name: str = ""
    count: int = 0
    since_id: int = 0
    max_id: int = 0
    include_entities: bool | None = None
    tweet_mode: str = ""


@dataclass
class FavoriteCreateParams(Params):
    """Parameters for :meth:`FavoriteService.create`."""

    id: int = 0


@dataclass
class FavoriteDestroyParams(Params):
    """Parameters for :meth:`FavoriteService.destroy`."""

    id: int = 0


class FavoriteService:
    """Access to the ``favorites/`` endpoints.

    The like action was once called favorite; the endpoint names keep the
    older naming.
    """

    def __init__(self, requester: Requester) -> None:
        self._favorites = requester.path("favorites/")

    def list(self, params: FavoriteListParams | None = None) -> list[dict[str, Any]]:
        """Return the tweets liked by the given user, as decoded JSON."""
        tweets, _ = self._favorites.receive("GET", "list.json", query=params)
        return [dict(tweet) for tweet in tweets or []]

    def create(self, params: FavoriteCreateParams | None = None) -> dict[str, Any]:
        """Like a tweet and return it as decoded JSON. Requires user auth."""
        return self._post_tweet("create.json", params)

    def destroy(self, params: FavoriteDestroyParams | None = None) -> dict[str, Any]:
        """Unlike a tweet and return it as decoded JSON. Requires user auth."""
        return self._post_tweet("destroy.json", params)

    def _post_tweet(self, endpoint: str, params: Params | None) -> dict[str, Any]:
        tweet, _ = self._favorites.receive("POST", endpoint, query=params)
        return dict(tweet or {})