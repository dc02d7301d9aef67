"""Lists: their members, subscribers and timelines."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from typing import Any, Mapping

import requests

from tweetkit.api import Params, Requester


@dataclass
class List:
    """A list of users; ``user`` is the owner as decoded JSON."""

    slug: str = ""
    name: str = ""
    created_at: str = ""
    uri: str = ""
    subscriber_count: int = 0
    id_str: str = ""
    member_count: int = 0
    mode: str = ""
    id: int = 0
    full_name: str = ""
    description: str = ""
    user: dict[str, Any] | None = None
    following: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "List":
        data = data or {}
        user = data.get("user")
        return cls(
            slug=data.get("slug") or "",
            name=data.get("name") or "",
            created_at=data.get("created_at") or "",
            uri=data.get("uri") or "",
            subscriber_count=data.get("subscriber_count") or 0,
            id_str=data.get("id_str") or "",
            member_count=data.get("member_count") or 0,
            mode=data.get("mode") or "",
            id=data.get("id") or 0,
            full_name=data.get("full_name") or "",
            description=data.get("description") or "",
            user=dict(user) if user is not None else None,
            following=bool(data.get("following")),
        )


def _cursors(data: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "next_cursor": data.get("next_cursor") or 0,
        "next_cursor_str": data.get("next_cursor_str") or "",
        "previous_cursor": data.get("previous_cursor") or 0,
        "previous_cursor_str": data.get("previous_cursor_str") or "",
    }


def _users(data: Mapping[str, Any]) -> list[dict[str, Any]]:
    return [dict(user) for user in data.get("users") or []]


def _lists(data: Mapping[str, Any]) -> list[List]:
    return [List.from_dict(item) for item in data.get("lists") or []]


@dataclass
class Members:
    """A cursored page of list members as decoded JSON users."""

    users: list[dict[str, Any]] = field(default_factory=list)
    next_cursor: int = 0
    next_cursor_str: str = ""
    previous_cursor: int = 0
    previous_cursor_str: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "Members":
        data = data or {}
        return cls(users=_users(data), **_cursors(data))


@dataclass
class Membership:
    """A cursored page of lists a user has been added to."""

    lists: list[List] = field(default_factory=list)
    next_cursor: int = 0
    next_cursor_str: str = ""
    previous_cursor: int = 0
    previous_cursor_str: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "Membership":
        data = data or {}
        return cls(lists=_lists(data), **_cursors(data))


@dataclass
class Ownership:
    """A cursored page of lists a user owns."""

    lists: list[List] = field(default_factory=list)
    next_cursor: int = 0
    next_cursor_str: str = ""
    previous_cursor: int = 0
    previous_cursor_str: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "Ownership":
        data = data or {}
        return cls(lists=_lists(data), **_cursors(data))


@dataclass
class Subscribers:
    """A cursored page of users subscribed to a list."""

    users: list[dict[str, Any]] = field(default_factory=list)
    next_cursor: int = 0
    next_cursor_str: str = ""
    previous_cursor: int = 0
    previous_cursor_str: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "Subscribers":
        data = data or {}
        return cls(users=_users(data), **_cursors(data))


@dataclass
class Subscribed:
    """A cursored page of lists a user is subscribed to."""

    lists: list[List] = field(default_factory=list)
    next_cursor: int = 0
    next_cursor_str: str = ""
    previous_cursor: int = 0
    previous_cursor_str: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "Subscribed":
        data = data or {}
        return cls(lists=_lists(data), **_cursors(data))


@dataclass
class ListsListParams(Params):
    """Parameters for :meth:`ListsService.list`."""

    user_id: int = 0
    screen_name: str = ""
    reverse: bool = field(default=False, metadata={"omit_false": True})


@dataclass
class ListsMembersParams(Params):
    """Parameters for :meth:`ListsService.members`."""

    list_id: int = 0
    slug: str = ""
    owner_screen_name: str = ""
    owner_id: int = 0
    count: int = 0
    cursor: int = 0
    include_entities: bool | None = None
    skip_status: bool | None = None


@dataclass
class ListsMembersShowParams(Params):
    """Parameters for :meth:`ListsService.members_show`."""

    list_id: int = 0
    slug: str = ""
    user_id: int = 0
    screen_name: str = ""
    owner_screen_name: str = ""
    owner_id: int = 0
    include_entities: bool | None = None
    skip_status: bool | None = None


@dataclass
class ListsMembershipsParams(Params):
    """Parameters for :meth:`ListsService.memberships`."""

    user_id: int = 0
    screen_name: str = ""
    count: int = 0
    cursor: int = 0
    filter_to_owned_lists: bool | None = None


@dataclass
class ListsOwnershipsParams(Params):
    """Parameters for :meth:`ListsService.ownerships`."""

    user_id: int = 0
    screen_name: str = ""
    count: int = 0
    cursor: int = 0


@dataclass
class ListsShowParams(Params):
    """Parameters for :meth:`ListsService.show`."""

    list_id: int = 0
    slug: str = ""
    owner_screen_name: str = ""
    owner_id: int = 0


@dataclass
class ListsStatusesParams(Params):
    """Parameters for :meth:`ListsService.statuses`."""

    list_id: int = 0
    slug: str = ""
    owner_screen_name: str = ""
    owner_id: int = 0
    since_id: int = 0
    max_id: int = 0
    count: int = 0
    include_entities: bool | None = None
    include_retweets: bool | None = field(default=None, metadata={"name": "include_rts"})


@dataclass
class ListsSubscribersParams(Params):
    """Parameters for :meth:`ListsService.subscribers`."""

    list_id: int = 0
    slug: str = ""
    owner_screen_name: str = ""
    owner_id: int = 0
    count: int = 0
    cursor: int = 0
    include_entities: bool | None = None
    skip_status: bool | None = None


@dataclass
class ListsSubscribersShowParams(Params):
    """Parameters for :meth:`ListsService.subscribers_show`."""

    owner_screen_name: str = ""
    owner_id: int = 0
    list_id: int = 0
    slug: str = ""
    user_id: int = 0
    screen_name: str = ""
    include_entities: bool | None = None
    skip_status: bool | None = None


@dataclass
class ListsSubscriptionsParams(Params):
    """Parameters for :meth:`ListsService.subscriptions`."""

    user_id: int = 0
    screen_name: str = ""
    count: int = 0
    cursor: int = 0


@dataclass
class ListsCreateParams(Params):
    """Parameters for :meth:`ListsService.create`."""

    name: str = ""
    mode: str = ""
    description: str = ""


@dataclass
class ListsDestroyParams(Params):
    """Parameters for :meth:`ListsService.destroy`."""

    owner_screen_name: str = ""
    owner_id: int = 0
    list_id: int = 0
    slug: str = ""


@dataclass
class ListsMembersCreateParams(Params):
    """Parameters for :meth:`ListsService.members_create`."""

    list_id: int = 0
    slug: str = ""
    user_id: int = 0
    screen_name: str = ""
    owner_screen_name: str = ""
    owner_id: int = 0


@dataclass
class ListsMembersCreateAllParams(Params):
    """Parameters for :meth:`ListsService.members_create_all`.

    ``user_id`` and ``screen_name`` take comma separated values.
    """

    list_id: int = 0
    slug: str = ""
    user_id: str = ""
    screen_name: str = ""
    owner_screen_name: str = ""
    owner_id: int = 0


@dataclass
class ListsMembersDestroyParams(Params):
    """Parameters for :meth:`ListsService.members_destroy`."""

    list_id: int = 0
    slug: str = ""
    user_id: int = 0
    screen_name: str = ""
    owner_screen_name: str = ""
    owner_id: int = 0


@dataclass
class ListsMembersDestroyAllParams(Params):
    """Parameters for :meth:`ListsService.members_destroy_all`.

    ``user_id`` and ``screen_name`` take comma separated values.
    """

    list_id: int = 0
    slug: str = ""
    user_id: str = ""
    screen_name: str = ""
    owner_screen_name: str = ""
    owner_id: int = 0


@dataclass
class ListsSubscribersCreateParams(Params):
    """Parameters for :meth:`ListsService.subscribers_create`."""

    owner_screen_name: str = ""
    owner_id: int = 0
    list_id: int = 0
    slug: str = ""


@dataclass
class ListsSubscribersDestroyParams(Params):
    """Parameters for :meth:`ListsService.subscribers_destroy`."""

    list_id: int = 0
    slug: str = ""
    owner_screen_name: str = ""
    owner_id: int = 0


@dataclass
class ListsUpdateParams(Params):
    """Parameters for :meth:`ListsService.update`."""

    list_id: int = 0
    slug: str = ""
    name: str = ""
    mode: str = ""
    description: str = ""
    owner_screen_name: str = ""
    owner_id: int = 0


class ListsService:
    """Access to the ``lists/`` endpoints.

    The membership and subscription changes, and :meth:`update`, return the
    raw response without raising for error details in its body.
    """

    def __init__(self, requester: Requester) -> None:
        self._requester = requester.path("lists/")

    def list(self, params: ListsListParams | None = None) -> list[List]:
        """Return all lists the given user subscribes to, including their own."""
        payload, _ = self._requester.receive("GET", "list.json", query=params)
        return [List.from_dict(item) for item in payload or []]

    def members(self, params: ListsMembersParams | None = None) -> Members:
        """Return a cursored page of members of a list."""
        payload, _ = self._requester.receive("GET", "members.json", query=params)
        return Members.from_dict(payload)

    def members_show(self, params: ListsMembersShowParams | None = None) -> dict[str, Any]:
        """Return the user as decoded JSON if they are a member of the list."""
        payload, _ = self._requester.receive("GET", "members/show.json", query=params)
        return dict(payload or {})

    def memberships(self, params: ListsMembershipsParams | None = None) -> Membership:
        """Return the lists the given user has been added to."""
        payload, _ = self._requester.receive("GET", "memberships.json", query=params)
        return Membership.from_dict(payload)

    def ownerships(self, params: ListsOwnershipsParams | None = None) -> Ownership:
        """Return the lists owned by the given user."""
        payload, _ = self._requester.receive("GET", "ownerships.json", query=params)
        return Ownership.from_dict(payload)

    def show(self, params: ListsShowParams | None = None) -> List:
        """Return the specified list."""
        payload, _ = self._requester.receive("GET", "show.json", query=params)
        return List.from_dict(payload)

    def statuses(self, params: ListsStatusesParams | None = None) -> list[dict[str, Any]]:
        """Return tweets, as decoded JSON, by members of the list."""
        payload, _ = self._requester.receive("GET", "statuses.json", query=params)
        return [dict(item) for item in payload or []]

    def subscribers(self, params: ListsSubscribersParams | None = None) -> Subscribers:
        """Return a cursored page of subscribers of a list."""
        payload, _ = self._requester.receive("GET", "subscribers.json", query=params)
        return Subscribers.from_dict(payload)

    def subscribers_show(
        self, params: ListsSubscribersShowParams | None = None
    ) -> dict[str, Any]:
        """Return the user as decoded JSON if they subscribe to the list."""
        payload, _ = self._requester.receive("GET", "subscribers/show.json", query=params)
        return dict(payload or {})

    def subscriptions(self, params: ListsSubscriptionsParams | None = None) -> Subscribed:
        """Return the lists the given user is subscribed to."""
        payload, _ = self._requester.receive("GET", "subscriptions.json", query=params)
        return Subscribed.from_dict(payload)

    def create(self, name: str, params: ListsCreateParams | None = None) -> List:
        """Create a list with the given name for the authenticated user."""
        form = replace(params or ListsCreateParams(), name=name)
        payload, _ = self._requester.receive("POST", "create.json", form=form)
        return List.from_dict(payload)

    def destroy(self, params: ListsDestroyParams | None = None) -> List:
        """Delete the specified list and return it."""
        payload, _ = self._requester.receive("POST", "destroy.json", form=params)
        return List.from_dict(payload)

    def members_create(
        self, params: ListsMembersCreateParams | None = None
    ) -> requests.Response:
        """Add a member to a list."""
        return self._post_form("members/create.json", params)

    def members_create_all(
        self, params: ListsMembersCreateAllParams | None = None
    ) -> requests.Response:
        """Add several members to a list."""
        return self._post_form("members/create_all.json", params)

    def members_destroy(
        self, params: ListsMembersDestroyParams | None = None
    ) -> requests.Response:
        """Remove a member from a list."""
        return self._post_form("members/destroy.json", params)

    def members_destroy_all(
        self, params: ListsMembersDestroyAllParams | None = None
    ) -> requests.Response:
        """Remove several members from a list."""
        return self._post_form("members/destroy_all.json", params)

    def subscribers_create(self, params: ListsSubscribersCreateParams | None = None) -> List:
        """Subscribe the authenticated user to a list and return the list.

        A non-success response yields an empty list object.
        """
        response = self._post_form("subscribers/create.json", params)
        if 200 <= response.status_code < 300 and response.content:
            return List.from_dict(json.loads(response.content))
        return List()

    def subscribers_destroy(
        self, params: ListsSubscribersDestroyParams | None = None
    ) -> requests.Response:
        """Unsubscribe the authenticated user from a list."""
        return self._post_form("subscribers/destroy.json", params)

    def update(self, params: ListsUpdateParams | None = None) -> requests.Response:
        """Update the specified list."""
        return self._post_form("update.json", params)

    def _post_form(self, path: str, params: Params | None) -> requests.Response:
        return self._requester.request("POST", path, form=params)