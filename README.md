# tweetkit

A small client for the Twitter REST API v1.1, built on `requests`.

It covers:

- **Accounts**: verify the credentials of the authorised user
  (`tweetkit.accounts.AccountService.verify_credentials`).
- **Configuration**: fetch the API's current configuration
  (`tweetkit.config.ConfigService.get`, returning a `Config`).
- **Direct messages**: create, show, list and delete message events
  (`DirectMessageService.events_new`, `events_show`, `events_list`,
  `events_destroy`), plus the older endpoints `show`, `get`, `sent`, `new`
  and `destroy`, in `tweetkit.direct_messages`.
- **Favorites**: list, like and unlike tweets (`tweetkit.favorites.FavoriteService`).
- **Lists**: read, create, update and delete lists, their members and
  subscribers (`tweetkit.lists.ListsService`).

Supporting modules:

- `tweetkit.api`: `Requester`, which sends requests through a session relative
  to a base URL (`https://api.twitter.com/1.1/` by default), and `Params`, the
  base of every parameter dataclass.
- `tweetkit.errors`: `APIError`, `ErrorDetail` and `relevant_error`.
- `tweetkit.entities`: hashtag, URL, mention and media entities.
- `tweetkit.backoffs`: exponential back-off policies.

## Installation

```
pip install tweetkit
```

## Authentication and setup

Requests are not signed by this package. Give a `Requester` a
`requests.Session` that already authorises every request, for example one
carrying an application bearer token or fitted with an OAuth1 signer, and
build each service from that requester:

```python
import requests

from tweetkit.api import Requester
from tweetkit.config import ConfigService
from tweetkit.lists import ListsService, ListsShowParams

session = requests.Session()
session.headers["Authorization"] = "Bearer token"

requester = Requester(session)
config = ConfigService(requester).get()
print(config.short_url_length_https)

team = ListsService(requester).show(ListsShowParams(slug="team", owner_screen_name="twitter"))
print(team.full_name, team.member_count)
```

Use user auth for endpoints that act for a user (direct messages, likes,
account verification, list changes) and application auth where no user
context is needed.

## Parameters

Required values are positional arguments; optional ones go in a params
dataclass, or `None`. Fields left at their empty value (`None`, `""`, `0`,
empty sequences) are omitted from the request; booleans set to `True` or
`False` are sent as `true` / `false`. `Params.to_query()` shows what will be
sent:

```python
from tweetkit.lists import ListsCreateParams

ListsCreateParams(mode="public", description="For life").to_query()
# {'mode': 'public', 'description': 'For life'}
# lists_service.create("Goonies", params) fills in the name
```

## Return values

Structured results come back as dataclasses (`Config`, `DirectMessageEvent`,
`DirectMessageEvents`, `DirectMessage`, `List`, `Members`, `Membership`,
`Ownership`, `Subscribers`, `Subscribed`). Tweets and users are returned as
plain dictionaries of decoded JSON, for example from
`AccountService.verify_credentials`, `FavoriteService.list` and
`ListsService.statuses`.

Sending a direct message:

```python
from tweetkit.direct_messages import (
    DirectMessageData,
    DirectMessageEvent,
    DirectMessageEventMessage,
    DirectMessageEventsNewParams,
    DirectMessageService,
    DirectMessageTarget,
)

dms = DirectMessageService(requester)
event = dms.events_new(
    DirectMessageEventsNewParams(
        event=DirectMessageEvent(
            type="message_create",
            message=DirectMessageEventMessage(
                target=DirectMessageTarget(recipient_id="12345"),
                data=DirectMessageData(text="example"),
            ),
        )
    )
)
```

## Errors

When a non-success response carries an error body, the call raises
`tweetkit.errors.APIError`. Its string form names the first error code and
message, e.g. `twitter: 187 Status is a duplicate`. A body that is not JSON
raises `ValueError`; transport failures from `requests` are raised unchanged.

```python
from tweetkit.errors import APIError

try:
    dms.events_destroy("1063573894173323269")
except APIError as err:
    print(err)
```

The list membership and subscription changes (`members_create`,
`members_create_all`, `members_destroy`, `members_destroy_all`,
`subscribers_destroy`) and `ListsService.update` return the raw
`requests.Response` without raising; check its status yourself.
`subscribers_create` returns an empty `List` when the request fails.

## Entities and back-off helpers

`tweetkit.entities` models the entity objects found in tweets and users.
`Indices` gives the start (inclusive) and end (exclusive) offsets of an
entity within its text:

```python
from tweetkit.entities import Indices

span = Indices(25, 47)
span.start(), span.end()   # (25, 47)
```

`tweetkit.backoffs` offers exponential back-off policies for reconnecting:
`new_exponential_backoff()` starts at 5 seconds and caps at 320,
`new_aggressive_exponential_backoff()` starts at one minute and caps at 16;
both double each step, with each wait randomised by ±50%.
`next_backoff()` returns the next wait as a `timedelta`, or `None` once 15
minutes have passed since the last `reset()`.

## What it does not do

- There is no single client object gathering all services; build each
  service from a `Requester` as shown above.
- Follower, friend and friendship endpoints (follower and friend ids,
  follow/unfollow, relationship lookups, pending follow requests) are not
  provided.
- Streaming endpoints are not provided; the back-off helpers are offered on
  their own.
- Requests are not signed; authorisation comes from the session you supply.

## Running the tests

```
pip install -e ".[test]"
pytest
```