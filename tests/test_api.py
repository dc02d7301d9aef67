from __future__ import annotations

import json
from dataclasses import dataclass, field
from urllib.parse import parse_qs, urlsplit

import pytest
import requests
import responses

from tweetkit.api import Params, Requester, encode_params
from tweetkit.errors import APIError, ErrorDetail

BASE = "https://api.example.com/1.1/"


@dataclass
class SampleParams(Params):
    user_id: int = 0
    screen_name: str = ""
    include_entities: bool | None = None
    reverse: bool = field(default=False, metadata={"omit_false": True})
    include_retweets: bool | None = field(default=None, metadata={"name": "include_rts"})
    text: str = field(default="", metadata={"keep_empty": True})
    ids: list[int] = field(default_factory=list)


class _Body:
    def to_dict(self):
        return {"event": {"type": "message_create"}}


@pytest.fixture
def rsps():
    with responses.RequestsMock() as mock:
        yield mock


@pytest.fixture
def requester():
    return Requester(base_url=BASE)


@pytest.mark.parametrize(
    ("params", "expected"),
    [
        (
            SampleParams(
                user_id=623265148, include_entities=False, include_retweets=True, ids=[20, 21]
            ),
            {
                "user_id": "623265148",
                "include_entities": "false",
                "include_rts": "true",
                "text": "",
                "ids": "20,21",
            },
        ),
        (SampleParams(), {"text": ""}),
        (SampleParams(reverse=True), {"reverse": "true", "text": ""}),
        (SampleParams(screen_name="example_user"), {"screen_name": "example_user", "text": ""}),
        (None, {}),
        ({"count": 10, "cursor": 0, "skip_status": True}, {"count": "10", "skip_status": "true"}),
    ],
    ids=["set-fields", "defaults", "omit-false-true", "screen-name", "none", "mapping"],
)
def test_encode_params(params, expected):
    assert encode_params(params) == expected


def test_encode_params_rejects_other_types():
    with pytest.raises(TypeError):
        encode_params(42)


def test_path_resolves_relative_to_base(requester):
    account = requester.path("account/")
    assert account.base_url == BASE + "account/"
    assert account.path("x/").base_url == BASE + "account/x/"


def test_path_shares_session():
    session = requests.Session()
    assert Requester(session, BASE).path("lists/").session is session


def test_receive_decodes_success_and_sends_query(rsps, requester):
    rsps.add(
        responses.GET,
        BASE + "account/verify_credentials.json",
        json={"name": "Dalton Hubble", "id": 623265148},
    )
    data, response = requester.path("account/").receive(
        "GET",
        "verify_credentials.json",
        query=SampleParams(include_entities=False, user_id=623265148),
    )
    sent = parse_qs(urlsplit(rsps.calls[0].request.url).query, keep_blank_values=True)
    assert data == {"name": "Dalton Hubble", "id": 623265148}
    assert response.status_code == 200
    assert sent == {"include_entities": ["false"], "user_id": ["623265148"], "text": [""]}


def test_receive_raises_api_error(rsps, requester):
    rsps.add(
        responses.DELETE,
        BASE + "direct_messages/events/destroy.json",
        status=404,
        json={"errors": [{"code": 34, "message": "Sorry, that page does not exist"}]},
    )
    with pytest.raises(APIError) as info:
        requester.receive(
            "DELETE", "direct_messages/events/destroy.json", query={"id": "1063573894173323269"}
        )
    assert info.value == APIError([ErrorDetail(code=34, message="Sorry, that page does not exist")])


@pytest.mark.parametrize(
    ("method", "status", "body"),
    [(responses.DELETE, 204, None), (responses.GET, 500, {})],
    ids=["no-content", "failure-without-details"],
)
def test_receive_without_payload(rsps, requester, method, status, body):
    rsps.add(method, BASE + "thing.json", status=status, json=body)
    data, response = requester.receive(method, "thing.json")
    assert data is None
    assert response.status_code == status


def test_receive_posts_form(rsps, requester):
    form = {"name": "Goonies", "mode": "public", "description": "For life"}
    rsps.add(
        responses.POST,
        BASE + "lists/create.json",
        json={"slug": "goonies", "name": "Goonies", "description": "For life"},
    )
    data, _ = requester.path("lists/").receive("POST", "create.json", form=form)
    assert data["slug"] == "goonies"
    assert parse_qs(rsps.calls[0].request.body) == {key: [value] for key, value in form.items()}


def test_receive_posts_json_body(rsps, requester):
    rsps.add(responses.POST, BASE + "events/new.json", json={"event": {}})
    data, _ = requester.receive("POST", "events/new.json", json_body=_Body())
    request = rsps.calls[0].request
    assert data == {"event": {}}
    assert json.loads(request.body) == {"event": {"type": "message_create"}}
    assert request.headers["Content-Type"] == "application/json"


def test_receive_invalid_json_raises_value_error(rsps, requester):
    rsps.add(responses.GET, BASE + "x.json", body="not json", content_type="text/plain")
    with pytest.raises(ValueError):
        requester.receive("GET", "x.json")