import pytest
import responses
from responses import matchers

from tweetkit.api import Requester
from tweetkit.errors import APIError, ErrorDetail
from tweetkit.favorites import (
    FavoriteCreateParams,
    FavoriteDestroyParams,
    FavoriteListParams,
    FavoriteService,
)

BASE = "https://api.twitter.com/1.1/favorites/"


@pytest.fixture
def favorites():
    with responses.RequestsMock() as rsps:
        yield rsps, FavoriteService(Requester())


def test_list(favorites):
    rsps, service = favorites
    liked = [{"text": "Gophercon talks!"}, {"text": "Why gophers are so adorable"}]
    rsps.add(
        responses.GET,
        BASE + "list.json",
        json=liked,
        match=[
            matchers.query_param_matcher(
                {"user_id": "113419064", "since_id": "101492475", "include_entities": "false"}
            )
        ],
    )
    params = FavoriteListParams(user_id=113419064, since_id=101492475, include_entities=False)
    assert service.list(params) == liked


@pytest.mark.parametrize(
    ("action", "params", "text"),
    [
        ("create", FavoriteCreateParams(id=12345), "very informative tweet"),
        ("destroy", FavoriteDestroyParams(id=12345), "very unhappy tweet"),
    ],
)
def test_like_actions(favorites, action, params, text):
    rsps, service = favorites
    tweet = {"id": 581980947630845953, "text": text}
    rsps.add(
        responses.POST,
        f"{BASE}{action}.json",
        json=tweet,
        match=[matchers.query_param_matcher({"id": "12345"})],
    )
    assert getattr(service, action)(params) == tweet


def test_list_api_error(favorites):
    rsps, service = favorites
    rsps.add(
        responses.GET,
        BASE + "list.json",
        status=404,
        json={"errors": [{"code": 34, "message": "Sorry, that page does not exist"}]},
    )
    with pytest.raises(APIError) as info:
        service.list()
    assert info.value == APIError([ErrorDetail(message="Sorry, that page does not exist", code=34)])


def test_list_params_omit_unset():
    assert FavoriteListParams(screen_name="example_user", tweet_mode="extended").to_query() == {
        "screen_name": "example_user",
        "tweet_mode": "extended",
    }