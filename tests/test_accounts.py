import pytest
import requests
import responses
from responses import matchers

from tweetkit.accounts import AccountService, AccountVerifyParams
from tweetkit.api import Requester
from tweetkit.errors import APIError, ErrorDetail

URL = "https://api.twitter.com/1.1/account/verify_credentials.json"


@pytest.fixture
def accounts():
    with responses.RequestsMock() as rsps:
        yield rsps, AccountService(Requester(requests.Session()))


@pytest.mark.parametrize(
    ("params", "query", "user"),
    [
        (
            AccountVerifyParams(include_entities=False, include_email=True),
            {"include_entities": "false", "include_email": "true"},
            {"name": "Dalton Hubble", "id": 623265148},
        ),
        (None, {}, {"id": 1}),
    ],
    ids=["with-params", "without-params"],
)
def test_verify_credentials(accounts, params, query, user):
    rsps, service = accounts
    rsps.add(responses.GET, URL, json=user, match=[matchers.query_param_matcher(query)])
    assert service.verify_credentials(params) == user


def test_verify_credentials_error(accounts):
    rsps, service = accounts
    rsps.add(
        responses.GET,
        URL,
        status=401,
        json={"errors": [{"code": 32, "message": "Could not authenticate you."}]},
    )
    with pytest.raises(APIError) as info:
        service.verify_credentials()
    assert info.value.errors == [ErrorDetail(message="Could not authenticate you.", code=32)]