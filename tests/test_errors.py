import pytest

from tweetkit.errors import APIError, ErrorDetail, relevant_error

ERR_API = APIError([ErrorDetail(message="Status is a duplicate", code=187)])
ERR_HTTP = ConnectionError("unknown host")


def test_empty_api_error_message():
    assert str(APIError()) == ""


def test_api_error_message():
    assert str(ERR_API) == "twitter: 187 Status is a duplicate"


def test_api_error_is_raisable():
    with pytest.raises(APIError) as info:
        raise ERR_API
    assert info.value == ERR_API


def test_is_empty():
    assert APIError().is_empty() is True
    assert ERR_API.is_empty() is False


@pytest.mark.parametrize(
    "http_error, api_error, expected",
    [
        (None, APIError(), None),
        (None, ERR_API, ERR_API),
        (ERR_HTTP, APIError(), ERR_HTTP),
        (ERR_HTTP, ERR_API, ERR_HTTP),
    ],
)
def test_relevant_error(http_error, api_error, expected):
    assert relevant_error(http_error, api_error) == expected


def test_from_dict():
    error = APIError.from_dict(
        {"errors": [{"code": 34, "message": "Sorry, that page does not exist"}]}
    )
    assert error == APIError(
        [ErrorDetail(message="Sorry, that page does not exist", code=34)]
    )


def test_from_dict_without_errors_is_empty():
    assert APIError.from_dict({}).is_empty()
    assert APIError.from_dict(None).is_empty()


def test_equal_errors_hash_alike():
    copy = APIError([ErrorDetail(message="Status is a duplicate", code=187)])
    assert hash(copy) == hash(ERR_API)