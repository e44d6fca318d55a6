"""
Tests for the requests based API client, run against an in‑process app.
"""

import requests

from health_data_api.client import HealthDataClient

from .conftest import JANE, JOHN


def make_client(api_session) -> HealthDataClient:
    return HealthDataClient(base_url="http://testserver/", session=api_session)


def test_base_url_trailing_slash_removed(api_session):
    assert make_client(api_session).base_url == "http://testserver"


def test_list_users(api_session):
    users, error = make_client(api_session).list_users()
    assert error is None
    assert users == [JOHN]
    assert api_session.calls == [("GET", "http://testserver/users", None)]


def test_get_user(api_session):
    user, error = make_client(api_session).get_user(1)
    assert error is None
    assert user == JOHN


def test_get_missing_user(api_session):
    user, error = make_client(api_session).get_user(999)
    assert user is None
    assert error == {"status_code": 404, "message": "User not found"}


def test_create_then_list(api_session):
    client = make_client(api_session)
    created, error = client.create_user(JANE)
    assert error is None
    assert created == JANE
    users, _ = client.list_users()
    assert users == [JOHN, JANE]


def test_update_user(api_session):
    updated, error = make_client(api_session).update_user(1, {"age": 31})
    assert error is None
    assert updated == {**JOHN, "age": 31}


def test_update_name_rejected(api_session):
    updated, error = make_client(api_session).update_user(1, {"name": "Someone Else"})
    assert updated is None
    assert error == {"status_code": 400, "message": "User name cannot be changed"}


class FailingSession:
    def request(self, **kwargs):
        raise requests.ConnectionError("connection refused")


def test_connection_error_reported():
    client = HealthDataClient(session=FailingSession())
    users, error = client.list_users()
    assert users == []
    assert error == {"status_code": None, "message": "connection refused"}


def test_validation_error_message_is_raw_body(api_session):
    updated, error = make_client(api_session).update_user(1, [1, 2])
    assert updated is None
    assert error["status_code"] == 422
    assert "detail" in error["message"]


class PlainTextErrorSession:
    def request(self, **kwargs):
        response = requests.Response()
        response.status_code = 502
        response._content = b"Bad Gateway"
        response.url = kwargs["url"]
        response.reason = "Bad Gateway"
        return response


def test_non_json_error_uses_body_text():
    user, error = HealthDataClient(session=PlainTextErrorSession()).get_user(1)
    assert user is None
    assert error == {"status_code": 502, "message": "Bad Gateway"}
