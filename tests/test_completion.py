import pytest
import requests

from conftest import FakeResponse, FakeSession, completion_payload
from errors import AuthenticationError, ParseError, RateLimitError, TransportError, UpstreamError
from matching.completion import CompletionClient


def make_client(session, **kw):
    return CompletionClient(api_key="sk-test", model="gpt-test", session=session, backoff=0, **kw)


def test_returns_generated_text():
    session = FakeSession(FakeResponse(200, completion_payload("hello")))
    client = make_client(session)

    assert client.complete("sys", [{"role": "user", "content": "hi"}]) == "hello"
    url, kwargs = session.calls[0]
    assert url == "https://api.openai.com/v1/chat/completions"
    assert kwargs["timeout"] == 30
    assert kwargs["headers"]["Authorization"] == "Bearer sk-test"
    assert kwargs["json"]["messages"][0] == {"role": "system", "content": "sys"}
    assert "response_format" not in kwargs["json"]


def test_json_mode_requests_json_object():
    session = FakeSession(FakeResponse(200, completion_payload("{}")))
    make_client(session).complete("sys", [{"role": "user", "content": "hi"}], json_mode=True)
    assert session.calls[0][1]["json"]["response_format"] == {"type": "json_object"}


def test_missing_api_key_fails_fast():
    with pytest.raises(ValueError):
        CompletionClient(api_key=None, model="gpt-test")


def test_rate_limit_uses_retry_budget_then_raises():
    session = FakeSession(FakeResponse(429, {"error": {"message": "slow down"}}))
    client = make_client(session)

    with pytest.raises(RateLimitError) as exc:
        client.complete("sys", [{"role": "user", "content": "hi"}])
    assert exc.value.status_code == 429
    assert exc.value.message == "slow down"
    assert len(session.calls) == 3  # one call + two retries


def test_auth_error_is_not_retried():
    session = FakeSession(FakeResponse(401, {"error": {"message": "bad key"}}))
    with pytest.raises(AuthenticationError):
        make_client(session).complete("sys", [{"role": "user", "content": "hi"}])
    assert len(session.calls) == 1


def test_other_status_is_upstream_error_with_code():
    session = FakeSession(FakeResponse(400, {"error": {"message": "context too long"}}))
    with pytest.raises(UpstreamError) as exc:
        make_client(session).complete("sys", [{"role": "user", "content": "hi"}])
    assert exc.value.status_code == 400
    assert not isinstance(exc.value, RateLimitError)


def test_server_error_then_success_recovers():
    session = FakeSession(
        FakeResponse(503, {"error": {"message": "overloaded"}}),
        FakeResponse(200, completion_payload("ok")),
    )
    assert make_client(session).complete("sys", [{"role": "user", "content": "hi"}]) == "ok"
    assert len(session.calls) == 2


@pytest.mark.parametrize("header, expected", [
    ("3", [3.0]),
    ("120", [10.0]),  # capped
    ("Wed, 21 Oct 2026 07:28:00 GMT", []),  # date form falls back to backoff (0 here)
])
def test_rate_limit_honours_retry_after(monkeypatch, header, expected):
    sleeps = []
    monkeypatch.setattr("matching.completion.time.sleep", sleeps.append)
    session = FakeSession(
        FakeResponse(429, {"error": {"message": "slow down"}}, headers={"Retry-After": header}),
        FakeResponse(200, completion_payload("ok")),
    )
    assert make_client(session).complete("sys", [{"role": "user", "content": "hi"}]) == "ok"
    assert sleeps == expected


def test_timeout_becomes_transport_error():
    session = FakeSession(requests.exceptions.Timeout("read timed out"))
    with pytest.raises(TransportError):
        make_client(session).complete("sys", [{"role": "user", "content": "hi"}])
    assert len(session.calls) == 3


def test_zero_retries_makes_a_single_call():
    session = FakeSession(requests.exceptions.ConnectionError("refused"))
    with pytest.raises(TransportError):
        make_client(session, max_retries=0).complete("sys", [{"role": "user", "content": "hi"}])
    assert len(session.calls) == 1


def test_non_json_body_is_parse_error():
    session = FakeSession(FakeResponse(200, None, text="<html>oops</html>"))
    with pytest.raises(ParseError):
        make_client(session).complete("sys", [{"role": "user", "content": "hi"}])


def test_body_without_choices_is_parse_error():
    session = FakeSession(FakeResponse(200, {"id": "x"}))
    with pytest.raises(ParseError):
        make_client(session).complete("sys", [{"role": "user", "content": "hi"}])
