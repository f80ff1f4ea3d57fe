from __future__ import annotations

import httpx

from aretry import Retry
from aretry.http import http_operation
from aretry.stop import StopAfterAttempts
from aretry.wait import WaitFixed

# Use httpbin.org for real HTTP testing
HTTPBIN_URL = "https://httpbin.org"


def make_retry() -> Retry:
    return Retry.basic().with_stop(StopAfterAttempts(2)).with_wait(WaitFixed(0.5))


##################################
#     Tests for http_operation   #
##################################


def test_http_operation_get_success() -> None:
    with httpx.Client() as client:
        result = make_retry().call(http_operation(client.get, f"{HTTPBIN_URL}/get"))

    assert result.is_ok()
    assert result.unwrap().status_code == 200


def test_http_operation_post_with_json() -> None:
    with httpx.Client() as client:
        result = make_retry().call(
            http_operation(client.post, f"{HTTPBIN_URL}/post", json={"key": "value"})
        )

    response = result.unwrap()
    assert response.status_code == 200
    assert response.json()["json"] == {"key": "value"}


def test_http_operation_non_retryable_status() -> None:
    with httpx.Client() as client:
        result, info = make_retry().call_with_info(
            http_operation(client.get, f"{HTTPBIN_URL}/status/404")
        )

    assert result.unwrap().status_code == 404
    assert info.attempts == 0


def test_http_operation_retryable_status_gives_up() -> None:
    with httpx.Client() as client:
        result, info = make_retry().call_with_info(
            http_operation(client.get, f"{HTTPBIN_URL}/status/503")
        )

    assert result.is_err()
    assert result.error.status_code == 503
    assert info.attempts == 2
