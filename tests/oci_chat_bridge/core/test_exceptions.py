from __future__ import annotations

from http import HTTPStatus

import pytest

from oci_chat_bridge.core.exceptions import (
    HTTP_STATUS_MAP,
    AuthenticationError,
    BadRequestError,
    ConfigurationError,
    EmptyResponseError,
    GenerationTimeoutError,
    MalformedResponseError,
    OCIBridgeError,
    RateLimitExceededError,
    ResponseError,
    TransportError,
)


def test_fixed_messages() -> None:
    assert str(EmptyResponseError()) == 'No response received from OCI Generative AI'
    assert str(MalformedResponseError()) == 'No valid response in OCI Generative AI result'


def test_wrap_prefers_message_attribute() -> None:
    class _SdkError(Exception):
        message = 'quota exhausted'

    err = RateLimitExceededError.wrap(_SdkError('{"status": 429, ...}'))

    assert str(err) == 'OCI Generative AI API error: quota exhausted'
    assert isinstance(err, TransportError)


def test_wrap_without_text_uses_type_name() -> None:
    assert str(TransportError.wrap(OSError())) == 'OCI Generative AI API error: OSError'


@pytest.mark.parametrize(
    ('exc_type', 'retryable'),
    [
        (ConfigurationError, False),
        (AuthenticationError, False),
        (BadRequestError, False),
        (EmptyResponseError, False),
        (MalformedResponseError, False),
        (TransportError, True),
        (RateLimitExceededError, True),
        (GenerationTimeoutError, True),
    ],
)
def test_retryable_flags(exc_type: type[OCIBridgeError], retryable: bool) -> None:  # noqa: FBT001
    assert exc_type.is_retryable is retryable


def test_hierarchy_and_status() -> None:
    assert issubclass(EmptyResponseError, ResponseError)
    assert issubclass(MalformedResponseError, ResponseError)
    assert HTTP_STATUS_MAP[RateLimitExceededError] is HTTPStatus.TOO_MANY_REQUESTS
    assert HTTP_STATUS_MAP[AuthenticationError] is HTTPStatus.UNAUTHORIZED


def test_to_json() -> None:
    assert ConfigurationError('missing region').to_json() == {
        'error': {'type': 'ConfigurationError', 'message': 'missing region'},
    }
