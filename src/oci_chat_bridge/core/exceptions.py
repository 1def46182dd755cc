"""core.exceptions

Centralised exception hierarchy for *oci_chat_bridge*.

Each error carries an `http_status` attribute so that hosts (workflow engines,
FastAPI exception handlers, etc.) can translate exceptions to appropriate HTTP
responses, and an `is_retryable` flag so that callers can tell transient
transport failures from permanent configuration problems. The library itself
never retries.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Self

#: Prefix attached to every error raised while talking to the vendor API.
VENDOR_ERROR_PREFIX = 'OCI Generative AI API error: '


# ---------------------------------------------------------------------------
# Base class with HTTP status information
# ---------------------------------------------------------------------------


class OCIBridgeError(Exception):
    """Base class for all *oci_chat_bridge* domain errors."""

    #: Default HTTP status if not overridden by subclass.
    http_status: ClassVar[HTTPStatus] = HTTPStatus.INTERNAL_SERVER_ERROR
    is_retryable: ClassVar[bool] = False

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.__class__.__name__)

    @classmethod
    def wrap(cls, cause: BaseException) -> Self:
        """Build an error whose message carries the vendor prefix and *cause*'s text."""
        return cls(f'{VENDOR_ERROR_PREFIX}{_describe(cause)}')

    def to_json(self) -> dict[str, dict[str, str]]:
        """Unified error body."""
        return {'error': {'type': self.__class__.__name__, 'message': str(self)}}


# ---------------------------------------------------------------------------
# Permanent errors
# ---------------------------------------------------------------------------


class ConfigurationError(OCIBridgeError):
    """Raised when credentials or generation options are missing or invalid."""

    http_status: ClassVar[HTTPStatus] = HTTPStatus.BAD_REQUEST  # 400


class AuthenticationError(OCIBridgeError):
    """Raised when the OCI signer / client cannot be built or is rejected."""

    http_status: ClassVar[HTTPStatus] = HTTPStatus.UNAUTHORIZED  # 401


class ModelNotFoundError(OCIBridgeError):
    """Raised when the model OCID is unknown in the selected region."""

    http_status: ClassVar[HTTPStatus] = HTTPStatus.BAD_REQUEST  # 400


class BadRequestError(OCIBridgeError):
    """OCI rejected the request itself (400, 409, 412 ...); resending it will not help."""

    http_status: ClassVar[HTTPStatus] = HTTPStatus.BAD_REQUEST  # 400


class ResponseError(OCIBridgeError):
    """The vendor answered, but not with anything usable."""

    http_status: ClassVar[HTTPStatus] = HTTPStatus.BAD_GATEWAY  # 502


class EmptyResponseError(ResponseError):
    """The chat call returned no response object at all."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or 'No response received from OCI Generative AI')


class MalformedResponseError(ResponseError):
    """The response lacks the nested chat result text."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or 'No valid response in OCI Generative AI result')


# ---------------------------------------------------------------------------
# Transient errors
# ---------------------------------------------------------------------------


class TransportError(OCIBridgeError):
    """Generic upstream failure while calling the chat endpoint (e.g. 5xx, DNS)."""

    http_status: ClassVar[HTTPStatus] = HTTPStatus.BAD_GATEWAY  # 502
    is_retryable: ClassVar[bool] = True


class RateLimitExceededError(TransportError):
    """Raised when OCI answers 429 Too Many Requests."""

    http_status: ClassVar[HTTPStatus] = HTTPStatus.TOO_MANY_REQUESTS  # 429


class GenerationTimeoutError(OCIBridgeError):
    """Raised when the caller-supplied deadline expires before OCI answers."""

    http_status: ClassVar[HTTPStatus] = HTTPStatus.GATEWAY_TIMEOUT  # 504
    is_retryable: ClassVar[bool] = True


def _describe(cause: BaseException) -> str:
    # oci.exceptions.ServiceError keeps the server text in `.message`
    message = getattr(cause, 'message', None)
    if isinstance(message, str) and message:
        return message
    return str(cause) or cause.__class__.__name__


HTTP_STATUS_MAP: Mapping[type[OCIBridgeError], HTTPStatus] = {
    ConfigurationError: ConfigurationError.http_status,
    AuthenticationError: AuthenticationError.http_status,
    ModelNotFoundError: ModelNotFoundError.http_status,
    BadRequestError: BadRequestError.http_status,
    EmptyResponseError: EmptyResponseError.http_status,
    MalformedResponseError: MalformedResponseError.http_status,
    TransportError: TransportError.http_status,
    RateLimitExceededError: RateLimitExceededError.http_status,
    GenerationTimeoutError: GenerationTimeoutError.http_status,
}
