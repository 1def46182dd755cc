"""adapters.oci_adapter

Concrete adapter that bridges :class:`oci_chat_bridge.core.abc.AbstractChatModel`
with the **OCI Generative AI** chat inference API.

This implementation targets the ``oci`` Python SDK (``generative_ai_inference``
package). The SDK is blocking, so both client construction and the chat call
are pushed onto a worker thread with :func:`asyncio.to_thread`.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import oci
from oci.generative_ai_inference import GenerativeAiInferenceClient
from oci.generative_ai_inference import models as oci_models

from oci_chat_bridge.core.abc import AbstractChatModel
from oci_chat_bridge.core.credentials import AuthType, OCICredentials
from oci_chat_bridge.core.exceptions import (
    AuthenticationError,
    BadRequestError,
    EmptyResponseError,
    MalformedResponseError,
    ModelNotFoundError,
    OCIBridgeError,
    RateLimitExceededError,
    TransportError,
)
from oci_chat_bridge.core.models import DEFAULT_MODEL_ID, display_name
from oci_chat_bridge.core.schema import ChatEnvelope
from oci_chat_bridge.core.types import ChatResult, GenerationParams, Role

if TYPE_CHECKING:
    from oci_chat_bridge.core.types import Message

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Role mapping
# ---------------------------------------------------------------------------

ROLE_TAGS: Mapping[str, str] = {
    Role.system: 'SYSTEM',
    Role.user: 'USER',
    Role.assistant: 'ASSISTANT',
}
DEFAULT_ROLE_TAG = 'USER'

_MESSAGE_TYPES: Mapping[str, type[oci_models.Message]] = {
    'SYSTEM': oci_models.SystemMessage,
    'USER': oci_models.UserMessage,
    'ASSISTANT': oci_models.AssistantMessage,
}

# ServiceError.status → error kind; other 4xx are BadRequestError, the rest TransportError
_STATUS_ERRORS: Mapping[int, type[OCIBridgeError]] = {
    401: AuthenticationError,
    403: AuthenticationError,
    404: ModelNotFoundError,
    429: RateLimitExceededError,
}


def role_tag(role: Role | str) -> str:
    """Return the OCI role tag for *role*; unknown roles are sent as USER."""
    tag = ROLE_TAGS.get(str(role).lower())
    if tag is None:
        logger.warning('Unrecognised message role %r, sending as %s', role, DEFAULT_ROLE_TAG)
        return DEFAULT_ROLE_TAG
    return tag


def to_oci_messages(messages: list[Message]) -> list[oci_models.Message]:
    """Translate domain messages, one text block each, preserving order."""
    return [
        _MESSAGE_TYPES[role_tag(message.role)](content=[oci_models.TextContent(text=message.content)])
        for message in messages
    ]


def _classify(exc: oci.exceptions.ServiceError) -> OCIBridgeError:
    status = exc.status if isinstance(exc.status, int) else 0
    if status in _STATUS_ERRORS:
        return _STATUS_ERRORS[status].wrap(exc)
    if 400 <= status < 500:  # noqa: PLR2004
        return BadRequestError.wrap(exc)
    return TransportError.wrap(exc)


# ---------------------------------------------------------------------------
# Adapter implementation
# ---------------------------------------------------------------------------


class OCIChatAdapter(AbstractChatModel):
    """Adapter for the OCI Generative AI ``chat`` operation (GENERIC api format)."""

    def __init__(  # noqa: PLR0913
        self,
        credentials: OCICredentials,
        model_id: str | None = None,
        params: GenerationParams | None = None,
        *,
        auth_type: AuthType = AuthType.INSTANCE_PRINCIPAL,
        config_file: str | None = None,
        config_profile: str = 'DEFAULT',
        timeout: float | None = None,
        client: GenerativeAiInferenceClient | None = None,
    ) -> None:
        super().__init__(model_id or DEFAULT_MODEL_ID, params, timeout=timeout)
        self._credentials = credentials
        self._auth_type = AuthType(auth_type)
        self._config_file = config_file
        self._config_profile = config_profile
        # Pre-built clients (tests, hosts sharing a signer) skip _connect()
        self._client = client

    @property
    def llm_type(self) -> str:
        return 'oci-chat'

    @property
    def credentials(self) -> OCICredentials:
        return self._credentials

    def identify(self) -> dict[str, Any]:
        return {
            'compartment_id': self._credentials.compartment_id.get_secret_value(),
            'model_id': self._model,
            'temperature': self._params.temperature,
            'max_tokens': self._params.max_tokens,
            'top_p': self._params.top_p,
            'top_k': self._params.top_k,
        }

    # ------------------------------------------------------------------
    # Client construction
    # ------------------------------------------------------------------

    async def _connect(self) -> None:
        if self._client is not None:
            return
        try:
            self._client = await asyncio.to_thread(self._build_client)
        except Exception as exc:  # signer / config failures have no common base
            raise AuthenticationError(f'Could not build OCI Generative AI client: {exc}') from exc
        logger.debug('OCI client ready: endpoint=%s auth=%s', self._credentials.endpoint, self._auth_type)

    def _build_client(self) -> GenerativeAiInferenceClient:
        client_kwargs: dict[str, Any] = {
            'service_endpoint': self._credentials.endpoint,
            'retry_strategy': oci.retry.NoneRetryStrategy(),
        }
        if self._auth_type is AuthType.API_KEY:
            file_kwargs = {'file_location': self._config_file} if self._config_file else {}
            config = oci.config.from_file(profile_name=self._config_profile, **file_kwargs)
            config['region'] = self._credentials.region.value
            oci.config.validate_config(config)
            return GenerativeAiInferenceClient(config, **client_kwargs)

        signer = oci.auth.signers.InstancePrincipalsSecurityTokenSigner()
        return GenerativeAiInferenceClient({}, signer=signer, **client_kwargs)

    # ------------------------------------------------------------------
    # Request / response mapping
    # ------------------------------------------------------------------

    def build_chat_details(self, messages: list[Message], params: GenerationParams) -> oci_models.ChatDetails:
        """Assemble the single ``ChatDetails`` body sent for *messages*."""
        chat_request = oci_models.GenericChatRequest(
            messages=to_oci_messages(messages),
            max_tokens=params.max_tokens,
            temperature=params.temperature,
            frequency_penalty=params.frequency_penalty,
            presence_penalty=params.presence_penalty,
            top_k=params.top_k,
            top_p=params.top_p,
            is_stream=False,
        )
        return oci_models.ChatDetails(
            compartment_id=self._credentials.compartment_id.get_secret_value(),
            serving_mode=oci_models.OnDemandServingMode(model_id=self._model),
            chat_request=chat_request,
        )

    @staticmethod
    def parse_response(response: Any) -> ChatResult:
        """Map an SDK ``Response`` (or a bare envelope mapping) to `ChatResult`."""
        if response is None:
            raise EmptyResponseError
        payload = getattr(response, 'data', response)
        if payload is None:
            raise EmptyResponseError
        if hasattr(payload, 'swagger_types'):
            payload = oci.util.to_dict(payload)
        if not isinstance(payload, Mapping):
            raise MalformedResponseError

        envelope = ChatEnvelope.parse(payload)
        if not envelope.text:
            raise MalformedResponseError
        return ChatResult(text=envelope.text, model_version=envelope.version or 'unknown')

    # ------------------------------------------------------------------
    # Async path
    # ------------------------------------------------------------------

    async def _invoke(self, messages: list[Message], params: GenerationParams) -> ChatResult:
        details = self.build_chat_details(messages, params)
        logger.debug('OCI chat request: model=%s messages=%d max_tokens=%d', self._model, len(messages), params.max_tokens)
        try:
            response = await asyncio.to_thread(self._client.chat, details)
        except oci.exceptions.ServiceError as exc:
            logger.error('OCI chat failed: status=%s code=%s', exc.status, exc.code)
            raise _classify(exc) from exc
        except Exception as exc:  # generic fallback
            logger.error('OCI chat failed: %s', exc)
            raise TransportError.wrap(exc) from exc

        return self.parse_response(response)

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return f'<{self.__class__.__name__} model={display_name(self._model)!r} region={self._credentials.region}>'
