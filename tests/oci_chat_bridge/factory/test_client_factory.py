from __future__ import annotations

import pytest
from helpers import COMPARTMENT, FakeClient

from oci_chat_bridge.adapters.oci_adapter import OCIChatAdapter
from oci_chat_bridge.config.settings import Settings
from oci_chat_bridge.core.credentials import AuthType, Region
from oci_chat_bridge.core.exceptions import ConfigurationError
from oci_chat_bridge.core.models import COHERE_COMMAND_R, DEFAULT_MODEL_ID
from oci_chat_bridge.core.types import Message, Role
from oci_chat_bridge.factory.client_factory import ChatModelFactory


@pytest.mark.asyncio
async def test_initialize_client_and_generate() -> None:
    client = FakeClient()
    adapter = ChatModelFactory.initialize_client(
        {'compartmentId': COMPARTMENT, 'region': 'us-chicago-1'},
        COHERE_COMMAND_R,
        {'maxTokens': 512, 'temperature': 0.3, 'topK': None},
        client=client,  # forwarded to the adapter
    )
    assert isinstance(adapter, OCIChatAdapter)
    assert adapter.credentials.region is Region.US_CHICAGO_1

    result = await adapter.generate([Message(role=Role.user, content='ping')])

    assert result.text == 'hello'
    request = client.calls[0].chat_request
    assert (request.max_tokens, request.temperature, request.top_k) == (512, 0.3, 0)
    assert client.calls[0].serving_mode.model_id == COHERE_COMMAND_R


def test_empty_model_selects_default() -> None:
    adapter = ChatModelFactory.initialize_client({'compartmentId': COMPARTMENT}, '')
    assert adapter.model == DEFAULT_MODEL_ID


def test_snake_case_options() -> None:
    adapter = ChatModelFactory.initialize_client(
        {'compartment_id': COMPARTMENT},
        options={'frequency_penalty': 1.2, 'top_p': 0.5},
    )
    assert adapter.params.frequency_penalty == 1.2  # noqa: PLR2004
    assert adapter.params.top_p == 0.5  # noqa: PLR2004


@pytest.mark.parametrize('options', [{'maxTokens': 10_000}, {'temperature': 3}, {'bogus': 1}])
def test_invalid_options(options: dict[str, float]) -> None:
    with pytest.raises(ConfigurationError):
        ChatModelFactory.initialize_client({'compartmentId': COMPARTMENT}, options=options)


def test_missing_compartment() -> None:
    with pytest.raises(ConfigurationError):
        ChatModelFactory.initialize_client({'region': 'us-ashburn-1'})


def test_from_settings() -> None:
    settings = Settings(
        compartment_id=COMPARTMENT,
        region=Region.UK_LONDON_1,
        model_id='meta.llama-3.3-70b-instruct',
        auth_type=AuthType.API_KEY,
        config_profile='CHICAGO',
        temperature=0.0,
        request_timeout=30,
        _env_file=None,
    )

    adapter = ChatModelFactory.from_settings(settings)

    assert adapter.model == 'meta.llama-3.3-70b-instruct'
    assert adapter.params.temperature == 0.0
    assert adapter.credentials.region is Region.UK_LONDON_1
    assert adapter.identify()['compartment_id'] == COMPARTMENT
