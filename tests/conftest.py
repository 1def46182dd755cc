"""Shared pytest fixtures - no test here talks to OCI."""

from __future__ import annotations

import pytest
from helpers import COMPARTMENT, FakeClient

from oci_chat_bridge.adapters.oci_adapter import OCIChatAdapter
from oci_chat_bridge.core.credentials import OCICredentials, Region


@pytest.fixture()
def credentials() -> OCICredentials:
    return OCICredentials(compartment_id=COMPARTMENT, region=Region.EU_FRANKFURT_1)


@pytest.fixture()
def fake_client() -> FakeClient:
    return FakeClient()


@pytest.fixture()
def adapter(credentials: OCICredentials, fake_client: FakeClient) -> OCIChatAdapter:
    return OCIChatAdapter(credentials, client=fake_client)
