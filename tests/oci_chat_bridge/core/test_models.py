from __future__ import annotations

from oci_chat_bridge.core.models import DEFAULT_MODEL_ID, SUPPORTED_MODELS, display_name


def test_default_is_first_catalogue_entry() -> None:
    assert next(iter(SUPPORTED_MODELS.values())) == DEFAULT_MODEL_ID
    assert display_name(DEFAULT_MODEL_ID) == 'Meta Llama 3.1 405B Instruct'


def test_unknown_ids_pass_through() -> None:
    assert display_name('cohere.command-a-03-2025') == 'cohere.command-a-03-2025'
