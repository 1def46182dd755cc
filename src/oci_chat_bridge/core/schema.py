"""core.schema

Typed view of the OCI Generative AI chat response envelope.

Every level is optional so that a missing field turns into ``None`` instead of
an ``AttributeError`` deep inside the adapter. Keys are accepted both in the
REST wire casing (``chatResponse``) and in the snake_case produced by
``oci.util.to_dict`` (``chat_response``).

Three body shapes are understood:

* ``{"chatResponse": {"chatResult": {"response": ..., "modelVersion": ...}}}``
* ``GENERIC`` bodies with ``choices[].message.content[].text``
* ``COHERE`` bodies with a flat ``text`` field
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from oci_chat_bridge.core.exceptions import MalformedResponseError

if TYPE_CHECKING:
    from collections.abc import Mapping


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra='ignore',
        frozen=True,
        protected_namespaces=(),
    )


# ---------------------------------------------------------------------------
# GENERIC choices
# ---------------------------------------------------------------------------


class ContentBlock(_WireModel):
    type: str | None = None
    text: str | None = None


class ChoiceMessage(_WireModel):
    role: str | None = None
    content: list[ContentBlock] | None = None


class Choice(_WireModel):
    index: int | None = None
    message: ChoiceMessage | None = None
    finish_reason: str | None = None


# ---------------------------------------------------------------------------
# Envelope
# ---------------------------------------------------------------------------


class NestedChatResult(_WireModel):
    response: str | None = None
    model_version: str | None = None


class ChatResponseBody(_WireModel):
    api_format: str | None = None
    chat_result: NestedChatResult | None = None
    text: str | None = None
    choices: list[Choice] | None = None

    def output_text(self) -> str | None:
        """First non-empty text found, in order of the shapes listed above."""
        if self.chat_result is not None and self.chat_result.response:
            return self.chat_result.response
        if self.text:
            return self.text
        for choice in self.choices or ():
            if choice.message is None or not choice.message.content:
                continue
            parts = [block.text for block in choice.message.content if block.text]
            if parts:
                return ''.join(parts)
        return None


class ChatEnvelope(_WireModel):
    """Top-level object returned by ``GenerativeAiInferenceClient.chat``."""

    model_id: str | None = None
    model_version: str | None = None
    chat_response: ChatResponseBody | None = None

    @property
    def text(self) -> str | None:
        if self.chat_response is None:
            return None
        return self.chat_response.output_text()

    @property
    def version(self) -> str | None:
        nested = self.chat_response.chat_result if self.chat_response is not None else None
        if nested is not None and nested.model_version:
            return nested.model_version
        return self.model_version

    @classmethod
    def parse(cls, payload: Mapping[str, Any]) -> ChatEnvelope:
        """Validate *payload*, converting schema mismatches to `MalformedResponseError`."""
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            raise MalformedResponseError from exc
