"""core.types

Shared DTOs and enums used throughout *oci_chat_bridge*.

These models live in the **core** layer so that *adapters*, *registry*, and
host integrations can depend on them without causing circular imports.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Chat roles
# ---------------------------------------------------------------------------


class Role(StrEnum):
    system = 'system'
    user = 'user'
    assistant = 'assistant'


# ---------------------------------------------------------------------------
# Messages
#   • `role` is a plain string so that hosts may hand over kinds we do not
#     know yet (e.g. "tool"); the adapter maps those to USER.
# ---------------------------------------------------------------------------


class Message(BaseModel):
    """Single chat message."""

    role: Role | str
    content: str

    # Immutable value-object
    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Generation parameters
#   • Ranges mirror what the OCI console accepts for on-demand chat models.
# ---------------------------------------------------------------------------


class GenerationParams(BaseModel):
    """Sampling controls sent with every chat request."""

    temperature: float = Field(0.7, ge=0.0, le=1.0)
    max_tokens: int = Field(2048, ge=1, le=4096, description='Maximum tokens in completion')
    top_p: float = Field(1.0, ge=0.0, le=1.0, description='Nucleus sampling mass')
    top_k: int = Field(0, ge=0, le=500, description='0 disables top-k filtering')
    frequency_penalty: float = Field(0.0, ge=0.0, le=2.0)
    presence_penalty: float = Field(0.0, ge=0.0, le=2.0)

    model_config = ConfigDict(frozen=True, extra='forbid')


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


class TokenUsage(BaseModel):
    """Token counters. OCI does not report them, so they stay at zero."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0

    model_config = ConfigDict(frozen=True)


class ChatResult(BaseModel):
    """Provider-agnostic outcome of one `generate()` call."""

    text: str
    model_version: str = 'unknown'
    token_usage: TokenUsage = Field(default_factory=TokenUsage)

    model_config = ConfigDict(frozen=True, protected_namespaces=())
