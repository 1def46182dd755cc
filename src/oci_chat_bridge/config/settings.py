"""config.settings

Environment-driven configuration, for hosts and scripts that do not hand
credentials over explicitly. Values are read from ``OCI_*`` environment
variables and, if present, a local ``.env`` file.
"""

from __future__ import annotations

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from oci_chat_bridge.core.credentials import AuthType, OCICredentials, Region
from oci_chat_bridge.core.models import DEFAULT_MODEL_ID
from oci_chat_bridge.core.types import GenerationParams


class Settings(BaseSettings):
    """Adapter settings sourced from env vars / .env."""

    model_config = SettingsConfigDict(
        env_prefix='OCI_',
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
        protected_namespaces=(),
    )

    # ── Credentials ───────────────────────────────────────────────────────
    compartment_id: SecretStr = SecretStr('')
    region: Region = Region.US_ASHBURN_1

    # ── Authentication ────────────────────────────────────────────────────
    auth_type: AuthType = AuthType.INSTANCE_PRINCIPAL
    config_file: str | None = None  # defaults to ~/.oci/config for API_KEY auth
    config_profile: str = 'DEFAULT'

    # ── Model & sampling ──────────────────────────────────────────────────
    model_id: str = DEFAULT_MODEL_ID
    temperature: float = Field(0.7, ge=0.0, le=1.0)
    max_tokens: int = Field(2048, ge=1, le=4096)
    top_p: float = Field(1.0, ge=0.0, le=1.0)
    top_k: int = Field(0, ge=0, le=500)
    frequency_penalty: float = Field(0.0, ge=0.0, le=2.0)
    presence_penalty: float = Field(0.0, ge=0.0, le=2.0)

    # ── Request deadline (seconds, unset = wait forever) ──────────────────
    request_timeout: float | None = Field(default=None, gt=0)

    def credentials(self) -> OCICredentials:
        """Project into `OCICredentials`; raises `ConfigurationError` when incomplete."""
        return OCICredentials.load({'compartment_id': self.compartment_id, 'region': self.region})

    def generation_params(self) -> GenerationParams:
        return GenerationParams(
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            top_p=self.top_p,
            top_k=self.top_k,
            frequency_penalty=self.frequency_penalty,
            presence_penalty=self.presence_penalty,
        )
