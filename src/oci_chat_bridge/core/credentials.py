"""core.credentials

Credential descriptor for reaching OCI Generative AI.

Two fields are required: the compartment OCID the request is billed to and
the region hosting the inference endpoint. `CREDENTIAL_FIELDS` is the
declarative form a host renders in its credential UI; `OCICredentials` is
the validated value the adapter keeps a read-only copy of.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError, field_validator

from oci_chat_bridge.core.exceptions import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping

CLOUD_DOMAIN = 'oci.oraclecloud.com'


class Region(StrEnum):
    """Regions where on-demand chat models are served. First member is the default."""

    US_ASHBURN_1 = 'us-ashburn-1'
    US_CHICAGO_1 = 'us-chicago-1'
    UK_LONDON_1 = 'uk-london-1'
    EU_FRANKFURT_1 = 'eu-frankfurt-1'


class AuthType(StrEnum):
    """How the OCI request signer is obtained."""

    INSTANCE_PRINCIPAL = 'instance_principal'
    API_KEY = 'api_key'


REGION_LABELS: dict[Region, str] = {
    Region.US_ASHBURN_1: 'US Ashburn (us-ashburn-1)',
    Region.US_CHICAGO_1: 'US Chicago (us-chicago-1)',
    Region.UK_LONDON_1: 'UK London (uk-london-1)',
    Region.EU_FRANKFURT_1: 'Frankfurt (eu-frankfurt-1)',
}


def service_endpoint(region: Region | str) -> str:
    """Return the chat inference endpoint for *region*.

    >>> service_endpoint("eu-frankfurt-1")
    'https://inference.generativeai.eu-frankfurt-1.oci.oraclecloud.com'
    """
    return f'https://inference.generativeai.{Region(region).value}.{CLOUD_DOMAIN}'


class OCICredentials(BaseModel):
    """Compartment + region pair; immutable once supplied."""

    compartment_id: SecretStr = Field(..., description='OCI compartment OCID')
    region: Region = Field(default=Region.US_ASHBURN_1, description='OCI region')

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator('compartment_id')
    @classmethod
    def _not_blank(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value().strip():
            raise ValueError('compartment_id must not be empty')
        return v

    @property
    def endpoint(self) -> str:
        return service_endpoint(self.region)

    @classmethod
    def load(cls, data: Mapping[str, Any] | OCICredentials) -> OCICredentials:
        """Build credentials from a host-supplied mapping.

        Accepts ``compartmentId`` as well as ``compartment_id``. Validation
        failures surface as `ConfigurationError`.
        """
        if isinstance(data, OCICredentials):
            return data
        normalised = dict(data)
        if 'compartmentId' in normalised:
            normalised.setdefault('compartment_id', normalised.pop('compartmentId'))
        try:
            return cls.model_validate(normalised)
        except ValidationError as exc:
            raise ConfigurationError(f'Invalid OCI credentials: {exc.errors(include_url=False)}') from exc


# ---------------------------------------------------------------------------
# Declarative descriptor consumed by hosts
# ---------------------------------------------------------------------------


class CredentialField(BaseModel):
    """One entry of the host-facing credential form."""

    name: str
    display_name: str
    type: str
    required: bool = True
    password: bool = False
    default: str = ''
    options: tuple[tuple[str, str], ...] = ()
    description: str = ''

    model_config = ConfigDict(frozen=True)


CREDENTIAL_TYPE = 'ociApi'
CREDENTIAL_DISPLAY_NAME = 'Oracle Cloud Infrastructure API'

CREDENTIAL_FIELDS: tuple[CredentialField, ...] = (
    CredentialField(
        name='compartmentId',
        display_name='Compartment ID',
        type='string',
        password=True,
        description='OCI compartment OCID where the Generative AI service is available',
    ),
    CredentialField(
        name='region',
        display_name='Region',
        type='options',
        default=Region.US_ASHBURN_1.value,
        options=tuple((REGION_LABELS[r], r.value) for r in Region),
        description='OCI region where the Generative AI service is available',
    ),
)
