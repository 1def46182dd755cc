"""factory.client_factory

Factory responsible for turning host-supplied credentials and node options
into a ready-to-open `OCIChatAdapter`.

Hosts usually hand over plain mappings straight from their parameter store,
with camelCase keys (``compartmentId``, ``maxTokens``). Both camelCase and
snake_case are accepted; options that are absent or ``None`` fall back to the
`GenerationParams` defaults.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import ValidationError
from pydantic.alias_generators import to_snake

from oci_chat_bridge.adapters.oci_adapter import OCIChatAdapter
from oci_chat_bridge.core.credentials import OCICredentials
from oci_chat_bridge.core.exceptions import ConfigurationError
from oci_chat_bridge.core.types import GenerationParams

if TYPE_CHECKING:
    from collections.abc import Mapping

    from oci_chat_bridge.config.settings import Settings


def _generation_params(options: Mapping[str, Any] | None) -> GenerationParams:
    values = {to_snake(key): value for key, value in (options or {}).items() if value is not None}
    try:
        return GenerationParams(**values)
    except ValidationError as exc:
        raise ConfigurationError(f'Invalid generation options: {exc.errors(include_url=False)}') from exc


class ChatModelFactory:
    """Factory for creating OCI chat adapters.

    This class is stateless. An explicit class is provided rather than a bare
    function so that hosts can subclass it to inject shared clients.
    """

    @staticmethod
    def initialize_client(
        credentials: OCICredentials | Mapping[str, Any],
        model_id: str | None = None,
        options: Mapping[str, Any] | None = None,
        **adapter_kwargs: Any,
    ) -> OCIChatAdapter:
        """Return an adapter for *model_id*.

        Parameters
        ----------
        credentials
            `OCICredentials` or a mapping with ``compartmentId`` and ``region``.
        model_id
            Model OCID or name; ``None`` selects the default model.
        options
            Any subset of the six sampling scalars.
        **adapter_kwargs
            Forwarded to the adapter's constructor (``auth_type``,
            ``timeout``, ``client`` ...).

        """
        return OCIChatAdapter(
            OCICredentials.load(credentials),
            model_id,
            _generation_params(options),
            **adapter_kwargs,
        )

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **adapter_kwargs: Any) -> OCIChatAdapter:
        """Build an adapter from ``OCI_*`` environment settings."""
        if settings is None:
            from oci_chat_bridge.config.settings import Settings  # local import keeps .env loading lazy

            settings = Settings()
        adapter_kwargs.setdefault('auth_type', settings.auth_type)
        adapter_kwargs.setdefault('config_file', settings.config_file)
        adapter_kwargs.setdefault('config_profile', settings.config_profile)
        adapter_kwargs.setdefault('timeout', settings.request_timeout)
        return OCIChatAdapter(
            settings.credentials(),
            settings.model_id,
            settings.generation_params(),
            **adapter_kwargs,
        )
