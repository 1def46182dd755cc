"""core.abc

Abstract base class that chat-model adapters implement.

Design goals
============
1. **Provider-agnostic public API** - callers interact exclusively via
    `generate()` passing domain models (`Message`, `GenerationParams`) and get
    a `ChatResult` back. They never touch provider-specific payloads.
2. **Explicit connection step** - construction only stores configuration.
    Network clients are built by `open()`, which `generate()` awaits on first
    use, so a request can never race client construction.
3. **Deadlines belong to the caller** - `generate()` accepts a `timeout` that
    bounds client construction and the request together, and converts expiry
    into `GenerationTimeoutError`. Cancellation of the awaiting
    task propagates unchanged.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from oci_chat_bridge.core.exceptions import ConfigurationError, GenerationTimeoutError
from oci_chat_bridge.core.types import GenerationParams

if TYPE_CHECKING:
    from collections.abc import Sequence

    from oci_chat_bridge.core.types import ChatResult, Message


class AbstractChatModel(ABC):
    """Provider-independent async chat model interface."""

    # ---------------------------------------------------------------------
    # Construction
    # ---------------------------------------------------------------------

    def __init__(
        self,
        model: str,
        params: GenerationParams | None = None,
        *,
        timeout: float | None = None,
    ) -> None:
        """Store *model* name, default sampling *params* and default *timeout* (seconds)."""
        self._model: str = model
        self._params: GenerationParams = params or GenerationParams()
        self._timeout: float | None = timeout
        self._open_lock = asyncio.Lock()
        self._opened = False

    @property
    def model(self) -> str:
        return self._model

    @property
    def params(self) -> GenerationParams:
        return self._params

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def open(self) -> None:
        """Establish the provider client. Safe to call repeatedly and concurrently."""
        if self._opened:
            return
        async with self._open_lock:
            if not self._opened:
                await self._connect()
                self._opened = True

    # ------------------------------------------------------------------
    # Public async API
    # ------------------------------------------------------------------

    async def generate(
        self,
        messages: Sequence[Message],
        params: GenerationParams | None = None,
        *,
        timeout: float | None = None,
    ) -> ChatResult:
        """Generate a completion for *messages*.

        Subclasses **must not** override this - override `_invoke()` instead.
        """
        if not messages:
            raise ConfigurationError('At least one message is required')
        call = self._open_and_invoke(list(messages), params or self._params)
        timeout = timeout if timeout is not None else self._timeout
        if timeout is None:
            return await call
        try:
            return await asyncio.wait_for(call, timeout)
        except TimeoutError as exc:
            raise GenerationTimeoutError(f'No response from {self.llm_type} within {timeout}s') from exc

    async def _open_and_invoke(self, messages: list[Message], params: GenerationParams) -> ChatResult:
        # client construction counts against the caller's deadline too
        await self.open()
        return await self._invoke(messages, params)

    # ------------------------------------------------------------------
    # Methods to implement in concrete adapters
    # ------------------------------------------------------------------

    @property
    @abstractmethod
    def llm_type(self) -> str:
        """Short provider tag used by hosts in traces (e.g. ``"oci-chat"``)."""

    @abstractmethod
    async def _connect(self) -> None:
        """Build the provider client (called once by `open()`)."""

    @abstractmethod
    async def _invoke(self, messages: list[Message], params: GenerationParams) -> ChatResult:
        """Provider-specific implementation (to be overridden)."""

    @abstractmethod
    def identify(self) -> dict[str, Any]:
        """Configuration fingerprint for logging / tracing hooks."""

    # ------------------------------------------------------------------
    # Helper - string representation
    # ------------------------------------------------------------------

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return f'<{self.__class__.__name__} model={self._model!r}>'
