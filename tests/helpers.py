"""Test doubles for the OCI SDK client."""

from __future__ import annotations

import time
from types import SimpleNamespace
from typing import Any

COMPARTMENT = 'ocid1.compartment.oc1..exampleuniqueid'


def envelope(text: str | None = 'hello', model_version: str | None = 'v1') -> dict[str, Any]:
    """Vendor response body in REST casing."""
    result: dict[str, Any] = {}
    if text is not None:
        result['response'] = text
    if model_version is not None:
        result['modelVersion'] = model_version
    return {'chatResponse': {'chatResult': result}}


class FakeClient:
    """Stands in for ``GenerativeAiInferenceClient``; records every ChatDetails."""

    def __init__(
        self,
        response: Any = None,
        *,
        error: BaseException | None = None,
        delay: float = 0.0,
    ) -> None:
        self._response = SimpleNamespace(data=envelope()) if response is None else response
        self._error = error
        self._delay = delay
        self.calls: list[Any] = []

    def chat(self, chat_details: Any) -> Any:
        self.calls.append(chat_details)
        if self._delay:
            time.sleep(self._delay)
        if self._error is not None:
            raise self._error
        return self._response


class NullResponseClient(FakeClient):
    """Client whose ``chat`` returns nothing at all."""

    def chat(self, chat_details: Any) -> Any:
        self.calls.append(chat_details)
        return None
