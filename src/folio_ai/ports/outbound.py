"""Outbound ports — abstract interfaces the core depends on.

Adapters in ``folio_ai.adapters.outbound`` implement these.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from folio_ai.shared.providers.types import ProviderConfig, RequestOptions


class TextProviderPort(ABC):
    """A single round-trip to one text-generation provider."""

    @abstractmethod
    async def complete(
        self,
        provider: ProviderConfig,
        prompt: str,
        options: RequestOptions,
    ) -> str:
        """Return the generated text.

        Raises:
            TransportError: the call did not complete or returned non-2xx.
            FormatError: the payload lacked the expected text field.
        """
        ...

    async def close(self) -> None:
        """Release any pooled connections."""
