"""Contract between the checker facade and its front-end adapters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


CONTRACT_VERSION = "1.0.0"


@dataclass(frozen=True, slots=True)
class GuiAdapterMetadata:
    """Name, version, and supported interactions of a front-end adapter."""

    name: str
    version: str
    capabilities: tuple[str, ...] = ()

    def as_dict(self) -> dict[str, Any]:
        return {
            "adapter_name": self.name,
            "adapter_version": self.version,
            "adapter_capabilities": list(self.capabilities),
        }


class GuiAdapter(Protocol):
    """A front-end that captures candidates and renders facade views."""

    metadata: GuiAdapterMetadata

    def start(self) -> None:
        """Run the input loop until the user quits or input ends."""

    def stop(self) -> None:
        """Leave the input loop."""
