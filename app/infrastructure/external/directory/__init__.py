"""User directory adapters (Microsoft Graph, null)."""

from app.infrastructure.external.directory.graph_directory import (
    GraphUserDirectory,
    NullUserDirectory,
)

__all__ = ["GraphUserDirectory", "NullUserDirectory"]
