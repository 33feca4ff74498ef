"""Versioned CDN asset resolution and icon URL builders."""

from .resolver import AssetVersionResolver

__all__ = ["AssetVersionResolver"]
