"""Named storage for game assets."""

from __future__ import annotations

from typing import Any, TypeVar

from starforge.errors import AssetAlreadyExists, AssetCastError, AssetNotFound

T = TypeVar("T")


class AssetManager:
    """Keeps assets under unique names and hands them back by type."""

    def __init__(self) -> None:
        super().__init__()
        self._assets: dict[str, Any] = {}

    def add_asset(self, name: str, asset: Any) -> None:
        if name in self._assets:
            raise AssetAlreadyExists("Asset already exists")
        self._assets[name] = asset

    def _lookup(self, name: str, expected_type: type[T]) -> T:
        if name not in self._assets:
            raise AssetNotFound("Asset not found")
        asset = self._assets[name]
        if not isinstance(asset, expected_type):
            raise AssetCastError("Invalid cast")
        return asset

    def get_asset(self, name: str, expected_type: type[T]) -> T:
        """Return the asset stored under ``name``, checked against a type."""
        return self._lookup(name, expected_type)

    def remove_asset(self, name: str, expected_type: type[T]) -> T:
        """Remove the asset stored under ``name`` and return it.

        Nothing is removed when the type check fails.
        """
        asset = self._lookup(name, expected_type)
        del self._assets[name]
        return asset

    def asset_exists(self, name: str) -> bool:
        return name in self._assets

    def clear_assets(self) -> None:
        self._assets.clear()