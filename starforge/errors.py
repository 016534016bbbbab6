"""Exceptions raised by the engine."""


class EngineError(Exception):
    """Base class for every engine error."""


class InvalidComponent(EngineError):
    """A component type was used without being registered."""

    def __init__(self, message: str = "Invalid component") -> None:
        super().__init__(message)


class InvalidArgument(EngineError, ValueError):
    """An entity or argument is not valid for the requested operation."""


class AssetError(EngineError):
    """Base class for asset manager errors."""


class AssetAlreadyExists(AssetError):
    """An asset with the same name is already stored."""


class AssetNotFound(AssetError, LookupError):
    """No asset is stored under the requested name."""


class AssetCastError(AssetError, TypeError):
    """The stored asset is not of the requested type."""