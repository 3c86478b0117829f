"""Custom exception hierarchy for the HERE Maps tool server."""


class MapsError(Exception):
    """Base exception for tool server issues."""


class ConfigurationError(MapsError):
    """Raised when configuration is invalid or missing."""


class ExternalServiceError(MapsError):
    """Raised when the HERE Maps API responds with an error."""


class MalformedResponseError(ExternalServiceError):
    """Raised when a HERE Maps response does not have the expected shape."""


class InvalidToolArguments(MapsError):
    """Raised when a tool is invoked without the arguments it needs."""


class PolylineDecodeError(MapsError, ValueError):
    """Raised when a flexible polyline string cannot be decoded."""
