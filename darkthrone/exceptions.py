"""
Exception hierarchy for the DarkThrone API client.

All custom exceptions inherit from DarkThroneError base class.
"""

from typing import Optional


class DarkThroneError(Exception):
    """Base exception for all DarkThrone client errors."""
    pass


# Configuration Errors
class ConfigurationError(DarkThroneError):
    """Raised when the client is missing required configuration (e.g. base URL)."""
    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration is invalid or malformed."""
    pass


# Request Errors
class SerializationError(DarkThroneError):
    """Raised when a request body cannot be encoded to JSON."""
    pass


class TransportError(DarkThroneError):
    """
    Raised on network-level failures (DNS, connection refused, TLS, read errors).

    Carries the time spent before the failure so callers such as ``ping`` can
    still report partial latency.
    """

    def __init__(self, message: str, elapsed_ms: Optional[float] = None):
        super().__init__(message)
        self.elapsed_ms = elapsed_ms


class NonSuccessStatusError(DarkThroneError):
    """Raised when the server answers with a status the client does not accept."""

    def __init__(self, status_code: int, reason: str = "", message: Optional[str] = None):
        self.status_code = status_code
        self.reason = reason
        self.status = f"{status_code} {reason}".strip()
        super().__init__(message or f"Non-OK HTTP status: {self.status}")


class DecodeError(DarkThroneError):
    """Raised when a response payload does not parse into the declared type."""

    def __init__(self, message: str, payload: bytes = b""):
        super().__init__(message)
        self.payload = payload


# Session Errors
class SessionUninitializedError(DarkThroneError):
    """Raised when the process session is requested before it was initialized."""
    pass


# Endpoint Errors
class FeatureNotReleasedError(DarkThroneError):
    """Raised by endpoints the game server has not shipped yet."""
    pass


class PlayerSelectionError(DarkThroneError):
    """Raised when a player cannot be selected from the current user's players."""
    pass
