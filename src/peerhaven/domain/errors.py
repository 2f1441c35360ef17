"""
Domain Errors

Failure conditions of the matching core. None of these is fatal:
each one has a local recovery path (empty collection, unset
criteria field, silent speech).
"""

from typing import Any, Optional


class PeerHavenError(Exception):
    """Base exception for PeerHaven errors."""


class StoreUnavailableError(PeerHavenError):
    """
    A knowledge, contact or helper fetch failed or timed out.
    
    Recovered by substituting an empty collection.
    """
    
    def __init__(
        self,
        store: str,
        reason: str = "",
        original_error: Optional[Exception] = None,
    ) -> None:
        super().__init__(f"{store} store unavailable: {reason}" if reason else f"{store} store unavailable")
        self.store = store
        self.reason = reason
        self.original_error = original_error


class InvalidCriteriaError(PeerHavenError):
    """
    A search criteria field is malformed or out of range.
    
    Recovered by treating the field as unset.
    """
    
    def __init__(self, field: str, value: Any, reason: str = "") -> None:
        super().__init__(f"Invalid {field}: {value!r} {reason}".rstrip())
        self.field = field
        self.value = value
        self.reason = reason


class SpeechUnavailableError(PeerHavenError):
    """
    The speech capability is absent or failed.
    
    Recovered by a silent no-op with a status string.
    """
    
    def __init__(
        self,
        provider: str,
        reason: str = "",
        is_retryable: bool = False,
        original_error: Optional[Exception] = None,
    ) -> None:
        super().__init__(f"Speech provider {provider} unavailable: {reason}")
        self.provider = provider
        self.reason = reason
        self.is_retryable = is_retryable
        self.original_error = original_error
