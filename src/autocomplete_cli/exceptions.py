"""Custom exceptions for autocomplete-cli."""


class AutocompleteError(Exception):
    """Base exception for all autocomplete-cli errors."""

    pass


# ─── Source Errors ───────────────────────────────────────────────


class SourceError(AutocompleteError):
    """Base exception for suggestion source errors."""

    def __init__(self, source: str, message: str) -> None:
        self.source = source
        self.message = message
        super().__init__(message)


class UpstreamHTTPError(SourceError):
    """Raised when an upstream endpoint answers with a non-2xx status."""

    def __init__(self, source: str, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(source, f"HTTP error: {status_code}")


class SourceConnectionError(SourceError):
    """Raised when the request never got a response (DNS, refused, reset...)."""

    def __init__(self, source: str, reason: str) -> None:
        self.reason = reason
        super().__init__(source, f"Connection failed: {reason}")


class ResponseDecodeError(SourceError):
    """Raised when a body that must be JSON cannot be decoded."""

    def __init__(self, source: str, reason: str) -> None:
        self.reason = reason
        super().__init__(source, f"Invalid response body: {reason}")


# ─── Dispatch Errors ─────────────────────────────────────────────


class UnknownSourceError(AutocompleteError):
    """Raised when a source tag has no adapter."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Unknown source: {value}")
