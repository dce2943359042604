from __future__ import annotations


class ProviderError(RuntimeError):
    """Base exception for provider-related failures."""


class FetchError(ProviderError):
    """HTTP/network/transport layer failures (timeouts, connection errors, non-2xx, etc.)."""


class ProviderRateLimited(FetchError):
    """Provider throttled the request (e.g., HTTP 429)."""


class DeserializationError(ProviderError):
    """Response body was not a JSON object."""


class ProviderCapabilityError(ProviderError):
    """No adapter / team table exists for a requested sport."""


class UnknownStatusError(ProviderError):
    """Provider reported a status code outside the known set.

    Never coerced to a default status: an unknown code means the provider
    contract changed and needs a human to look at it.
    """

    def __init__(self, code: str) -> None:
        super().__init__(f"Unrecognized upstream status {code!r}")
        self.code = code


class ParseError(ProviderError):
    """Extraction failed due to a missing field or an unexpected type / value."""

    def __init__(self, message: str, context: dict[str, object] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if not self.context:
            return self.message
        return f"{self.message} | context={self.context}"


class TimeParseError(ParseError):
    """A provider timestamp did not match its expected format."""


class IntegerParseError(ParseError):
    """A numeric string field could not be parsed as a non-negative integer."""
