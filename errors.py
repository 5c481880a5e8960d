"""Error taxonomy shared by the API service and the front-end widgets."""
from typing import Optional


class PortfolioAIError(Exception):
    """Base class for every failure surfaced by the AI flows."""

    kind = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(PortfolioAIError):
    """Bad input, rejected before any network call."""

    kind = "validation"

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


class TransportError(PortfolioAIError):
    """Network failure or timeout talking to the completion service."""

    kind = "transport"


class UpstreamError(PortfolioAIError):
    """Non-2xx answer from the completion service."""

    kind = "upstream"

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class RateLimitError(UpstreamError):
    kind = "rate_limit"

    def __init__(self, message: str = "Rate limit exceeded", status_code: int = 429):
        super().__init__(message, status_code)


class AuthenticationError(UpstreamError):
    kind = "auth"

    def __init__(self, message: str = "Authentication failed", status_code: int = 401):
        super().__init__(message, status_code)


class ParseError(PortfolioAIError):
    """Response body was not the JSON we asked for."""

    kind = "parse"


class SchemaError(PortfolioAIError):
    """JSON body parsed but did not match the expected result shape."""

    kind = "schema"


def upstream_error_for(status_code: int, message: str) -> UpstreamError:
    if status_code == 429:
        return RateLimitError(message, status_code)
    if status_code == 401:
        return AuthenticationError(message, status_code)
    return UpstreamError(message, status_code)


def user_message(error: Exception, fallback: Optional[str] = None) -> str:
    """Turn any flow error into the short text shown to the visitor."""
    if isinstance(error, RateLimitError):
        return "Rate limit exceeded. Please try again in a moment."
    if isinstance(error, AuthenticationError):
        return "Authentication error. Please contact the site administrator."
    if isinstance(error, UpstreamError):
        return f"API error: {error.message}"
    if isinstance(error, TransportError):
        return "The request timed out or could not connect. Please try again."
    if isinstance(error, ValidationError):
        return error.message
    if isinstance(error, (ParseError, SchemaError)) and fallback:
        return fallback
    return fallback or "An unexpected error occurred. Please try again."
