"""
Error taxonomy for the DEGIRO client.

Every failure the pipeline can surface derives from DegiroError. A missing
persisted session is not an error; see SessionLoadKind.NOT_FOUND.
"""

from __future__ import annotations


class DegiroError(Exception):
    """Base error for the client."""


class ConfigurationError(DegiroError):
    """Required settings (e.g. credentials) are missing or invalid."""


class AuthenticationError(DegiroError):
    """Login was rejected or returned no usable session cookie."""


class SessionExpired(AuthenticationError):
    """A session token was rejected by the config endpoint."""


class ApiError(DegiroError):
    """Unexpected HTTP status from an endpoint."""

    def __init__(self, url: str, status_code: int, message: str | None = None) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(message or f"HTTP {status_code} from {url}")


class NetworkError(DegiroError):
    """Transport failure or timeout. Safe for a caller to retry; the core does not."""

    retryable = True

    def __init__(self, url: str, cause: Exception) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"Request to {url} failed: {cause!s}")


class MalformedResponse(DegiroError):
    """A success response lacks a required field."""

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


class MalformedConfig(MalformedResponse):
    """The config document is missing a required service URL or id."""


class MissingField(DegiroError):
    """A position row lacks an expected index or has the wrong shape there."""

    def __init__(self, field: str, record_id: str | None) -> None:
        self.field = field
        self.record_id = record_id
        super().__init__(f"Position row {record_id!r}: missing or invalid field {field!r}")


class UnknownProduct(DegiroError):
    """A requested product id has no entry in the product info response."""

    def __init__(self, product_id: str) -> None:
        self.product_id = product_id
        super().__init__(f"No product info for id {product_id!r}")
