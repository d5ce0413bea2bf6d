"""Custom exception hierarchy for pyrituals."""

from __future__ import annotations


class RitualsError(Exception):
    """Base exception for all pyrituals errors."""


class RitualsConfigError(RitualsError):
    """Invalid or missing configuration."""


class RitualsTransportError(RitualsError):
    """HTTP-level failure (network, non-200, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class RitualsApiError(RitualsError):
    """A component could not complete its exchange with the API.

    ``status_code`` is copied from the underlying transport failure when the
    server answered with a non-200 status.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)

    @classmethod
    def from_transport(cls, message: str, exc: RitualsTransportError) -> RitualsApiError:
        return cls(f"{message}: {exc}", status_code=exc.status_code, endpoint=exc.endpoint)


class RitualsSessionError(RitualsApiError):
    """Login failed or no session is available."""


class RitualsHubError(RitualsApiError):
    """The account's hub could not be resolved."""


class RitualsStateError(RitualsApiError):
    """Hub state could not be pulled."""


class RitualsCommandError(RitualsApiError):
    """An attribute update was rejected or never reached the API."""
