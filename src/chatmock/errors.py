"""Exceptions raised while serving a completion.

Every error carries the HTTP status the caller should receive; the API
layer renders them as ``{"error": message}``.
"""

from __future__ import annotations


class ChatMockError(Exception):
    """Base class for errors that terminate a request."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvalidRequestError(ChatMockError):
    """The inbound request cannot be served (e.g. no messages)."""

    status_code = 400


class UpstreamTransportError(ChatMockError):
    """The upstream could not be reached or the connection failed."""

    status_code = 502


class UpstreamStatusError(ChatMockError):
    """The upstream answered with a non-2xx status."""

    status_code = 502

    def __init__(self, upstream_status: int) -> None:
        # Non-error statuses (3xx) surface as 502.
        super().__init__(
            f"remote returned status {upstream_status}",
            status_code=upstream_status if upstream_status >= 400 else None,
        )
        self.upstream_status = upstream_status


class UpstreamDecodeError(ChatMockError):
    """The upstream body did not decode into the expected shape."""

    status_code = 502


class ClientDisconnectedError(ChatMockError):
    """The caller went away before the completion finished."""

    status_code = 499
