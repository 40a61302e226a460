# Copyright 2026 Inkbunny Client Contributors
# SPDX-License-Identifier: Apache-2.0
"""Exception types for the Inkbunny client."""

# Reserved for failures that never reached the remote API.
TRANSPORT_ERROR_CODE = -1

SESSION_INVALID = 2
RID_INVALID = 35
RID_EXPIRED = 36


class InkbunnyError(Exception):
    """Base exception for all Inkbunny client errors."""


class APIError(InkbunnyError):
    """A request failed with a numeric error code and message."""

    def __init__(self, error_code: int, error_message: str) -> None:
        self.error_code = error_code
        self.error_message = error_message
        super().__init__(f"[{error_code}] - {error_message}")


class TransportError(APIError):
    """The request could not be sent or its body could not be decoded."""

    def __init__(self, error_message: str) -> None:
        super().__init__(TRANSPORT_ERROR_CODE, error_message)


class SessionError(APIError):
    """A session-bound operation was called without an active session."""

    def __init__(self, error_message: str = "Invalid Session ID sent as variable 'sid'.") -> None:
        super().__init__(SESSION_INVALID, error_message)


class InvalidRIDError(APIError):
    """A page was requested through a result-set id that was never issued."""

    def __init__(self, error_message: str = "Invalid results ID sent as variable 'rid'.") -> None:
        super().__init__(RID_INVALID, error_message)
