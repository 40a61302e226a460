# Copyright 2026 Inkbunny Client Contributors
# SPDX-License-Identifier: Apache-2.0
"""Inkbunny Client — Typed async client for the Inkbunny API."""

from __future__ import annotations

import logging

from .api import API, LoginResult, LogoutResult, RatingResult
from .connection import Connection, DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from .errors import (
    APIError,
    InkbunnyError,
    InvalidRIDError,
    RID_EXPIRED,
    RID_INVALID,
    SESSION_INVALID,
    SessionError,
    TRANSPORT_ERROR_CODE,
    TransportError,
)
from .helper import Helper
from .search import PageCursor, SearchResult
from .session import GUEST_USERNAME, Rating, Session
from .submission import (
    DetailedSubmission,
    Keyword,
    Pool,
    Submission,
    SubmissionFile,
    SubmissionsResult,
)
from . import protocol

__version__ = "0.1.0"

__all__ = [
    # Classes
    "Helper",
    "API",
    "Connection",
    "Session",
    "Rating",
    "PageCursor",
    "SearchResult",
    "LoginResult",
    "LogoutResult",
    "RatingResult",
    "Submission",
    "DetailedSubmission",
    "Keyword",
    "Pool",
    "SubmissionFile",
    "SubmissionsResult",
    # Constants
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "GUEST_USERNAME",
    "TRANSPORT_ERROR_CODE",
    "SESSION_INVALID",
    "RID_INVALID",
    "RID_EXPIRED",
    # Errors
    "InkbunnyError",
    "APIError",
    "TransportError",
    "SessionError",
    "InvalidRIDError",
    "protocol",
]

_logger = logging.getLogger(__name__)
_logger.addHandler(logging.NullHandler())
# Warnings and errors only by default, see Helper.set_log_level.
_logger.setLevel(logging.WARNING)
