# Copyright 2026 Inkbunny Client Contributors
# SPDX-License-Identifier: Apache-2.0
"""Retry loop that recovers from specific API error codes."""

from __future__ import annotations

import logging
from typing import Awaitable, Callable, Mapping, Optional, TypeVar

from .errors import APIError

T = TypeVar("T")

Producer = Callable[[], Awaitable[T]]
# A recovery action either fixes state and returns None (retry the same
# request) or returns a replacement producer to retry with instead.
RecoveryAction = Callable[[], Awaitable[Optional[Producer]]]

logger = logging.getLogger(__name__)


async def request_with_retry(
    producer: Producer[T],
    handlers: Mapping[int, RecoveryAction],
) -> T:
    """Run ``producer`` and recover from registered error codes.

    Each error code is recovered from at most once per call. A code
    without a handler, or one that shows up again after its recovery ran,
    is re-raised unchanged.

    Args:
        producer: Zero-argument coroutine function performing the request.
        handlers: Recovery actions keyed by API error code.

    Returns:
        The first successful result.

    Raises:
        APIError: The unrecoverable failure, or one raised by a recovery action.
    """
    recovered: set[int] = set()
    while True:
        try:
            return await producer()
        except APIError as e:
            action = handlers.get(e.error_code)
            if action is None:
                raise
            if e.error_code in recovered:
                logger.warning(
                    "Error %d persisted after recovery, giving up: %s",
                    e.error_code,
                    e.error_message,
                )
                raise
            recovered.add(e.error_code)
            logger.debug("Recovering from error %d: %s", e.error_code, e.error_message)
            replacement = await action()

        if replacement is not None:
            logger.debug("Retrying with replacement request")
            producer = replacement
