# Copyright 2026 Inkbunny Client Contributors
# SPDX-License-Identifier: Apache-2.0
"""High level helper around the Inkbunny API.

Keeps the session id, renews it when the API reports it expired, and
attaches pagination to search results.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import replace
from typing import Any, Sequence

import httpx

from .api import API, LoginResult, LogoutResult, RatingResult
from .connection import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, Connection
from .errors import (
    APIError,
    InvalidRIDError,
    RID_EXPIRED,
    RID_INVALID,
    SESSION_INVALID,
    SessionError,
)
from .retry import Producer, RecoveryAction, request_with_retry
from .search import PageCursor, SearchResult
from .session import GUEST_USERNAME, Rating, Session
from .submission import SubmissionsResult

GUEST_WARNING = (
    "Using the API as guest user can be significantly slower! "
    "Use proper credentials instead!"
)

logger = logging.getLogger(__name__)


class Helper:
    """Inkbunny API helper.

    Adds session handling, automatic session renewal and pagination on top
    of :class:`~inkbunny_client.api.API`. A helper holds one session and is
    not meant to run overlapping calls; use one helper per concurrent task.

    Example::

        async with Helper() as ib:
            await ib.login("me", "secret")
            page = await ib.search_tags(["fox"], per_page=5)
            page = await page.next_page()
            await ib.logout()

    Make sure the account has the 'Enable API Access' option checked.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._conn = Connection(base_url, timeout=timeout, client=client)
        self.api = API(self._conn)
        self._session = Session()
        self._lock = asyncio.Lock()

    @property
    def sid(self) -> str | None:
        return self._session.sid

    @property
    def username(self) -> str:
        return self._session.username

    @property
    def rating_preference(self) -> Rating | None:
        return self._session.rating

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------

    async def login(
        self, username: str | None = None, password: str | None = None
    ) -> LoginResult:
        """Sign in, replacing any previous session.

        Username and password can be omitted to use the API as guest.

        Args:
            username: Inkbunny username.
            password: Inkbunny password.

        Returns:
            The login result with the decoded content rating.
        """
        if not username or username == GUEST_USERNAME:
            logger.warning(GUEST_WARNING)
            username, password = GUEST_USERNAME, ""
        async with self._lock:
            result = await self._login(username, password or "")
            self._session.rating = None
        return result

    async def _login(self, username: str, password: str) -> LoginResult:
        result = await self.api.login(username, password)
        self._session.sid = result.sid
        self._session.username = username
        self._session.password = password
        logger.debug("Logged in as %s", username)
        return result

    async def logout(self) -> LogoutResult:
        """Sign out to invalidate the current session.

        The local session is cleared even when the request fails.

        Raises:
            SessionError: If there is no active session.
        """
        self._session.require_sid()
        try:
            return await request_with_retry(
                lambda: self.api.logout(self._session.require_sid()),
                self._handlers(),
            )
        except APIError as e:
            logger.warning("Logout failed, clearing local session anyway: %s", e)
            raise
        finally:
            self._session.clear()

    async def rating(self, rating: Rating) -> RatingResult:
        """Update the content rating of the session (guest sessions only).

        Raises:
            SessionError: If there is no active session.
        """
        self._session.require_sid()
        result = await request_with_retry(
            lambda: self.api.rating(self._session.require_sid(), rating),
            self._handlers(),
        )
        self._session.rating = replace(rating)
        return result

    async def _renew_session(self) -> None:
        if not self._session.is_active:
            raise SessionError()
        logger.debug("Session expired, logging in again as %s", self._session.username)
        async with self._lock:
            await self._login(self._session.username, self._session.password)
            if self._session.is_guest and self._session.rating is not None:
                await self.api.rating(self._session.require_sid(), self._session.rating)

    def _handlers(self) -> dict[int, RecoveryAction]:
        return {SESSION_INVALID: self._renew_session}

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    async def search(self, **params: Any) -> SearchResult:
        """Run a search and attach pagination to the result.

        Keyword arguments are the search fields of
        :func:`inkbunny_client.protocol.search_request`, minus ``sid``.
        Pass ``get_rid=True`` to be able to page through the results.
        """
        self._session.require_sid()
        result = await request_with_retry(
            lambda: self.api.search(self._session.require_sid(), **params),
            self._handlers(),
        )
        return self._attach(result, PageCursor(dict(params), result.rid, result.page))

    async def search_tags(
        self,
        tags: str | Sequence[str],
        ids_only: bool = False,
        page: int | None = None,
        per_page: int | None = None,
    ) -> SearchResult:
        """Search for submissions carrying all of the given tags.

        Args:
            tags: Tag or list of tags. Spaces are replaced with underscores.
            ids_only: Only return submission ids.
            page: Page to fetch.
            per_page: Number of submissions per page.
        """
        if isinstance(tags, str):
            tags = [tags]
        text = " ".join(tag.replace(" ", "_") for tag in tags)
        return await self.search(
            submission_ids_only=ids_only,
            submissions_per_page=per_page,
            page=page,
            get_rid=True,
            text=text,
            string_join_type="and",
            keywords=True,
            title=False,
            description=False,
        )

    async def turn_page(self, cursor: PageCursor) -> SearchResult:
        """Fetch the page a cursor points at.

        The result set is tried first; if the API no longer knows it, a
        fresh search for the same page is run instead.

        Raises:
            InvalidRIDError: If the cursor has no result-set id.
        """
        rid = cursor.rid
        if rid is None:
            raise InvalidRIDError()
        self._session.require_sid()

        async def bound() -> SearchResult:
            return await self.api.search_rid(
                self._session.require_sid(), rid, **cursor.rid_params()
            )

        async def fresh() -> SearchResult:
            return await self.api.search(
                self._session.require_sid(), **cursor.search_params()
            )

        async def fall_back() -> Producer[SearchResult]:
            logger.debug("Result set %s is gone, searching page %s again", rid, cursor.page)
            return fresh

        handlers = self._handlers()
        handlers[RID_INVALID] = fall_back
        handlers[RID_EXPIRED] = fall_back

        result = await request_with_retry(bound, handlers)
        return self._attach(
            result,
            PageCursor(cursor.params, result.rid or rid, result.page),
        )

    def _attach(self, result: SearchResult, cursor: PageCursor) -> SearchResult:
        result.cursor = cursor
        result.helper = self
        return result

    # ------------------------------------------------------------------
    # Submissions
    # ------------------------------------------------------------------

    async def details(
        self,
        ids: str | int | Sequence[str | int],
        include_description: bool = False,
        include_pools: bool = False,
        include_writing: bool = False,
    ) -> SubmissionsResult:
        """Fetch full records for one or more submissions.

        Args:
            ids: A submission id, a comma separated string or a list of ids.
            include_description: Include the description, raw and parsed.
            include_pools: Include the pools the submissions belong to.
            include_writing: Include the story text of writing submissions.
        """
        self._session.require_sid()
        return await request_with_retry(
            lambda: self.api.submissions(
                self._session.require_sid(),
                ids,
                show_description=include_description or None,
                show_description_bbcode_parsed=include_description or None,
                show_writing=include_writing or None,
                show_pools=include_pools or None,
            ),
            self._handlers(),
        )

    # ------------------------------------------------------------------
    # Logging and lifecycle
    # ------------------------------------------------------------------

    @staticmethod
    def set_log_level(level: int | str) -> None:
        """Set the level of the ``inkbunny_client`` logger."""
        logging.getLogger("inkbunny_client").setLevel(level)

    @staticmethod
    def get_log_level() -> int:
        """Return the effective level of the ``inkbunny_client`` logger."""
        return logging.getLogger("inkbunny_client").getEffectiveLevel()

    async def close(self) -> None:
        """Close the HTTP client. The session is not logged out."""
        await self._conn.close()

    async def __aenter__(self) -> Helper:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()
