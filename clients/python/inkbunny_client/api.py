# Copyright 2026 Inkbunny Client Contributors
# SPDX-License-Identifier: Apache-2.0
"""Direct access to the Inkbunny API.

One coroutine per remote operation. Nothing here keeps state or retries;
see :class:`~inkbunny_client.helper.Helper` for that.

API reference: https://wiki.inkbunny.net/wiki/API
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from .connection import Connection
from .search import SearchResult, parse_search_result
from .session import Rating
from .submission import SubmissionsResult, parse_submissions_result
from . import protocol

LOGIN_ENDPOINT = "api_login.php"
LOGOUT_ENDPOINT = "api_logout.php"
RATING_ENDPOINT = "api_userrating.php"
SEARCH_ENDPOINT = "api_search.php"
SUBMISSIONS_ENDPOINT = "api_submissions.php"


@dataclass
class LoginResult:
    """Result of a login, with the rating mask already decoded."""

    sid: str
    user_id: str
    ratingsmask: str
    rating: Rating


@dataclass
class LogoutResult:
    sid: str
    logout: str


@dataclass
class RatingResult:
    sid: str


class API:
    """Typed wrapper over the raw endpoints."""

    def __init__(self, conn: Connection) -> None:
        self._conn = conn

    async def login(self, username: str, password: str) -> LoginResult:
        data = await self._conn.send(
            LOGIN_ENDPOINT, protocol.login_request(username, password)
        )
        mask = data.get("ratingsmask", "")
        return LoginResult(
            sid=data.get("sid", ""),
            user_id=str(data.get("user_id", "")),
            ratingsmask=mask,
            rating=Rating.from_mask(mask),
        )

    async def logout(self, sid: str) -> LogoutResult:
        data = await self._conn.send(LOGOUT_ENDPOINT, protocol.logout_request(sid))
        return LogoutResult(sid=data.get("sid", sid), logout=data.get("logout", ""))

    async def rating(self, sid: str, rating: Rating) -> RatingResult:
        params = protocol.rating_request(
            sid,
            nudity=rating.nudity,
            violence=rating.violence,
            sexual_themes=rating.sexual_themes,
            strong_violence=rating.strong_violence,
        )
        data = await self._conn.send(RATING_ENDPOINT, params)
        return RatingResult(sid=data.get("sid", sid))

    async def search(self, sid: str, **params: Any) -> SearchResult:
        """Run a fresh search. Keyword arguments are those of
        :func:`protocol.search_request`."""
        data = await self._conn.send(
            SEARCH_ENDPOINT, protocol.search_request(sid, **params)
        )
        return parse_search_result(data)

    async def search_rid(self, sid: str, rid: str, **params: Any) -> SearchResult:
        """Fetch a page of an existing result set."""
        data = await self._conn.send(
            SEARCH_ENDPOINT, protocol.search_rid_request(sid, rid, **params)
        )
        return parse_search_result(data)

    async def submissions(
        self,
        sid: str,
        submission_ids: str | int | Sequence[str | int],
        **flags: bool | None,
    ) -> SubmissionsResult:
        """Fetch full records for one or more submissions."""
        data = await self._conn.send(
            SUBMISSIONS_ENDPOINT,
            protocol.submissions_request(sid, submission_ids, **flags),
        )
        return parse_submissions_result(data)
