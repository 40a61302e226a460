# Copyright 2026 Inkbunny Client Contributors
# SPDX-License-Identifier: Apache-2.0
"""Search results and result-set pagination."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from .submission import Submission, parse_submission

if TYPE_CHECKING:
    from .helper import Helper

# Search parameters that shape a page and are accepted by a RID-bound search.
PAGING_FIELDS = (
    "submission_ids_only",
    "submissions_per_page",
    "keywords_list",
    "no_submissions",
)


@dataclass(frozen=True)
class PageCursor:
    """Everything needed to fetch another page of a search.

    ``params`` are the keyword arguments of the initiating search, ``rid``
    the result-set id it returned and ``page`` the page that was received.
    """

    params: dict[str, Any]
    rid: str | None
    page: int | None

    def step(self, delta: int) -> PageCursor | None:
        """Return the cursor ``delta`` pages away, or None if there is none."""
        if self.page is None:
            return None
        target = self.page + delta
        if target < 1:
            return None
        return replace(self, page=target)

    def rid_params(self) -> dict[str, Any]:
        """Keyword arguments for a search bound to this cursor's result set."""
        params = {k: self.params[k] for k in PAGING_FIELDS if k in self.params}
        params["page"] = self.page
        return params

    def search_params(self) -> dict[str, Any]:
        """Keyword arguments for a fresh search landing on this cursor's page."""
        params = dict(self.params)
        params.pop("rid", None)
        params["page"] = self.page
        params["get_rid"] = True
        return params


@dataclass
class SearchResult:
    """One page of search results.

    Results produced by a :class:`~inkbunny_client.helper.Helper` can move
    to adjacent pages with :meth:`next_page` and :meth:`previous_page`.
    """

    sid: str
    results_count_all: int
    results_count_thispage: int
    pages_count: int
    page: int | None
    user_location: str = ""
    rid: str | None = None
    rid_ttl: str | None = None
    search_params: list[dict[str, Any]] = field(default_factory=list)
    submissions: list[Submission] = field(default_factory=list)
    cursor: PageCursor | None = field(default=None, repr=False, compare=False)
    helper: Helper | None = field(default=None, repr=False, compare=False)

    async def next_page(self) -> SearchResult | None:
        """Fetch the following page, or None if this page has no number."""
        return await self._turn(1)

    async def previous_page(self) -> SearchResult | None:
        """Fetch the preceding page, or None when already on the first page."""
        return await self._turn(-1)

    async def _turn(self, delta: int) -> SearchResult | None:
        if self.helper is None or self.cursor is None:
            return None
        cursor = self.cursor.step(delta)
        if cursor is None:
            return None
        return await self.helper.turn_page(cursor)


def _optional_int(value: Any) -> int | None:
    if value is None or value == "":
        return None
    return int(value)


def parse_search_result(data: dict[str, Any]) -> SearchResult:
    """Parse a search response."""
    return SearchResult(
        sid=data.get("sid", ""),
        results_count_all=int(data.get("results_count_all", 0)),
        results_count_thispage=int(data.get("results_count_thispage", 0)),
        pages_count=int(data.get("pages_count", 0)),
        page=_optional_int(data.get("page")),
        user_location=data.get("user_location", ""),
        rid=data.get("rid") or None,
        rid_ttl=data.get("rid_ttl"),
        search_params=data.get("search_params") or [],
        submissions=[parse_submission(s) for s in data.get("submissions") or []],
    )
