# Copyright 2026 Inkbunny Client Contributors
# SPDX-License-Identifier: Apache-2.0
"""Submission records returned by search and detail requests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Submission:
    """A submission as listed in search results."""

    submission_id: str
    title: str = ""
    username: str = ""
    user_id: str = ""
    rating_id: str = ""
    rating_name: str = ""
    submission_type_id: str = ""
    type_name: str = ""
    create_datetime: str = ""
    file_name: str | None = None
    file_url_full: str | None = None
    thumbnail_url_medium: str | None = None
    mimetype: str | None = None


@dataclass
class Keyword:
    """A keyword attached to a submission."""

    keyword_id: str
    keyword_name: str


@dataclass
class SubmissionFile:
    """A single file of a submission."""

    file_id: str
    file_name: str
    file_url_full: str | None = None
    mimetype: str | None = None


@dataclass
class Pool:
    """A pool a submission belongs to."""

    pool_id: str
    name: str
    count: int = 0


@dataclass
class DetailedSubmission(Submission):
    """A submission with its full record, as returned by the details call."""

    keywords: list[Keyword] = field(default_factory=list)
    files: list[SubmissionFile] = field(default_factory=list)
    pools: list[Pool] = field(default_factory=list)
    description: str | None = None
    description_bbcode_parsed: str | None = None
    writing: str | None = None
    favorites_count: int = 0
    views: int = 0


@dataclass
class SubmissionsResult:
    """Response of a submission details request."""

    sid: str
    results_count: int
    submissions: list[DetailedSubmission] = field(default_factory=list)


def _submission_fields(data: dict[str, Any]) -> dict[str, Any]:
    return {
        "submission_id": str(data.get("submission_id", "")),
        "title": data.get("title", ""),
        "username": data.get("username", ""),
        "user_id": str(data.get("user_id", "")),
        "rating_id": str(data.get("rating_id", "")),
        "rating_name": data.get("rating_name", ""),
        "submission_type_id": str(data.get("submission_type_id", "")),
        "type_name": data.get("type_name", ""),
        "create_datetime": data.get("create_datetime", ""),
        "file_name": data.get("file_name"),
        "file_url_full": data.get("file_url_full"),
        "thumbnail_url_medium": data.get("thumbnail_url_medium"),
        "mimetype": data.get("mimetype"),
    }


def parse_submission(data: dict[str, Any]) -> Submission:
    """Parse one entry of a search result's ``submissions`` list."""
    return Submission(**_submission_fields(data))


def parse_detailed_submission(data: dict[str, Any]) -> DetailedSubmission:
    """Parse one entry of a details response."""
    return DetailedSubmission(
        **_submission_fields(data),
        keywords=[
            Keyword(
                keyword_id=str(k.get("keyword_id", "")),
                keyword_name=k.get("keyword_name", ""),
            )
            for k in data.get("keywords") or []
        ],
        files=[
            SubmissionFile(
                file_id=str(f.get("file_id", "")),
                file_name=f.get("file_name", ""),
                file_url_full=f.get("file_url_full"),
                mimetype=f.get("mimetype"),
            )
            for f in data.get("files") or []
        ],
        pools=[
            Pool(
                pool_id=str(p.get("pool_id", "")),
                name=p.get("name", ""),
                count=int(p.get("count", 0)),
            )
            for p in data.get("pools") or []
        ],
        description=data.get("description"),
        description_bbcode_parsed=data.get("description_bbcode_parsed"),
        writing=data.get("writing"),
        favorites_count=int(data.get("favorites_count", 0)),
        views=int(data.get("views", 0)),
    )


def parse_submissions_result(data: dict[str, Any]) -> SubmissionsResult:
    """Parse a details response."""
    return SubmissionsResult(
        sid=data.get("sid", ""),
        results_count=int(data.get("results_count", 0)),
        submissions=[
            parse_detailed_submission(s) for s in data.get("submissions") or []
        ],
    )
