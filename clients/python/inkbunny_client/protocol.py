# Copyright 2026 Inkbunny Client Contributors
# SPDX-License-Identifier: Apache-2.0
"""Request builders for the Inkbunny HTTP API.

Every builder returns an insertion-ordered dict whose keys are the exact
remote parameter names. ``None`` means "not set" and is dropped, so it
never reaches the query string.
"""

from __future__ import annotations

from typing import Any, Literal, Sequence

OrAnd = Literal["or", "and"]
Sales = Literal["forsale", "digital", "print"]
OrderType = Literal[
    "create_datetime",
    "last_file_update_datetime",
    "unread_datetime",
    "unread_datetime_reverse",
    "views",
    "total_print_sales",
    "total_digital_sales",
    "total_sales",
    "username",
    "fav_datetime",
    "fav_stars",
    "pool_order",
]


def yes_no(value: bool | None) -> str | None:
    """Map a Python flag onto the API's ``yes``/``no`` vocabulary."""
    if value is None:
        return None
    return "yes" if value else "no"


def _compact(params: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in params.items() if v is not None}


def encode_query(params: dict[str, Any]) -> str:
    """Join ``key=value`` pairs in dict order, skipping unset values.

    Values are not percent-encoded; ``&`` or ``=`` inside a value will
    corrupt the query.
    """
    return "&".join(f"{k}={v}" for k, v in params.items() if v is not None)


def login_request(username: str, password: str) -> dict[str, Any]:
    """Build a login request."""
    return {"username": username, "password": password}


def logout_request(sid: str) -> dict[str, Any]:
    """Build a logout request."""
    return {"sid": sid}


def rating_request(
    sid: str,
    *,
    nudity: bool | None = None,
    violence: bool | None = None,
    sexual_themes: bool | None = None,
    strong_violence: bool | None = None,
) -> dict[str, Any]:
    """Build a content rating update request."""
    return _compact(
        {
            "sid": sid,
            "tag[2]": yes_no(nudity),
            "tag[3]": yes_no(violence),
            "tag[4]": yes_no(sexual_themes),
            "tag[5]": yes_no(strong_violence),
        }
    )


def search_rid_request(
    sid: str,
    rid: str | None = None,
    *,
    submission_ids_only: bool | None = None,
    submissions_per_page: int | None = None,
    page: int | None = None,
    keywords_list: bool | None = None,
    no_submissions: bool | None = None,
    get_rid: bool | None = None,
) -> dict[str, Any]:
    """Build a search request bound to an existing result-set id."""
    return _compact(
        {
            "sid": sid,
            "rid": rid,
            "submission_ids_only": yes_no(submission_ids_only),
            "submissions_per_page": submissions_per_page,
            "page": page,
            "keywords_list": yes_no(keywords_list),
            "no_submissions": yes_no(no_submissions),
            "get_rid": yes_no(get_rid),
        }
    )


def search_request(
    sid: str,
    *,
    rid: str | None = None,
    submission_ids_only: bool | None = None,
    submissions_per_page: int | None = None,
    page: int | None = None,
    keywords_list: bool | None = None,
    no_submissions: bool | None = None,
    get_rid: bool | None = None,
    field_join_type: OrAnd | None = None,
    text: str | None = None,
    string_join_type: OrAnd | None = None,
    keywords: bool | None = None,
    title: bool | None = None,
    description: bool | None = None,
    md5: bool | None = None,
    keyword_id: str | None = None,
    username: str | None = None,
    user_id: str | None = None,
    favs_user_id: str | None = None,
    unread_submissions: bool | None = None,
    type: str | None = None,
    sales: Sales | None = None,
    pool_id: str | None = None,
    orderby: OrderType | None = None,
    dayslimit: int | None = None,
    random: bool | None = None,
    scraps: bool | None = None,
    count_limit: int | None = None,
) -> dict[str, Any]:
    """Build a fresh search request."""
    params = search_rid_request(
        sid,
        rid,
        submission_ids_only=submission_ids_only,
        submissions_per_page=submissions_per_page,
        page=page,
        keywords_list=keywords_list,
        no_submissions=no_submissions,
        get_rid=get_rid,
    )
    params.update(
        _compact(
            {
                "field_join_type": field_join_type,
                "text": text,
                "string_join_type": string_join_type,
                "keywords": yes_no(keywords),
                "title": yes_no(title),
                "description": yes_no(description),
                "md5": yes_no(md5),
                "keyword_id": keyword_id,
                "username": username,
                "user_id": user_id,
                "favs_user_id": favs_user_id,
                "unread_submissions": yes_no(unread_submissions),
                "type": type,
                "sales": sales,
                "pool_id": pool_id,
                "orderby": orderby,
                "dayslimit": dayslimit,
                "random": yes_no(random),
                "scraps": yes_no(scraps),
                "count_limit": count_limit,
            }
        )
    )
    return params


def submissions_request(
    sid: str,
    submission_ids: str | int | Sequence[str | int],
    *,
    show_description: bool | None = None,
    show_description_bbcode_parsed: bool | None = None,
    show_writing: bool | None = None,
    show_pools: bool | None = None,
) -> dict[str, Any]:
    """Build a submission details request.

    A single id or a sequence of ids is accepted; sequences are comma-joined.
    """
    if isinstance(submission_ids, (str, int)):
        ids = str(submission_ids)
    else:
        ids = ",".join(str(i) for i in submission_ids)
    return _compact(
        {
            "sid": sid,
            "submission_ids": ids,
            "show_description": yes_no(show_description),
            "show_description_bbcode_parsed": yes_no(show_description_bbcode_parsed),
            "show_writing": yes_no(show_writing),
            "show_pools": yes_no(show_pools),
        }
    )
