# Copyright 2026 Inkbunny Client Contributors
# SPDX-License-Identifier: Apache-2.0
"""Shared fixtures: an in-memory stand-in for the Inkbunny API."""

from __future__ import annotations

import itertools
from typing import Any

import httpx
import pytest

from inkbunny_client import Helper

BASE_URL = "https://ib.test"

USERS = {"guest": "", "me": "secret"}


def _error(code: int, message: str) -> dict[str, Any]:
    return {"error_code": code, "error_message": message}


class FakeInkbunny:
    """Answers the endpoints the client uses, backed by plain dicts.

    ``calls`` records ``(endpoint, params)`` for every request received.
    ``queue_error`` makes the next request to an endpoint fail.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, str]]] = []
        self.sessions: dict[str, str] = {}
        self.ratings: dict[str, str] = {}
        self.result_sets: dict[str, list[str]] = {}
        self.queued: dict[str, list[dict[str, Any]]] = {}
        self._sids = itertools.count(1)
        self._rids = itertools.count(1)
        self.submissions: dict[str, dict[str, Any]] = {}
        for i in range(1, 13):
            self._add(str(100 + i), f"Fox {i}", ["fox", "red_fox" if i % 2 else "arctic_fox"])
        for i in range(13, 16):
            self._add(str(100 + i), f"Wolf {i}", ["wolf"])

    def _add(self, sid: str, title: str, keywords: list[str]) -> None:
        self.submissions[sid] = {
            "submission_id": sid,
            "title": title,
            "username": "artist",
            "user_id": "7",
            "rating_id": "0",
            "rating_name": "General",
            "submission_type_id": "1",
            "type_name": "Picture/Pinup",
            "keywords": [
                {"keyword_id": str(n), "keyword_name": k} for n, k in enumerate(keywords)
            ],
        }

    # -- test controls ---------------------------------------------------

    def queue_error(self, endpoint: str, code: int, message: str = "queued") -> None:
        self.queued.setdefault(endpoint, []).append(_error(code, message))

    def expire_sessions(self) -> None:
        self.sessions.clear()

    def expire_result_sets(self) -> None:
        self.result_sets.clear()

    def endpoints(self) -> list[str]:
        return [endpoint for endpoint, _ in self.calls]

    # -- transport -------------------------------------------------------

    def handle(self, request: httpx.Request) -> httpx.Response:
        endpoint = request.url.path.lstrip("/")
        params = dict(request.url.params)
        self.calls.append((endpoint, params))
        assert request.method == "POST"
        assert params.pop("output_mode") == "json"

        queued = self.queued.get(endpoint)
        if queued:
            return httpx.Response(200, json=queued.pop(0))

        route = {
            "api_login.php": self._login,
            "api_logout.php": self._logout,
            "api_userrating.php": self._rating,
            "api_search.php": self._search,
            "api_submissions.php": self._details,
        }.get(endpoint)
        if route is None:
            return httpx.Response(404, text="not found")
        return httpx.Response(200, json=route(params))

    # -- endpoints -------------------------------------------------------

    def _check_sid(self, params: dict[str, str]) -> dict[str, Any] | None:
        if params.get("sid") not in self.sessions:
            return _error(2, "Invalid Session ID sent as variable 'sid'.")
        return None

    def _login(self, params: dict[str, str]) -> dict[str, Any]:
        username = params.get("username")
        if username not in USERS or USERS[username] != params.get("password", ""):
            return _error(0, "Invalid username or password.")
        sid = f"sid-{next(self._sids)}"
        self.sessions[sid] = username
        mask = "1" if username == "guest" else "11111"
        return {"sid": sid, "user_id": "1" if username == "guest" else "42", "ratingsmask": mask}

    def _logout(self, params: dict[str, str]) -> dict[str, Any]:
        error = self._check_sid(params)
        if error:
            return error
        del self.sessions[params["sid"]]
        return {"sid": params["sid"], "logout": "success"}

    def _rating(self, params: dict[str, str]) -> dict[str, Any]:
        error = self._check_sid(params)
        if error:
            return error
        mask = "1" + "".join(
            "1" if params.get(f"tag[{n}]") == "yes" else "0" for n in range(2, 6)
        )
        self.ratings[params["sid"]] = mask
        return {"sid": params["sid"]}

    def _search(self, params: dict[str, str]) -> dict[str, Any]:
        error = self._check_sid(params)
        if error:
            return error

        rid = params.get("rid")
        if rid is not None:
            if rid not in self.result_sets:
                return _error(36, "Results ID (rid) has expired.")
            ids = self.result_sets[rid]
        else:
            tags = params.get("text", "").split()
            ids = [
                i
                for i, s in self.submissions.items()
                if all(
                    any(k["keyword_name"] == t for k in s["keywords"]) for t in tags
                )
            ]
            if params.get("get_rid") == "yes":
                rid = f"rid-{next(self._rids)}"
                self.result_sets[rid] = ids

        per_page = int(params.get("submissions_per_page", 30))
        page = int(params.get("page", 1))
        chunk = ids[(page - 1) * per_page : page * per_page]
        response: dict[str, Any] = {
            "sid": params["sid"],
            "user_location": "/",
            "results_count_all": len(ids),
            "results_count_thispage": len(chunk),
            "pages_count": max(1, -(-len(ids) // per_page)),
            "page": page,
            "search_params": [
                {"param_name": k, "param_value": v} for k, v in params.items()
            ],
            "submissions": [self._summary(i) for i in chunk],
        }
        if rid is not None:
            response["rid"] = rid
            response["rid_ttl"] = "15 minutes"
        return response

    def _summary(self, submission_id: str) -> dict[str, Any]:
        return {k: v for k, v in self.submissions[submission_id].items() if k != "keywords"}

    def _details(self, params: dict[str, str]) -> dict[str, Any]:
        error = self._check_sid(params)
        if error:
            return error
        found = []
        for submission_id in params["submission_ids"].split(","):
            if submission_id not in self.submissions:
                continue
            record = dict(self.submissions[submission_id])
            if params.get("show_description") == "yes":
                record["description"] = f"About {record['title']}"
            if params.get("show_description_bbcode_parsed") == "yes":
                record["description_bbcode_parsed"] = f"<p>About {record['title']}</p>"
            if params.get("show_pools") == "yes":
                record["pools"] = [{"pool_id": "9", "name": "Foxes", "count": 12}]
            found.append(record)
        return {"sid": params["sid"], "results_count": len(found), "submissions": found}


@pytest.fixture
def server() -> FakeInkbunny:
    return FakeInkbunny()


@pytest.fixture
def http_client(server: FakeInkbunny) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(server.handle))


@pytest.fixture
def helper(http_client: httpx.AsyncClient) -> Helper:
    return Helper(base_url=BASE_URL, client=http_client)
