# Copyright 2026 Inkbunny Client Contributors
# SPDX-License-Identifier: Apache-2.0
"""Session state and content rating preferences."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import SessionError

GUEST_USERNAME = "guest"


@dataclass
class Rating:
    """Content classes a session is allowed to retrieve.

    The API reports ratings as a bit mask string such as ``"11100"``.
    Position 0 is general content and is always allowed; positions 1 to 4
    map to the fields below.
    """

    nudity: bool = False
    violence: bool = False
    sexual_themes: bool = False
    strong_violence: bool = False

    @classmethod
    def from_mask(cls, mask: str) -> Rating:
        mask = mask.ljust(5, "0")
        return cls(
            nudity=mask[1] == "1",
            violence=mask[2] == "1",
            sexual_themes=mask[3] == "1",
            strong_violence=mask[4] == "1",
        )

    def to_mask(self) -> str:
        flags = (self.nudity, self.violence, self.sexual_themes, self.strong_violence)
        return "1" + "".join("1" if f else "0" for f in flags)


@dataclass
class Session:
    """Mutable per-helper session state.

    Holds the session id, the credentials needed to renew it, and the last
    rating applied so it can be restored on a renewed guest session.
    """

    sid: str | None = None
    username: str = GUEST_USERNAME
    password: str = ""
    rating: Rating | None = None

    @property
    def is_active(self) -> bool:
        return self.sid is not None

    @property
    def is_guest(self) -> bool:
        return self.username == GUEST_USERNAME

    def require_sid(self) -> str:
        """Return the session id or raise :class:`SessionError`."""
        if self.sid is None:
            raise SessionError()
        return self.sid

    def clear(self) -> None:
        self.sid = None
        self.username = GUEST_USERNAME
        self.password = ""
        self.rating = None

    def __repr__(self) -> str:
        return (
            f"Session(sid={self.sid!r}, username={self.username!r}, "
            f"rating={self.rating!r})"
        )
