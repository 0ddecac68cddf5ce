"""Serializable data models for git operations."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

import pygit2


@dataclass(frozen=True, slots=True)
class Signature:
    """Git author/committer/tagger signature."""

    name: str
    email: str
    time: datetime

    @classmethod
    def from_pygit2(cls, sig: pygit2.Signature) -> Signature:
        return cls(sig.name, sig.email, datetime.fromtimestamp(sig.time, tz=UTC))


@dataclass(frozen=True, slots=True)
class TagInfo:
    """Git tag information.

    ``target_sha`` is the commit the tag resolves to, for annotated and
    lightweight tags alike.
    """

    name: str
    target_sha: str
    is_annotated: bool
    message: str | None = None
    tagger: Signature | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "target_sha": self.target_sha,
            "is_annotated": self.is_annotated,
            "message": self.message,
            "tagger": self.tagger.name if self.tagger else None,
        }
