# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from threading import Lock

from postboard.domain.posts.entities import Post
from postboard.domain.posts.exceptions import (
    ContentRequiredError,
    NotPostOwnerError,
    PostAlreadyLikedError,
    PostNotFoundError,
)
from postboard.domain.posts.repositories import PostStore


def new_post_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(slots=True)
class _PostRecord:
    id: str
    author: str
    content: str
    created_at: datetime
    likes: list[str] = field(default_factory=list)

    def snapshot(self) -> Post:
        return Post(
            id=self.id,
            author=self.author,
            content=self.content,
            likes=tuple(self.likes),
            created_at=self.created_at,
        )


class InMemoryPostStore(PostStore):
    """Posts in creation order.

    Every check-then-mutate sequence runs under one lock, so a liker is
    recorded at most once and ownership is checked against the post that is
    actually removed. Callers only ever see frozen ``Post`` snapshots.
    """

    def __init__(
        self,
        *,
        id_factory: Callable[[], str] = new_post_id,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._posts: dict[str, _PostRecord] = {}
        self._lock = Lock()
        self._id_factory = id_factory
        self._clock = clock

    def create(self, author: str, content: str) -> Post:
        if not isinstance(content, str) or not content:
            raise ContentRequiredError()

        record = _PostRecord(
            id=self._id_factory(),
            author=author,
            content=content,
            created_at=self._clock(),
        )
        with self._lock:
            self._posts[record.id] = record
            return record.snapshot()

    def like(self, post_id: str, liker: str) -> int:
        with self._lock:
            record = self._posts.get(post_id)
            if record is None:
                raise PostNotFoundError(post_id)
            if liker in record.likes:
                raise PostAlreadyLikedError(post_id)
            record.likes.append(liker)
            return len(record.likes)

    def delete(self, post_id: str, requester: str) -> None:
        with self._lock:
            record = self._posts.get(post_id)
            if record is None:
                raise PostNotFoundError(post_id)
            if record.author != requester:
                raise NotPostOwnerError(post_id)
            del self._posts[post_id]

    def list_all(self) -> list[Post]:
        with self._lock:
            return [record.snapshot() for record in self._posts.values()]

    def count(self) -> int:
        with self._lock:
            return len(self._posts)


__all__ = ["InMemoryPostStore", "new_post_id", "utcnow"]
