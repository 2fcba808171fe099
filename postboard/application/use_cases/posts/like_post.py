# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from postboard.domain.posts.repositories import PostStore


class LikePostUseCase:
    """Record ``liker`` against a post; a second like by the same user is rejected."""

    def __init__(self, *, posts: PostStore) -> None:
        self._posts = posts

    def execute(self, post_id: str, liker: str) -> int:
        return self._posts.like(post_id, liker)
