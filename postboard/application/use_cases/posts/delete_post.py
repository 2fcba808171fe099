# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from postboard.domain.posts.repositories import PostStore


class DeletePostUseCase:
    def __init__(self, *, posts: PostStore) -> None:
        self._posts = posts

    def execute(self, post_id: str, requester: str) -> None:
        self._posts.delete(post_id, requester)
