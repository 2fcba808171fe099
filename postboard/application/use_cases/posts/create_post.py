# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from postboard.domain.posts.entities import Post
from postboard.domain.posts.repositories import PostStore


class CreatePostUseCase:
    def __init__(self, *, posts: PostStore) -> None:
        self._posts = posts

    def execute(self, author: str, content: str) -> Post:
        return self._posts.create(author, content)
