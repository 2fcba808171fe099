# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from postboard.domain.posts.entities import Post
from postboard.domain.posts.repositories import PostStore


class ListPostsUseCase:
    def __init__(self, *, posts: PostStore) -> None:
        self._posts = posts

    def execute(self) -> Sequence[Post]:
        return self._posts.list_all()
