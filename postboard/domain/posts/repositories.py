# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Post


class PostStore(Protocol):
    def create(self, author: str, content: str) -> Post: ...
    def like(self, post_id: str, liker: str) -> int: ...
    def delete(self, post_id: str, requester: str) -> None: ...
    def list_all(self) -> Sequence[Post]: ...
    def count(self) -> int: ...
