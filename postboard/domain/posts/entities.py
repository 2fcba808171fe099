# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class Post:
    """Read-only view of a post as held by the post store."""

    id: str
    author: str
    content: str
    likes: tuple[str, ...]
    created_at: datetime

    @property
    def like_count(self) -> int:
        return len(self.likes)
