# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .posts.entities import Post
from .users.entities import SessionClaims, User

__all__ = [
    "Post",
    "SessionClaims",
    "User",
]
