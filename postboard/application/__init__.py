# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.posts.create_post import CreatePostUseCase
from .use_cases.posts.delete_post import DeletePostUseCase
from .use_cases.posts.like_post import LikePostUseCase
from .use_cases.posts.list_posts import ListPostsUseCase
from .use_cases.users.login_user import LoginUserUseCase
from .use_cases.users.register_user import RegisterUserUseCase

__all__ = [
    "CreatePostUseCase",
    "DeletePostUseCase",
    "LikePostUseCase",
    "ListPostsUseCase",
    "LoginUserUseCase",
    "RegisterUserUseCase",
]
