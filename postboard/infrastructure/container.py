# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from postboard.application.services.request_authenticator import \
    RequestAuthenticator
from postboard.application.services.session_tokens import \
    JwtSessionTokenService
from postboard.application.use_cases.posts.create_post import CreatePostUseCase
from postboard.application.use_cases.posts.delete_post import DeletePostUseCase
from postboard.application.use_cases.posts.like_post import LikePostUseCase
from postboard.application.use_cases.posts.list_posts import ListPostsUseCase
from postboard.application.use_cases.users.login_user import LoginUserUseCase
from postboard.application.use_cases.users.register_user import \
    RegisterUserUseCase
from postboard.infrastructure.repositories.posts.in_memory_post_store import \
    InMemoryPostStore
from postboard.infrastructure.repositories.users.in_memory_credential_store import \
    InMemoryCredentialStore
from postboard.interfaces.http.controllers.auth_controller import AuthController
from postboard.interfaces.http.controllers.misc_controller import MiscController
from postboard.interfaces.http.controllers.posts_controller import \
    PostsController
from postboard.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self.config = config or load_config()

    # Stores

    @cached_property
    def credential_store(self) -> InMemoryCredentialStore:
        return InMemoryCredentialStore()

    @cached_property
    def post_store(self) -> InMemoryPostStore:
        return InMemoryPostStore()

    # Authentication

    @cached_property
    def session_tokens(self) -> JwtSessionTokenService:
        return JwtSessionTokenService(self.config.secret_key)

    @cached_property
    def request_authenticator(self) -> RequestAuthenticator:
        return RequestAuthenticator(tokens=self.session_tokens)

    # Use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(users=self.credential_store)

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(users=self.credential_store, tokens=self.session_tokens)

    @cached_property
    def create_post_use_case(self) -> CreatePostUseCase:
        return CreatePostUseCase(posts=self.post_store)

    @cached_property
    def like_post_use_case(self) -> LikePostUseCase:
        return LikePostUseCase(posts=self.post_store)

    @cached_property
    def delete_post_use_case(self) -> DeletePostUseCase:
        return DeletePostUseCase(posts=self.post_store)

    @cached_property
    def list_posts_use_case(self) -> ListPostsUseCase:
        return ListPostsUseCase(posts=self.post_store)

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
        )

    @cached_property
    def posts_controller(self) -> PostsController:
        return PostsController(
            authenticator=self.request_authenticator,
            create_use_case=self.create_post_use_case,
            like_use_case=self.like_post_use_case,
            delete_use_case=self.delete_post_use_case,
            list_use_case=self.list_posts_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(users=self.credential_store, posts=self.post_store)
