# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from postboard.shared.errors.base import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)


class ContentRequiredError(ValidationError):
    def __init__(self) -> None:
        super().__init__(code="content_required", message="Content is required!")


class PostNotFoundError(NotFoundError):
    def __init__(self, post_id: str) -> None:
        super().__init__(
            code="post_not_found",
            message="Post not found!",
            context={"post_id": post_id},
        )


class PostAlreadyLikedError(ConflictError):
    def __init__(self, post_id: str) -> None:
        super().__init__(
            code="post_already_liked",
            message="Post already liked!",
            status=HTTPStatus.BAD_REQUEST,
            context={"post_id": post_id},
        )


class NotPostOwnerError(ForbiddenError):
    def __init__(self, post_id: str) -> None:
        super().__init__(
            code="not_post_owner",
            message="Unauthorized to delete this post",
            context={"post_id": post_id},
        )
