# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime
from http import HTTPStatus

from pydantic import BaseModel, Field

from postboard.domain.posts.entities import Post


class CreatePostRequestDTO(BaseModel):
    content: str | None = None


class PostDTO(BaseModel):
    id: str
    author: str
    content: str
    likes: list[str]
    created_at: datetime = Field(serialization_alias="createdAt")

    @classmethod
    def from_entity(cls, post: Post) -> "PostDTO":
        return cls(
            id=post.id,
            author=post.author,
            content=post.content,
            likes=list(post.likes),
            created_at=post.created_at,
        )


class PostResponseDTO(BaseModel):
    success: bool = True
    status: int = int(HTTPStatus.CREATED)
    data: PostDTO


class PostListResponseDTO(BaseModel):
    success: bool = True
    status: int = int(HTTPStatus.OK)
    data: list[PostDTO]


class LikeResultDTO(BaseModel):
    message: str = "Post liked"
    likes: int


class LikeResponseDTO(BaseModel):
    success: bool = True
    status: int = int(HTTPStatus.OK)
    data: LikeResultDTO
