# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from postboard.application.services.request_authenticator import \
    RequestAuthenticator
from postboard.application.use_cases.posts.create_post import CreatePostUseCase
from postboard.application.use_cases.posts.delete_post import DeletePostUseCase
from postboard.application.use_cases.posts.like_post import LikePostUseCase
from postboard.application.use_cases.posts.list_posts import ListPostsUseCase
from postboard.interfaces.http.auth import auth_required, current_identity
from postboard.interfaces.http.dto.auth import MessageResponseDTO
from postboard.interfaces.http.dto.posts import (CreatePostRequestDTO,
                                                 LikeResponseDTO,
                                                 LikeResultDTO, PostDTO,
                                                 PostListResponseDTO,
                                                 PostResponseDTO)
from postboard.shared.errors.validation import raise_validation_error
from postboard.shared.logging import logger


class PostsController:
    def __init__(
        self,
        *,
        authenticator: RequestAuthenticator,
        create_use_case: CreatePostUseCase,
        like_use_case: LikePostUseCase,
        delete_use_case: DeletePostUseCase,
        list_use_case: ListPostsUseCase,
    ) -> None:
        self._authenticator = authenticator
        self._create_use_case = create_use_case
        self._like_use_case = like_use_case
        self._delete_use_case = delete_use_case
        self._list_use_case = list_use_case

    def create_post(self) -> tuple[Response, int]:
        try:
            dto = CreatePostRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        author = current_identity()
        post = self._create_use_case.execute(author, dto.content or "")

        payload = PostResponseDTO(data=PostDTO.from_entity(post))
        logger.info(f"posts.create: ok author={author} post_id={post.id}")
        return jsonify(payload.model_dump(mode="json", by_alias=True)), HTTPStatus.CREATED

    def like_post(self, post_id: str) -> tuple[Response, int]:
        liker = current_identity()
        likes = self._like_use_case.execute(post_id, liker)

        payload = LikeResponseDTO(data=LikeResultDTO(likes=likes))
        logger.info(f"posts.like: ok user={liker} post_id={post_id} likes={likes}")
        return jsonify(payload.model_dump(mode="json")), HTTPStatus.OK

    def delete_post(self, post_id: str) -> tuple[Response, int]:
        requester = current_identity()
        self._delete_use_case.execute(post_id, requester)

        payload = MessageResponseDTO(message="Post deleted successfully")
        logger.info(f"posts.delete: ok user={requester} post_id={post_id}")
        return jsonify(payload.model_dump()), HTTPStatus.OK

    def list_posts(self) -> tuple[Response, int]:
        posts = self._list_use_case.execute()

        payload = PostListResponseDTO(data=[PostDTO.from_entity(p) for p in posts])
        logger.info(f"posts.list: ok count={len(posts)}")
        return jsonify(payload.model_dump(mode="json", by_alias=True)), HTTPStatus.OK

    def as_blueprint(self) -> Blueprint:
        guard = auth_required(self._authenticator)
        bp = Blueprint("posts", __name__)
        bp.add_url_rule(
            "/posts", endpoint="list", view_func=self.list_posts, methods=["GET"]
        )
        bp.add_url_rule(
            "/posts", endpoint="create", view_func=guard(self.create_post), methods=["POST"]
        )
        bp.add_url_rule(
            "/posts/<post_id>",
            endpoint="like",
            view_func=guard(self.like_post),
            methods=["POST"],
        )
        bp.add_url_rule(
            "/posts/<post_id>",
            endpoint="delete",
            view_func=guard(self.delete_post),
            methods=["DELETE"],
        )
        return bp
