# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify

from postboard.domain.posts.repositories import PostStore
from postboard.domain.users.repositories import CredentialStore


class MiscController:
    def __init__(self, *, users: CredentialStore, posts: PostStore) -> None:
        self._users = users
        self._posts = posts

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self):
        status: dict[str, object] = {
            "success": True,
            "status": 200,
            "ok": True,
            "users": self._users.count(),
            "posts": self._posts.count(),
        }
        return jsonify(status)
