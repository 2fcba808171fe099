# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import importlib
from typing import Any, Protocol, cast

from flask import Flask

from postboard.infrastructure.container import Container
from postboard.shared.config import load_config
from postboard.shared.logging import logger, setup_logging
from postboard.shared.middleware.error_handler import configure_error_handling
from postboard.shared.middleware.request_logger import configure_request_logging


class _CORSCallable(Protocol):
    def __call__(self, app: Flask, **kwargs: Any) -> Any: ...


_flask_cors = importlib.import_module("flask_cors")
CORS = cast(_CORSCallable, _flask_cors.CORS)


def create_app(container: Container | None = None) -> Flask:
    container = container or Container()
    config = container.config
    setup_logging("DEBUG" if config.debug_logging else None)

    app = Flask(__name__)
    app.extensions["postboard.container"] = container
    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)

    cors_kwargs: dict[str, object] = {
        "resources": {r"/*": {"origins": config.security.allowed_origins}}
    }
    CORS(app, **cors_kwargs)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.posts_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cross-Origin-Resource-Policy", "same-origin")

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )

        return resp

    logger.info("Flask app initialized")
    return app


def main() -> None:
    config = load_config()
    app = create_app(Container(config))
    logger.info(f"Server started and listening on port {config.port}")
    app.run(host=config.host, port=config.port, threaded=True)


if __name__ == "__main__":
    main()
