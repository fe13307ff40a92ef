# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import importlib
from typing import Any, Protocol, cast

from flask import Flask

from launchpad.infrastructure.container import Container
from launchpad.infrastructure.db import init_db
from launchpad.interfaces.http.session_auth import configure_session_auth
from launchpad.shared.errors import register_error_handler
from launchpad.shared.logging import logger, setup_logging
from launchpad.shared.middleware.request_logger import configure_request_logging


class _CORSCallable(Protocol):
    def __call__(self, app: Flask, **kwargs: Any) -> Any: ...


_flask_cors = importlib.import_module("flask_cors")
CORS = cast(_CORSCallable, _flask_cors.CORS)


def create_app(container: Container | None = None) -> Flask:
    container = container or Container()
    config = container.config

    setup_logging(debug_mode=config.debug_logging)
    init_db(container.engine)

    app = Flask(__name__)
    app.extensions["launchpad.container"] = container
    register_error_handler(app)
    configure_request_logging(app)
    configure_session_auth(app, container.session_manager)

    cors_kwargs: dict[str, object] = {
        "resources": {r"/api/*": {"origins": config.security.allowed_origins}}
    }
    if any(o != "*" for o in config.security.allowed_origins):
        cors_kwargs["supports_credentials"] = True
    CORS(app, **cors_kwargs)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.example_controller.as_blueprint())
    app.register_blueprint(container.pages_controller.as_blueprint())

    hsts = config.hsts_enabled()

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Referrer-Policy", "strict-origin-when-cross-origin")
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault(
            "Permissions-Policy", "geolocation=(), microphone=(), camera=()"
        )
        resp.headers.setdefault("Cross-Origin-Opener-Policy", "same-origin")
        resp.headers.setdefault("Cross-Origin-Resource-Policy", "same-origin")

        if hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )

        return resp

    logger.info(f"Flask app initialized env={config.app_env}")
    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=5000, debug=True)
