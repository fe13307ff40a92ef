# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Example JSON endpoints showing auth checks, query parsing and body parsing."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from flask import Blueprint, jsonify, request

from launchpad.interfaces.http.session_auth import current_user, login_required
from launchpad.shared.errors.base import BadRequestError


def _user_payload() -> dict[str, Any] | None:
    user = current_user()
    if user is None:
        return None
    return {"id": user.id, "username": user.username}


class ExampleController:
    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("example", __name__, url_prefix="/api/example")
        bp.add_url_rule("", view_func=self.greet, methods=["GET"])
        bp.add_url_rule("", view_func=self.echo, methods=["POST"])
        return bp

    def greet(self):
        name = request.args.get("name") or "World"
        raw_count = request.args.get("count") or "1"
        try:
            count = int(raw_count)
        except ValueError:
            count = 0
        if count < 1:
            raise BadRequestError("Count must be a positive number")

        return jsonify(
            {
                "message": f"Hello, {name}!",
                "count": count,
                "user": _user_payload(),
                "timestamp": datetime.now(UTC).isoformat(),
            }
        )

    @login_required
    def echo(self):
        body = request.get_json(silent=True)
        if body is None:
            raise BadRequestError("Invalid JSON")

        return jsonify(
            {
                "message": "Data received",
                "received": body,
                "user": _user_payload(),
                "timestamp": datetime.now(UTC).isoformat(),
            }
        )
