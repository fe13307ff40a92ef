# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify

from launchpad.infrastructure.health import HealthChecker


class MiscController:
    def __init__(self, *, health_checker: HealthChecker) -> None:
        self._health_checker = health_checker

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self):
        report = self._health_checker.run()
        return jsonify(report.to_dict()), 200 if report.healthy else 503
