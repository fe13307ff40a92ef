# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify

from launchpad.interfaces.http.session_auth import current_user, login_required
from launchpad.shared.config import AppConfig
from launchpad.shared.utils.seo import build_seo_tags
from launchpad.shared.utils.sitemap import render_sitemap


class PagesController:
    def __init__(self, *, config: AppConfig) -> None:
        self._config = config

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("pages", __name__)
        bp.add_url_rule("/sitemap.xml", view_func=self.sitemap, methods=["GET"])
        bp.add_url_rule("/api/layout", view_func=self.layout, methods=["GET"])
        bp.add_url_rule("/api/dashboard", view_func=self.dashboard, methods=["GET"])
        return bp

    def sitemap(self) -> Response:
        return Response(
            render_sitemap(self._config.site_url),
            content_type="application/xml; charset=utf-8",
        )

    def layout(self):
        user = current_user()
        seo = build_seo_tags(site_url=self._config.site_url, site_name=self._config.site_name)
        return jsonify(
            {
                "user": {"id": user.id, "username": user.username} if user else None,
                "seo": seo.to_dict(),
            }
        )

    @login_required
    def dashboard(self):
        user = current_user()
        assert user is not None
        return jsonify({"user": {"id": user.id, "username": user.username}})
