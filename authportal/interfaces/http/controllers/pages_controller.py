# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pathlib import Path

from flask import Blueprint, Response, send_from_directory

from authportal.domain.users.repositories import SessionStore
from authportal.interfaces.http.guards import require_session
from authportal.shared.config import AppConfig

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"


class PagesController:
    def __init__(self, *, sessions: SessionStore, config: AppConfig) -> None:
        self._sessions = sessions
        self._config = config

    def login_page(self) -> Response:
        return send_from_directory(STATIC_DIR, "login.html")

    def signup_page(self) -> Response:
        return send_from_directory(STATIC_DIR, "signup.html")

    def dashboard_page(self) -> Response:
        return send_from_directory(STATIC_DIR, "dashboard.html")

    def as_blueprint(self) -> Blueprint:
        guard = require_session(self._sessions, cookie_name=self._config.session.cookie_name)
        bp = Blueprint("pages", __name__)
        bp.add_url_rule("/", view_func=self.login_page, methods=["GET"])
        bp.add_url_rule("/signup", view_func=self.signup_page, methods=["GET"])
        bp.add_url_rule("/dashboard", view_func=guard(self.dashboard_page), methods=["GET"])
        return bp
