# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from authportal.application.use_cases.users.check_auth import CheckAuthUseCase
from authportal.application.use_cases.users.login_user import LoginUserUseCase
from authportal.application.use_cases.users.logout_user import LogoutUserUseCase
from authportal.application.use_cases.users.register_user import RegisterUserUseCase
from authportal.interfaces.http.dto.auth import (
    LoginRequestDTO,
    LoginSuccessDTO,
    LogoutSuccessDTO,
    SignupRequestDTO,
    SignupSuccessDTO,
)
from authportal.shared.config import AppConfig
from authportal.shared.errors.validation import raise_validation_error
from authportal.shared.logging import logger


def _request_payload() -> dict[str, Any]:
    payload = request.get_json(silent=True)
    if isinstance(payload, dict):
        return payload
    return request.form.to_dict()


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        logout_use_case: LogoutUserUseCase,
        check_auth_use_case: CheckAuthUseCase,
        config: AppConfig,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._logout_use_case = logout_use_case
        self._check_auth_use_case = check_auth_use_case
        self._config = config

    @property
    def _cookie_name(self) -> str:
        return self._config.session.cookie_name

    def _session_token(self) -> str | None:
        return request.cookies.get(self._cookie_name) or None

    def signup(self) -> tuple[Response, int]:
        try:
            dto = SignupRequestDTO.model_validate(_request_payload())
        except ValidationError as exc:
            raise_validation_error(exc)

        user = self._register_use_case.execute(dto.username, dto.email, dto.password)

        payload = SignupSuccessDTO(user_id=user.id).model_dump(by_alias=True)
        return jsonify(payload), 201

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(_request_payload())
        except ValidationError as exc:
            raise_validation_error(exc)

        session = self._login_use_case.execute(
            dto.email, dto.password, previous_token=self._session_token()
        )

        response = jsonify(LoginSuccessDTO(username=session.username).model_dump())
        response.set_cookie(
            self._cookie_name,
            session.token,
            httponly=True,
            samesite=self._config.security.cookie_samesite,
            secure=self._config.security.cookie_secure,
            max_age=self._config.session.ttl_seconds,
        )
        return response, 200

    def check_auth(self) -> tuple[Response, int]:
        status = self._check_auth_use_case.execute(self._session_token())
        return jsonify(status.to_dict()), 200

    def logout(self) -> tuple[Response, int]:
        self._logout_use_case.execute(self._session_token())

        response = jsonify(LogoutSuccessDTO().model_dump())
        response.delete_cookie(
            self._cookie_name,
            httponly=True,
            samesite=self._config.security.cookie_samesite,
            secure=self._config.security.cookie_secure,
        )
        logger.info("auth.logout: ok")
        return response, 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api")
        bp.add_url_rule("/signup", view_func=self.signup, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/check-auth", view_func=self.check_auth, methods=["GET"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["GET"])
        return bp
