# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

from flask import g, redirect, request

from authportal.domain.users.repositories import SessionStore
from authportal.shared.logging import logger


def require_session(
    sessions: SessionStore,
    *,
    cookie_name: str = "sid",
    redirect_to: str = "/",
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Redirect page views to ``redirect_to`` unless the request carries a live session."""

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            session = sessions.get(request.cookies.get(cookie_name))
            if session is None:
                logger.debug(f"guard: no session on {request.method} {request.path}")
                return redirect(redirect_to)
            g.session = session
            return func(*args, **kwargs)

        return wrapper

    return decorator


__all__ = ["require_session"]
