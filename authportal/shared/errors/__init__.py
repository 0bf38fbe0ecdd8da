# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .base import (
    AppError,
    DomainError,
    InfrastructureError,
    MissingFieldsError,
    SessionError,
    StoreError,
    ValidationError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "DomainError",
    "InfrastructureError",
    "MissingFieldsError",
    "SessionError",
    "StoreError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]
