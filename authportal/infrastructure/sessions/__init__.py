# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .in_memory_session_store import InMemorySessionStore

__all__ = ["InMemorySessionStore"]
