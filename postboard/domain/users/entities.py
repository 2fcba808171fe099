# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    username: str
    password: str


@dataclass(slots=True, frozen=True)
class SessionClaims:
    """Identity decoded from a verified session token."""

    username: str
    issued_at: datetime
    expires_at: datetime
