# -*- coding: utf-8 -*-
"""Request identity supplied by the upstream authentication gateway.

Token issuance and verification happen outside this service. The gateway
forwards the verified identity in ``X-User-Id`` and ``X-User-Role``; these
dependencies only enforce presence and privilege.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Annotated

from fastapi import Depends, Header, HTTPException, status


class Role(str, Enum):
    """User roles, ordered by privilege."""

    VIEWER = "viewer"
    EDITOR = "editor"
    ADMIN = "admin"


_RANK = {Role.VIEWER: 0, Role.EDITOR: 1, Role.ADMIN: 2}


@dataclass(frozen=True)
class CurrentUser:
    """The authenticated caller."""

    id: str
    role: Role

    def has_role(self, required: Role) -> bool:
        return _RANK[self.role] >= _RANK[required]


def get_current_user(
    x_user_id: Annotated[str | None, Header()] = None,
    x_user_role: Annotated[str | None, Header()] = None,
) -> CurrentUser:
    """Resolve the caller from gateway headers.

    Raises:
        HTTPException(401) if no user id was forwarded.
    """
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    try:
        role = Role((x_user_role or Role.VIEWER.value).lower())
    except ValueError:
        role = Role.VIEWER
    return CurrentUser(id=x_user_id, role=role)


def require_role(required: Role):
    """Return a dependency that rejects callers below ``required``."""

    def _enforce(user: Annotated[CurrentUser, Depends(get_current_user)]) -> CurrentUser:
        if not user.has_role(required):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"{required.value.capitalize()} access required",
            )
        return user

    return _enforce


require_editor = require_role(Role.EDITOR)
require_admin = require_role(Role.ADMIN)
